import attrs


@attrs.frozen
class ClubIdentity:
    """
    The acting club, rebuilt from a verified token (no repo lookup)

    Shared by the club portal and the live update gateway: holding one means
    the authorization check already passed.
    """

    id: int
    name: str
    email: str
