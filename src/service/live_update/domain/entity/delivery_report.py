import attrs


@attrs.frozen
class DeliveryReport:
    delivered: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def attempted(self) -> int:
        return self.delivered + self.skipped + self.failed
