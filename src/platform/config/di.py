"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from typing import Any

from dependency_injector import containers, providers
from fastapi.requests import HTTPConnection

from src.platform.config.core_setting import Settings
from src.platform.metrics.live_update_metrics import metrics as live_update_metrics
from src.service.club_portal.driven_adapter.repo.in_memory_club_repo import InMemoryClubRepo
from src.service.club_portal.driven_adapter.repo.in_memory_event_repo import InMemoryEventRepo
from src.service.club_portal.driven_adapter.repo.in_memory_member_repo import InMemoryMemberRepo
from src.service.club_portal.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.club_portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.live_update.driven_adapter.codec.live_update_frame_codec import (
    LiveUpdateFrameCodec,
)
from src.service.live_update.driven_adapter.hub.broadcast_hub_impl import BroadcastHubImpl
from src.service.live_update.driven_adapter.store.in_memory_announcement_store import (
    SAMPLE_ANNOUNCEMENTS,
    InMemoryAnnouncementStore,
)


def _announcement_seed(seed_enabled: bool) -> tuple:
    return SAMPLE_ANNOUNCEMENTS if seed_enabled else ()


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Prometheus collectors register globally, so every container shares one instance
    metrics = providers.Object(live_update_metrics)

    # Live update: store and hub are the only shared mutable state, one per container
    frame_codec = providers.Singleton(LiveUpdateFrameCodec)
    announcement_store = providers.Singleton(
        InMemoryAnnouncementStore,
        seed=providers.Callable(
            _announcement_seed, seed_enabled=config_service.provided.LIVE_UPDATE_SEED_ENABLED
        ),
    )
    broadcast_hub = providers.Singleton(
        BroadcastHubImpl,
        frame_codec=frame_codec,
        metrics=metrics,
    )

    # Club portal repositories (in-memory stand-ins for the document database)
    club_repo = providers.Singleton(InMemoryClubRepo)
    event_repo = providers.Singleton(InMemoryEventRepo)
    member_repo = providers.Singleton(InMemoryMemberRepo)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)
    password_hasher = providers.Singleton(
        BcryptPasswordHasher, rounds=config_service.provided.BCRYPT_ROUNDS
    )


class _AppProvider:
    """
    FastAPI dependency resolving one provider from the serving app's container

    Must stay async (event loop, not threadpool): Singleton providers are not thread-safe.
    """

    def __init__(self, provider_name: str):
        self.provider_name = provider_name

    async def __call__(self, connection: HTTPConnection) -> Any:
        app_container: Container = connection.app.state.container
        return getattr(app_container, self.provider_name)()


class _AppProvide:
    """
    Marker for `Depends(AppProvide[Container.x])`

    Nothing is patched at module level: every request and WebSocket resolves
    from its own `app.state.container`.
    """

    def __getitem__(self, provider: providers.Provider) -> _AppProvider:
        for name, declared in Container.providers.items():
            if declared is provider:
                return _AppProvider(name)
        raise KeyError(f'{provider!r} is not declared on Container')


AppProvide = _AppProvide()
