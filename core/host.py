"""
Host Environment Interfaces
What the store finder expects from the embedding UI (browser, desktop shell, ...)
"""

from typing import Any, Callable, Optional, Protocol


PERMISSION_GRANTED = "granted"
PERMISSION_DENIED = "denied"
PERMISSION_DEFAULT = "default"


class GeolocationProvider(Protocol):
    """
    Callback-style location API.

    on_success receives a GeoPosition or a (latitude, longitude) pair;
    on_error receives whatever the host reports (exception or code).
    Callbacks may fire synchronously or later on the event loop.
    """

    def get_current_position(self, on_success: Callable[[Any], None],
                             on_error: Callable[[Any], None],
                             enable_high_accuracy: bool = True) -> None:
        ...


class NotificationCenter(Protocol):
    """Two-step notification API: permission, then notify."""

    permission: str

    async def request_permission(self) -> str:
        ...

    def notify(self, title: str, body: str, icon: Optional[str] = None) -> None:
        ...
