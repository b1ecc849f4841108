"""
StoreFinder Orchestrator
Owns the app state and wires geolocation -> discovery -> publication,
plus the closing alerts toggle.
"""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional

from config import ALERT_CHECK_INTERVAL_SECONDS, get_local_now, get_logger
from errors import (
    LastCallError,
    GeolocationUnsupported,
    GeolocationDenied,
    NotificationDenied,
    TimeUnparseable,
)
from models import AppState, GeoPosition, Store, StoreStatus, Urgency
from utils import parse_clock_time, minutes_until
from core.alerts import ClosingAlertScheduler
from core.host import PERMISSION_DEFAULT, PERMISSION_GRANTED

logger = get_logger(__name__)


def store_sort_key(store: Store) -> int:
    """Open + high urgency first, other open stores next, closed last"""
    if store.status == StoreStatus.CLOSED:
        return 2
    if store.urgency == Urgency.HIGH:
        return 0
    return 1


def to_geo_position(coords) -> GeoPosition:
    if isinstance(coords, GeoPosition):
        return coords
    latitude, longitude = coords
    return GeoPosition(latitude=latitude, longitude=longitude)


class StoreFinder:
    """
    Single owner of the store finder state.

    Every refresh bumps a request epoch; a fix or discovery that completes
    under an older epoch is discarded, so `stores` never reflects a stale
    position.
    """

    def __init__(self, discovery_client, geolocation=None, notifications=None,
                 clock: Callable[[], datetime] = get_local_now,
                 alert_interval_seconds: float = ALERT_CHECK_INTERVAL_SECONDS):
        """
        Args:
            discovery_client: Object with async fetch_nearby_stores(position, now=)
            geolocation: GeolocationProvider, or None if the host has none
            notifications: NotificationCenter, or None if unsupported
            clock: Returns the current instant
            alert_interval_seconds: Seconds between closing checks
        """
        self.discovery_client = discovery_client
        self.geolocation = geolocation
        self.notifications = notifications
        self.clock = clock

        self.state = AppState()
        self.refresh_count = 0
        self._epoch = 0
        self._listeners: List[Callable[[AppState], None]] = []
        self._notification_hint_shown = False

        self.alerts = ClosingAlertScheduler(
            notifications,
            lambda: self.state.stores,
            interval_seconds=alert_interval_seconds,
            clock=clock,
        )

    # ============================================
    # STATE PUBLICATION
    # ============================================

    def subscribe(self, listener: Callable[[AppState], None]) -> Callable[[], None]:
        """
        Register a listener called with every new state.

        Returns:
            Callable that unsubscribes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, **changes):
        self.state = self.state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self.state)

    # ============================================
    # DERIVED VIEWS
    # ============================================

    @property
    def sorted_stores(self) -> List[Store]:
        """UI ordering; the batch order in state.stores is left untouched"""
        return sorted(self.state.stores, key=store_sort_key)

    @property
    def next_closing(self) -> Optional[Store]:
        """Open store with the soonest closing time still ahead, if any"""
        now = self.clock()
        soonest = None
        soonest_delta = None

        for store in self.state.stores:
            if store.status != StoreStatus.OPEN:
                continue
            try:
                delta = minutes_until(parse_clock_time(store.closing_time, now=now), now)
            except TimeUnparseable:
                continue
            if delta > 0 and (soonest_delta is None or delta < soonest_delta):
                soonest, soonest_delta = store, delta

        return soonest

    @property
    def is_empty(self) -> bool:
        """True for the 'no stores found nearby' state"""
        state = self.state
        return (state.position is not None and not state.loading
                and state.error is None and not state.stores)

    # ============================================
    # LOCATION + DISCOVERY
    # ============================================

    def _next_epoch(self) -> int:
        self._epoch += 1
        return self._epoch

    async def _locate(self) -> GeoPosition:
        """Bridge the host's callback API onto a future"""
        if self.geolocation is None:
            raise GeolocationUnsupported()

        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def on_success(coords):
            if future.done():
                return
            try:
                future.set_result(to_geo_position(coords))
            except (ValueError, TypeError) as e:
                logger.warning("Host reported an invalid position %r: %s", coords, e)
                future.set_exception(GeolocationDenied())

        def on_error(error):
            if future.done():
                return
            logger.warning("Geolocation failed: %s", error)
            future.set_exception(GeolocationDenied())

        self.geolocation.get_current_position(on_success, on_error, enable_high_accuracy=True)
        return await future

    async def request_position(self) -> Optional[GeoPosition]:
        """
        Ask the host for a location fix, then discover stores around it.

        Returns:
            The new position, or None if the fix failed or was superseded
        """
        epoch = self._next_epoch()
        self._publish(loading=True, error=None)

        try:
            position = await self._locate()
        except LastCallError as e:
            if epoch == self._epoch:
                self._publish(loading=False, error=str(e))
            return None

        if epoch != self._epoch:
            logger.info("Discarding location fix from superseded request %d", epoch)
            return None

        # loading stays on until discovery finishes
        self._publish(position=position)
        await self._discover(position, epoch)
        return position

    async def set_position(self, position: GeoPosition):
        """Accept a fix pushed by the host; a new position triggers discovery"""
        epoch = self._next_epoch()
        self._publish(position=position, loading=True, error=None)
        await self._discover(position, epoch)

    async def _discover(self, position: GeoPosition, epoch: int):
        try:
            stores = await self.discovery_client.fetch_nearby_stores(position, now=self.clock())
        except LastCallError as e:
            if epoch == self._epoch:
                self._publish(loading=False, error=str(e))
            else:
                logger.info("Ignoring failure of superseded discovery %d", epoch)
            return

        if epoch != self._epoch:
            logger.info("Discarding stale discovery %d (current is %d)", epoch, self._epoch)
            return

        self._publish(stores=stores, loading=False, error=None)

    async def refresh(self) -> Optional[GeoPosition]:
        """Re-run location fix and discovery; supersedes any in-flight refresh"""
        self.refresh_count += 1
        return await self.request_position()

    # ============================================
    # CLOSING ALERTS
    # ============================================

    def _show_notification_hint(self):
        if self._notification_hint_shown:
            return
        self._notification_hint_shown = True
        self._publish(error=str(NotificationDenied()))

    async def toggle_alerts(self) -> bool:
        """
        Off -> On (after permission) or On -> Off.

        Returns:
            Whether alerts are enabled afterwards
        """
        if self.state.alerts_enabled:
            self.disable_alerts()
            return False

        if self.notifications is None:
            logger.info("Notifications unsupported by host")
            self._show_notification_hint()
            return False

        permission = getattr(self.notifications, "permission", PERMISSION_DEFAULT)
        if permission != PERMISSION_GRANTED:
            permission = await self.notifications.request_permission()

        if permission != PERMISSION_GRANTED:
            logger.info("Notification permission %s", permission)
            self._show_notification_hint()
            return False

        self._publish(alerts_enabled=True, error=None)
        self.alerts.start()
        return True

    def disable_alerts(self):
        self.alerts.stop()
        self.alerts.reset()
        self._publish(alerts_enabled=False)

    def close(self):
        """Session end: stop the periodic alert check"""
        if self.state.alerts_enabled:
            self.disable_alerts()
        else:
            self.alerts.stop()
