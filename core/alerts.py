"""
Closing Alert Scheduler
Notifies once per store when an open store is about to close
"""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Set

from config import (
    ALERT_CHECK_INTERVAL_SECONDS,
    ALERT_WINDOW_MINUTES,
    ALERT_TITLE,
    ALERT_BODY_TEMPLATE,
    ALERT_ICON_URL,
    get_local_now,
    get_logger,
)
from errors import TimeUnparseable
from models import AlertNotification, Store, StoreStatus
from utils import parse_clock_time, minutes_until

logger = get_logger(__name__)


def build_closing_alert(store: Store) -> AlertNotification:
    return AlertNotification(
        store_id=store.id,
        title=ALERT_TITLE,
        body=ALERT_BODY_TEMPLATE.format(name=store.name, closing_time=store.closing_time),
        icon=ALERT_ICON_URL,
    )


class ClosingAlertScheduler:
    """
    Periodic closing check over the current batch.

    Every tick, each Open store whose closing time is 0 < delta <= window
    minutes away gets exactly one notification. Dispatched ids go into the
    ledger, which is only cleared by reset().
    """

    def __init__(self, notifier, stores_provider: Callable[[], Sequence[Store]],
                 interval_seconds: float = ALERT_CHECK_INTERVAL_SECONDS,
                 window_minutes: float = ALERT_WINDOW_MINUTES,
                 clock: Callable[[], datetime] = get_local_now):
        """
        Args:
            notifier: NotificationCenter used to show alerts
            stores_provider: Returns the current batch, in batch order
            interval_seconds: Seconds between ticks
            window_minutes: Alert when closing within this many minutes
            clock: Returns the current instant
        """
        self.notifier = notifier
        self.stores_provider = stores_provider
        self.interval_seconds = interval_seconds
        self.window_minutes = window_minutes
        self.clock = clock
        self.dispatched: Set[str] = set()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def is_due(self, store: Store, now: datetime) -> bool:
        """True if the store should be alerted about at `now`"""
        if store.status != StoreStatus.OPEN:
            return False
        if store.id in self.dispatched:
            return False

        try:
            closing_at = parse_clock_time(store.closing_time, now=now)
        except TimeUnparseable:
            return False

        delta = minutes_until(closing_at, now)
        return 0 < delta <= self.window_minutes

    def tick(self, now: Optional[datetime] = None) -> List[AlertNotification]:
        """
        Run one closing check.

        Returns:
            Notifications that were successfully dispatched
        """
        if now is None:
            now = self.clock()

        sent = []
        for store in self.stores_provider():
            if not self.is_due(store, now):
                continue

            alert = build_closing_alert(store)
            try:
                self.notifier.notify(alert.title, alert.body, alert.icon)
            except Exception:
                # not recorded, so the next tick retries
                logger.exception("Failed to dispatch closing alert for %s", store.name)
                continue

            self.dispatched.add(store.id)
            sent.append(alert)
            logger.info("Closing alert sent for %s (%s)", store.name, store.closing_time)

        return sent

    async def _run(self):
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Closing alert check failed")
            await asyncio.sleep(self.interval_seconds)

    def start(self):
        """Start ticking on the running event loop (first tick is immediate)"""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self):
        """Cancel the periodic tick"""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def reset(self):
        """Forget dispatched alerts"""
        self.dispatched.clear()
