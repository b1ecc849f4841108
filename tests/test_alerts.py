import asyncio
from datetime import datetime

from config import ALERT_TITLE
from core.alerts import ClosingAlertScheduler
from models import StoreStatus
from conftest import FakeNotifier, make_store


def make_scheduler(stores, notifier=None, **kwargs):
    notifier = notifier or FakeNotifier()
    return ClosingAlertScheduler(notifier, lambda: stores, **kwargs), notifier


def test_alerts_once_within_window(evening):
    store = make_store(closing_time="9:00 PM")
    scheduler, notifier = make_scheduler([store])

    sent = scheduler.tick(now=evening)

    assert [alert.store_id for alert in sent] == [store.id]
    assert notifier.sent[0][0] == ALERT_TITLE
    assert notifier.sent[0][1] == "Joe's Wine is closing at 9:00 PM. Better hurry!"
    assert store.id in scheduler.dispatched

    assert scheduler.tick(now=datetime(2026, 10, 18, 20, 46)) == []
    assert len(notifier.sent) == 1


def test_no_alert_after_closing():
    scheduler, notifier = make_scheduler([make_store(closing_time="9:00 PM")])
    assert scheduler.tick(now=datetime(2026, 10, 18, 22, 0)) == []
    assert notifier.sent == []


def test_window_edges():
    store = make_store(closing_time="9:00 PM")
    scheduler, _ = make_scheduler([store])
    assert not scheduler.is_due(store, datetime(2026, 10, 18, 20, 29))
    assert scheduler.is_due(store, datetime(2026, 10, 18, 20, 30))
    assert not scheduler.is_due(store, datetime(2026, 10, 18, 21, 0))


def test_skips_closed_and_unparseable(evening):
    stores = [
        make_store("store-0-1", status=StoreStatus.CLOSED, closing_time="9:00 PM"),
        make_store("store-1-1", name="Ale House", closing_time="Check hours"),
    ]
    scheduler, notifier = make_scheduler(stores)
    assert scheduler.tick(now=evening) == []
    assert notifier.sent == []


def test_batch_order_is_dispatch_order(evening):
    stores = [
        make_store("store-0-1", name="First Shop", closing_time="9:10 PM"),
        make_store("store-1-1", name="Second Shop", closing_time="9:00 PM"),
    ]
    scheduler, _ = make_scheduler(stores)
    assert [a.store_id for a in scheduler.tick(now=evening)] == ["store-0-1", "store-1-1"]


def test_failed_dispatch_is_retried(evening):
    store = make_store(closing_time="9:00 PM")
    notifier = FakeNotifier(fail=True)
    scheduler, _ = make_scheduler([store], notifier)

    assert scheduler.tick(now=evening) == []
    assert store.id not in scheduler.dispatched

    notifier.fail = False
    assert len(scheduler.tick(now=evening)) == 1


def test_reset_allows_redispatch(evening):
    scheduler, notifier = make_scheduler([make_store(closing_time="9:00 PM")])
    scheduler.tick(now=evening)
    scheduler.reset()
    scheduler.tick(now=evening)
    assert len(notifier.sent) == 2


def test_start_and_stop(evening):
    async def scenario():
        scheduler, notifier = make_scheduler(
            [make_store(closing_time="9:00 PM")],
            interval_seconds=0.01,
            clock=lambda: evening,
        )
        scheduler.start()
        assert scheduler.running
        await asyncio.sleep(0.05)
        scheduler.stop()
        assert not scheduler.running
        return notifier

    notifier = asyncio.run(scenario())
    assert len(notifier.sent) == 1


def test_loop_survives_a_failing_check(evening):
    store = make_store(closing_time="9:00 PM")
    calls = []

    def flaky_stores():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("batch unavailable")
        return [store]

    async def scenario():
        notifier = FakeNotifier()
        scheduler = ClosingAlertScheduler(
            notifier, flaky_stores, interval_seconds=0.01, clock=lambda: evening
        )
        scheduler.start()
        await asyncio.sleep(0.05)
        still_running = scheduler.running
        scheduler.stop()
        return notifier, still_running

    notifier, still_running = asyncio.run(scenario())
    assert still_running
    assert len(calls) > 1
    assert len(notifier.sent) == 1
