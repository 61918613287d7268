import pytest

from feed_core.notifications import FeedNotification, FeedNotificationName, NotificationCenter
from tests.test_utils import generate_test_account, generate_test_feed

DISPLAY_NAME = FeedNotificationName.DISPLAY_NAME_DID_CHANGE
UNREAD_COUNT = FeedNotificationName.UNREAD_COUNT_DID_CHANGE


def test_notification_center_delivers_in_subscription_order():
    center = NotificationCenter()
    received = []
    center.subscribe(DISPLAY_NAME, lambda n: received.append(("first", n)))
    center.subscribe(DISPLAY_NAME, lambda n: received.append(("second", n)))
    center.subscribe(UNREAD_COUNT, lambda n: received.append(("unread", n)))
    account = generate_test_account()
    feed = generate_test_feed(account)
    notification = FeedNotification(name=DISPLAY_NAME, feed=feed)

    center.post(notification)

    assert received == [("first", notification), ("second", notification)]

def test_notification_center_unsubscribe():
    center = NotificationCenter()
    received = []
    handler = received.append
    center.subscribe(UNREAD_COUNT, handler)
    center.unsubscribe(UNREAD_COUNT, handler)
    center.unsubscribe(DISPLAY_NAME, handler)

    center.post(FeedNotification(name=UNREAD_COUNT, feed=generate_test_feed(generate_test_account())))

    assert received == []

def test_notification_center_handler_errors_propagate():
    center = NotificationCenter()

    def failing_handler(notification):
        raise RuntimeError("handler failed")

    center.subscribe(DISPLAY_NAME, failing_handler)

    with pytest.raises(RuntimeError):
        center.post(FeedNotification(name=DISPLAY_NAME, feed=generate_test_feed(generate_test_account())))

def test_feed_changes_delivered_synchronously():
    center = NotificationCenter()
    account = generate_test_account()
    feed = generate_test_feed(account, notifier=center)
    seen = []
    center.subscribe(DISPLAY_NAME, lambda n: seen.append(n.feed.name_for_display))
    center.subscribe(UNREAD_COUNT, lambda n: seen.append(n.feed.unread_count))

    feed.rename("Renamed")
    feed.unread_count = 7

    assert seen == ["Renamed", 7]
