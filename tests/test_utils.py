from typing import List, Optional

from feed_core.account import Account
from feed_core.feed import Feed
from feed_core.notifications import FeedNotification, FeedNotificationName


class RecordingNotifier:
    """
    Notifier that keeps every posted notification.
    """
    def __init__(self):
        self.posted: List[FeedNotification] = []

    def post(self, notification: FeedNotification) -> None:
        self.posted.append(notification)

    def names(self) -> List[FeedNotificationName]:
        return [notification.name for notification in self.posted]

    def clear(self) -> None:
        self.posted.clear()


def feed_url(index: int) -> str:
    return f"https://example.com/feed{index}.xml"

def generate_test_account(account_id: str = "test-account") -> Account:
    """
    Generate an empty in-memory account.
    """
    return Account(account_id=account_id)

def generate_test_feed(
        account: Account,
        index: int = 1,
        feed_id: Optional[str] = None,
        notifier: Optional[RecordingNotifier] = None,
    ) -> Feed:
    """
    Generate a test feed with the given index.
    """
    url = feed_url(index)
    return Feed(
        account=account,
        url=url,
        feed_id=feed_id if feed_id else url,
        notifier=notifier,
    )
