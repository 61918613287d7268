"""Change notifications emitted by feeds and a synchronous publisher to deliver them."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, DefaultDict, List

if TYPE_CHECKING:
    from .feed import Feed


class FeedNotificationName(str, Enum):
    """Kinds of feed change a subscriber can listen for."""

    DISPLAY_NAME_DID_CHANGE = "DisplayNameDidChange"
    UNREAD_COUNT_DID_CHANGE = "UnreadCountDidChange"


@dataclass(frozen=True)
class FeedNotification:
    """A change to the display-facing state of one feed."""

    name: FeedNotificationName
    feed: "Feed"  # The feed whose state changed.


NotificationHandler = Callable[[FeedNotification], None]


class NotificationCenter:
    """Delivers feed notifications synchronously to subscribed handlers.

    Handlers run in subscription order inside `post`, so a setter that posts does
    not return until every subscriber has seen the change. Exceptions raised by a
    handler propagate to the caller of `post`.
    """

    def __init__(self):
        self._handlers: DefaultDict[FeedNotificationName, List[NotificationHandler]] = defaultdict(
            list
        )

    def subscribe(self, name: FeedNotificationName, handler: NotificationHandler) -> None:
        """Register a handler for notifications with the given name."""
        self._handlers[name].append(handler)

    def unsubscribe(self, name: FeedNotificationName, handler: NotificationHandler) -> None:
        """Remove a previously registered handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def post(self, notification: FeedNotification) -> None:
        """Deliver the notification to every handler subscribed to its name."""
        handlers = list(self._handlers.get(notification.name, ()))
        logging.debug(
            f"Posting {notification.name.value} for {notification.feed!r} to {len(handlers)} handler(s)."
        )
        for handler in handlers:
            handler(notification)
