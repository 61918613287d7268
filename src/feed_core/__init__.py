"""Feed entity for a multi-account feed reader."""

__version__ = "0.1.0"

from .account import Account
from .feed import Feed, FeedDecodeResult, decode_feed_dictionary, feed_ids
from .models import Author, ConditionalGetInfo, FeedDictionaryKey, FeedMetadata
from .notifications import FeedNotification, FeedNotificationName, NotificationCenter

__all__ = [
    "Account",
    "Author",
    "ConditionalGetInfo",
    "Feed",
    "FeedDecodeResult",
    "FeedDictionaryKey",
    "FeedMetadata",
    "FeedNotification",
    "FeedNotificationName",
    "NotificationCenter",
    "decode_feed_dictionary",
    "feed_ids",
]
