import logging
from typing import TYPE_CHECKING, Dict, Optional

from .models import FeedMetadata

if TYPE_CHECKING:
    from .feed import Feed


class Account:
    """
    In-memory account holding feed metadata records and unread counts.

    Records and counts are keyed by feed ID. Nothing is persisted.
    """
    def __init__(
            self,
            account_id: str, # Unique ID of the account.
        ):
        self.account_id = account_id
        self._metadata: Dict[str, FeedMetadata] = {}
        self._unread_counts: Dict[str, int] = {}

    def metadata_for(self, feed: "Feed") -> Optional[FeedMetadata]:
        """
        Return the feed's metadata record, creating an empty one on first request.
        """
        metadata = self._metadata.get(feed.feed_id)
        if metadata is None:
            logging.debug(f"Creating metadata for feed \"{feed.feed_id}\" in account \"{self.account_id}\".")
            metadata = FeedMetadata(feed_id=feed.feed_id)
            self._metadata[feed.feed_id] = metadata
        return metadata

    def unread_count_for(self, feed: "Feed") -> int:
        return self._unread_counts.get(feed.feed_id, 0)

    def set_unread_count(self, unread_count: int, feed: "Feed") -> None:
        if unread_count < 0:
            raise ValueError(f"Unread count must not be negative, got {unread_count} for \"{feed.feed_id}\".")
        self._unread_counts[feed.feed_id] = unread_count
