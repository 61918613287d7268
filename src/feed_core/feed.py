"""The feed entity: identity, cached account metadata, and display state."""

import gettext
import logging
import weakref
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Set

from .interfaces.protocols import AccountProtocol, NotificationPublisherProtocol
from .models import Author, ConditionalGetInfo, FeedDictionaryKey, FeedMetadata
from .notifications import FeedNotification, FeedNotificationName
from .opml import feed_opml_string
from .url import normalized_url

_ = gettext.gettext


def untitled_feed_name() -> str:
    """The placeholder shown for a feed with no name."""
    return _("Untitled")


class Feed:
    """
    A subscribed feed belonging to one account.

    The feed itself only holds its identity. Everything else (names, URLs,
    HTTP validators, authors) lives in a `FeedMetadata` record owned by the
    account; it is fetched on first use and kept for the life of this object.
    Unread counts are always read from and written to the account.

    Not thread-safe: confine each feed to one thread.
    """

    def __init__(
            self,
            account: AccountProtocol, # The owning account; only weakly referenced.
            url: str, # The feed's source address.
            feed_id: str, # Stable identifier, unique within the account.
            notifier: Optional[NotificationPublisherProtocol] = None, # Receives change notifications.
        ):
        self._account_ref = weakref.ref(account)
        # Captured so equality and hashing survive the account going away.
        self._account_id: str = account.account_id
        self._url = url
        self._feed_id = feed_id
        self.notifier = notifier
        self._metadata: Optional[FeedMetadata] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def feed_id(self) -> str:
        return self._feed_id

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def account(self) -> Optional[AccountProtocol]:
        return self._account_ref()

    @property
    def metadata(self) -> Optional[FeedMetadata]:
        if self._metadata is not None:
            return self._metadata
        account = self.account
        if account is None:
            return None
        self._metadata = account.metadata_for(self)
        return self._metadata

    ### Metadata-backed properties

    @property
    def home_page_url(self) -> Optional[str]:
        metadata = self.metadata
        return metadata.home_page_url if metadata is not None else None

    @home_page_url.setter
    def home_page_url(self, value: Optional[str]):
        metadata = self.metadata
        if metadata is None:
            return
        metadata.home_page_url = normalized_url(value) if value is not None else None

    @property
    def icon_url(self) -> Optional[str]:
        metadata = self.metadata
        return metadata.icon_url if metadata is not None else None

    @icon_url.setter
    def icon_url(self, value: Optional[str]):
        metadata = self.metadata
        if metadata is not None:
            metadata.icon_url = value

    @property
    def favicon_url(self) -> Optional[str]:
        metadata = self.metadata
        return metadata.favicon_url if metadata is not None else None

    @favicon_url.setter
    def favicon_url(self, value: Optional[str]):
        metadata = self.metadata
        if metadata is not None:
            metadata.favicon_url = value

    @property
    def name(self) -> Optional[str]:
        metadata = self.metadata
        return metadata.name if metadata is not None else None

    @name.setter
    def name(self, value: Optional[str]):
        old_name_for_display = self.name_for_display
        metadata = self.metadata
        if metadata is not None:
            metadata.name = value
        if old_name_for_display != self.name_for_display:
            self._post(FeedNotificationName.DISPLAY_NAME_DID_CHANGE)

    @property
    def authors(self) -> Optional[Set[Author]]:
        metadata = self.metadata
        if metadata is None or metadata.authors is None:
            return None
        return set(metadata.authors)

    @authors.setter
    def authors(self, value: Optional[Set[Author]]):
        metadata = self.metadata
        if metadata is not None:
            metadata.authors = list(value) if value is not None else None

    @property
    def edited_name(self) -> Optional[str]:
        metadata = self.metadata
        # An empty edited name means no edited name.
        if metadata is None or not metadata.edited_name:
            return None
        return metadata.edited_name

    @edited_name.setter
    def edited_name(self, value: Optional[str]):
        if value == self.edited_name:
            return
        metadata = self.metadata
        if metadata is not None:
            metadata.edited_name = value if value else None
        # Posted even when name_for_display ends up the same.
        self._post(FeedNotificationName.DISPLAY_NAME_DID_CHANGE)

    @property
    def conditional_get_info(self) -> Optional[ConditionalGetInfo]:
        metadata = self.metadata
        return metadata.conditional_get_info if metadata is not None else None

    @conditional_get_info.setter
    def conditional_get_info(self, value: Optional[ConditionalGetInfo]):
        metadata = self.metadata
        if metadata is not None:
            metadata.conditional_get_info = value

    @property
    def content_hash(self) -> Optional[str]:
        metadata = self.metadata
        return metadata.content_hash if metadata is not None else None

    @content_hash.setter
    def content_hash(self, value: Optional[str]):
        metadata = self.metadata
        if metadata is not None:
            metadata.content_hash = value

    ### Display name

    @property
    def name_for_display(self) -> str:
        edited_name = self.edited_name
        if edited_name:
            return edited_name
        name = self.name
        if name:
            return name
        return untitled_feed_name()

    def rename(self, new_name: str) -> None:
        self.edited_name = new_name

    ### Unread count

    @property
    def unread_count(self) -> int:
        account = self.account
        if account is None:
            return 0
        return account.unread_count_for(self)

    @unread_count.setter
    def unread_count(self, value: int):
        """
        Store a new unread count in the account and post a change notification.

        Raises:
            Whatever the account raises when it rejects the count; `Account`
            raises ValueError for a negative count.
        """
        if self.unread_count == value:
            return
        account = self.account
        if account is not None:
            account.set_unread_count(value, self)
        self._post(FeedNotificationName.UNREAD_COUNT_DID_CHANGE)

    ### Disk dictionary

    @classmethod
    def from_dictionary(
            cls,
            account: AccountProtocol,
            dictionary: Mapping[str, Any],
            notifier: Optional[NotificationPublisherProtocol] = None,
        ) -> Optional["Feed"]:
        """
        Decode a feed from its persisted dictionary.

        Returns:
            None if the dictionary has no `url`.
        """
        return decode_feed_dictionary(account, dictionary, notifier).feed

    @staticmethod
    def is_feed_dictionary(dictionary: Mapping[str, Any]) -> bool:
        return dictionary.get(FeedDictionaryKey.URL) is not None

    ### Debug

    def debug_drop_conditional_get_info(self) -> None:
        """
        Forget the HTTP validators and content hash so the next fetch is unconditional.
        """
        self.conditional_get_info = None
        self.content_hash = None

    ### OPML

    def opml_string(self, indent_level: int) -> str:
        return feed_opml_string(self, indent_level)

    ### Identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Feed):
            return NotImplemented
        return self.feed_id == other.feed_id and self.account_id == other.account_id

    def __hash__(self) -> int:
        return hash((self.feed_id, self.account_id))

    def __repr__(self) -> str:
        return f"Feed(feed_id={self.feed_id!r}, account_id={self.account_id!r})"

    def _post(self, name: FeedNotificationName) -> None:
        if self.notifier is None:
            logging.debug(f"No notifier for {self!r}, dropping {name.value}.")
            return
        self.notifier.post(FeedNotification(name=name, feed=self))


@dataclass(frozen=True)
class FeedDecodeResult:
    """
    Outcome of decoding a persisted feed dictionary.
    """
    feed: Optional[Feed] = None # The decoded feed, on success.
    missing_key: Optional[str] = None # The required key that was absent, on failure.

    @property
    def ok(self) -> bool:
        return self.feed is not None


def decode_feed_dictionary(
    account: AccountProtocol,
    dictionary: Mapping[str, Any],
    notifier: Optional[NotificationPublisherProtocol] = None,
) -> FeedDecodeResult:
    """
    Decode a feed from its persisted dictionary.

    `feedID` defaults to `url`. The edited name is applied before the name, and
    either may post a display-name notification.
    """
    url = dictionary.get(FeedDictionaryKey.URL)
    if not isinstance(url, str):
        return FeedDecodeResult(missing_key=FeedDictionaryKey.URL)

    feed_id = dictionary.get(FeedDictionaryKey.FEED_ID)
    if not isinstance(feed_id, str):
        feed_id = url

    feed = Feed(account=account, url=url, feed_id=feed_id, notifier=notifier)
    feed.edited_name = _string_or_none(dictionary.get(FeedDictionaryKey.EDITED_NAME))
    feed.name = _string_or_none(dictionary.get(FeedDictionaryKey.NAME))
    return FeedDecodeResult(feed=feed)


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def feed_ids(feeds: Iterable[Feed]) -> Set[str]:
    """
    The feed IDs of the given feeds, which are expected to share one account.
    """
    return {feed.feed_id for feed in feeds}
