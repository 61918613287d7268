"""Defines protocols for the collaborators a feed talks to and the roles it plays."""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from ..models import FeedMetadata

if TYPE_CHECKING:
    from ..feed import Feed
    from ..notifications import FeedNotification


class AccountProtocol(Protocol):
    """Protocol defining what a feed needs from the account that owns it."""

    account_id: str

    def metadata_for(self, feed: "Feed") -> Optional[FeedMetadata]:
        """Return the metadata record the account keeps for the feed."""
        ...

    def unread_count_for(self, feed: "Feed") -> int:
        """Return the feed's current unread count."""
        ...

    def set_unread_count(self, unread_count: int, feed: "Feed") -> None:
        """Store a new unread count for the feed."""
        ...


class NotificationPublisherProtocol(Protocol):
    """Protocol defining a synchronous notification publisher."""

    def post(self, notification: "FeedNotification") -> None:
        """Deliver the notification to every subscriber before returning."""
        ...


@runtime_checkable
class DisplayNameProvider(Protocol):
    """Anything with a name that can be shown to the user."""

    @property
    def name_for_display(self) -> str: ...


@runtime_checkable
class Renamable(Protocol):
    """Anything the user can rename."""

    def rename(self, new_name: str) -> None: ...


@runtime_checkable
class UnreadCountProvider(Protocol):
    """Anything that reports an unread count."""

    @property
    def unread_count(self) -> int: ...


@runtime_checkable
class OPMLRepresentable(Protocol):
    """Anything that can write itself as OPML."""

    def opml_string(self, indent_level: int) -> str:
        """Return the OPML text, indented by `indent_level` tabs."""
        ...
