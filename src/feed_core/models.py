"""Data models for feed metadata records and application configuration."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedDictionaryKey:
    """
    Keys used by the persisted feed dictionary format.
    """
    URL = "url"
    FEED_ID = "feedID"
    HOME_PAGE_URL = "homePageURL"
    ICON_URL = "iconURL"
    FAVICON_URL = "faviconURL"
    NAME = "name"
    EDITED_NAME = "editedName"
    AUTHORS = "authors"
    CONDITIONAL_GET_INFO = "conditionalGetInfo"
    CONDITIONAL_GET_LAST_MODIFIED = "lastModified"
    CONDITIONAL_GET_ETAG = "etag"
    CONTENT_HASH = "contentHash"

### Metadata

class Author(BaseModel):
    """
    Author of a feed.
    """
    name: Optional[str] = None # The display name of the author.
    url: Optional[str] = None # The author's home page.
    avatar_url: Optional[str] = Field(default=None, alias="avatarURL") # The author's avatar image.
    email_address: Optional[str] = Field(default=None, alias="emailAddress") # The author's email address.

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

class ConditionalGetInfo(BaseModel):
    """
    HTTP validators from the last fetch, used for a conditional GET.
    """
    last_modified: Optional[str] = Field(
        default=None,
        alias=FeedDictionaryKey.CONDITIONAL_GET_LAST_MODIFIED,
    ) # The `Last-Modified` response header.
    etag: Optional[str] = Field(
        default=None,
        alias=FeedDictionaryKey.CONDITIONAL_GET_ETAG,
    ) # The `ETag` response header.

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    @property
    def is_empty(self) -> bool:
        return self.last_modified is None and self.etag is None

    @classmethod
    def from_dictionary(cls, dictionary: Mapping[str, Any]) -> Optional["ConditionalGetInfo"]:
        """
        Build the validators from their persisted dictionary.

        Returns:
            None if the dictionary carries neither validator.
        """
        last_modified = dictionary.get(FeedDictionaryKey.CONDITIONAL_GET_LAST_MODIFIED)
        etag = dictionary.get(FeedDictionaryKey.CONDITIONAL_GET_ETAG)
        if not isinstance(last_modified, str):
            last_modified = None
        if not isinstance(etag, str):
            etag = None
        if last_modified is None and etag is None:
            return None
        return cls(last_modified=last_modified, etag=etag)

    def dictionary(self) -> Dict[str, str]:
        """
        The persisted dictionary form, without absent validators.
        """
        return self.model_dump(by_alias=True, exclude_none=True)

class FeedMetadata(BaseModel):
    """
    Mutable attributes of a feed, owned and stored by its account.
    """
    feed_id: str = Field(alias=FeedDictionaryKey.FEED_ID) # The feed this record belongs to.
    home_page_url: Optional[str] = Field(default=None, alias=FeedDictionaryKey.HOME_PAGE_URL)
    icon_url: Optional[str] = Field(default=None, alias=FeedDictionaryKey.ICON_URL)
    favicon_url: Optional[str] = Field(default=None, alias=FeedDictionaryKey.FAVICON_URL)
    name: Optional[str] = Field(default=None, alias=FeedDictionaryKey.NAME) # The name the feed gives itself.
    edited_name: Optional[str] = Field(default=None, alias=FeedDictionaryKey.EDITED_NAME) # The name the user gave the feed.
    authors: Optional[List[Author]] = Field(default=None, alias=FeedDictionaryKey.AUTHORS)
    conditional_get_info: Optional[ConditionalGetInfo] = Field(
        default=None,
        alias=FeedDictionaryKey.CONDITIONAL_GET_INFO,
    )
    content_hash: Optional[str] = Field(default=None, alias=FeedDictionaryKey.CONTENT_HASH) # Hash of the last fetched content.

    model_config = ConfigDict(
        populate_by_name=True,
    )

### App

class AppEnvSettings(BaseSettings):
    """
    App settings from environment variables.
    """
    account_id: Optional[str] = None # The ID of the account the feeds belong to.
    feeds_file: Optional[str] = None # JSON file holding the account's persisted feed dictionaries.
    output_path: Optional[str] = None # Where to write the OPML document; stdout when unset.
    opml_title: Optional[str] = None # The title of the OPML document.

    model_config = SettingsConfigDict(
        env_prefix="FEED_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
    )

class AppConfig(BaseModel):
    """
    Global app config.
    """
    account_id: str # The ID of the account the feeds belong to.
    feeds_file: str # JSON file holding the account's persisted feed dictionaries.
    output_path: Optional[str] = None # Where to write the OPML document; stdout when unset.
    opml_title: str # The title of the OPML document.

    model_config = ConfigDict(
        frozen=True,
    )
