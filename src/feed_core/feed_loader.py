import json
import logging
from typing import Any, Dict, List, Optional

from .feed import Feed, decode_feed_dictionary
from .interfaces.protocols import AccountProtocol, NotificationPublisherProtocol


def load_feed_dictionaries(file_path: str) -> List[Dict[str, Any]]:
    """
    Load persisted feed dictionaries from a JSON file.

    The file holds either a list of dictionaries or an object whose values are
    dictionaries. Entries that are not dictionaries are skipped.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        entries = list(data.values())
    elif isinstance(data, list):
        entries = data
    else:
        raise ValueError(f"Expected a list or object of feed dictionaries in \"{file_path}\".")

    dictionaries = []
    for entry in entries:
        if not isinstance(entry, dict):
            logging.warning(f"Skipping non-dictionary entry in \"{file_path}\": {entry!r}")
            continue
        dictionaries.append(entry)
    return dictionaries


def load_feeds(
    account: AccountProtocol,
    file_path: str,
    notifier: Optional[NotificationPublisherProtocol] = None,
) -> List[Feed]:
    """
    Load the account's feeds from a JSON file of persisted feed dictionaries.
    """
    dictionaries = load_feed_dictionaries(file_path)
    logging.info(f"Loading {len(dictionaries)} feed dictionaries for account \"{account.account_id}\".")

    feeds = []
    for dictionary in dictionaries:
        if not Feed.is_feed_dictionary(dictionary):
            logging.warning(f"Skipping dictionary without a feed URL: {dictionary!r}")
            continue
        result = decode_feed_dictionary(account, dictionary, notifier)
        if not result.ok:
            logging.warning(f"Skipping feed dictionary with no string \"{result.missing_key}\": {dictionary!r}")
            continue
        feeds.append(result.feed)

    logging.info(f"Loaded {len(feeds)} feeds for account \"{account.account_id}\".")
    return feeds
