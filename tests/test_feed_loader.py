import json
import logging

import pytest

from feed_core.feed_loader import load_feed_dictionaries, load_feeds
from tests.test_utils import RecordingNotifier, generate_test_account


def write_json(tmp_path, data, file_name="feeds.json"):
    path = tmp_path / file_name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)

def test_load_feed_dictionaries_from_list(tmp_path):
    path = write_json(tmp_path, [{"url": "http://a"}, "not a dictionary", {"url": "http://b"}])

    assert load_feed_dictionaries(path) == [{"url": "http://a"}, {"url": "http://b"}]

def test_load_feed_dictionaries_from_object(tmp_path):
    path = write_json(tmp_path, {"http://a": {"url": "http://a"}, "http://b": {"url": "http://b"}})

    assert load_feed_dictionaries(path) == [{"url": "http://a"}, {"url": "http://b"}]

def test_load_feed_dictionaries_rejects_other_json(tmp_path):
    path = write_json(tmp_path, "http://a")

    with pytest.raises(ValueError):
        load_feed_dictionaries(path)

def test_load_feed_dictionaries_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_feed_dictionaries(str(tmp_path / "missing.json"))

def test_load_feeds(tmp_path):
    notifier = RecordingNotifier()
    account = generate_test_account()
    path = write_json(tmp_path, [
        {"url": "http://a", "name": "A"},
        {"url": "http://b", "feedID": "feed-b", "editedName": "Mine"},
        {"name": "No URL"},
        {"url": 3},
    ])

    feeds = load_feeds(account, path, notifier=notifier)

    assert [feed.feed_id for feed in feeds] == ["http://a", "feed-b"]
    assert [feed.name_for_display for feed in feeds] == ["A", "Mine"]
    assert all(feed.account is account for feed in feeds)
    assert all(feed.notifier is notifier for feed in feeds)

def test_load_feeds_warns_about_non_string_url(tmp_path, caplog):
    account = generate_test_account()
    path = write_json(tmp_path, [{"url": 3}])

    with caplog.at_level(logging.WARNING):
        feeds = load_feeds(account, path)

    assert feeds == []
    assert "no string \"url\"" in caplog.text
    assert "missing" not in caplog.text
