from unittest.mock import patch

import pytest

from feed_core.config import DEFAULT_OPML_TITLE, load_config
from feed_core.models import AppConfig

ENV_KEYS = [
    "FEED_CORE_ACCOUNT_ID",
    "FEED_CORE_FEEDS_FILE",
    "FEED_CORE_OUTPUT_PATH",
    "FEED_CORE_OPML_TITLE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory out of the settings.
    monkeypatch.chdir(tmp_path)

@patch("feed_core.config.load_dotenv")
def test_load_config_from_cli(mock_load_dotenv):
    config = load_config([
        "--account-id", "local",
        "--feeds-file", "feeds.json",
        "--output-path", "out.opml",
        "--opml-title", "Mine",
    ])

    mock_load_dotenv.assert_called_once()
    assert config == AppConfig(
        account_id="local",
        feeds_file="feeds.json",
        output_path="out.opml",
        opml_title="Mine",
    )

@patch("feed_core.config.load_dotenv")
def test_load_config_from_environment(mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("FEED_CORE_ACCOUNT_ID", "env-account")
    monkeypatch.setenv("FEED_CORE_FEEDS_FILE", "env-feeds.json")

    config = load_config([])

    assert config.account_id == "env-account"
    assert config.feeds_file == "env-feeds.json"
    assert config.output_path is None
    assert config.opml_title == DEFAULT_OPML_TITLE

@patch("feed_core.config.load_dotenv")
def test_load_config_cli_overrides_environment(mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("FEED_CORE_ACCOUNT_ID", "env-account")
    monkeypatch.setenv("FEED_CORE_FEEDS_FILE", "env-feeds.json")

    config = load_config(["-a", "cli-account"])

    assert config.account_id == "cli-account"
    assert config.feeds_file == "env-feeds.json"

@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--account-id", "local"],
        ["--feeds-file", "feeds.json"],
    ]
)
@patch("feed_core.config.load_dotenv")
def test_load_config_requires_account_and_feeds_file(mock_load_dotenv, argv):
    with pytest.raises(ValueError):
        load_config(argv)
