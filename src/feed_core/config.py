from argparse import ArgumentParser
from argparse import Namespace as ArgNamespace
from typing import List, Optional

from dotenv import load_dotenv

from .models import AppConfig, AppEnvSettings

DEFAULT_OPML_TITLE = "Subscriptions"


def parse_cli_arguments(argv: Optional[List[str]] = None) -> ArgNamespace:
    """
    Parse the command line arguments.
    """
    parser = ArgumentParser(description="Export an account's feeds as OPML.")
    parser.add_argument(
        "-a", "--account-id",
        type=str,
        help="The ID of the account the feeds belong to.",
    )
    parser.add_argument(
        "-f", "--feeds-file",
        type=str,
        help="The JSON file holding the account's persisted feed dictionaries.",
    )
    parser.add_argument(
        "-o", "--output-path",
        type=str,
        help="The file to write the OPML document to. Defaults to stdout.",
    )
    parser.add_argument(
        "-t", "--opml-title",
        type=str,
        help="The title of the OPML document.",
    )
    return parser.parse_args(argv)

def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    """
    Load the configuration. CLI arguments take precedence over the environment.
    """
    load_dotenv(verbose=True)
    cli_args = parse_cli_arguments(argv)
    env_settings = AppEnvSettings()

    account_id = cli_args.account_id or env_settings.account_id
    if account_id is None:
        raise ValueError("No account ID provided.")

    feeds_file = cli_args.feeds_file or env_settings.feeds_file
    if feeds_file is None:
        raise ValueError("No feeds file provided.")

    return AppConfig(
        account_id=account_id,
        feeds_file=feeds_file,
        output_path=cli_args.output_path
            or env_settings.output_path,
        opml_title=cli_args.opml_title
            or env_settings.opml_title
            or DEFAULT_OPML_TITLE,
    )
