import logging
import sys
from typing import List, Optional

from .account import Account
from .config import load_config
from .feed_loader import load_feeds
from .interfaces.protocols import DisplayNameProvider
from .models import AppConfig
from .notifications import NotificationCenter
from .opml import opml_document


class Main:
    """
    Main class for the feed-core OPML exporter.
    """
    def __init__(
            self,
            config: AppConfig,
            ):
        self.config = config

    def run(self) -> str:
        """
        Load the account's feeds and write them out as an OPML document.
        """
        account = Account(account_id=self.config.account_id)
        notification_center = NotificationCenter()

        feeds = load_feeds(
            account=account,
            file_path=self.config.feeds_file,
            notifier=notification_center,
        )
        # Stable output regardless of file order.
        feeds.sort(key=lambda feed: (display_sort_key(feed), feed.feed_id))

        document = opml_document(title=self.config.opml_title, items=feeds)

        if self.config.output_path:
            with open(self.config.output_path, "w", encoding="utf-8") as f:
                f.write(document)
            logging.info(f"OPML written to \"{self.config.output_path}\".")
        else:
            sys.stdout.write(document)
        return document


def display_sort_key(item: DisplayNameProvider) -> str:
    return item.name_for_display.lower()


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    config = load_config(argv)
    Main(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
