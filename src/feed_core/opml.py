"""OPML output for feeds and whole subscription lists."""

import logging
import os
from typing import TYPE_CHECKING, Iterable
from xml.sax.saxutils import escape

from jinja2 import Environment, FileSystemLoader

from .interfaces.protocols import OPMLRepresentable

if TYPE_CHECKING:
    from .feed import Feed

_XML_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
}

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
OPML_TEMPLATE_NAME = "opml.xml.j2"


def escape_xml(s: str) -> str:
    """Escape the five XML special characters."""
    return escape(s, _XML_ENTITIES)


def prepend_tabs(s: str, count: int) -> str:
    return "\t" * count + s


def feed_opml_string(feed: "Feed", indent_level: int) -> str:
    """
    Write one feed as a self-closing OPML outline line.

    The name written is the edited name, else the feed's own name, else empty.
    The "Untitled" display placeholder is never written, since it would be read
    back later as the feed's real name.
    """
    name_to_use = feed.edited_name
    if name_to_use is None:
        name_to_use = feed.name
    if name_to_use is None:
        name_to_use = ""
    escaped_name = escape_xml(name_to_use)

    escaped_home_page_url = ""
    home_page_url = feed.home_page_url
    if home_page_url is not None:
        escaped_home_page_url = escape_xml(home_page_url)
    escaped_feed_url = escape_xml(feed.url)

    s = (
        f'<outline text="{escaped_name}" title="{escaped_name}" description="" '
        f'type="rss" version="RSS" htmlUrl="{escaped_home_page_url}" xmlUrl="{escaped_feed_url}"/>\n'
    )
    return prepend_tabs(s, indent_level)


def opml_document(
    title: str,
    items: Iterable[OPMLRepresentable],
    template_dir: str = TEMPLATE_DIR,
) -> str:
    """
    Render a complete OPML document holding the given items, one indent level deep.
    """
    outlines = [item.opml_string(indent_level=1) for item in items]
    logging.info(f"Generating OPML document \"{title}\" with {len(outlines)} outline(s).")

    env = Environment(
        loader=FileSystemLoader(template_dir),
        keep_trailing_newline=True,
    )
    env.filters["xml_escape"] = escape_xml
    template = env.get_template(OPML_TEMPLATE_NAME)
    return template.render(title=title, outlines=outlines)
