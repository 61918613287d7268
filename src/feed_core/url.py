"""URL normalization for addresses typed or scraped from feeds."""

from urllib.parse import urlsplit

_FEED_PREFIX = "feed:"
_FEEDS_PREFIX = "feeds:"


def normalized_url(url: str) -> str:
    """Return the canonical form of a web URL.

    - Surrounding whitespace is trimmed.
    - A `feed:` or `feeds:` pseudo-scheme is dropped; `feeds:` means https.
    - A scheme-relative `//host` loses its leading slashes.
    - `http://` is added when the URL has no http(s) scheme.
    - A bare host such as `http://example.com` gets a trailing `/`.
    """
    s = url.strip()

    was_feeds = False
    lowercased = s.lower()
    if lowercased.startswith(_FEEDS_PREFIX):
        was_feeds = True
        s = s[len(_FEEDS_PREFIX):]
    elif lowercased.startswith(_FEED_PREFIX):
        s = s[len(_FEED_PREFIX):]

    if s.startswith("//"):
        s = s[2:]

    if not s.lower().startswith("http"):
        s = f"{'https' if was_feeds else 'http'}://{s}"

    parts = urlsplit(s)
    if parts.netloc and not parts.path and not parts.query and not parts.fragment:
        s += "/"

    return s
