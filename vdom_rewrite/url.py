"""Classify resource URLs and resolve them behind the proxy endpoint.

The proxy takes the whole target URL as a single path segment, so the
resolved URL has its ``scheme://`` separator reduced to ``scheme:/`` and its
first ``?`` percent-encoded before the proxy prefix is added.

Examples
--------
>>> resolve("https://proxy.com/proxy/", "http://test.com/", "img.jpg")
'https://proxy.com/proxy/http:/test.com/img.jpg'
>>> is_disallowed_protocol("javascript://alert(1)")
True
"""

import logging
import re
from urllib.parse import urljoin

logger = logging.getLogger(__name__)

TRANSPARENT_GIF_DATA = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP"

STARTS_WITH_PROTOCOL = re.compile(r"^([a-z][a-z0-9+.\-]*)://", re.IGNORECASE)
EXPECTED_PROTOCOL = re.compile(r"^(https?|data)://", re.IGNORECASE)
SCHEME_SEPARATOR = re.compile(r"([a-z][a-z0-9+.\-]*)://", re.IGNORECASE)
PROTOCOL_RELATIVE_URL = re.compile(r"^//")
ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)
# browsers drop these before reading the scheme, as urllib.parse does
LEADING_C0_OR_SPACE = re.compile(r"^[\x00-\x20]+")
UNSAFE_URL_BYTES = re.compile(r"[\t\r\n]")


def is_disallowed_protocol(url: str) -> bool:
    url = UNSAFE_URL_BYTES.sub("", LEADING_C0_OR_SPACE.sub("", url))
    return bool(STARTS_WITH_PROTOCOL.match(url)) and not EXPECTED_PROTOCOL.match(url)


def is_absolute_or_protocol_relative(url: str) -> bool:
    return bool(ABSOLUTE_URL.match(url) or PROTOCOL_RELATIVE_URL.match(url))


def expand_url(base_url: str, url: str) -> str:
    return urljoin(base_url, url)


def remove_one_slash(url: str) -> str:
    return SCHEME_SEPARATOR.sub(r"\1:/", url, count=1)


def resolve(proxy_url: str, base_url: str, url: str) -> str:
    expanded = expand_url(base_url, url)
    return proxy_url + remove_one_slash(expanded).replace("?", "%3F", 1)


def rewrite_url(
    url: str, proxy_url: str, base_url: str, replace_all: bool = True
) -> str:
    """Return the value that should replace ``url`` in the document.

    Disallowed protocols always become the transparent GIF placeholder.
    Allowed URLs are proxied, or returned unchanged when ``replace_all`` is
    false.
    """
    if is_disallowed_protocol(url):
        logger.debug("replacing url with disallowed protocol: %s", url)
        return TRANSPARENT_GIF_DATA
    if not replace_all:
        return url
    return resolve(proxy_url, base_url, url)
