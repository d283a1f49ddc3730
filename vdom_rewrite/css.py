import logging
import re

from vdom_rewrite.url import rewrite_url

logger = logging.getLogger(__name__)

# e.g. "url(  /img/1.jpg  )", "url('a.png')"
CSS_URL_MATCHER = re.compile(r"""url\(\s*['"]?(.+?)['"]?\s*\)""")


def css_urls(text: str) -> list[str]:
    return [m.group(1) for m in CSS_URL_MATCHER.finditer(text)]


def rewrite_inline_css(
    text: str, proxy_url: str, base_url: str, replace_all: bool = True
) -> str:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rewriting css urls: %s", css_urls(text))

    def _replace(match: re.Match[str]) -> str:
        url = rewrite_url(match.group(1), proxy_url, base_url, replace_all)
        return f"url('{url}')"

    return CSS_URL_MATCHER.sub(_replace, text)
