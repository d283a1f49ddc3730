from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("vdom-rewrite")
except PackageNotFoundError:
    __version__: str = "unknown"

from . import codec
from .base import base_url, set_base_element
from .config import RewriteConfigError, RewriteError, RewriteOptions
from .css import rewrite_inline_css
from .index import find_node_of_type, index_of, node_at
from .rewrite import (
    UrlRewriter,
    rewrite_patch,
    rewrite_properties,
    rewrite_style_node,
    rewrite_tree,
)
from .url import TRANSPARENT_GIF_DATA, is_disallowed_protocol, resolve

__all__ = [
    "RewriteConfigError",
    "RewriteError",
    "RewriteOptions",
    "TRANSPARENT_GIF_DATA",
    "UrlRewriter",
    "base_url",
    "codec",
    "find_node_of_type",
    "index_of",
    "is_disallowed_protocol",
    "node_at",
    "resolve",
    "rewrite_inline_css",
    "rewrite_patch",
    "rewrite_properties",
    "rewrite_style_node",
    "rewrite_tree",
    "set_base_element",
]
