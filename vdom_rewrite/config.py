"""Options shared by every rewrite entry point."""

from dataclasses import dataclass

from vdom_rewrite.base import base_url
from vdom_rewrite.vdom import VDom


class RewriteError(ValueError):
    """Base class for errors raised by vdom_rewrite."""


class RewriteConfigError(RewriteError):
    """Raised when rewrite options are invalid."""


@dataclass(slots=True, frozen=True)
class RewriteOptions:
    """Where rewritten URLs point and which of them get rewritten.

    ``proxy_url`` is prepended verbatim to every resolved URL, ``base_url``
    is what relative and protocol-relative URLs are resolved against. With
    ``replace_all`` false only URLs with disallowed protocols are touched.
    """

    proxy_url: str
    base_url: str
    replace_all: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.proxy_url, str) or not self.proxy_url:
            msg = f"proxy_url must be a non-empty string, got {self.proxy_url!r}"
            raise RewriteConfigError(msg)
        if not isinstance(self.base_url, str):
            msg = f"base_url must be a string, got {self.base_url!r}"
            raise RewriteConfigError(msg)

    @classmethod
    def for_tree(
        cls, tree: VDom, proxy_url: str, host: str, replace_all: bool = True
    ) -> "RewriteOptions":
        return cls(
            proxy_url=proxy_url,
            base_url=base_url(tree, host),
            replace_all=replace_all,
        )
