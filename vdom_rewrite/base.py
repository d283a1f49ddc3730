"""Read and maintain the ``<base>`` element of a document tree."""

from typing import Any

from vdom_rewrite.index import find_node_of_type
from vdom_rewrite.url import is_absolute_or_protocol_relative
from vdom_rewrite.vdom import Props, VDom, VNode


def _href(props: Props) -> str:
    href = props.get("href")
    if not href:
        attributes = props.get("attributes") or {}
        href = attributes.get("href")
    return href or ""


def join_base(host: str, href: str) -> str:
    if host.endswith("/") and href.startswith("/"):
        href = href[1:]
    return host + href


def base_url(tree: VDom, host: str) -> str:
    """Return the URL every other URL in ``tree`` is relative to.

    Without a ``<base>`` element this is ``host``. An absolute or
    protocol-relative base href wins over ``host``; a relative one is
    appended to it.
    """
    base = find_node_of_type(tree, "base")
    if base is None:
        return host

    href = _href(base.props)
    if is_absolute_or_protocol_relative(href):
        return href
    return join_base(host, href)


def set_base_element(tree: VDom, href: str) -> VDom:
    """Make ``href`` the effective base of ``tree``.

    Trees without a ``<head>`` are returned untouched.
    """
    base = find_node_of_type(tree, "base")
    if base is None:
        head = find_node_of_type(tree, "head")
        if head is None:
            return tree
        tag = "BASE" if head.tag.isupper() else "base"
        head.children.insert(0, VNode(tag, {"attributes": {"href": href}}, []))
        return tree

    current = _href(base.props)
    if is_absolute_or_protocol_relative(current):
        return tree

    base.props.pop("href", None)
    attributes: dict[str, Any] = dict(base.props.get("attributes") or {})
    attributes["href"] = join_base(href, current)
    base.props["attributes"] = attributes
    return tree
