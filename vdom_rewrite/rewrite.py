import logging
from collections import deque

from vdom_rewrite.config import RewriteOptions
from vdom_rewrite.css import rewrite_inline_css
from vdom_rewrite.index import node_at, parent_at
from vdom_rewrite.url import rewrite_url
from vdom_rewrite.vdom import (
    Patch,
    PatchInsert,
    PatchNode,
    PatchProps,
    PatchText,
    Props,
    SerializedPatch,
    VDom,
    VNode,
    VText,
)

logger = logging.getLogger(__name__)

URL_PROPERTIES = ("src", "href")


class UrlRewriter:
    _options: RewriteOptions

    def __init__(self, options: RewriteOptions) -> None:
        self._options = options

    @property
    def options(self) -> RewriteOptions:
        return self._options

    def _url(self, url: str) -> str:
        return rewrite_url(
            url,
            self._options.proxy_url,
            self._options.base_url,
            self._options.replace_all,
        )

    def _css(self, node: VText) -> None:
        node.text = rewrite_inline_css(
            node.text,
            self._options.proxy_url,
            self._options.base_url,
            self._options.replace_all,
        )

    def properties(self, props: Props | None) -> None:
        if not props:
            return
        for key in URL_PROPERTIES:
            value = props.get(key)
            if not value or not isinstance(value, str):
                continue
            props[key] = self._url(value)

    def style(self, node: VNode) -> None:
        if not node.is_tag("style") or not node.children:
            return
        match node.children[0]:
            case VText() as child:
                self._css(child)
            case _:
                pass

    def tree(self, root: VDom) -> VDom:
        nodes: deque[VDom] = deque([root])
        while nodes:
            current = nodes.popleft()
            if isinstance(current, VNode):
                self.properties(current.props)
                self.style(current)
                nodes.extend(current.children)
        return root

    def _text(self, value: VText, parent: VDom | None) -> None:
        if isinstance(parent, VNode) and parent.is_tag("style"):
            self._css(value)

    def _apply(self, reference: VNode | None, index: int, patch: Patch) -> None:
        match patch:
            case PatchProps(props):
                self.properties(props)
            case PatchNode(VNode() as node) | PatchInsert(VNode() as node):
                self.tree(node)
            case PatchText(VText() as value) | PatchNode(VText() as value):
                if reference is None:
                    logger.debug("no reference tree for text patch at %d", index)
                    return
                self._text(value, parent_at(reference, index))
            case PatchInsert(VText() as value):
                # inserts are keyed by the index of the node receiving the child
                if reference is None:
                    logger.debug("no reference tree for text insert at %d", index)
                    return
                self._text(value, node_at(reference, index))
            case _:
                pass

    def patch(self, patches: SerializedPatch) -> SerializedPatch:
        for index in patches.indices():
            for p in patches.patches[index]:
                self._apply(patches.reference, index, p)
        return patches


def rewrite_properties(
    props: Props, proxy_url: str, base_url: str, replace_all: bool = True
) -> None:
    UrlRewriter(RewriteOptions(proxy_url, base_url, replace_all)).properties(props)


def rewrite_style_node(
    node: VNode, proxy_url: str, base_url: str, replace_all: bool = True
) -> None:
    UrlRewriter(RewriteOptions(proxy_url, base_url, replace_all)).style(node)


def rewrite_tree(
    root: VDom, proxy_url: str, base_url: str, replace_all: bool = True
) -> VDom:
    return UrlRewriter(RewriteOptions(proxy_url, base_url, replace_all)).tree(root)


def rewrite_patch(
    patches: SerializedPatch, proxy_url: str, base_url: str, replace_all: bool = True
) -> SerializedPatch:
    return UrlRewriter(RewriteOptions(proxy_url, base_url, replace_all)).patch(
        patches
    )
