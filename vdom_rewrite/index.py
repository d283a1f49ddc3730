"""Pre-order numbering of a virtual tree.

Every node, text nodes included, gets the index at which a depth-first,
node-before-children walk reaches it::

    html (0)
      head (1)
        base (2)
        title (3)
          "text" (4)
        link (5)
      body (6)
        h1 (7)
          "text" (8)

Serialized patches are keyed with the same numbering, which is what lets a
patch entry be traced back to the node it was computed against.
"""

from collections import deque
from typing import Iterator

from vdom_rewrite.vdom import VDom, VNode


def walk(tree: VDom) -> Iterator[tuple[int, VDom]]:
    stack: list[VDom] = [tree]
    index = 0
    while stack:
        node = stack.pop()
        yield (index, node)
        index += 1
        if isinstance(node, VNode):
            stack.extend(reversed(node.children))


def walk_with_parent(tree: VDom) -> Iterator[tuple[int, VDom, VNode | None]]:
    stack: list[tuple[VDom, VNode | None]] = [(tree, None)]
    index = 0
    while stack:
        (node, parent) = stack.pop()
        yield (index, node, parent)
        index += 1
        if isinstance(node, VNode):
            stack.extend((child, node) for child in reversed(node.children))


def index_of(tree: VDom, node: VDom) -> int:
    for i, n in walk(tree):
        if n is node:
            return i
    return -1


def node_at(tree: VDom, index: int) -> VDom | None:
    if index < 0:
        return None
    for i, n in walk(tree):
        if i == index:
            return n
    return None


def parent_at(tree: VDom, index: int) -> VNode | None:
    if index < 0:
        return None
    for i, _, parent in walk_with_parent(tree):
        if i == index:
            return parent
    return None


def find_node_of_type(tree: VDom, tag: str) -> VNode | None:
    nodes: deque[VDom] = deque([tree])
    while nodes:
        current = nodes.popleft()
        if isinstance(current, VNode):
            if current.is_tag(tag):
                return current
            nodes.extend(current.children)
    return None
