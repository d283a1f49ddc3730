"""Convert trees and patches to and from their serialized JSON form.

Elements travel as ``{"tn": tag, "p": props, "c": children}`` and text
nodes as ``{"x": text}``. A patch is an object keyed by the pre-order index
of the node each entry applies to, holding lists of ``[kind, payload,
secondary]`` operations; the reserved key ``"a"`` carries the tree the
patch was computed against.

Examples
--------
>>> patch = loads_patch(b'{"0": [[4, {"src": "a.png"}]]}')
>>> patch.patches[0]
[PatchProps(props={'src': 'a.png'}, previous=None)]
"""

from typing import Any, Mapping

import msgspec

from vdom_rewrite.config import RewriteError
from vdom_rewrite.vdom import (
    Patch,
    PatchInsert,
    PatchKind,
    PatchNode,
    PatchOther,
    PatchProps,
    PatchRemove,
    PatchText,
    SerializedPatch,
    VDom,
    VNode,
    VText,
)

REFERENCE_KEY = "a"


class PatchDecodeError(RewriteError):
    """Raised when serialized data does not describe a tree or a patch."""


def decode_node(data: Any) -> VDom:
    if not isinstance(data, Mapping):
        raise PatchDecodeError(f"expected a serialized node, got {data!r}")
    if "x" in data:
        if not isinstance(data["x"], str):
            raise PatchDecodeError(f"text node value is not a string: {data!r}")
        return VText(text=data["x"])
    if "tn" not in data:
        raise PatchDecodeError(f"serialized node has neither 'tn' nor 'x': {data!r}")

    props = data.get("p") or {}
    children = data.get("c") or []
    if not isinstance(props, Mapping) or not isinstance(children, list):
        raise PatchDecodeError(f"malformed serialized element: {data!r}")
    return VNode(
        tag=str(data["tn"]),
        props=dict(props),
        children=[decode_node(c) for c in children],
    )


def encode_node(node: VDom) -> dict[str, Any]:
    match node:
        case VText(value):
            return {"x": value}
        case VNode(tag, props, children):
            return {
                "tn": tag,
                "p": dict(props),
                "c": [encode_node(c) for c in children],
            }
        case _:
            raise TypeError(f"Unknown node: {node!r}")


def _optional_node(data: Any) -> VDom | None:
    return None if data is None else decode_node(data)


def _optional_text(data: Any) -> VText | None:
    node = _optional_node(data)
    if node is not None and not isinstance(node, VText):
        raise PatchDecodeError(f"text patch carries an element: {data!r}")
    return node


def _optional_props(data: Any) -> dict[str, Any] | None:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise PatchDecodeError(f"expected a properties map, got {data!r}")
    return dict(data)


def decode_operation(data: Any) -> Patch:
    if not isinstance(data, list) or not data or not isinstance(data[0], int):
        raise PatchDecodeError(f"malformed patch operation: {data!r}")

    kind = data[0]
    payload = data[1] if len(data) > 1 else None
    secondary = data[2] if len(data) > 2 else None
    match kind:
        case PatchKind.VTEXT:
            return PatchText(value=_optional_text(payload))
        case PatchKind.VNODE:
            return PatchNode(node=_optional_node(payload))
        case PatchKind.PROPS:
            return PatchProps(
                props=_optional_props(payload), previous=_optional_props(secondary)
            )
        case PatchKind.INSERT:
            return PatchInsert(node=_optional_node(payload))
        case PatchKind.REMOVE:
            return PatchRemove()
        case _:
            return PatchOther(kind=kind, payload=payload, secondary=secondary)


def encode_operation(patch: Patch) -> list[Any]:
    match patch:
        case PatchText(value):
            return [PatchKind.VTEXT, None if value is None else encode_node(value)]
        case PatchNode(node):
            return [PatchKind.VNODE, None if node is None else encode_node(node)]
        case PatchProps(props, None):
            return [PatchKind.PROPS, props]
        case PatchProps(props, previous):
            return [PatchKind.PROPS, props, previous]
        case PatchInsert(node):
            return [PatchKind.INSERT, None if node is None else encode_node(node)]
        case PatchRemove():
            return [PatchKind.REMOVE, None]
        case PatchOther(kind, payload, None):
            return [kind, payload]
        case PatchOther(kind, payload, secondary):
            return [kind, payload, secondary]
        case _:
            raise TypeError(f"Unknown patch: {patch!r}")


def decode_patch(data: Any) -> SerializedPatch:
    if not isinstance(data, Mapping):
        raise PatchDecodeError(f"expected a serialized patch, got {data!r}")

    result = SerializedPatch()
    for key, operations in data.items():
        if key == REFERENCE_KEY:
            if operations is None:
                continue
            reference = decode_node(operations)
            if not isinstance(reference, VNode):
                raise PatchDecodeError("reference tree must be an element")
            result.reference = reference
            continue

        try:
            index = int(key)
        except (TypeError, ValueError) as exc:
            raise PatchDecodeError(f"invalid patch index: {key!r}") from exc
        if index < 0 or not isinstance(operations, list):
            raise PatchDecodeError(f"malformed patch entry at {key!r}")
        result.patches[index] = [decode_operation(op) for op in operations]
    return result


def encode_patch(patches: SerializedPatch) -> dict[str, Any]:
    data: dict[str, Any] = {
        str(index): [encode_operation(p) for p in patches.patches[index]]
        for index in patches.indices()
    }
    if patches.reference is not None:
        data[REFERENCE_KEY] = encode_node(patches.reference)
    return data


def _decode_json(raw: bytes | str) -> Any:
    try:
        return msgspec.json.decode(raw)
    except msgspec.DecodeError as exc:
        raise PatchDecodeError(f"invalid JSON: {exc}") from exc


def loads_node(raw: bytes | str) -> VDom:
    return decode_node(_decode_json(raw))


def dumps_node(node: VDom) -> bytes:
    return msgspec.json.encode(encode_node(node))


def loads_patch(raw: bytes | str) -> SerializedPatch:
    return decode_patch(_decode_json(raw))


def dumps_patch(patches: SerializedPatch) -> bytes:
    return msgspec.json.encode(encode_patch(patches))
