from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, MutableMapping, TypeAlias

Props: TypeAlias = MutableMapping[str, Any]


@dataclass(slots=True)
class VText:
    text: str


@dataclass(slots=True, frozen=True)
class VNode:
    tag: str
    props: Props
    children: list["VDom"]

    def is_tag(self, tag: str) -> bool:
        return self.tag.lower() == tag.lower()


VDom = VNode | VText


class PatchKind(IntEnum):
    NONE = 0
    VTEXT = 1
    VNODE = 2
    WIDGET = 3
    PROPS = 4
    ORDER = 5
    INSERT = 6
    REMOVE = 7
    THUNK = 8


@dataclass(slots=True, frozen=True)
class PatchText:
    value: VText | None


@dataclass(slots=True, frozen=True)
class PatchNode:
    node: VDom | None


@dataclass(slots=True, frozen=True)
class PatchProps:
    props: Props | None
    previous: Props | None = None


@dataclass(slots=True, frozen=True)
class PatchInsert:
    node: VDom | None


@dataclass(slots=True, frozen=True)
class PatchRemove:
    ...


@dataclass(slots=True, frozen=True)
class PatchOther:
    kind: int
    payload: Any = None
    secondary: Any = None


Patch = PatchText | PatchNode | PatchProps | PatchInsert | PatchRemove | PatchOther


@dataclass(slots=True)
class SerializedPatch:
    patches: dict[int, list[Patch]] = field(default_factory=dict)
    reference: VNode | None = None

    def indices(self) -> list[int]:
        return sorted(self.patches)


def el(
    tag: str,
    props: Props | None = None,
    children: list[VDom | str] | None = None,
) -> VNode:
    if props is None:
        props = {}
    return VNode(
        tag=tag,
        props=props,
        children=[text(c) if isinstance(c, str) else c for c in children or []],
    )


def text(value: str) -> VText:
    return VText(text=value)
