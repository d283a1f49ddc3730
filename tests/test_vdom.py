from vdom_rewrite.vdom import (
    PatchProps,
    PatchRemove,
    SerializedPatch,
    VNode,
    VText,
    el,
    text,
)


def test_construct_vdom() -> None:
    vdom = el("div", {"width": "100px"}, ["hello", el("span", {}, ["world"])])

    assert vdom.tag == "div"
    assert vdom.props == {"width": "100px"}
    assert len(vdom.children) == 2
    assert isinstance(vdom.children[0], VText)
    assert vdom.children[0].text == "hello"
    assert isinstance(vdom.children[1], VNode)
    assert vdom.children[1].tag == "span"
    assert vdom.children[1].props == {}
    assert vdom.children[1].children == [text("world")]


def test_is_tag_ignores_case() -> None:
    assert el("STYLE").is_tag("style")
    assert el("style").is_tag("STYLE")
    assert not el("div").is_tag("style")


def test_text_is_mutable() -> None:
    node = text("a")
    node.text = "b"
    assert node == VText("b")


def test_serialized_patch_indices_are_sorted() -> None:
    patch = SerializedPatch({3: [PatchRemove()], 0: [PatchProps({"src": "a"})]})

    assert patch.indices() == [0, 3]
    assert patch.reference is None
