"""Tests for the pre-order tree walker."""

from typing import Any

from usb_inspector.walk_tree import walk_tree


def _tree() -> list[dict[str, Any]]:
    return [
        {
            "_name": "USB31Bus",
            "_items": [
                {
                    "_name": "Hub",
                    "_items": [{"_name": "Mouse"}, {"_name": "Keyboard"}],
                },
                {"_name": "Drive"},
            ],
        },
        {"_name": "USB20Bus"},
    ]


def test_walk_is_pre_order() -> None:
    """Verify parents come before children and siblings keep their order."""
    paths = [w.path for w in walk_tree(_tree())]
    assert paths == [
        ("USB31Bus",),
        ("USB31Bus", "Hub"),
        ("USB31Bus", "Hub", "Mouse"),
        ("USB31Bus", "Hub", "Keyboard"),
        ("USB31Bus", "Drive"),
        ("USB20Bus",),
    ]


def test_path_description() -> None:
    """Verify ancestor names are joined with the separator."""
    walked = walk_tree(_tree())
    assert walked[2].path_description == "USB31Bus > Hub > Mouse"


def test_unnamed_node_adds_no_segment() -> None:
    """Verify nameless nodes are visited but do not extend the path."""
    roots = [{"_name": "Bus", "_items": [{"items": [{"name": "Leaf"}]}]}]
    walked = walk_tree(roots)
    assert [w.path for w in walked] == [("Bus",), ("Bus",), ("Bus", "Leaf")]


def test_every_node_is_walked() -> None:
    """Verify the walk returns the node objects themselves."""
    roots = _tree()
    walked = walk_tree(roots)
    assert walked[0].node is roots[0]
    assert len(walked) == 6


def test_depth_limit() -> None:
    """Verify nodes below the depth limit are dropped."""
    node: dict[str, Any] = {"_name": "n5"}
    for i in range(4, -1, -1):
        node = {"_name": f"n{i}", "_items": [node]}
    walked = walk_tree([node], max_depth=3)
    assert [w.path[-1] for w in walked] == ["n0", "n1", "n2"]


def test_cycle_is_skipped() -> None:
    """Verify a node that contains itself is not walked forever."""
    node: dict[str, Any] = {"_name": "Loop"}
    node["_items"] = [node]
    walked = walk_tree([node])
    assert len(walked) == 1


def test_repeated_sibling_reference_is_walked_twice() -> None:
    """Verify the same object appearing twice outside its own subtree is kept."""
    shared = {"_name": "Shared"}
    walked = walk_tree([{"_name": "Root", "_items": [shared, shared]}])
    assert len(walked) == 3


def test_empty_roots() -> None:
    """Verify an empty forest yields nothing."""
    assert walk_tree([]) == []
