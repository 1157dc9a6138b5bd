"""Pre-order traversal of a system_profiler node tree."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from usb_inspector.field_aliases import NAME_KEYS
from usb_inspector.node_fields import RawNode, children_of, first_string

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
PATH_SEPARATOR = " > "


@dataclass(frozen=True)
class WalkedNode:
    """A node paired with the names of its ancestors and itself."""

    node: RawNode
    path: tuple[str, ...]

    @property
    def path_description(self) -> str:
        """Ancestor names joined for display."""
        return PATH_SEPARATOR.join(self.path)


def walk_tree(
    roots: Iterable[RawNode], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[WalkedNode]:
    """Flatten every root's subtree, parents before children.

    A node without a name adds no path segment; its children inherit the
    path as it stands. Nodes nested deeper than ``max_depth`` are dropped.
    """
    walked: list[WalkedNode] = []
    for root in roots:
        _walk(root, (), 0, max_depth, set(), walked)
    return walked


def _walk(
    node: RawNode,
    ancestors: tuple[str, ...],
    depth: int,
    max_depth: int,
    active: set[int],
    walked: list[WalkedNode],
) -> None:
    if depth >= max_depth:
        logger.warning("Depth limit %d reached under %r", max_depth, ancestors)
        return
    if id(node) in active:
        logger.warning("Skipping repeated node reference under %r", ancestors)
        return

    name = first_string(node, NAME_KEYS)
    path = (*ancestors, name) if name else ancestors
    walked.append(WalkedNode(node=node, path=path))

    active.add(id(node))
    for child in children_of(node):
        _walk(child, path, depth + 1, max_depth, active, walked)
    active.discard(id(node))
