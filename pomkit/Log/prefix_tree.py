# Log/prefix_tree.py
from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class PrefixTreeNode(Generic[T]):
    """A node of :class:`PrefixTree`; children are keyed by step label."""

    def __init__(self, content: Optional[T] = None) -> None:
        self.content: Optional[T] = content
        self._children: Dict[str, PrefixTreeNode[T]] = {}

    def get_child(self, step: str) -> Optional[PrefixTreeNode[T]]:
        return self._children.get(step)

    def add_child(self, step: str, content: Optional[T] = None) -> PrefixTreeNode[T]:
        child = PrefixTreeNode(content)
        self._children[step] = child
        return child

    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def children(self) -> Dict[str, PrefixTreeNode[T]]:
        return self._children


class PrefixTree(Generic[T]):
    """
    Prefix tree over label sequences whose nodes carry arbitrary content.

    What happens to the content on insertion is decided by the caller through
    callbacks, so the same tree drives counting, cloning or any other
    per-prefix bookkeeping.

    :param root_content: Content of the root node (the empty prefix).
    :type root_content: Optional[T]
    """

    def __init__(self, root_content: Optional[T] = None) -> None:
        self._root: PrefixTreeNode[T] = PrefixTreeNode(root_content)

    @property
    def root(self) -> PrefixTreeNode[T]:
        return self._root

    def insert(
        self,
        path: Sequence[str],
        new_end_node: Callable[[PrefixTreeNode[T]], T],
        update_existing_end_node: Callable[[T, PrefixTreeNode[T]], None],
        step_reducer: Optional[
            Callable[[str, Optional[T], PrefixTreeNode[T]], None]
        ] = None,
        new_step_node: Optional[
            Callable[[str, List[str], Optional[T]], Optional[T]]
        ] = None,
    ) -> PrefixTreeNode[T]:
        """
        Insert ``path`` and report every visited node through the callbacks.

        :param path: Label sequence to insert.
        :param new_end_node: Called with the final node if it has no content;
            its return value becomes the node's content.
        :param update_existing_end_node: Called with ``(content, node)`` if the
            final node already has content.
        :param step_reducer: Called as ``(step, content, node)`` for every
            node left on the way down, after the child for ``step`` exists.
        :param new_step_node: Called as ``(step, prefix, parent_content)`` when
            a child is created; the return value becomes the child's content.
            ``prefix`` is the path up to, excluding, ``step``.
        :returns: The node at the end of ``path``.
        """
        node = self._root
        prefix: List[str] = []
        for step in path:
            child = node.get_child(step)
            if child is None:
                content = (
                    new_step_node(step, list(prefix), node.content)
                    if new_step_node is not None
                    else None
                )
                child = node.add_child(step, content)
            if step_reducer is not None:
                step_reducer(step, node.content, node)
            prefix.append(step)
            node = child

        if node.content is None:
            node.content = new_end_node(node)
        else:
            update_existing_end_node(node.content, node)
        return node
