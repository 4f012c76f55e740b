# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HierarchyNode - a generic in-memory tree container.

Each node owns an ordered list of child nodes and carries a generated
unique id plus optional caller-defined metadata. All lookups and mutations
are addressed by id and work on the subtree rooted at the receiver.

Key Features:
    - **Id addressing**: find, attach below and remove nodes by id
    - **Insertion order**: children keep the order they were added in
    - **Generic fold**: ``traverse`` reduces the subtree in pre-order
    - **Opaque metadata**: any payload, never inspected by the container
    - **Pluggable ids**: inject an id factory for deterministic trees

Missing ids are reported with ``None`` or ``False``, never raised.
Walking, searching and removing use an explicit stack, so very deep trees
do not hit the interpreter recursion limit.

Example:
    Basic usage::

        root = HierarchyNode({'name': 'root'})
        a = HierarchyNode({'name': 'a'})
        b = HierarchyNode({'name': 'b'})
        root.add_node(a)
        root.add_node_to_node(a.id, b)

        root.get_node_by_id(b.id) is b          # True
        root.get_parent_node_id(b.id) == a.id   # True
        root.traverse(lambda n, _: n + 1, 0)    # 3

        root.remove_node_by_id(a.id)            # True, b goes with it
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from .exceptions import CycleError, DuplicateNodeError
from .ids import IdFactory, generate_unique_id

logger = logging.getLogger(__name__)

T = TypeVar('T')
P = TypeVar('P')
R = TypeVar('R')


class HierarchyNode(Generic[T]):
    """A node of a rooted tree owning its children.

    Attributes:
        parent_id: Id of the node this one was last attached to with
            ``add_node``, or None. It is not cleared when the node is
            removed from its parent, only overwritten on reattachment.
        children: Child nodes in insertion order.
        metadata: Caller payload, None when not given.

    Example:
        >>> root = HierarchyNode('root')
        >>> child = HierarchyNode('child')
        >>> root.add_node(child)
        >>> child.parent_id == root.id
        True
        >>> root.get_node_by_id(child.id) is child
        True
    """

    __slots__ = ('_id', 'parent_id', 'children', 'metadata', '_strict')

    def __init__(
        self,
        metadata: T | None = None,
        *,
        id_factory: IdFactory | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize a detached, childless node.

        Args:
            metadata: Optional payload attached to the node.
            id_factory: Zero-argument callable returning a new id. Defaults
                to the shared generator in ``hierarchy_node.ids``.
            strict: If True, ``add_node`` and ``add_node_to_node`` called on
                this node reject cycles and double attachment by raising
                instead of trusting the caller.
        """
        factory = id_factory if id_factory is not None else generate_unique_id
        self._id: str = factory()
        self.parent_id: str | None = None
        self.children: list[HierarchyNode[Any]] = []
        self.metadata: T | None = metadata
        self._strict = strict

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return (
            f"HierarchyNode(id={self._id!r}, children={len(self.children)}, "
            f"metadata={self.metadata!r})"
        )

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[HierarchyNode[Any]]:
        """Iterate over direct children in insertion order."""
        return iter(self.children)

    def __contains__(self, target_id: object) -> bool:
        """Check if a node with target_id exists in this subtree."""
        return isinstance(target_id, str) and self.get_node_by_id(target_id) is not None

    # ==================== Properties ====================

    @property
    def id(self) -> str:
        """The node's unique id, fixed at construction."""
        return self._id

    @property
    def internal_id(self) -> str:
        """Alias for ``id``."""
        return self._id

    @property
    def strict(self) -> bool:
        """True if attachments through this node are validated."""
        return self._strict

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return not self.children

    @property
    def is_branch(self) -> bool:
        """True if the node has at least one child."""
        return bool(self.children)

    @property
    def size(self) -> int:
        """Number of nodes in this subtree, the receiver included."""
        return self.traverse(lambda count, _node: count + 1, 0)

    # ==================== Mutation ====================

    def add_node(self, node: HierarchyNode[Any]) -> None:
        """Append node as the last child and record this node as its parent.

        Args:
            node: The child to attach. Its prior attachment state is not
                checked unless this node is strict.

        Raises:
            CycleError: Strict mode only, if node is this node or one of
                its ancestors.
            DuplicateNodeError: Strict mode only, if node is already in
                this subtree. Only duplicates within this node's subtree are
                detected; an attachment elsewhere in a larger tree is not
                seen, since parent_id can be stale.
        """
        if self._strict:
            self._check_attachable(self, node)
        node.parent_id = self._id
        self.children.append(node)
        logger.debug("Attached node %s under %s", node._id, self._id)

    def add_node_to_node(self, target_id: str, node: HierarchyNode[Any]) -> bool:
        """Attach node as the last child of the node with target_id.

        Args:
            target_id: Id of the new parent, searched in this subtree.
            node: The child to attach.

        Returns:
            True if the parent was found and node attached, False otherwise
            (nothing is mutated in that case).

        Raises:
            CycleError: See ``add_node``; checked when this node is strict.
            DuplicateNodeError: See ``add_node``; checked when this node is
                strict.
        """
        parent = self.get_node_by_id(target_id)
        if parent is None:
            return False
        if self._strict:
            self._check_attachable(parent, node)
        parent.add_node(node)
        return True

    def remove_node_by_id(self, target_id: str) -> bool:
        """Remove the first descendant with target_id, with its whole subtree.

        Descendants are scanned in pre-order: each child is compared before
        its own subtree is searched, siblings left to right. The receiver is
        never compared, a node cannot remove itself.

        The removed node keeps its ``parent_id``.

        Args:
            target_id: Id of the node to remove.

        Returns:
            True if a node was removed, False if target_id is not in the
            subtree below the receiver.
        """
        stack = [(self, i) for i in reversed(range(len(self.children)))]
        while stack:
            parent, index = stack.pop()
            child = parent.children[index]
            if child._id == target_id:
                del parent.children[index]
                logger.debug("Removed node %s from %s", target_id, parent._id)
                return True
            stack.extend((child, i) for i in reversed(range(len(child.children))))
        return False

    def _check_attachable(self, parent: HierarchyNode[Any], node: HierarchyNode[Any]) -> None:
        """Raise if attaching node under parent would break the tree shape."""
        if any(n is parent for n in node.walk()):
            logger.debug("Rejected attaching %s under %s: cycle", node._id, parent._id)
            raise CycleError(
                f"Cannot attach node {node._id!r} under {parent._id!r}: "
                f"it would become its own descendant"
            )
        if any(n is node for n in self.walk()):
            logger.debug("Rejected attaching %s under %s: duplicate", node._id, parent._id)
            raise DuplicateNodeError(
                f"Node {node._id!r} is already attached in the tree of {self._id!r}"
            )

    # ==================== Lookup ====================

    def get_node_by_id(self, target_id: str) -> HierarchyNode[Any] | None:
        """Find a node by id with a pre-order search of this subtree.

        The receiver is checked first, then each child subtree in order.

        Args:
            target_id: Id to look for.

        Returns:
            The first matching node, or None.
        """
        for node in self.walk():
            if node._id == target_id:
                return node
        return None

    def get_parent_node_id(self, target_id: str) -> str | None:
        """Return the recorded parent id of the node with target_id.

        Returns:
            The parent id, or None if the node is not found or was never
            attached.
        """
        target = self.get_node_by_id(target_id)
        if target is None or not target.parent_id:
            return None
        return target.parent_id

    # ==================== Callbacks ====================

    def run_custom_function(
        self, callback: Callable[[HierarchyNode[T], P], R], params: P
    ) -> R:
        """Call ``callback(self, params)`` and return its result."""
        return callback(self, params)

    def run_function_on_node(
        self,
        target_id: str,
        callback: Callable[[HierarchyNode[Any], P], Any],
        params: P,
    ) -> bool:
        """Run callback on the node with target_id.

        The callback's return value is discarded. Use ``get_node_by_id``
        followed by ``run_custom_function`` when the result is needed.

        Args:
            target_id: Id of the node to run the callback on.
            callback: Called as ``callback(node, params)``.
            params: Passed through to the callback.

        Returns:
            True if the node was found and the callback ran, False otherwise
            (the callback is not invoked).
        """
        target = self.get_node_by_id(target_id)
        if target is None:
            return False
        target.run_custom_function(callback, params)
        return True

    # ==================== Traversal ====================

    def walk(self) -> Iterator[HierarchyNode[Any]]:
        """Yield every node of this subtree in pre-order.

        A node is yielded before its descendants, children left to right,
        each child subtree exhausted before the next sibling. Child lists are
        read live: a sibling removed before its turn is not yielded, one
        appended before its turn is.

        Example:
            >>> [n.metadata for n in root.walk()]
            ['root', 'a', 'a1', 'b']
        """
        stack: list[Iterator[HierarchyNode[Any]]] = [iter((self,))]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue
            yield node
            stack.append(iter(node.children))

    def traverse(
        self,
        reducer: Callable[[R, HierarchyNode[Any]], R],
        initial_value: R,
    ) -> R:
        """Fold reducer over this subtree in pre-order.

        Args:
            reducer: Called as ``reducer(accumulator, node)`` for each node,
                returning the new accumulator.
            initial_value: Starting accumulator.

        Returns:
            The accumulator after every node has been visited once.

        Example:
            >>> root.traverse(lambda acc, n: acc + [n.id], [])
        """
        accumulator = initial_value
        for node in self.walk():
            accumulator = reducer(accumulator, node)
        return accumulator
