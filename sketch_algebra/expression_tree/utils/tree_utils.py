"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. Nodes are immutable,
so everything here is read-only.
"""

from typing import List, Set, Type, TypeVar

from ..core.node import (
    Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode, SqrtNode
)

T = TypeVar('T', bound=Node)


def _children(node: Node) -> List[Node]:
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    if isinstance(node, UnaryOpNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first traversal (recursive)"""
    nodes = [node]
    for child in _children(node):
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)"""
    children = _children(node)
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_class: Type[T]) -> List[T]:
    return [n for n in get_all_nodes(node) if isinstance(n, node_class)]


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, ConstantNode)


def get_variables(node: Node) -> Set[str]:
    return {n.name for n in find_nodes_by_type(node, VariableNode)}


def count_sqrt_branches(node: Node) -> int:
    """Upper bound on the number of candidates ``simplify`` can return.

    Each two-valued root doubles the count and binary nodes multiply the
    counts of their children.
    """
    if isinstance(node, SqrtNode):
        return 2 * count_sqrt_branches(node.operand)
    branches = 1
    for child in _children(node):
        branches *= count_sqrt_branches(child)
    return branches
