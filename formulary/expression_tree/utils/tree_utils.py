"""
Tree Utility Functions

Traversal and query helpers for expression trees. Everything here walks
the tree through Node.get_child_nodes() or the visitor protocol, so it
works for every node kind without per-kind branches.
"""

from typing import List, Dict, Set, Optional, Any, Callable, cast
from collections import Counter

from ..core.node import Node, ConstantNode, VariableNode
from ..visitor import ExpressionNodeVisitor


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
        nodes_to_visit.extend(current_node.get_child_nodes())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.get_child_nodes():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree without recursion.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current_node.get_child_nodes():
            stack.append((child, depth + 1))
    return max_depth


def collect_subtree_patterns(node: Node) -> List[str]:
    """
    Collect string representations of all subtrees in pre-order.

    Args:
        node: Root node of the tree

    Returns:
        List of subtree string representations
    """
    return [n.to_string() for n in get_all_nodes(node, 'depth_first')]


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific class in the tree.

    Args:
        node: Root node of the tree
        node_type: Class of nodes to find (e.g., ConstantNode, VariableNode)

    Returns:
        List of nodes matching the specified class
    """
    all_nodes = get_all_nodes(node)
    return [n for n in all_nodes if isinstance(n, node_type)]


class _VariableNameCollector(ExpressionNodeVisitor):

    def __init__(self):
        self.names: Set[str] = set()

    def visit_variable(self, node):
        self.names.add(node.name)


def get_variable_names(node: Node) -> Set[str]:
    """Names of all variables in the tree."""
    collector = _VariableNameCollector()
    node.accept_recursive(collector)
    return collector.names


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """
    Count the usage frequency of each variable in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Dictionary mapping variable names to their usage counts
    """
    return dict(Counter(v.name for v in get_variables(node)))


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any],
                      filter_type: Optional[type] = None) -> List[Any]:
    """
    Apply a function to all nodes (optionally filtered by type).

    Args:
        node: Root node of the tree
        func: Function to apply to each node
        filter_type: Optional type filter (only apply to nodes of this type)

    Returns:
        List of function results
    """
    all_nodes = get_all_nodes(node)

    if filter_type is not None:
        all_nodes = [n for n in all_nodes if isinstance(n, filter_type)]

    return [func(n) for n in all_nodes]


def clone_tree(node: Node) -> Node:
    """Create a deep copy of the entire tree."""
    return node.clone()


# Convenience functions for common operations
def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))
