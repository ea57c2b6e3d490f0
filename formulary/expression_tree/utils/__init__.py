"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, collect_subtree_patterns,
    find_nodes_by_type, get_variable_names, get_variable_usage_counts,
    apply_to_all_nodes, clone_tree, get_constants, get_variables
)

__all__ = [
    'SymPyConverter', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'collect_subtree_patterns',
    'find_nodes_by_type', 'get_variable_names', 'get_variable_usage_counts',
    'apply_to_all_nodes', 'clone_tree', 'get_constants', 'get_variables'
]
