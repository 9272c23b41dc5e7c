"""
SWC Validity Checks

Structural checks run on generated point sequences before they are written.

Modules:
    - tree_checks: single root, contiguous ids, parent order, tree shape
"""

from .tree_checks import (
    TreeCheckResult,
    TreeCheckReport,
    check_single_root,
    check_contiguous_ids,
    check_parent_precedes_child,
    check_is_tree,
    run_all_tree_checks,
)

__all__ = [
    "TreeCheckResult",
    "TreeCheckReport",
    "check_single_root",
    "check_contiguous_ids",
    "check_parent_precedes_child",
    "check_is_tree",
    "run_all_tree_checks",
]
