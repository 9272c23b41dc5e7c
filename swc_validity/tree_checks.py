"""
Structural checks for generated SWC point sequences.

An SWC file is a forward-only serialization of a tree: exactly one root,
ids numbered 1..N without gaps, and every parent written before its children.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Sequence, TYPE_CHECKING
import networkx as nx

if TYPE_CHECKING:
    from dendrogen.core.swc import SWCPoint

ROOT_PARENT_ID = -1


@dataclass
class TreeCheckResult:
    """Result of a single structural check."""
    passed: bool
    check_name: str
    message: str
    details: Dict[str, Any]
    warnings: List[str]


@dataclass
class TreeCheckReport:
    """Aggregated report of all structural checks."""
    passed: bool
    status: str  # "ok", "warnings", "fail"
    checks: List[TreeCheckResult]
    summary: Dict[str, Any]


def check_single_root(points: Sequence["SWCPoint"]) -> TreeCheckResult:
    """
    Check that exactly one point has the root parent id (-1).

    Parameters
    ----------
    points : sequence of SWCPoint
        Points in file order

    Returns
    -------
    TreeCheckResult
        Result with pass/fail status and the root ids found
    """
    root_ids = [p.id for p in points if p.parent_id == ROOT_PARENT_ID]
    passed = len(root_ids) == 1
    return TreeCheckResult(
        passed=passed,
        check_name="single_root",
        message=f"Found {len(root_ids)} root point(s)",
        details={"root_ids": root_ids},
        warnings=[],
    )


def check_contiguous_ids(points: Sequence["SWCPoint"]) -> TreeCheckResult:
    """
    Check that ids run 1, 2, ..., N in file order.
    """
    mismatches = [
        {"position": index, "expected": index + 1, "found": p.id}
        for index, p in enumerate(points)
        if p.id != index + 1
    ]
    passed = not mismatches
    return TreeCheckResult(
        passed=passed,
        check_name="contiguous_ids",
        message="Ids are contiguous" if passed else f"{len(mismatches)} id(s) out of sequence",
        details={"point_count": len(points), "mismatches": mismatches[:10]},
        warnings=[],
    )


def check_parent_precedes_child(points: Sequence["SWCPoint"]) -> TreeCheckResult:
    """
    Check that every parent id refers to a point written earlier.
    """
    seen = set()
    violations = []
    for p in points:
        if p.parent_id != ROOT_PARENT_ID and p.parent_id not in seen:
            violations.append({"id": p.id, "parent_id": p.parent_id})
        seen.add(p.id)

    passed = not violations
    return TreeCheckResult(
        passed=passed,
        check_name="parent_precedes_child",
        message="All parents precede their children" if passed
        else f"{len(violations)} point(s) reference a later or missing parent",
        details={"violations": violations[:10]},
        warnings=[],
    )


def check_is_tree(points: Sequence["SWCPoint"]) -> TreeCheckResult:
    """
    Check that the parent links form a single rooted tree.

    Builds a directed parent -> child graph and tests it for being an
    arborescence (connected, acyclic, one parent per non-root node).
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(p.id for p in points)
    for p in points:
        if p.parent_id != ROOT_PARENT_ID:
            graph.add_edge(p.parent_id, p.id)

    warnings = []
    if graph.number_of_nodes() == 0:
        passed = False
        message = "Empty structure"
    else:
        passed = nx.is_arborescence(graph)
        message = "Parent links form a tree" if passed else "Parent links do not form a tree"

    # Points with more than one child mark branching points.
    branching_ids = sorted(n for n, degree in graph.out_degree() if degree > 1)
    leaf_ids = sorted(n for n, degree in graph.out_degree() if degree == 0)
    if len(points) > 0 and len(branching_ids) > 1:
        warnings.append(f"{len(branching_ids)} branching points found")

    return TreeCheckResult(
        passed=passed,
        check_name="is_tree",
        message=message,
        details={
            "node_count": graph.number_of_nodes(),
            "edge_count": graph.number_of_edges(),
            "branching_point_ids": branching_ids,
            "tip_count": len(leaf_ids),
        },
        warnings=warnings,
    )


def run_all_tree_checks(points: Sequence["SWCPoint"]) -> TreeCheckReport:
    """
    Run all structural checks.

    Parameters
    ----------
    points : sequence of SWCPoint
        Points in file order

    Returns
    -------
    TreeCheckReport
        Aggregated report with all check results
    """
    checks = [
        check_single_root(points),
        check_contiguous_ids(points),
        check_parent_precedes_child(points),
        check_is_tree(points),
    ]

    all_passed = all(c.passed for c in checks)
    has_warnings = any(len(c.warnings) > 0 for c in checks)

    if all_passed and not has_warnings:
        status = "ok"
    elif all_passed:
        status = "warnings"
    else:
        status = "fail"

    summary = {
        "total_checks": len(checks),
        "passed_checks": sum(1 for c in checks if c.passed),
        "failed_checks": sum(1 for c in checks if not c.passed),
        "total_warnings": sum(len(c.warnings) for c in checks),
    }

    return TreeCheckReport(
        passed=all_passed,
        status=status,
        checks=checks,
        summary=summary,
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
