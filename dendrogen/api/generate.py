"""
Generation API for synthetic morphologies.

``build_morphology`` dispatches a topology specification to its builder and
raises on invalid input. ``generate_morphology`` wraps the same call in an
OperationResult so callers can branch on success without handling
exceptions; it never terminates the process.
"""

from typing import Any, Callable, Dict, Tuple, Type, Union
import logging

from dendrogen_policies import OperationReport
from swc_validity import run_all_tree_checks

from ..core.errors import MorphologyError
from ..core.result import OperationResult
from ..core.swc import SWCPoint
from ..ops import build_linear_cable, build_bent_cable, build_zigzag_cable, build_two_way_branch
from ..specs.topology_spec import (
    TopologySpec,
    LinearCableSpec,
    TwoWayBranchSpec,
    BentCableSpec,
    ZigZagCableSpec,
)

logger = logging.getLogger(__name__)

BUILDERS: Dict[Type[TopologySpec], Callable[[Any], Tuple[SWCPoint, ...]]] = {
    LinearCableSpec: build_linear_cable,
    TwoWayBranchSpec: build_two_way_branch,
    BentCableSpec: build_bent_cable,
    ZigZagCableSpec: build_zigzag_cable,
}


def _coerce_spec(spec: Union[TopologySpec, Dict[str, Any]]) -> TopologySpec:
    if isinstance(spec, dict):
        return TopologySpec.from_dict(spec)
    return spec


def build_morphology(spec: Union[TopologySpec, Dict[str, Any]]) -> Tuple[SWCPoint, ...]:
    """
    Build the point sequence for a topology.

    Parameters
    ----------
    spec : TopologySpec or dict
        Topology specification, or its dictionary form with a ``type`` key

    Returns
    -------
    tuple of SWCPoint
        Points in file order

    Raises
    ------
    UnknownMethodError
        If the dictionary names an unknown topology type
    InvalidParameterError
        If the parameters are inconsistent
    """
    spec = _coerce_spec(spec)
    builder = BUILDERS.get(type(spec))
    if builder is None:
        raise TypeError(f"No builder registered for {type(spec).__name__}")
    return builder(spec)


def generate_morphology(spec: Union[TopologySpec, Dict[str, Any]]) -> OperationResult:
    """
    Build a morphology and report the outcome as a tagged result.

    The generated points are checked structurally; a failed check turns the
    result into a failure.

    Parameters
    ----------
    spec : TopologySpec or dict
        Topology specification

    Returns
    -------
    OperationResult
        Success with ``points`` and a ``report`` entry in ``metadata``, or
        failure with the error that stopped generation
    """
    report = OperationReport(operation="generate_morphology")

    try:
        spec = _coerce_spec(spec)
        report.operation = f"generate_{spec.TYPE}"
        report.requested_policy = spec.to_dict()
        points = build_morphology(spec)
    except MorphologyError as e:
        report.add_error(str(e))
        logger.warning(f"Morphology generation failed: {e}")
        return OperationResult.failure(str(e), error=e, metadata={"report": report})

    tree_report = run_all_tree_checks(points)
    for check in tree_report.checks:
        for warning in check.warnings:
            report.add_warning(warning)
        if not check.passed:
            report.add_error(f"{check.check_name}: {check.message}")

    positions = {p.id: p.position for p in points}
    cable_length = sum(
        p.position.distance_to(positions[p.parent_id])
        for p in points
        if p.parent_id in positions
    )

    report.metrics = {
        "point_count": len(points),
        "root_count": sum(1 for p in points if p.is_root),
        "cable_length": cable_length,
        "tree_check_status": tree_report.status,
        "tree_check_summary": tree_report.summary,
    }

    if not tree_report.passed:
        message = f"Generated {spec.TYPE} failed structural checks"
        logger.warning(message)
        return OperationResult.failure(
            message,
            error=MorphologyError(message),
            metadata={"report": report},
        )

    logger.info(f"Generated {spec.TYPE} with {len(points)} points")
    return OperationResult.success(
        f"Generated {spec.TYPE} with {len(points)} points",
        points=points,
        metadata={"report": report},
        warnings=list(report.warnings),
    )


__all__ = [
    "BUILDERS",
    "build_morphology",
    "generate_morphology",
]
