"""
Export utilities for generated morphologies.

This module provides the file naming convention and the functions that turn
point sequences into SWC files and reports.

An SWC file is only written after every line has been rendered, and nothing
is written when generation fails.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from pathlib import Path
import json
import logging

from dendrogen_policies import OutputPolicy, OperationReport, validate_policy

from ..core.swc import SWCPoint, format_swc_line, format_value
from ..specs.topology_spec import TopologySpec, LinearCableSpec
from .generate import generate_morphology

logger = logging.getLogger(__name__)

SWC_SUFFIX = ".swc"
REPORT_SUFFIX = ".report.json"


def default_filename(spec: TopologySpec, base_name: Optional[str] = None) -> str:
    """
    File name embedding the defining parameters of a topology.

    - linear cable: ``<base>_r0=<r0>_r1=<r1>_l0=<length>_n=<n>.swc``
    - every angle-based topology: ``<base>_angle=<angle>.swc``

    Parameters
    ----------
    spec : TopologySpec
        Topology specification
    base_name : str, optional
        Leading part of the name. Defaults to the topology's own base name
        (``bended_cable``, ``zigzag_cable``, ...).

    Returns
    -------
    str
        File name with ``.swc`` suffix
    """
    base = base_name or spec.DEFAULT_BASENAME
    if isinstance(spec, LinearCableSpec):
        return (
            f"{base}_r0={format_value(spec.start_radius)}"
            f"_r1={format_value(spec.end_radius)}"
            f"_l0={format_value(spec.length)}"
            f"_n={format_value(spec.point_count)}{SWC_SUFFIX}"
        )
    angle = getattr(spec, "branch_angle", None)
    if angle is None:
        angle = spec.bend_angle
    return f"{base}_angle={format_value(angle)}{SWC_SUFFIX}"


def render_swc(points: Sequence[SWCPoint]) -> List[str]:
    """Render points as SWC lines, one per point, in the given order."""
    return [format_swc_line(p) for p in points]


def write_swc(
    points: Sequence[SWCPoint],
    path: Union[str, Path],
    overwrite: bool = True,
) -> Path:
    """
    Write points to an SWC file.

    Parameters
    ----------
    points : sequence of SWCPoint
        Points in file order
    path : str or Path
        Target file
    overwrite : bool
        If False, refuse to replace an existing file

    Returns
    -------
    Path
        Path to the saved file
    """
    path = Path(path)
    if not overwrite and path.exists():
        raise FileExistsError(f"Refusing to overwrite existing file {path}")

    text = "".join(f"{line}\n" for line in render_swc(points))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(text)

    logger.info(f"Saved SWC to {path}")
    return path


def write_json(data: Union[Dict[str, Any], OperationReport], path: Union[str, Path]) -> Path:
    """
    Write JSON data to file.

    Parameters
    ----------
    data : dict or OperationReport
        Data to write (converted to dict if OperationReport)
    path : str or Path
        Target file

    Returns
    -------
    Path
        Path to the saved file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if hasattr(data, "to_dict"):
        data = data.to_dict()

    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Saved JSON to {path}")
    return path


def save_morphology(
    spec: TopologySpec,
    base_name: Optional[str] = None,
    output_policy: Optional[OutputPolicy] = None,
) -> Tuple[Path, OperationReport]:
    """
    Generate a morphology and save it as an SWC file.

    Parameters
    ----------
    spec : TopologySpec
        Topology specification
    base_name : str, optional
        Leading part of the file name (see ``default_filename``)
    output_policy : OutputPolicy, optional
        Policy controlling output location, reports and overwriting

    Returns
    -------
    path : Path
        Path to the written SWC file
    report : OperationReport
        Generation and export report

    Raises
    ------
    MorphologyError
        If the specification is rejected; no file is written in that case
    """
    if output_policy is None:
        output_policy = OutputPolicy()

    policy_errors = validate_policy(output_policy, required_fields=["output_dir"])
    if policy_errors:
        raise ValueError(f"Invalid output policy: {'; '.join(policy_errors)}")

    result = generate_morphology(spec)
    points = result.unwrap()

    report = OperationReport(
        operation="save_morphology",
        requested_policy={"topology": spec.to_dict(), "output": output_policy.to_dict()},
    )
    report.merge(result.metadata["report"])

    output_path = Path(output_policy.output_dir) / default_filename(spec, base_name)
    write_swc(points, output_path, overwrite=output_policy.overwrite)
    report.effective_policy = {"swc_path": str(output_path)}

    if output_policy.save_reports:
        report_path = output_path.with_name(output_path.name[: -len(SWC_SUFFIX)] + REPORT_SUFFIX)
        report.effective_policy["report_path"] = str(report_path)
        write_json(report, report_path)

    return output_path, report


__all__ = [
    "SWC_SUFFIX",
    "REPORT_SUFFIX",
    "default_filename",
    "render_swc",
    "write_swc",
    "write_json",
    "save_morphology",
]
