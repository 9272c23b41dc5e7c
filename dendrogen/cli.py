"""
Command-Line Interface

CLI for writing synthetic dendrite morphologies as SWC files.

Examples:
    dendrogen --method constant --filename ybranch --l0 10 --l1 5 --l2 5 --d0 2 --angle 60 --n 4
    dendrogen --method linear --filename cable --r0 1 --r1 2 --l0 10 --n 5
    dendrogen --method bended --angle 45
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from dendrogen_policies import OutputPolicy, validate_policy

from .api.export import save_morphology
from .core.errors import (
    MorphologyError,
    MissingArgumentError,
    UnparsableValueError,
    UnknownMethodError,
)
from .specs.topology_spec import (
    TopologySpec,
    LinearCableSpec,
    TwoWayBranchSpec,
    BentCableSpec,
    ZigZagCableSpec,
)

logger = logging.getLogger(__name__)

METHODS = ("constant", "tapering", "rall", "linear", "bended", "zig-zag")

METHOD_HELP = """\
methods and their options:
  1. constant: --filename --l0 PARENT_LENGTH --l1 LEFT_CHILD_LENGTH --l2 RIGHT_CHILD_LENGTH
               --d0 DIAMETER --angle ANGLE --n NUM_POINTS
  2. tapering: as constant, plus --d1 DIAMETER_LEFT_CHILD_END_POINT --d2 DIAMETER_RIGHT_CHILD_END_POINT
  3. rall:     as constant without --d0, plus --d1 LEFT_CHILD_DIAMETER --d2 RIGHT_CHILD_DIAMETER
               (parent diameter is calculated)
  4. linear:   --filename --r0 START_RADIUS --r1 END_RADIUS --l0 LINEAR_CABLE_LENGTH --n NUM_POINTS
  5. bended:   --angle BENDING_ANGLE [--d0 DIAMETER] [--l0 HALF_LENGTH] [--filename]
  6. zig-zag:  --angle ZIG_ANGLE [--d0 DIAMETER] [--filename]

negative values may be written as --angle -30, --angle -1e2 or --angle=-1e2
"""

VALUE_FLAGS = ("--filename", "--angle", "--n", "--l0", "--l1", "--l2", "--d0", "--d1", "--d2", "--r0", "--r1")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser. All value flags are read as text."""
    parser = argparse.ArgumentParser(
        prog="dendrogen",
        description="Generate synthetic dendrite morphologies in SWC format",
        epilog=METHOD_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--method",
        type=str,
        default=None,
        help=f"Topology to generate ({', '.join(METHODS)})",
    )
    for flag in VALUE_FLAGS:
        parser.add_argument(flag, type=str, default=None)
    parser.add_argument(
        "--policy",
        type=str,
        default=None,
        help="JSON file with output settings (output_dir, save_reports, overwrite)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the SWC file (default: current directory)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Also write a JSON report next to the SWC file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def join_negative_values(argv: List[str]) -> List[str]:
    """
    Rewrite ``--flag -1e2`` as ``--flag=-1e2``.

    argparse only recognizes plain negative numbers such as ``-30`` as values;
    anything else starting with ``-`` is taken for an option.
    """
    joined = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if (
            token in VALUE_FLAGS
            and i + 1 < len(argv)
            and argv[i + 1].startswith("-")
            and _is_number(argv[i + 1])
        ):
            joined.append(f"{token}={argv[i + 1]}")
            i += 2
        else:
            joined.append(token)
            i += 1
    return joined


def load_output_policy(args: argparse.Namespace) -> OutputPolicy:
    """
    Output settings from ``--policy``, overridden by ``--output-dir`` and ``--report``.

    Raises
    ------
    OSError
        If the policy file cannot be read
    ValueError
        If the policy file is not valid JSON or holds invalid settings
    """
    if args.policy is not None:
        with open(args.policy, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Policy file {args.policy} must contain a JSON object")
        policy = OutputPolicy.from_dict(data)
    else:
        policy = OutputPolicy()

    if args.output_dir is not None:
        policy.output_dir = args.output_dir
    if args.report:
        policy.save_reports = True

    errors = validate_policy(policy, required_fields=["output_dir"])
    if errors:
        raise ValueError(f"Invalid output policy: {'; '.join(errors)}")
    return policy


def _raw(args: argparse.Namespace, flag: str) -> Optional[str]:
    return getattr(args, flag.lstrip("-").replace("-", "_"))


def _require(args: argparse.Namespace, flag: str) -> str:
    value = _raw(args, flag)
    if value is None:
        raise MissingArgumentError(flag)
    return value


def _to_float(flag: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise UnparsableValueError(flag, value, expected="real number") from None


def _to_int(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise UnparsableValueError(flag, value, expected="integer") from None


def _float_arg(args: argparse.Namespace, flag: str, default: Optional[float] = None) -> float:
    value = _raw(args, flag)
    if value is None:
        if default is None:
            raise MissingArgumentError(flag)
        return default
    return _to_float(flag, value)


def _int_arg(args: argparse.Namespace, flag: str) -> int:
    return _to_int(flag, _require(args, flag))


def spec_from_args(args: argparse.Namespace) -> Tuple[TopologySpec, Optional[str]]:
    """
    Map parsed flags onto a topology specification.

    Returns
    -------
    spec : TopologySpec
        Topology selected by ``--method``
    base_name : str or None
        Base of the output file name

    Raises
    ------
    UnknownMethodError
        If ``--method`` is missing or unknown
    MissingArgumentError
        If a flag required by the method is absent
    UnparsableValueError
        If a value is not a number of the expected type
    """
    method = args.method

    if method == "constant":
        base_name = _require(args, "--filename")
        spec = TwoWayBranchSpec.constant(
            parent_length=_float_arg(args, "--l0"),
            left_child_length=_float_arg(args, "--l1"),
            right_child_length=_float_arg(args, "--l2"),
            diameter=_float_arg(args, "--d0"),
            branch_angle=_float_arg(args, "--angle"),
            points_per_child=_int_arg(args, "--n"),
        )
        return spec, base_name

    if method == "tapering":
        base_name = _require(args, "--filename")
        spec = TwoWayBranchSpec.tapered(
            parent_length=_float_arg(args, "--l0"),
            left_child_length=_float_arg(args, "--l1"),
            right_child_length=_float_arg(args, "--l2"),
            parent_diameter=_float_arg(args, "--d0"),
            branch_angle=_float_arg(args, "--angle"),
            points_per_child=_int_arg(args, "--n"),
            left_child_diameter=_float_arg(args, "--d1"),
            right_child_diameter=_float_arg(args, "--d2"),
        )
        return spec, base_name

    if method == "rall":
        left_child_diameter = _float_arg(args, "--d1")
        right_child_diameter = _float_arg(args, "--d2")
        base_name = _require(args, "--filename")
        spec = TwoWayBranchSpec.rall(
            parent_length=_float_arg(args, "--l0"),
            left_child_length=_float_arg(args, "--l1"),
            right_child_length=_float_arg(args, "--l2"),
            branch_angle=_float_arg(args, "--angle"),
            points_per_child=_int_arg(args, "--n"),
            left_child_diameter=left_child_diameter,
            right_child_diameter=right_child_diameter,
        )
        return spec, base_name

    if method == "linear":
        base_name = _require(args, "--filename")
        spec = LinearCableSpec(
            start_radius=_float_arg(args, "--r0"),
            end_radius=_float_arg(args, "--r1"),
            length=_float_arg(args, "--l0"),
            point_count=_int_arg(args, "--n"),
        )
        return spec, base_name

    if method == "bended":
        spec = BentCableSpec(
            bend_angle=_float_arg(args, "--angle"),
            diameter=_float_arg(args, "--d0", default=BentCableSpec.diameter),
            half_length=_float_arg(args, "--l0", default=BentCableSpec.half_length),
        )
        return spec, args.filename

    if method == "zig-zag":
        spec = ZigZagCableSpec(
            bend_angle=_float_arg(args, "--angle"),
            diameter=_float_arg(args, "--d0", default=ZigZagCableSpec.diameter),
        )
        return spec, args.filename

    raise UnknownMethodError(method)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns
    -------
    int
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(join_negative_values(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        spec, base_name = spec_from_args(args)
    except UnknownMethodError:
        parser.print_help()
        return 0
    except MissingArgumentError as e:
        parser.print_help()
        print(file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnparsableValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        output_policy = load_output_policy(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        path, report = save_morphology(spec, base_name=base_name, output_policy=output_policy)
    except MorphologyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return 1

    for warning in report.warnings:
        logger.warning(warning)
    print(f"Generated {spec.TYPE} in file {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
