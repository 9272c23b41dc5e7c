"""
Output policies for dendrogen.

All policies are JSON-serializable dataclasses.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .base import coerce_bool


@dataclass
class OutputPolicy:
    """
    Policy for output file generation.

    Controls where SWC files land and what is written next to them.

    JSON Schema:
    {
        "output_dir": str,
        "save_reports": bool,
        "overwrite": bool
    }
    """
    output_dir: str = "."
    save_reports: bool = False
    overwrite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "OutputPolicy":
        """
        Create from a JSON mapping.

        Unknown keys are ignored. Flags may be given as strings or 0/1;
        unrecognized flag values are kept so that validate_policy reports them.
        """
        policy = OutputPolicy(**{k: v for k, v in d.items() if k in OutputPolicy.__dataclass_fields__})
        policy.save_reports = coerce_bool(policy.save_reports, default=policy.save_reports)
        policy.overwrite = coerce_bool(policy.overwrite, default=policy.overwrite)
        return policy


__all__ = [
    "OutputPolicy",
]
