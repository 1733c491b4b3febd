"""ReactorStage: a single two-input reaction stage (A + B -> R [+ S]).

This package provides:
- Model: ReactorModel, limiting-reagent conversion with one or two products
- Errors: InvalidArgument, OutOfRange
- Config: environment-driven defaults (pydantic-settings)
- Analytics: batch runs over feeds and conversion sweeps (pandas)

Run the CLI with: python -m reactorstage.cli
"""

from .errors import InvalidArgument, OutOfRange, ReactorError
from .model import ReactorModel

__all__ = [
    "ReactorModel",
    "ReactorError",
    "InvalidArgument",
    "OutOfRange",
]

__version__ = "0.1.0"
