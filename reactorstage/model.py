from __future__ import annotations

import logging
from typing import List

from .errors import InvalidArgument, OutOfRange

logger = logging.getLogger(__name__)


def _check_fraction(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        logger.debug("rejected %s=%r", name, value)
        raise InvalidArgument(f"{name} must be in [0,1]")


class ReactorModel:
    """Two-input reaction stage with 1:1 stoichiometry (1 A + 1 B -> products).

    The amount reacted is bounded by the limiting reagent:
    limiting = min(A, B) and reacted = limiting * conversion.
    With a single output all of it goes to R; with two outputs it is split
    into R and S in the proportion split_ratio / (1 - split_ratio).

    Parameters
    ----------
    conversion: float
        Fraction (0..1) of the limiting reagent that is converted
    two_outputs: bool
        If True the reaction yields R and S, otherwise only R
    split_ratio: float
        Fraction (0..1) of reacted material routed to R; ignored with one output

    Raises
    ------
    InvalidArgument
        If conversion or split_ratio is outside [0, 1]
    """

    def __init__(self, conversion: float = 0.5, two_outputs: bool = False, split_ratio: float = 0.5) -> None:
        _check_fraction("conversion", conversion)
        _check_fraction("split_ratio", split_ratio)
        self._a: float = 0.0
        self._b: float = 0.0
        self._conversion = float(conversion)
        self._two_outputs = bool(two_outputs)
        self._split_ratio = float(split_ratio)
        self._last_outputs: List[float] = []

    def __repr__(self) -> str:
        return (
            f"ReactorModel(conversion={self._conversion!r}, two_outputs={self._two_outputs!r}, "
            f"split_ratio={self._split_ratio!r})"
        )

    @property
    def input_a(self) -> float:
        return self._a

    @property
    def input_b(self) -> float:
        return self._b

    @property
    def conversion(self) -> float:
        return self._conversion

    @property
    def two_outputs(self) -> bool:
        return self._two_outputs

    @property
    def split_ratio(self) -> float:
        return self._split_ratio

    @property
    def last_outputs(self) -> List[float]:
        return list(self._last_outputs)

    def set_inputs(self, a: float, b: float) -> None:
        """Stage reagent quantities A and B (both >= 0)."""
        if a < 0.0 or b < 0.0:
            logger.debug("rejected inputs a=%r b=%r", a, b)
            raise InvalidArgument("inputs must be non-negative")
        self._a = float(a)
        self._b = float(b)

    def set_conversion(self, conversion: float) -> None:
        # checked before assignment so a rejected value never reaches run_reaction
        _check_fraction("conversion", conversion)
        self._conversion = float(conversion)

    def set_two_outputs(self, two: bool) -> None:
        self._two_outputs = bool(two)

    def set_split_ratio(self, ratio: float) -> None:
        _check_fraction("split_ratio", ratio)
        self._split_ratio = float(ratio)

    def run_reaction(self) -> List[float]:
        """Run the reaction on the current inputs and parameters.

        Inputs are not consumed, so repeated calls give the same result.

        Returns
        -------
        List[float]
            [R] with one output, [R, S] with two
        """
        limiting = min(self._a, self._b)
        reacted = limiting * self._conversion

        if not self._two_outputs:
            self._last_outputs = [reacted]
        else:
            R = reacted * self._split_ratio
            S = reacted * (1.0 - self._split_ratio)
            self._last_outputs = [R, S]
        logger.debug("run: limiting=%g reacted=%g outputs=%s", limiting, reacted, self._last_outputs)
        return list(self._last_outputs)

    def reset(self) -> None:
        """Zero the inputs and drop the last result. Parameters are kept."""
        self._a = self._b = 0.0
        self._last_outputs.clear()
        logger.debug("reset")

    def get_last_output(self, idx: int) -> float:
        """Product from the last run by index (0 -> R, 1 -> S)."""
        if idx < 0 or idx >= len(self._last_outputs):
            raise OutOfRange("output index out of range")
        return self._last_outputs[idx]
