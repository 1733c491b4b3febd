from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from .model import ReactorModel

logger = logging.getLogger(__name__)

Feed = Tuple[float, float]


def _output_columns(two_outputs: bool) -> List[str]:
    return ["R", "S"] if two_outputs else ["R"]


def run_batch(model: ReactorModel, feeds: Sequence[Feed]) -> pd.DataFrame:
    """Run the model once per (A, B) feed pair.

    Columns: A, B, limiting, reacted, R and, in two-output mode, S.
    The model keeps the inputs and outputs of the last feed.
    """
    rows: List[List[float]] = []
    for a, b in feeds:
        model.set_inputs(a, b)
        out = model.run_reaction()
        limiting = min(model.input_a, model.input_b)
        rows.append([model.input_a, model.input_b, limiting, limiting * model.conversion] + out)
    columns = ["A", "B", "limiting", "reacted"] + _output_columns(model.two_outputs)
    logger.debug("batch of %d feeds", len(rows))
    return pd.DataFrame(rows, columns=columns)


def conversion_sweep(
    a: float,
    b: float,
    conversions: Sequence[float],
    *,
    two_outputs: bool = False,
    split_ratio: float = 0.5,
) -> pd.DataFrame:
    """Products for fixed feeds over a range of conversion values.

    Each value is checked by a fresh ReactorModel, so any value outside
    [0, 1] raises InvalidArgument.
    """
    values = np.asarray(conversions, dtype=float).reshape(-1)
    rows: List[List[float]] = []
    for x in values:
        model = ReactorModel(conversion=float(x), two_outputs=two_outputs, split_ratio=split_ratio)
        model.set_inputs(a, b)
        out = model.run_reaction()
        rows.append([float(x), min(model.input_a, model.input_b) * model.conversion] + out)
    return pd.DataFrame(rows, columns=["conversion", "reacted"] + _output_columns(two_outputs))


def load_feeds_csv(path: str) -> List[Feed]:
    df = pd.read_csv(path)
    expected = ["A", "B"]
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in feeds file: {missing}")
    return [(float(row["A"]), float(row["B"])) for _, row in df.iterrows()]
