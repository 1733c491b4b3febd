import argparse
import csv
import logging

import numpy as np

from .analytics import conversion_sweep, load_feeds_csv, run_batch
from .config import get_settings
from .errors import ReactorError
from .model import ReactorModel

logger = logging.getLogger(__name__)


def _add_stage_args(p: argparse.ArgumentParser, with_conversion: bool = True) -> None:
    if with_conversion:
        p.add_argument("--conversion", type=float, default=None, help="Fraction of limiting reagent converted (0..1)")
    p.add_argument("--two-outputs", dest="two_outputs", action="store_true", default=None, help="Produce R and S")
    p.add_argument("--split", type=float, default=None, help="Fraction of reacted material routed to R (0..1)")


def run_cli() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = argparse.ArgumentParser(description="ReactorStage - two-input reaction stage CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # Single run
    p_run = sub.add_parser("run", help="Run the stage once")
    p_run.add_argument("--a", type=float, required=True, help="Quantity of reagent A")
    p_run.add_argument("--b", type=float, required=True, help="Quantity of reagent B")
    _add_stage_args(p_run)
    p_run.add_argument("--csv", type=str, default=None)

    # Batch over a feeds file with columns A,B
    p_batch = sub.add_parser("batch", help="Run the stage for every feed in a CSV")
    p_batch.add_argument("--feeds", type=str, required=True)
    _add_stage_args(p_batch)
    p_batch.add_argument("--csv", type=str, default="batch.csv")

    # Conversion sweep
    p_sweep = sub.add_parser("sweep", help="Sweep conversion for fixed feeds")
    p_sweep.add_argument("--a", type=float, required=True)
    p_sweep.add_argument("--b", type=float, required=True)
    p_sweep.add_argument("--start", type=float, default=0.0)
    p_sweep.add_argument("--stop", type=float, default=1.0)
    p_sweep.add_argument("--num", type=int, default=11)
    _add_stage_args(p_sweep, with_conversion=False)
    p_sweep.add_argument("--csv", type=str, default="sweep.csv")

    args = parser.parse_args()

    two_outputs = settings.two_outputs if args.two_outputs is None else args.two_outputs
    split = settings.split_ratio if args.split is None else args.split

    try:
        if args.cmd == "sweep":
            conversions = np.linspace(args.start, args.stop, args.num)
            df = conversion_sweep(args.a, args.b, conversions, two_outputs=two_outputs, split_ratio=split)
            df.to_csv(args.csv, index=False)
            print(f"Wrote {len(df)} rows to {args.csv}")
            return

        conversion = settings.conversion if args.conversion is None else args.conversion
        model = ReactorModel(conversion=conversion, two_outputs=two_outputs, split_ratio=split)

        if args.cmd == "batch":
            feeds = load_feeds_csv(args.feeds)
            df = run_batch(model, feeds)
            df.to_csv(args.csv, index=False)
            print(f"Wrote {len(df)} rows to {args.csv}")
            return

        if args.cmd == "run":
            model.set_inputs(args.a, args.b)
            out = model.run_reaction()
            names = ["R", "S"][: len(out)]
            print(" ".join(f"{n}={v:g}" for n, v in zip(names, out)))
            if args.csv:
                with open(args.csv, "w", newline="") as f:
                    writer = csv.writer(f)
                    writer.writerow(names)
                    writer.writerow(out)
            return
    except ReactorError as exc:
        logger.debug("command %s failed: %s", args.cmd, exc)
        raise SystemExit(str(exc))


if __name__ == "__main__":
    run_cli()
