from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .config import DemoConfig
from .driver import DemoDriver
from .io import IOInterface, StdIO
from .ui import StyledReportIO


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Pens, pencils and markers sharing one page.")
    parser.add_argument("--count", type=int, help="Number of instruments.")
    parser.add_argument("--rounds", type=int, help="Number of writing rounds.")
    parser.add_argument("--remainder", type=float, help="Initial reserve of every instrument.")
    parser.add_argument("--seed", type=int, help="Seed for reproducible runs.")
    parser.add_argument(
        "--mode",
        choices=("styled", "plain"),
        default=os.getenv("WRITING_INSTRUMENTS_MODE", "styled"),
        help="`styled` colours the report with prompt_toolkit, `plain` prints bare lines.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every write.")

    try:
        defaults = DemoConfig.from_env()
    except ValueError as exc:
        parser.error(f"invalid environment: {exc}")
    parser.set_defaults(
        count=defaults.instrument_count,
        rounds=defaults.rounds,
        remainder=defaults.initial_remainder,
        seed=defaults.seed,
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DemoConfig(
            instrument_count=args.count,
            rounds=args.rounds,
            initial_remainder=args.remainder,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    io: IOInterface = StyledReportIO() if args.mode == "styled" else StdIO()
    try:
        DemoDriver(config, io).run()
    except KeyboardInterrupt:
        io.write("\nInterrupted.")
