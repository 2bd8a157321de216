"""CLI for running elevator dispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from liftsim import DispatchError
from liftsim.report import render_status, render_trace, to_dict
from liftsim.scenario import build_dispatcher, load_scenario


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the final status and step lists as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        scenario = load_scenario(json.loads(args.config.read_text()))
        dispatcher = build_dispatcher(scenario)
    except (ValidationError, DispatchError) as exc:
        parser.error(f"{args.config}: {exc}")

    print(f"Scenario: {scenario.name or args.config.stem}")
    if scenario.description:
        print(scenario.description)
    print(render_status(dispatcher.status(), dispatcher.top_floor))
    print()

    try:
        trace = dispatcher.run_all_to_quiescence()
    except DispatchError as exc:
        parser.exit(1, f"Simulation failed: {exc}\n")

    print(render_trace(trace))
    save_results(args.output, to_dict(dispatcher.status(), trace))
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
