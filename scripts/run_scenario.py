"""CLI for running lifttrace batches, from a JSON scenario or interactively."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from liftsched import DEFAULT_SCHEDULER, SCHEDULER_REGISTRY, RequestBatch
from liftsim import RequestCollector, Simulation, SimulationConfig, summarize, validate_request
from liftsim.console import collect_requests, render_trace


def build_simulation(config: Dict, policy: Optional[str] = None) -> Simulation:
    building_cfg = config.get("building", {})
    sim_config = SimulationConfig.from_dict(building_cfg)
    scheduler_name = policy or config.get("scheduler", DEFAULT_SCHEDULER)
    return Simulation(sim_config, scheduler_name)


def load_batch(config: Dict, collector: RequestCollector) -> RequestBatch:
    sim_config = collector.config
    for entry in config.get("requests", []):
        if isinstance(entry, dict):
            source, destination = entry.get("source"), entry.get("destination")
        else:
            source, destination = entry
        collector.add(validate_request(source, destination, sim_config))
    return collector.finalize()


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to a JSON scenario file; omit to enter requests interactively",
    )
    parser.add_argument("--policy", choices=list(SCHEDULER_REGISTRY), help="Traversal policy override")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the trace as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = json.loads(args.config.read_text()) if args.config else {}
        if not isinstance(config, dict):
            raise ValueError(f"{args.config}: scenario must be a JSON object")
        simulation = build_simulation(config, args.policy)
        collector = RequestCollector(simulation.config)
        if args.config:
            load_batch(config, collector)
    except (OSError, ValueError, RuntimeError) as exc:
        parser.error(str(exc))

    if args.config:
        print(f"Scenario: {config.get('name', args.config.stem)}")
        if config.get("description"):
            print(config["description"])
    else:
        collect_requests(collector)

    events = simulation.run_when_ready(collector)
    batch = collector.wait()
    render_trace(events)

    results = {
        "scenario": config.get("name", args.config.stem if args.config else "interactive"),
        "policy": simulation.scheduler_name,
        "config": simulation.config.to_dict(),
        "requests": [{"source": r.source, "destination": r.destination} for r in batch],
        "events": [event.to_dict() for event in events],
        "summary": summarize(events),
    }
    save_results(args.output, results)
    if args.output:
        print(f"Saved trace to {args.output}")


if __name__ == "__main__":
    main()
