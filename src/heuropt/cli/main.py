from __future__ import annotations

import json
import logging
import sys
from typing import Any, Sequence

from heuropt.engine.algorithm.registry import build_algorithm
from heuropt.engine.config.loader import algorithm_section
from heuropt.engine.restarts import run_restarts
from heuropt.foundation.benchmarks import make_benchmark_problem
from heuropt.foundation.exceptions import HeuroptError
from heuropt.foundation.logging import configure_heuropt_logging
from heuropt.foundation.observer import LoggingObserver
from heuropt.foundation.result import OptimizationResult

from .parser import RUN_KEYS, parse_args

EXIT_CONFIG_ERROR = 2


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def _print_summary(result: OptimizationResult, restarts: list[float] | None) -> None:
    print(f"algorithm    : {result.algorithm}")
    print(f"fitness      : {result.fitness:.10g}")
    print(f"solution     : [{', '.join(f'{v:.6g}' for v in result.solution)}]")
    print(f"iterations   : {result.iterations}")
    print(f"evaluations  : {result.evaluations}")
    print(f"status       : {result.message}")
    if result.infeasible:
        print(f"infeasible   : {result.infeasible}")
    if restarts is not None:
        print(f"restarts     : {len(restarts)} (fitness {min(restarts):.6g} .. {max(restarts):.6g})")


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_heuropt_logging(level=_log_level(args.verbose))

    problem = make_benchmark_problem(
        args.benchmark,
        args.dimensions,
        lower=args.lower,
        upper=args.upper,
        minimize=not args.maximize,
    )
    config: dict[str, Any] = algorithm_section(args.spec, args.algorithm, reserved=RUN_KEYS)

    restarts: list[float] | None = None
    if args.restarts > 1:
        summary = run_restarts(
            problem, args.algorithm, config, n_runs=args.restarts, seed=args.seed, n_jobs=args.n_jobs
        )
        result = summary.best
        restarts = summary.fitness_values
    else:
        observer = LoggingObserver(every=10) if args.verbose else None
        result = build_algorithm(args.algorithm, config).run(problem, seed=args.seed, observer=observer)

    if args.json:
        payload = result.to_dict()
        if restarts is not None:
            payload["restarts"] = restarts
        print(json.dumps(payload, indent=2))
    else:
        _print_summary(result, restarts)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point; returns the process exit code."""
    try:
        return run(argv)
    except HeuroptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
