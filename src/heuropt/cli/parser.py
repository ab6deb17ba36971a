"""
CLI argument parsing.

``--config`` is read first so the file can supply defaults; explicit
command-line flags override file values.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from heuropt.engine.algorithm.registry import available_algorithms
from heuropt.engine.config.loader import load_run_spec
from heuropt.foundation.benchmarks import available_benchmarks

# Keys of a run file that describe the run rather than the algorithm.
RUN_KEYS = (
    "algorithm",
    "benchmark",
    "dimensions",
    "lower",
    "upper",
    "maximize",
    "seed",
    "restarts",
    "n_jobs",
)


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        help="Path to a YAML/JSON run file with algorithm parameters. CLI arguments override file values.",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)

    spec: dict[str, Any] = {}
    if pre_args.config:
        spec = load_run_spec(pre_args.config)

    def _spec_default(key: str, fallback: Any) -> Any:
        return spec.get(key, fallback)

    parser = argparse.ArgumentParser(
        prog="heuropt",
        description="Run a gradient-free optimizer on a benchmark function.",
        parents=[pre_parser],
    )
    parser.add_argument(
        "--algorithm",
        choices=available_algorithms(),
        default=_spec_default("algorithm", "ga"),
        help="Algorithm to run (default: %(default)s).",
    )
    parser.add_argument(
        "--benchmark",
        choices=available_benchmarks(),
        default=_spec_default("benchmark", "sphere"),
        help="Benchmark objective (default: %(default)s).",
    )
    parser.add_argument("--dimensions", type=_positive_int, default=_spec_default("dimensions", 2))
    parser.add_argument("--lower", type=float, default=_spec_default("lower", None), help="Lower bound for every dimension.")
    parser.add_argument("--upper", type=float, default=_spec_default("upper", None), help="Upper bound for every dimension.")
    parser.add_argument(
        "--maximize",
        action="store_true",
        default=bool(_spec_default("maximize", False)),
        help="Maximize the objective instead of minimizing it.",
    )
    parser.add_argument("--seed", type=int, default=_spec_default("seed", None))
    parser.add_argument(
        "--restarts",
        type=_positive_int,
        default=_spec_default("restarts", 1),
        help="Independent runs with spawned seeds; the best is reported.",
    )
    parser.add_argument(
        "--n-jobs",
        type=int,
        default=_spec_default("n_jobs", 1),
        help="joblib workers for --restarts (-1 uses all cores).",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (-vv for debug output).")
    args = parser.parse_args(argv)
    args.spec = spec
    return args


__all__ = ["RUN_KEYS", "parse_args"]
