from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.config import load_policy, policy_from_env
from request_chaos.core.engine import ChaosEngine
from request_chaos.errors import PolicyError
from request_chaos.types import ChaosAction

logger = logging.getLogger("request_chaos")


def _setup_logging() -> None:
    """Configure logging for the request-chaos CLI."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def _resolve_policy(policy_path: str | None) -> ChaosPolicy:
    if policy_path:
        return load_policy(Path(policy_path))
    return policy_from_env()


def _simulate(
    policy: ChaosPolicy, method: str, path: str, count: int, seed: int | None
) -> int:
    if seed is not None:
        policy = policy.model_copy(update={"seed": seed})
    engine = ChaosEngine(policy)

    actions: Counter[ChaosAction] = Counter()
    delays: list[float] = []
    for _ in range(count):
        decision = engine.decide(method, path)
        actions[decision.action] += 1
        if decision.delay_ms is not None:
            delays.append(decision.delay_ms)

    print(f"Simulated {count} {method.upper()} {path} request(s)")
    for action in ChaosAction:
        n = actions[action]
        pct = (n / count * 100) if count else 0.0
        print(f"  {action.value:<17} {n:>7}  ({pct:.1f}%)")
    if delays:
        mean = sum(delays) / len(delays)
        print(
            f"  delay ms          min={min(delays):g} max={max(delays):g} mean={mean:.1f}"
        )
    bounds = policy.latency_bounds
    if bounds is not None:
        print(f"  configured ms     min={bounds[0]:g} max={bounds[1]:g}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Console script entry point (`request-chaos`)."""
    parser = argparse.ArgumentParser(
        prog="request-chaos",
        description="Inspect and dry-run HTTP chaos policies.",
    )
    sub = parser.add_subparsers(dest="cmd", required=False)

    show_p = sub.add_parser("show", help="Print the effective policy as JSON")
    show_p.add_argument(
        "--policy",
        default=None,
        help="JSON policy file (default: read CHAOS_* environment variables)",
    )

    sim_p = sub.add_parser(
        "simulate", help="Sample decisions for a request without sleeping"
    )
    sim_p.add_argument(
        "--policy",
        default=None,
        help="JSON policy file (default: read CHAOS_* environment variables)",
    )
    sim_p.add_argument("--method", default="GET", help="HTTP method (default: GET)")
    sim_p.add_argument("--path", default="/", help="Request path (default: /)")
    sim_p.add_argument(
        "-n",
        "--count",
        type=int,
        default=1000,
        help="Number of requests to simulate (default: 1000)",
    )
    sim_p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed, overrides the policy seed (optional)",
    )

    args = parser.parse_args(argv)

    if args.cmd not in ("show", "simulate"):
        parser.print_help()
        return

    _setup_logging()

    try:
        policy = _resolve_policy(args.policy)
    except PolicyError as e:
        logger.error(f"✗ {e}")
        raise SystemExit(2)

    if args.cmd == "show":
        print(policy.model_dump_json(indent=2))
        return

    if args.count < 0:
        logger.error("✗ --count must be >= 0")
        raise SystemExit(2)

    # Per-decision log lines would drown the summary
    logger.setLevel(logging.WARNING)
    raise SystemExit(
        _simulate(policy, args.method, args.path, args.count, args.seed)
    )


if __name__ == "__main__":
    main(sys.argv[1:])
