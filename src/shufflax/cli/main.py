"""Shufflax CLI main module.

This module provides the main entry point for the Shufflax command-line
interface: shuffling items from the shell and running distribution checks.
"""

import argparse
import logging
import sys
from functools import partial

from shufflax import __version__
from shufflax.config import (
    create_index_source,
    get_env_value,
    list_index_sources,
    load_settings,
)
from shufflax.core.config import ShuffleConfig, VerificationConfig
from shufflax.engine import FisherYatesShuffler, LoggingStepObserver
from shufflax.verification import BASELINES, verify, verify_parallel
from shufflax.verification.report import DistributionReport

logger = logging.getLogger(__name__)

DEFAULT_VERIFY_ITEMS = ["1", "2", "3"]


def configure_logging() -> None:
    """Set up root logging from ``SHUFFLAX_LOG_LEVEL`` (default WARNING)."""
    level_name = str(get_env_value("LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_shuffle(items: list[str], config: ShuffleConfig, trace: bool = False) -> int:
    """Shuffle command-line items and print them space-separated.

    Args:
        items: Items to shuffle.
        config: Shuffle configuration.
        trace: Whether to print each Fisher-Yates step.

    Returns:
        Exit code (0 for success).
    """
    source = create_index_source(config.source, seed=config.seed, stream_name=config.stream_name)
    shuffler = FisherYatesShuffler(source, deep_copy=config.deep_copy)

    if trace:
        shuffler.observers.register(LoggingStepObserver(level=logging.INFO))
        stepwise = shuffler.steps(items)
        for event in stepwise:
            print(f"  {event.describe()}: {' '.join(event.state_after)}")
        result = stepwise.result
    else:
        result = shuffler.shuffle(items)

    print(" ".join(result))
    return 0


def _build_shuffle_fn(name: str, config: ShuffleConfig, seed: int | None):
    source = create_index_source(config.source, seed=seed, stream_name=config.stream_name)
    if name == "fisher-yates":
        return FisherYatesShuffler(source, deep_copy=config.deep_copy)
    return partial(BASELINES[name], source=source)


def run_verify(
    items: list[str],
    shuffle_config: ShuffleConfig,
    verification_config: VerificationConfig,
    baseline: str = "fisher-yates",
    check: bool = False,
) -> int:
    """Run a distribution check and print the report table.

    Args:
        items: Base input to shuffle on every trial.
        shuffle_config: Index source selection.
        verification_config: Trial count, batching, timeout and tolerance.
        baseline: "fisher-yates" or the name of a biased reference shuffle.
        check: Whether to fail when the share deviation exceeds the tolerance.

    Returns:
        Exit code (1 when ``check`` is set and the check fails).
    """
    seed = shuffle_config.seed

    if verification_config.num_batches > 1:

        def factory(batch_index: int):
            batch_seed = None if seed is None else seed + batch_index
            return _build_shuffle_fn(baseline, shuffle_config, batch_seed)

        report = verify_parallel(
            items,
            verification_config.trials,
            factory,
            num_batches=verification_config.num_batches,
            timeout=verification_config.timeout,
        )
    else:
        report = verify(
            items,
            verification_config.trials,
            _build_shuffle_fn(baseline, shuffle_config, seed),
            timeout=verification_config.timeout,
        )

    print(report.to_table())
    return _check_report(report, verification_config.tolerance) if check else 0


def _check_report(report: DistributionReport, tolerance: float) -> int:
    deviation = report.max_share_deviation()
    _, p_value = report.chi_square()
    print(f"max share deviation: {deviation:.2f} pp (tolerance {tolerance:.2f} pp)")
    print(f"chi-square p-value: {p_value:.4f}")
    if deviation > tolerance:
        print("FAIL: distribution is not uniform within tolerance", file=sys.stderr)
        return 1
    print("OK")
    return 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        "-s",
        help="Index source backend (see 'shufflax sources')",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible output",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to a TOML configuration file",
    )


def main(argv: list[str] | None = None) -> int:
    """Execute the Shufflax CLI program.

    Args:
        argv: List of command-line arguments. If None, sys.argv is used.

    Returns:
        An exit code (0 for success, non-zero for error).
    """
    configure_logging()

    parser = argparse.ArgumentParser(
        prog="shufflax",
        description="Shufflax: unbiased shuffling with statistical verification.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Command: shuffle
    shuffle_parser = subparsers.add_parser("shuffle", help="Shuffle the given items")
    shuffle_parser.add_argument("items", nargs="+", help="Items to shuffle")
    _add_source_arguments(shuffle_parser)
    shuffle_parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every Fisher-Yates step",
    )

    # Command: verify
    verify_parser = subparsers.add_parser("verify", help="Check a shuffle for uniformity")
    verify_parser.add_argument(
        "items",
        nargs="*",
        help=f"Base input (default: {' '.join(DEFAULT_VERIFY_ITEMS)})",
    )
    _add_source_arguments(verify_parser)
    verify_parser.add_argument(
        "--trials",
        "-n",
        type=int,
        help="Number of trials",
    )
    verify_parser.add_argument(
        "--batches",
        "-b",
        type=int,
        help="Number of parallel trial batches",
    )
    verify_parser.add_argument(
        "--baseline",
        default="fisher-yates",
        choices=["fisher-yates", *sorted(BASELINES)],
        help="Shuffle implementation to verify",
    )
    verify_parser.add_argument(
        "--tolerance",
        type=float,
        help="Accepted share deviation in percentage points",
    )
    verify_parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the distribution is outside tolerance",
    )

    # Command: sources
    subparsers.add_parser("sources", help="List available index sources")

    # Command: version
    subparsers.add_parser("version", help="Print the Shufflax version")

    args = parser.parse_args(argv)

    if args.command in ("shuffle", "verify"):
        try:
            shuffle_config, verification_config = load_settings(args.config)
            shuffle_config = ShuffleConfig(
                source=args.source or shuffle_config.source,
                seed=args.seed if args.seed is not None else shuffle_config.seed,
                deep_copy=shuffle_config.deep_copy,
                stream_name=shuffle_config.stream_name,
            )

            if args.command == "shuffle":
                return run_shuffle(args.items, shuffle_config, trace=args.trace)

            cli_overrides = {
                "trials": args.trials,
                "num_batches": args.batches,
                "tolerance": args.tolerance,
            }
            verification_config = VerificationConfig(
                **{
                    **verification_config.to_dict(),
                    **{k: v for k, v in cli_overrides.items() if v is not None},
                }
            )
            return run_verify(
                args.items or DEFAULT_VERIFY_ITEMS,
                shuffle_config,
                verification_config,
                baseline=args.baseline,
                check=args.check,
            )
        except (ValueError, KeyError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    elif args.command == "sources":
        print("Index sources:")
        for name in list_index_sources():
            print(f"  - {name}")
        return 0

    elif args.command == "version":
        print(f"Shufflax version {__version__}")
        return 0

    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
