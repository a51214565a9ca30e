#!/usr/bin/env python3
"""
Command-line interface for the dependency inversion demo.

Usage:
    python cli.py [command] [options]

Commands:
    demo        Run demo scenarios
    compare     Compare both approaches
    test        Run the test suite

Examples:
    python cli.py demo coupled order
    python cli.py demo inverted mock
    python cli.py compare all
    python cli.py --log-level DEBUG demo inverted switch
"""

import argparse
import logging
import subprocess
import sys
from typing import Optional

APPROACHES = ["coupled", "inverted"]

DEMO_SCENARIOS = {
    "coupled": ["switch", "order"],
    "inverted": ["switch", "order", "mock", "failure"],
}

COMPARE_SCENARIOS = ["switch", "order", "all"]


def run_demo(approach: str, scenario: str) -> None:
    """Run a demo scenario."""
    if approach == "coupled":
        from coupled import demo
    elif approach == "inverted":
        from inverted import demo
    else:
        print(f"Unknown approach: {approach}")
        print(f"Valid approaches: {', '.join(APPROACHES)}")
        sys.exit(1)

    available = DEMO_SCENARIOS[approach]
    if scenario == "all":
        scenarios = available
    elif scenario in available:
        scenarios = [scenario]
    else:
        print(f"Unknown scenario for {approach}: {scenario}")
        print(f"Valid scenarios: {', '.join(available + ['all'])}")
        sys.exit(1)

    for name in scenarios:
        getattr(demo, f"run_{name}_demo")()


def run_compare(scenario: str) -> None:
    """Run comparison between approaches."""
    from comparison.run_scenarios import (
        run_switch_comparison,
        run_order_comparison,
        main as run_all_comparisons,
    )

    if scenario == "switch":
        run_switch_comparison()
    elif scenario == "order":
        run_order_comparison()
    elif scenario == "all":
        run_all_comparisons()
    else:
        print(f"Unknown scenario: {scenario}")
        sys.exit(1)


def run_tests(args: list[str]) -> int:
    """Run the test suite."""
    cmd = [sys.executable, "-m", "pytest"] + args
    return subprocess.run(cmd).returncode


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Dependency Inversion Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo coupled switch
  %(prog)s demo inverted order
  %(prog)s demo inverted all
  %(prog)s compare all
  %(prog)s test -v
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demo scenarios")
    demo_parser.add_argument(
        "approach",
        choices=APPROACHES,
        help="Which approach to use",
    )
    demo_parser.add_argument(
        "scenario",
        choices=["switch", "order", "mock", "failure", "all"],
        help="Which scenario to run (mock and failure are inverted only)",
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare both approaches")
    compare_parser.add_argument(
        "scenario",
        choices=COMPARE_SCENARIOS,
        help="Which scenario to compare",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest (forwarded as given)",
    )

    return parser


def parse_args(parser: argparse.ArgumentParser, argv: list[str]) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Everything after the `test` command belongs to pytest and is forwarded
    verbatim, in order, so options with values (-k expr, -m marker) survive.
    """
    if "test" in argv:
        index = argv.index("test")
        args = parser.parse_args(argv[:index + 1])
        if args.command == "test":
            args.pytest_args = argv[index + 1:]
            return args
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    args = parse_args(parser, argv)

    if args.log_level:
        logging.basicConfig(
            level=args.log_level,
            format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger().setLevel(args.log_level)

    if args.command == "demo":
        run_demo(args.approach, args.scenario)
    elif args.command == "compare":
        run_compare(args.scenario)
    elif args.command == "test":
        sys.exit(run_tests(args.pytest_args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
