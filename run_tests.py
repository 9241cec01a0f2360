#!/usr/bin/env python3
"""
Test runner script for fuzzy_intervals.

This script provides a convenient way to run the test suite with different configurations.
"""

import sys
import subprocess
import argparse
from pathlib import Path


def check_optional_dependencies():
    """Check which optional plotting/analysis libraries are importable."""
    available = []
    for module_name, label in (("matplotlib", "matplotlib"), ("pandas", "pandas")):
        try:
            __import__(module_name)
        except ImportError:
            continue
        available.append(label)
    return available


def run_tests(args):
    """Run the test suite with specified options."""

    # Base pytest command
    cmd = [sys.executable, "-m", "pytest"]

    # Add test directory
    cmd.append("tests/")

    # Add verbosity
    if args.verbose:
        cmd.append("-v")
    elif args.quiet:
        cmd.append("-q")

    # Add coverage if requested
    if args.coverage:
        cmd.extend(["--cov=fuzzy_intervals", "--cov-report=term-missing"])
        if args.html_coverage:
            cmd.append("--cov-report=html")

    # Add parallel execution if requested
    if args.parallel:
        cmd.extend(["-n", str(args.parallel)])

    # Filter tests by markers
    if args.fast:
        cmd.extend(["-m", "not slow"])

    # Add specific test patterns
    if args.pattern:
        cmd.extend(["-k", args.pattern])

    # Add any additional pytest args
    if args.pytest_args:
        cmd.extend(args.pytest_args.split())

    print(f"Running command: {' '.join(cmd)}")
    print()

    available = check_optional_dependencies()
    missing = {"matplotlib", "pandas"} - set(available)
    if missing:
        print(f"WARNING: {', '.join(sorted(missing))} not installed; plotting/analysis tests will fail.")
        print("Install with: pip install -e .[test]")
        print()

    # Run the tests
    try:
        result = subprocess.run(cmd, cwd=Path(__file__).parent)
        return result.returncode
    except KeyboardInterrupt:
        print("\nTest run interrupted by user.")
        return 1


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run fuzzy_intervals test suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # Run all tests
  python run_tests.py --fast             # Skip slow tests
  python run_tests.py --coverage         # Run with coverage
  python run_tests.py --pattern="fuzzy"  # Run only fuzzy tests
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet output"
    )

    parser.add_argument(
        "--coverage",
        action="store_true",
        help="Run with coverage analysis"
    )

    parser.add_argument(
        "--html-coverage",
        action="store_true",
        help="Generate HTML coverage report (requires --coverage)"
    )

    parser.add_argument(
        "-n", "--parallel",
        type=int,
        metavar="N",
        help="Run tests in parallel with N workers"
    )

    parser.add_argument(
        "--fast",
        action="store_true",
        help="Skip slow tests"
    )

    parser.add_argument(
        "-k", "--pattern",
        metavar="PATTERN",
        help="Run only tests matching the given pattern"
    )

    parser.add_argument(
        "--pytest-args",
        metavar="ARGS",
        help="Additional arguments to pass to pytest"
    )

    args = parser.parse_args()

    if args.quiet and args.verbose:
        parser.error("Cannot specify both --quiet and --verbose")

    return run_tests(args)


if __name__ == "__main__":
    sys.exit(main())
