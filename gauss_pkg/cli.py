from __future__ import annotations

import argparse
import json
import sys

from . import config as _config
from .api import solve_system
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .parser import parse_equation, split_equations
from .system import EquationSystem
from .types import ParseError, SolveResult, ValidationError

logger = get_logger("cli")


def print_result_pretty(res: SolveResult, output_format: str = "human") -> None:
    """Print a solve result in the specified format.

    Args:
        res: Result from the API
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print(f"Error: {res.error}", file=sys.stderr)
        return
    if res.result_type == "none":
        print("No solutions exist")
    elif res.result_type == "infinite":
        print("Infinitely many solutions")
    else:
        for name, value in (res.solutions or {}).items():
            print(f"{name} = {value}")
    if res.verified is False:
        print("Warning: SymPy cross-check disagrees with this result", file=sys.stderr)


def print_help_text() -> None:
    print(
        "Enter one linear equation per line, e.g. `2x + 3/4 y = 1.5`.\n"
        "Commands:\n"
        "  solve   solve the equations entered so far (an empty line does the same)\n"
        "  show    list the equations entered so far\n"
        "  clear   forget all equations\n"
        "  help    show this text\n"
        "  quit    leave (also `exit` or Ctrl+D)"
    )


def repl_loop(output_format: str = "human", verify: bool = False) -> None:
    """Interactive loop collecting equations into a system."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("Gauss linear solver - type 'help' for commands, 'quit' to exit.")
    texts: list[str] = []
    system = EquationSystem()

    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        command = raw.lower()
        if command in ("quit", "exit"):
            break
        if command == "help":
            print_help_text()
        elif command == "show":
            for i, eq in enumerate(system):
                print(f"[{i}] {eq}")
        elif command == "clear":
            texts.clear()
            system = EquationSystem()
        elif command in ("", "solve"):
            if texts:
                print_result_pretty(solve_system(texts, verify=verify), output_format)
        else:
            try:
                system.add(parse_equation(raw))
            except (ParseError, ValidationError) as e:
                print(f"Error: {e}", file=sys.stderr)
                continue
            texts.append(raw)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the Gauss CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code. Errors are reported on stderr but still exit with 0.
    """
    parser = argparse.ArgumentParser(
        prog="gauss",
        description="Solve systems of linear equations over the exact rationals.",
    )
    parser.add_argument(
        "equations",
        nargs="*",
        help="Equations such as '2x + 3y = 1', one per argument",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Equations separated by commas or semicolons, solved as one system",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default=_config.OUTPUT_FORMAT,
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--verify",
        action=argparse.BooleanOptionalAction,
        default=_config.VERIFY_WITH_SYMPY,
        help="Cross-check the result with SymPy (default from GAUSS_VERIFY)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=_config.LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0

    texts = list(args.equations)
    if args.eval_expr:
        try:
            texts.extend(split_equations(args.eval_expr))
        except ValidationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 0

    if not texts and args.eval_expr is None:
        repl_loop(output_format=args.format, verify=args.verify)
        return 0

    logger.debug("Solving %d equation(s) from the command line", len(texts))
    print_result_pretty(solve_system(texts, verify=args.verify), output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m gauss_pkg.cli"""
    sys.exit(main_entry())
