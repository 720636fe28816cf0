"""planview entry point — CLI argument parsing, plan parsing, and app launch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from planview.config import load_config
from planview.report import PlanParseError, PlanReport, read_plan


def _get_version() -> str:
    """Return the installed package version, or fall back to 'unknown'."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return f"planview {version('planview')}"
    except PackageNotFoundError:
        return "planview (unknown version — not installed as package)"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planview",
        description="Browse the changes proposed by a Terraform plan. "
        "Reads `terraform plan -no-color` output from PATH or stdin.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        metavar="PATH",
        help="Plan report to read ('-' or omitted for stdin)",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=_get_version(),
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to config.toml file",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="Print one line per action and exit (no TUI)",
    )
    parser.add_argument(
        "--show",
        metavar="REFERENCE",
        help="Print the body of the action with this reference and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write all log messages (DEBUG level) to a file.",
    )
    return parser


def setup_logging(verbose: bool, log_file: str | None = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s: %(message)s")

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logging.getLogger().addHandler(file_handler)
        logging.getLogger().setLevel(logging.DEBUG)


def load_report(path: str) -> PlanReport:
    """Parse the plan report at *path*, or stdin for ``-``."""
    if path == "-":
        return read_plan(sys.stdin)
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return read_plan(f)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    config = load_config(args.config)

    try:
        report = load_report(args.path)
    except PlanParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read plan: {e}", file=sys.stderr)
        sys.exit(1)

    if report.no_changes:
        print("No changes. Infrastructure is up-to-date.", file=sys.stderr)
        return

    # Headless modes, no TUI
    if args.show:
        from planview.headless import run_show

        sys.exit(run_show(report, args.show))

    if args.list:
        from planview.headless import run_list

        sys.exit(run_list(report, show_reference=config.ui.show_reference))

    if not report.actions:
        print("The plan contains no actions.", file=sys.stderr)
        return

    # Launch the TUI
    if args.path == "-":
        from planview.terminal import reattach_stdin

        try:
            reattach_stdin()
        except OSError as e:
            print(f"Error: no terminal for the UI ({e}). Use --list instead.", file=sys.stderr)
            sys.exit(1)

    from planview.app import PlanViewApp

    app = PlanViewApp(report=report, config=config)
    app.run()


if __name__ == "__main__":
    main()
