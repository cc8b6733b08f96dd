"""benchreport CLI entry point.

Usage: benchreport render results.json [--no-comparison] [--extended minimum,maximum]
"""
import argparse
import json
import logging
import sys


def _add_render_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "render",
        help="Render a JSON file of scenario statistics as a console report.",
    )
    p.add_argument(
        "results",
        help="JSON file holding a list of {name, input_name, statistics} objects",
    )
    p.add_argument(
        "--no-comparison", action="store_true",
        help="Omit the comparison block.",
    )
    p.add_argument(
        "--unit-scaling", default="best",
        help="best, largest, smallest, none, or a unit name such as ms (default: best)",
    )
    p.add_argument(
        "--extended", default="",
        help="Comma separated extended columns, e.g. minimum,maximum,sample_size",
    )
    p.add_argument(
        "--verbose", action="store_true",
        help="Log debug messages to stderr.",
    )


def _run_render(args: argparse.Namespace) -> int:
    from benchreport.console.writer import output
    from benchreport.domain.config import ReportConfiguration
    from benchreport.domain.scenario import scenario_from_dict
    from benchreport.errors import ConfigurationError

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    extended = [c.strip() for c in args.extended.split(",") if c.strip()]
    try:
        config = ReportConfiguration(
            comparison=not args.no_comparison,
            unit_scaling=args.unit_scaling,
            extended_columns=tuple(extended),
        )
    except ConfigurationError as exc:
        print(f"benchreport: {exc}", file=sys.stderr)
        return 2

    try:
        with open(args.results, encoding="utf-8") as f:
            results = [scenario_from_dict(item) for item in json.load(f)]
    except OSError as exc:
        print(f"benchreport: cannot read {args.results}: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"benchreport: {args.results} is not valid JSON: {exc}", file=sys.stderr)
        return 1
    except (KeyError, TypeError, ValueError) as exc:
        print(f"benchreport: malformed scenario in {args.results}: {exc!r}",
              file=sys.stderr)
        return 1

    outcome = output(results, config)
    return 0 if outcome.ok else 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="benchreport",
        description="Console reports for benchmark statistics.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_render_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        sys.exit(_run_render(args))
