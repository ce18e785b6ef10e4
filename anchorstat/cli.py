"""Command-line interface for anchorstat."""

import argparse
import json
import logging
import sys

from anchorstat import __version__
from anchorstat.config import get_settings


def _configure_logging(verbose: bool) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run_analyze(args: argparse.Namespace) -> int:
    import pandas as pd

    from anchorstat.tools.analysis import correlation_analysis

    settings = get_settings()

    try:
        df = pd.read_csv(args.csv)
    except (OSError, pd.errors.ParserError) as e:
        print(f"Error: could not read {args.csv}: {e}", file=sys.stderr)
        return 1

    result = correlation_analysis(
        df,
        x_col=args.x_col,
        y_col=args.y_col,
        reference_value=settings.reference_answer,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.format_for_display())
        for warning in result.warnings:
            print(f"- [{warning.severity.value}] {warning.message}")

    return 0 if result.success else 1


def _run_generate(args: argparse.Namespace) -> int:
    import pandas as pd

    from anchorstat.data.generator import generate

    settings = get_settings()
    anchor_strength = args.anchor_strength
    if anchor_strength is None:
        anchor_strength = settings.default_anchor_strength

    try:
        observations = generate(
            args.count,
            mode=args.mode,
            anchor_strength=anchor_strength,
            seed=args.seed,
            reference_answer=settings.reference_answer,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    df = pd.DataFrame([o.to_dict() for o in observations], columns=["q1", "q2"])
    if args.output:
        df.to_csv(args.output, index=False)
        print(f"Wrote {len(df)} responses to {args.output}")
    else:
        df.to_csv(sys.stdout, index=False)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="anchorstat",
        description="Correlation analysis for anchoring-effect surveys",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the API server",
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"API server host (default: {settings.api_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"API server port (default: {settings.api_port})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze responses stored in a CSV file"
    )
    analyze_parser.add_argument("csv", help="CSV file with one response per row")
    analyze_parser.add_argument("--x-col", default="q1", help="Anchor column (default: q1)")
    analyze_parser.add_argument("--y-col", default="q2", help="Estimate column (default: q2)")
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON output")
    analyze_parser.set_defaults(handler=_run_analyze)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate synthetic responses as CSV"
    )
    generate_parser.add_argument(
        "--count",
        type=int,
        default=settings.default_generate_count,
        help=f"Number of responses (default: {settings.default_generate_count})",
    )
    generate_parser.add_argument(
        "--mode",
        choices=["correlated", "random"],
        default="correlated",
        help="Anchored or independent estimates (default: correlated)",
    )
    generate_parser.add_argument(
        "--anchor-strength",
        type=float,
        default=None,
        help="Weight of the anchor in [0, 1]",
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    generate_parser.add_argument("-o", "--output", help="Write CSV to this path")
    generate_parser.set_defaults(handler=_run_generate)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.serve:
        try:
            import uvicorn

            from anchorstat.api.app import app

            uvicorn.run(app, host=args.host, port=args.port)
        except ImportError as e:
            print(f"Error: {e}. Make sure uvicorn is installed.", file=sys.stderr)
            return 1
    elif args.command:
        return args.handler(args)
    else:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
