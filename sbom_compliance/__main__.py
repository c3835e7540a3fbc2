"""
SBOM Compliance Engine — Command-line entry point

Usage:
    python -m sbom_compliance results.json                     # detailed table
    python -m sbom_compliance results.json --format json       # structured report
    python -m sbom_compliance results.json --format basic      # one-line summary
    python -m sbom_compliance results.json --config report.json --output report.txt
    python -m sbom_compliance results.json --strict            # fail on catalog gaps

The results file holds already-evaluated check records for one SBOM.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import REPORT_FORMATS, OutputConfig, ReportConfig
from .database import CheckResultsError, SQLiteCheckDatabase, load_check_results
from .reporting import ReportSerializationError, build_report, write_report
from .scoring import CRA_CATALOG, CatalogError, CraScoreAggregator, ScoringError

logger = logging.getLogger("sbom_compliance.cli")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sbom-compliance",
        description="TR-03183-2 compliance report for evaluated SBOM checks",
    )
    parser.add_argument(
        "results",
        type=Path,
        help="Path to the check-results JSON file",
    )
    parser.add_argument(
        "--format", "-f",
        choices=REPORT_FORMATS,
        default=None,
        help="Report presentation (default: detailed)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to JSON configuration file",
    )
    parser.add_argument(
        "--file-name",
        type=str,
        default=None,
        help="SBOM file name shown in the report (default: taken from the results file)",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help="Keep the check database in this SQLite file (default: in memory)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a check kind has no catalog entry",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ReportConfig:
    """Build configuration from the config file, then apply CLI overrides."""
    if args.config and args.config.exists():
        config = ReportConfig.from_file(args.config)
    else:
        config = ReportConfig()

    if args.format or args.output:
        config.output = OutputConfig(
            format=args.format or config.output.format,
            path=str(args.output) if args.output else config.output.path,
        )
    if args.db_path:
        config.database_path = args.db_path
    if args.strict:
        config.strict_catalog = True
    if args.verbose:
        config.verbose = True
    return config


def run(config: ReportConfig, results_path: Path, file_name: Optional[str] = None):
    """Load check results, build the report and write the chosen presentation."""
    with SQLiteCheckDatabase(config.database_path) as database:
        # A file-backed database may hold an earlier run
        database.clear()
        declared_name = load_check_results(results_path, database)
        file_name = file_name or declared_name or results_path.name

        aggregator = CraScoreAggregator(database, CRA_CATALOG)
        report = build_report(database, CRA_CATALOG, aggregator, file_name, config)

    output_path = config.output.output_path
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            write_report(report, config.output.format, fh)
        logger.info(f"Wrote {config.output.format} report to {output_path}")
    else:
        write_report(report, config.output.format, sys.stdout)
    return report


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(config, args.results, args.file_name)
    except (CheckResultsError, CatalogError, ScoringError, ReportSerializationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
