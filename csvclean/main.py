"""
Main entry point for CSV data quality analysis.

Provides CLI interface for loading, checking, fixing and exporting tables.
"""

import argparse
import logging
import sys

from csvclean.config_loader import ConfigurationError, load_config
from csvclean.loader import LoaderError, load
from csvclean.reporters import export_issues, export_table, print_report, save_report
from csvclean.rule_engine import TableValidator


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='csvclean',
        description='CSV Data Cleaner - Check a delimited file against column rules',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Check for duplicate rows only
  csvclean data.csv

  # Apply column rules
  csvclean data.csv --rules rules.yaml

  # Trim whitespace, re-check and save the cleaned table
  csvclean data.csv --rules rules.yaml --fix --export-cleaned cleaned.csv

  # Save issues and JSON reports, fail below a quality threshold
  csvclean data.csv --rules rules.yaml --export-issues issues.csv --output reports/ --min-score 90
'''
    )

    parser.add_argument(
        'input',
        help='Path to the ; or , separated input file'
    )

    parser.add_argument(
        '--rules', '-r',
        help='Path to rules configuration YAML file (default: no column rules)'
    )

    parser.add_argument(
        '--fix', '-f',
        action='store_true',
        help='Trim surrounding whitespace from every cell before analysis'
    )

    parser.add_argument(
        '--export-cleaned',
        metavar='FILE',
        help='Write the (fixed) table as semicolon separated file'
    )

    parser.add_argument(
        '--export-issues',
        metavar='FILE',
        help='Write the issue list as semicolon separated file'
    )

    parser.add_argument(
        '--output', '-o',
        help='Directory to save JSON report'
    )

    parser.add_argument(
        '--min-score',
        type=float,
        help='Exit with code 1 when the quality score is below this value'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress console output'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.rules:
            config = load_config(args.rules)
            rules = config.get_rules()
            settings = config.get_settings()
        else:
            rules = None
            settings = {}

        table = load(args.input)

        validator = TableValidator(settings)
        auto_fix = args.fix or bool(settings.get('auto_fix'))
        report = validator.run(table, rules, auto_fix=auto_fix, source=str(args.input))

        if not args.quiet:
            print_report(report, use_rich=not args.no_color)

        if args.export_cleaned:
            path = export_table(table, args.export_cleaned)
            if not args.quiet:
                print(f"Cleaned table saved to: {path}")

        if args.export_issues:
            path = export_issues(report.issues, args.export_issues)
            if not args.quiet:
                print(f"Issues saved to: {path}")

        output_dir = args.output or settings.get('output_dir')
        if output_dir:
            full_path, summary_path = save_report(report, output_dir)
            if not args.quiet:
                print(f"Full report saved to: {full_path}")
                print(f"Summary saved to: {summary_path}")

        min_score = args.min_score if args.min_score is not None else settings.get('min_score')
        if min_score is not None and report.quality_score < min_score:
            logger.warning("Quality score %.1f is below %.1f", report.quality_score, min_score)
            return 1
        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except LoaderError as e:
        print(f"Load error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
