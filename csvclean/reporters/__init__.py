"""
Reporters package - output formatting for analysis results.

Provides multiple output formats:
- Console: Rich terminal output with colors and formatting
- JSON: Machine-readable reports and run history
- CSV: Semicolon export of cleaned tables and issue lists
"""

from csvclean.reporters.console import ConsoleReporter, print_report
from csvclean.reporters.csv_export import escape, export_issues, export_table
from csvclean.reporters.json_report import JSONReporter, save_report


__all__ = [
    'ConsoleReporter',
    'print_report',
    'JSONReporter',
    'save_report',
    'escape',
    'export_table',
    'export_issues',
]
