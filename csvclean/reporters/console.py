"""
Console reporter - displays analysis results in the terminal.

Uses the Rich library for formatted, colorful output, with a plain text
mode for logs and pipes.
"""

import sys
from typing import TextIO

from rich import box
from rich.console import Console
from rich.markup import escape as escape_markup
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from csvclean.validators import AnalysisReport, IssueKind


class ConsoleReporter:
    """
    Report analysis results to the console.

    Provides both rich formatted output and a plain text mode.
    """

    KIND_COLORS = {
        IssueKind.DUPLICATE: 'magenta',
        IssueKind.REQUIRED: 'red',
        IssueKind.TYPE: 'orange1',
        IssueKind.RANGE: 'yellow'
    }

    def __init__(self, use_rich: bool = True, output: TextIO | None = None, max_issues: int = 50):
        """
        Initialize console reporter.

        Args:
            use_rich: Use Rich formatting
            output: Output stream (default: stdout)
            max_issues: Issues listed before the list is cut off
        """
        self.use_rich = use_rich
        self.output = output or sys.stdout
        self.max_issues = max_issues

        if self.use_rich:
            self.console = Console(file=self.output)

    def report(self, report: AnalysisReport) -> None:
        """Display analysis report."""
        if self.use_rich:
            self._report_rich(report)
        else:
            self._report_plain(report)

    @staticmethod
    def score_color(score: float) -> str:
        if score >= 90:
            return 'green'
        if score >= 70:
            return 'yellow'
        return 'red'

    def _report_rich(self, report: AnalysisReport) -> None:
        """Display report using Rich formatting."""
        self.console.print()
        self.console.rule("[bold blue]DATA QUALITY REPORT[/bold blue]")
        self.console.print()

        info_text = Text()
        info_text.append("Source: ", style="dim")
        info_text.append(f"{report.source or '-'}\n", style="cyan")
        info_text.append("Timestamp: ", style="dim")
        info_text.append(f"{report.timestamp.strftime('%Y-%m-%d %H:%M:%S')}\n", style="cyan")
        info_text.append("Table: ", style="dim")
        info_text.append(f"{report.row_count} rows x {report.column_count} columns\n", style="cyan")
        info_text.append("Cells fixed: ", style="dim")
        info_text.append(f"{report.cells_fixed}", style="cyan")
        self.console.print(Panel(info_text, title="Analysis Info", border_style="blue"))

        self._print_summary_rich(report)

        if report.issues:
            self._print_issues_rich(report)
        else:
            self.console.print()
            self.console.print("[green]✓ No issues found[/green]")

        self.console.print()
        self.console.rule()

    def _print_summary_rich(self, report: AnalysisReport) -> None:
        """Print issue counts and score with Rich."""
        self.console.print()

        table = Table(title="Summary", box=box.ROUNDED)
        table.add_column("Issue kind", style="bold")
        table.add_column("Count", justify="right")

        counts = report.issues_by_kind()
        for kind in IssueKind:
            count = counts[kind.value]
            if count > 0:
                color = self.KIND_COLORS[kind]
                table.add_row(f"[{color}]{kind.value}[/{color}]", str(count))
        table.add_row("Total", str(report.issue_count))

        color = self.score_color(report.quality_score)
        table.add_row("Quality", f"[{color}]{report.quality_score:.1f} %[/{color}]")

        self.console.print(table)

    def _print_issues_rich(self, report: AnalysisReport) -> None:
        """Print the issue list with Rich."""
        self.console.print()

        table = Table(title="Issues", box=box.SIMPLE)
        table.add_column("Row", justify="right")
        table.add_column("Kind")
        table.add_column("Column")
        table.add_column("Description")

        for issue in report.issues[:self.max_issues]:
            color = self.KIND_COLORS[issue.issue_kind]
            table.add_row(
                str(issue.row_index),
                f"[{color}]{issue.issue_kind.value}[/{color}]",
                escape_markup(issue.column_name),
                escape_markup(issue.description)
            )
        self.console.print(table)

        hidden = report.issue_count - self.max_issues
        if hidden > 0:
            self.console.print(f"  [dim]... {hidden:,} more issues not shown[/dim]")

    def _report_plain(self, report: AnalysisReport) -> None:
        """Display report using plain text."""
        print("=" * 80, file=self.output)
        print(f"DATA QUALITY REPORT - {report.timestamp.strftime('%Y-%m-%d %H:%M:%S')}", file=self.output)
        print("=" * 80, file=self.output)
        print(file=self.output)

        print(f"Source: {report.source or '-'}", file=self.output)
        print(f"Table: {report.row_count} rows x {report.column_count} columns", file=self.output)
        print(f"Cells fixed: {report.cells_fixed}", file=self.output)
        print(file=self.output)

        print("SUMMARY", file=self.output)
        print("-" * 40, file=self.output)
        print(f"Issues: {report.issue_count}", file=self.output)
        for kind, count in report.issues_by_kind().items():
            if count > 0:
                print(f"  - {kind}: {count}", file=self.output)
        print(f"Quality: {report.quality_score:.1f} %", file=self.output)
        print(file=self.output)

        if report.issues:
            print("ISSUES", file=self.output)
            print("-" * 40, file=self.output)
            for issue in report.issues[:self.max_issues]:
                column = f" [{issue.column_name}]" if issue.column_name else ""
                print(
                    f"Row {issue.row_index}{column} {issue.issue_kind.value}: {issue.description}",
                    file=self.output
                )
            hidden = report.issue_count - self.max_issues
            if hidden > 0:
                print(f"... {hidden:,} more issues not shown", file=self.output)

        print(file=self.output)
        print("=" * 80, file=self.output)


def print_report(report: AnalysisReport, use_rich: bool = True) -> None:
    """
    Convenience function to print a report to console.

    Args:
        report: AnalysisReport to display
        use_rich: Use Rich formatting
    """
    reporter = ConsoleReporter(use_rich=use_rich)
    reporter.report(report)
