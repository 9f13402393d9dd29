"""
JSON reporter - saves analysis results to JSON files.

Writes a full report, a condensed summary, and one line per run to a JSONL
history file for tracking quality over time.
"""

import json
from pathlib import Path

from csvclean.validators import AnalysisReport


class JSONReporter:
    """Save analysis reports to JSON files."""

    def __init__(self, output_dir: str | Path = "reports"):
        """
        Initialize JSON reporter.

        Args:
            output_dir: Directory to save reports (created if needed)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save(self, report: AnalysisReport, filename: str | None = None) -> Path:
        """
        Save report to JSON file.

        Args:
            report: AnalysisReport to save
            filename: Custom filename (default: auto-generated with timestamp)

        Returns:
            Path to saved file
        """
        if filename is None:
            timestamp = report.timestamp.strftime('%Y%m%d_%H%M%S')
            filename = f"dq_report_{timestamp}.json"

        filepath = self.output_dir / filename
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, default=str)

        return filepath

    def save_summary(self, report: AnalysisReport, filename: str | None = None) -> Path:
        """
        Save condensed summary (for dashboards/alerts).

        Args:
            report: AnalysisReport to summarize
            filename: Custom filename

        Returns:
            Path to saved file
        """
        if filename is None:
            timestamp = report.timestamp.strftime('%Y%m%d_%H%M%S')
            filename = f"dq_summary_{timestamp}.json"

        filepath = self.output_dir / filename

        summary = {
            'timestamp': report.timestamp.isoformat(),
            'source': report.source,
            'rows': report.row_count,
            'columns': report.column_count,
            'issue_count': report.issue_count,
            'issues_by_kind': report.issues_by_kind(),
            'quality_score': round(report.quality_score, 2),
            'cells_fixed': report.cells_fixed
        }

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2)

        return filepath

    def append_to_history(self, report: AnalysisReport, history_file: str = "dq_history.jsonl") -> Path:
        """
        Append summary to JSONL history file (one record per line).

        Args:
            report: AnalysisReport to append
            history_file: Name of history file

        Returns:
            Path to history file
        """
        filepath = self.output_dir / history_file

        record = {
            'timestamp': report.timestamp.isoformat(),
            'source': report.source,
            'rows': report.row_count,
            'issues': report.issue_count,
            'score': round(report.quality_score, 2),
            'duration': report.duration_seconds
        }

        with open(filepath, 'a', encoding='utf-8') as f:
            f.write(json.dumps(record) + '\n')

        return filepath


def save_report(report: AnalysisReport, output_dir: str | Path = "reports") -> tuple[Path, Path]:
    """
    Convenience function to save both full report and summary.

    Args:
        report: AnalysisReport to save
        output_dir: Output directory

    Returns:
        Tuple of (full_report_path, summary_path)
    """
    reporter = JSONReporter(output_dir)
    full_path = reporter.save(report)
    summary_path = reporter.save_summary(report)
    reporter.append_to_history(report)
    return full_path, summary_path
