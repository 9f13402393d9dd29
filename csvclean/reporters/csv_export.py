"""
CSV exporter - writes cleaned tables and issue lists as semicolon files.

Output is UTF-8 without a byte-order mark. Fields holding ';', '"' or a
newline are wrapped in double quotes with inner quotes doubled.
"""

from pathlib import Path
from typing import Iterable

from csvclean.table import Table
from csvclean.validators import Issue


SEPARATOR = ';'
ISSUE_HEADER = ['IssueType', 'RowIndex', 'ColumnName', 'Description']


def escape(value: str) -> str:
    """Quote a field for semicolon output if it needs it."""
    if ';' in value or '"' in value or '\n' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_line(fields: Iterable[str]) -> str:
    return SEPARATOR.join(escape(f) for f in fields)


def format_table(table: Table) -> str:
    """Render header and rows of a table."""
    lines = [format_line(table.columns)]
    lines.extend(format_line(row) for row in table.rows)
    return '\n'.join(lines) + '\n'


def format_issues(issues: Iterable[Issue]) -> str:
    """Render an issue list with a fixed header line."""
    lines = [SEPARATOR.join(ISSUE_HEADER)]
    for issue in issues:
        lines.append(SEPARATOR.join([
            escape(issue.issue_kind.value),
            str(issue.row_index),
            escape(issue.column_name),
            escape(issue.description)
        ]))
    return '\n'.join(lines) + '\n'


def _write(path: str | Path, content: str) -> Path:
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    return filepath


def export_table(table: Table, path: str | Path) -> Path:
    """
    Write a table to a semicolon separated file.

    Returns:
        Path to written file
    """
    return _write(path, format_table(table))


def export_issues(issues: Iterable[Issue], path: str | Path) -> Path:
    """
    Write issues to a semicolon separated file.

    Returns:
        Path to written file
    """
    return _write(path, format_issues(issues))
