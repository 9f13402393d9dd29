"""
Unit tests for console, JSON and CSV output.

Run with: pytest tests/test_reporters.py -v
"""

import io
import json

import pytest

from csvclean.reporters import ConsoleReporter, JSONReporter, escape, export_issues, export_table, save_report
from csvclean.reporters.csv_export import format_issues, format_table
from csvclean.rule_engine import TableValidator
from csvclean.table import Table
from csvclean.validators import ColumnRule, Issue, IssueKind, RuleKind


@pytest.fixture
def report():
    table = Table(
        columns=['Name', 'Age'],
        rows=[['Anna', '30'], ['Anna', '30'], ['Ben', '[abc]']]
    )
    return TableValidator().run(table, [ColumnRule('Age', RuleKind.NUMERIC)], source='people.csv')


class TestEscape:
    """Tests for semicolon field quoting."""

    @pytest.mark.parametrize('value, expected', [
        ('plain', 'plain'),
        ('', ''),
        ('a;b', '"a;b"'),
        ('say "hi"', '"say ""hi"""'),
        ('two\nlines', '"two\nlines"'),
        ('a,b', 'a,b'),
    ])
    def test_escape(self, value, expected):
        assert escape(value) == expected


class TestCsvExport:
    """Tests for cleaned table and issue export."""

    def test_format_table(self):
        table = Table(columns=['a', 'b;c'], rows=[['1', 'x"y'], ['', '2']])

        assert format_table(table) == 'a;"b;c"\n1;"x""y"\n;2\n'

    def test_format_issues(self):
        issues = [
            Issue(IssueKind.DUPLICATE, 2, '', 'Duplicate row detected.'),
            Issue(IssueKind.TYPE, 3, 'Age', "Value 'a;b' is not numeric."),
        ]

        assert format_issues(issues).splitlines() == [
            'IssueType;RowIndex;ColumnName;Description',
            'Duplicate;2;;Duplicate row detected.',
            'Type;3;Age;"Value \'a;b\' is not numeric."',
        ]

    def test_export_writes_utf8_without_bom(self, tmp_path):
        table = Table(columns=['Größe'], rows=[['1,80']])

        path = export_table(table, tmp_path / 'out' / 'cleaned.csv')

        raw = path.read_bytes()
        assert not raw.startswith(b'\xef\xbb\xbf')
        assert raw.decode('utf-8') == 'Größe\n1,80\n'

    def test_export_issues_file(self, tmp_path, report):
        path = export_issues(report.issues, tmp_path / 'issues.csv')

        lines = path.read_text(encoding='utf-8').splitlines()
        assert len(lines) == 1 + report.issue_count


class TestJSONReporter:
    """Tests for JSON report files."""

    def test_save_full_report(self, tmp_path, report):
        path = JSONReporter(tmp_path).save(report, 'report.json')

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data['source'] == 'people.csv'
        assert data['summary']['issue_count'] == 2
        assert [i['issue_kind'] for i in data['issues']] == ['Duplicate', 'Type']

    def test_save_report_writes_summary_and_history(self, tmp_path, report):
        full_path, summary_path = save_report(report, tmp_path / 'reports')
        save_report(report, tmp_path / 'reports')

        summary = json.loads(summary_path.read_text(encoding='utf-8'))
        assert full_path.exists()
        assert summary['quality_score'] == round(report.quality_score, 2)

        history = (tmp_path / 'reports' / 'dq_history.jsonl').read_text(encoding='utf-8').splitlines()
        assert len(history) == 2
        assert json.loads(history[0])['issues'] == 2


class TestConsoleReporter:
    """Tests for terminal output."""

    def test_plain_output(self, report):
        output = io.StringIO()

        ConsoleReporter(use_rich=False, output=output).report(report)

        text = output.getvalue()
        assert 'DATA QUALITY REPORT' in text
        assert 'Source: people.csv' in text
        assert 'Row 2 Duplicate: Duplicate row detected.' in text
        assert "Row 3 [Age] Type: Value '[abc]' is not numeric." in text

    def test_rich_output(self, report):
        output = io.StringIO()

        ConsoleReporter(use_rich=True, output=output).report(report)

        text = output.getvalue()
        assert 'DATA QUALITY REPORT' in text
        assert 'Duplicate' in text
        assert '[abc]' in text

    def test_issue_list_is_truncated(self, report):
        output = io.StringIO()

        ConsoleReporter(use_rich=False, output=output, max_issues=1).report(report)

        assert '1 more issues not shown' in output.getvalue()

    @pytest.mark.parametrize('score, color', [(100.0, 'green'), (75.0, 'yellow'), (10.0, 'red')])
    def test_score_color(self, score, color):
        assert ConsoleReporter.score_color(score) == color


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
