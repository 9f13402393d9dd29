"""
Tests for the command line entry point.

Run with: pytest tests/test_main.py -v
"""

import pytest

from csvclean.main import main


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / 'people.csv'
    path.write_text("Name;Age\nAnna;30\nAnna;30\nBen;abc\n Cleo ;41\n", encoding='utf-8')
    return path


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / 'rules.yaml'
    path.write_text("rules:\n  - column: Age\n    type: numeric\n    max: 40\n", encoding='utf-8')
    return path


class TestMain:
    """Tests for CLI runs."""

    def test_default_run_succeeds(self, csv_file, capsys):
        assert main([str(csv_file), '--no-color']) == 0

        out = capsys.readouterr().out
        assert 'DATA QUALITY REPORT' in out
        assert 'Duplicate: 1' in out

    def test_rules_and_exports(self, csv_file, rules_file, tmp_path):
        cleaned = tmp_path / 'cleaned.csv'
        issues = tmp_path / 'issues.csv'

        code = main([
            str(csv_file), '--rules', str(rules_file), '--fix', '--quiet',
            '--export-cleaned', str(cleaned), '--export-issues', str(issues)
        ])

        assert code == 0
        assert cleaned.read_text(encoding='utf-8').splitlines()[-1] == 'Cleo;41'
        assert issues.read_text(encoding='utf-8').splitlines() == [
            'IssueType;RowIndex;ColumnName;Description',
            'Duplicate;2;;Duplicate row detected.',
            "Type;3;Age;Value 'abc' is not numeric.",
            'Range;4;Age;Value 41 is greater than max 40.',
        ]

    def test_json_output_directory(self, csv_file, tmp_path):
        reports = tmp_path / 'reports'

        assert main([str(csv_file), '--quiet', '--output', str(reports)]) == 0

        assert (reports / 'dq_history.jsonl').exists()

    def test_min_score_not_met(self, csv_file, rules_file):
        assert main([str(csv_file), '--rules', str(rules_file), '--quiet', '--min-score', '99']) == 1

    def test_min_score_met(self, csv_file):
        assert main([str(csv_file), '--quiet', '--min-score', '50']) == 0

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / 'missing.csv'), '--quiet']) == 2

        assert 'Load error' in capsys.readouterr().err

    def test_invalid_utf8_input_is_loaded(self, tmp_path):
        path = tmp_path / 'latin1.csv'
        path.write_bytes(b'Name;Age\nM\xfcller;30\n')

        assert main([str(path), '--quiet']) == 0

    def test_unresolved_output_dir_is_a_configuration_error(self, csv_file, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv('CSVCLEAN_UNSET_OUTDIR', raising=False)
        bad = tmp_path / 'bad.yaml'
        bad.write_text("settings:\n  output_dir: ${CSVCLEAN_UNSET_OUTDIR}\n", encoding='utf-8')

        assert main([str(csv_file), '--rules', str(bad), '--quiet']) == 2

        assert 'Configuration error' in capsys.readouterr().err
        assert not any(tmp_path.glob('$*'))

    def test_bad_rules_file(self, csv_file, tmp_path, capsys):
        bad = tmp_path / 'bad.yaml'
        bad.write_text("rules:\n  - type: date\n", encoding='utf-8')

        assert main([str(csv_file), '--rules', str(bad), '--quiet']) == 2

        assert 'Configuration error' in capsys.readouterr().err


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
