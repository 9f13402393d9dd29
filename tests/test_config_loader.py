"""
Unit tests for the rules configuration loader.

Run with: pytest tests/test_config_loader.py -v
"""

import pytest

from csvclean.config_loader import ConfigLoader, ConfigurationError, load_config
from csvclean.validators import RuleKind


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary rules file and return its path."""
    def _write(content: str):
        path = tmp_path / 'rules.yaml'
        path.write_text(content, encoding='utf-8')
        return path
    return _write


class TestLoadRules:
    """Tests for rule parsing."""

    def test_builds_column_rules(self, write_config):
        config = load_config(write_config("""
rules:
  - column: Age
    type: numeric
    required: true
    min: 0
    max: 120
  - column: Born
    type: Date
    min: 1900-01-01
  - column: Name
"""))

        age, born, name = config.get_rules()

        assert age.column_name == 'Age'
        assert age.rule_kind == RuleKind.NUMERIC
        assert age.is_required is True
        assert (age.min_value, age.max_value) == ('0', '120')
        assert born.rule_kind == RuleKind.DATE
        assert born.min_value == '1900-01-01'
        assert name.rule_kind == RuleKind.TEXT
        assert name.is_required is False
        assert name.min_value is None

    def test_decimal_bounds_keep_text(self, write_config):
        config = load_config(write_config("""
rules:
  - column: Price
    type: numeric
    min: "0,5"
    max: 99.5
"""))

        rule = config.get_rules()[0]

        assert (rule.min_value, rule.max_value) == ('0,5', '99.5')

    def test_environment_substitution(self, write_config, monkeypatch):
        monkeypatch.setenv('CSVCLEAN_MAX_AGE', '99')

        config = load_config(write_config("""
rules:
  - column: Age
    type: numeric
    max: ${CSVCLEAN_MAX_AGE}
"""))

        assert config.get_rules()[0].max_value == '99'

    def test_empty_file_has_no_rules(self, write_config):
        config = load_config(write_config(""))

        assert config.get_rules() == []


class TestSettings:
    """Tests for settings defaults."""

    def test_defaults(self, write_config):
        settings = load_config(write_config("rules: []")).get_settings()

        assert settings == ConfigLoader.DEFAULT_SETTINGS

    def test_overrides(self, write_config):
        settings = load_config(write_config("""
settings:
  auto_fix: true
  date_dayfirst: true
  min_score: 90
""")).get_settings()

        assert settings['auto_fix'] is True
        assert settings['date_dayfirst'] is True
        assert settings['min_score'] == 90
        assert settings['output_dir'] is None


class TestConfigErrors:
    """Tests for invalid configuration."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match='not found'):
            load_config(tmp_path / 'nope.yaml')

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigurationError, match='Invalid YAML'):
            load_config(write_config("rules: [\n  - column: a\n"))

    def test_rule_without_column(self, write_config):
        with pytest.raises(ConfigurationError, match='column'):
            load_config(write_config("rules:\n  - type: numeric\n"))

    def test_unknown_type(self, write_config):
        with pytest.raises(ConfigurationError, match='invalid type'):
            load_config(write_config("rules:\n  - column: a\n    type: currency\n"))

    def test_unresolved_environment_variable(self, write_config, monkeypatch):
        monkeypatch.delenv('CSVCLEAN_UNSET_VALUE', raising=False)

        with pytest.raises(ConfigurationError, match='unresolved'):
            load_config(write_config("rules:\n  - column: a\n    min: ${CSVCLEAN_UNSET_VALUE}\n"))

    def test_rules_must_be_a_list(self, write_config):
        with pytest.raises(ConfigurationError):
            load_config(write_config("rules:\n  column: a\n"))

    def test_min_score_must_be_number(self, write_config):
        with pytest.raises(ConfigurationError, match='min_score'):
            load_config(write_config("settings:\n  min_score: high\n"))

    def test_unresolved_variable_in_settings(self, write_config, monkeypatch):
        monkeypatch.delenv('CSVCLEAN_UNSET_OUTDIR', raising=False)

        with pytest.raises(ConfigurationError, match='output_dir has unresolved'):
            load_config(write_config("settings:\n  output_dir: ${CSVCLEAN_UNSET_OUTDIR}\n"))

    def test_unresolved_variable_in_column(self, write_config, monkeypatch):
        monkeypatch.delenv('CSVCLEAN_UNSET_COLUMN', raising=False)

        with pytest.raises(ConfigurationError, match='unresolved'):
            load_config(write_config("rules:\n  - column: ${CSVCLEAN_UNSET_COLUMN}\n"))

    @pytest.mark.parametrize('setting', ['auto_fix', 'date_dayfirst'])
    @pytest.mark.parametrize('value', ['"false"', '"no"', '1'])
    def test_flag_settings_must_be_booleans(self, write_config, setting, value):
        with pytest.raises(ConfigurationError, match=setting):
            load_config(write_config(f"settings:\n  {setting}: {value}\n"))

    def test_required_must_be_boolean(self, write_config):
        with pytest.raises(ConfigurationError, match='required'):
            load_config(write_config("rules:\n  - column: a\n    required: \"false\"\n"))

    def test_output_dir_must_be_text(self, write_config):
        with pytest.raises(ConfigurationError, match='output_dir'):
            load_config(write_config("settings:\n  output_dir: [a, b]\n"))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
