"""
Configuration loader for column rules and analysis settings.

Handles YAML parsing, environment variable substitution, and validation.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from csvclean.validators import ColumnRule, RuleKind


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


class ConfigLoader:
    """Load and validate column rules and settings from a YAML file."""

    ENV_PATTERN = re.compile(r'\$\{([^}]+)\}')

    BOOLEAN_SETTINGS = ('auto_fix', 'date_dayfirst')

    DEFAULT_SETTINGS = {
        'auto_fix': False,
        'date_dayfirst': False,
        'output_dir': None,
        'min_score': None,
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to rules configuration YAML
        """
        self.config_path = Path(config_path)
        self._config: dict = {}
        self._rules: list[ColumnRule] = []

    def load(self) -> dict:
        """Load, validate and return the parsed configuration."""
        self._config = self._load_yaml(self.config_path)
        self._validate_config()
        self._rules = [self._build_rule(r) for r in self._config.get('rules') or []]
        return self._config

    def _load_yaml(self, path: Path) -> dict:
        """Load YAML file with environment variable substitution."""
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

        content = self._substitute_env_vars(content)

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping")
        return data

    def _substitute_env_vars(self, content: str) -> str:
        """Replace ${VAR_NAME} patterns with environment variable values."""
        def replace_match(match):
            value = os.environ.get(match.group(1))
            if value is None:
                # Keep the placeholder; validation reports it
                return match.group(0)
            return value

        return self.ENV_PATTERN.sub(replace_match, content)

    def _validate_config(self) -> None:
        """Validate configuration structure and required fields."""
        self._check_unresolved(self._config, 'configuration')

        rules = self._config.get('rules') or []
        if not isinstance(rules, list):
            raise ConfigurationError("'rules' must be a list")

        for i, rule in enumerate(rules):
            self._validate_rule(rule, i)

        settings = self._config.get('settings') or {}
        if not isinstance(settings, dict):
            raise ConfigurationError("'settings' must be a mapping")

        for key in self.BOOLEAN_SETTINGS:
            value = settings.get(key)
            if value is not None and not isinstance(value, bool):
                raise ConfigurationError(f"Setting '{key}' must be true or false, got: {value!r}")

        output_dir = settings.get('output_dir')
        if output_dir is not None and not isinstance(output_dir, str):
            raise ConfigurationError(f"Setting 'output_dir' must be a path, got: {output_dir!r}")

        min_score = settings.get('min_score')
        if min_score is not None and (
            isinstance(min_score, bool) or not isinstance(min_score, (int, float))
        ):
            raise ConfigurationError(f"Setting 'min_score' must be a number, got: {min_score!r}")

    def _check_unresolved(self, value: Any, location: str) -> None:
        """Reject ${VAR} placeholders left over after substitution."""
        if isinstance(value, dict):
            for key, item in value.items():
                self._check_unresolved(item, f"{location}.{key}")
        elif isinstance(value, list):
            for i, item in enumerate(value):
                self._check_unresolved(item, f"{location}[{i}]")
        elif isinstance(value, str) and self.ENV_PATTERN.search(value):
            raise ConfigurationError(f"{location} has unresolved environment variable: {value}")

    def _validate_rule(self, rule: Any, index: int) -> None:
        """Validate a single rule definition."""
        if not isinstance(rule, dict):
            raise ConfigurationError(f"Rule at index {index} must be a mapping")

        if not str(rule.get('column') or '').strip():
            raise ConfigurationError(f"Rule at index {index} missing required field: column")

        rule_type = rule.get('type', 'text')
        try:
            RuleKind.from_string(rule_type)
        except ValueError:
            valid_types = [k.value.lower() for k in RuleKind]
            raise ConfigurationError(
                f"Rule '{rule['column']}' has invalid type: {rule_type}. "
                f"Must be one of: {valid_types}"
            )

        required = rule.get('required')
        if required is not None and not isinstance(required, bool):
            raise ConfigurationError(
                f"Rule '{rule['column']}' field 'required' must be true or false, got: {required!r}"
            )

    def _build_rule(self, rule: dict) -> ColumnRule:
        """Convert a validated rule mapping into a ColumnRule."""
        return ColumnRule(
            column_name=str(rule['column']),
            rule_kind=RuleKind.from_string(rule.get('type', 'text')),
            is_required=bool(rule.get('required', False)),
            min_value=self._bound_to_text(rule.get('min')),
            max_value=self._bound_to_text(rule.get('max'))
        )

    @staticmethod
    def _bound_to_text(value: Any) -> str | None:
        """YAML may hand back ints, floats or dates; rules keep raw text."""
        if value is None:
            return None
        return str(value)

    def get_rules(self) -> list[ColumnRule]:
        """Return the configured column rules, in file order."""
        return list(self._rules)

    def get_settings(self) -> dict:
        """Return settings with defaults."""
        return {**self.DEFAULT_SETTINGS, **(self._config.get('settings') or {})}


def load_config(config_path: str | Path) -> ConfigLoader:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to rules YAML

    Returns:
        Loaded ConfigLoader instance
    """
    loader = ConfigLoader(config_path)
    loader.load()
    return loader
