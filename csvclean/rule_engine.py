"""
Rule engine - analyzes a table against column rules and scores its quality.

Runs the duplicate check and the per-cell validators in a single row-major
pass, applies the whitespace autofix, and turns issue counts into a score.
"""

import logging
import time
from datetime import datetime
from typing import Iterable

from csvclean.table import Table
from csvclean.validators import (
    AnalysisReport,
    BaseValidator,
    ColumnRule,
    CompletenessValidator,
    DuplicatesValidator,
    Issue,
    RuleKind,
    VALIDATOR_REGISTRY,
)


logger = logging.getLogger(__name__)


def build_rule_index(rules: Iterable[ColumnRule]) -> dict[str, ColumnRule]:
    """
    Map case-folded column names to rules.

    Rules with blank column names are skipped. When several rules name the
    same column (ignoring case) only the first one is kept.
    """
    index: dict[str, ColumnRule] = {}
    for rule in rules:
        if not rule.column_name or not rule.column_name.strip():
            continue
        key = rule.column_name.casefold()
        if key in index:
            continue
        index[key] = rule
    return index


def build_default_rules(table: Table) -> list[ColumnRule]:
    """One optional Text rule per column, in column order."""
    return [
        ColumnRule(column_name=name, rule_kind=RuleKind.TEXT, is_required=False)
        for name in table.columns
    ]


class TableValidator:
    """
    Analyze tables against column rules.

    Handles:
    - Duplicate row detection
    - Required, type and range checks per rule kind
    - Whitespace autofix
    - Quality scoring
    """

    def __init__(self, settings: dict | None = None):
        """
        Initialize table validator.

        Args:
            settings: Global settings passed on to the cell validators
        """
        self.settings = settings or {}
        self._completeness = CompletenessValidator()
        self._validators: dict[RuleKind, BaseValidator] = {
            kind: validator_class(self.settings)
            for kind, validator_class in VALIDATOR_REGISTRY.items()
        }

    def analyze(self, table: Table, rules: Iterable[ColumnRule]) -> list[Issue]:
        """
        Find all issues in a table. The table is only read.

        Args:
            table: Table to check
            rules: Column rules (case-insensitive names, first one wins)

        Returns:
            Issues ordered by row, duplicate check first, then columns left to right
        """
        issues: list[Issue] = []
        if table.row_count == 0:
            return issues

        rule_index = build_rule_index(rules)
        column_rules = [rule_index.get(name.casefold()) for name in table.columns]
        duplicates = DuplicatesValidator()

        for position, row in enumerate(table.rows):
            row_index = position + 1

            duplicate = duplicates.check(row, row_index)
            if duplicate:
                issues.append(duplicate)

            for column_name, rule, raw in zip(table.columns, column_rules, row):
                if rule is None:
                    continue
                issues.extend(self._check_cell(raw, row_index, rule, column_name))

        logger.info(
            "Analyzed %d rows x %d columns: %d issues",
            table.row_count, table.column_count, len(issues)
        )
        return issues

    def _check_cell(self, raw: str, row_index: int, rule: ColumnRule, column_name: str) -> list[Issue]:
        """Run the completeness check and the rule kind's validator on one cell."""
        value = raw.strip()

        missing = self._completeness.validate(value, row_index, rule, column_name)
        if missing:
            return [missing]
        if not value:
            return []

        validator = self._validators.get(rule.rule_kind)
        if validator is None:
            return []
        return validator.validate(value, row_index, rule, column_name)

    def apply_auto_fixes(self, table: Table) -> int:
        """
        Trim leading and trailing whitespace from every cell, in place.

        Cells that are already trimmed are left untouched, so a second call
        changes nothing.

        Returns:
            Number of cells changed
        """
        changed = 0
        for row_pos, row in enumerate(table.rows):
            for col, value in enumerate(row):
                trimmed = value.strip()
                if trimmed != value:
                    table.set_cell(row_pos, col, trimmed)
                    changed += 1

        logger.info("Autofix trimmed %d cells", changed)
        return changed

    def calculate_quality_score(self, table: Table, issues: list[Issue]) -> float:
        """
        Score a table from 0 to 100 by issue density.

        Each issue costs 100 / (rows * columns + 1) points; an empty table
        scores 100 whatever the issues.
        """
        if table.row_count == 0:
            return 100.0

        penalty_per_issue = 100.0 / (table.row_count * table.column_count + 1)
        score = 100.0 - len(issues) * penalty_per_issue
        return max(0.0, min(100.0, score))

    def run(
        self,
        table: Table,
        rules: Iterable[ColumnRule] | None = None,
        auto_fix: bool = False,
        source: str = ""
    ) -> AnalysisReport:
        """
        Analyze a table (after an optional autofix) and return a report.

        Args:
            table: Table to check; modified in place when auto_fix is set
            rules: Column rules (default: one optional Text rule per column)
            auto_fix: Trim cells before the analysis
            source: Label for the report, typically the file path

        Returns:
            AnalysisReport with issues and score
        """
        start_time = time.time()

        if rules is None:
            rules = build_default_rules(table)
        rules = list(rules)

        cells_fixed = self.apply_auto_fixes(table) if auto_fix else 0
        issues = self.analyze(table, rules)
        score = self.calculate_quality_score(table, issues)

        return AnalysisReport(
            source=source,
            timestamp=datetime.now(),
            duration_seconds=round(time.time() - start_time, 3),
            row_count=table.row_count,
            column_count=table.column_count,
            issues=issues,
            quality_score=score,
            cells_fixed=cells_fixed,
            settings=self.settings
        )
