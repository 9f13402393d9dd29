"""
Range validators - typed parsing plus min/max checks for Numeric and Date rules.

A value that does not parse yields a single Type issue and no range checks.
A value that parses is compared against each bound that is set and itself
parses; the lower and upper checks are independent, so a rule with
min > max reports two Range issues for a value outside both.
"""

import re
from datetime import datetime

from dateutil import parser as dateutil_parser

from csvclean.validators.base import (
    BaseValidator,
    ColumnRule,
    Issue,
    IssueKind,
    RuleKind,
    format_number,
    has_bound,
)


# Invariant number grammar: sign, digits with optional decimal point, exponent
NUMBER_PATTERN = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$')
SPECIAL_NUMBERS = {'nan', 'infinity', '+infinity', '-infinity'}

YEAR_FIRST_PATTERN = re.compile(r'^\d{4}[-/.]')
# Differ in year, month and day; time of day stays midnight in both
DATE_PART_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_number(text: str | None) -> float | None:
    """
    Parse a number written with either '.' or ',' as decimal separator.

    Returns:
        The value, or None if the text is not a number
    """
    if text is None:
        return None
    normalized = str(text).strip().replace(',', '.')
    if NUMBER_PATTERN.match(normalized) or normalized.lower() in SPECIAL_NUMBERS:
        return float(normalized)
    return None


def parse_date(text: str | None, dayfirst: bool = False) -> datetime | None:
    """
    Parse a calendar date or date/time with dateutil's permissive parser.

    Values starting with a four digit year are always read year-month-day;
    ``dayfirst`` only decides ambiguous forms such as 01.02.2024. Year, month
    and day must all be present: the text is parsed against two different
    default dates, and a result that differs between them borrowed a part
    from the default. Time zones are ignored so that all parsed values stay
    comparable.

    Returns:
        The parsed datetime, or None if the text is not a date
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None

    yearfirst = bool(YEAR_FIRST_PATTERN.match(text))
    try:
        first, second = (
            dateutil_parser.parse(
                text,
                dayfirst=dayfirst and not yearfirst,
                yearfirst=yearfirst,
                ignoretz=True,
                default=default
            )
            for default in DATE_PART_DEFAULTS
        )
    except (ValueError, OverflowError):
        return None

    if first.date() != second.date():
        return None
    return first


class NumericValidator(BaseValidator):
    """
    Validate numeric cells and their bounds.

    Example rule:
        - column: Age
          type: numeric
          min: 0
          max: 120
    """

    rule_kind = RuleKind.NUMERIC

    def validate(self, value: str, row_index: int, rule: ColumnRule, column_name: str) -> list[Issue]:
        """Check that the value is a number inside the configured bounds."""
        number = parse_number(value)
        if number is None:
            return [self._build_issue(
                IssueKind.TYPE, row_index, column_name,
                f"Value '{value}' is not numeric."
            )]

        issues = []

        minimum = parse_number(rule.min_value) if has_bound(rule.min_value) else None
        if minimum is not None and number < minimum:
            issues.append(self._build_issue(
                IssueKind.RANGE, row_index, column_name,
                f"Value {format_number(number)} is less than min {format_number(minimum)}."
            ))

        maximum = parse_number(rule.max_value) if has_bound(rule.max_value) else None
        if maximum is not None and number > maximum:
            issues.append(self._build_issue(
                IssueKind.RANGE, row_index, column_name,
                f"Value {format_number(number)} is greater than max {format_number(maximum)}."
            ))

        return issues


class DateValidator(BaseValidator):
    """
    Validate date cells and their bounds.

    Settings:
        date_dayfirst: Read ambiguous dates such as 01.02.2024 as day-first

    Example rule:
        - column: Birthday
          type: date
          min: 1900-01-01
    """

    rule_kind = RuleKind.DATE

    def validate(self, value: str, row_index: int, rule: ColumnRule, column_name: str) -> list[Issue]:
        """Check that the value is a date inside the configured bounds."""
        dayfirst = bool(self.settings.get('date_dayfirst', False))

        moment = parse_date(value, dayfirst)
        if moment is None:
            return [self._build_issue(
                IssueKind.TYPE, row_index, column_name,
                f"Value '{value}' is not a valid date."
            )]

        issues = []

        earliest = parse_date(rule.min_value, dayfirst) if has_bound(rule.min_value) else None
        if earliest is not None and moment < earliest:
            issues.append(self._build_issue(
                IssueKind.RANGE, row_index, column_name,
                f"Date {moment:%Y-%m-%d} is before min {earliest:%Y-%m-%d}."
            ))

        latest = parse_date(rule.max_value, dayfirst) if has_bound(rule.max_value) else None
        if latest is not None and moment > latest:
            issues.append(self._build_issue(
                IssueKind.RANGE, row_index, column_name,
                f"Date {moment:%Y-%m-%d} is after max {latest:%Y-%m-%d}."
            ))

        return issues


class TextValidator(BaseValidator):
    """Text columns have no checks beyond completeness."""

    rule_kind = RuleKind.TEXT

    def validate(self, value: str, row_index: int, rule: ColumnRule, column_name: str) -> list[Issue]:
        return []
