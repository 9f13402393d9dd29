"""
Validators package - row and cell checks used by the rule engine.

Each validator covers one category of data quality issue:
- Duplicates: Rows repeating an earlier row
- Completeness: Empty cells in required columns
- Numeric: Values that are not numbers or fall outside min/max
- Date: Values that are not dates or fall outside min/max
"""

from csvclean.validators.base import (
    AnalysisReport,
    BaseValidator,
    ColumnRule,
    Issue,
    IssueKind,
    RuleKind,
)
from csvclean.validators.completeness import CompletenessValidator
from csvclean.validators.duplicates import DuplicatesValidator
from csvclean.validators.range_check import (
    DateValidator,
    NumericValidator,
    TextValidator,
    parse_date,
    parse_number,
)


# Registry mapping rule kinds to cell validator classes
VALIDATOR_REGISTRY: dict[RuleKind, type[BaseValidator]] = {
    cls.rule_kind: cls for cls in (TextValidator, NumericValidator, DateValidator)
}


def get_validator(rule_kind: RuleKind) -> type[BaseValidator] | None:
    """
    Get validator class for a rule kind.

    Args:
        rule_kind: The kind of the column rule

    Returns:
        Validator class or None if not found
    """
    return VALIDATOR_REGISTRY.get(rule_kind)


__all__ = [
    'AnalysisReport',
    'BaseValidator',
    'ColumnRule',
    'Issue',
    'IssueKind',
    'RuleKind',
    'CompletenessValidator',
    'DuplicatesValidator',
    'NumericValidator',
    'DateValidator',
    'TextValidator',
    'parse_number',
    'parse_date',
    'VALIDATOR_REGISTRY',
    'get_validator',
]
