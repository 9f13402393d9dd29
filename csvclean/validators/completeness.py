"""
Completeness validator - flags empty cells in required columns.
"""

from csvclean.validators.base import ColumnRule, Issue, IssueKind


class CompletenessValidator:
    """
    Flag required cells that are empty after trimming.

    Applies to every rule kind, so it is not part of the kind registry.

    Example rule:
        - column: Email
          type: text
          required: true
    """

    def validate(self, value: str, row_index: int, rule: ColumnRule, column_name: str) -> Issue | None:
        """Return a Required issue if the rule demands a value and there is none."""
        if rule.is_required and not value:
            return Issue(
                issue_kind=IssueKind.REQUIRED,
                row_index=row_index,
                column_name=column_name,
                description="Required field is empty."
            )
        return None
