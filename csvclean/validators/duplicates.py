"""
Duplicates validator - detects rows repeating an earlier row exactly.

Rows are compared on their verbatim (untrimmed) cell values. The first
occurrence of a row is never flagged; every later repetition is.
"""

from csvclean.validators.base import Issue, IssueKind


FINGERPRINT_JOINER = '||'


class DuplicatesValidator:
    """
    Detect duplicate rows across one pass over a table.

    An instance keeps the fingerprints seen so far, so use a fresh instance
    per analysis. Rows whose cells are all empty are never checked, even if
    repeated.
    """

    def __init__(self):
        self._seen: set[str] = set()

    @staticmethod
    def fingerprint(row: list[str]) -> str:
        """Join the verbatim cell values of a row into a comparison key."""
        return FINGERPRINT_JOINER.join(row)

    def check(self, row: list[str], row_index: int) -> Issue | None:
        """
        Record a row and report it if it was seen before.

        Args:
            row: Cell values of the row
            row_index: 1-based data row position

        Returns:
            Duplicate issue, or None for first occurrences and empty rows
        """
        if not any(row):
            return None

        key = self.fingerprint(row)
        if key in self._seen:
            return Issue(
                issue_kind=IssueKind.DUPLICATE,
                row_index=row_index,
                column_name="",
                description="Duplicate row detected."
            )
        self._seen.add(key)
        return None
