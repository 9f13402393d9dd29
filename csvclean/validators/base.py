"""
Base validator class and the value types shared by all validators.

Cell validators inherit from BaseValidator and implement validate(), which
returns the issues found in a single (already trimmed, non-empty) cell.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RuleKind(Enum):
    """How the values of a column are interpreted."""
    TEXT = "Text"
    NUMERIC = "Numeric"
    DATE = "Date"

    @classmethod
    def from_string(cls, value: str) -> "RuleKind":
        """Convert a case-insensitive name ('numeric', 'Date', ...) to a RuleKind."""
        for kind in cls:
            if kind.value.lower() == str(value).strip().lower():
                return kind
        raise ValueError(f"Unknown rule kind: {value}")


class IssueKind(Enum):
    """Categories of detected anomalies."""
    DUPLICATE = "Duplicate"
    REQUIRED = "Required"
    TYPE = "Type"
    RANGE = "Range"


@dataclass
class ColumnRule:
    """
    Validation policy for one column.

    Attributes:
        column_name: Column the rule applies to (matched case-insensitively)
        rule_kind: Text, Numeric or Date
        is_required: Flag empty (after trimming) cells
        min_value: Lower bound as raw text, interpreted per rule_kind
        max_value: Upper bound as raw text, interpreted per rule_kind
    """
    column_name: str
    rule_kind: RuleKind = RuleKind.TEXT
    is_required: bool = False
    min_value: str | None = None
    max_value: str | None = None

    def __str__(self) -> str:
        return f"{self.column_name} ({self.rule_kind.value})"


@dataclass(frozen=True)
class Issue:
    """
    A single detected anomaly.

    Attributes:
        issue_kind: Duplicate, Required, Type or Range
        row_index: 1-based data row position, 0 if row-independent
        column_name: Affected column, empty for row-level issues
        description: Human-readable explanation
    """
    issue_kind: IssueKind
    row_index: int
    column_name: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'issue_kind': self.issue_kind.value,
            'row_index': self.row_index,
            'column_name': self.column_name,
            'description': self.description
        }


@dataclass
class AnalysisReport:
    """
    Outcome of analyzing one table.

    Attributes:
        source: Where the table came from (file path or label)
        timestamp: When the analysis was run
        duration_seconds: Time taken for analysis (and autofix, if applied)
        row_count: Data rows in the analyzed table
        column_count: Columns in the analyzed table
        issues: Issues in detection order
        quality_score: Score in [0, 100] for these issues
        cells_fixed: Cells trimmed by autofix before the final analysis
        settings: Settings used
    """
    source: str
    timestamp: datetime
    duration_seconds: float
    row_count: int
    column_count: int
    issues: list[Issue]
    quality_score: float
    cells_fixed: int = 0
    settings: dict = field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def passed(self) -> bool:
        """True when no issue was found."""
        return not self.issues

    def issues_by_kind(self) -> dict[str, int]:
        """Count issues grouped by kind."""
        counts = {kind.value: 0 for kind in IssueKind}
        for issue in self.issues:
            counts[issue.issue_kind.value] += 1
        return counts

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'source': self.source,
            'timestamp': self.timestamp.isoformat(),
            'duration_seconds': self.duration_seconds,
            'summary': {
                'rows': self.row_count,
                'columns': self.column_count,
                'issue_count': self.issue_count,
                'quality_score': round(self.quality_score, 2),
                'cells_fixed': self.cells_fixed,
                'issues_by_kind': self.issues_by_kind()
            },
            'issues': [i.to_dict() for i in self.issues],
            'settings': self.settings
        }


def has_bound(value: str | None) -> bool:
    """True when a min/max setting holds something other than whitespace."""
    return value is not None and bool(str(value).strip())


def format_number(value: float) -> str:
    """Render a float without a trailing '.0' for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


class BaseValidator(ABC):
    """
    Abstract base class for cell validators.

    Subclasses must implement:
        - rule_kind: Class attribute naming the RuleKind handled
        - validate(): Check one trimmed, non-empty cell value
    """

    rule_kind: RuleKind  # Set by subclasses; keys the registry

    def __init__(self, settings: dict | None = None):
        """
        Initialize validator.

        Args:
            settings: Global settings (date_dayfirst, etc.)
        """
        self.settings = settings or {}

    @abstractmethod
    def validate(self, value: str, row_index: int, rule: ColumnRule, column_name: str) -> list[Issue]:
        """
        Validate a single cell.

        Args:
            value: Trimmed, non-empty cell text
            row_index: 1-based data row position
            rule: Rule matched to the column
            column_name: Table column name

        Returns:
            Issues found, in detection order (empty when valid)
        """
        pass

    def _build_issue(self, kind: IssueKind, row_index: int, column_name: str, description: str) -> Issue:
        """Helper to build an Issue for a cell."""
        return Issue(
            issue_kind=kind,
            row_index=row_index,
            column_name=column_name,
            description=description
        )
