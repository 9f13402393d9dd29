"""
Table loader - reads a delimited text file into a Table.

The separator is sniffed from the header line only (',' or ';'). Fields are
split verbatim: there is no quoting or escaping grammar, so this is a
best-effort reader and not RFC-4180 compliant.
"""

import logging
from pathlib import Path

from csvclean.table import Table


logger = logging.getLogger(__name__)

SUPPORTED_SEPARATORS = (';', ',')
BLANK_COLUMN_PREFIX = 'Spalte_'


class LoaderError(Exception):
    """Base class for errors raised while loading a table."""
    pass


class InvalidArgumentError(LoaderError, ValueError):
    """Raised when the file path is empty or blank."""
    pass


class NotFoundError(LoaderError, FileNotFoundError):
    """Raised when the file path does not point to an existing file."""
    pass


class EmptyInputError(LoaderError, ValueError):
    """Raised when the file contains no lines at all."""
    pass


def detect_separator(line: str) -> str:
    """
    Pick the field separator for a header line.

    Semicolon wins ties, so a line with neither character yields ';'.
    """
    return ';' if line.count(';') >= line.count(',') else ','


def build_columns(tokens: list[str]) -> list[str]:
    """
    Turn raw header tokens into unique column names.

    Blank tokens become 'Spalte_<position>'. Names colliding with an earlier
    column (ignoring case) get the first free '_2', '_3', ... suffix.
    """
    columns: list[str] = []
    taken: set[str] = set()

    for position, token in enumerate(tokens, start=1):
        if not token.strip():
            name = f'{BLANK_COLUMN_PREFIX}{position}'
        else:
            name = token.strip()

        if name.casefold() in taken:
            base_name = name
            suffix = 2
            while name.casefold() in taken:
                name = f'{base_name}_{suffix}'
                suffix += 1

        columns.append(name)
        taken.add(name.casefold())

    return columns


def read_lines(file_path: str | Path) -> list[str]:
    """
    Read a UTF-8 text file as a list of lines (without line terminators).

    Raises:
        InvalidArgumentError: Path is empty or blank
        NotFoundError: Path is not an existing file
    """
    if file_path is None or not str(file_path).strip():
        raise InvalidArgumentError("File path is empty.")

    path = Path(file_path)
    if not path.is_file():
        raise NotFoundError(f"File not found: {path}")

    # utf-8-sig drops a BOM if present; universal newlines map \r\n and \r to \n.
    # Invalid byte sequences decode to U+FFFD.
    with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
        content = f.read()

    if not content:
        return []

    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return lines


class TableLoader:
    """Load delimited text files into Table instances."""

    def load(self, file_path: str | Path) -> Table:
        """
        Load a file into a Table.

        Args:
            file_path: Path to a ',' or ';' separated text file

        Returns:
            Table with deduplicated columns and one row per non-blank line

        Raises:
            InvalidArgumentError: Path is empty or blank
            NotFoundError: Path is not an existing file
            EmptyInputError: File has zero lines
        """
        lines = read_lines(file_path)
        if not lines:
            raise EmptyInputError(f"File is empty: {file_path}")

        separator = detect_separator(lines[0])
        table = Table(columns=build_columns(lines[0].split(separator)))

        for line in lines[1:]:
            if not line.strip():
                continue
            table.add_row(line.split(separator))

        logger.debug(
            "Loaded %s: separator=%r, %d columns, %d rows",
            file_path, separator, table.column_count, table.row_count
        )
        return table


def load(file_path: str | Path) -> Table:
    """
    Convenience function to load a table.

    Args:
        file_path: Path to the text file

    Returns:
        Loaded Table
    """
    return TableLoader().load(file_path)
