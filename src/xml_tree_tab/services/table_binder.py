"""
Table binding: combine per-address tables into one final table.

- bind_rows(): stack tables of the same address group
- bind_columns(): place tables of different address groups side by side
- normalize_blanks(): rewrite empty-string cells to None

Binding never normalizes. bind_tables() runs the whole pipeline and
normalizes exactly once at the end, so intermediate tables keep their raw
empty strings for inspection.
"""

import logging
from typing import Dict, List, Optional, Sequence

from xml_tree_tab.exceptions import RowCountMismatch
from xml_tree_tab.models.table import Cell, Table, union_columns

logger = logging.getLogger(__name__)


def bind_rows(tables: Sequence[Table]) -> Table:
    """
    Concatenate tables row-wise.
    
    The column set is the union of all input columns in first-seen order;
    cells missing from a table are None.
    
    Args:
        tables: Tables in the order their rows should appear
    
    Returns:
        New Table (inputs are not modified)
    
    Example:
        >>> bound = bind_rows([listings_2023, listings_2024])
        >>> len(bound) == len(listings_2023) + len(listings_2024)
        True
    """
    columns = _union_table_columns(tables)
    rows = [row for table in tables for row in table.rows]
    return Table(columns, rows, address=_shared_address(tables))


def bind_columns(tables: Sequence[Table]) -> Table:
    """
    Combine tables column-wise, row i of the result joining row i of each.
    
    Column names already taken by an earlier table are suffixed with
    '.1', '.2', ... so no value is overwritten.
    
    Args:
        tables: Tables with equal row counts
    
    Returns:
        New Table with the union of all columns
    
    Raises:
        RowCountMismatch: If the tables have different row counts
    
    Example:
        >>> wide = bind_columns([listing_table, seller_table])  # 2 rows each
        >>> len(wide)
        2
    """
    if not tables:
        return Table()
    
    counts = [len(table) for table in tables]
    if len(set(counts)) > 1:
        labels = [table.address or f"#{i}" for i, table in enumerate(tables)]
        raise RowCountMismatch(
            f"Cannot bind columns of tables with different row counts: "
            f"{dict(zip(labels, counts))}. "
            f"Extract all addresses at the same instance level."
        )
    
    columns: List[str] = []
    renames: List[Dict[str, str]] = []
    
    for table in tables:
        mapping = {}
        for column in table.columns:
            name = _unique_name(column, columns)
            columns.append(name)
            mapping[column] = name
        renames.append(mapping)
    
    rows = []
    for i in range(counts[0]):
        row: Dict[str, Cell] = {}
        for table, mapping in zip(tables, renames):
            for column, value in table[i].items():
                row[mapping[column]] = value
        rows.append(row)
    
    return Table(columns, rows)


def normalize_blanks(table: Table) -> Table:
    """
    Rewrite every empty-string cell to None.
    
    Non-empty values (including whitespace-only strings) are unchanged.
    
    Returns:
        New Table (the input is not modified)
    """
    rows = [
        {column: (None if value == '' else value) for column, value in row.items()}
        for row in table.rows
    ]
    return Table(table.columns, rows, address=table.address)


def bind_tables(groups: Sequence[Sequence[Table]]) -> Table:
    """
    Full binding pipeline: rows within groups, columns across groups,
    then one normalization pass.
    
    Args:
        groups: One sequence of tables per address group
    
    Returns:
        Final normalized Table
    
    Raises:
        RowCountMismatch: If the row-bound groups have different row counts
    """
    grouped = [bind_rows(group) for group in groups]
    logger.debug(f"Binding {len(grouped)} groups with row counts {[len(t) for t in grouped]}")
    
    if len(grouped) == 1:
        combined = grouped[0]
    else:
        combined = bind_columns(grouped)
    
    return normalize_blanks(combined)


def _union_table_columns(tables: Sequence[Table]) -> List[str]:
    return union_columns({column: None for column in table.columns} for table in tables)


def _shared_address(tables: Sequence[Table]) -> Optional[str]:
    addresses = {table.address for table in tables}
    if len(addresses) == 1:
        return addresses.pop()
    return None


def _unique_name(column: str, taken: List[str]) -> str:
    if column not in taken:
        return column
    suffix = 1
    while f"{column}.{suffix}" in taken:
        suffix += 1
    return f"{column}.{suffix}"
