"""
Immutable table of rows produced by tabular extraction and binding.

A Table has a fixed column set (union of all row keys in first-seen order)
and every row holds a value or None for every column.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union, overload

import pandas as pd

Cell = Optional[str]
Row = Mapping[str, Cell]


def union_columns(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Column names across rows, in first-seen order."""
    columns: Dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


class Table:
    """
    Ordered, immutable sequence of rows with a fixed column set.
    
    Key Features:
    - Supports len(), iteration and indexing (int → row, slice → Table)
    - Rows are read-only mappings of column → value (str or None)
    - Exports to pandas via to_dataframe()
    
    Attributes:
        address: Address the table was extracted for, if any
    
    Example:
        >>> table = Table.from_records([
        ...     {'payment_types': 'paypal', 'shipping_info': 'free'},
        ...     {'payment_types': 'cod'},
        ... ])
        >>> table.columns
        ('payment_types', 'shipping_info')
        >>> table[1]['shipping_info'] is None
        True
    """
    
    def __init__(
        self,
        columns: Iterable[str] = (),
        rows: Iterable[Mapping[str, Cell]] = (),
        address: Optional[str] = None
    ):
        """
        Initialize Table from columns and rows.
        
        Args:
            columns: Column names in order (must be unique)
            rows: Row mappings; keys must be a subset of columns
            address: Address the table was extracted for
        
        Raises:
            ValueError: If columns repeat or a row has unknown keys
        """
        self._columns: Tuple[str, ...] = tuple(columns)
        
        if len(set(self._columns)) != len(self._columns):
            raise ValueError(f"Table columns must be unique: {self._columns}")
        
        known = set(self._columns)
        frozen_rows = []
        for i, row in enumerate(rows):
            unknown = [key for key in row if key not in known]
            if unknown:
                raise ValueError(f"Row {i} has columns not in table: {unknown}")
            frozen_rows.append(
                MappingProxyType({col: row.get(col) for col in self._columns})
            )
        
        self._rows: Tuple[Row, ...] = tuple(frozen_rows)
        self.address = address
    
    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Cell]],
        address: Optional[str] = None
    ) -> 'Table':
        """Build a table whose columns are the union of the records' keys."""
        records = list(records)
        return cls(union_columns(records), records, address=address)
    
    @property
    def columns(self) -> Tuple[str, ...]:
        """Column names in order."""
        return self._columns
    
    @property
    def rows(self) -> Tuple[Row, ...]:
        """Read-only rows in order."""
        return self._rows
    
    @property
    def is_empty(self) -> bool:
        return not self._rows
    
    def to_records(self) -> List[Dict[str, Cell]]:
        """Rows as plain (mutable) dictionaries."""
        return [dict(row) for row in self._rows]
    
    def column(self, name: str) -> List[Cell]:
        """
        Values of one column, top to bottom.
        
        Raises:
            KeyError: If the column does not exist
        """
        if name not in self._columns:
            raise KeyError(f"Column '{name}' not found. Available: {list(self._columns)}")
        return [row[name] for row in self._rows]
    
    def to_dataframe(self) -> pd.DataFrame:
        """
        Export to a pandas DataFrame (None cells stay missing values).
        
        Example:
            >>> df = table.to_dataframe()
            >>> list(df.columns)
            ['payment_types', 'shipping_info']
        """
        return pd.DataFrame(self.to_records(), columns=list(self._columns))
    
    def __len__(self) -> int:
        return len(self._rows)
    
    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)
    
    @overload
    def __getitem__(self, key: int) -> Row: ...
    
    @overload
    def __getitem__(self, key: slice) -> 'Table': ...
    
    def __getitem__(self, key: Union[int, slice]) -> Union[Row, 'Table']:
        if isinstance(key, slice):
            return Table(self._columns, self._rows[key], address=self.address)
        if isinstance(key, int):
            return self._rows[key]
        raise TypeError(f"Invalid key type: {type(key).__name__}. Expected int or slice.")
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self._columns == other._columns
            and [dict(r) for r in self._rows] == [dict(r) for r in other._rows]
        )
    
    def __repr__(self) -> str:
        label = f", address={self.address!r}" if self.address else ""
        return f"Table({len(self._rows)} rows x {len(self._columns)} columns{label})"
