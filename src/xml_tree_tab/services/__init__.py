"""
Table binding services for combining per-address tables.
"""

from xml_tree_tab.services.table_binder import (
    bind_rows,
    bind_columns,
    bind_tables,
    normalize_blanks
)

__all__ = [
    'bind_rows',
    'bind_columns',
    'bind_tables',
    'normalize_blanks'
]
