"""
Tree traversal, rendering and extraction modules.

- Terminal classification and the shared depth-first walk
- Address enumeration (with parent-of-terminal collapsing)
- Depth-bounded ASCII tree rendering
- Shallow/deep tabular extraction
- Document loading with lxml
"""

from .traversal import is_terminal, as_roots, walk, resolve_address, Visit
from .path_parser import enumerate_paths, unique_paths, terminal_addresses, PathEntry
from .tree_renderer import render_tree, format_tree, truncate_text
from .table_parser import extract_rows, instance_row
from .xml_parser import parse_document, parse_nodeset, from_lxml

__all__ = [
    # Traversal
    'is_terminal',
    'as_roots',
    'walk',
    'resolve_address',
    'Visit',
    # Paths
    'enumerate_paths',
    'unique_paths',
    'terminal_addresses',
    'PathEntry',
    # Rendering
    'render_tree',
    'format_tree',
    'truncate_text',
    # Extraction
    'extract_rows',
    'instance_row',
    # Loading
    'parse_document',
    'parse_nodeset',
    'from_lxml',
]
