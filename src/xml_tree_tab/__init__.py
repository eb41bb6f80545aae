"""
xml-tree-tab: explore XML trees and flatten them into tables without
over-digging into nested structures.

Main package exports for user-facing API.
"""

from xml_tree_tab.models import Node, Nodeset, Table, PathOptions, RenderOptions, ExtractOptions
from xml_tree_tab.parsers import (
    is_terminal,
    enumerate_paths,
    unique_paths,
    render_tree,
    extract_rows,
    parse_document,
    parse_nodeset,
    from_lxml,
    PathEntry
)
from xml_tree_tab.services import bind_rows, bind_columns, bind_tables, normalize_blanks
from xml_tree_tab.api import TreeExplorer
from xml_tree_tab.config import ExplorerSettings, ExtractionPlan, get_settings, load_extraction_plan
from xml_tree_tab.exceptions import (
    XmlTreeTabError,
    InvalidAddress,
    UnsupportedInputKind,
    RowCountMismatch,
    MalformedTree,
    DocumentLoadError
)

__all__ = [
    'Node',
    'Nodeset',
    'Table',
    'PathOptions',
    'RenderOptions',
    'ExtractOptions',
    'is_terminal',
    'enumerate_paths',
    'unique_paths',
    'render_tree',
    'extract_rows',
    'parse_document',
    'parse_nodeset',
    'from_lxml',
    'PathEntry',
    'bind_rows',
    'bind_columns',
    'bind_tables',
    'normalize_blanks',
    'TreeExplorer',
    'ExplorerSettings',
    'ExtractionPlan',
    'get_settings',
    'load_extraction_plan',
    'XmlTreeTabError',
    'InvalidAddress',
    'UnsupportedInputKind',
    'RowCountMismatch',
    'MalformedTree',
    'DocumentLoadError',
]
