"""
Data models for trees, tables and options.
"""

from xml_tree_tab.models.node import Node, Nodeset, TreeInput
from xml_tree_tab.models.table import Table, union_columns
from xml_tree_tab.models.options import PathOptions, RenderOptions, ExtractOptions

__all__ = [
    'Node',
    'Nodeset',
    'TreeInput',
    'Table',
    'union_columns',
    'PathOptions',
    'RenderOptions',
    'ExtractOptions',
]
