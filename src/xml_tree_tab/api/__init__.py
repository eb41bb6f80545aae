"""
User-facing API interfaces for xml-tree-tab.
"""

from xml_tree_tab.api.explorer import TreeExplorer

__all__ = [
    'TreeExplorer'
]
