"""
Address enumeration over trees and nodesets.

Addresses are structural (tag names only, no sibling index), so several
physical nodes can share one address. Nodeset members are enumerated
independently; structurally divergent members are NOT merged. Use
unique_paths() to union addresses across members explicitly.
"""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from xml_tree_tab.models.node import Node
from xml_tree_tab.models.options import PathOptions
from xml_tree_tab.parsers.traversal import as_roots, walk
from xml_tree_tab.validators import join_address


class PathEntry(NamedTuple):
    """An address and whether the node it was derived from is terminal."""
    address: str
    is_terminal: bool


def enumerate_paths(
    source: Any,
    options: Optional[PathOptions] = None
) -> List[PathEntry]:
    """
    Enumerate the address of every node in a tree or nodeset.
    
    Traversal is depth-first pre-order in document order, so output order
    follows the source document and is identical across calls.
    
    Args:
        source: Node, Nodeset, list of Nodes, or lxml element
        options: PathOptions (defaults: unmarked, per-node addresses)
    
    Returns:
        List of PathEntry(address, is_terminal)
    
    Raises:
        UnsupportedInputKind: If source is not a supported input kind
        MalformedTree: If a cycle is detected
    
    Example:
        >>> tree = Node(tag='a', children=[
        ...     Node(tag='b'),
        ...     Node(tag='c', children=[Node(tag='d')]),
        ... ])
        >>> enumerate_paths(tree)
        [('/a', False), ('/a/b', True), ('/a/c', False), ('/a/c/d', True)]
        >>> enumerate_paths(tree, PathOptions(only_terminal_parent=True))
        [('/a', False), ('/a/c', False)]
    """
    options = options or PathOptions()
    entries: List[PathEntry] = []
    
    for root in as_roots(source):
        if options.only_terminal_parent:
            entries.extend(_terminal_parents(root, options.mark_terminal))
        else:
            entries.extend(_all_paths(root, options.mark_terminal))
    
    return entries


def _render(address: str, terminal: bool, marker: Optional[str]) -> str:
    if terminal and marker:
        return address + marker
    return address


def _all_paths(root: Node, marker: Optional[str]) -> List[PathEntry]:
    return [
        PathEntry(_render(join_address(list(visit.path)), visit.terminal, marker), visit.terminal)
        for visit in walk(root)
    ]


def _terminal_parents(root: Node, marker: Optional[str]) -> List[PathEntry]:
    # Parent address -> terminal flag, insertion-ordered for first-seen dedup
    seen: Dict[str, bool] = {}
    
    for visit in walk(root):
        if not visit.terminal:
            continue
        if len(visit.path) > 1:
            seen.setdefault(join_address(list(visit.path[:-1])), False)
        else:
            # Terminal traversal root: cannot go above it
            seen.setdefault(join_address(list(visit.path)), True)
    
    return [
        PathEntry(_render(address, terminal, marker), terminal)
        for address, terminal in seen.items()
    ]


def unique_paths(entries: Iterable[PathEntry]) -> List[PathEntry]:
    """
    Deduplicate entries by address, keeping first-seen order.
    
    Use this to union the addresses of nodeset members whose structures
    differ; enumerate_paths() never merges members on its own.
    
    Example:
        >>> unique_paths(enumerate_paths(Nodeset(nodes=[listing1, listing2])))
    """
    seen: Dict[str, PathEntry] = {}
    for entry in entries:
        seen.setdefault(entry.address, entry)
    return list(seen.values())


def terminal_addresses(source: Any) -> List[str]:
    """Addresses of terminal nodes only, unmarked and deduplicated."""
    return [
        entry.address
        for entry in unique_paths(enumerate_paths(source, PathOptions()))
        if entry.is_terminal
    ]
