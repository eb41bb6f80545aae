"""
Terminal-aware tabular extraction.

Each instance node matching an address becomes one row:
- Shallow mode (default) reads only the instance's immediate terminal
  children; non-terminal children are skipped without visiting them.
- Deep mode ("dig") reads every terminal descendant of the instance.

In both modes repeated tags within one instance are joined with the
configured delimiter in document order, so the two modes agree whenever
an instance has only terminal children.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from xml_tree_tab.models.node import Node
from xml_tree_tab.models.options import ExtractOptions
from xml_tree_tab.models.table import Table
from xml_tree_tab.parsers.traversal import is_terminal, resolve_address, walk

logger = logging.getLogger(__name__)


def extract_rows(
    address: str,
    source: Any,
    dig: Optional[bool] = None,
    options: Optional[ExtractOptions] = None
) -> Table:
    """
    Convert every instance at an address into one table row.
    
    Args:
        address: Absolute address of the instances (e.g., '/root/listing')
        source: Node, Nodeset, list of Nodes, or lxml element
        dig: Deep extraction; overrides options.dig when given
        options: ExtractOptions (delimiter for repeated tags)
    
    Returns:
        Table with one row per instance; empty Table when nothing matches
    
    Raises:
        InvalidAddress: If the address is malformed
        UnsupportedInputKind: If source is not a supported input kind
        MalformedTree: If a cycle is detected while digging
    
    Example:
        >>> table = extract_rows('/root/listing', tree)
        >>> table.columns
        ('payment_types', 'shipping_info')
        >>> [tuple(row.values()) for row in table]
        [('paypal', 'free'), ('cod', 'paid')]
    """
    options = options or ExtractOptions()
    if dig is not None:
        options = options.model_copy(update={'dig': dig})
    
    instances = resolve_address(address, source)
    
    if not instances:
        logger.debug(f"No instances found at {address}")
        return Table(address=address)
    
    records = [
        instance_row(instance, options.dig, options.delimiter)
        for instance in instances
    ]
    
    table = Table.from_records(records, address=address)
    logger.debug(
        f"Extracted {len(table)} rows x {len(table.columns)} columns "
        f"from {address} (dig={options.dig})"
    )
    return table


def instance_row(instance: Node, dig: bool = False, delimiter: str = ',') -> Dict[str, str]:
    """
    Build the row for a single instance node.
    
    Args:
        instance: Matched instance node
        dig: Read all terminal descendants instead of immediate children
        delimiter: Joins values of repeated tags
    
    Returns:
        Column → value mapping in first-seen column order
    """
    terminals = _deep_terminals(instance) if dig else _shallow_terminals(instance)
    
    values: Dict[str, List[str]] = {}
    for node in terminals:
        values.setdefault(node.tag, []).append(node.text if node.text is not None else '')
    
    return {tag: delimiter.join(parts) for tag, parts in values.items()}


def _shallow_terminals(instance: Node) -> Iterator[Node]:
    for child in instance.children:
        if is_terminal(child):
            yield child


def _deep_terminals(instance: Node) -> Iterator[Node]:
    visits = walk(instance)
    next(visits)  # The instance itself never contributes a column
    for visit in visits:
        if visit.terminal:
            yield visit.node
