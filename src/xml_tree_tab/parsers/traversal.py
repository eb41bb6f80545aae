"""
Terminal classification and the depth-first walk shared by all traversals.

The walk tracks the current address stack instead of parent pointers, so
"parent of terminal" addresses come for free and Node stays immutable.
"""

from typing import Any, Iterator, List, NamedTuple, Optional, Set, Tuple

from lxml import etree

from xml_tree_tab.exceptions import MalformedTree, UnsupportedInputKind
from xml_tree_tab.models.node import Node, Nodeset
from xml_tree_tab.validators import split_address


class Visit(NamedTuple):
    """One node reached by walk(), with its traversal context."""
    node: Node
    path: Tuple[str, ...]
    level: int
    terminal: bool


def is_terminal(node: Node) -> bool:
    """
    Check whether a node is terminal (has no element children).
    
    Example:
        >>> is_terminal(Node(tag='name', text='bob'))
        True
        >>> is_terminal(Node(tag='seller_info', children=[Node(tag='name')]))
        False
    """
    return len(node.children) == 0


def as_roots(source: Any) -> Tuple[Node, ...]:
    """
    Normalize any accepted input kind to a tuple of traversal roots.
    
    Accepted kinds:
    - Node: one root
    - Nodeset, or a list/tuple of Nodes: each member is a root
    - lxml element or element tree: converted with from_lxml()
    
    Raises:
        UnsupportedInputKind: For any other kind of object
    """
    if isinstance(source, Node):
        return (source,)
    
    if isinstance(source, Nodeset):
        return source.nodes
    
    if isinstance(source, (list, tuple)):
        if all(isinstance(item, Node) for item in source):
            return tuple(source)
        kinds = sorted({type(item).__name__ for item in source if not isinstance(item, Node)})
        raise UnsupportedInputKind(
            f"Sequence inputs must contain only Node objects, found: {kinds}"
        )
    
    if isinstance(source, (etree._Element, etree._ElementTree)):
        from xml_tree_tab.parsers.xml_parser import from_lxml
        return (from_lxml(source),)
    
    raise UnsupportedInputKind(
        f"Expected a Node or Nodeset, got {type(source).__name__}. "
        f"Load documents with parse_document() first."
    )


def walk(root: Node, max_depth: Optional[int] = None) -> Iterator[Visit]:
    """
    Depth-first, pre-order walk over one tree in document order.
    
    Args:
        root: Traversal root (level 0)
        max_depth: Deepest level to visit (None: unlimited)
    
    Yields:
        Visit tuples (node, path, level, terminal)
    
    Raises:
        MalformedTree: If a node re-enters its own ancestry (cycle)
    """
    # One frame per open node: its child iterator. The address, the ancestor
    # id chain and the ancestor id set all grow on entry and shrink on exit.
    path: List[str] = [root.tag]
    chain: List[int] = [id(root)]
    ancestors: Set[int] = {id(root)}
    frames: List[Iterator[Node]] = []
    
    terminal = is_terminal(root)
    yield Visit(root, (root.tag,), 0, terminal)
    if not terminal and (max_depth is None or max_depth > 0):
        frames.append(iter(root.children))
    
    while frames:
        child = next(frames[-1], None)
        
        if child is None:
            frames.pop()
            ancestors.discard(chain.pop())
            path.pop()
            continue
        
        if id(child) in ancestors:
            raise MalformedTree(
                f"Cycle detected: <{child.tag}> is its own ancestor at "
                f"/{'/'.join(path)}"
            )
        
        level = len(frames)
        terminal = is_terminal(child)
        path.append(child.tag)
        yield Visit(child, tuple(path), level, terminal)
        
        if terminal or (max_depth is not None and level >= max_depth):
            path.pop()
            continue
        
        chain.append(id(child))
        ancestors.add(id(child))
        frames.append(iter(child.children))


def resolve_address(address: str, source: Any) -> List[Node]:
    """
    Find every node matching an address, in document order.
    
    The first segment matches root tags; each further segment matches the
    tags of the previous level's children.
    
    Args:
        address: Absolute address (e.g., '/root/listing')
        source: Node, Nodeset, list of Nodes, or lxml element
    
    Returns:
        Matching instance nodes (empty list when nothing matches)
    
    Raises:
        InvalidAddress: If the address is malformed
        UnsupportedInputKind: If source is not a supported input kind
    """
    segments = split_address(address)
    
    level = [root for root in as_roots(source) if root.tag == segments[0]]
    for segment in segments[1:]:
        level = [child for node in level for child in node.children if child.tag == segment]
        if not level:
            break
    
    return level
