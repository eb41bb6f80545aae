"""
Depth-bounded ASCII tree views for interactive inspection.

Built on the same walk() as the path enumerator, so lines appear in the
same order as enumerate_paths() addresses.
"""

from typing import Any, List, Optional

from xml_tree_tab.models.node import Node
from xml_tree_tab.models.options import RenderOptions
from xml_tree_tab.parsers.traversal import Visit, as_roots, walk


def render_tree(
    source: Any,
    depth: Optional[int] = None,
    options: Optional[RenderOptions] = None
) -> List[str]:
    """
    Render a tree or nodeset as text lines, one per visited node.
    
    Args:
        source: Node, Nodeset, list of Nodes, or lxml element
        depth: Levels below each root to expand (None: unlimited,
               0: only the root tag). Overrides options.depth when given.
        options: RenderOptions for layout settings
    
    Returns:
        List of lines. Nodeset members are separated by
        options.nodeset_separator.
    
    Raises:
        UnsupportedInputKind: If source is not a supported input kind
        ValidationError: If depth is negative
    
    Example:
        >>> render_tree(listing)
        ['listing',
         '|-payment_types: "paypal"',
         '|-seller_info',
         '  |-name: "bob"']
    """
    if options is None:
        options = RenderOptions(depth=depth)
    elif depth is not None:
        options = options.model_copy(update={'depth': RenderOptions(depth=depth).depth})
    
    lines: List[str] = []
    
    for i, root in enumerate(as_roots(source)):
        if i > 0:
            lines.append(options.nodeset_separator)
        lines.extend(_render_one(root, options))
    
    return lines


def _render_one(root: Node, options: RenderOptions) -> List[str]:
    return [_format_line(visit, options) for visit in walk(root, options.depth)]


def _format_line(visit: Visit, options: RenderOptions) -> str:
    if visit.level == 0:
        line = visit.node.tag
    else:
        line = options.indent * (visit.level - 1) + options.branch + visit.node.tag
    
    if visit.terminal and visit.node.text and options.max_text_length > 0:
        line += f': "{truncate_text(visit.node.text, options.max_text_length)}"'
    
    return line


def truncate_text(text: str, max_length: int) -> str:
    """
    Collapse whitespace and cut text to max_length characters.
    
    Example:
        >>> truncate_text('a   very long\\nvalue', 8)
        'a very l...'
    """
    text = ' '.join(text.split())
    if len(text) <= max_length:
        return text
    return text[:max_length] + '...'


def format_tree(source: Any, depth: Optional[int] = None) -> str:
    """Rendered tree as a single newline-joined string."""
    return '\n'.join(render_tree(source, depth))
