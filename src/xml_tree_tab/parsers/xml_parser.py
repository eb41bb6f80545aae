"""
Document loading: turns XML files, URLs or markup into Node trees.

This is the only module that touches lxml parsing or performs I/O. The
traversal, rendering and extraction modules work purely on Node objects.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from lxml import etree

from xml_tree_tab.config import get_settings
from xml_tree_tab.exceptions import DocumentLoadError
from xml_tree_tab.models.node import Node, Nodeset

logger = logging.getLogger(__name__)

DocumentSource = Union[str, bytes, Path]


def parse_document(
    source: DocumentSource,
    encodings: Optional[list] = None
) -> Node:
    """
    Parse an XML document into a Node tree.
    
    Args:
        source: Filesystem path, URL, raw markup string, or raw bytes.
                Strings starting with '<' (after any byte order mark and
                whitespace) are treated as markup.
        encodings: Encodings to try in order (default: settings.encodings)
    
    Returns:
        Root Node of the document
    
    Raises:
        DocumentLoadError: If the document cannot be read or parsed with
                           any of the encodings
    
    Example:
        >>> root = parse_document('<root><listing><name>bob</name></listing></root>')
        >>> root.children[0].tag
        'listing'
    """
    encodings = encodings or get_settings().encodings
    
    if isinstance(source, str):
        # A leading byte order mark survives decoding as U+FEFF
        markup = source.lstrip('\ufeff \t\r\n')
        if markup.startswith('<'):
            # Markup strings are re-encoded so lxml accepts encoding declarations
            source = markup.encode('utf-8')
            encodings = ['utf-8']
    
    # Parse with encoding fallback (e.g. UTF-8 → Latin-1)
    tree = None
    last_error = None
    
    for encoding in encodings:
        try:
            parser = etree.XMLParser(
                recover=True,
                huge_tree=True,
                remove_comments=True,
                remove_pis=True,
                encoding=encoding
            )
            if isinstance(source, bytes):
                tree = etree.fromstring(source, parser)
            else:
                tree = etree.parse(str(source), parser)
            break  # Success - stop trying
        except etree.XMLSyntaxError as e:
            if 'encoding' in str(e).lower():
                # Encoding error - try next encoding
                last_error = e
                continue
            raise DocumentLoadError(f"Failed to parse XML: {e}") from e
        except OSError as e:
            raise DocumentLoadError(f"Failed to read XML from {source}: {e}") from e
    
    if tree is None:
        raise DocumentLoadError(
            f"Failed to parse XML with encodings {encodings}. "
            f"Last error: {last_error}"
        )
    
    root = tree.getroot() if isinstance(tree, etree._ElementTree) else tree
    if root is None:
        raise DocumentLoadError("Document has no root element")
    
    node = from_lxml(root)
    logger.info(f"Loaded document <{node.tag}> with {len(node.children)} top-level children")
    return node


def from_lxml(element: Union[etree._Element, etree._ElementTree]) -> Node:
    """
    Convert an lxml element (or element tree) into an immutable Node.
    
    Conversion rules:
    - Tags are namespace-free local names ('{uri}item' → 'item')
    - Attributes use local names too, unless two attributes of one
      element share a local name; those keep a 'prefix:local' name
    - Comments, processing instructions and entities are skipped
    - Text is whitespace-stripped; tails are ignored
    - Non-terminal nodes keep text only when it is non-blank
    
    Elements are converted bottom-up with an explicit stack, so document
    depth is not limited by the interpreter's recursion limit.
    
    Args:
        element: lxml element or element tree
    
    Returns:
        Node mirroring the element's structure
    """
    if isinstance(element, etree._ElementTree):
        element = element.getroot()
    
    # (element, child iterator, converted children)
    stack: List[Tuple[etree._Element, Iterator[Any], List[Node]]] = [
        (element, iter(element), [])
    ]
    while True:
        current, pending, kids = stack[-1]
        child = next(pending, None)
        if child is not None:
            if isinstance(child.tag, str):
                stack.append((child, iter(child), []))
            continue
    
        node = _build_node(current, kids)
        stack.pop()
        if not stack:
            return node
        stack[-1][2].append(node)


def _build_node(element: etree._Element, kids: List[Node]) -> Node:
    text = element.text.strip() if element.text is not None else None
    if kids and not text:
        text = None
    
    return Node(
        tag=etree.QName(element).localname,
        attributes=_attribute_names(element),
        text=text,
        children=tuple(kids)
    )


def _attribute_names(element: etree._Element) -> Dict[str, str]:
    keys = list(element.attrib.keys())
    local_counts = Counter(etree.QName(key).localname for key in keys)
    prefixes = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}
    
    attributes = {}
    for key in keys:
        qname = etree.QName(key)
        name = qname.localname
        if local_counts[name] > 1 and qname.namespace is not None:
            prefix = prefixes.get(qname.namespace)
            name = f"{prefix}:{name}" if prefix else key
        attributes[name] = element.attrib[key]
    return attributes


def parse_nodeset(
    source: DocumentSource,
    address: Optional[str] = None
) -> Nodeset:
    """
    Parse a document and return a nodeset from it.
    
    Args:
        source: See parse_document()
        address: If given, the nodeset holds every instance at this
                 address; otherwise it holds the root's children
    
    Returns:
        Nodeset in document order
    
    Raises:
        DocumentLoadError: If the document cannot be parsed
        InvalidAddress: If the address is malformed
    
    Example:
        >>> listings = parse_nodeset('listings.xml', '/root/listing')
        >>> len(listings)
        2
    """
    from xml_tree_tab.parsers.traversal import resolve_address
    
    root = parse_document(source)
    if address is None:
        return Nodeset(nodes=root.children)
    return Nodeset(nodes=resolve_address(address, root))
