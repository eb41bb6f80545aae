"""
Immutable tree model consumed by every traversal in xml-tree-tab.

Schema Design:
- A Node owns its children exclusively (no parent back-references)
- Parent context is reconstructed during traversal from the address stack
- Nodeset groups nodes that need not share a parent
"""

from typing import Dict, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Node(BaseModel):
    """
    One element of a tree document.
    
    A node is terminal iff it has no children. Text-only and fully empty
    nodes are terminal; a node with at least one child is non-terminal even
    when it also carries text.
    
    Attributes:
        tag: Element tag name (not unique among siblings)
        attributes: Element attributes
        text: Plain text content, if any
        children: Child nodes in document order
    
    Example:
        >>> listing = Node(tag='listing', children=[
        ...     Node(tag='payment_types', text='paypal'),
        ...     Node(tag='shipping_info', text='free'),
        ... ])
        >>> [child.tag for child in listing.children]
        ['payment_types', 'shipping_info']
    """
    
    tag: str = Field(
        ...,
        min_length=1,
        description="Element tag name",
        examples=["listing"]
    )
    
    attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="Element attributes (order irrelevant)"
    )
    
    text: Optional[str] = Field(
        default=None,
        description="Text content for text-only elements"
    )
    
    children: Tuple['Node', ...] = Field(
        default=(),
        description="Child elements in document order"
    )
    
    model_config = ConfigDict(frozen=True)
    
    @field_validator('tag')
    @classmethod
    def validate_tag(cls, v: str) -> str:
        """Tags become address segments, so they cannot hold a separator."""
        if '/' in v or any(ch.isspace() for ch in v):
            raise ValueError(f"Invalid tag name: '{v}'")
        return v
    
    def __repr__(self) -> str:
        return f"Node(tag={self.tag!r}, children={len(self.children)})"


Node.model_rebuild()


class Nodeset(BaseModel):
    """
    Ordered collection of nodes that need not share a common parent.
    
    Supports len(), iteration and indexing like a tuple.
    
    Example:
        >>> nodes = Nodeset(nodes=[Node(tag='a'), Node(tag='b')])
        >>> len(nodes)
        2
        >>> nodes[1].tag
        'b'
    """
    
    nodes: Tuple[Node, ...] = Field(
        default=(),
        description="Member nodes in order"
    )
    
    model_config = ConfigDict(frozen=True)
    
    def __len__(self) -> int:
        return len(self.nodes)
    
    def __iter__(self) -> Iterator[Node]:  # type: ignore[override]
        return iter(self.nodes)
    
    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]
    
    def __repr__(self) -> str:
        return f"Nodeset({len(self.nodes)} nodes)"


TreeInput = Union[Node, Nodeset]
