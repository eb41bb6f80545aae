"""
Reusable validators for addresses and option values.

These validators raise ValueError subclasses with actionable messages and
can be used directly or with Pydantic @field_validator decorators.
"""

from typing import List, Optional

from xml_tree_tab.exceptions import InvalidAddress

SEPARATOR = '/'

# Characters that would turn an address into an XPath expression
_FORBIDDEN_CHARS = ('*', '[', ']', '@', '(', ')', '|')


def split_address(address: str) -> List[str]:
    """
    Split an address into its tag-name segments.
    
    Args:
        address: Absolute address (e.g., '/root/listing/seller_info')
    
    Returns:
        List of segments (e.g., ['root', 'listing', 'seller_info'])
    
    Raises:
        InvalidAddress: If the address is empty, not absolute, or any
                        segment is empty or contains forbidden characters
    
    Example:
        >>> split_address('/root/listing')
        ['root', 'listing']
        >>> split_address('root/listing')  # Raises InvalidAddress
    """
    if not isinstance(address, str) or not address:
        raise InvalidAddress(
            f"Address must be a non-empty string, got: {address!r}\n"
            f"Example: '/root/listing'"
        )
    
    if not address.startswith(SEPARATOR):
        raise InvalidAddress(
            f"Address must start with '{SEPARATOR}', got: '{address}'\n"
            f"Example: '/root/listing'"
        )
    
    segments = address[1:].split(SEPARATOR)
    
    for segment in segments:
        if not segment:
            raise InvalidAddress(
                f"Address contains an empty segment: '{address}'\n"
                f"Segments are separated by a single '{SEPARATOR}'"
            )
        if any(ch.isspace() for ch in segment):
            raise InvalidAddress(
                f"Address segment '{segment}' contains whitespace: '{address}'"
            )
        bad = [ch for ch in _FORBIDDEN_CHARS if ch in segment]
        if bad:
            raise InvalidAddress(
                f"Address segment '{segment}' contains {bad}: '{address}'\n"
                f"Only exact tag names are supported (no wildcards or predicates)"
            )
    
    return segments


def validate_address(address: str) -> str:
    """
    Validate an address string.
    
    Returns:
        The validated address (unchanged if valid)
    
    Raises:
        InvalidAddress: If the address is malformed
    
    Example:
        >>> validate_address('/root/listing')
        '/root/listing'
        >>> validate_address('')  # Raises InvalidAddress
    """
    split_address(address)
    return address


def join_address(segments: List[str]) -> str:
    """Build an address string from segments."""
    return SEPARATOR + SEPARATOR.join(segments)


def validate_depth(depth: Optional[int]) -> Optional[int]:
    """
    Validate a rendering depth limit.
    
    None means unlimited; 0 shows only the root tag.
    
    Raises:
        ValueError: If depth is negative
    """
    if depth is not None and depth < 0:
        raise ValueError(
            f"Depth must be a non-negative integer or None, got: {depth}"
        )
    return depth


def validate_marker(marker: Optional[str]) -> Optional[str]:
    """
    Validate a terminal marker.
    
    Raises:
        ValueError: If marker is an empty string or contains the separator
    """
    if marker is None:
        return marker
    if not marker:
        raise ValueError("Terminal marker must be non-empty or None")
    if SEPARATOR in marker:
        raise ValueError(
            f"Terminal marker must not contain '{SEPARATOR}', got: '{marker}'"
        )
    return marker
