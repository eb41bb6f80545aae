"""
Option models for path enumeration, rendering and extraction.

Options are frozen Pydantic models passed by value. Fields left unset
fall back to the global ExplorerSettings.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from xml_tree_tab.config import get_settings
from xml_tree_tab.validators import validate_depth, validate_marker


class PathOptions(BaseModel):
    """
    Options for enumerate_paths().
    
    Attributes:
        mark_terminal: Suffix appended to terminal addresses (None: unmarked)
        only_terminal_parent: Emit deduplicated parent-of-terminal addresses
    
    Example:
        >>> PathOptions(mark_terminal='>>', only_terminal_parent=True)
    """
    
    mark_terminal: Optional[str] = Field(
        default=None,
        description="Suffix appended to terminal addresses (None: unmarked)"
    )
    
    only_terminal_parent: bool = Field(
        default=False,
        description="Collapse to deduplicated parent-of-terminal addresses"
    )
    
    model_config = ConfigDict(frozen=True)
    
    _validate_mark_terminal = field_validator('mark_terminal')(validate_marker)


class RenderOptions(BaseModel):
    """
    Options for render_tree().
    
    Attributes:
        depth: Levels below the root to expand (None: unlimited, 0: root only)
        max_text_length: Characters of terminal text shown before truncation
        indent: Indentation unit per nesting level
        branch: Glyph preceding every non-root tag
        nodeset_separator: Line placed between nodeset members
    """
    
    depth: Optional[int] = Field(
        default=None,
        description="Rendering depth limit"
    )
    
    max_text_length: int = Field(
        default_factory=lambda: get_settings().max_text_length,
        ge=0,
        description="Text preview length (0 hides text)"
    )
    
    indent: str = Field(default_factory=lambda: get_settings().indent)
    
    branch: str = Field(default_factory=lambda: get_settings().branch)
    
    nodeset_separator: str = Field(
        default_factory=lambda: get_settings().nodeset_separator
    )
    
    model_config = ConfigDict(frozen=True)
    
    _validate_depth = field_validator('depth')(validate_depth)


class ExtractOptions(BaseModel):
    """
    Options for extract_rows().
    
    Attributes:
        dig: Deep extraction over all terminal descendants
        delimiter: Joins values of repeated terminal tags within one row
    """
    
    dig: bool = Field(
        default=False,
        description="Shallow (False) or deep (True) extraction"
    )
    
    delimiter: str = Field(
        default_factory=lambda: get_settings().value_delimiter,
        description="Delimiter for repeated tag values"
    )
    
    model_config = ConfigDict(frozen=True)
