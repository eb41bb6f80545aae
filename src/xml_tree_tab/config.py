"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- Rendering defaults (indentation, branch glyph, text truncation)
- Extraction defaults (value delimiter for repeated tags)
- Document loading defaults (encoding fallback order)
- Extraction plans loaded from YAML files
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from xml_tree_tab.validators import validate_address, validate_marker


class ExplorerSettings(BaseSettings):
    """
    Library settings loaded from environment variables.
    
    Environment Variables (from .env or the process environment):
        XML_TREE_TAB_MARK_TERMINAL: Default terminal marker for path listings
        XML_TREE_TAB_VALUE_DELIMITER: Delimiter joining repeated tag values
        XML_TREE_TAB_MAX_TEXT_LENGTH: Text preview length in tree views
        XML_TREE_TAB_INDENT: Indentation unit in tree views
        XML_TREE_TAB_BRANCH: Branch glyph preceding nested tags
        XML_TREE_TAB_NODESET_SEPARATOR: Line separating nodeset members
        XML_TREE_TAB_ENCODINGS: JSON list of encodings tried when loading
    
    Example:
        >>> settings = get_settings()
        >>> settings.value_delimiter
        ','
        >>> settings.branch
        '|-'
    """
    
    mark_terminal: Optional[str] = Field(
        default=None,
        description="Default suffix appended to terminal addresses"
    )
    
    value_delimiter: str = Field(
        default=",",
        description="Delimiter joining values of repeated terminal tags"
    )
    
    max_text_length: int = Field(
        default=40,
        ge=0,
        description="Maximum characters of terminal text shown in tree views"
    )
    
    indent: str = Field(
        default="  ",
        description="Indentation unit per nesting level in tree views"
    )
    
    branch: str = Field(
        default="|-",
        description="Glyph preceding every non-root tag in tree views"
    )
    
    nodeset_separator: str = Field(
        default="---",
        description="Line placed between members when rendering a nodeset"
    )
    
    encodings: List[str] = Field(
        default_factory=lambda: ["utf-8", "latin-1"],
        min_length=1,
        description="Encodings tried in order when parsing documents"
    )
    
    model_config = SettingsConfigDict(
        env_prefix='XML_TREE_TAB_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )
    
    _validate_mark_terminal = field_validator('mark_terminal')(validate_marker)


# Singleton pattern - loaded once, cached forever
_settings: Optional[ExplorerSettings] = None


def get_settings() -> ExplorerSettings:
    """
    Get global settings instance (lazy-loaded singleton).
    
    Returns:
        Singleton ExplorerSettings instance
    
    Example:
        >>> settings = get_settings()
        >>> settings is get_settings()
        True
    """
    global _settings
    if _settings is None:
        _settings = ExplorerSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


class ExtractionPlan(BaseModel):
    """
    Set of addresses to extract together into one table.
    
    Attributes:
        addresses: Addresses whose tables are column-bound, in order
        dig: Whether to use deep extraction for every address
    
    Example YAML:
        addresses:
          - /root/listing
          - /root/listing/seller_info
        dig: false
    """
    
    addresses: List[str] = Field(
        ...,
        min_length=1,
        description="Addresses to extract, column-bound in this order"
    )
    
    dig: bool = Field(
        default=False,
        description="Deep extraction (merge all terminal descendants)"
    )
    
    model_config = ConfigDict(frozen=True, extra='forbid')
    
    @field_validator('addresses')
    @classmethod
    def validate_addresses_list(cls, v: List[str]) -> List[str]:
        """Validate each address in the list."""
        return [validate_address(address) for address in v]


def load_extraction_plan(path: Union[str, Path]) -> ExtractionPlan:
    """
    Load an extraction plan from a YAML file.
    
    Args:
        path: Path to the YAML plan file
    
    Returns:
        Validated ExtractionPlan
    
    Raises:
        FileNotFoundError: If the plan file does not exist
        ValueError: If the file does not contain a mapping
        ValidationError: If the plan content is invalid
    """
    plan_path = Path(path)
    
    if not plan_path.exists():
        raise FileNotFoundError(f"Extraction plan not found at {plan_path}")
    
    with open(plan_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    
    if not isinstance(data, dict):
        raise ValueError(
            f"Extraction plan must be a YAML mapping, got {type(data).__name__}. "
            f"File: {plan_path}"
        )
    
    return ExtractionPlan(**data)
