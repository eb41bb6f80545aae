"""
High-level interface for exploring documents and flattening them to tables.

This module provides TreeExplorer, which wires the path enumerator, tree
renderer, tabular extractor and table binder into the usual workflow:
list addresses, preview structure, then extract a combined table.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from xml_tree_tab.config import ExplorerSettings, ExtractionPlan, get_settings, load_extraction_plan
from xml_tree_tab.models import ExtractOptions, PathOptions, RenderOptions, Table
from xml_tree_tab.parsers.path_parser import PathEntry, enumerate_paths
from xml_tree_tab.parsers.table_parser import extract_rows
from xml_tree_tab.parsers.tree_renderer import render_tree
from xml_tree_tab.parsers.xml_parser import parse_document
from xml_tree_tab.services.table_binder import bind_tables
from xml_tree_tab.validators import validate_address

logger = logging.getLogger(__name__)

# Default for get_paths(mark_terminal=...): use the settings marker
_FROM_SETTINGS: Any = object()


class TreeExplorer:
    """
    High-level interface for exploring and flattening tree documents.
    
    Provides:
    - get_paths(): addresses in a tree, optionally collapsed to
      parent-of-terminal addresses
    - view_tree(): depth-bounded ASCII preview
    - dig_table(): one table for one address
    - to_table(): combined table for several addresses across documents
    
    Example:
        >>> from xml_tree_tab import TreeExplorer, parse_document
        >>> explorer = TreeExplorer()
        >>> doc = parse_document('listings.xml')
        >>> print(explorer.view_tree(doc, depth=1))
        root
        |-listing
        |-listing
        >>> explorer.get_paths(doc, only_terminal_parent=True)
        [('/root/listing', False), ('/root/listing/seller_info', False)]
        >>> table = explorer.to_table([doc], ['/root/listing'])
    """
    
    def __init__(self, settings: Optional[ExplorerSettings] = None):
        """
        Initialize with optional settings.
        
        Args:
            settings: ExplorerSettings (default: global get_settings())
        """
        self._settings = settings or get_settings()
    
    @property
    def settings(self) -> ExplorerSettings:
        return self._settings
    
    def get_paths(
        self,
        source: Any,
        only_terminal_parent: bool = False,
        mark_terminal: Optional[str] = _FROM_SETTINGS
    ) -> List[PathEntry]:
        """
        List addresses in a tree or nodeset.
        
        Args:
            source: Node, Nodeset, list of Nodes, or lxml element
            only_terminal_parent: Collapse to parent-of-terminal addresses
            mark_terminal: Terminal marker (default: settings.mark_terminal;
                           None: unmarked)
        
        Returns:
            List of PathEntry(address, is_terminal)
        """
        if mark_terminal is _FROM_SETTINGS:
            mark_terminal = self._settings.mark_terminal
        options = PathOptions(
            mark_terminal=mark_terminal,
            only_terminal_parent=only_terminal_parent
        )
        return enumerate_paths(source, options)
    
    def view_tree(self, source: Any, depth: Optional[int] = None) -> str:
        """
        Render a tree or nodeset as a newline-joined string.
        
        Args:
            source: Node, Nodeset, list of Nodes, or lxml element
            depth: Levels to expand (None: unlimited, 0: root only)
        """
        options = RenderOptions(
            depth=depth,
            max_text_length=self._settings.max_text_length,
            indent=self._settings.indent,
            branch=self._settings.branch,
            nodeset_separator=self._settings.nodeset_separator
        )
        return '\n'.join(render_tree(source, options=options))
    
    def dig_table(self, source: Any, address: str, dig: bool = False) -> Table:
        """
        Extract one table (one row per instance) for one address.
        
        Blank cells are kept as empty strings; use to_table() for the
        normalized result.
        """
        return extract_rows(address, source, options=self._extract_options(dig))
    
    def to_table(
        self,
        sources: Union[Any, Sequence[Any]],
        addresses: Union[str, Sequence[str]],
        dig: bool = False,
        is_xml: bool = True
    ) -> Table:
        """
        Flatten several addresses across one or more documents into a table.
        
        For every address, rows from every document are stacked
        (row-binding); the per-address tables are then placed side by side
        (column-binding) and empty strings are normalized to None once.
        
        Args:
            sources: One document or a list of documents. With is_xml=True
                     each is an already-parsed Node/Nodeset/lxml element;
                     with is_xml=False each is a path, URL or markup string
            addresses: Single address or list of addresses
            dig: Deep extraction for every address
            is_xml: Whether sources are already parsed
        
        Returns:
            Final normalized Table
        
        Raises:
            InvalidAddress: If any address is malformed
            RowCountMismatch: If addresses yield different row counts
            DocumentLoadError: If is_xml=False and a source cannot be loaded
        
        Example:
            >>> table = explorer.to_table(
            ...     ['2023.xml', '2024.xml'],
            ...     ['/root/listing'],
            ...     is_xml=False
            ... )
            >>> df = table.to_dataframe()
        """
        address_list = self._normalize_addresses(addresses)
        documents = self._load_sources(sources, is_xml)
        options = self._extract_options(dig)
        
        groups = []
        for address in address_list:
            group = [extract_rows(address, document, options=options) for document in documents]
            logger.debug(f"{address}: {[len(table) for table in group]} rows per document")
            groups.append(group)
        
        return bind_tables(groups)
    
    def run_plan(
        self,
        sources: Union[Any, Sequence[Any]],
        plan: Union[ExtractionPlan, str, Path],
        is_xml: bool = True
    ) -> Table:
        """
        Run an extraction plan (object or YAML file path) over documents.
        
        Example:
            >>> table = explorer.run_plan([doc], 'plans/listings.yaml')
        """
        if not isinstance(plan, ExtractionPlan):
            plan = load_extraction_plan(plan)
        return self.to_table(sources, plan.addresses, dig=plan.dig, is_xml=is_xml)
    
    def _extract_options(self, dig: bool) -> ExtractOptions:
        return ExtractOptions(dig=dig, delimiter=self._settings.value_delimiter)
    
    def _load_sources(self, sources: Any, is_xml: bool) -> List[Any]:
        if is_xml:
            # Lists hold one parsed document (or nodeset) per item
            if isinstance(sources, (list, tuple)):
                return list(sources)
            return [sources]

        if isinstance(sources, (str, bytes, Path)):
            sources = [sources]
        documents = []
        for source in sources:
            documents.append(parse_document(source, encodings=self._settings.encodings))
        return documents

    @staticmethod
    def _normalize_addresses(addresses: Union[str, Sequence[str]]) -> List[str]:
        if isinstance(addresses, str):
            addresses = [addresses]
        if not addresses:
            raise ValueError("At least one address is required")
        return [validate_address(address) for address in addresses]
