"""
Typed errors raised by xml-tree-tab.

Every error derives from XmlTreeTabError and from the builtin it most
closely resembles, so callers can catch either the library-specific type
or the generic ValueError/TypeError.
"""


class XmlTreeTabError(Exception):
    """Base class for all xml-tree-tab errors."""


class InvalidAddress(XmlTreeTabError, ValueError):
    """Address string is malformed (empty, relative, or has a bad segment)."""


class UnsupportedInputKind(XmlTreeTabError, TypeError):
    """Operation received something that is neither a Node nor a Nodeset."""


class RowCountMismatch(XmlTreeTabError, ValueError):
    """Tables passed to column-binding have different row counts."""


class MalformedTree(XmlTreeTabError, ValueError):
    """Tree structure is impossible for a document (e.g. a cycle)."""


class DocumentLoadError(XmlTreeTabError, ValueError):
    """Source document could not be read or parsed."""
