"""
Structural representations of import statements.

These dataclasses are the transient values flowing through the pipeline:

- ``StatementMatch``: one located occurrence of an import in a source buffer.
- ``ParsedImport``: the structured form of a single statement.
- ``TransformedImport``: the routed form, grouped by destination module.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
  from magic_imports.core.resolution import Unresolved


@dataclass(frozen=True)
class StatementMatch:
  """
  A located import statement.

  Attributes:
      original: Matched text including leading indentation, trailing whitespace trimmed.
      statement: The isolated statement (indentation stripped) handed to the parser.
      start: Offset of ``original`` in the scanned buffer.
      end: Offset one past the last character of ``original``.
      indent: The leading whitespace of the line.
      newline: The line ending of the line holding the statement end (``\\n`` or ``\\r\\n``).
  """

  original: str
  statement: str
  start: int
  end: int
  indent: str = ""
  newline: str = "\n"


@dataclass
class ParsedImport:
  """
  Parsed import statement structure.

  ``named_imports`` and ``type_imports`` map the *local* binding to the
  *imported* (exported) name, i.e. ``import { A as B }`` stores ``{"B": "A"}``.
  """

  original: str
  module_specifier: str
  named_imports: Dict[str, str] = field(default_factory=dict)
  type_imports: Dict[str, str] = field(default_factory=dict)
  default_import: Optional[str] = None
  namespace_import: Optional[str] = None
  is_type_only: bool = False

  @property
  def is_empty(self) -> bool:
    """True if the statement binds nothing."""
    return not (self.named_imports or self.type_imports or self.default_import or self.namespace_import)

  def symbols_equal(self, other: "ParsedImport") -> bool:
    """
    Compares bindings, ignoring ``original`` and ``module_specifier``.

    Args:
        other: The import to compare with.

    Returns:
        bool: True if both statements bind the same names the same way.
    """
    return (
      self.named_imports == other.named_imports
      and self.type_imports == other.type_imports
      and self.default_import == other.default_import
      and self.namespace_import == other.namespace_import
      and self.is_type_only == other.is_type_only
    )


@dataclass(frozen=True)
class NamedImport:
  """One ``imported as local`` entry of a rendered brace list."""

  imported: str
  local: str
  is_type: bool = False


@dataclass
class TransformedImportData:
  """Everything routed to a single destination module."""

  named_imports: List[NamedImport] = field(default_factory=list)
  default_import: Optional[str] = None
  namespace_import: Optional[str] = None
  is_type_only: bool = False

  @property
  def is_empty(self) -> bool:
    return not (self.named_imports or self.default_import or self.namespace_import)


@dataclass
class TransformedImport:
  """
  Result of routing one ``ParsedImport``.

  Attributes:
      imports: Destination module specifier -> import data, in first-seen order.
      unresolved: Symbols that could not be routed and were dropped.
  """

  imports: Dict[str, TransformedImportData] = field(default_factory=dict)
  unresolved: List["Unresolved"] = field(default_factory=list)

  def record_for(self, destination: str, is_type_only: bool) -> TransformedImportData:
    """
    Returns the record for ``destination``, creating it on first use.

    Args:
        destination: Target module specifier.
        is_type_only: Flag applied if the record is created now.

    Returns:
        TransformedImportData: The (possibly new) destination record.
    """
    record = self.imports.get(destination)
    if record is None:
      record = TransformedImportData(is_type_only=is_type_only)
      self.imports[destination] = record
    return record
