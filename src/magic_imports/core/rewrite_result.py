"""
Data structures representing the output of a rewrite pass.

This module defines the `RewriteResult` Pydantic model, which encapsulates the
rewritten source, the individual statement replacements, and the non-fatal
diagnostics collected along the way.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from magic_imports.enums import DiagnosticKind


class Diagnostic(BaseModel):
  """
  A non-fatal problem found while rewriting.
  """

  kind: DiagnosticKind
  message: str
  module: str = Field(description="The virtual module specifier being rewritten.")
  statement: str = Field(description="The original statement text.")
  symbol: Optional[str] = Field(None, description="The offending symbol, for unresolved symbols.")

  def format(self) -> str:
    """
    Returns:
        str: One-line summary suitable for CLI output.
    """
    return f"{self.kind.value}: {self.message}"


class Replacement(BaseModel):
  """
  The rendered statements for one located import.

  ``start``/``end`` delimit ``original`` in the scanned buffer. An empty
  ``statements`` list means every symbol was dropped and the import is removed.
  """

  original: str
  start: int
  end: int
  statements: List[str] = Field(default_factory=list)
  indent: str = ""
  newline: str = "\n"

  def render(self) -> str:
    """
    Joins the statements with the line ending of the source, repeating the
    original indentation on each line.

    Returns:
        str: The text that replaces ``original``.
    """
    return self.newline.join(f"{self.indent}{stmt}" for stmt in self.statements)


class RewriteResult(BaseModel):
  """
  Container for the results of rewriting one source buffer.
  """

  code: str = Field(default="", description="The rewritten source code.")
  replacements: List[Replacement] = Field(default_factory=list, description="Applied replacements, in source order.")
  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Non-fatal problems encountered.")
  errors: List[str] = Field(default_factory=list, description="Errors that stopped the pass (I/O, configuration).")
  success: bool = Field(default=True, description="False only if the pass itself could not run.")

  @property
  def has_diagnostics(self) -> bool:
    """
    Returns:
        True if one or more diagnostics are present.
    """
    return len(self.diagnostics) > 0

  @property
  def changed(self) -> bool:
    """True if at least one statement was rewritten."""
    return len(self.replacements) > 0
