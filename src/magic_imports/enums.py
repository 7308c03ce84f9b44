"""
Enumerations for magic-imports.

This module defines the standard enumerations used across the codebase for
symbol classification and diagnostic reporting.
"""

from enum import Enum


class SymbolKind(str, Enum):
  """
  Categorization of the bindings an import statement can introduce.

  Used by the resolver to decide which lookup strategy applies.
  """

  NAMED = "named"  # import { A } / import { A as B }
  TYPE = "type"  # import { type A } / import type { A }
  DEFAULT = "default"  # import X
  NAMESPACE = "namespace"  # import * as X


class DiagnosticKind(str, Enum):
  """
  Non-fatal conditions reported while rewriting a source buffer.
  """

  UNPARSEABLE_STATEMENT = "unparseable_statement"
  UNRESOLVED_SYMBOL = "unresolved_symbol"
