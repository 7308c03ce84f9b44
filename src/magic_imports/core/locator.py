"""
Statement Locator.

Scans a source buffer for every ``import ... from '<module>'`` statement that
references one specific module specifier. Indented statements (e.g. inside a
Svelte or Vue ``<script>`` block) are matched, and the indentation is kept in
``StatementMatch.original`` so the caller can replace the exact text.
"""

import re
from typing import Iterator

from magic_imports.core.nodes import StatementMatch


def build_statement_pattern(module_specifier: str) -> "re.Pattern[str]":
  """
  Compiles the pattern matching import statements for ``module_specifier``.

  The clause may span lines but may not contain quotes or semicolons, so a
  match never runs into a neighbouring statement. Lines may end in ``\\n`` or
  ``\\r\\n``; a carriage return is never part of the statement span.

  Args:
      module_specifier (str): Exact module name, e.g. ``virtual:flow``.

  Returns:
      re.Pattern: Multiline pattern with ``indent``, ``statement`` and ``eol`` groups.
  """
  escaped = re.escape(module_specifier)
  return re.compile(
    r"^(?P<indent>[ \t]*)"
    r"(?P<statement>import\s+(?:type\s+)?[^;'\"]+?\s+from\s+(['\"])" + escaped + r"\3[ \t]*;?)"
    r"[ \t]*(?P<eol>\r?)$",
    re.MULTILINE,
  )


class StatementLocator:
  """
  Restartable iterable over the import statements for one module.

  Each iteration rescans the (immutable) source text, so iterating twice
  yields equal results.
  """

  def __init__(self, code: str, module_specifier: str) -> None:
    """
    Args:
        code (str): The source buffer to scan.
        module_specifier (str): The module whose imports should be located.
    """
    self.code = code
    self.module_specifier = module_specifier
    self._pattern = build_statement_pattern(module_specifier)

  def __iter__(self) -> Iterator[StatementMatch]:
    for match in self._pattern.finditer(self.code):
      statement = match.group("statement")
      start = match.start()
      end = match.end("statement")
      yield StatementMatch(
        original=self.code[start:end],
        statement=statement.strip(),
        start=start,
        end=end,
        indent=match.group("indent"),
        newline="\r\n" if match.group("eol") else "\n",
      )


def find_import_statements(code: str, module_specifier: str) -> StatementLocator:
  """
  Locates all import statements referencing ``module_specifier``.

  Args:
      code (str): Source text.
      module_specifier (str): Module to look for.

  Returns:
      StatementLocator: Iterable of `StatementMatch`, in source order. Empty if
      the module is never imported.
  """
  return StatementLocator(code, module_specifier)
