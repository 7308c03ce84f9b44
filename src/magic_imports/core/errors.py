"""
Exception hierarchy for the import rewriting engine.

No condition raised here is fatal to a whole rewrite pass: the engine catches
``ImportSyntaxError`` per statement and leaves the original text untouched.
"""

from typing import Optional


class MagicImportsError(Exception):
  """Base class for all errors raised by magic-imports."""


class ImportSyntaxError(MagicImportsError):
  """
  Raised when an import statement does not match the supported grammar.

  Attributes:
      statement (str): The raw statement text that failed to parse.
      position (Optional[int]): Offset within the import clause, when known.
  """

  def __init__(self, message: str, statement: str, position: Optional[int] = None) -> None:
    self.statement = statement
    self.position = position
    if position is not None:
      message = f"{message} (at clause offset {position})"
    super().__init__(message)
