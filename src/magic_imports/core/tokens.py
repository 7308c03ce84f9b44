"""
Import Clause Tokenizer.

Provides a Regex-based Lexer (`ClauseLexer`) that decomposes the clause of an
import statement (the text between ``import`` and ``from``) into a stream of
typed `Token` objects. Keywords such as ``as`` and ``type`` are emitted as
identifiers; the parser interprets them by position.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generator


class TokenType(Enum):
  """Enumeration of valid clause token types."""

  STAR = auto()  # *
  LBRACE = auto()  # {
  RBRACE = auto()  # }
  COMMA = auto()  # ,
  IDENTIFIER = auto()  # Flow, $store, as, type


@dataclass
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind: The type of token.
      value: The raw string value.
      position: Offset of the token in the clause (0-based).
  """

  kind: TokenType
  value: str
  position: int


class ClauseLexer:
  """
  Regex-based Lexer for ECMAScript import clauses.
  """

  PATTERNS = [
    (TokenType.STAR, r"\*"),
    (TokenType.LBRACE, r"\{"),
    (TokenType.RBRACE, r"\}"),
    (TokenType.COMMA, r","),
    (TokenType.IDENTIFIER, r"[A-Za-z_$][\w$]*"),
  ]

  _WHITESPACE = re.compile(r"\s+")

  def __init__(self) -> None:
    """Initializes the lexer with compiled patterns."""
    self.regex_pairs = [(kind, re.compile(pattern)) for kind, pattern in self.PATTERNS]

  def tokenize(self, text: str) -> Generator[Token, None, None]:
    """
    Tokenizes the clause.

    Args:
        text: Raw import clause, e.g. ``X, { A as B }``.

    Yields:
        Token objects.

    Raises:
        ValueError: If an unrecognized character sequence is encountered.
    """
    pos = 0
    length = len(text)

    while pos < length:
      match_ws = self._WHITESPACE.match(text, pos)
      if match_ws:
        pos = match_ws.end()
        continue

      for kind, regex in self.regex_pairs:
        match = regex.match(text, pos)
        if match:
          yield Token(kind, match.group(0), pos)
          pos = match.end()
          break
      else:
        snippet = text[pos : min(pos + 10, length)]
        raise ValueError(f"Illegal character at offset {pos}: '{snippet}'")
