"""
Import Statement Parser.

This module provides the `ImportParser`, which converts one raw ``import ... from``
statement into a `ParsedImport`.

The statement header (``import [type] <clause> from '<module>'``) is split with a
single anchored pattern. The clause itself is tokenized by `ClauseLexer` and
walked by a small state machine::

    START --part--> AFTER_PART --","--> START
                    AFTER_PART --identifier (after braces)--> AFTER_PART
                    AFTER_PART --end--> DONE

where a *part* is one of ``* as NS`` (namespace), ``Name`` (default) or
``{ ... }`` (named list). Each part may appear at most once, with the exception
that a bare identifier *after* the brace group is accepted as the default import
when none was seen before it.

Handles:
- Named imports: ``import { A, B } from 'x'``
- Renamed imports: ``import { A as B } from 'x'``
- Default imports: ``import X from 'x'``
- Namespace imports: ``import * as X from 'x'``
- Mixed: ``import X, { A } from 'x'`` and ``import X, * as NS from 'x'``
- Type-only: ``import type { A } from 'x'``
- Inline type: ``import { type A, B } from 'x'``
"""

import re
from enum import Enum, auto
from typing import List, Optional, Tuple

from magic_imports.core.errors import ImportSyntaxError
from magic_imports.core.nodes import ParsedImport
from magic_imports.core.tokens import ClauseLexer, Token, TokenType

_STATEMENT_PATTERN = re.compile(
  r"^import\s+(type(?=[\s{*])\s*)?(.+?)\s+from\s+(['\"])([^'\"]+)\3\s*;?\s*$",
  re.DOTALL,
)


class _State(Enum):
  START = auto()
  AFTER_PART = auto()


class ImportParser:
  """
  Parser for a single ECMAScript import statement.
  """

  def __init__(self) -> None:
    self.lexer = ClauseLexer()

  def parse(self, statement: str) -> ParsedImport:
    """
    Parses a statement into structured data.

    Args:
        statement (str): The raw statement. Surrounding whitespace is ignored.

    Returns:
        ParsedImport: The structured import. ``original`` is set to ``statement``.

    Raises:
        ImportSyntaxError: If the statement does not match the supported grammar
            or binds nothing.
    """
    match = _STATEMENT_PATTERN.match(statement.strip())
    if not match:
      raise ImportSyntaxError("Not an 'import ... from' statement", statement)

    type_keyword, clause, _, specifier = match.groups()
    result = ParsedImport(
      original=statement,
      module_specifier=specifier,
      is_type_only=bool(type_keyword),
    )

    try:
      tokens = list(self.lexer.tokenize(clause))
    except ValueError as e:
      raise ImportSyntaxError(str(e), statement) from e

    self._walk_clause(tokens, result, statement)

    if result.is_empty:
      raise ImportSyntaxError("Import clause binds no symbols", statement)
    return result

  def _walk_clause(self, tokens: List[Token], result: ParsedImport, statement: str) -> None:
    """Drives the clause state machine, filling ``result`` in place."""
    pos = 0
    state = _State.START
    seen_braces = False

    while pos < len(tokens):
      token = tokens[pos]

      if state == _State.AFTER_PART:
        if token.kind == TokenType.COMMA:
          pos += 1
          state = _State.START
          if pos >= len(tokens):
            raise ImportSyntaxError("Trailing comma in import clause", statement, token.position)
          continue
        # Unusual ordering: `{ A } X` binds X as the default import.
        if not (seen_braces and token.kind == TokenType.IDENTIFIER):
          raise ImportSyntaxError(f"Unexpected '{token.value}'", statement, token.position)

      if token.kind == TokenType.STAR:
        if result.namespace_import is not None:
          raise ImportSyntaxError("Duplicate namespace import", statement, token.position)
        result.namespace_import, pos = self._parse_namespace(tokens, pos, statement)

      elif token.kind == TokenType.LBRACE:
        if seen_braces:
          raise ImportSyntaxError("Duplicate named import list", statement, token.position)
        pos = self._parse_named_list(tokens, pos, result, statement)
        seen_braces = True

      elif token.kind == TokenType.IDENTIFIER:
        if result.default_import is not None:
          raise ImportSyntaxError(f"Unexpected identifier '{token.value}'", statement, token.position)
        result.default_import = token.value
        pos += 1

      else:
        raise ImportSyntaxError(f"Unexpected '{token.value}'", statement, token.position)

      state = _State.AFTER_PART

  def _parse_namespace(self, tokens: List[Token], pos: int, statement: str) -> Tuple[str, int]:
    """
    Parses ``* as Name`` starting at the star token.

    Returns:
        Tuple[str, int]: The namespace binding and the position after it.
    """
    as_tok = _peek(tokens, pos + 1)
    name_tok = _peek(tokens, pos + 2)
    if as_tok is None or as_tok.kind != TokenType.IDENTIFIER or as_tok.value != "as":
      raise ImportSyntaxError("Expected 'as' after '*'", statement, tokens[pos].position)
    if name_tok is None or name_tok.kind != TokenType.IDENTIFIER:
      raise ImportSyntaxError("Expected namespace name after '* as'", statement, as_tok.position)
    return name_tok.value, pos + 3

  def _parse_named_list(self, tokens: List[Token], pos: int, result: ParsedImport, statement: str) -> int:
    """
    Parses a brace group starting at ``{`` and records its entries.

    Returns:
        int: The position after the closing brace.
    """
    open_tok = tokens[pos]
    pos += 1
    words: List[str] = []

    while pos < len(tokens):
      token = tokens[pos]
      if token.kind == TokenType.RBRACE:
        self._bind_entry(words, result, statement, token.position)
        return pos + 1
      if token.kind == TokenType.COMMA:
        self._bind_entry(words, result, statement, token.position)
        words = []
      elif token.kind == TokenType.IDENTIFIER:
        words.append(token.value)
      elif token.kind == TokenType.LBRACE:
        raise ImportSyntaxError("Nested braces in import clause", statement, token.position)
      else:
        raise ImportSyntaxError(f"Unexpected '{token.value}' in named imports", statement, token.position)
      pos += 1

    raise ImportSyntaxError("Unbalanced braces in import clause", statement, open_tok.position)

  def _bind_entry(self, words: List[str], result: ParsedImport, statement: str, position: int) -> None:
    """
    Records one named entry: ``X``, ``X as Y``, ``type X`` or ``type X as Y``.

    An empty entry (e.g. after a trailing comma) is ignored.
    """
    if not words:
      return

    is_type = False
    if len(words) in (2, 4) and words[0] == "type":
      is_type = True
      words = words[1:]

    if len(words) == 1:
      imported = local = words[0]
    elif len(words) == 3 and words[1] == "as":
      imported, local = words[0], words[2]
    else:
      entry = " ".join(words)
      raise ImportSyntaxError(f"Malformed import specifier '{entry}'", statement, position)

    if is_type:
      result.type_imports[local] = imported
    else:
      result.named_imports[local] = imported


def _peek(tokens: List[Token], pos: int) -> Optional[Token]:
  if pos < len(tokens):
    return tokens[pos]
  return None


_DEFAULT_PARSER = ImportParser()


def parse_import_statement(statement: str) -> ParsedImport:
  """
  Parses a single import statement with a shared parser instance.

  Args:
      statement (str): The raw statement text.

  Returns:
      ParsedImport: The structured import.

  Raises:
      ImportSyntaxError: If the statement is malformed or unsupported.
  """
  return _DEFAULT_PARSER.parse(statement)
