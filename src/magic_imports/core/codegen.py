"""
Import Statement Code Generation.

Renders `TransformedImportData` records back into ECMAScript import statements.
Parts are emitted in a fixed order (default, namespace, named list); records
with nothing left to import render to an empty string and are dropped, so an
``import {} from '...'`` statement is never produced.
"""

from typing import List

from magic_imports.core.nodes import NamedImport, TransformedImport, TransformedImportData


def _render_named(entry: NamedImport, inline_type: bool) -> str:
  text = entry.imported if entry.imported == entry.local else f"{entry.imported} as {entry.local}"
  if inline_type and entry.is_type:
    return f"type {text}"
  return text


def generate_import_statement(module_specifier: str, data: TransformedImportData) -> str:
  """
  Generates one import statement.

  Args:
      module_specifier (str): Destination module.
      data (TransformedImportData): Bindings routed to that module.

  Returns:
      str: e.g. ``import X, { A as B } from 'mod';``, or ``""`` if the record is empty.
  """
  if data.is_empty:
    return ""

  parts: List[str] = []
  if data.default_import:
    parts.append(data.default_import)

  if data.namespace_import:
    parts.append(f"* as {data.namespace_import}")

  if data.named_imports:
    # A type-only statement already marks every entry.
    named = [_render_named(entry, not data.is_type_only) for entry in data.named_imports]
    parts.append(f"{{ {', '.join(named)} }}")

  type_prefix = "type " if data.is_type_only else ""
  return f"import {type_prefix}{', '.join(parts)} from '{module_specifier}';"


def generate_import_statements(transformed: TransformedImport) -> List[str]:
  """
  Generates the statements for every destination, in destination order.

  Args:
      transformed (TransformedImport): The routed import.

  Returns:
      List[str]: Non-empty statements only.
  """
  statements: List[str] = []
  for module_specifier, data in transformed.imports.items():
    statement = generate_import_statement(module_specifier, data)
    if statement:
      statements.append(statement)
  return statements
