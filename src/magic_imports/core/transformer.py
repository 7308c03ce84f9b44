"""
Import Transformer.

Routes every binding of a `ParsedImport` to its destination module according to
a `TargetConfig` and groups the results into one record per destination.

TargetConfig can be:
- ``str``: all symbols from this module, no renaming.
- mapping: per-symbol routing keyed by imported name, with optional ``"*"`` catch-all.

Unroutable symbols are dropped, logged as warnings and listed on
``TransformedImport.unresolved``; they never abort the statement.
"""

from magic_imports.core.nodes import NamedImport, ParsedImport, TransformedImport
from magic_imports.core.resolution import Resolved, SymbolResolver, Unresolved
from magic_imports.enums import SymbolKind
from magic_imports.schema import TargetConfig
from magic_imports.utils.console import log_warning


def transform_import(parsed: ParsedImport, target_config: TargetConfig) -> TransformedImport:
  """
  Transforms a parsed import based on the target configuration.

  Args:
      parsed (ParsedImport): The statement to route.
      target_config (TargetConfig): Module string or per-symbol map.

  Returns:
      TransformedImport: Destination records in first-seen order, plus any
      unresolved symbols.
  """
  if isinstance(target_config, str):
    return _transform_to_module(parsed, target_config)
  return _transform_by_symbol(parsed, target_config)


def _transform_to_module(parsed: ParsedImport, module: str) -> TransformedImport:
  """Every binding re-sourced from a single module, names unchanged."""
  result = TransformedImport()
  data = result.record_for(module, parsed.is_type_only)

  for local, imported in parsed.named_imports.items():
    data.named_imports.append(NamedImport(imported=imported, local=local))
  for local, imported in parsed.type_imports.items():
    data.named_imports.append(NamedImport(imported=imported, local=local, is_type=True))

  data.default_import = parsed.default_import
  data.namespace_import = parsed.namespace_import
  return result


def _transform_by_symbol(parsed: ParsedImport, symbol_map: TargetConfig) -> TransformedImport:
  """Per-symbol routing with catch-all fallback."""
  result = TransformedImport()
  resolver = SymbolResolver(symbol_map)

  def _report(unresolved: Unresolved) -> None:
    log_warning(f"[MagicImports] {unresolved.reason} ({parsed.module_specifier})")
    result.unresolved.append(unresolved)

  named_groups = (
    (parsed.named_imports, SymbolKind.NAMED),
    (parsed.type_imports, SymbolKind.TYPE),
  )
  for bindings, kind in named_groups:
    for local, imported in bindings.items():
      resolution = resolver.resolve_named(local, imported, kind)
      if isinstance(resolution, Unresolved):
        _report(resolution)
        continue
      record = result.record_for(resolution.destination, parsed.is_type_only)
      record.named_imports.append(
        NamedImport(
          imported=resolution.imported,
          local=resolution.local,
          is_type=kind == SymbolKind.TYPE,
        )
      )

  if parsed.default_import:
    resolution = resolver.resolve_binding(parsed.default_import, SymbolKind.DEFAULT)
    if isinstance(resolution, Resolved):
      result.record_for(resolution.destination, parsed.is_type_only).default_import = resolution.local
    else:
      _report(resolution)

  if parsed.namespace_import:
    resolution = resolver.resolve_binding(parsed.namespace_import, SymbolKind.NAMESPACE)
    if isinstance(resolution, Resolved):
      result.record_for(resolution.destination, parsed.is_type_only).namespace_import = resolution.local
    else:
      _report(resolution)

  return result
