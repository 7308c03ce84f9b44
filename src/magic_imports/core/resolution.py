"""
Symbol Resolution Logic.

Decides where each imported symbol goes under an object-style `TargetConfig`.
Lookup is two-tiered: an exact entry for the *imported* name wins, otherwise the
``"*"`` catch-all applies. Every lookup returns an explicit tagged result,
`Resolved` or `Unresolved`, so callers cannot mistake a missing route for an
empty one.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from magic_imports.enums import SymbolKind
from magic_imports.schema import CATCH_ALL, SymbolSource, normalize_symbol_source


@dataclass(frozen=True)
class Resolved:
  """
  A symbol routed to a destination module.

  Attributes:
      destination: Module specifier to import from.
      imported: Name requested from the destination.
      local: Local binding in the rewritten statement.
  """

  destination: str
  imported: str
  local: str


@dataclass(frozen=True)
class Unresolved:
  """
  A symbol with no explicit entry and no catch-all.

  Attributes:
      name: The imported name (or local binding for default/namespace imports).
      kind: Which kind of binding could not be routed.
      reason: Human-readable explanation.
  """

  name: str
  kind: SymbolKind
  reason: str


Resolution = Union[Resolved, Unresolved]


class SymbolResolver:
  """
  Resolves symbols against one per-symbol routing map.
  """

  def __init__(self, symbol_map: Mapping[str, Any]) -> None:
    """
    Args:
        symbol_map: Imported name -> module string or `SymbolSource`, with an
            optional ``"*"`` entry.
    """
    self.symbol_map = symbol_map
    raw_catch_all = symbol_map.get(CATCH_ALL)
    self.catch_all: Optional[SymbolSource] = normalize_symbol_source(raw_catch_all) if raw_catch_all else None

  def resolve_named(self, local: str, imported: str, kind: SymbolKind = SymbolKind.NAMED) -> Resolution:
    """
    Resolves a named (or type) import by its imported name.

    Args:
        local: The local binding in the original statement.
        imported: The exported name requested from the virtual module.
        kind: NAMED or TYPE, recorded on failure.

    Returns:
        Resolution: Where the symbol goes, or why it cannot be routed.
    """
    entry = self.symbol_map.get(imported)

    if entry:
      source = normalize_symbol_source(entry)
      if source.symbol:
        # Renamed export: the original imported name becomes the local binding.
        return Resolved(destination=source.from_, imported=source.symbol, local=imported)
      return Resolved(destination=source.from_, imported=imported, local=local)

    if self.catch_all is not None:
      # A `symbol` override on the catch-all is not applied.
      return Resolved(destination=self.catch_all.from_, imported=imported, local=local)

    return Unresolved(
      name=imported,
      kind=kind,
      reason=f"Symbol '{imported}' not found in config and no '{CATCH_ALL}' catch-all defined.",
    )

  def resolve_binding(self, local: str, kind: SymbolKind) -> Resolution:
    """
    Resolves a default or namespace import. These have no imported name to
    look up, so only the catch-all applies.

    Args:
        local: The local binding (``X`` in ``import X`` or ``import * as X``).
        kind: DEFAULT or NAMESPACE.

    Returns:
        Resolution: The catch-all destination, or `Unresolved`.
    """
    if self.catch_all is not None:
      return Resolved(destination=self.catch_all.from_, imported=local, local=local)

    label = f"* as {local}" if kind == SymbolKind.NAMESPACE else local
    return Unresolved(
      name=local,
      kind=kind,
      reason=f"{kind.value.capitalize()} import '{label}' cannot be routed without a '{CATCH_ALL}' catch-all.",
    )
