"""
Pydantic Schemas for Routing Configuration.

This module defines the vocabulary used to describe where the symbols of a
virtual module really come from for each compilation target, and what the
generated type-declaration shim re-exports.

Example (``pyproject.toml``)::

    [tool.magic_imports.modules.flow.targets.react]
    Flow = { from = "@xyflow/react", symbol = "ReactFlow" }
    "*" = "@xyflow/react"

    [tool.magic_imports.modules.flow.targets]
    vue = "@vue-flow/core"
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATCH_ALL = "*"
VIRTUAL_PREFIX = "virtual:"


class SymbolSource(BaseModel):
  """
  Where a symbol comes from in the target framework.

  ``symbol`` is the name exported by the target module, when it differs from
  the name being resolved::

      SymbolSource(from_="@xyflow/react", symbol="ReactFlow")
      # import { ReactFlow as Flow } from '@xyflow/react'
  """

  model_config = ConfigDict(populate_by_name=True, frozen=True)

  from_: str = Field(..., alias="from", min_length=1, description="Target module to import from.")
  symbol: Optional[str] = Field(None, min_length=1, description="Exported name in the target module.")


SymbolValue = Union[str, SymbolSource]

# A module string (every symbol from one module) or a per-symbol map keyed by
# imported name, with CATCH_ALL as the fallback entry.
TargetConfig = Union[str, Mapping[str, Union[str, SymbolSource, Mapping[str, Any]]]]


def normalize_symbol_source(value: Union[str, SymbolSource, Mapping[str, Any]]) -> SymbolSource:
  """
  Coerces a configuration value to a `SymbolSource`.

  Args:
      value: A module string, a ``{"from": ..., "symbol": ...}`` mapping, or a model.

  Returns:
      SymbolSource: The normalized source.
  """
  if isinstance(value, SymbolSource):
    return value
  if isinstance(value, str):
    return SymbolSource(from_=value)
  return SymbolSource.model_validate(value)


class ShimPackageConfig(BaseModel):
  """
  Type-declaration settings for one package re-exported by a virtual module.
  """

  model_config = ConfigDict(populate_by_name=True)

  reexport_all: bool = Field(False, alias="reexportAll", description="Emit `export * from` the package.")
  aliases: Dict[str, str] = Field(
    default_factory=dict,
    description="Local name -> exported name; emits `export { exported as local }`.",
  )


ShimConfig = Union[str, Dict[str, Union[str, ShimPackageConfig]]]


class ModuleConfig(BaseModel):
  """
  Configuration for a single virtual module.
  """

  shim: Optional[ShimConfig] = Field(None, description="What the generated declaration file exports.")
  targets: Dict[str, Union[str, Dict[str, SymbolValue]]] = Field(
    default_factory=dict,
    description="Compilation target (react, vue, ...) -> routing for that target.",
  )

  @field_validator("shim")
  @classmethod
  def validate_shim(cls, v: Optional[ShimConfig]) -> Optional[ShimConfig]:
    """
    Ensures per-package string shorthands are the re-export-all marker ``"*"``.

    Raises:
        ValueError: On any other string shorthand.
    """
    if isinstance(v, dict):
      for package, value in v.items():
        if isinstance(value, str) and value != CATCH_ALL:
          raise ValueError(f"Shim entry for '{package}' must be '*' or a table, got '{value}'.")
    return v

  @field_validator("targets")
  @classmethod
  def validate_targets(cls, v: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rejects empty module strings, which could never be emitted.

    Args:
        v: The raw targets mapping.

    Returns:
        Dict: The unchanged mapping.

    Raises:
        ValueError: If a target or symbol routes to an empty module name.
    """
    for target, config in v.items():
      if isinstance(config, str):
        if not config.strip():
          raise ValueError(f"Target '{target}' routes to an empty module name.")
        continue
      for name, value in config.items():
        if isinstance(value, str) and not value.strip():
          raise ValueError(f"Symbol '{name}' of target '{target}' routes to an empty module name.")
    return v

  def target_config(self, target: str) -> Optional[TargetConfig]:
    """
    Returns the routing for ``target``, or None if the module does not support it.
    """
    return self.targets.get(target)


def normalize_module_name(name: str) -> str:
  """
  Adds the ``virtual:`` prefix if missing.

  Args:
      name (str): Module key as written in configuration.

  Returns:
      str: The specifier used in source code, e.g. ``virtual:flow``.
  """
  name = name.strip()
  if name.startswith(VIRTUAL_PREFIX):
    return name
  return f"{VIRTUAL_PREFIX}{name}"
