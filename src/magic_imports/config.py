"""
Runtime Configuration Store.

Loads virtual module definitions from the ``[tool.magic_imports]`` table of the
nearest ``pyproject.toml`` (or from a standalone TOML/JSON file) and validates
them into a `MagicImportsConfig`.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from magic_imports.schema import ModuleConfig, normalize_module_name

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_SHIM_OUTPUT = "src/typings/magic-imports.d.ts"
TOOL_SECTION = "magic_imports"


class MagicImportsConfig(BaseModel):
  """
  Global configuration container for the rewrite engine.
  """

  modules: Dict[str, ModuleConfig] = Field(
    default_factory=dict,
    description="Virtual modules keyed by specifier. The 'virtual:' prefix is added if missing.",
  )
  shim_output_file: Optional[Path] = Field(
    Path(DEFAULT_SHIM_OUTPUT),
    description="Where to write type declarations, relative to the project root. False/None disables.",
  )
  target: Optional[str] = Field(None, description="Default compilation target (react, vue, ...).")

  @field_validator("modules", mode="before")
  @classmethod
  def normalize_modules(cls, v: Any) -> Any:
    """
    Prefixes every module key with ``virtual:``.

    Args:
        v: The raw modules mapping.

    Returns:
        The mapping with normalized keys.

    Raises:
        ValueError: If two keys normalize to the same specifier.
    """
    if not isinstance(v, dict):
      return v
    normalized: Dict[str, Any] = {}
    for name, module in v.items():
      key = normalize_module_name(name)
      if key in normalized:
        raise ValueError(f"Module '{name}' is defined twice (as '{key}').")
      normalized[key] = module
    return normalized

  @field_validator("shim_output_file", mode="before")
  @classmethod
  def disable_shim(cls, v: Any) -> Any:
    """
    Maps ``false`` (the TOML way of disabling shim output) to None.
    """
    if v is False:
      return None
    if v is True:
      return Path(DEFAULT_SHIM_OUTPUT)
    return v

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    target: Optional[str] = None,
    shim_output_file: Union[str, Path, bool, None] = None,
    config_file: Optional[Path] = None,
  ) -> "MagicImportsConfig":
    """
    Loads configuration from pyproject.toml (or ``config_file``) and applies overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for pyproject.toml.
        target (Optional[str]): Override for the default target.
        shim_output_file: Override for the shim output path (False disables).
        config_file (Optional[Path]): Explicit TOML/JSON file; skips the pyproject search.

    Returns:
        MagicImportsConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the configuration does not validate.
    """
    try:
      if config_file is not None:
        raw = load_config_file(config_file)
      else:
        raw, _ = _load_toml_settings(search_path or Path.cwd())
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
      raise ValueError(f"Could not parse magic-imports configuration: {e}") from e

    data = dict(raw)
    if target is not None:
      data["target"] = target
    if shim_output_file is not None:
      data["shim_output_file"] = shim_output_file

    try:
      return cls.model_validate(data)
    except ValidationError as e:
      raise ValueError(f"Invalid magic-imports configuration: {e}") from e


def load_config_file(path: Path) -> Dict[str, Any]:
  """
  Reads a standalone configuration file.

  ``.json`` files are read as JSON; anything else as TOML. A TOML file that
  contains a ``[tool.magic_imports]`` table (i.e. a pyproject.toml) is unwrapped.

  Args:
      path (Path): The file to read.

  Returns:
      Dict[str, Any]: Raw configuration mapping.
  """
  if path.suffix == ".json":
    with open(path, "rt", encoding="utf-8") as f:
      return json.load(f)

  with open(path, "rb") as f:
    data = tomllib.load(f)
  return data.get("tool", {}).get(TOOL_SECTION, data)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
