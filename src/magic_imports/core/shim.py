"""
Type Declaration Shim Generator.

Renders an ambient ``.d.ts`` file declaring every virtual module, so editors and
type checkers can resolve ``import { Flow } from 'virtual:flow'`` before the
rewrite pass runs.

Shim configuration can be:
- ``str``: a single package, ``export * from "<pkg>";``
- mapping: package -> ``"*"`` (re-export all) or `ShimPackageConfig`
  (aliases first, then ``export *`` when ``reexport_all`` is set).
"""

from pathlib import Path
from typing import List, Optional

from magic_imports.config import MagicImportsConfig
from magic_imports.schema import CATCH_ALL, ShimConfig, ShimPackageConfig

SHIM_HEADER = "// Generated by magic-imports. Do not edit by hand.\n"


def render_shim_exports(shim: ShimConfig) -> List[str]:
  """
  Renders the export lines for one module's shim configuration.

  Args:
      shim (ShimConfig): Package string or per-package mapping.

  Returns:
      List[str]: Export statements, in configuration order.
  """
  if isinstance(shim, str):
    return [f'export * from "{shim}";']

  lines: List[str] = []
  for package, entry in shim.items():
    if isinstance(entry, str):
      entry = ShimPackageConfig(reexport_all=entry == CATCH_ALL)

    for local, exported in entry.aliases.items():
      if local == exported:
        lines.append(f'export {{ {exported} }} from "{package}";')
      else:
        lines.append(f'export {{ {exported} as {local} }} from "{package}";')

    if entry.reexport_all:
      lines.append(f'export * from "{package}";')
  return lines


def generate_shim(config: MagicImportsConfig) -> str:
  """
  Generates the declaration file for all modules that define a shim.

  Args:
      config (MagicImportsConfig): Virtual module definitions.

  Returns:
      str: The ``.d.ts`` source text (header only if no module has a shim).
  """
  blocks: List[str] = []
  for module_specifier, module_config in config.modules.items():
    if module_config.shim is None:
      continue
    body = "".join(f"  {line}\n" for line in render_shim_exports(module_config.shim))
    blocks.append(f'declare module "{module_specifier}" {{\n{body}}}\n')

  return SHIM_HEADER + "".join(f"\n{block}" for block in blocks)


def write_shim(config: MagicImportsConfig, root: Path, output: Optional[Path] = None) -> Optional[Path]:
  """
  Writes the declaration file.

  Args:
      config (MagicImportsConfig): Virtual module definitions.
      root (Path): Project root that relative output paths are resolved against.
      output (Optional[Path]): Overrides ``config.shim_output_file``.

  Returns:
      Optional[Path]: The written path, or None if shim output is disabled.
  """
  target = output or config.shim_output_file
  if target is None:
    return None

  path = target if target.is_absolute() else root / target
  path.parent.mkdir(parents=True, exist_ok=True)
  with open(path, "wt", encoding="utf-8") as f:
    f.write(generate_shim(config))
  return path
