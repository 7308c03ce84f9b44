"""
Shim Command Handler.

Implements `magic-imports shim`: writes the type-declaration file for all
configured virtual modules.
"""

from pathlib import Path
from typing import Optional

from magic_imports.config import MagicImportsConfig
from magic_imports.core.shim import write_shim
from magic_imports.utils.console import log_error, log_success, log_warning


def handle_shim(
  config_file: Optional[Path] = None,
  output_path: Optional[Path] = None,
  root: Optional[Path] = None,
) -> int:
  """
  Handles the 'shim' command execution.

  Args:
      config_file: Explicit configuration file; otherwise pyproject.toml is searched.
      output_path: Overrides the configured ``shim_output_file``.
      root: Project root for relative output paths (defaults to the current directory).

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  root = root or Path.cwd()
  try:
    config = MagicImportsConfig.load(search_path=root, config_file=config_file)
  except (OSError, ValueError) as e:
    log_error(str(e))
    return 1

  try:
    written = write_shim(config, root, output=output_path)
  except OSError as e:
    log_error(f"Failed to write shim: {e}")
    return 1

  if written is None:
    log_warning("Shim output is disabled (shim_output_file = false).")
    return 0

  log_success(f"Type declarations written to [path]{written}[/path]")
  return 0
