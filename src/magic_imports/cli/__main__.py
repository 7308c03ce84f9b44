"""
Main Entry Point for magic-imports CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `magic_imports.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from magic_imports import __version__
from magic_imports.cli import commands


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="magic-imports: Virtual module import rewriter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: REWRITE ---
  cmd_rw = subparsers.add_parser("rewrite", help="Rewrite virtual-module imports for a target")
  cmd_rw.add_argument("path", type=Path, help="Input source file or directory")
  cmd_rw.add_argument("--target", default=None, help="Compilation target, e.g. react (default: from config)")
  cmd_rw.add_argument("--out", type=Path, help="Output destination (file or dir)")
  cmd_rw.add_argument("--config", type=Path, default=None, help="Configuration file (default: pyproject.toml)")
  cmd_rw.add_argument(
    "--ext",
    nargs="+",
    default=None,
    help=f"File suffixes to process in directory mode (default: {' '.join(commands.DEFAULT_EXTENSIONS)})",
  )

  # --- Command: SHIM ---
  cmd_shim = subparsers.add_parser("shim", help="Generate type declarations for virtual modules")
  cmd_shim.add_argument("--config", type=Path, default=None, help="Configuration file (default: pyproject.toml)")
  cmd_shim.add_argument("--out", type=Path, default=None, help="Output file (default: from config)")

  args = parser.parse_args(argv)

  if args.command == "rewrite":
    return commands.handle_rewrite(args.path, args.out, args.target, args.config, args.ext)

  elif args.command == "shim":
    return commands.handle_shim(args.config, args.out)

  return 0


if __name__ == "__main__":
  sys.exit(main())
