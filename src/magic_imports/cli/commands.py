"""
CLI Command Handlers Facade.

This module re-exports handlers from `magic_imports.cli.handlers` so the
dispatcher (and tests patching it) have a single stable import location.
"""

from magic_imports.cli.handlers.rewrite import (
  DEFAULT_EXTENSIONS,
  handle_rewrite,
  _print_batch_summary,
  _rewrite_single_file,
)
from magic_imports.cli.handlers.shim import handle_shim

__all__ = [
  "DEFAULT_EXTENSIONS",
  "_print_batch_summary",
  "_rewrite_single_file",
  "handle_rewrite",
  "handle_shim",
]
