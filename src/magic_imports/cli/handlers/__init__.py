from .rewrite import handle_rewrite, _rewrite_single_file, _print_batch_summary
from .shim import handle_shim

__all__ = [
  "_print_batch_summary",
  "_rewrite_single_file",
  "handle_rewrite",
  "handle_shim",
]
