"""
Rewrite Command Handler.

This module implements the logic for the `magic-imports rewrite` command.
It orchestrates:
1. Configuration loading (pyproject.toml or an explicit config file).
2. Source discovery (single file or directory tree).
3. Import rewriting via the `RewriteEngine`.
4. Output writing and the diagnostics summary.
"""

from pathlib import Path
from typing import Dict, List, Optional

from rich.table import Table

from magic_imports.config import MagicImportsConfig
from magic_imports.core.engine import RewriteEngine
from magic_imports.core.rewrite_result import RewriteResult
from magic_imports.utils.console import (
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  make_console,
  set_console,
)

DEFAULT_EXTENSIONS = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".vue", ".svelte", ".astro"]


def handle_rewrite(
  input_path: Path,
  output_path: Optional[Path],
  target: Optional[str],
  config_file: Optional[Path] = None,
  extensions: Optional[List[str]] = None,
) -> int:
  """
  Handles the 'rewrite' command execution.

  Args:
      input_path: Source file or directory to rewrite.
      output_path: Destination file or directory. Required for directories;
          a single file is printed to stdout when omitted, with logs on stderr.
      target: Compilation target (overrides the configured default).
      config_file: Explicit configuration file; otherwise pyproject.toml is searched.
      extensions: File suffixes to process in directory mode.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  if input_path.is_file() and output_path is None:
    # Stdout carries the rewritten code; logs and the summary go to stderr.
    previous = get_console()
    set_console(make_console(stderr=True))
    try:
      return _run_rewrite(input_path, None, target, config_file, extensions)
    finally:
      set_console(previous)

  return _run_rewrite(input_path, output_path, target, config_file, extensions)


def _run_rewrite(
  input_path: Path,
  output_path: Optional[Path],
  target: Optional[str],
  config_file: Optional[Path],
  extensions: Optional[List[str]],
) -> int:
  """Loads configuration and rewrites a file or directory tree."""
  try:
    config = MagicImportsConfig.load(
      search_path=input_path if input_path.is_dir() else input_path.parent,
      target=target,
      config_file=config_file,
    )
    engine = RewriteEngine(config)
  except (OSError, ValueError) as e:
    log_error(str(e))
    return 1

  if not config.modules:
    log_warning("No virtual modules configured; nothing to rewrite.")

  batch_results: Dict[str, RewriteResult] = {}

  if input_path.is_file():
    result = _rewrite_single_file(input_path, output_path, engine)
    batch_results[input_path.name] = result
    if not result.success:
      return 1

  else:
    if not output_path:
      log_error("Directory rewriting requires --out destination directory.")
      return 1

    suffixes = set(extensions or DEFAULT_EXTENSIONS)
    sources = sorted(p for p in input_path.rglob("*") if p.is_file() and p.suffix in suffixes)
    if not sources:
      log_warning(f"No source files found in {input_path}")
      return 0

    log_info(f"Processing {len(sources)} files from {input_path}...")

    for src_file in sources:
      rel_path = src_file.relative_to(input_path)
      result = _rewrite_single_file(src_file, output_path / rel_path, engine)
      batch_results[str(rel_path)] = result

  _print_batch_summary(batch_results)
  return 0


def _rewrite_single_file(
  input_path: Path,
  output_path: Optional[Path],
  engine: RewriteEngine,
) -> RewriteResult:
  """
  Rewrites one file.

  Args:
      input_path: Source file path.
      output_path: Destination file path, or None to print to stdout.
      engine: Configured rewrite engine.

  Returns:
      RewriteResult: Result object containing status and code.
  """
  try:
    with open(input_path, "rt", encoding="utf-8", newline="") as f:
      code = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {e}")
    return RewriteResult(success=False, errors=[str(e)])

  result = engine.run(code)

  if output_path:
    try:
      output_path.parent.mkdir(parents=True, exist_ok=True)
      with open(output_path, "wt", encoding="utf-8", newline="") as f:
        f.write(result.code)
    except OSError as e:
      log_error(f"Failed to write {output_path}: {e}")
      result.errors.append(str(e))
      result.success = False
      return result
    if result.changed:
      log_success(f"Rewrote: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(result.code, end="")

  return result


def _print_batch_summary(results: Dict[str, RewriteResult]) -> None:
  """
  Renders a summary table of rewrite results to the console.

  Args:
      results: Dictionary mapping filenames to rewrite results.
  """
  total = len(results)
  clean = sum(1 for r in results.values() if r.success and not r.has_diagnostics)
  issues = total - clean

  if issues == 0:
    log_success(f"Batch Complete: {clean}/{total} files rewritten cleanly.")
    return

  table = Table(title="Rewrite Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success and not res.has_diagnostics:
      continue
    status = "❌ Failed" if not res.success else "⚠️ Warnings"
    messages = res.errors + [d.format() for d in res.diagnostics]
    table.add_row(filename, status, "; ".join(messages) or "Unknown Error")

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {clean} Clean, {issues} with Issues.")
