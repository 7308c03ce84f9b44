"""
Rewrite Engine.

Runs the full pipeline (locate -> parse -> transform -> render) over a source
buffer and substitutes the generated statements back into it.

Two entry points are provided:

- `rewrite_module_imports`: the text-in / list-out contract for one virtual
  module and one `TargetConfig`. It does not modify the text.
- `RewriteEngine`: applies every configured virtual module for one compilation
  target and returns a `RewriteResult` with the rewritten code.
"""

from typing import List, Optional, Tuple

from magic_imports.config import MagicImportsConfig
from magic_imports.core.codegen import generate_import_statements
from magic_imports.core.errors import ImportSyntaxError
from magic_imports.core.locator import find_import_statements
from magic_imports.core.parser import ImportParser
from magic_imports.core.rewrite_result import Diagnostic, Replacement, RewriteResult
from magic_imports.core.transformer import transform_import
from magic_imports.enums import DiagnosticKind
from magic_imports.schema import TargetConfig
from magic_imports.utils.console import log_info, log_warning


def rewrite_module_imports(
  code: str,
  module_specifier: str,
  target_config: TargetConfig,
  parser: Optional[ImportParser] = None,
) -> Tuple[List[Replacement], List[Diagnostic]]:
  """
  Computes replacements for every import of ``module_specifier`` in ``code``.

  Statements that fail to parse are skipped (no replacement) and reported.

  Args:
      code (str): Source buffer.
      module_specifier (str): Virtual module to rewrite, e.g. ``virtual:flow``.
      target_config (TargetConfig): Routing for the active target.
      parser (Optional[ImportParser]): Parser instance to reuse.

  Returns:
      Tuple[List[Replacement], List[Diagnostic]]: Replacements in source order,
      and the diagnostics raised while producing them.
  """
  parser = parser or ImportParser()
  replacements: List[Replacement] = []
  diagnostics: List[Diagnostic] = []

  for match in find_import_statements(code, module_specifier):
    try:
      parsed = parser.parse(match.statement)
    except ImportSyntaxError as e:
      log_warning(f"[MagicImports] Skipping unparseable import: {match.statement!r} ({e})")
      diagnostics.append(
        Diagnostic(
          kind=DiagnosticKind.UNPARSEABLE_STATEMENT,
          message=str(e),
          module=module_specifier,
          statement=match.original,
        )
      )
      continue

    parsed.original = match.original
    transformed = transform_import(parsed, target_config)

    for unresolved in transformed.unresolved:
      diagnostics.append(
        Diagnostic(
          kind=DiagnosticKind.UNRESOLVED_SYMBOL,
          message=unresolved.reason,
          module=module_specifier,
          statement=match.original,
          symbol=unresolved.name,
        )
      )

    replacements.append(
      Replacement(
        original=match.original,
        start=match.start,
        end=match.end,
        statements=generate_import_statements(transformed),
        indent=match.indent,
        newline=match.newline,
      )
    )

  return replacements, diagnostics


def apply_replacements(code: str, replacements: List[Replacement]) -> str:
  """
  Substitutes replacements into ``code`` by span.

  Spans refer to the unmodified buffer, so they are applied last to first.

  Args:
      code (str): The buffer the replacements were computed against.
      replacements (List[Replacement]): Non-overlapping replacements.

  Returns:
      str: The rewritten buffer.
  """
  for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
    code = code[: replacement.start] + replacement.render() + code[replacement.end :]
  return code


class RewriteEngine:
  """
  Applies every configured virtual module to a source buffer for one target.
  """

  def __init__(self, config: MagicImportsConfig, target: Optional[str] = None) -> None:
    """
    Args:
        config (MagicImportsConfig): Virtual module definitions.
        target (Optional[str]): Compilation target; defaults to ``config.target``.

    Raises:
        ValueError: If no target is given either way.
    """
    self.config = config
    self.target = target or config.target
    if not self.target:
      raise ValueError("No compilation target specified (pass target or set 'target' in config).")
    self.parser = ImportParser()

  def run(self, code: str) -> RewriteResult:
    """
    Rewrites all virtual-module imports in ``code``.

    Args:
        code (str): Source buffer.

    Returns:
        RewriteResult: Rewritten code, applied replacements and diagnostics.
    """
    replacements: List[Replacement] = []
    diagnostics: List[Diagnostic] = []

    for module_specifier, module_config in self.config.modules.items():
      target_config = module_config.target_config(self.target)
      if target_config is None:
        if any(True for _ in find_import_statements(code, module_specifier)):
          log_info(f"Module [code]{module_specifier}[/code] has no mapping for target '{self.target}'.")
        continue

      found, issues = rewrite_module_imports(code, module_specifier, target_config, parser=self.parser)
      replacements.extend(found)
      diagnostics.extend(issues)

    replacements.sort(key=lambda r: r.start)
    return RewriteResult(
      code=apply_replacements(code, replacements),
      replacements=replacements,
      diagnostics=diagnostics,
    )
