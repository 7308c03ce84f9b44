"""
magic-imports Package.

Rewrites ECMAScript imports of *virtual modules* (``virtual:flow``) into the
framework-specific modules configured for each compilation target, and
generates the type-declaration shim for those virtual modules.

Usage
-----

Single Module
^^^^^^^^^^^^^

.. code-block:: python

    import magic_imports as mi

    code = "import { Flow, Background as Bg } from 'virtual:flow';"
    config = {"Flow": {"from": "@xyflow/react", "symbol": "ReactFlow"}, "*": "@xyflow/core"}
    print(mi.rewrite(code, "virtual:flow", config))
    # import { ReactFlow as Flow } from '@xyflow/react';
    # import { Background as Bg } from '@xyflow/core';

Project Configuration
^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from magic_imports import MagicImportsConfig, RewriteEngine

    config = MagicImportsConfig.load()  # [tool.magic_imports] in pyproject.toml
    result = RewriteEngine(config, target="react").run(source)
    for diagnostic in result.diagnostics:
        print(diagnostic.format())
"""

from magic_imports.config import MagicImportsConfig
from magic_imports.core.codegen import generate_import_statement, generate_import_statements
from magic_imports.core.engine import RewriteEngine, apply_replacements, rewrite_module_imports
from magic_imports.core.errors import ImportSyntaxError, MagicImportsError
from magic_imports.core.locator import find_import_statements
from magic_imports.core.nodes import ParsedImport, TransformedImport, TransformedImportData
from magic_imports.core.parser import parse_import_statement
from magic_imports.core.rewrite_result import Diagnostic, RewriteResult
from magic_imports.core.shim import generate_shim
from magic_imports.core.transformer import transform_import
from magic_imports.schema import ModuleConfig, SymbolSource, TargetConfig

__version__ = "0.1.0"


def rewrite(code: str, module_specifier: str, target_config: TargetConfig) -> str:
  """
  Rewrites the imports of one virtual module in a string of source code.

  This is a convenience wrapper around `rewrite_module_imports` and
  `apply_replacements`. Unparseable statements are left untouched; unresolved
  symbols are dropped and logged.

  Args:
      code (str): The source code.
      module_specifier (str): The module to rewrite (e.g. ``virtual:flow``).
      target_config (TargetConfig): Module string or per-symbol routing map.

  Returns:
      str: The rewritten source code.
  """
  replacements, _ = rewrite_module_imports(code, module_specifier, target_config)
  return apply_replacements(code, replacements)


__all__ = [
  "Diagnostic",
  "ImportSyntaxError",
  "MagicImportsConfig",
  "MagicImportsError",
  "ModuleConfig",
  "ParsedImport",
  "RewriteEngine",
  "RewriteResult",
  "SymbolSource",
  "TargetConfig",
  "TransformedImport",
  "TransformedImportData",
  "__version__",
  "apply_replacements",
  "find_import_statements",
  "generate_import_statement",
  "generate_import_statements",
  "generate_shim",
  "parse_import_statement",
  "rewrite",
  "rewrite_module_imports",
  "transform_import",
]
