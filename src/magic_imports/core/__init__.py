"""
Core Package.

Contains the import rewriting pipeline:
- Statement Locator (``locator``)
- Clause Lexer and Import Parser (``tokens``, ``parser``)
- Symbol Resolution and Transformer (``resolution``, ``transformer``)
- Statement Code Generation (``codegen``)
- Rewrite Engine and Shim Generator (``engine``, ``shim``)
"""
