"""
Tests for Symbol Resolution, Import Transformation and Code Generation.

Covers the documented routing scenarios, the string/object configuration
paths, destination grouping, and the pipeline properties (round-trip,
idempotence, catch-all completeness, no empty statements).
"""

import pytest

from magic_imports.core.codegen import generate_import_statement, generate_import_statements
from magic_imports.core.nodes import NamedImport, TransformedImportData
from magic_imports.core.parser import parse_import_statement
from magic_imports.core.resolution import Resolved, SymbolResolver, Unresolved
from magic_imports.core.transformer import transform_import
from magic_imports.enums import SymbolKind
from magic_imports.schema import SymbolSource


def _render(statement, config):
  transformed = transform_import(parse_import_statement(statement), config)
  return generate_import_statements(transformed), transformed


# --- Scenarios ---


def test_scenario_symbol_rename_and_catch_all() -> None:
  out, transformed = _render(
    "import { Flow, Background as Bg } from 'virtual:flow';",
    {"Flow": {"from": "@xyflow/react", "symbol": "ReactFlow"}, "*": "@xyflow/core"},
  )
  assert out == [
    "import { ReactFlow as Flow } from '@xyflow/react';",
    "import { Background as Bg } from '@xyflow/core';",
  ]
  assert transformed.unresolved == []


def test_scenario_type_only_string_config() -> None:
  out, _ = _render("import type { A } from 'virtual:x';", "my-lib")
  assert out == ["import type { A } from 'my-lib';"]


def test_scenario_default_without_catch_all(caplog) -> None:
  out, transformed = _render("import X, { Y } from 'virtual:x';", {"Y": "lib-y"})

  assert out == ["import { Y } from 'lib-y';"]
  assert len(transformed.unresolved) == 1
  unresolved = transformed.unresolved[0]
  assert unresolved.name == "X"
  assert unresolved.kind == SymbolKind.DEFAULT
  assert "catch-all" in caplog.text


def test_scenario_namespace_via_catch_all_source() -> None:
  out, _ = _render("import * as NS from 'virtual:x';", {"*": {"from": "lib-ns"}})
  assert out == ["import * as NS from 'lib-ns';"]


# --- String Config ---


def test_string_config_keeps_all_bindings() -> None:
  out, _ = _render("import D, { A as B, type T } from 'virtual:x';", "lib")
  assert out == ["import D, { A as B, type T } from 'lib';"]


def test_string_config_namespace() -> None:
  out, _ = _render("import * as NS from 'virtual:x';", "lib")
  assert out == ["import * as NS from 'lib';"]


# --- Object Config ---


def test_plain_string_entry_keeps_alias() -> None:
  out, _ = _render("import { Background as Bg } from 'virtual:flow';", {"Background": "@vue-flow/background"})
  assert out == ["import { Background as Bg } from '@vue-flow/background';"]


def test_lookup_uses_imported_name_not_alias() -> None:
  out, transformed = _render("import { Background as Flow } from 'virtual:flow';", {"Flow": "wrong-lib"})
  assert out == []
  assert transformed.unresolved[0].name == "Background"


def test_symbol_override_binds_original_imported_name() -> None:
  out, _ = _render(
    "import { Flow as F } from 'virtual:flow';",
    {"Flow": SymbolSource(from_="@vue-flow/core", symbol="VueFlow")},
  )
  assert out == ["import { VueFlow as Flow } from '@vue-flow/core';"]


def test_source_without_symbol_keeps_local_name() -> None:
  out, _ = _render("import { Flow as F } from 'virtual:flow';", {"Flow": {"from": "@vue-flow/core"}})
  assert out == ["import { Flow as F } from '@vue-flow/core';"]


def test_catch_all_symbol_override_is_not_applied() -> None:
  out, _ = _render("import { A } from 'virtual:x';", {"*": {"from": "lib", "symbol": "Other"}})
  assert out == ["import { A } from 'lib';"]


def test_grouping_preserves_first_seen_order() -> None:
  out, transformed = _render(
    "import { A, B, C, D } from 'virtual:x';",
    {"A": "one", "B": "two", "C": "one", "*": "two"},
  )
  assert list(transformed.imports) == ["one", "two"]
  assert out == [
    "import { A, C } from 'one';",
    "import { B, D } from 'two';",
  ]


def test_default_and_named_share_catch_all_destination() -> None:
  out, _ = _render("import X, { Y } from 'virtual:x';", {"*": "lib"})
  assert out == ["import X, { Y } from 'lib';"]


def test_inline_type_routed_separately() -> None:
  out, _ = _render("import { type Props, Flow } from 'virtual:flow';", {"Props": "types-lib", "*": "lib"})
  assert out == [
    "import { Flow } from 'lib';",
    "import { type Props } from 'types-lib';",
  ]


def test_type_only_statement_marks_every_record() -> None:
  out, _ = _render("import type { A, B } from 'virtual:x';", {"A": "one", "*": "two"})
  assert out == ["import type { A } from 'one';", "import type { B } from 'two';"]


def test_unresolved_symbols_do_not_abort_statement() -> None:
  out, transformed = _render("import * as NS, { A, B } from 'virtual:x';", {"B": "lib"})

  assert out == ["import { B } from 'lib';"]
  assert [(u.name, u.kind) for u in transformed.unresolved] == [
    ("A", SymbolKind.NAMED),
    ("NS", SymbolKind.NAMESPACE),
  ]


def test_everything_unresolved_renders_nothing() -> None:
  out, transformed = _render("import X, { A } from 'virtual:x';", {})
  assert out == []
  assert len(transformed.unresolved) == 2


# --- Resolver ---


def test_resolver_returns_tagged_results() -> None:
  resolver = SymbolResolver({"A": "lib-a"})

  assert resolver.resolve_named("A", "A") == Resolved(destination="lib-a", imported="A", local="A")
  missing = resolver.resolve_named("B", "B", SymbolKind.TYPE)
  assert isinstance(missing, Unresolved)
  assert missing.kind == SymbolKind.TYPE
  assert isinstance(resolver.resolve_binding("X", SymbolKind.DEFAULT), Unresolved)


# --- Codegen ---


def test_codegen_part_order() -> None:
  data = TransformedImportData(
    named_imports=[NamedImport("A", "A"), NamedImport("B", "C")],
    default_import="D",
    namespace_import="NS",
  )
  assert generate_import_statement("m", data) == "import D, * as NS, { A, B as C } from 'm';"


def test_codegen_type_only_drops_inline_markers() -> None:
  data = TransformedImportData(named_imports=[NamedImport("A", "A", is_type=True)], is_type_only=True)
  assert generate_import_statement("m", data) == "import type { A } from 'm';"


def test_codegen_empty_record() -> None:
  assert generate_import_statement("m", TransformedImportData()) == ""


# --- Properties ---

ROUND_TRIP_STATEMENTS = [
  "import { A } from 'x';",
  "import { A as B, C } from 'x';",
  "import D from 'x';",
  "import * as NS from 'x';",
  "import D, { A } from 'x';",
  "import D, * as NS from 'x';",
  "import type { A, B as C } from 'x';",
  "import type D from 'x';",
  "import { type A, B } from 'x';",
  "import { type A as T } from 'x';",
]


@pytest.mark.parametrize("statement", ROUND_TRIP_STATEMENTS)
def test_round_trip_identity(statement) -> None:
  parsed = parse_import_statement(statement)
  out = generate_import_statements(transform_import(parsed, {"*": "x"}))

  assert len(out) == 1
  reparsed = parse_import_statement(out[0])
  assert reparsed.symbols_equal(parsed)
  assert reparsed.module_specifier == "x"


@pytest.mark.parametrize("statement", ROUND_TRIP_STATEMENTS)
def test_transform_is_idempotent(statement) -> None:
  parsed = parse_import_statement(statement)
  config = {"A": {"from": "lib-a", "symbol": "Alpha"}, "*": "lib"}

  first = transform_import(parsed, config)
  second = transform_import(parsed, config)
  assert first == second


def test_catch_all_completeness() -> None:
  names = ["Alpha", "Beta", "Gamma", "Delta"]
  parsed = parse_import_statement(f"import {{ {', '.join(names)} }} from 'virtual:x';")
  transformed = transform_import(parsed, {"Alpha": "explicit", "*": "fallback"})

  fallback = transformed.imports["fallback"].named_imports
  assert [(e.imported, e.local) for e in fallback] == [(n, n) for n in names[1:]]


@pytest.mark.parametrize(
  "config",
  [{}, {"A": "one"}, {"Z": "one"}, "lib", {"*": "lib"}],
)
@pytest.mark.parametrize("statement", ROUND_TRIP_STATEMENTS)
def test_no_empty_statements(statement, config) -> None:
  out = generate_import_statements(transform_import(parse_import_statement(statement), config))
  for rendered in out:
    assert "{ }" not in rendered
    assert "{}" not in rendered
    assert not rendered.startswith("import  ")
    assert not rendered.startswith("import from")
    assert not rendered.startswith("import type from")


def test_codegen_type_only_empty_record() -> None:
  data = TransformedImportData(is_type_only=True)

  assert data.is_empty
  assert generate_import_statement("m", data) == ""
