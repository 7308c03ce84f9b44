"""
Tests for the CLI 'rewrite' command.

Verifies single-file and directory modes against a project configured through
pyproject.toml, and the failure exits for bad input.
"""

from pathlib import Path

import pytest

from magic_imports.cli.handlers.rewrite import _print_batch_summary, handle_rewrite
from magic_imports.core.rewrite_result import RewriteResult
from magic_imports.utils.console import get_console

PYPROJECT = """
[tool.magic_imports]
target = "react"

[tool.magic_imports.modules.lucide.targets]
react = "lucide-react"
vue = "lucide-vue-next"
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
  (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
  src = tmp_path / "src"
  (src / "components").mkdir(parents=True)
  (src / "App.tsx").write_text("import { Camera } from 'virtual:lucide';\n", encoding="utf-8")
  (src / "components" / "Icon.vue").write_text(
    "<script setup>\n  import { Star } from 'virtual:lucide';\n</script>\n", encoding="utf-8"
  )
  (src / "notes.md").write_text("import { X } from 'virtual:lucide';\n", encoding="utf-8")
  return tmp_path


def test_single_file_to_stdout(project: Path, capsys) -> None:
  assert handle_rewrite(project / "src" / "App.tsx", None, None) == 0

  captured = capsys.readouterr()
  assert captured.out == "import { Camera } from 'lucide-react';\n"
  assert "Batch Complete" in captured.err


def test_stdout_mode_sends_diagnostics_to_stderr(tmp_path: Path, capsys) -> None:
  (tmp_path / "pyproject.toml").write_text(
    '[tool.magic_imports]\ntarget = "react"\n\n[tool.magic_imports.modules.x.targets.react]\nY = "lib-y"\n',
    encoding="utf-8",
  )
  source = tmp_path / "App.ts"
  source.write_text("import X, { Y } from 'virtual:x';\n", encoding="utf-8")

  assert handle_rewrite(source, None, None) == 0

  captured = capsys.readouterr()
  assert captured.out == "import { Y } from 'lib-y';\n"
  assert "Default import" in captured.err
  assert "Rewrite Report" in captured.err


def test_stdout_mode_restores_console(project: Path, captured_console) -> None:
  handle_rewrite(project / "src" / "App.tsx", None, None)
  assert get_console() is captured_console


def test_single_file_with_target_override(project: Path) -> None:
  dest = project / "out" / "App.tsx"
  assert handle_rewrite(project / "src" / "App.tsx", dest, "vue") == 0
  assert dest.read_text(encoding="utf-8") == "import { Camera } from 'lucide-vue-next';\n"


def test_directory_mode_mirrors_tree(project: Path) -> None:
  out_dir = project / "build"
  assert handle_rewrite(project / "src", out_dir, None) == 0

  assert (out_dir / "App.tsx").read_text(encoding="utf-8") == "import { Camera } from 'lucide-react';\n"
  assert (out_dir / "components" / "Icon.vue").read_text(encoding="utf-8") == (
    "<script setup>\n  import { Star } from 'lucide-react';\n</script>\n"
  )
  assert not (out_dir / "notes.md").exists()


def test_directory_mode_custom_extensions(project: Path) -> None:
  out_dir = project / "build"
  assert handle_rewrite(project / "src", out_dir, None, extensions=[".md"]) == 0

  assert (out_dir / "notes.md").exists()
  assert not (out_dir / "App.tsx").exists()


def test_directory_requires_out(project: Path) -> None:
  assert handle_rewrite(project / "src", None, None) == 1


def test_missing_input(tmp_path: Path) -> None:
  assert handle_rewrite(tmp_path / "missing.ts", None, "react") == 1


def test_missing_target(tmp_path: Path) -> None:
  (tmp_path / "pyproject.toml").write_text("[tool.magic_imports.modules.x.targets]\nreact = 'lib'\n")
  source = tmp_path / "a.ts"
  source.write_text("import { A } from 'virtual:x';\n")

  assert handle_rewrite(source, None, None) == 1


def test_invalid_config_file(project: Path) -> None:
  bad = project / "bad.toml"
  bad.write_text("modules = [", encoding="utf-8")

  assert handle_rewrite(project / "src" / "App.tsx", None, None, config_file=bad) == 1


def test_summary_table_lists_problem_files(captured_console) -> None:
  _print_batch_summary(
    {
      "ok.ts": RewriteResult(code=""),
      "broken.ts": RewriteResult(success=False, errors=["Permission denied"]),
    }
  )

  text = captured_console.export_text()
  assert "Rewrite Report" in text
  assert "broken.ts" in text
  assert "Permission denied" in text
  assert "1 Clean, 1 with Issues" in text


def test_summary_all_clean(captured_console) -> None:
  _print_batch_summary({"ok.ts": RewriteResult(code="")})
  assert "Batch Complete: 1/1" in captured_console.export_text()


def test_crlf_file_round_trips(project: Path) -> None:
  source = project / "src" / "Windows.ts"
  source.write_bytes(b"import { Camera } from 'virtual:lucide';\r\nrender(Camera);\r\n")
  dest = project / "out" / "Windows.ts"

  assert handle_rewrite(source, dest, None) == 0
  assert dest.read_bytes() == b"import { Camera } from 'lucide-react';\r\nrender(Camera);\r\n"
