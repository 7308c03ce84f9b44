"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console capture so log output can be asserted on.
- A shared routing configuration mirroring the documented examples.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'magic_imports' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from magic_imports.config import MagicImportsConfig
from magic_imports.utils.console import reset_console, set_console


@pytest.fixture
def captured_console():
  """Routes console and log output into a recording Console for the test."""
  recorder = Console(record=True, width=200, force_terminal=False)
  set_console(recorder)
  yield recorder
  reset_console()


@pytest.fixture
def flow_config() -> MagicImportsConfig:
  """Two virtual modules with string and per-symbol targets."""
  return MagicImportsConfig.model_validate(
    {
      "modules": {
        "flow": {
          "shim": {"@xyflow/react": {"reexportAll": True, "aliases": {"Flow": "ReactFlow"}}},
          "targets": {
            "react": {
              "Flow": {"from": "@xyflow/react", "symbol": "ReactFlow"},
              "*": "@xyflow/react",
            },
            "vue": {
              "Flow": {"from": "@vue-flow/core", "symbol": "VueFlow"},
              "Background": "@vue-flow/background",
              "*": "@vue-flow/core",
            },
          },
        },
        "virtual:lucide": {
          "shim": "lucide-react",
          "targets": {"react": "lucide-react", "vue": "lucide-vue-next"},
        },
      }
    }
  )
