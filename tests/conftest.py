"""Pytest configuration and shared fixtures for analysisproject tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from analysisproject.config import ConfigModel, Suppression, Tool
from tests.fixtures import FULL_PROJECT, write_project


# ============================================================================
# Project Fixtures
# ============================================================================


@pytest.fixture
def full_project_path(tmp_path) -> Path:
    """Project file using every element of the format."""
    return write_project(tmp_path, FULL_PROJECT)


@pytest.fixture
def populated_model() -> ConfigModel:
    """Model with every setting populated and no empty optional values."""
    model = ConfigModel()
    model.set_root_path("/work/project")
    model.set_build_dir("build")
    model.set_import_project("compile_commands.json")
    model.set_analyze_all_vs_configs(False)
    model.set_include_dirs(["b/include", "a/include"])
    model.set_defines(["DEBUG=1", "WIN32"])
    model.set_undefines(["NDEBUG"])
    model.set_check_paths(["src", "lib"])
    model.set_excluded_paths(["src/generated", "lib/vendor"])
    model.set_libraries(["posix", "gtk"])
    model.set_platform("win64")
    model.set_suppressions(
        [
            Suppression("nullPointer", "a.c", 10, "ptr"),
            Suppression("unusedFunction"),
        ]
    )
    model.set_addons(["misra", "y2038"])
    model.set_enabled_tools({Tool.LINTER})
    model.set_tags(["review", "later"])
    return model
