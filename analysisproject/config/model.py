"""
analysisproject.config.model - In-memory project configuration

Holds the analysis settings of one project file: scalar settings, ordered
string lists, suppressions and the enabled external tools. The model only
stores values; reading and writing live in the reader and writer modules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Set

from ..paths import from_native_separators


NO_LINE: Optional[int] = None


@dataclass(frozen=True)
class Suppression:
    """A diagnostic marked as intentionally ignored, optionally scoped"""

    error_id: str = ""
    file_name: str = ""
    line_number: Optional[int] = NO_LINE
    symbol_name: str = ""

    def has_line(self) -> bool:
        return self.line_number is not None and self.line_number > 0


class Tool(Enum):
    """External tools that can be run alongside the analysis"""

    ANALYZER = "clang-analyzer"
    LINTER = "clang-tidy"

    @classmethod
    def from_name(cls, name: str) -> Optional["Tool"]:
        """Return the tool with the given persisted name, None if unknown"""
        for tool in cls:
            if tool.value == name:
                return tool
        return None


class ConfigModel:
    """Analysis settings of a single project file"""

    def __init__(self, normalizer: Optional[Callable[[str], str]] = None):
        self._normalize = normalizer or from_native_separators
        self._filename: str = ""
        self.clear()

    def clear(self):
        """Reset every setting to its default (the filename is kept)"""
        self._root_path: str = ""
        self._build_dir: str = ""
        self._import_project: str = ""
        self._analyze_all_vs_configs: bool = True
        self._include_dirs: List[str] = []
        self._defines: List[str] = []
        self._undefines: List[str] = []
        self._check_paths: List[str] = []
        self._excluded_paths: List[str] = []
        self._libraries: List[str] = []
        self._platform: str = ""
        self._suppressions: List[Suppression] = []
        self._addons: List[str] = []
        self._enabled_tools: Set[Tool] = set()
        self._tags: List[str] = []

    # Scalars

    def get_root_path(self) -> str:
        return self._root_path

    def set_root_path(self, root_path: str):
        self._root_path = root_path

    def get_build_dir(self) -> str:
        return self._build_dir

    def set_build_dir(self, build_dir: str):
        self._build_dir = build_dir

    def get_import_project(self) -> str:
        """Path to a Visual Studio project/solution or compile database"""
        return self._import_project

    def set_import_project(self, import_project: str):
        self._import_project = import_project

    def get_analyze_all_vs_configs(self) -> bool:
        """Whether all Visual Studio configurations are analyzed, not only Debug"""
        return self._analyze_all_vs_configs

    def set_analyze_all_vs_configs(self, analyze_all: bool):
        self._analyze_all_vs_configs = analyze_all

    def get_platform(self) -> str:
        """
        Platform name ("win32A", "unix64", ...) or the path of a platform
        description file ending in .xml
        """
        return self._platform

    def set_platform(self, platform: str):
        self._platform = platform

    def get_filename(self) -> str:
        return self._filename

    def set_filename(self, filename: str):
        self._filename = filename

    # Path lists, normalized on the way out

    def get_include_dirs(self, raw: bool = False) -> List[str]:
        if raw:
            return list(self._include_dirs)
        return [self._normalize(path) for path in self._include_dirs]

    def set_include_dirs(self, include_dirs: List[str]):
        self._include_dirs = list(include_dirs)

    def get_check_paths(self, raw: bool = False) -> List[str]:
        if raw:
            return list(self._check_paths)
        return [self._normalize(path) for path in self._check_paths]

    def set_check_paths(self, paths: List[str]):
        self._check_paths = list(paths)

    def get_excluded_paths(self, raw: bool = False) -> List[str]:
        if raw:
            return list(self._excluded_paths)
        return [self._normalize(path) for path in self._excluded_paths]

    def set_excluded_paths(self, paths: List[str]):
        self._excluded_paths = list(paths)

    # Plain lists

    def get_defines(self) -> List[str]:
        return list(self._defines)

    def set_defines(self, defines: List[str]):
        self._defines = list(defines)

    def get_undefines(self) -> List[str]:
        return list(self._undefines)

    def set_undefines(self, undefines: List[str]):
        self._undefines = list(undefines)

    def get_libraries(self) -> List[str]:
        return list(self._libraries)

    def set_libraries(self, libraries: List[str]):
        self._libraries = list(libraries)

    def get_suppressions(self) -> List[Suppression]:
        return list(self._suppressions)

    def set_suppressions(self, suppressions: List[Suppression]):
        self._suppressions = list(suppressions)

    def get_addons(self) -> List[str]:
        return list(self._addons)

    def set_addons(self, addons: List[str]):
        self._addons = list(addons)

    def get_tags(self) -> List[str]:
        return list(self._tags)

    def set_tags(self, tags: List[str]):
        self._tags = list(tags)

    # Tools

    def is_tool_enabled(self, tool: Tool) -> bool:
        return tool in self._enabled_tools

    def set_tool_enabled(self, tool: Tool, enabled: bool):
        if enabled:
            self._enabled_tools.add(tool)
        else:
            self._enabled_tools.discard(tool)

    def get_enabled_tools(self) -> Set[Tool]:
        return set(self._enabled_tools)

    def set_enabled_tools(self, tools: Set[Tool]):
        self._enabled_tools = set(tools)

    def get_clang_analyzer(self) -> bool:
        return self.is_tool_enabled(Tool.ANALYZER)

    def set_clang_analyzer(self, enabled: bool):
        self.set_tool_enabled(Tool.ANALYZER, enabled)

    def get_clang_tidy(self) -> bool:
        return self.is_tool_enabled(Tool.LINTER)

    def set_clang_tidy(self, enabled: bool):
        self.set_tool_enabled(Tool.LINTER, enabled)

    def get_tool_names(self) -> List[str]:
        """Persisted names of the enabled tools, analyzer first"""
        return [tool.value for tool in Tool if tool in self._enabled_tools]

    def get_addons_and_tools(self) -> List[str]:
        """Addons followed by the names of the enabled tools"""
        return self.get_addons() + self.get_tool_names()

    def _stored_values(self) -> tuple:
        return (
            self._root_path,
            self._build_dir,
            self._import_project,
            self._analyze_all_vs_configs,
            self._include_dirs,
            self._defines,
            self._undefines,
            self._check_paths,
            self._excluded_paths,
            self._libraries,
            self._platform,
            self._suppressions,
            self._addons,
            self._enabled_tools,
            self._tags,
        )

    def __eq__(self, other):
        if not isinstance(other, ConfigModel):
            return NotImplemented
        return self._stored_values() == other._stored_values()

    def __repr__(self):
        return (
            f"ConfigModel(filename={self._filename!r}, root_path={self._root_path!r}, "
            f"platform={self._platform!r}, include_dirs={self._include_dirs!r}, "
            f"check_paths={self._check_paths!r}, suppressions={len(self._suppressions)})"
        )
