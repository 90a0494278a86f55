"""
analysisproject.config.schema - Project file schema table

Element and attribute names for every field of the project file, shared by
the reader and the writer so the two cannot drift apart.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple


PROJECT_ELEMENT = "project"
VERSION_ATTRIBUTE = "version"
PROJECT_FILE_VERSION = "1"

# Value kinds
ATTRIBUTE = "attribute"  # scalar stored in an attribute of the element
TEXT = "text"  # scalar stored as element text
BOOLEAN = "boolean"  # "true"/"false" element text
ATTRIBUTE_LIST = "attribute_list"  # repeated children, value in an attribute
TEXT_LIST = "text_list"  # repeated children, value as text
SUPPRESSION_LIST = "suppression_list"
TOOL_LIST = "tool_list"

# Suppression attributes
SUPPRESSION_FILE_ATTRIBUTE = "fileName"
SUPPRESSION_LINE_ATTRIBUTE = "lineNumber"
SUPPRESSION_SYMBOL_ATTRIBUTE = "symbolName"


class ElementSchema(NamedTuple):
    """How one model field is stored in the document"""

    field: str
    element: str
    kind: str
    child: Optional[str] = None
    attribute: Optional[str] = None
    aliases: Tuple["ElementSchema", ...] = ()


FIELDS: Dict[str, ElementSchema] = {
    "root_path": ElementSchema("root_path", "root", ATTRIBUTE, attribute="name"),
    "build_dir": ElementSchema("build_dir", "builddir", TEXT),
    "platform": ElementSchema("platform", "platform", TEXT),
    "import_project": ElementSchema("import_project", "importproject", TEXT),
    "analyze_all_vs_configs": ElementSchema(
        "analyze_all_vs_configs", "analyze-all-vs-configs", BOOLEAN
    ),
    "include_dirs": ElementSchema(
        "include_dirs", "includedir", ATTRIBUTE_LIST, child="dir", attribute="name"
    ),
    "defines": ElementSchema(
        "defines", "defines", ATTRIBUTE_LIST, child="define", attribute="name"
    ),
    "undefines": ElementSchema("undefines", "undefines", TEXT_LIST, child="undefine"),
    "check_paths": ElementSchema(
        "check_paths", "paths", ATTRIBUTE_LIST, child="dir", attribute="name"
    ),
    "excluded_paths": ElementSchema(
        "excluded_paths",
        "exclude",
        ATTRIBUTE_LIST,
        child="path",
        attribute="name",
        # "ignore" was renamed to "exclude"; still accepted on read
        aliases=(
            ElementSchema(
                "excluded_paths", "ignore", ATTRIBUTE_LIST, child="path", attribute="name"
            ),
        ),
    ),
    "libraries": ElementSchema("libraries", "libraries", TEXT_LIST, child="library"),
    "suppressions": ElementSchema(
        "suppressions", "suppressions", SUPPRESSION_LIST, child="suppression"
    ),
    "addons": ElementSchema("addons", "addons", TEXT_LIST, child="addon"),
    "tools": ElementSchema("tools", "tools", TOOL_LIST, child="tool"),
    "tags": ElementSchema("tags", "tags", TEXT_LIST, child="tag"),
}

# Canonical order of the children of the project element on write
WRITE_ORDER: List[str] = [
    "root_path",
    "build_dir",
    "platform",
    "import_project",
    "analyze_all_vs_configs",
    "include_dirs",
    "defines",
    "undefines",
    "check_paths",
    "excluded_paths",
    "libraries",
    "suppressions",
    "addons",
    "tools",
    "tags",
]


def element_table() -> Dict[str, ElementSchema]:
    """Map every accepted element name, legacy aliases included, to its schema"""
    table: Dict[str, ElementSchema] = {}
    for schema in FIELDS.values():
        table[schema.element] = schema
        for alias in schema.aliases:
            table[alias.element] = alias
    return table


def legacy_elements() -> List[str]:
    """Names of deprecated elements that are still accepted on read"""
    return [alias.element for schema in FIELDS.values() for alias in schema.aliases]
