"""
analysisproject.config - Project file management module

Reads and writes the XML project file that stores the analysis settings of a
code base: include paths, defines, paths to check and exclude, libraries,
platform, suppressions, addons, tools and tags.

Main interface:
    ProjectFile: Project file manager that orchestrates all operations

The module is organized into specialized components:
    - model: In-memory settings (ConfigModel, Suppression, Tool)
    - schema: Element and attribute names shared by reader and writer
    - reader: XML parsing into a ConfigModel
    - writer: XML generation from a ConfigModel
    - validation: Non-fatal consistency checks
    - errors: Failure taxonomy
    - base: Main ProjectFile orchestration

Usage:
    from analysisproject.config import ProjectFile

    project = ProjectFile("/path/to/project.cppcheck")
    if project.read():
        print(project.model.get_include_dirs())
"""

from .base import ProjectFile
from .errors import (
    IOFailure,
    NotAProjectFile,
    ParseFailure,
    ProjectFileError,
    SyntaxFailure,
    WriteFailure,
)
from .model import NO_LINE, ConfigModel, Suppression, Tool
from .reader import ProjectReader
from .writer import ProjectWriter

__all__ = [
    "ProjectFile",
    "ConfigModel",
    "Suppression",
    "Tool",
    "NO_LINE",
    "ProjectReader",
    "ProjectWriter",
    "ProjectFileError",
    "ParseFailure",
    "IOFailure",
    "SyntaxFailure",
    "NotAProjectFile",
    "WriteFailure",
]
