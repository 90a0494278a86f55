"""
analysisproject - Project file support for the static analysis front-ends

Usage:
    from analysisproject import ProjectFile
"""

from .config import ConfigModel, ProjectFile, Suppression, Tool

__version__ = "1.0.0"

__all__ = ["ProjectFile", "ConfigModel", "Suppression", "Tool"]
