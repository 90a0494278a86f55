"""
analysisproject.config.errors - Project file failure taxonomy

Exceptions raised by the reader and writer. The ProjectFile facade turns
them into a plain success flag for callers that only need a yes/no answer.
"""

from typing import Optional


class ProjectFileError(Exception):
    """Base class for all project file failures"""

    def __init__(self, path: Optional[str], reason: str):
        self.path = str(path) if path is not None else None
        self.reason = reason
        super().__init__(f"{self.path}: {reason}" if self.path else reason)


class ParseFailure(ProjectFileError):
    """Project file could not be read into a model"""


class IOFailure(ParseFailure):
    """File not found or unreadable"""


class SyntaxFailure(ParseFailure):
    """File is not well-formed XML"""


class NotAProjectFile(ParseFailure):
    """Well-formed XML without the project root element"""


class WriteFailure(ProjectFileError):
    """Project file could not be written"""
