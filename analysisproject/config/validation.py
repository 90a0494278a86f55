"""
analysisproject.config.validation - Project settings validation

Consistency checks run after a project file has been read. Findings are
logged as warnings and returned to the caller; they never make a read fail,
so files written by newer versions still load.
"""

import logging
from typing import List

from .model import ConfigModel, Suppression


class ProjectValidator:
    """Handles non-fatal project consistency checks"""

    # Symbolic platform names understood by the analyzer
    VALID_PLATFORMS = [
        "unspecified",
        "native",
        "win32A",
        "win32W",
        "win64",
        "unix32",
        "unix64",
    ]

    PLATFORM_FILE_EXTENSION = ".xml"

    def is_platform_file(self, platform: str) -> bool:
        """Check if platform names an external platform description file"""
        return platform.lower().endswith(self.PLATFORM_FILE_EXTENSION)

    def validate_platform(self, platform: str) -> bool:
        """Validate platform: empty, a known platform name or a platform file"""
        if not platform or self.is_platform_file(platform):
            return True

        if platform not in self.VALID_PLATFORMS:
            logging.warning('Unknown platform "%s"', platform)
            logging.warning("  Expected one of: %s", ", ".join(self.VALID_PLATFORMS))
            logging.warning("  or a platform file ending in %s", self.PLATFORM_FILE_EXTENSION)
            return False

        return True

    def validate_suppressions(self, suppressions: List[Suppression]) -> int:
        """Count suppressions without an error id, warning about each one"""
        missing = 0
        for suppression in suppressions:
            if suppression.error_id:
                continue
            missing += 1
            logging.warning(
                "Suppression without error id (file=%s, line=%s, symbol=%s)",
                suppression.file_name or "*",
                suppression.line_number if suppression.has_line() else "*",
                suppression.symbol_name or "*",
            )
        return missing

    def find_duplicates(self, name: str, values: List[str]) -> List[str]:
        """Return entries that occur more than once; duplicates are kept as is"""
        seen = set()
        duplicates = []
        for value in values:
            if value in seen and value not in duplicates:
                duplicates.append(value)
            seen.add(value)

        if duplicates:
            logging.debug("Duplicate %s entries: %s", name, ", ".join(duplicates))
        return duplicates

    def validate_model(self, model: ConfigModel) -> List[str]:
        """
        Run all checks on model

        Returns:
            list: human readable description of every finding
        """
        findings = []

        if not self.validate_platform(model.get_platform()):
            findings.append(f"unknown platform: {model.get_platform()}")

        missing = self.validate_suppressions(model.get_suppressions())
        if missing:
            findings.append(f"{missing} suppression(s) without error id")

        for name, values in (
            ("include_dirs", model.get_include_dirs()),
            ("check_paths", model.get_check_paths()),
            ("excluded_paths", model.get_excluded_paths()),
        ):
            for duplicate in self.find_duplicates(name, values):
                findings.append(f"duplicate {name} entry: {duplicate}")

        return findings
