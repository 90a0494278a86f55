"""
analysisproject.config.base - Main project file manager

Orchestrates reading, validating and writing a project file around a single
ConfigModel instance.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from .errors import IOFailure, ParseFailure, WriteFailure
from .model import ConfigModel
from .reader import ProjectReader
from .validation import ProjectValidator
from .writer import ProjectWriter


class ProjectFile:
    """Main project file manager that orchestrates all project file operations"""

    def __init__(
        self,
        filename: Optional[Union[str, Path]] = None,
        normalizer: Optional[Callable[[str], str]] = None,
    ):
        self.model = ConfigModel(normalizer)
        if filename:
            self.model.set_filename(str(filename))

        self.findings: List[str] = []
        self.last_error: Optional[Exception] = None

        # Initialize component managers
        self.reader = ProjectReader()
        self.writer = ProjectWriter()
        self.validator = ProjectValidator()

    def get_filename(self) -> str:
        return self.model.get_filename()

    def set_filename(self, filename: Union[str, Path]):
        self.model.set_filename(str(filename))

    def read(self, filename: Optional[Union[str, Path]] = None) -> bool:
        """
        Read the project file

        Args:
            filename: File to read; remembered for later calls. Defaults to
                the current filename.

        Returns:
            bool: True if the file was read; on failure the model is left with
            default settings
        """
        if filename:
            self.set_filename(filename)

        self.last_error = None
        self.findings = []

        try:
            if not self.get_filename():
                raise IOFailure(None, "no project file name given")
            self.reader.read(self.get_filename(), self.model)
        except ParseFailure as e:
            logging.error("Cannot read project file: %s", e)
            self.last_error = e
            return False

        self.findings = self.validator.validate_model(self.model)
        if self.findings:
            logging.info("Project file read with %d warning(s)", len(self.findings))
        return True

    def write(self, filename: Optional[Union[str, Path]] = None) -> bool:
        """
        Write the project file

        Args:
            filename: File to write; remembered for later calls. Defaults to
                the current filename.

        Returns:
            bool: True if the whole document was written
        """
        if filename:
            self.set_filename(filename)

        self.last_error = None

        try:
            if not self.get_filename():
                raise WriteFailure(None, "no project file name given")
            self.writer.write(self.model, self.get_filename())
        except WriteFailure as e:
            logging.error("Cannot write project file: %s", e)
            self.last_error = e
            return False

        return True

    def log_project_summary(self):
        """Log project settings summary"""
        model = self.model
        logging.info("Project file: %s", model.get_filename() or "(unsaved)")

        if model.get_root_path():
            logging.info("  root path: %s", model.get_root_path())
        if model.get_build_dir():
            logging.info("  build dir: %s", model.get_build_dir())
        if model.get_import_project():
            logging.info("  import project: %s", model.get_import_project())

        platform = model.get_platform()
        if platform:
            kind = "file" if self.validator.is_platform_file(platform) else "builtin"
            logging.info("  platform: %s (%s)", platform, kind)

        logging.info("  analyze all VS configurations: %s", model.get_analyze_all_vs_configs())
        logging.info("  include dirs: %d", len(model.get_include_dirs()))
        logging.info("  defines: %s", ", ".join(model.get_defines()) or "(none)")
        logging.info("  undefines: %s", ", ".join(model.get_undefines()) or "(none)")
        logging.info("  paths to check: %d", len(model.get_check_paths()))
        logging.info("  excluded paths: %d", len(model.get_excluded_paths()))
        logging.info("  libraries: %s", ", ".join(model.get_libraries()) or "(none)")
        logging.info("  suppressions: %d", len(model.get_suppressions()))
        logging.info("  addons and tools: %s", ", ".join(model.get_addons_and_tools()) or "(none)")

        if model.get_tags():
            logging.info("  tags: %s", ", ".join(model.get_tags()))
