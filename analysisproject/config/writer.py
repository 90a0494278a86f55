"""
analysisproject.config.writer - Project file generation

Serializes a ConfigModel into a project XML document with a fixed element
order. Empty lists and unset optional values are left out; the
analyze-all-vs-configs flag is always written.
"""

import codecs
import logging
import os
import re
import stat
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Union

from . import schema
from .errors import WriteFailure
from .model import ConfigModel, Suppression
from .schema import ElementSchema

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "    "

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(
    r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)


class ProjectWriter:
    """Writes a ConfigModel to a project file"""

    def build(self, model: ConfigModel) -> ET.Element:
        """Build the project element for model"""
        project = ET.Element(schema.PROJECT_ELEMENT)
        project.set(schema.VERSION_ATTRIBUTE, schema.PROJECT_FILE_VERSION)

        for field in schema.WRITE_ORDER:
            element_schema = schema.FIELDS[field]
            self._write_field(project, element_schema, self._stored_value(model, field))

        return project

    def to_string(self, model: ConfigModel) -> str:
        """Serialized document, declaration included, without byte order mark"""
        project = self.build(model)
        self._check_characters(project)
        ET.indent(project, space=INDENT)
        # Raw carriage returns would read back as newlines
        body = ET.tostring(project, encoding="unicode").replace("\r", "&#13;")
        return XML_DECLARATION + body + "\n"

    def write(self, model: ConfigModel, path: Union[str, Path]):
        """
        Write model to path

        The document goes to a temporary file next to path first and replaces
        path only once it is complete.

        Raises:
            WriteFailure: the document cannot be serialized or stored
        """
        path = Path(path)
        logging.info("Writing project file: %s", path)

        try:
            document = self.to_string(model)
        except (TypeError, ValueError) as e:
            raise WriteFailure(path, f"cannot serialize project: {e}") from e

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
            )
            with os.fdopen(fd, "wb") as f:
                f.write(codecs.BOM_UTF8)
                f.write(document.encode("utf-8"))
            os.chmod(tmp_name, self._file_mode(path))
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise WriteFailure(path, f"cannot write project file: {e.strerror or e}") from e

        logging.debug("Project file written: %s (%d bytes)", path, len(document))

    def _stored_value(self, model: ConfigModel, field: str):
        """Value to persist for field; path lists keep their stored separators"""
        if field == "tools":
            return model.get_tool_names()
        if field in ("include_dirs", "check_paths", "excluded_paths"):
            return getattr(model, f"get_{field}")(raw=True)
        return getattr(model, f"get_{field}")()

    def _write_field(self, project: ET.Element, element_schema: ElementSchema, value):
        kind = element_schema.kind

        if kind == schema.BOOLEAN:
            element = ET.SubElement(project, element_schema.element)
            element.text = "true" if value else "false"
            return

        # Optional scalars and empty lists are omitted
        if not value:
            return

        if kind == schema.ATTRIBUTE:
            element = ET.SubElement(project, element_schema.element)
            element.set(element_schema.attribute, value)
        elif kind == schema.TEXT:
            element = ET.SubElement(project, element_schema.element)
            element.text = value
        elif kind == schema.ATTRIBUTE_LIST:
            self._write_attribute_list(project, element_schema, value)
        elif kind in (schema.TEXT_LIST, schema.TOOL_LIST):
            self._write_string_list(project, element_schema, value)
        elif kind == schema.SUPPRESSION_LIST:
            self._write_suppressions(project, element_schema, value)

    def _write_attribute_list(
        self, project: ET.Element, element_schema: ElementSchema, values: List[str]
    ):
        parent = ET.SubElement(project, element_schema.element)
        for value in values:
            child = ET.SubElement(parent, element_schema.child)
            child.set(element_schema.attribute, value)

    def _write_string_list(
        self, project: ET.Element, element_schema: ElementSchema, values: List[str]
    ):
        parent = ET.SubElement(project, element_schema.element)
        for value in values:
            child = ET.SubElement(parent, element_schema.child)
            child.text = value

    def _write_suppressions(
        self, project: ET.Element, element_schema: ElementSchema, suppressions: List[Suppression]
    ):
        parent = ET.SubElement(project, element_schema.element)
        for suppression in suppressions:
            child = ET.SubElement(parent, element_schema.child)
            if suppression.file_name:
                child.set(schema.SUPPRESSION_FILE_ATTRIBUTE, suppression.file_name)
            if suppression.has_line():
                child.set(schema.SUPPRESSION_LINE_ATTRIBUTE, str(suppression.line_number))
            if suppression.symbol_name:
                child.set(schema.SUPPRESSION_SYMBOL_ATTRIBUTE, suppression.symbol_name)
            if suppression.error_id:
                child.text = suppression.error_id

    def _check_characters(self, project: ET.Element):
        """Raise ValueError for any text or attribute XML cannot represent"""
        for element in project.iter():
            values = list(element.attrib.values())
            if element.text:
                values.append(element.text)
            for value in values:
                match = INVALID_XML_CHARS.search(value)
                if match:
                    raise ValueError(
                        f"character {match.group()!r} in <{element.tag}> is not allowed in XML"
                    )

    def _file_mode(self, path: Path) -> int:
        """Permissions of the existing file, else the default for new files"""
        try:
            return stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
