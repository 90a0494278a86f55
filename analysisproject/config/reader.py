"""
analysisproject.config.reader - Project file parsing

Parses a project XML document into a ConfigModel. Each direct child of the
project element is dispatched by name to a small decoder; unknown elements
are skipped so newer documents still load.
"""

import codecs
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from . import schema
from .errors import IOFailure, NotAProjectFile, SyntaxFailure
from .model import NO_LINE, ConfigModel, Suppression, Tool
from .schema import ElementSchema

# Optionally signed decimal digits, surrounding whitespace allowed
LINE_NUMBER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def _element_text(element: ET.Element) -> Optional[str]:
    """Direct text of an element, None when missing or whitespace only"""
    text = element.text
    if text is None or not text.strip():
        return None
    return text


class ProjectReader:
    """Reads project files into a ConfigModel"""

    def __init__(self):
        self.version: str = schema.PROJECT_FILE_VERSION
        self._decoders: Dict[str, Callable[[ET.Element, ElementSchema], Any]] = {
            schema.ATTRIBUTE: self._read_attribute,
            schema.TEXT: self._read_text,
            schema.BOOLEAN: self._read_boolean,
            schema.ATTRIBUTE_LIST: self._read_attribute_list,
            schema.TEXT_LIST: self._read_text_list,
            schema.SUPPRESSION_LIST: self._read_suppressions,
            schema.TOOL_LIST: self._read_text_list,
        }
        self._elements = schema.element_table()
        self._legacy_elements = set(schema.legacy_elements())

    def read(self, path: Union[str, Path], model: ConfigModel) -> ConfigModel:
        """
        Replace the contents of model with the settings stored in path

        The model is reset before anything is parsed, so on failure it is left
        in its default state.

        Raises:
            IOFailure: the file cannot be read
            SyntaxFailure: the file is not well-formed XML
            NotAProjectFile: the root element is not a project element
        """
        model.clear()
        root = self._parse(path)

        self.version = root.attrib.get(schema.VERSION_ATTRIBUTE, schema.PROJECT_FILE_VERSION)
        logging.debug("Project file version: %s", self.version)

        values = self.decode(root)
        self._apply(model, values)
        model.set_filename(str(path))
        return model

    def _parse(self, path: Union[str, Path]) -> ET.Element:
        """Load and parse the document, returning the project element"""
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise IOFailure(path, f"cannot open project file: {e.strerror or e}") from e

        logging.info("Reading project file: %s", path)

        if data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]

        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise SyntaxFailure(path, f"malformed XML: {e}") from e

        if root.tag != schema.PROJECT_ELEMENT:
            raise NotAProjectFile(
                path, f"root element is <{root.tag}>, expected <{schema.PROJECT_ELEMENT}>"
            )
        return root

    def decode(self, root: ET.Element) -> Dict[str, Any]:
        """
        Decode the children of a project element

        Returns:
            dict: field name -> decoded value, only for fields present in the
            document. List fields accumulate over repeated sections; scalars
            keep the last value.
        """
        values: Dict[str, Any] = {}

        for element in root:
            element_schema = self._elements.get(element.tag)
            if element_schema is None:
                logging.debug("Ignoring unknown element <%s>", element.tag)
                continue

            if element.tag in self._legacy_elements:
                logging.debug(
                    "Reading deprecated element <%s> into %s", element.tag, element_schema.field
                )

            value = self._decoders[element_schema.kind](element, element_schema)
            if value is None:
                continue

            if isinstance(value, list):
                values.setdefault(element_schema.field, []).extend(value)
            else:
                values[element_schema.field] = value

        return values

    def _apply(self, model: ConfigModel, values: Dict[str, Any]):
        """Store decoded values into the model through its setters"""
        for field, value in values.items():
            if field == "tools":
                self._apply_tools(model, value)
                continue
            getattr(model, f"set_{field}")(value)
            logging.debug("Project setting: %s = %s", field, value)

    def _apply_tools(self, model: ConfigModel, names: List[str]):
        for name in names:
            tool = Tool.from_name(name)
            if tool is None:
                logging.debug("Ignoring unknown tool: %s", name)
                continue
            model.set_tool_enabled(tool, True)

    # Decoders, one per value kind

    def _read_attribute(self, element: ET.Element, element_schema: ElementSchema) -> Optional[str]:
        return element.get(element_schema.attribute) or None

    def _read_text(self, element: ET.Element, element_schema: ElementSchema) -> Optional[str]:
        return _element_text(element)

    def _read_boolean(self, element: ET.Element, element_schema: ElementSchema) -> Optional[bool]:
        """Only the exact text "true" is true; an element without text keeps the default"""
        if not element.text:
            return None
        return element.text == "true"

    def _read_attribute_list(self, element: ET.Element, element_schema: ElementSchema) -> List[str]:
        values = []
        for child in element.findall(element_schema.child):
            value = child.get(element_schema.attribute)
            if value:
                values.append(value)
            else:
                logging.debug(
                    "Skipping <%s> entry without %s in <%s>",
                    element_schema.child,
                    element_schema.attribute,
                    element.tag,
                )
        return values

    def _read_text_list(self, element: ET.Element, element_schema: ElementSchema) -> List[str]:
        values = []
        for child in element.findall(element_schema.child):
            text = _element_text(child)
            if text is not None:
                values.append(text)
        return values

    def _read_suppressions(
        self, element: ET.Element, element_schema: ElementSchema
    ) -> List[Suppression]:
        suppressions = []
        for child in element.findall(element_schema.child):
            suppressions.append(
                Suppression(
                    error_id=_element_text(child) or "",
                    file_name=child.get(schema.SUPPRESSION_FILE_ATTRIBUTE, ""),
                    line_number=self._parse_line_number(
                        child.get(schema.SUPPRESSION_LINE_ATTRIBUTE)
                    ),
                    symbol_name=child.get(schema.SUPPRESSION_SYMBOL_ATTRIBUTE, ""),
                )
            )
        return suppressions

    def _parse_line_number(self, value: Optional[str]) -> Optional[int]:
        """Positive line number, NO_LINE when absent, non-positive or invalid"""
        if value is None:
            return NO_LINE
        if not LINE_NUMBER_PATTERN.match(value):
            logging.warning("Invalid suppression line number: %s", value)
            return NO_LINE
        line_number = int(value)
        return line_number if line_number > 0 else NO_LINE
