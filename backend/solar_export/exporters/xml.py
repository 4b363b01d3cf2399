"""XML exporter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from xml.sax.saxutils import escape

from .base import ExportData, ExportFormat, ExportResult, TabularExporter

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_WHITESPACE = re.compile(r"\s+")
_NON_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")
# Anything outside the XML 1.0 Char production
_NON_XML_CHARS = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def escape_xml(value: str) -> str:
    return escape(_NON_XML_CHARS.sub("", value), _XML_ENTITIES)


def root_tag(title: str) -> str:
    """Derive an element name from the export title."""
    tag = _NON_NAME_CHARS.sub("", _WHITESPACE.sub("_", title))
    if not tag:
        return "export"
    if tag[0].isdigit():
        return f"_{tag}"
    return tag


@dataclass(frozen=True)
class XmlExporter(TabularExporter):
    format: ExportFormat = ExportFormat.XML
    extension: str = "xml"
    media_type: str = "application/xml; charset=utf-8"

    def serialize(self, data: ExportData, filename: str) -> ExportResult:
        tag = root_tag(data.title)
        lines: list[str] = ['<?xml version="1.0" encoding="UTF-8"?>', f"<{tag}>"]
        if data.metadata:
            lines.append("  <metadata>")
            for key, value in data.metadata.items():
                lines.append(f"    <{key}>{escape_xml(value)}</{key}>")
            lines.append("  </metadata>")
        for cells in data.formatted_rows():
            lines.append("  <record>")
            for column, cell in zip(data.columns, cells):
                lines.append(f"    <{column.key}>{escape_xml(cell)}</{column.key}>")
            lines.append("  </record>")
        lines.append(f"</{tag}>")
        return self._result(filename, "\n".join(lines).encode("utf-8"))
