import pytest

from solar_export.exporters import (
    CsvExporter,
    ExportFormat,
    ExportOrchestrator,
    UnsupportedFormatError,
    XmlExporter,
    create_default_orchestrator,
)
from solar_export.services import TemplateNotFoundError, create_export_context
from solar_export.templates import (
    CompactReadingsExportTemplate,
    ReadingsExportTemplate,
    TemplateOptions,
    TemplateRegistry,
    create_default_template_registry,
)


class _RecordingTemplate(ReadingsExportTemplate):
    calls = 0

    def transform(self, records):
        type(self).calls += 1
        return super().transform(records)


def test_export_dispatches_to_matching_exporter(readings) -> None:
    orchestrator = create_default_orchestrator()
    result = orchestrator.export(ReadingsExportTemplate(), readings, ExportFormat.CSV, "daily")

    assert result.filename == "daily.csv"
    assert result.content.decode("utf-8").startswith("Device,Timestamp,Voltage (V)")


def test_export_accepts_plain_format_strings(readings) -> None:
    result = create_default_orchestrator().export(CompactReadingsExportTemplate(), readings, "xml", "f")
    assert result.filename == "f.xml"


def test_unsupported_format_raises_before_transform(readings) -> None:
    orchestrator = ExportOrchestrator([CsvExporter()])
    _RecordingTemplate.calls = 0

    with pytest.raises(UnsupportedFormatError) as excinfo:
        orchestrator.export(_RecordingTemplate(), readings, "pdf", "f")

    assert "pdf" in str(excinfo.value)
    assert excinfo.value.format_key == "pdf"
    assert _RecordingTemplate.calls == 0


def test_unknown_format_string_is_unsupported(readings) -> None:
    with pytest.raises(ValueError, match="docx"):
        create_default_orchestrator().export(ReadingsExportTemplate(), readings, "docx", "f")


def test_supported_formats_reflect_registered_exporters() -> None:
    orchestrator = ExportOrchestrator([CsvExporter(), XmlExporter()])

    assert orchestrator.get_supported_formats() == [ExportFormat.CSV, ExportFormat.XML]
    assert orchestrator.supports_format("csv")
    assert orchestrator.supports_format(ExportFormat.XML)
    assert not orchestrator.supports_format("pdf")
    assert not orchestrator.supports_format("bogus")


def test_last_exporter_wins_on_duplicate_format() -> None:
    orchestrator = ExportOrchestrator([CsvExporter(media_type="text/plain"), CsvExporter()])

    assert orchestrator.get_supported_formats() == [ExportFormat.CSV]
    assert orchestrator.export(ReadingsExportTemplate(), [], "csv", "f").media_type == "text/csv; charset=utf-8"


def test_registry_lookup_and_order() -> None:
    registry = TemplateRegistry()
    default, compact = ReadingsExportTemplate(), CompactReadingsExportTemplate()
    registry.register(default)
    registry.register(compact)

    assert registry.get("readings-default") is default
    assert registry.get("missing") is None
    assert registry.has("readings-compact")
    assert not registry.has("missing")
    assert registry.get_all() == [default, compact]


def test_registry_overwrites_duplicate_ids() -> None:
    registry = create_default_template_registry()
    replacement = ReadingsExportTemplate().configure(TemplateOptions(title="Replacement"))
    registry.register(replacement)

    assert registry.get("readings-default") is replacement
    assert [template.id for template in registry.get_all()] == ["readings-default", "readings-compact"]


def test_contexts_are_isolated(readings) -> None:
    first, second = create_export_context(), create_export_context()
    first.templates.register(CompactReadingsExportTemplate().configure(TemplateOptions(title="Custom")))

    assert first.templates.get("readings-compact").transform([]).title == "Custom"
    assert second.templates.get("readings-compact").transform([]).title == "Readings (Compact)"


def test_context_applies_options(readings) -> None:
    context = create_export_context()
    result = context.export(
        "readings-default",
        readings,
        "csv",
        "f",
        TemplateOptions(include_device=False, include_temperature=False),
    )
    header = result.content.decode("utf-8").split("\n")[0]
    assert header == "Timestamp,Voltage (V),Current (A),Power (W)"


def test_context_reports_unknown_templates(readings) -> None:
    with pytest.raises(TemplateNotFoundError):
        create_export_context().export("nope", readings, "csv", "f")
