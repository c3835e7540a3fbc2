import json
from pathlib import Path

import pytest

from sbom_compliance import __version__
from sbom_compliance.config import MAX_SCORE, OutputConfig, ReportConfig


def test_defaults() -> None:
    config = ReportConfig()

    assert config.output.format == "detailed"
    assert config.output.output_path is None
    assert config.tool.version == __version__
    assert config.engine_version == "1"
    assert config.strict_catalog is False
    assert MAX_SCORE == 10.0


def test_from_file_overrides_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps({
        "tool": {"name": "acme-sbom", "vendor": "ACME", "colour": "green"},
        "output": {"format": "json", "path": "out/report.json"},
        "strict_catalog": True,
        "engine_version": 2,
    }), encoding="utf-8")

    config = ReportConfig.from_file(path)

    assert config.tool.name == "acme-sbom"
    assert config.tool.vendor == "ACME"
    assert config.tool.version == __version__
    assert not hasattr(config.tool, "colour")
    assert config.output.format == "json"
    assert config.output.output_path == Path("out/report.json")
    assert config.strict_catalog is True
    assert config.engine_version == "2"


def test_unknown_output_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown report format"):
        OutputConfig(format="xlsx")


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"tool": "x"}, "tool"),
        ({"output": None}, "output"),
        (["json"], "JSON object"),
    ],
)
def test_from_file_rejects_malformed_sections(tmp_path: Path, payload, message) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ReportConfig.from_file(path)
