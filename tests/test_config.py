from pathlib import Path

import pytest
from pydantic import ValidationError

from certno.config import CertnoConfig, OfficeCode, load_config


def test_default_prefixes():
    office = OfficeCode()
    assert office.segments == ["WB", "MSD", "BRW"]
    assert office.legacy_prefix == "WB-MSD-BRW-"
    assert office.compact_prefix == "WBMSDBRW"


def test_load_config_without_path():
    assert load_config(None) == CertnoConfig()


def test_load_config_from_yaml(tmp_path: Path):
    path = tmp_path / "certno.yaml"
    path.write_text(
        "office:\n"
        "  office: KND\n"
        "compact:\n"
        "  year_prefixes: ['18', '19']\n"
    )
    cfg = load_config(path)
    assert cfg.office.compact_prefix == "WBMSDKND"
    assert cfg.compact.year_prefixes == ["18", "19"]


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "certno.yaml"
    path.write_text("")
    assert load_config(path) == CertnoConfig()


def test_invalid_config(tmp_path: Path):
    path = tmp_path / "certno.yaml"
    path.write_text("compact:\n  year_prefixes: 12\n")
    with pytest.raises(ValidationError):
        load_config(path)
