"""
Tests for loading and applying dataio configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dataio.config import (
    CONFIG_PATH_ENV,
    DataIOConfig,
    SourceKind,
    configure,
    load_config,
)
from dataio.repos.excel import ExcelIOBase
from dataio.repos.jsonfile import JsonIOBase, JsonReader
from dataio.repos.sql import SqlIOBase
from dataio.tests.factories import Customer

SAMPLE_CONFIG = """
json:
  source_name: Local JSON
  serializer:
    indent: 4
    exclude_none: true
excel:
  data_separator: ","
sql:
  source_name: Customer DB
sources:
  customers:
    kind: json_split
    data_path: ./data/customers
    create_new_file: true
"""


@pytest.fixture
def restore_defaults():
    """Put the process-wide adapter defaults back after a test."""
    yield
    configure(DataIOConfig())


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "dataio.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_loads_sections_and_sources(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, SAMPLE_CONFIG))

        assert config.json_file.source_name == "Local JSON"
        assert config.json_file.serializer.indent == 4
        assert config.json_file.serializer.exclude_none is True
        assert config.excel.data_separator == ","
        assert config.excel.row_separator == "\n"
        assert config.sql.source_name == "Customer DB"
        source = config.sources["customers"]
        assert source.kind is SourceKind.JSON_SPLIT
        assert source.create_new_file is True
        assert source.handle_inner_exceptions is False

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nope.yaml")

        assert config == DataIOConfig()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, ""))

        assert config.json_file.source_name == "Json File"
        assert config.sources == {}

    def test_path_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_config(tmp_path, SAMPLE_CONFIG)
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

        assert load_config().sql.source_name == "Customer DB"

    def test_no_path_and_no_environment_gives_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

        assert load_config() == DataIOConfig()

    def test_non_mapping_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="YAML mapping"):
            load_config(write_config(tmp_path, "- just\n- a list\n"))

    def test_unknown_source_kind_is_rejected(self, tmp_path: Path) -> None:
        text = "sources:\n  x:\n    kind: csv\n    data_path: x.csv\n"

        with pytest.raises(ValidationError):
            load_config(write_config(tmp_path, text))


class TestConfigure:
    def test_applies_process_wide_defaults(
        self, tmp_path: Path, restore_defaults
    ) -> None:
        configure(load_config(write_config(tmp_path, SAMPLE_CONFIG)))

        assert JsonIOBase.source_name == "Local JSON"
        assert JsonIOBase.default_serializer.indent == 4
        assert ExcelIOBase.data_separator == ","
        assert SqlIOBase.source_name == "Customer DB"

    def test_existing_adapters_pick_up_new_defaults(
        self, tmp_path: Path, restore_defaults
    ) -> None:
        reader = JsonReader(tmp_path / "c.json", Customer)

        configure(load_config(write_config(tmp_path, SAMPLE_CONFIG)))

        assert reader.get_source_name() == "Local JSON"
        assert reader.serializer.indent == 4

    def test_instance_overrides_win(
        self, tmp_path: Path, restore_defaults
    ) -> None:
        reader = JsonReader(
            tmp_path / "c.json", Customer, source_name="Mine"
        )

        configure(load_config(write_config(tmp_path, SAMPLE_CONFIG)))

        assert reader.get_source_name() == "Mine"

    def test_defaults_restore(self, restore_defaults) -> None:
        configure(DataIOConfig())

        assert JsonIOBase.source_name == "Json File"
        assert ExcelIOBase.data_separator == ";"
        assert SqlIOBase.source_name == "DataBase Context"
