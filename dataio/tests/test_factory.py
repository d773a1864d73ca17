"""
Tests for building adapters from configured sources.
"""

from pathlib import Path

import pytest

from dataio.config import JsonSerializerSettings, SourceConfig, SourceKind
from dataio.factory import reader_factory, writer_factory
from dataio.repos.jsonfile import (
    JsonReader,
    JsonSplitReader,
    JsonSplitWriter,
    JsonWriter,
)
from dataio.tests.factories import Customer, CustomerFactory


@pytest.mark.parametrize(
    "kind, reader_type, writer_type",
    [
        (SourceKind.JSON, JsonReader, JsonWriter),
        (SourceKind.JSON_SPLIT, JsonSplitReader, JsonSplitWriter),
    ],
)
def test_builds_json_adapters(
    tmp_path: Path, kind, reader_type, writer_type
) -> None:
    source = SourceConfig(
        kind=kind,
        data_path=str(tmp_path / "customers"),
        create_new_file=True,
        handle_inner_exceptions=True,
    )

    reader = reader_factory(source, Customer)
    writer = writer_factory(source, Customer)

    assert type(reader) is reader_type
    assert type(writer) is writer_type
    assert writer.handle_inner_exceptions is True
    customer = CustomerFactory.build()
    assert writer.write_data(customer) is True
    assert reader.read_data()[0].model_dump() == customer.model_dump()


def test_source_serializer_is_used(tmp_path: Path) -> None:
    source = SourceConfig(
        kind=SourceKind.JSON,
        data_path=str(tmp_path / "customers.json"),
        create_new_file=True,
        serializer=JsonSerializerSettings(indent=None),
    )

    writer_factory(source, Customer).write_data(CustomerFactory.build())

    assert "\n" not in (tmp_path / "customers.json").read_text("utf-8")


@pytest.mark.parametrize("kind", [SourceKind.SQL, SourceKind.EXCEL])
def test_rejects_kinds_needing_more_than_configuration(kind) -> None:
    source = SourceConfig(kind=kind, data_path="unused")

    with pytest.raises(ValueError, match=kind.value):
        reader_factory(source, Customer)
    with pytest.raises(ValueError, match=kind.value):
        writer_factory(source, Customer)
