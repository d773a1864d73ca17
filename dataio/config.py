"""
Configuration for dataio adapters.

Adapters read their process-wide defaults (source labels, separators,
serializer settings) from class attributes of the IO base classes. This
module describes those defaults as Pydantic models, loads them from a YAML
file, and applies them process-wide. Constructor arguments passed to an
individual adapter always win over the process-wide defaults.

Example configuration file::

    json:
      serializer:
        indent: 4
        exclude_none: true
    excel:
      data_separator: ","
    sources:
      customers:
        kind: json_split
        data_path: ./data/customers
        create_new_file: true
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "DATAIO_CONFIG"


class JsonSerializerSettings(BaseModel):
    """Options used when dumping and loading JSON documents."""

    indent: Optional[int] = Field(
        2, description="Indentation of written documents, None for compact"
    )
    by_alias: bool = Field(
        False, description="Dump fields by their alias instead of name"
    )
    exclude_none: bool = Field(
        False, description="Omit fields whose value is None"
    )
    encoding: str = Field("utf-8", description="Text encoding of files")


class JsonDefaults(BaseModel):
    source_name: str = "Json File"
    serializer: JsonSerializerSettings = Field(
        default_factory=JsonSerializerSettings
    )


class ExcelDefaults(BaseModel):
    source_name: str = "Excel File"
    data_separator: str = ";"
    row_separator: str = "\n"


class SqlDefaults(BaseModel):
    source_name: str = "DataBase Context"


class SourceKind(str, Enum):
    """Storage medium of a configured source."""

    JSON = "json"
    JSON_SPLIT = "json_split"
    EXCEL = "excel"
    SQL = "sql"


class SourceConfig(BaseModel):
    """A named storage location that readers/writers can be built for."""

    kind: SourceKind
    data_path: str = Field(..., description="File or directory path")
    create_new_file: bool = False
    handle_inner_exceptions: bool = False
    serializer: Optional[JsonSerializerSettings] = Field(
        None, description="Per-source serializer, overrides the default"
    )


class DataIOConfig(BaseModel):
    """Process-wide dataio configuration."""

    model_config = ConfigDict(populate_by_name=True)

    json_file: JsonDefaults = Field(
        default_factory=JsonDefaults, alias="json"
    )
    excel: ExcelDefaults = Field(default_factory=ExcelDefaults)
    sql: SqlDefaults = Field(default_factory=SqlDefaults)
    sources: Dict[str, SourceConfig] = Field(default_factory=dict)


def load_config(path: Union[str, Path, None] = None) -> DataIOConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML file, supports ~ expansion. Defaults to the
            DATAIO_CONFIG environment variable.

    Returns:
        Parsed configuration. A missing path, missing file or empty file
        yields the built-in defaults.

    Raises:
        ValueError: If the file does not contain a YAML mapping
        pydantic.ValidationError: If a section has invalid values
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV)
    if not path:
        logger.debug("No dataio configuration file given, using defaults")
        return DataIOConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        logger.warning(
            f"Configuration file not found: {config_path}",
            extra={"config_path": str(config_path)},
        )
        return DataIOConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        logger.debug(f"Configuration file is empty: {config_path}")
        return DataIOConfig()

    if not isinstance(config_data, dict):
        raise ValueError(
            f"Configuration file must contain a YAML mapping: {config_path}"
        )

    config = DataIOConfig.model_validate(config_data)
    logger.info(
        f"Loaded dataio configuration from {config_path}",
        extra={"sources": sorted(config.sources)},
    )
    return config


def configure(config: DataIOConfig) -> None:
    """Apply ``config`` as the process-wide adapter defaults.

    Adapters constructed afterwards (and existing adapters that did not
    override a value) pick up the new defaults.
    """
    # Imported here: the IO base classes import this module
    from dataio.repos.excel.base import ExcelIOBase
    from dataio.repos.jsonfile.base import JsonIOBase
    from dataio.repos.sql.base import SqlIOBase

    JsonIOBase.source_name = config.json_file.source_name
    JsonIOBase.default_serializer = config.json_file.serializer
    ExcelIOBase.source_name = config.excel.source_name
    ExcelIOBase.data_separator = config.excel.data_separator
    ExcelIOBase.row_separator = config.excel.row_separator
    SqlIOBase.source_name = config.sql.source_name

    logger.debug(
        "Applied dataio defaults",
        extra={
            "json_source_name": config.json_file.source_name,
            "excel_source_name": config.excel.source_name,
            "sql_source_name": config.sql.source_name,
        },
    )
