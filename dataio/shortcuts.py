"""
Ad-hoc JSON persistence helpers.

These helpers save and load a single object to or from a JSON file without
setting up a reader or writer. The split JSON adapters use them for their
one-file-per-record storage.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import JsonSerializerSettings
from .errors import SerializationError, SourceNotFoundError, WriteError

logger = logging.getLogger(__name__)

M = TypeVar("M")

PathLike = Union[str, Path]

# Appended to paths passed to save_json/load_json; None disables it
json_extension: Optional[str] = ".json"


def fit_json_path(path: PathLike) -> Path:
    """Return ``path`` with the JSON extension appended when missing."""
    path = Path(path)
    if json_extension and not path.name.endswith(json_extension):
        path = path.with_name(path.name + json_extension)
    return path


def to_json(obj: Any, settings: Optional[JsonSerializerSettings] = None) -> str:
    """Serialize ``obj`` to a JSON string.

    Pydantic models are dumped through ``model_dump_json``; anything else
    goes through a ``TypeAdapter`` for its runtime type.

    Raises:
        SerializationError: If the object cannot be serialized
    """
    settings = settings or JsonSerializerSettings()
    try:
        if isinstance(obj, BaseModel):
            return obj.model_dump_json(
                indent=settings.indent,
                by_alias=settings.by_alias,
                exclude_none=settings.exclude_none,
            )
        return (
            TypeAdapter(type(obj))
            .dump_json(
                obj,
                indent=settings.indent,
                by_alias=settings.by_alias,
                exclude_none=settings.exclude_none,
            )
            .decode("utf-8")
        )
    except Exception as e:
        raise SerializationError(
            f"An error occurred while serializing {type(obj).__name__} "
            "to JSON."
        ) from e


def save_text(
    text: str, path: PathLike, encoding: str = "utf-8"
) -> None:
    """Write ``text`` to ``path``, replacing existing content.

    Raises:
        WriteError: If the file cannot be written
    """
    try:
        Path(path).write_text(text, encoding=encoding)
    except OSError as e:
        raise WriteError(
            f"An error occurred while saving data to file: {path}"
        ) from e


def save_json(
    obj: Any,
    path: PathLike,
    settings: Optional[JsonSerializerSettings] = None,
) -> Path:
    """Serialize ``obj`` and write it to ``path``.

    Returns:
        The path actually written, including the JSON extension
    """
    settings = settings or JsonSerializerSettings()
    target = fit_json_path(path)
    save_text(to_json(obj, settings), target, encoding=settings.encoding)
    logger.debug(
        "Saved JSON document", extra={"path": str(target)}
    )
    return target


def load_json(
    path: PathLike,
    model_type: Optional[Type[M]] = None,
    settings: Optional[JsonSerializerSettings] = None,
) -> Any:
    """Read a JSON document from ``path``.

    Args:
        path: File to read; the JSON extension is appended when missing
        model_type: Type to validate the document into. Without it plain
            Python data (dicts, lists, ...) is returned.
        settings: Serializer settings, only the encoding is used

    Raises:
        SourceNotFoundError: If the file does not exist
        SerializationError: If the document is malformed or does not match
            ``model_type``
    """
    settings = settings or JsonSerializerSettings()
    target = fit_json_path(path)
    if not target.exists():
        raise SourceNotFoundError(
            f"The file specified does not exist: {target}",
            source=str(target),
        )

    try:
        raw = target.read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SerializationError(
            f"An error occurred while loading JSON data from file: {target}"
        ) from e

    try:
        if model_type is None:
            return json.loads(raw)
        return TypeAdapter(model_type).validate_json(raw)
    except (ValueError, ValidationError) as e:
        raise SerializationError(
            f"An error occurred while loading JSON data from file: {target}"
        ) from e


async def save_json_async(
    obj: Any,
    path: PathLike,
    settings: Optional[JsonSerializerSettings] = None,
) -> Path:
    return await asyncio.to_thread(save_json, obj, path, settings)


async def load_json_async(
    path: PathLike,
    model_type: Optional[Type[M]] = None,
    settings: Optional[JsonSerializerSettings] = None,
) -> Any:
    return await asyncio.to_thread(load_json, path, model_type, settings)
