"""
Common configuration for the JSON file adapters.
"""

import logging
from pathlib import Path
from typing import ClassVar, Generic, List, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter

from dataio.config import JsonSerializerSettings
from dataio.errors import SerializationError, SourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonIOBase(Generic[T]):
    """Holds the path, serializer settings and creation policy of a JSON
    source.

    ``source_name`` and ``default_serializer`` are process-wide defaults;
    values passed to the constructor override them for one instance only.
    """

    source_name: str = "Json File"
    default_serializer: ClassVar[JsonSerializerSettings] = (
        JsonSerializerSettings()
    )

    def __init__(
        self,
        data_path: Union[str, Path],
        model_type: Type[T],
        serializer: Optional[JsonSerializerSettings] = None,
        create_new_file: bool = False,
        handle_inner_exceptions: bool = False,
        source_name: Optional[str] = None,
    ) -> None:
        """
        Args:
            data_path: JSON file (single-file mode) or directory (split
                mode)
            model_type: Entity type stored in this source
            serializer: Serializer settings, defaults to the process-wide
                ``default_serializer``
            create_new_file: Create a missing file/directory instead of
                raising SourceNotFoundError
            handle_inner_exceptions: Report write failures as ``False``
                instead of raising
            source_name: Label overriding the process-wide source name
        """
        if data_path is None or not str(data_path).strip():
            raise ValueError("Data path cannot be null or empty.")
        if model_type is None:
            raise ValueError("model_type is required")

        self.data_path = Path(data_path)
        self.model_type = model_type
        self._serializer = serializer
        self.create_new_file = create_new_file
        self.handle_inner_exceptions = handle_inner_exceptions
        if source_name is not None:
            self.source_name = source_name

        logger.debug(
            f"Initialized {type(self).__name__}",
            extra={
                "data_path": str(self.data_path),
                "model_type": model_type.__name__,
                "create_new_file": create_new_file,
            },
        )

    @property
    def serializer(self) -> JsonSerializerSettings:
        return self._serializer or type(self).default_serializer

    @serializer.setter
    def serializer(self, value: Optional[JsonSerializerSettings]) -> None:
        self._serializer = value

    def _ensure_file(self) -> bool:
        """Make sure the JSON file exists.

        Returns:
            True if the file was created empty just now

        Raises:
            SourceNotFoundError: If the file is missing and creation is
                disabled
        """
        if self.data_path.is_file():
            return False
        if not self.create_new_file:
            raise SourceNotFoundError(
                f"JSON file not found at path: {self.data_path}",
                source=str(self.data_path),
            )
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        self.data_path.touch()
        logger.info(
            "Created empty JSON file", extra={"data_path": str(self.data_path)}
        )
        return True

    def _ensure_directory(self) -> None:
        """Make sure the JSON storage directory exists (split mode)."""
        if self.data_path.is_dir():
            return
        if not self.create_new_file:
            raise SourceNotFoundError(
                f"JSON directory storage not found at path: {self.data_path}",
                source=str(self.data_path),
            )
        self.data_path.mkdir(parents=True, exist_ok=True)
        logger.info(
            "Created JSON storage directory",
            extra={"data_path": str(self.data_path)},
        )

    def _load_array(self) -> List[T]:
        """Read the whole JSON array stored in the file (single-file mode).

        An empty file holds no records.

        Raises:
            SerializationError: If the file is not a JSON array of records
        """
        if self._ensure_file():
            return []
        try:
            raw = self.data_path.read_text(encoding=self.serializer.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SerializationError(
                f"Failed to read JSON data from {self.data_path}"
            ) from e
        if not raw.strip():
            return []
        try:
            return TypeAdapter(List[self.model_type]).validate_json(raw)
        except ValueError as e:
            raise SerializationError(
                f"Failed to deserialize JSON data from {self.data_path}"
            ) from e

    def _dump_array(self, items: List[T]) -> None:
        """Overwrite the file with ``items`` as one JSON array."""
        self._ensure_file()
        settings = self.serializer
        data = TypeAdapter(List[self.model_type]).dump_json(
            items,
            indent=settings.indent,
            by_alias=settings.by_alias,
            exclude_none=settings.exclude_none,
        )
        self.data_path.write_text(
            data.decode("utf-8"), encoding=settings.encoding
        )
