"""
Identity-keyed domain model shared by every dataio backend.

Persisted records are Pydantic v2 models whose equality, hashing and lookup
are defined solely by a single identifier field. Two instances of one type
hierarchy carrying the same identifier are the same logical record, whatever
their other field values are. Adapters rely on this to locate existing
records during upsert.

Change and save notifications are not part of the model; see
``dataio.events`` for the subscription hub.
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field

TId = TypeVar("TId")


class IdentityModel(BaseModel, Generic[TId]):
    """Base class for records persisted through dataio readers and writers.

    Subclasses declare their identifier as an ordinary Pydantic field and
    name it through ``id_field``::

        class Customer(IdentityModel[int]):
            id_field: ClassVar[str] = "customer_id"

            customer_id: int
            name: str

    Identifier values must support equality, hashing and ordering.
    """

    id_field: ClassVar[str] = "id"

    enabled: bool = Field(
        True, description="Whether the record is active"
    )

    def get_id(self) -> TId:
        """Return the record identifier."""
        return getattr(self, self.id_field)

    def set_id(self, value: TId) -> None:
        """Replace the record identifier.

        This is the only sanctioned way to change the identity of a record.
        """
        setattr(self, self.id_field, value)

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def merge_from(self, other: "IdentityModel[TId]") -> None:
        """Copy every non-identity field value of ``other`` onto this record.

        The identifier of ``self`` is preserved. Fields that ``other`` does
        not define are left untouched.
        """
        for name in type(self).model_fields:
            if name == self.id_field:
                continue
            if name in type(other).model_fields:
                setattr(self, name, getattr(other, name))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IdentityModel):
            return NotImplemented
        # Records of unrelated types never match, whatever their ids
        if not (
            isinstance(other, type(self)) or isinstance(self, type(other))
        ):
            return False
        return bool(self.get_id() == other.get_id())

    def __hash__(self) -> int:
        return hash(self.get_id())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, IdentityModel):
            return NotImplemented
        return bool(self.get_id() < other.get_id())
