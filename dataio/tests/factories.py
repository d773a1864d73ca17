"""
Test factories and fixtures shared by the dataio test suites.

Provides a sample identity-keyed record (``Customer``), a factory_boy
factory for it, the SQLAlchemy table it maps to, and spreadsheet converter
subclasses for the same record.
"""

from typing import ClassVar, Optional

from factory.base import Factory
from factory.declarations import Sequence
from factory.faker import Faker
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import declarative_base

from dataio.domain import IdentityModel
from dataio.repos.excel import ExcelReaderBase, ExcelWriterBase, SheetRow

Base = declarative_base()

SHEET_NAME = "Customers"


class Customer(IdentityModel[int]):
    """Sample record used across the test suites."""

    id_field: ClassVar[str] = "customer_id"

    customer_id: int
    name: str
    email: Optional[str] = None


class VipCustomer(Customer):
    tier: str = "gold"


class Supplier(IdentityModel[str]):
    """Record type unrelated to Customer, for type mismatch checks."""

    id_field: ClassVar[str] = "code"

    code: str


class CustomerRecord(Base):
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    enabled = Column(Boolean, default=True, nullable=False)


class CustomerFactory(Factory):
    """Factory for creating Customer instances with sensible defaults."""

    class Meta:
        model = Customer

    customer_id = Sequence(lambda n: n + 1)
    name = Faker("name")
    email = Faker("email")
    enabled = True


class CustomerSheetReader(ExcelReaderBase[Customer]):
    """Reads customers from columns id, name, email, enabled."""

    def __init__(self, data_path, **kwargs) -> None:
        kwargs.setdefault("end_column", kwargs.get("start_column", 1) + 3)
        super().__init__(data_path, SHEET_NAME, Customer, **kwargs)

    def convert(self, row: SheetRow) -> Customer:
        first = self.start_column
        return Customer(
            customer_id=int(row[first]),
            name=row[first + 1],
            email=row[first + 2] or None,
            enabled=row[first + 3] != "0",
        )


class CustomerSheetWriter(ExcelWriterBase[Customer]):
    """Writes customers to columns id, name, email, enabled."""

    def __init__(self, data_path, **kwargs) -> None:
        kwargs.setdefault("end_column", kwargs.get("start_column", 1) + 3)
        super().__init__(data_path, SHEET_NAME, Customer, **kwargs)

    def convert(self, item: Customer) -> SheetRow:
        return SheetRow(
            None,
            self.start_column,
            self.end_column,
            [
                str(item.customer_id),
                item.name,
                item.email or "",
                "1" if item.enabled else "0",
            ],
        )


def dumped(items) -> list:
    """Field values of ``items`` ordered by identifier."""
    return [item.model_dump() for item in sorted(items, key=lambda i: i.get_id())]
