"""
Tests for the identity-keyed record base class.
"""

import pytest

from dataio.domain import IdentityModel
from dataio.tests.factories import (
    Customer,
    CustomerFactory,
    Supplier,
    VipCustomer,
)


class TestIdentity:
    """Equality, hashing and ordering follow the identifier only."""

    def test_get_id_reads_declared_field(self) -> None:
        customer = CustomerFactory.build(customer_id=42)

        assert customer.get_id() == 42

    def test_set_id_replaces_identifier(self) -> None:
        customer = CustomerFactory.build(customer_id=1)

        customer.set_id(2)

        assert customer.customer_id == 2
        assert customer.get_id() == 2

    def test_same_id_different_values_are_equal(self) -> None:
        a = CustomerFactory.build(customer_id=5, name="Ada")
        b = CustomerFactory.build(customer_id=5, name="Grace")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_ids_are_not_equal(self) -> None:
        a = CustomerFactory.build(customer_id=5)
        b = CustomerFactory.build(customer_id=6)

        assert a != b

    def test_comparison_with_non_model_is_not_equal(self) -> None:
        customer = CustomerFactory.build(customer_id=5)

        assert customer != 5
        assert customer != "5"

    def test_records_sort_by_identifier(self) -> None:
        customers = [
            CustomerFactory.build(customer_id=i) for i in (3, 1, 2)
        ]

        assert [c.customer_id for c in sorted(customers)] == [1, 2, 3]

    def test_subclass_records_share_identity(self) -> None:
        base = Customer(customer_id=9, name="Base")
        vip = VipCustomer(customer_id=9, name="Vip")

        assert base == vip

    def test_default_identifier_field_is_id(self) -> None:
        class Plain(IdentityModel[str]):
            id: str

        assert Plain(id="x").get_id() == "x"

    def test_string_identifiers(self) -> None:
        assert Supplier(code="S1") == Supplier(code="S1")
        assert Supplier(code="S1") < Supplier(code="S2")


class TestEnabledFlag:
    def test_records_start_enabled(self) -> None:
        assert Customer(customer_id=1, name="A").enabled is True

    def test_disable_and_enable(self) -> None:
        customer = CustomerFactory.build()

        customer.disable()
        assert customer.enabled is False

        customer.enable()
        assert customer.enabled is True


class TestMergeFrom:
    def test_copies_values_and_keeps_identifier(self) -> None:
        target = CustomerFactory.build(customer_id=1, name="Old", email=None)
        source = CustomerFactory.build(
            customer_id=2, name="New", email="new@example.com", enabled=False
        )

        target.merge_from(source)

        assert target.customer_id == 1
        assert target.name == "New"
        assert target.email == "new@example.com"
        assert target.enabled is False

    def test_ignores_fields_the_source_lacks(self) -> None:
        target = VipCustomer(customer_id=1, name="Old", tier="platinum")
        source = Customer(customer_id=1, name="New")

        target.merge_from(source)

        assert target.name == "New"
        assert target.tier == "platinum"

    @pytest.mark.parametrize("enabled", [True, False])
    def test_merge_into_subclass_from_base(self, enabled: bool) -> None:
        target = Customer(customer_id=1, name="Old")
        source = VipCustomer(customer_id=1, name="New", enabled=enabled)

        target.merge_from(source)

        assert target.model_dump() == {
            "enabled": enabled,
            "customer_id": 1,
            "name": "New",
            "email": None,
        }


def test_unrelated_record_types_never_match() -> None:
    class Region(IdentityModel[int]):
        id: int

    assert Customer(customer_id=1, name="A") != Region(id=1)
