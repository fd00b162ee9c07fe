"""Domain types tests — immutability and placeholder labels."""

import dataclasses

import pytest

from sales_ledger.core.domain_types import placeholder_name
from tests.ledger_fixtures import make_customer, make_sale, NOW


def test_placeholder_name_uses_customer_id():
    assert placeholder_name(999) == "Customer 999"


def test_customer_is_frozen():
    customer = make_customer(1, "Acme Corp")
    with pytest.raises(dataclasses.FrozenInstanceError):
        customer.name = "Other"


def test_sale_is_frozen():
    sale = make_sale(1, 1, "10.00", NOW)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sale.amount = 0
