"""Shared test fixtures."""
import pytest

from storefront_checkout.models import Address, Card, ContactInfo

from fakes import FakeLocatorAssertions, FakePage


@pytest.fixture(autouse=True)
def fake_expect(request, monkeypatch):
    """Route page-object assertions through the fake locator tree (unit tests only)."""
    if request.node.get_closest_marker("e2e") is None:
        monkeypatch.setattr("storefront_checkout.pages.base.expect", FakeLocatorAssertions)


@pytest.fixture
def page():
    return FakePage()


@pytest.fixture
def sample_address():
    return Address(
        first_name="John",
        last_name="Doe",
        address1="123 Main St",
        city="New York",
        zipcode="10001",
        country="United States",
        state="New York",
    )


@pytest.fixture
def sample_card():
    return Card(number="4242 4242 4242 4242", name="JOHN DOE", expiry="12/34", cvc="123")


@pytest.fixture
def sample_contact():
    return ContactInfo(email="jane.doe@example.com", accept_marketing=True, create_account=False)
