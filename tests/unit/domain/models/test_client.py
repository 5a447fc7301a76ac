"""
Unit tests for the Client and Company models.
"""

import pytest

from backoffice.domain.models.base import ValidationError
from backoffice.domain.models.client import Client, Company


class TestClient:
    """Test cases for Client."""

    def test_valid_client(self):
        client = Client(name="Umbrella Inc", email="ap@umbrella.com", city="Raccoon City")

        client.validate()

        assert client.is_new
        assert client.updated_at == client.created_at

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256])
    def test_name_is_checked(self, name):
        with pytest.raises(ValidationError) as exc_info:
            Client(name=name).validate()
        assert exc_info.value.field == "name"

    def test_email_needs_an_at_sign(self):
        with pytest.raises(ValidationError) as exc_info:
            Client(name="Umbrella Inc", email="umbrella.com").validate()
        assert exc_info.value.field == "email"


def test_company_name_is_required():
    Company(name="Acme Holdings").validate()

    with pytest.raises(ValidationError) as exc_info:
        Company(name=" ").validate()
    assert exc_info.value.message == "Company name is required"
