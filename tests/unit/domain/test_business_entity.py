from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from src.domain.entities import Business
from src.domain.errors import ConflictError, InvalidStateError, ValidationError


def make_business(**overrides) -> Business:
    params = dict(name="Acme", owner_id=uuid4(), country="US")
    params.update(overrides)
    return Business.create(**params)


def test_create_business():
    business = make_business()

    assert business.is_active is True
    assert business.is_deleted is False
    assert business.deleted_at is None
    assert business.theme == {}
    assert business.tax_rate == Decimal("0.10")
    assert business.can_create_invoices() is True


def test_create_business_trims_name_and_country():
    business = make_business(name="  Acme ", country=" US ")

    assert business.name == "Acme"
    assert business.country == "US"


@pytest.mark.parametrize(
    "field, value, code",
    [
        ("name", "", "BUSINESS_NAME_REQUIRED"),
        ("name", "   ", "BUSINESS_NAME_REQUIRED"),
        ("country", "", "COUNTRY_REQUIRED"),
        ("tax_rate", Decimal("-0.1"), "INVALID_TAX_RATE"),
    ],
)
def test_create_business_validation(field, value, code):
    with pytest.raises(ValidationError) as exc_info:
        make_business(**{field: value})

    assert exc_info.value.code == code


def test_update_details():
    business = make_business()

    business.update_details("Acme Ltd", email="billing@acme.com", phone="555-0100")

    assert business.name == "Acme Ltd"
    assert business.email == "billing@acme.com"
    assert business.phone_number == "555-0100"
    assert business.website is None


def test_update_details_requires_name():
    business = make_business()

    with pytest.raises(ValidationError):
        business.update_details("")

    assert business.name == "Acme"


def test_update_address_and_formatted_address():
    business = make_business()

    business.update_address("1 Main St", "Springfield", "IL", "62701", "US")

    assert business.formatted_address == "1 Main St\nSpringfield, IL 62701\nUS"


def test_formatted_address_skips_missing_parts():
    business = make_business()

    business.update_address(None, "Springfield", None, None, "US")

    assert business.formatted_address == "Springfield\nUS"


def test_update_branding_accepts_valid_json():
    business = make_business()

    business.update_branding("https://cdn.acme.com/logo.png", '{"primary": "#ff0000"}')

    assert business.logo_url == "https://cdn.acme.com/logo.png"
    assert business.theme == {"primary": "#ff0000"}


def test_update_branding_rejects_invalid_json():
    business = make_business()

    with pytest.raises(ValidationError) as exc_info:
        business.update_branding(None, "{not json")

    assert exc_info.value.code == "INVALID_THEME_SETTINGS"
    assert business.theme_settings == "{}"


def test_deactivate_blocks_invoicing():
    business = make_business()

    business.deactivate()
    assert business.can_create_invoices() is False

    business.activate()
    assert business.can_create_invoices() is True


def test_delete_is_soft():
    business = make_business()
    deleted_at = datetime(2024, 3, 15, 12, 0)

    business.delete(deleted_at)

    assert business.is_deleted is True
    assert business.is_active is False
    assert business.deleted_at == deleted_at
    assert business.can_create_invoices() is False


def test_restore_deleted_business():
    business = make_business()
    business.delete()

    business.restore(conflicting_business_exists=False)

    assert business.is_deleted is False
    assert business.is_active is True
    assert business.deleted_at is None


def test_restore_requires_deleted_business():
    business = make_business()

    with pytest.raises(InvalidStateError) as exc_info:
        business.restore(conflicting_business_exists=False)

    assert exc_info.value.code == "BUSINESS_NOT_DELETED"


def test_restore_blocked_by_name_conflict():
    business = make_business()
    business.delete()

    with pytest.raises(ConflictError) as exc_info:
        business.restore(conflicting_business_exists=True)

    assert exc_info.value.code == "BUSINESS_NAME_TAKEN"
    assert business.is_deleted is True
    assert business.is_active is False
