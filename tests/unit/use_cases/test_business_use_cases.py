from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.use_cases.businesses import (
    CreateBusinessUseCase,
    DeleteBusinessUseCase,
    RestoreBusinessUseCase,
    UpdateBusinessDetailsUseCase,
    UpdateBusinessTaxRateUseCase,
)
from src.domain.entities import Business, Role, TeamMember, User
from src.domain.facts import BusinessCreated, BusinessDeleted, BusinessRestored
from src.domain.permissions import PermissionName


@pytest.fixture
def owner():
    return User.register("owner@acme.com", "hashed", "Olivia Owner")


@pytest.fixture
def uow(mock_uow, owner):
    mock_uow.users.get_by_id = AsyncMock(return_value=owner)
    mock_uow.businesses.exists_active_with_name = AsyncMock(return_value=False)
    mock_uow.businesses.create = AsyncMock(side_effect=lambda b: b)
    mock_uow.businesses.update = AsyncMock(side_effect=lambda b: b)
    mock_uow.roles.get_by_name = AsyncMock(return_value=Role.create("Owner"))
    mock_uow.team_members.create = AsyncMock(side_effect=lambda m: m)
    return mock_uow


@pytest.mark.asyncio
async def test_create_business_makes_creator_owner(uow, owner, dispatcher):
    # Arrange
    use_case = CreateBusinessUseCase(uow, dispatcher=dispatcher)

    # Act
    result = await use_case.execute(owner.id, "Acme", "US")

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.name == "Acme"
    assert response.country == "US"
    assert response.owner_id == str(owner.id)
    assert response.is_active is True
    assert response.tax_rate == "0.10"

    member = uow.team_members.create.call_args.args[0]
    assert isinstance(member, TeamMember)
    assert member.user_id == owner.id
    assert str(member.business_id) == response.id
    uow.commit.assert_called_once()

    facts = dispatcher.publish.call_args.args[0]
    assert len(facts) == 1
    assert isinstance(facts[0], BusinessCreated)
    assert facts[0].business_name == "Acme"


@pytest.mark.asyncio
async def test_create_business_provisions_owner_role_when_missing(uow, owner):
    # Arrange
    uow.roles.get_by_name = AsyncMock(return_value=None)
    uow.roles.create = AsyncMock(side_effect=lambda r: r)
    uow.permissions.get_all = AsyncMock(return_value=[])
    uow.permissions.create = AsyncMock(side_effect=lambda p: p)

    # Act
    result = await CreateBusinessUseCase(uow).execute(owner.id, "Acme", "US")

    # Assert
    assert result.is_ok()
    owner_role = uow.roles.create.call_args.args[0]
    assert owner_role.name == "Owner"
    assert owner_role.has_permission(PermissionName.business_delete.value)
    member = uow.team_members.create.call_args.args[0]
    assert member.role_id == owner_role.id


@pytest.mark.asyncio
async def test_create_business_uses_configured_tax_rate(uow, owner):
    result = await CreateBusinessUseCase(uow, default_tax_rate=Decimal("0.2")).execute(
        owner.id, "Acme", "US"
    )

    assert result.is_ok()
    assert result.value.tax_rate == "0.2"


@pytest.mark.asyncio
async def test_create_business_duplicate_name_fails(uow, owner, dispatcher):
    # Arrange
    uow.businesses.exists_active_with_name.return_value = True

    # Act
    result = await CreateBusinessUseCase(uow, dispatcher=dispatcher).execute(
        owner.id, "Acme", "US"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "BUSINESS_NAME_TAKEN"
    uow.businesses.exists_active_with_name.assert_called_once_with("Acme", "US")
    uow.businesses.create.assert_not_called()
    uow.commit.assert_not_called()
    dispatcher.publish.assert_not_called()


@pytest.mark.asyncio
async def test_create_business_requires_name(uow, owner):
    result = await CreateBusinessUseCase(uow).execute(owner.id, "", "US")

    assert result.is_err()
    assert result.error.code == "BUSINESS_NAME_REQUIRED"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_business_unknown_user(uow):
    uow.users.get_by_id.return_value = None

    result = await CreateBusinessUseCase(uow).execute(uuid4(), "Acme", "US")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_details_rechecks_name(uow, owner, grant):
    # Arrange
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)
    uow.businesses.exists_active_with_name.return_value = True

    # Act
    result = await UpdateBusinessDetailsUseCase(uow).execute(owner.id, business.id, name="Globex")

    # Assert
    assert result.is_err()
    assert result.error.code == "BUSINESS_NAME_TAKEN"
    assert business.name == "Acme"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_details_same_name_with_spaces_skips_check(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)

    result = await UpdateBusinessDetailsUseCase(uow).execute(owner.id, business.id, name=" Acme ")

    assert result.is_ok()
    assert business.name == "Acme"
    uow.businesses.exists_active_with_name.assert_not_called()


@pytest.mark.asyncio
async def test_update_tax_rate(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)

    result = await UpdateBusinessTaxRateUseCase(uow).execute(owner.id, business.id, Decimal("0.2"))

    assert result.is_ok()
    assert business.tax_rate == Decimal("0.2")
    uow.businesses.update.assert_called_once_with(business)
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_tax_rate_rejects_negative_rate(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)

    result = await UpdateBusinessTaxRateUseCase(uow).execute(owner.id, business.id, Decimal("-1"))

    assert result.is_err()
    assert result.error.code == "INVALID_TAX_RATE"
    assert business.tax_rate == Decimal("0.10")
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_details_requires_business_manage(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(
        owner.id,
        business,
        {PermissionName.business_view.value, PermissionName.invoices_view.value},
        role_name="Accountant",
    )

    result = await UpdateBusinessDetailsUseCase(uow).execute(owner.id, business.id, name="Globex")

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"


@pytest.mark.asyncio
async def test_delete_business_is_soft(uow, owner, grant, clock, now, dispatcher):
    # Arrange
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)

    # Act
    result = await DeleteBusinessUseCase(uow, dispatcher=dispatcher, clock=clock).execute(
        owner.id, business.id
    )

    # Assert
    assert result.is_ok()
    assert result.value.is_deleted is True
    assert result.value.is_active is False
    assert business.deleted_at == now
    uow.businesses.update.assert_called_once_with(business)
    uow.commit.assert_called_once()
    assert isinstance(dispatcher.publish.call_args.args[0][0], BusinessDeleted)


@pytest.mark.asyncio
async def test_delete_business_requires_business_delete(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business, {PermissionName.business_manage.value}, role_name="Admin")

    result = await DeleteBusinessUseCase(uow).execute(owner.id, business.id)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"
    assert business.is_deleted is False


@pytest.mark.asyncio
async def test_missing_business_is_not_found(uow, owner):
    uow.businesses.get_by_id = AsyncMock(return_value=None)

    result = await DeleteBusinessUseCase(uow).execute(owner.id, uuid4())

    assert result.is_err()
    assert result.error.code == "BUSINESS_NOT_FOUND"


@pytest.mark.asyncio
async def test_restore_business(uow, owner, grant, dispatcher):
    # Arrange
    business = Business.create("Acme", owner.id, "US")
    business.delete()
    grant(owner.id, business)

    # Act
    result = await RestoreBusinessUseCase(uow, dispatcher=dispatcher).execute(
        owner.id, business.id
    )

    # Assert
    assert result.is_ok()
    assert result.value.is_deleted is False
    assert result.value.is_active is True
    assert result.value.deleted_at is None
    uow.businesses.get_by_id.assert_called_once_with(business.id, include_deleted=True)
    uow.businesses.exists_active_with_name.assert_called_once_with(
        "Acme", "US", exclude_id=business.id
    )
    uow.commit.assert_called_once()
    assert isinstance(dispatcher.publish.call_args.args[0][0], BusinessRestored)


@pytest.mark.asyncio
async def test_restore_blocked_when_name_taken_again(uow, owner, grant):
    # Arrange
    business = Business.create("Acme", owner.id, "US")
    business.delete()
    grant(owner.id, business)
    uow.businesses.exists_active_with_name.return_value = True

    # Act
    result = await RestoreBusinessUseCase(uow).execute(owner.id, business.id)

    # Assert
    assert result.is_err()
    assert result.error.code == "BUSINESS_NAME_TAKEN"
    assert business.is_deleted is True
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_restore_active_business_fails(uow, owner, grant):
    business = Business.create("Acme", owner.id, "US")
    grant(owner.id, business)

    result = await RestoreBusinessUseCase(uow).execute(owner.id, business.id)

    assert result.is_err()
    assert result.error.code == "BUSINESS_NOT_DELETED"
