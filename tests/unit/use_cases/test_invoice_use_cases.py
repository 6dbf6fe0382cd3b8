from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.use_cases.invoices import (
    AddInvoiceItemUseCase,
    ApplyPaymentUseCase,
    CreateInvoiceUseCase,
    ListOverdueInvoicesUseCase,
    RemoveInvoiceItemUseCase,
    SendInvoiceUseCase,
    VoidInvoiceUseCase,
)
from src.domain.entities import Business, Client, Invoice, InvoiceStatus, PaymentMethod, User
from src.domain.facts import InvoicePaid, InvoiceSent, PaymentApplied
from src.domain.permissions import PermissionName


@pytest.fixture
def owner():
    return User.register("owner@acme.com", "hashed")


@pytest.fixture
def business(owner):
    return Business.create("Acme", owner.id, "US")


@pytest.fixture
def client(business):
    return Client.create(business.id, "Globex", email="ap@globex.com")


@pytest.fixture
def invoice(business, client, now):
    return Invoice.create(business.id, client.id, "202403001", "USD", now=now)


@pytest.fixture
def uow(mock_uow, owner, business, client, invoice, grant):
    grant(owner.id, business)
    mock_uow.clients.get_by_id = AsyncMock(return_value=client)
    mock_uow.invoices.get_by_id = AsyncMock(return_value=invoice)
    mock_uow.invoices.number_exists = AsyncMock(return_value=False)
    mock_uow.invoices.get_numbers_with_prefix = AsyncMock(return_value=[])
    mock_uow.invoices.create = AsyncMock(side_effect=lambda i: i)
    mock_uow.invoices.update = AsyncMock(side_effect=lambda i: i)
    return mock_uow


# ============================================================================
# Create
# ============================================================================


@pytest.mark.asyncio
async def test_create_invoice_generates_number(uow, owner, business, client, clock, now):
    # Arrange
    uow.invoices.get_numbers_with_prefix.return_value = ["202403007"]

    # Act
    result = await CreateInvoiceUseCase(uow, clock=clock).execute(
        owner.id, business.id, client.id, "usd"
    )

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.invoice_number == "202403008"
    assert response.status == "draft"
    assert response.currency == "USD"
    assert response.total == Decimal("0.00")
    assert response.due_date == (now + timedelta(days=30)).isoformat()
    uow.invoices.create.assert_called_once()
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_invoice_copies_business_tax_rate(uow, owner, business, client):
    business.update_tax_rate(Decimal("0.2"))

    result = await CreateInvoiceUseCase(uow).execute(
        owner.id, business.id, client.id, "EUR", invoice_number="INV-1"
    )

    assert result.is_ok()
    assert result.value.tax_rate == Decimal("0.2")
    uow.invoices.number_exists.assert_called_once_with(business.id, "INV-1")


@pytest.mark.asyncio
async def test_create_invoice_number_must_be_unique(uow, owner, business, client):
    uow.invoices.number_exists.return_value = True

    result = await CreateInvoiceUseCase(uow).execute(
        owner.id, business.id, client.id, "USD", invoice_number="INV-1"
    )

    assert result.is_err()
    assert result.error.code == "INVOICE_NUMBER_TAKEN"
    uow.invoices.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_invoice_for_inactive_business(uow, owner, business, client):
    business.deactivate()

    result = await CreateInvoiceUseCase(uow).execute(owner.id, business.id, client.id, "USD")

    assert result.is_err()
    assert result.error.code == "BUSINESS_INACTIVE"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_invoice_for_foreign_client(uow, owner, business):
    uow.clients.get_by_id.return_value = Client.create(uuid4(), "Initech")

    result = await CreateInvoiceUseCase(uow).execute(owner.id, business.id, uuid4(), "USD")

    assert result.is_err()
    assert result.error.code == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_editor_can_create_but_not_send(uow, owner, business, client, invoice, grant):
    # Arrange
    grant(
        owner.id,
        business,
        {
            PermissionName.invoices_view.value,
            PermissionName.invoices_create.value,
            PermissionName.invoices_edit.value,
        },
        role_name="Editor",
    )
    invoice.add_item("Consulting", 1, Decimal("100.00"))

    # Act
    created = await CreateInvoiceUseCase(uow).execute(owner.id, business.id, client.id, "USD")
    sent = await SendInvoiceUseCase(uow).execute(owner.id, business.id, invoice.id)

    # Assert
    assert created.is_ok()
    assert sent.is_err()
    assert sent.error.code == "INSUFFICIENT_PERMISSION"
    assert invoice.status == InvoiceStatus.draft


# ============================================================================
# Items
# ============================================================================


@pytest.mark.asyncio
async def test_add_item_updates_totals(uow, owner, business, invoice):
    result = await AddInvoiceItemUseCase(uow).execute(
        owner.id, business.id, invoice.id, "Consulting", Decimal("2"), Decimal("100.00"), "hour"
    )

    assert result.is_ok()
    assert result.value.sub_total == Decimal("200.00")
    assert result.value.tax == Decimal("20.00")
    assert result.value.total == Decimal("220.00")
    assert len(result.value.items) == 1
    uow.invoices.update.assert_called_once_with(invoice)
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_add_item_to_sent_invoice_fails(uow, owner, business, invoice):
    invoice.add_item("Consulting", 1, Decimal("100.00"))
    invoice.mark_as_sent()

    result = await AddInvoiceItemUseCase(uow).execute(
        owner.id, business.id, invoice.id, "Extra", Decimal("1"), Decimal("5.00")
    )

    assert result.is_err()
    assert result.error.code == "INVOICE_NOT_DRAFT"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_invoice_of_other_business_is_not_found(uow, owner, business, client, now):
    uow.invoices.get_by_id.return_value = Invoice.create(uuid4(), client.id, "1", "USD", now=now)

    result = await AddInvoiceItemUseCase(uow).execute(
        owner.id, business.id, uuid4(), "Consulting", Decimal("1"), Decimal("1.00")
    )

    assert result.is_err()
    assert result.error.code == "INVOICE_NOT_FOUND"


@pytest.mark.asyncio
async def test_remove_unknown_item_commits_nothing(uow, owner, business, invoice):
    invoice.add_item("Consulting", 1, Decimal("100.00"))

    result = await RemoveInvoiceItemUseCase(uow).execute(
        owner.id, business.id, invoice.id, uuid4()
    )

    assert result.is_ok()
    assert result.value.total == Decimal("110.00")
    uow.commit.assert_not_called()


# ============================================================================
# Send / pay / void
# ============================================================================


@pytest.mark.asyncio
async def test_send_publishes_fact_once(uow, owner, business, invoice, dispatcher, clock):
    # Arrange
    invoice.add_item("Consulting", 1, Decimal("100.00"))
    use_case = SendInvoiceUseCase(uow, dispatcher=dispatcher, clock=clock)

    # Act
    first = await use_case.execute(owner.id, business.id, invoice.id)
    second = await use_case.execute(owner.id, business.id, invoice.id)

    # Assert
    assert first.is_ok() and second.is_ok()
    assert first.value.status == "sent"
    assert dispatcher.publish.call_count == 1
    fact = dispatcher.publish.call_args.args[0][0]
    assert isinstance(fact, InvoiceSent)
    assert fact.total == Decimal("110.00")
    assert uow.commit.call_count == 1


@pytest.mark.asyncio
async def test_send_empty_invoice_fails(uow, owner, business, invoice):
    result = await SendInvoiceUseCase(uow).execute(owner.id, business.id, invoice.id)

    assert result.is_err()
    assert result.error.code == "INVOICE_HAS_NO_ITEMS"


@pytest.mark.asyncio
async def test_full_payment_marks_paid(uow, owner, business, invoice, dispatcher, clock):
    # Arrange
    invoice.add_item("Consulting", 2, Decimal("100.00"))
    use_case = ApplyPaymentUseCase(uow, dispatcher=dispatcher, clock=clock)

    # Act
    result = await use_case.execute(
        owner.id, business.id, invoice.id, Decimal("220.00"), PaymentMethod.stripe, "pi_1"
    )

    # Assert
    assert result.is_ok()
    assert result.value.invoice.status == "paid"
    assert result.value.invoice.balance_due == Decimal("0.00")
    assert result.value.transaction.amount == Decimal("220.00")
    assert result.value.transaction.method == "stripe"
    uow.commit.assert_called_once()

    facts = dispatcher.publish.call_args.args[0]
    assert [type(f) for f in facts] == [PaymentApplied, InvoicePaid]


@pytest.mark.asyncio
async def test_partial_payment_keeps_invoice_open(uow, owner, business, invoice, dispatcher, clock):
    invoice.add_item("Consulting", 2, Decimal("100.00"))
    invoice.mark_as_sent()

    result = await ApplyPaymentUseCase(uow, dispatcher=dispatcher, clock=clock).execute(
        owner.id, business.id, invoice.id, Decimal("20.00"), PaymentMethod.cash
    )

    assert result.is_ok()
    assert result.value.invoice.status == "sent"
    assert result.value.invoice.balance_due == Decimal("200.00")
    facts = dispatcher.publish.call_args.args[0]
    assert [type(f) for f in facts] == [PaymentApplied]


@pytest.mark.asyncio
async def test_payment_on_void_invoice_fails(uow, owner, business, invoice):
    invoice.void()

    result = await ApplyPaymentUseCase(uow).execute(
        owner.id, business.id, invoice.id, Decimal("10.00"), PaymentMethod.cash
    )

    assert result.is_err()
    assert result.error.code == "INVOICE_CLOSED"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_void_paid_invoice_fails(uow, owner, business, invoice):
    invoice.add_item("Consulting", 1, Decimal("100.00"))
    invoice.apply_payment(Decimal("110.00"), PaymentMethod.cash)

    result = await VoidInvoiceUseCase(uow).execute(owner.id, business.id, invoice.id)

    assert result.is_err()
    assert result.error.code == "INVOICE_ALREADY_PAID"
    assert invoice.status == InvoiceStatus.paid


@pytest.mark.asyncio
async def test_void_sent_invoice(uow, owner, business, invoice):
    invoice.add_item("Consulting", 1, Decimal("100.00"))
    invoice.mark_as_sent()

    result = await VoidInvoiceUseCase(uow).execute(owner.id, business.id, invoice.id)

    assert result.is_ok()
    assert result.value.status == "void"


@pytest.mark.asyncio
async def test_mutations_refused_for_deleted_business(uow, owner, business, invoice):
    business.delete()

    result = await VoidInvoiceUseCase(uow).execute(owner.id, business.id, invoice.id)

    assert result.is_err()
    assert result.error.code == "BUSINESS_INACTIVE"
    assert invoice.status == InvoiceStatus.draft


@pytest.mark.asyncio
async def test_list_overdue(uow, owner, business, invoice, clock, now):
    # Arrange
    invoice.add_item("Consulting", 1, Decimal("100.00"))
    invoice.mark_as_sent()
    clock.advance(timedelta(days=31))
    uow.invoices.get_overdue = AsyncMock(return_value=[invoice])

    # Act
    result = await ListOverdueInvoicesUseCase(uow, clock=clock).execute(owner.id, business.id)

    # Assert
    assert result.is_ok()
    assert [i.status for i in result.value.invoices] == ["overdue"]
    uow.invoices.get_overdue.assert_called_once_with(business.id, now + timedelta(days=31))
