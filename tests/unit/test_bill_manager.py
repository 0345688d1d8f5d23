"""
Unit Tests for Bill Manager builders
"""

from datetime import datetime, timezone

import pytest

from mpesa import BuilderError, Invoice, InvoiceItem, SendRemindersType, ValidationError


def _invoice(reference: str) -> Invoice:
    return Invoice(
        amount=1000,
        account_reference="John Doe",
        billed_full_name="John Doe",
        billed_period="August 2021",
        billed_phone_number="0712345678",
        due_date=datetime(2023, 10, 1, tzinfo=timezone.utc),
        external_reference=reference,
        invoice_name="Jentrys",
    )


class TestOnboard:

    @pytest.fixture
    def builder(self, client):
        return (
            client.onboard()
            .callback_url("https://testdomain.com/true")
            .email("email@test.com")
            .logo("https://file.domain/file.png")
            .official_contact("0712345678")
            .short_code("600496")
        )

    def test_body(self, builder):
        assert builder.to_request().body == {
            "callbackUrl": "https://testdomain.com/true",
            "email": "email@test.com",
            "logo": "https://file.domain/file.png",
            "officialContact": "0712345678",
            "sendReminders": "Disable",
            "shortcode": "600496",
        }

    def test_send_reminders(self, builder):
        assert builder.send_reminders("Enable").build().send_reminders is SendRemindersType.ENABLE

    @pytest.mark.parametrize("missing", ["callback_url", "email", "logo", "official_contact", "short_code"])
    def test_required_fields(self, client, missing):
        builder = client.onboard()
        values = {
            "callback_url": "https://testdomain.com/true",
            "email": "email@test.com",
            "logo": "https://file.domain/file.png",
            "official_contact": "0712345678",
            "short_code": "600496",
        }
        for name, value in values.items():
            if name != missing:
                getattr(builder, name)(value)

        with pytest.raises(BuilderError) as exc_info:
            builder.build()

        assert exc_info.value.field_name == missing

    def test_modify_sends_only_set_fields(self, client):
        body = client.onboard_modify().short_code("600496").send_reminders(SendRemindersType.ENABLE).to_request().body

        assert body == {"shortcode": "600496", "sendReminders": "Enable"}

    def test_modify_with_nothing_set(self, client):
        assert client.onboard_modify().to_request().body == {}


class TestInvoices:

    @pytest.fixture
    def builder(self, client):
        return (
            client.single_invoice()
            .amount(1000)
            .account_reference("John Doe")
            .billed_full_name("John Doe")
            .billed_period("August 2021")
            .billed_phone_number("0712345678")
            .due_date(datetime(2023, 10, 1, tzinfo=timezone.utc))
            .external_reference("INV-001")
            .invoice_name("Jentrys")
        )

    def test_single_invoice_body(self, builder):
        body = builder.to_request().body

        assert body["externalReference"] == "INV-001"
        assert body["dueDate"] == "2023-10-01T00:00:00+00:00"
        assert "invoiceItems" not in body

    def test_invoice_items(self, builder):
        body = builder.invoice_item("Water", 700).invoice_item("Electricity", 300).to_request().body

        assert body["invoiceItems"] == [
            {"itemName": "Water", "amount": 700},
            {"itemName": "Electricity", "amount": 300},
        ]

    def test_due_date_from_iso_string(self, builder):
        assert builder.due_date("2023-10-01T12:00:00").build().due_date == datetime(2023, 10, 1, 12, 0)

    def test_due_date_rejects_garbage(self, builder):
        with pytest.raises(ValidationError, match="due_date"):
            builder.due_date("next tuesday")

    def test_missing_due_date(self, client):
        builder = (
            client.single_invoice()
            .amount(1000)
            .account_reference("John Doe")
            .billed_full_name("John Doe")
            .billed_period("August 2021")
            .billed_phone_number("0712345678")
            .external_reference("INV-001")
            .invoice_name("Jentrys")
        )

        with pytest.raises(BuilderError, match="due_date"):
            builder.build()

    def test_bulk_invoice_is_a_json_array(self, client):
        body = (
            client.bulk_invoice()
            .invoice(_invoice("INV-001"))
            .invoices([_invoice("INV-002"), _invoice("INV-003")])
            .to_request()
            .body
        )

        assert [item["externalReference"] for item in body] == ["INV-002", "INV-003"]

    def test_bulk_invoice_accumulates(self, client):
        body = client.bulk_invoice().invoice(_invoice("INV-001")).invoice(_invoice("INV-002")).to_request().body

        assert len(body) == 2

    def test_bulk_invoice_requires_an_invoice(self, client, http_session):
        with pytest.raises(BuilderError) as exc_info:
            client.bulk_invoice().send()

        assert exc_info.value.field_name == "invoices"
        http_session.get.assert_not_called()

    def test_invoice_item_model(self):
        assert InvoiceItem("Water", 700).item_name == "Water"


class TestCancellation:

    def test_cancel_single_invoice(self, client):
        assert client.cancel_single_invoice().external_reference("INV-001").to_request().body == {
            "externalReference": "INV-001",
        }

    def test_cancel_single_invoice_missing_reference(self, client):
        with pytest.raises(BuilderError, match="external_reference"):
            client.cancel_single_invoice().build()

    def test_cancel_bulk_invoices(self, client):
        body = (
            client.cancel_bulk_invoices()
            .external_reference("INV-001")
            .external_reference("INV-002")
            .to_request()
            .body
        )

        assert body == [{"externalReference": "INV-001"}, {"externalReference": "INV-002"}]

    def test_cancel_bulk_invoices_requires_a_reference(self, client):
        with pytest.raises(BuilderError) as exc_info:
            client.cancel_bulk_invoices().external_references([]).build()

        assert exc_info.value.field_name == "external_references"


class TestReconciliation:

    def test_body(self, client):
        body = (
            client.reconciliation()
            .account_reference("John Doe")
            .date_created(datetime(2023, 10, 1, tzinfo=timezone.utc))
            .msisdn("0712345678")
            .paid_amount(1000)
            .short_code("600496")
            .transaction_id("OEI2AK4Q16")
            .to_request()
            .body
        )

        assert body == {
            "accountReference": "John Doe",
            "dateCreated": "2023-10-01T00:00:00+00:00",
            "msisdn": "0712345678",
            "paidAmount": 1000,
            "shortCode": "600496",
            "transactionId": "OEI2AK4Q16",
        }

    def test_missing_transaction_id(self, client):
        builder = (
            client.reconciliation()
            .account_reference("John Doe")
            .date_created(datetime(2023, 10, 1, tzinfo=timezone.utc))
            .msisdn("0712345678")
            .paid_amount(1000)
            .short_code("600496")
        )

        with pytest.raises(BuilderError, match="transaction_id"):
            builder.build()
