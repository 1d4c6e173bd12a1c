"""Tests for notification dispatch."""

import asyncio

import pytest

from restocafe.domain.notifications import (
    BookingSummary,
    EmailMessage,
    OrderLine,
    OrderSummary,
    SmsMessage,
)
from restocafe.services.notifications import (
    NotificationDeliveryError,
    NotificationDispatcher,
    NotificationNotConfiguredError,
    NotificationService,
)
from tests.conftest import FailingProvider, RecordingProvider

EMAIL = EmailMessage(to="guest@example.com", subject="Hi", html="<p>Hi</p>")
ORDER = OrderSummary(
    order_id="ORD-42",
    items=(OrderLine(name="Veg Biryani", quantity=2, price=249),),
    total=498,
    estimated_time="30 minutes",
)


def test_dispatcher_uses_first_provider() -> None:
    primary = RecordingProvider(name="primary")
    backup = RecordingProvider(name="backup")
    dispatcher = NotificationDispatcher("email", [primary, backup])

    receipt = asyncio.run(dispatcher.send(EMAIL))

    assert receipt.provider == "primary"
    assert primary.sent == [EMAIL]
    assert backup.sent == []


def test_dispatcher_falls_back_on_failure() -> None:
    failing = FailingProvider(name="resend")
    backup = RecordingProvider(name="sendgrid")
    dispatcher = NotificationDispatcher("email", [failing, backup])

    receipt = asyncio.run(dispatcher.send(EMAIL))

    assert receipt.provider == "sendgrid"
    assert failing.attempts == 1


def test_dispatcher_aggregates_failures() -> None:
    dispatcher = NotificationDispatcher(
        "sms", [FailingProvider(name="twilio"), FailingProvider(name="fast2sms")]
    )

    with pytest.raises(NotificationDeliveryError) as excinfo:
        asyncio.run(dispatcher.send(SmsMessage(to="+919876543210", body="Hi")))

    assert [name for name, _ in excinfo.value.failures] == ["twilio", "fast2sms"]
    assert "twilio is down" in str(excinfo.value)
    assert excinfo.value.channel == "sms"


def test_dispatcher_without_providers() -> None:
    dispatcher = NotificationDispatcher("whatsapp", [])

    assert not dispatcher.configured
    with pytest.raises(NotificationNotConfiguredError):
        asyncio.run(dispatcher.send(EMAIL))


def _service(
    email: list | None = None, sms: list | None = None
) -> NotificationService:
    return NotificationService(
        email=NotificationDispatcher("email", email or []),
        sms=NotificationDispatcher("sms", sms or []),
        whatsapp=NotificationDispatcher("whatsapp", []),
        restaurant_name="Vilas's RestoCafe",
    )


def test_send_sms_formats_number() -> None:
    provider = RecordingProvider(name="sms")
    service = _service(sms=[provider])

    asyncio.run(service.send_sms(SmsMessage(to="+919876543210", body="Hello")))

    assert provider.sent == [SmsMessage(to="+91 9876543210", body="Hello")]


def test_order_confirmation_reports_each_channel() -> None:
    email_provider = RecordingProvider(name="email")
    service = _service(email=[email_provider], sms=[FailingProvider(name="twilio")])

    results = asyncio.run(
        service.send_order_confirmation(
            ORDER, email="guest@example.com", phone="+919876543210"
        )
    )

    assert results == {"email": True, "sms": False}
    sent = email_provider.sent[0]
    assert isinstance(sent, EmailMessage)
    assert sent.subject == "Order Confirmation #ORD-42 - Vilas's RestoCafe"


def test_order_confirmation_skips_missing_contacts() -> None:
    service = _service(email=[RecordingProvider()])

    results = asyncio.run(service.send_order_confirmation(ORDER, email="a@b.c"))

    assert results == {"email": True}


def test_status_summary() -> None:
    service = _service(email=[RecordingProvider(name="resend")])

    status = service.status()

    assert status["providers"] == {"email": ["resend"], "sms": [], "whatsapp": []}
    assert status["summary"] == {
        "total": 1,
        "configured": ["email"],
        "missing": ["sms", "whatsapp", "push"],
    }


BOOKING = BookingSummary(
    booking_id="BK-1",
    customer_name="Ravi",
    date="2026-10-24",
    time="19:30",
    guests=2,
)


def test_booking_confirmation_reports_each_channel() -> None:
    email_provider = RecordingProvider(name="email")
    sms_provider = RecordingProvider(name="sms")
    service = _service(email=[email_provider], sms=[sms_provider])

    results = asyncio.run(
        service.send_booking_confirmation(
            BOOKING, email="ravi@example.com", phone="+919876543210"
        )
    )

    assert results == {"email": True, "sms": True}
    assert email_provider.sent[0].subject.startswith("Table Booking Confirmed #BK-1")
    assert sms_provider.sent[0].to == "+91 9876543210"


def test_booking_confirmation_survives_channel_failure() -> None:
    service = _service(sms=[FailingProvider(name="twilio")])

    results = asyncio.run(
        service.send_booking_confirmation(BOOKING, email="a@b.c", phone="+91 1")
    )

    assert results == {"email": False, "sms": False}


def test_status_update_uses_status_vocabulary() -> None:
    sms_provider = RecordingProvider(name="sms")
    service = _service(sms=[sms_provider])

    results = asyncio.run(
        service.send_status_update("ORD-42", "ready", phone="+919876543210")
    )

    assert results == {"sms": True}
    assert "Your order is ready for pickup" in sms_provider.sent[0].body


def test_promotion_counts_deliveries() -> None:
    email_provider = RecordingProvider(name="email")
    sms_provider = RecordingProvider(name="sms")
    service = _service(email=[email_provider], sms=[sms_provider])

    sent = asyncio.run(
        service.send_promotion(
            "Weekend", "<p>Half off</p>", ["a@example.com", "b@example.com"], ["+91 1"]
        )
    )

    assert sent == {"email": 2, "sms": 1}
    assert email_provider.sent[0].text == "Half off"
    assert sms_provider.sent[0].body == (
        "RestoCafe: Half off. Reply STOP to unsubscribe."
    )
