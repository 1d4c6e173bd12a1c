"""Tests for notification content."""

import pytest

from restocafe.domain.notifications import BookingSummary, OrderLine, OrderSummary
from restocafe.services.messages import (
    compose_booking_confirmation_email,
    compose_booking_confirmation_sms,
    compose_order_confirmation_email,
    compose_order_confirmation_sms,
    compose_promotional_email,
    compose_promotional_sms,
    compose_status_update_email,
    compose_status_update_sms,
    format_amount,
    format_phone_number,
    validate_phone_number,
)

ORDER = OrderSummary(
    order_id="ORD-7",
    items=(
        OrderLine(name="Margherita Pizza", quantity=2, price=299),
        OrderLine(name="Coke 1.5L", quantity=1, price=99),
    ),
    total=697,
    estimated_time="25 minutes",
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("+919876543210", "+91 9876543210"),
        ("+91 98765 43210", "+91 9876543210"),
        ("9876543210", "9876543210"),
    ],
)
def test_format_phone_number(raw: str, expected: str) -> None:
    assert format_phone_number(raw) == expected


def test_validate_phone_number() -> None:
    assert validate_phone_number("+91 9876543210")
    assert validate_phone_number("(555) 123-4567")
    assert not validate_phone_number("call me maybe")


def test_format_amount() -> None:
    assert format_amount(697) == "697"
    assert format_amount(239.2) == "239.2"


def test_order_confirmation_email() -> None:
    message = compose_order_confirmation_email("guest@example.com", ORDER, "RestoCafe")

    assert message.subject == "Order Confirmation #ORD-7 - RestoCafe"
    assert "<li>Margherita Pizza x2 - ₹598</li>" in message.html
    assert message.text is not None
    assert "Total: ₹697" in message.text


def test_status_update_email() -> None:
    message = compose_status_update_email("guest@example.com", "ORD-7", "ready", "R")

    assert message.subject == "Order ORD-7 Status Update - R"
    assert "<strong>ready</strong>" in message.html


def test_promotional_email_strips_html_for_text() -> None:
    message = compose_promotional_email(
        "guest@example.com", "Weekend", "<p>Half <b>off</b></p>", "RestoCafe"
    )

    assert message.text == "Half off"
    assert message.subject == "Weekend - RestoCafe"


def test_order_confirmation_sms() -> None:
    sms = compose_order_confirmation_sms("+919876543210", ORDER)

    assert sms.body.startswith("RestoCafe: Your order #ORD-7 has been confirmed!")
    assert "restocafe.com/orders/ORD-7" in sms.body


def test_status_update_sms() -> None:
    known = compose_status_update_sms("+91 1", "ORD-7", "out_for_delivery")
    unknown = compose_status_update_sms("+91 1", "ORD-7", "lost")

    assert "Your order is out for delivery" in known.body
    assert "Status updated to lost" in unknown.body


def test_promotional_sms() -> None:
    sms = compose_promotional_sms("+91 1", "Free dessert today")

    assert sms.body == "RestoCafe: Free dessert today. Reply STOP to unsubscribe."


DELIVERY = OrderSummary(
    order_id="ORD-8",
    items=(OrderLine(name="Veg Biryani", quantity=1, price=249),),
    total=249,
    customer_name="Asha",
    order_type="delivery",
    address="12 MG Road, Bengaluru",
)
BOOKING = BookingSummary(
    booking_id="BK-3",
    customer_name="Ravi",
    date="2026-10-24",
    time="19:30",
    guests=4,
    table_number="T7",
    special_requests="Window seat",
)


def test_delivery_order_email_carries_customer_details() -> None:
    message = compose_order_confirmation_email("asha@example.com", DELIVERY, "R")

    assert "Thank you, Asha!" in message.html
    assert "<strong>Order Type:</strong> Delivery" in message.html
    assert "12 MG Road, Bengaluru" in message.html
    assert "Estimated Time" not in message.html
    assert message.text is not None
    assert "Delivery Address: 12 MG Road, Bengaluru" in message.text


def test_pickup_order_hides_address() -> None:
    message = compose_order_confirmation_email("guest@example.com", ORDER, "R")
    sms = compose_order_confirmation_sms("+91 1", ORDER)

    assert "<strong>Order Type:</strong> Pickup" in message.html
    assert "Delivery Address" not in message.html
    assert "Type: Pickup. Total: ₹697. Est. Time: 25 minutes." in sms.body


def test_delivery_order_sms_without_estimate() -> None:
    sms = compose_order_confirmation_sms("+91 1", DELIVERY)

    assert "Type: Delivery." in sms.body
    assert "Est. Time" not in sms.body


def test_booking_confirmation_email() -> None:
    message = compose_booking_confirmation_email("ravi@example.com", BOOKING, "Cafe")

    assert message.subject == "Table Booking Confirmed #BK-3 - Cafe"
    assert "Hi Ravi!" in message.html
    assert "<strong>Number of Guests:</strong> 4" in message.html
    assert "<strong>Table Number:</strong> T7" in message.html
    assert "<strong>Special Requests:</strong> Window seat" in message.html
    assert message.text is not None
    assert "Number of Guests: 4" in message.text


def test_booking_confirmation_sms() -> None:
    with_table = compose_booking_confirmation_sms("+91 1", BOOKING)
    without_table = compose_booking_confirmation_sms(
        "+91 1", BookingSummary("BK-4", "Ravi", "2026-10-25", "12:00", 2)
    )

    assert with_table.body == (
        "RestoCafe: Table booked! Booking #BK-3 on 2026-10-24 at 19:30 for 4 "
        "guests. Table: T7. Please arrive 10 mins early. See you soon!"
    )
    assert "Table:" not in without_table.body
