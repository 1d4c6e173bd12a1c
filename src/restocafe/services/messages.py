"""Customer-facing notification content."""

import html
import re

from restocafe.domain.notifications import (
    BookingSummary,
    EmailMessage,
    OrderSummary,
    SmsMessage,
)

SMS_BRAND = "RestoCafe"
TRACKING_URL = "restocafe.com/orders"
SUPPORT_EMAIL = "support@restocafe.com"
ARRIVAL_NOTE = (
    "Please arrive 10 minutes before your booking time. "
    "Your table will be held for 15 minutes."
)
_EMAIL_WRAPPER = (
    '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
)

ORDER_STATUS_MESSAGES = {
    "confirmed": "Your order has been confirmed",
    "preparing": "Your order is being prepared",
    "ready": "Your order is ready for pickup",
    "out_for_delivery": "Your order is out for delivery",
    "delivered": "Your order has been delivered",
}

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_COUNTRY_CODE_SPLIT = (
    re.compile(r"^(\+\d{1,4}?)(\d{10})$"),
    re.compile(r"^(\+\d{1,4})(\d+)$"),
)
_PHONE_NUMBER = re.compile(
    r"^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,9}$"
)


def format_amount(value: float) -> str:
    """Render a rupee amount without trailing zero decimals."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def strip_html(content: str) -> str:
    """Drop HTML tags, keeping the text between them."""
    return _TAG.sub("", content)


def format_phone_number(phone_number: str) -> str:
    """Insert a space after the country code: +919876543210 -> +91 9876543210."""
    cleaned = _WHITESPACE.sub("", phone_number)
    if cleaned.startswith("+"):
        # Ten-digit national numbers first, otherwise the longest country code.
        for pattern in _COUNTRY_CODE_SPLIT:
            match = pattern.match(cleaned)
            if match:
                return f"{match.group(1)} {match.group(2)}"
    return cleaned


def validate_phone_number(phone_number: str) -> bool:
    """Return True for digits with an optional country code and separators."""
    return bool(_PHONE_NUMBER.match(phone_number))


def order_type_label(order: OrderSummary) -> str:
    """Return "Delivery" or "Pickup" for display."""
    return "Delivery" if order.is_delivery else "Pickup"


def compose_order_confirmation_email(
    to: str, order: OrderSummary, restaurant_name: str
) -> EmailMessage:
    """Build the order confirmation email.

    The delivery address and estimated time are only shown when known.
    """
    greeting = (
        f"Thank you, {html.escape(order.customer_name)}!"
        if order.customer_name
        else "Thank you for your order!"
    )
    details = [
        f"<p><strong>Order ID:</strong> {html.escape(order.order_id)}</p>",
        f"<p><strong>Order Type:</strong> {order_type_label(order)}</p>",
    ]
    if order.is_delivery and order.address:
        details.append(
            f"<p><strong>Delivery Address:</strong> {html.escape(order.address)}</p>"
        )
    if order.estimated_time:
        details.append(
            "<p><strong>Estimated Time:</strong> "
            f"{html.escape(order.estimated_time)}</p>"
        )
    lines = "".join(
        f"<li>{html.escape(line.name)} x{line.quantity} - "
        f"₹{format_amount(line.price * line.quantity)}</li>"
        for line in order.items
    )
    body = (
        _EMAIL_WRAPPER
        + "<h1>Order Confirmed!</h1>"
        + f"<h2>{greeting}</h2>"
        + f"<p>Your order from {html.escape(restaurant_name)} is being prepared.</p>"
        + "".join(details)
        + f"<h3>Order Items:</h3><ul>{lines}</ul>"
        + f"<p><strong>Total:</strong> ₹{format_amount(order.total)}</p>"
        + f"<p>Need help? Contact us at {SUPPORT_EMAIL}</p>"
        + "</div>"
    )
    text_lines = [
        f"Order Confirmation #{order.order_id}",
        "",
        f"Thank you{', ' + order.customer_name if order.customer_name else ''}!",
        f"Order Type: {order_type_label(order)}",
    ]
    if order.is_delivery and order.address:
        text_lines.append(f"Delivery Address: {order.address}")
    text_lines.append(f"Total: ₹{format_amount(order.total)}")
    if order.estimated_time:
        text_lines.append(f"Estimated Time: {order.estimated_time}")
    return EmailMessage(
        to=to,
        subject=f"Order Confirmation #{order.order_id} - {restaurant_name}",
        html=body,
        text="\n".join(text_lines),
    )


def compose_booking_confirmation_email(
    to: str, booking: BookingSummary, restaurant_name: str
) -> EmailMessage:
    """Build the table booking confirmation email."""
    rows = [
        ("Booking ID", booking.booking_id),
        ("Date", booking.date),
        ("Time", booking.time),
        ("Number of Guests", str(booking.guests)),
    ]
    if booking.table_number:
        rows.append(("Table Number", booking.table_number))
    if booking.special_requests:
        rows.append(("Special Requests", booking.special_requests))
    details = "".join(
        f"<p><strong>{label}:</strong> {html.escape(value)}</p>"
        for label, value in rows
    )
    body = (
        _EMAIL_WRAPPER
        + "<h1>Table Booking Confirmed!</h1>"
        + f"<h2>Hi {html.escape(booking.customer_name)}!</h2>"
        + f"<p>Your table at {html.escape(restaurant_name)} has been booked.</p>"
        + f"<h3>Booking Details:</h3>{details}"
        + f"<p><strong>Important:</strong> {ARRIVAL_NOTE}</p>"
        + f"<p>Need to modify? Contact us at {SUPPORT_EMAIL}</p>"
        + "</div>"
    )
    text = "\n".join(
        [
            "Table Booking Confirmed!",
            "",
            f"Hi {booking.customer_name},",
            "",
            *(f"{label}: {value}" for label, value in rows),
            "",
            ARRIVAL_NOTE,
        ]
    )
    return EmailMessage(
        to=to,
        subject=f"Table Booking Confirmed #{booking.booking_id} - {restaurant_name}",
        html=body,
        text=text,
    )


def compose_status_update_email(
    to: str, order_id: str, status: str, restaurant_name: str
) -> EmailMessage:
    """Build the email sent when an order moves to a new status."""
    summary = ORDER_STATUS_MESSAGES.get(status, f"Status updated to {status}")
    body = (
        _EMAIL_WRAPPER
        + "<h1>Order Status Update</h1>"
        + f"<p>Your order #{html.escape(order_id)} status has been updated to: "
        + f"<strong>{html.escape(status)}</strong></p>"
        + f"<p>{html.escape(summary)}.</p>"
        + "</div>"
    )
    return EmailMessage(
        to=to,
        subject=f"Order {order_id} Status Update - {restaurant_name}",
        html=body,
        text=f"Order Status Update\n\nYour order #{order_id} status: {status}",
    )


def compose_promotional_email(
    to: str, subject: str, content: str, restaurant_name: str
) -> EmailMessage:
    """Wrap marketing HTML in an email with a plain-text fallback."""
    return EmailMessage(
        to=to,
        subject=f"{subject} - {restaurant_name}",
        html=content,
        text=strip_html(content),
    )


def compose_order_confirmation_sms(to: str, order: OrderSummary) -> SmsMessage:
    """Build the order confirmation text with type, total and tracking link."""
    parts = [
        f"{SMS_BRAND}: Your order #{order.order_id} has been confirmed!",
        f"Type: {order_type_label(order)}.",
        f"Total: ₹{format_amount(order.total)}.",
    ]
    if order.estimated_time:
        parts.append(f"Est. Time: {order.estimated_time}.")
    parts.append(f"Track your order at {TRACKING_URL}/{order.order_id}")
    return SmsMessage(to=to, body=" ".join(parts))


def compose_booking_confirmation_sms(to: str, booking: BookingSummary) -> SmsMessage:
    """Build the table booking text; the table number is optional."""
    parts = [
        f"{SMS_BRAND}: Table booked! Booking #{booking.booking_id}",
        f"on {booking.date} at {booking.time} for {booking.guests} guests.",
    ]
    if booking.table_number:
        parts.append(f"Table: {booking.table_number}.")
    parts.append("Please arrive 10 mins early. See you soon!")
    return SmsMessage(to=to, body=" ".join(parts))


def compose_status_update_sms(to: str, order_id: str, status: str) -> SmsMessage:
    """Build a status SMS; unknown statuses are quoted verbatim."""
    summary = ORDER_STATUS_MESSAGES.get(status, f"Status updated to {status}")
    body = (
        f"{SMS_BRAND}: Order #{order_id} - {summary}. "
        f"Track at {TRACKING_URL}/{order_id}"
    )
    return SmsMessage(to=to, body=body)


def compose_promotional_sms(to: str, message: str) -> SmsMessage:
    """Build a marketing SMS carrying the opt-out notice."""
    return SmsMessage(
        to=to, body=f"{SMS_BRAND}: {message}. Reply STOP to unsubscribe."
    )
