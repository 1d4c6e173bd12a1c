"""Notification endpoints backed by the configured providers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from restocafe.api.schemas import (
    BookingConfirmationRequest,
    EmailRequest,
    NotificationTestRequest,
    OrderConfirmationRequest,
    OrderStatusRequest,
    PromotionRequest,
    PushSubscriptionRequest,
    SmsRequest,
    WhatsAppRequest,
)
from restocafe.domain.notifications import (
    BookingSummary,
    DeliveryReceipt,
    EmailMessage,
    OrderLine,
    OrderSummary,
    PushSubscription,
    SmsMessage,
    WhatsAppMessage,
)
from restocafe.services.messages import validate_phone_number
from restocafe.services.notifications import (
    NotificationDeliveryError,
    NotificationError,
    NotificationNotConfiguredError,
)
from restocafe.services.push import PushServiceNotReadyError

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from restocafe.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])

TEST_EMAIL_TEXT = "This is a test email from RestoCafe notification system."
TEST_SMS_TEXT = "Test SMS from RestoCafe notification system"


@router.post("/email")
async def send_email(payload: EmailRequest, request: Request) -> dict[str, object]:
    """Send an email notification."""
    _require_fields(to=payload.to, subject=payload.subject, html=payload.html)
    container: AppContainer = request.app.state.container
    message = EmailMessage(
        to=payload.to,
        subject=payload.subject,
        html=payload.html,
        text=payload.text,
        sender=payload.sender,
    )
    receipt = await _deliver(container.notification_service.send_email(message))
    return _success("Email sent successfully", receipt)


@router.post("/sms")
async def send_sms(payload: SmsRequest, request: Request) -> dict[str, object]:
    """Send an SMS notification."""
    _require_fields(to=payload.to, message=payload.message)
    _require_phone(payload.to or "")
    container: AppContainer = request.app.state.container
    message = SmsMessage(to=payload.to, body=payload.message)
    receipt = await _deliver(container.notification_service.send_sms(message))
    return _success("SMS sent successfully", receipt)


@router.post("/whatsapp")
async def send_whatsapp(
    payload: WhatsAppRequest, request: Request
) -> dict[str, object]:
    """Send a WhatsApp notification."""
    _require_fields(to=payload.to, message=payload.message)
    _require_phone(payload.to or "")
    container: AppContainer = request.app.state.container
    message = WhatsAppMessage(to=payload.to or "", body=payload.message or "")
    receipt = await _deliver(container.notification_service.send_whatsapp(message))
    return _success("WhatsApp message sent successfully", receipt)


@router.get("/whatsapp")
async def whatsapp_status(request: Request) -> dict[str, object]:
    """Report whether WhatsApp delivery is configured."""
    container: AppContainer = request.app.state.container
    configured = container.notification_service.whatsapp.configured
    return {
        "configured": configured,
        "custom_number": container.settings.twilio_whatsapp_number,
        "message": (
            "WhatsApp service (Twilio) is configured and ready"
            if configured
            else (
                "WhatsApp service not configured. Add TWILIO_ACCOUNT_SID and "
                "TWILIO_AUTH_TOKEN to environment variables."
            )
        ),
    }


@router.get("/test")
async def notification_status(request: Request) -> dict[str, object]:
    """Report which notification channels are configured."""
    container: AppContainer = request.app.state.container
    return container.notification_service.status()


@router.post("/test")
async def send_test_notification(
    payload: NotificationTestRequest, request: Request
) -> dict[str, object]:
    """Send a test email or SMS."""
    _require_fields(type=payload.type, to=payload.to)
    container: AppContainer = request.app.state.container
    service = container.notification_service
    to = payload.to or ""
    if payload.type == "email":
        text = payload.message or TEST_EMAIL_TEXT
        message = EmailMessage(
            to=to,
            subject=payload.subject or "Test Email from RestoCafe",
            html=f"<h1>Test Email</h1><p>{text}</p>",
            text=text,
        )
        receipt = await _deliver(service.send_email(message))
        return {"type": "email", **_success("Email sent successfully", receipt)}
    if payload.type == "sms":
        sms = SmsMessage(to=to, body=payload.message or TEST_SMS_TEXT)
        receipt = await _deliver(service.send_sms(sms))
        return {"type": "sms", **_success("SMS sent successfully", receipt)}
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail='Invalid type. Use "email" or "sms"',
    )


@router.post("/order-confirmation")
async def order_confirmation(
    payload: OrderConfirmationRequest, request: Request
) -> dict[str, object]:
    """Notify a customer that their order was placed."""
    _require_contact(payload.email, payload.phone)
    container: AppContainer = request.app.state.container
    order = OrderSummary(
        order_id=payload.order_id,
        items=tuple(
            OrderLine(name=line.name, quantity=line.quantity, price=line.price)
            for line in payload.items
        ),
        total=payload.total,
        customer_name=payload.customer_name,
        order_type=payload.order_type,
        address=payload.address,
        estimated_time=payload.estimated_time,
    )
    results = await container.notification_service.send_order_confirmation(
        order, email=payload.email, phone=payload.phone
    )
    return {"order_id": order.order_id, "delivered": results}


@router.post("/booking-confirmation")
async def booking_confirmation(
    payload: BookingConfirmationRequest, request: Request
) -> dict[str, object]:
    """Notify a customer that their table is booked."""
    _require_contact(payload.email, payload.phone)
    container: AppContainer = request.app.state.container
    booking = BookingSummary(
        booking_id=payload.booking_id,
        customer_name=payload.customer_name,
        date=payload.date,
        time=payload.time,
        guests=payload.guests,
        table_number=payload.table_number,
        special_requests=payload.special_requests,
    )
    results = await container.notification_service.send_booking_confirmation(
        booking, email=payload.email, phone=payload.phone
    )
    return {"booking_id": booking.booking_id, "delivered": results}


@router.post("/order-status")
async def order_status(
    payload: OrderStatusRequest, request: Request
) -> dict[str, object]:
    """Tell a customer their order changed status."""
    _require_fields(status=payload.status)
    _require_contact(payload.email, payload.phone)
    container: AppContainer = request.app.state.container
    results = await container.notification_service.send_status_update(
        payload.order_id, payload.status, email=payload.email, phone=payload.phone
    )
    return {"order_id": payload.order_id, "delivered": results}


@router.post("/promotion")
async def promotion(payload: PromotionRequest, request: Request) -> dict[str, object]:
    """Send a marketing message to a list of customers."""
    _require_fields(subject=payload.subject, content=payload.content)
    _require_contact(*payload.emails, *payload.phones)
    container: AppContainer = request.app.state.container
    sent = await container.notification_service.send_promotion(
        payload.subject, payload.content, payload.emails, payload.phones
    )
    return {
        "sent": sent,
        "requested": {"email": len(payload.emails), "sms": len(payload.phones)},
    }


@router.post("/subscribe")
async def subscribe(
    payload: PushSubscriptionRequest, request: Request
) -> dict[str, object]:
    """Register a browser push subscription."""
    container: AppContainer = request.app.state.container
    subscription = PushSubscription(
        endpoint=payload.endpoint,
        keys=payload.keys.model_dump(exclude_none=True),
        expiration_time=payload.expiration_time,
    )
    try:
        container.push_service.subscribe(subscription)
    except PushServiceNotReadyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return {"success": True, "message": "Subscription saved"}


@router.post("/unsubscribe")
async def unsubscribe(
    payload: PushSubscriptionRequest, request: Request
) -> dict[str, object]:
    """Remove a browser push subscription."""
    container: AppContainer = request.app.state.container
    try:
        removed = container.push_service.unsubscribe(payload.endpoint)
    except PushServiceNotReadyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return {"success": True, "message": "Unsubscribed successfully", "removed": removed}


def _require_fields(**fields: str | None) -> None:
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )


def _require_contact(*contacts: str | None) -> None:
    if not any(contacts):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide an email or phone to notify",
        )


def _require_phone(phone_number: str) -> None:
    if not validate_phone_number(phone_number.strip()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid phone number: {phone_number}",
        )


async def _deliver(delivery: Awaitable[DeliveryReceipt]) -> DeliveryReceipt:
    """Await a delivery and map notification failures to HTTP errors."""
    try:
        return await delivery
    except NotificationNotConfiguredError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    except NotificationDeliveryError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    except NotificationError as exc:
        logger.exception("Unexpected notification failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc


def _success(message: str, receipt: DeliveryReceipt) -> dict[str, object]:
    return {
        "success": True,
        "message": message,
        "data": {
            "provider": receipt.provider,
            "to": receipt.recipient,
            "id": receipt.message_id,
            "status": receipt.status,
        },
    }
