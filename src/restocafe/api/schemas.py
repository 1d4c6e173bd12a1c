"""Pydantic models for notification request payloads."""

from typing import Literal

from pydantic import BaseModel, Field


class EmailRequest(BaseModel):
    """Email notification payload."""

    to: str
    subject: str
    html: str
    text: str | None = None
    sender: str | None = Field(default=None, alias="from")


class SmsRequest(BaseModel):
    """SMS notification payload."""

    to: str
    message: str


class WhatsAppRequest(BaseModel):
    """WhatsApp notification payload."""

    to: str | None = None
    message: str | None = None


class NotificationTestRequest(BaseModel):
    """Test notification payload."""

    type: str | None = None
    to: str | None = None
    subject: str | None = None
    message: str | None = None


class PushSubscriptionKeys(BaseModel):
    """Browser push subscription keys."""

    p256dh: str | None = None
    auth: str | None = None


class PushSubscriptionRequest(BaseModel):
    """Browser push subscription payload."""

    endpoint: str
    keys: PushSubscriptionKeys = Field(default_factory=PushSubscriptionKeys)
    expiration_time: int | None = Field(default=None, alias="expirationTime")


class OrderLineRequest(BaseModel):
    """Ordered item payload."""

    name: str
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)


class OrderConfirmationRequest(BaseModel):
    """Order confirmation payload."""

    order_id: str = Field(alias="orderId")
    customer_name: str = Field(default="", alias="customerName")
    items: list[OrderLineRequest]
    total: float = Field(ge=0)
    order_type: Literal["delivery", "pickup"] = Field(
        default="pickup", alias="orderType"
    )
    address: str | None = None
    estimated_time: str | None = Field(default=None, alias="estimatedTime")
    email: str | None = None
    phone: str | None = None


class BookingConfirmationRequest(BaseModel):
    """Table booking confirmation payload."""

    booking_id: str = Field(alias="bookingId")
    customer_name: str = Field(alias="customerName")
    date: str
    time: str
    guests: int = Field(ge=1)
    table_number: str | None = Field(default=None, alias="tableNumber")
    special_requests: str | None = Field(default=None, alias="specialRequests")
    email: str | None = None
    phone: str | None = None


class OrderStatusRequest(BaseModel):
    """Order status change payload."""

    order_id: str = Field(alias="orderId")
    status: str
    email: str | None = None
    phone: str | None = None


class PromotionRequest(BaseModel):
    """Marketing campaign payload."""

    subject: str
    content: str
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)


class ItemQuoteRequest(BaseModel):
    """Customized menu item pricing payload."""

    customizations: list[str] = Field(default_factory=list)
    quantity: int = Field(default=1, ge=1)
