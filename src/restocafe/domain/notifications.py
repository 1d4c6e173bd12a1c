"""Notification domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmailMessage:
    """Outbound email."""

    to: str
    subject: str
    html: str
    text: str | None = None
    sender: str | None = None


@dataclass(frozen=True)
class SmsMessage:
    """Outbound text message."""

    to: str
    body: str


@dataclass(frozen=True)
class WhatsAppMessage:
    """Outbound WhatsApp message."""

    to: str
    body: str


@dataclass(frozen=True)
class DeliveryReceipt:
    """Provider acknowledgement for a delivered message."""

    provider: str
    recipient: str
    message_id: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class PushSubscription:
    """Web push subscription registered by a browser."""

    endpoint: str
    keys: dict[str, str] = field(default_factory=dict)
    expiration_time: int | None = None


@dataclass(frozen=True)
class OrderLine:
    """Ordered item as shown in a confirmation."""

    name: str
    quantity: int
    price: float


@dataclass(frozen=True)
class OrderSummary:
    """Order details used to compose customer notifications."""

    order_id: str
    items: tuple[OrderLine, ...]
    total: float
    customer_name: str = ""
    order_type: str = "pickup"
    address: str | None = None
    estimated_time: str | None = None

    @property
    def is_delivery(self) -> bool:
        return self.order_type == "delivery"


@dataclass(frozen=True)
class BookingSummary:
    """Table reservation details used to compose customer notifications."""

    booking_id: str
    customer_name: str
    date: str
    time: str
    guests: int
    table_number: str | None = None
    special_requests: str | None = None
