"""Notification dispatch with ordered provider fallback."""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Protocol

from restocafe.domain.notifications import (
    BookingSummary,
    DeliveryReceipt,
    EmailMessage,
    OrderSummary,
    SmsMessage,
    WhatsAppMessage,
)
from restocafe.services.messages import (
    compose_booking_confirmation_email,
    compose_booking_confirmation_sms,
    compose_order_confirmation_email,
    compose_order_confirmation_sms,
    compose_promotional_email,
    compose_promotional_sms,
    compose_status_update_email,
    compose_status_update_sms,
    format_phone_number,
    strip_html,
)

logger = logging.getLogger(__name__)


class NotificationProvider(Protocol):
    """Interface for a third-party delivery provider."""

    name: str

    async def send(self, message: object) -> DeliveryReceipt:
        """Deliver a message and return the provider's receipt."""


class ProviderError(Exception):
    """Raised by a provider when it rejects a message."""


class NotificationError(Exception):
    """Base class for notification failures."""

    def __init__(self, channel: str, message: str) -> None:
        self.channel = channel
        super().__init__(message)


class NotificationNotConfiguredError(NotificationError):
    """Raised when a channel has no configured providers."""

    def __init__(self, channel: str) -> None:
        super().__init__(channel, f"No {channel} provider is configured")


class NotificationDeliveryError(NotificationError):
    """Raised when every provider for a channel failed."""

    def __init__(self, channel: str, failures: list[tuple[str, Exception]]) -> None:
        self.failures = failures
        details = "; ".join(f"{name}: {exc}" for name, exc in failures)
        super().__init__(channel, f"All {channel} providers failed ({details})")


@dataclass
class NotificationDispatcher:
    """Try providers in order until one delivers the message."""

    channel: str
    providers: list[NotificationProvider] = field(default_factory=list)

    @property
    def configured(self) -> bool:
        return bool(self.providers)

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self.providers]

    async def send(self, message: object) -> DeliveryReceipt:
        """Send through the first provider that succeeds."""
        if not self.providers:
            raise NotificationNotConfiguredError(self.channel)
        failures: list[tuple[str, Exception]] = []
        for provider in self.providers:
            try:
                receipt = await provider.send(message)
            except Exception as exc:
                logger.exception(
                    "Notification provider failed",
                    extra={"channel": self.channel, "provider": provider.name},
                )
                failures.append((provider.name, exc))
                continue
            logger.info(
                "Notification sent",
                extra={
                    "channel": self.channel,
                    "provider": provider.name,
                    "message_id": receipt.message_id,
                },
            )
            return receipt
        raise NotificationDeliveryError(self.channel, failures)


@dataclass
class NotificationService:
    """Channel-level entry point for outbound notifications."""

    email: NotificationDispatcher
    sms: NotificationDispatcher
    whatsapp: NotificationDispatcher
    restaurant_name: str = "RestoCafe"
    push_configured: bool = False

    async def send_email(self, message: EmailMessage) -> DeliveryReceipt:
        return await self.email.send(message)

    async def send_sms(self, message: SmsMessage) -> DeliveryReceipt:
        """Send an SMS after normalising the recipient's number."""
        formatted = SmsMessage(to=format_phone_number(message.to), body=message.body)
        return await self.sms.send(formatted)

    async def send_whatsapp(self, message: WhatsAppMessage) -> DeliveryReceipt:
        return await self.whatsapp.send(message)

    async def send_order_confirmation(
        self,
        order: OrderSummary,
        email: str | None = None,
        phone: str | None = None,
    ) -> dict[str, bool]:
        """Notify a customer on every contact channel they supplied.

        A failing channel is logged and reported as False so the others
        still go out.
        """
        results: dict[str, bool] = {}
        if email:
            message = compose_order_confirmation_email(
                email, order, self.restaurant_name
            )
            results["email"] = await self._deliver(
                self.send_email(message), order.order_id
            )
        if phone:
            sms = compose_order_confirmation_sms(phone, order)
            results["sms"] = await self._deliver(self.send_sms(sms), order.order_id)
        return results

    async def send_booking_confirmation(
        self,
        booking: BookingSummary,
        email: str | None = None,
        phone: str | None = None,
    ) -> dict[str, bool]:
        """Confirm a table booking on every contact channel supplied."""
        results: dict[str, bool] = {}
        if email:
            message = compose_booking_confirmation_email(
                email, booking, self.restaurant_name
            )
            results["email"] = await self._deliver(
                self.send_email(message), booking.booking_id
            )
        if phone:
            sms = compose_booking_confirmation_sms(phone, booking)
            results["sms"] = await self._deliver(
                self.send_sms(sms), booking.booking_id
            )
        return results

    async def send_status_update(
        self,
        order_id: str,
        status: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> dict[str, bool]:
        """Tell a customer their order moved to a new status."""
        results: dict[str, bool] = {}
        if email:
            message = compose_status_update_email(
                email, order_id, status, self.restaurant_name
            )
            results["email"] = await self._deliver(self.send_email(message), order_id)
        if phone:
            sms = compose_status_update_sms(phone, order_id, status)
            results["sms"] = await self._deliver(self.send_sms(sms), order_id)
        return results

    async def send_promotion(
        self,
        subject: str,
        content: str,
        emails: list[str],
        phones: list[str],
    ) -> dict[str, int]:
        """Send a campaign and count successful deliveries per channel."""
        sent = {"email": 0, "sms": 0}
        for email in emails:
            message = compose_promotional_email(
                email, subject, content, self.restaurant_name
            )
            sent["email"] += await self._deliver(self.send_email(message), subject)
        text = strip_html(content)
        for phone in phones:
            sms = compose_promotional_sms(phone, text)
            sent["sms"] += await self._deliver(self.send_sms(sms), subject)
        return sent

    def status(self) -> dict[str, object]:
        """Describe which channels and providers are configured."""
        providers = {
            "email": self.email.provider_names,
            "sms": self.sms.provider_names,
            "whatsapp": self.whatsapp.provider_names,
        }
        configured = {
            "email": self.email.configured,
            "sms": self.sms.configured,
            "whatsapp": self.whatsapp.configured,
            "push": self.push_configured,
        }
        return {
            "providers": providers,
            "configured": configured,
            "summary": {
                "total": sum(configured.values()),
                "configured": [name for name, ok in configured.items() if ok],
                "missing": [name for name, ok in configured.items() if not ok],
            },
        }

    async def _deliver(
        self, delivery: Awaitable[DeliveryReceipt], reference: str
    ) -> bool:
        try:
            await delivery
        except NotificationError as exc:
            logger.warning(
                "Customer notification not delivered",
                extra={"reference": reference, "channel": exc.channel},
            )
            return False
        return True
