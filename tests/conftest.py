"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from restocafe.config import Settings
from restocafe.containers import AppContainer
from restocafe.domain.notifications import DeliveryReceipt
from restocafe.services.catalog import MenuCatalog
from restocafe.services.notifications import (
    NotificationDispatcher,
    NotificationProvider,
    NotificationService,
    ProviderError,
)
from restocafe.services.promotions import PromotionsService
from restocafe.services.push import (
    InMemorySubscriptionRepository,
    PushSubscriptionService,
)
from restocafe.services.sample_catalog import sample_catalog

# Monday 19 October 2026, 15:30 local time.
MONDAY_AFTERNOON = datetime(2026, 10, 19, 15, 30)


@dataclass
class RecordingProvider(NotificationProvider):
    """Fake provider that records every message it delivers."""

    name: str = "recording"
    sent: list[object] = field(default_factory=list)

    async def send(self, message: object) -> DeliveryReceipt:
        self.sent.append(message)
        return DeliveryReceipt(
            provider=self.name,
            recipient=getattr(message, "to", ""),
            message_id=f"{self.name}-{len(self.sent)}",
            status="sent",
        )


@dataclass
class FailingProvider(NotificationProvider):
    """Fake provider that always rejects messages."""

    name: str = "failing"
    attempts: int = 0

    async def send(self, message: object) -> DeliveryReceipt:
        self.attempts += 1
        raise ProviderError(f"{self.name} is down")


@dataclass
class FixedClock:
    """Clock returning a settable instant."""

    now: datetime = MONDAY_AFTERNOON

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def settings() -> Settings:
    return Settings(
        restaurant_timezone="Asia/Kolkata",
        resend_api_key="resend-key",
        sendgrid_api_key="sendgrid-key",
        twilio_account_sid="AC123",
        twilio_auth_token="twilio-token",
        twilio_phone_number="+15005550006",
        fast2sms_api_key="fast2sms-key",
        vapid_public_key="vapid-public",
        vapid_private_key="vapid-private",
    )


@pytest.fixture
def catalog() -> MenuCatalog:
    return sample_catalog()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def email_provider() -> RecordingProvider:
    return RecordingProvider(name="email-fake")


@pytest.fixture
def sms_provider() -> RecordingProvider:
    return RecordingProvider(name="sms-fake")


@pytest.fixture
def whatsapp_provider() -> RecordingProvider:
    return RecordingProvider(name="whatsapp-fake")


@pytest.fixture
def subscription_repository() -> InMemorySubscriptionRepository:
    return InMemorySubscriptionRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog: MenuCatalog,
    clock: FixedClock,
    email_provider: RecordingProvider,
    sms_provider: RecordingProvider,
    whatsapp_provider: RecordingProvider,
    subscription_repository: InMemorySubscriptionRepository,
) -> AppContainer:
    notification_service = NotificationService(
        email=NotificationDispatcher("email", [email_provider]),
        sms=NotificationDispatcher("sms", [sms_provider]),
        whatsapp=NotificationDispatcher("whatsapp", [whatsapp_provider]),
        restaurant_name=settings.restaurant_name,
        push_configured=True,
    )
    push_service = PushSubscriptionService(
        repository=subscription_repository,
        vapid_public_key=settings.vapid_public_key,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        promotions_service=PromotionsService(catalog=catalog, clock=clock),
        notification_service=notification_service,
        push_service=push_service,
        close_resources=close_resources,
    )
