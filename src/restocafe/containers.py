"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from restocafe.adapters.fast2sms_client import Fast2SmsProvider
from restocafe.adapters.resend_client import ResendEmailProvider
from restocafe.adapters.sendgrid_client import SendGridEmailProvider
from restocafe.adapters.supabase_subscription_repository import (
    SupabaseSubscriptionRepository,
)
from restocafe.adapters.twilio_client import (
    WHATSAPP_SANDBOX_NUMBER,
    HttpxTwilioClient,
    TwilioSmsProvider,
    TwilioWhatsAppProvider,
)
from restocafe.config import (
    EMAIL_PROVIDERS,
    SMS_PROVIDERS,
    Settings,
    parse_provider_order,
)
from restocafe.services.catalog import (
    MenuCatalog,
    load_catalog,
    validate_catalog,
)
from restocafe.services.notifications import (
    NotificationDispatcher,
    NotificationProvider,
    NotificationService,
)
from restocafe.services.promotions import PromotionsService, system_clock
from restocafe.services.push import (
    InMemorySubscriptionRepository,
    PushSubscriptionService,
    SubscriptionRepository,
)
from restocafe.services.sample_catalog import sample_catalog


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    promotions_service: PromotionsService
    notification_service: NotificationService
    push_service: PushSubscriptionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    closers: list[Callable[[], Awaitable[None]]] = []

    promotions_service = PromotionsService(
        catalog=_load_catalog(resolved_settings),
        clock=system_clock(resolved_settings.restaurant_timezone),
    )

    twilio_client = None
    if resolved_settings.twilio_account_sid and resolved_settings.twilio_auth_token:
        twilio_client = HttpxTwilioClient.create(
            resolved_settings.twilio_account_sid,
            resolved_settings.twilio_auth_token,
        )
        closers.append(twilio_client.close)

    email_providers: list[NotificationProvider] = []
    for name in parse_provider_order(
        resolved_settings.email_providers, EMAIL_PROVIDERS
    ):
        if name == "resend" and resolved_settings.resend_api_key:
            resend = ResendEmailProvider.create(
                resolved_settings.resend_api_key, resolved_settings.email_from
            )
            email_providers.append(resend)
            closers.append(resend.close)
        elif name == "sendgrid" and resolved_settings.sendgrid_api_key:
            sendgrid = SendGridEmailProvider.create(
                resolved_settings.sendgrid_api_key, resolved_settings.email_from
            )
            email_providers.append(sendgrid)
            closers.append(sendgrid.close)

    sms_providers: list[NotificationProvider] = []
    for name in parse_provider_order(resolved_settings.sms_providers, SMS_PROVIDERS):
        if (
            name == "twilio"
            and twilio_client is not None
            and resolved_settings.twilio_phone_number
        ):
            sms_providers.append(
                TwilioSmsProvider(
                    client=twilio_client,
                    from_number=resolved_settings.twilio_phone_number,
                )
            )
        elif name == "fast2sms" and resolved_settings.fast2sms_api_key:
            fast2sms = Fast2SmsProvider.create(resolved_settings.fast2sms_api_key)
            sms_providers.append(fast2sms)
            closers.append(fast2sms.close)

    whatsapp_providers: list[NotificationProvider] = []
    if twilio_client is not None:
        whatsapp_providers.append(
            TwilioWhatsAppProvider(
                client=twilio_client,
                from_number=(
                    resolved_settings.twilio_whatsapp_number or WHATSAPP_SANDBOX_NUMBER
                ),
            )
        )

    push_service = PushSubscriptionService(
        repository=_subscription_repository(resolved_settings),
        vapid_public_key=resolved_settings.vapid_public_key,
    )
    notification_service = NotificationService(
        email=NotificationDispatcher("email", email_providers),
        sms=NotificationDispatcher("sms", sms_providers),
        whatsapp=NotificationDispatcher("whatsapp", whatsapp_providers),
        restaurant_name=resolved_settings.restaurant_name,
        push_configured=bool(
            resolved_settings.vapid_public_key and resolved_settings.vapid_private_key
        ),
    )

    async def close_resources() -> None:
        for close in closers:
            await close()

    return AppContainer(
        settings=resolved_settings,
        promotions_service=promotions_service,
        notification_service=notification_service,
        push_service=push_service,
        close_resources=close_resources,
    )


def _load_catalog(settings: Settings) -> MenuCatalog:
    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    catalog = sample_catalog()
    validate_catalog(catalog)
    return catalog


def _subscription_repository(settings: Settings) -> SubscriptionRepository:
    if settings.supabase_url and settings.supabase_service_key:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseSubscriptionRepository(client)
    return InMemorySubscriptionRepository()
