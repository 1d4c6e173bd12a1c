"""Twilio messaging providers for SMS and WhatsApp."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from restocafe.domain.notifications import DeliveryReceipt, SmsMessage, WhatsAppMessage
from restocafe.services.notifications import NotificationProvider, ProviderError

WHATSAPP_PREFIX = "whatsapp:"
WHATSAPP_SANDBOX_NUMBER = "whatsapp:+14155238886"

_ERROR_HINTS = {
    63016: (
        "WhatsApp recipient not in sandbox. Please join the WhatsApp sandbox "
        "first by sending the join code to the sandbox number."
    ),
    21408: (
        "Permission to send to this number has not been enabled. "
        "Please join the WhatsApp sandbox."
    ),
}


class TwilioError(ProviderError):
    """Error reported by the Twilio API."""

    def __init__(self, message: str, code: int | None = None) -> None:
        self.code = code
        super().__init__(_ERROR_HINTS.get(code, message) if code else message)


class TwilioClient(Protocol):
    """Interface for Twilio's Messages resource."""

    async def create_message(self, to: str, from_: str, body: str) -> dict[str, object]:
        """Create a message and return the raw API resource."""


@dataclass
class HttpxTwilioClient(TwilioClient):
    """Twilio REST client implemented with httpx."""

    account_sid: str
    auth_token: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.twilio.com/2010-04-01"

    @classmethod
    def create(cls, account_sid: str, auth_token: str) -> "HttpxTwilioClient":
        """Create a Twilio client with a managed httpx session."""
        return cls(
            account_sid=account_sid,
            auth_token=auth_token,
            http_client=httpx.AsyncClient(),
        )

    async def create_message(self, to: str, from_: str, body: str) -> dict[str, object]:
        """Create a message using Twilio's Messages API."""
        url = f"{self.base_url}/Accounts/{self.account_sid}/Messages.json"
        response = await self.http_client.post(
            url,
            data={"To": to, "From": from_, "Body": body},
            auth=(self.account_sid, self.auth_token),
            timeout=10,
        )
        if response.is_error:
            raise _error_from_response(response)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class TwilioSmsProvider(NotificationProvider):
    """SMS provider sending through Twilio."""

    client: TwilioClient
    from_number: str
    name: str = "twilio"

    async def send(self, message: SmsMessage) -> DeliveryReceipt:
        """Send an SMS through Twilio."""
        to = message.to.replace(" ", "")
        resource = await self.client.create_message(
            to=to, from_=self.from_number, body=message.body
        )
        return _receipt(self.name, to, resource)


@dataclass
class TwilioWhatsAppProvider(NotificationProvider):
    """WhatsApp provider sending through Twilio."""

    client: TwilioClient
    from_number: str = WHATSAPP_SANDBOX_NUMBER
    name: str = "twilio-whatsapp"

    async def send(self, message: WhatsAppMessage) -> DeliveryReceipt:
        """Send a WhatsApp message through Twilio."""
        to = whatsapp_address(message.to)
        resource = await self.client.create_message(
            to=to, from_=whatsapp_address(self.from_number), body=message.body
        )
        return _receipt(self.name, to, resource)


def whatsapp_address(number: str) -> str:
    """Return the number in Twilio's whatsapp: form without spaces."""
    if number.startswith(WHATSAPP_PREFIX):
        return number
    return WHATSAPP_PREFIX + "".join(number.split())


def _receipt(provider: str, to: str, resource: dict[str, object]) -> DeliveryReceipt:
    sid = resource.get("sid")
    status = resource.get("status")
    return DeliveryReceipt(
        provider=provider,
        recipient=to,
        message_id=str(sid) if sid is not None else None,
        status=str(status) if status is not None else None,
    )


def _error_from_response(response: httpx.Response) -> TwilioError:
    try:
        data = response.json()
    except ValueError:
        return TwilioError(f"Twilio returned HTTP {response.status_code}")
    code = data.get("code")
    message = data.get("message") or f"Twilio returned HTTP {response.status_code}"
    return TwilioError(str(message), code=code if isinstance(code, int) else None)
