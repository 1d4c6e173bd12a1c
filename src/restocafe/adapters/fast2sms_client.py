"""Fast2SMS provider for Indian mobile numbers."""

from dataclasses import dataclass

import httpx

from restocafe.domain.notifications import DeliveryReceipt, SmsMessage
from restocafe.services.notifications import NotificationProvider, ProviderError

INDIA_COUNTRY_CODE = "91"
LOCAL_NUMBER_LENGTH = 10


@dataclass
class Fast2SmsProvider(NotificationProvider):
    """SMS provider backed by the Fast2SMS bulk API."""

    api_key: str
    http_client: httpx.AsyncClient
    base_url: str = "https://www.fast2sms.com/dev"
    name: str = "fast2sms"

    @classmethod
    def create(cls, api_key: str) -> "Fast2SmsProvider":
        """Create a Fast2SMS provider with a managed httpx session."""
        return cls(api_key=api_key, http_client=httpx.AsyncClient())

    async def send(self, message: SmsMessage) -> DeliveryReceipt:
        """Send an SMS through Fast2SMS's quick route."""
        number = local_number(message.to)
        response = await self.http_client.post(
            f"{self.base_url}/bulkV2",
            json={"route": "q", "message": message.body, "numbers": number},
            headers={"authorization": self.api_key},
            timeout=10,
        )
        response.raise_for_status()
        data = response.json()
        if not data.get("return"):
            raise ProviderError(f"Fast2SMS rejected the message: {data.get('message')}")
        return DeliveryReceipt(
            provider=self.name,
            recipient=number,
            message_id=data.get("request_id"),
            status="queued",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def local_number(phone_number: str) -> str:
    """Return the 10-digit local part of an Indian phone number."""
    digits = "".join(char for char in phone_number if char.isdigit())
    if len(digits) > LOCAL_NUMBER_LENGTH and digits.startswith(INDIA_COUNTRY_CODE):
        return digits[len(INDIA_COUNTRY_CODE) :]
    return digits
