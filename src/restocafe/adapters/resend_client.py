"""Resend email provider."""

from dataclasses import dataclass

import httpx

from restocafe.domain.notifications import DeliveryReceipt, EmailMessage
from restocafe.services.notifications import NotificationProvider


@dataclass
class ResendEmailProvider(NotificationProvider):
    """Email provider backed by the Resend HTTP API."""

    api_key: str
    default_sender: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.resend.com"
    name: str = "resend"

    @classmethod
    def create(cls, api_key: str, default_sender: str) -> "ResendEmailProvider":
        """Create a Resend provider with a managed httpx session."""
        return cls(
            api_key=api_key,
            default_sender=default_sender,
            http_client=httpx.AsyncClient(),
        )

    async def send(self, message: EmailMessage) -> DeliveryReceipt:
        """Send an email through Resend."""
        payload: dict[str, object] = {
            "from": message.sender or self.default_sender,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        if message.text is not None:
            payload["text"] = message.text
        response = await self.http_client.post(
            f"{self.base_url}/emails",
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=10,
        )
        response.raise_for_status()
        data = response.json()
        return DeliveryReceipt(
            provider=self.name,
            recipient=message.to,
            message_id=data.get("id"),
            status="sent",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
