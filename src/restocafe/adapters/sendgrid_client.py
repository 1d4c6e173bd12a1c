"""SendGrid email provider."""

from dataclasses import dataclass
from email.utils import parseaddr

import httpx

from restocafe.domain.notifications import DeliveryReceipt, EmailMessage
from restocafe.services.notifications import NotificationProvider


@dataclass
class SendGridEmailProvider(NotificationProvider):
    """Email provider backed by the SendGrid v3 mail API."""

    api_key: str
    default_sender: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.sendgrid.com/v3"
    name: str = "sendgrid"

    @classmethod
    def create(cls, api_key: str, default_sender: str) -> "SendGridEmailProvider":
        """Create a SendGrid provider with a managed httpx session."""
        return cls(
            api_key=api_key,
            default_sender=default_sender,
            http_client=httpx.AsyncClient(),
        )

    async def send(self, message: EmailMessage) -> DeliveryReceipt:
        """Send an email through SendGrid."""
        content = []
        if message.text is not None:
            content.append({"type": "text/plain", "value": message.text})
        content.append({"type": "text/html", "value": message.html})
        response = await self.http_client.post(
            f"{self.base_url}/mail/send",
            json={
                "personalizations": [{"to": [{"email": message.to}]}],
                "from": _address(message.sender or self.default_sender),
                "subject": message.subject,
                "content": content,
            },
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=10,
        )
        response.raise_for_status()
        return DeliveryReceipt(
            provider=self.name,
            recipient=message.to,
            message_id=response.headers.get("X-Message-Id"),
            status="accepted",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _address(sender: str) -> dict[str, str]:
    name, email = parseaddr(sender)
    if name:
        return {"email": email, "name": name}
    return {"email": email or sender}
