"""Web push subscription management."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from restocafe.domain.notifications import PushSubscription

logger = logging.getLogger(__name__)


class SubscriptionRepository(Protocol):
    """Persistence interface for push subscriptions."""

    def save(self, subscription: PushSubscription) -> None:
        """Store or replace a subscription keyed by endpoint."""

    def find(self, endpoint: str) -> PushSubscription | None:
        """Return the subscription for an endpoint, if present."""

    def delete(self, endpoint: str) -> bool:
        """Remove a subscription and report whether it existed."""


class PushServiceNotReadyError(RuntimeError):
    """Raised when the push service is used outside its lifecycle."""


@dataclass
class InMemorySubscriptionRepository(SubscriptionRepository):
    """Process-local subscription store used when no database is configured."""

    subscriptions: dict[str, PushSubscription] = field(default_factory=dict)

    def save(self, subscription: PushSubscription) -> None:
        self.subscriptions[subscription.endpoint] = subscription

    def find(self, endpoint: str) -> PushSubscription | None:
        return self.subscriptions.get(endpoint)

    def delete(self, endpoint: str) -> bool:
        return self.subscriptions.pop(endpoint, None) is not None


@dataclass
class PushSubscriptionService:
    """Registers browser push subscriptions between initialize and teardown."""

    repository: SubscriptionRepository
    vapid_public_key: str | None = None
    _ready: bool = field(default=False, init=False, repr=False)

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def configured(self) -> bool:
        return bool(self.vapid_public_key)

    def initialize(self) -> None:
        """Start accepting subscriptions."""
        if not self.configured:
            logger.warning("Push notifications enabled without a VAPID public key")
        self._ready = True

    def teardown(self) -> None:
        self._ready = False

    def subscribe(self, subscription: PushSubscription) -> PushSubscription:
        """Store a browser subscription."""
        self._require_ready()
        self.repository.save(subscription)
        logger.info(
            "Push subscription saved", extra={"endpoint": subscription.endpoint}
        )
        return subscription

    def unsubscribe(self, endpoint: str) -> bool:
        """Remove a browser subscription; False when it was not registered."""
        self._require_ready()
        removed = self.repository.delete(endpoint)
        logger.info(
            "Push subscription removed",
            extra={"endpoint": endpoint, "removed": removed},
        )
        return removed

    def find(self, endpoint: str) -> PushSubscription | None:
        self._require_ready()
        return self.repository.find(endpoint)

    def _require_ready(self) -> None:
        if not self._ready:
            raise PushServiceNotReadyError("Push subscription service is not running")
