"""Supabase-backed push subscription repository."""

from dataclasses import dataclass

from supabase import Client

from restocafe.domain.notifications import PushSubscription
from restocafe.services.push import SubscriptionRepository


@dataclass
class SupabaseSubscriptionRepository(SubscriptionRepository):
    """Supabase implementation for push subscription persistence."""

    client: Client

    def save(self, subscription: PushSubscription) -> None:
        """Insert or replace the subscription row for an endpoint."""
        self.client.table("push_subscriptions").upsert(
            {
                "endpoint": subscription.endpoint,
                "keys": subscription.keys,
                "expiration_time": subscription.expiration_time,
            },
            on_conflict="endpoint",
        ).execute()

    def find(self, endpoint: str) -> PushSubscription | None:
        """Return the subscription for an endpoint, if present."""
        response = (
            self.client.table("push_subscriptions")
            .select("endpoint, keys, expiration_time")
            .eq("endpoint", endpoint)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return PushSubscription(
            endpoint=row["endpoint"],
            keys=dict(row.get("keys") or {}),
            expiration_time=row.get("expiration_time"),
        )

    def delete(self, endpoint: str) -> bool:
        """Delete the subscription row and report whether one was removed."""
        response = (
            self.client.table("push_subscriptions")
            .delete()
            .eq("endpoint", endpoint)
            .execute()
        )
        return bool(response.data)
