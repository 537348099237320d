"""`/pricing`."""

from __future__ import annotations

from hcloud_client.adapters.endpoints.base import ResourceEndpoint
from hcloud_client.core.domain.pricing import Pricing, PricingResponse


class PricingEndpoint(ResourceEndpoint):
    path = "/pricing"
    resource = "pricing"

    async def get(self) -> Pricing:
        response = await self._fetch(self.path, PricingResponse)
        return response.pricing
