"""Price list of every billable resource."""

from __future__ import annotations

from pydantic import BaseModel

from hcloud_client.core.domain.common import HCloudModel, LocationPrice, Price, ResponseModel


class TypePricing(BaseModel):
    id: int
    name: str
    prices: list[LocationPrice]


class PerGBMonthPricing(BaseModel):
    price_per_gb_month: Price


class MonthlyPricing(BaseModel):
    price_monthly: Price


class TrafficPricing(BaseModel):
    price_per_tb: Price


class PrimaryIPPricing(BaseModel):
    type: str
    prices: list[dict[str, object]]


class Pricing(HCloudModel):
    currency: str
    vat_rate: str
    image: PerGBMonthPricing
    floating_ip: MonthlyPricing | None = None
    primary_ips: list[PrimaryIPPricing] | None = None
    server_types: list[TypePricing]
    load_balancer_types: list[TypePricing] | None = None
    volume: PerGBMonthPricing
    traffic: TrafficPricing | None = None


class PricingResponse(ResponseModel):
    pricing: Pricing
