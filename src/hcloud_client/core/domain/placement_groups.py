"""Placement groups."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

PlacementGroupType = Literal["spread"]


class PlacementGroup(HCloudModel):
    id: int
    name: str
    labels: Labels
    created: str
    servers: list[int]
    type: PlacementGroupType


class PlacementGroupResponse(ResponseModel):
    placement_group: PlacementGroup


class ListPlacementGroupsResponse(ListResponse):
    placement_groups: list[PlacementGroup]


class CreatePlacementGroupRequest(RequestModel):
    name: str = Field(..., min_length=1)
    type: PlacementGroupType
    labels: Labels | None = None


class CreatePlacementGroupResponse(ResponseModel):
    placement_group: PlacementGroup
    action: Action | None = None


class UpdatePlacementGroupRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None
