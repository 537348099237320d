"""Actions: server-side records of asynchronous operations."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.common import HCloudModel, ListResponse, ResponseModel

ActionStatus = Literal["running", "success", "error"]


class ActionResource(BaseModel):
    id: int
    type: str


class ActionError(BaseModel):
    code: str
    message: str


class Action(HCloudModel):
    """Progress of a mutating operation; `success` and `error` are final."""

    id: int
    command: str
    status: ActionStatus
    progress: int = Field(..., ge=0, le=100)
    started: str
    finished: str | None
    resources: list[ActionResource]
    error: ActionError | None

    @property
    def is_completed(self) -> bool:
        return self.status in ("success", "error")

    @property
    def is_successful(self) -> bool:
        return self.status == "success"

    @property
    def is_failed(self) -> bool:
        return self.status == "error"


class ActionResponse(ResponseModel):
    action: Action


class ActionsResponse(ResponseModel):
    """Operations that start several actions at once (e.g. firewall apply)."""

    actions: list[Action]


class ListActionsResponse(ListResponse):
    actions: list[Action]


class DeleteResponse(ResponseModel):
    """Body of a delete that answered with content instead of 204."""

    action: Action | None = None
