"""Small workflows combining several calls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from hcloud_client.core.domain.floating_ips import FloatingIP
from hcloud_client.core.domain.images import Image
from hcloud_client.core.domain.servers import CreateServerRequest, Server
from hcloud_client.core.services.actions import PollOptions, poll_action
from hcloud_client.core.services.pagination import get_all_pages

if TYPE_CHECKING:
    from hcloud_client.client import HCloudClient

logger = logging.getLogger(__name__)


async def create_and_wait_for_server(
    client: HCloudClient,
    params: CreateServerRequest | Mapping[str, Any],
    options: PollOptions | None = None,
) -> Server:
    """Create a server, wait for its create action and return the fresh server."""

    created = await client.servers.create(params)
    logger.debug("server %s created, waiting for action %s", created.server.id, created.action.id)
    await poll_action(client, created.action.id, options)
    return await client.servers.get(created.server.id)


async def find_server_by_name(client: HCloudClient, name: str) -> Server | None:
    response = await client.servers.list(name=name)
    return response.servers[0] if response.servers else None


async def find_image_by_name(client: HCloudClient, name: str) -> Image | None:
    response = await client.images.list(name=name)
    return response.images[0] if response.images else None


async def find_floating_ip_by_ip(client: HCloudClient, ip: str) -> FloatingIP | None:
    """Look up a floating IP by address; the API has no server-side filter."""

    floating_ips = await get_all_pages(client.floating_ips.list, "floating_ips")
    return next((item for item in floating_ips if item.ip == ip), None)
