"""Endpoint groups: paths, query marshalling, request and response validation."""

from __future__ import annotations

import httpx
import pytest

from hcloud_client import HCloudError
from hcloud_client.adapters.endpoints import build_query

from tests.payloads import (
    action_payload,
    firewall_payload,
    floating_ip_payload,
    image_payload,
    pagination,
    rrset_payload,
    server_payload,
    ssh_key_payload,
)


def test_build_query_normalizes_repeatable_filters() -> None:
    query = build_query(
        {"status": "running", "sort": ("id", "name"), "name": "web", "page": None},
        repeated=("status", "sort"),
    )
    assert query == {"status": ["running"], "sort": ["id", "name"], "name": "web"}


# ============================================================================
# SERVERS
# ============================================================================


class TestServers:
    @pytest.mark.asyncio
    async def test_list_sends_repeated_status_and_scalar_name(self, client, router) -> None:
        router.json("GET", "/servers", {"servers": [server_payload()], "meta": pagination(total=1)})

        response = await client.servers.list(name="web-1", status="running", sort=["name:asc", "id:desc"])

        params = router.last.url.params
        assert params.get_list("status") == ["running"]
        assert params.get_list("sort") == ["name:asc", "id:desc"]
        assert params["name"] == "web-1"
        assert "label_selector" not in params
        assert response.servers[0].is_running
        assert response.meta.pagination.total_entries == 1

    @pytest.mark.asyncio
    async def test_create_posts_only_given_fields(self, client, router) -> None:
        router.json(
            "POST",
            "/servers",
            {
                "server": server_payload(status="initializing"),
                "action": action_payload(),
                "next_actions": [action_payload(2, command="start_server")],
                "root_password": "s3cret",
            },
            status_code=201,
        )

        created = await client.servers.create(
            {"name": "web-1", "server_type": "cx22", "image": "ubuntu-24.04", "labels": {"env": "test"}}
        )

        assert router.last.method == "POST"
        assert router.body() == {
            "name": "web-1",
            "server_type": "cx22",
            "image": "ubuntu-24.04",
            "labels": {"env": "test"},
        }
        assert created.server.status == "initializing"
        assert created.action.id == 1
        assert [a.id for a in created.next_actions] == [2]
        assert created.root_password == "s3cret"

    @pytest.mark.asyncio
    async def test_invalid_create_request_is_never_sent(self, client, router) -> None:
        with pytest.raises(HCloudError) as info:
            await client.servers.create({"name": "web-1", "server_type": "cx22"})

        assert info.value.code == "VALIDATION_ERROR"
        assert [f.name for f in info.value.get_field_errors()] == ["image"]
        assert router.requests == []

    @pytest.mark.asyncio
    async def test_unknown_request_key_is_rejected(self, client, router) -> None:
        with pytest.raises(HCloudError) as info:
            await client.servers.update(42, {"name": "web-2", "ram": 8})

        assert info.value.is_validation_error
        assert router.requests == []

    @pytest.mark.asyncio
    async def test_invalid_response_names_field_path(self, client, router) -> None:
        broken = server_payload()
        broken["status"] = "exploded"
        router.json("GET", "/servers/42", {"server": broken})

        with pytest.raises(HCloudError) as info:
            await client.servers.get(42)

        assert info.value.code == "VALIDATION_ERROR"
        assert info.value.status_code == 0
        assert [f.name for f in info.value.get_field_errors()] == ["server.status"]

    @pytest.mark.asyncio
    async def test_get_preserves_unknown_fields(self, client, router) -> None:
        payload = server_payload()
        payload["placement_group"] = None
        payload["new_feature"] = {"enabled": True}
        router.json("GET", "/servers/42", {"server": payload})

        server = await client.servers.get(42)

        assert server.model_dump(mode="json", exclude_unset=True) == payload

    @pytest.mark.asyncio
    async def test_delete_returns_action(self, client, router) -> None:
        router.json("DELETE", "/servers/42", {"action": action_payload(command="delete_server")})

        action = await client.servers.delete(42)

        assert action is not None
        assert action.command == "delete_server"

    @pytest.mark.parametrize(
        "method, command",
        [
            ("power_on", "poweron"),
            ("power_off", "poweroff"),
            ("reboot", "reboot"),
            ("reset", "reset"),
            ("shutdown", "shutdown"),
            ("detach_iso", "detach_iso"),
            ("disable_rescue", "disable_rescue"),
        ],
    )
    @pytest.mark.asyncio
    async def test_plain_actions(self, client, router, method: str, command: str) -> None:
        router.json("POST", f"/servers/42/actions/{command}", {"action": action_payload(command=command)})

        action = await getattr(client.servers, method)(42)

        assert action.command == command
        assert router.body() == {}

    @pytest.mark.asyncio
    async def test_change_type_body(self, client, router) -> None:
        router.json("POST", "/servers/42/actions/change_type", {"action": action_payload(command="change_server_type")})

        await client.servers.change_type(42, "cx32", upgrade_disk=False)

        assert router.body() == {"server_type": "cx32", "upgrade_disk": False}

    @pytest.mark.asyncio
    async def test_enable_rescue_returns_password(self, client, router) -> None:
        router.json(
            "POST",
            "/servers/42/actions/enable_rescue",
            {"action": action_payload(command="enable_rescue"), "root_password": "rescue-pw"},
        )

        result = await client.servers.enable_rescue(42, {"type": "linux64", "ssh_keys": [3]})

        assert result.root_password == "rescue-pw"
        assert router.body() == {"type": "linux64", "ssh_keys": [3]}

    @pytest.mark.asyncio
    async def test_get_metrics_joins_types(self, client, router) -> None:
        router.json(
            "GET",
            "/servers/42/metrics",
            {
                "metrics": {
                    "start": "2024-01-01T00:00:00Z",
                    "end": "2024-01-01T01:00:00Z",
                    "step": 60,
                    "time_series": {"cpu": {"values": [[1704067200.0, "3.5"]]}},
                }
            },
        )

        response = await client.servers.get_metrics(
            42, type=["cpu", "disk"], start="2024-01-01T00:00:00Z", end="2024-01-01T01:00:00Z"
        )

        assert router.last.url.params["type"] == "cpu,disk"
        assert response.metrics.time_series["cpu"].values[0][1] == "3.5"

    @pytest.mark.asyncio
    async def test_list_actions_and_get_action(self, client, router) -> None:
        router.json("GET", "/servers/42/actions", {"actions": [action_payload()], "meta": pagination(total=1)})
        router.json("GET", "/servers/42/actions/1", {"action": action_payload(status="success", progress=100)})

        listed = await client.servers.list_actions(42, status="running")
        fetched = await client.servers.get_action(42, 1)

        assert router.requests[0].url.params.get_list("status") == ["running"]
        assert [a.id for a in listed.actions] == [1]
        assert fetched.is_successful


# ============================================================================
# OTHER GROUPS
# ============================================================================


@pytest.mark.asyncio
async def test_ssh_key_delete_204_returns_none(client, router) -> None:
    router.add("DELETE", "/ssh_keys/3", httpx.Response(204))

    assert await client.ssh_keys.delete(3) is None


@pytest.mark.asyncio
async def test_empty_body_where_a_payload_is_expected(client, router) -> None:
    router.add("POST", "/servers/42/actions/poweron", httpx.Response(204))

    with pytest.raises(HCloudError) as info:
        await client.servers.power_on(42)

    assert info.value.code == "UNKNOWN_ERROR"
    assert info.value.status_code == 0
    assert "unexpected empty body" in info.value.message


@pytest.mark.asyncio
async def test_ssh_key_create(client, router) -> None:
    router.json("POST", "/ssh_keys", {"ssh_key": ssh_key_payload()}, status_code=201)

    key = await client.ssh_keys.create({"name": "laptop", "public_key": "ssh-ed25519 AAAA... user@laptop"})

    assert key.id == 3
    assert router.body()["name"] == "laptop"


@pytest.mark.asyncio
async def test_images_list_repeats_type_and_architecture(client, router) -> None:
    router.json("GET", "/images", {"images": [image_payload()], "meta": pagination(total=1)})

    response = await client.images.list(type="system", architecture="x86", include_deprecated=False)

    params = router.last.url.params
    assert params.get_list("type") == ["system"]
    assert params.get_list("architecture") == ["x86"]
    assert params["include_deprecated"] == "false"
    assert response.images[0].is_system


@pytest.mark.asyncio
async def test_certificates_list_repeats_type(client, router) -> None:
    router.json("GET", "/certificates", {"certificates": []})

    await client.certificates.list(type=["managed", "uploaded"])

    assert router.last.url.params.get_list("type") == ["managed", "uploaded"]


@pytest.mark.asyncio
async def test_actions_list_repeats_id(client, router) -> None:
    router.json("GET", "/actions", {"actions": [action_payload(1), action_payload(2)]})

    response = await client.actions.list(id=[1, 2], status="running")

    assert router.last.url.params.get_list("id") == ["1", "2"]
    assert len(response.actions) == 2
    assert response.meta is None


@pytest.mark.asyncio
async def test_certificate_retry_issuance(client, router) -> None:
    router.json("POST", "/certificates/5/actions/retry", {"action": action_payload(command="issue_certificate")})

    action = await client.certificates.retry_issuance(5)

    assert action.command == "issue_certificate"
    assert router.body() == {}


@pytest.mark.asyncio
async def test_floating_ip_reverse_dns_accepts_null(client, router) -> None:
    router.json("POST", "/floating_ips/7/actions/change_dns_ptr", {"action": action_payload(command="change_dns_ptr")})

    await client.floating_ips.change_reverse_dns(7, "5.6.7.8", None)

    assert router.body() == {"ip": "5.6.7.8", "dns_ptr": None}


@pytest.mark.asyncio
async def test_floating_ip_assign(client, router) -> None:
    router.json("POST", "/floating_ips/7/actions/assign", {"action": action_payload(command="assign_floating_ip")})

    await client.floating_ips.assign(7, 42)

    assert router.body() == {"server": 42}


@pytest.mark.asyncio
async def test_primary_ip_assign(client, router) -> None:
    router.json("POST", "/primary_ips/8/actions/assign", {"action": action_payload(command="assign_primary_ip")})

    await client.primary_ips.assign(8, 42)

    assert router.body() == {"assignee_id": 42, "assignee_type": "server"}


@pytest.mark.asyncio
async def test_volume_resize_rejects_zero_before_sending(client, router) -> None:
    with pytest.raises(HCloudError):
        await client.volumes.resize(11, 0)

    assert router.requests == []


@pytest.mark.asyncio
async def test_network_add_route(client, router) -> None:
    router.json("POST", "/networks/4/actions/add_route", {"action": action_payload(command="add_route")})

    await client.networks.add_route(4, "10.100.1.0/24", "10.0.1.1")

    assert router.body() == {"destination": "10.100.1.0/24", "gateway": "10.0.1.1"}


@pytest.mark.asyncio
async def test_firewall_set_rules_returns_action_list(client, router) -> None:
    router.json(
        "POST",
        "/firewalls/9/actions/set_rules",
        {"actions": [action_payload(1, command="set_firewall_rules"), action_payload(2, command="apply_firewall")]},
    )

    actions = await client.firewalls.set_rules(
        9, [{"direction": "in", "protocol": "tcp", "port": "80-443", "source_ips": ["0.0.0.0/0"]}]
    )

    assert [a.id for a in actions] == [1, 2]
    assert router.body() == {
        "rules": [{"direction": "in", "protocol": "tcp", "port": "80-443", "source_ips": ["0.0.0.0/0"]}]
    }


@pytest.mark.asyncio
async def test_firewall_rule_port_is_validated(client, router) -> None:
    with pytest.raises(HCloudError) as info:
        await client.firewalls.set_rules(9, [{"direction": "in", "protocol": "tcp", "port": "http"}])

    assert [f.name for f in info.value.get_field_errors()] == ["rules.0.port"]
    assert router.requests == []


@pytest.mark.asyncio
async def test_firewall_get(client, router) -> None:
    router.json("GET", "/firewalls/9", {"firewall": firewall_payload()})

    firewall = await client.firewalls.get(9)

    assert firewall.rules[0].port == "443"


@pytest.mark.asyncio
async def test_load_balancer_change_reverse_dns_path(client, router) -> None:
    router.json("POST", "/load_balancers/6/actions/change_dns_ptr", {"action": action_payload(command="change_dns_ptr")})

    await client.load_balancers.change_reverse_dns(6, "1.2.3.4", "lb.example.com")

    assert router.last.url.path == "/v1/load_balancers/6/actions/change_dns_ptr"


@pytest.mark.asyncio
async def test_load_balancer_delete_service(client, router) -> None:
    router.json("POST", "/load_balancers/6/actions/delete_service", {"action": action_payload(command="delete_service")})

    await client.load_balancers.delete_service(6, 443)

    assert router.body() == {"listen_port": 443}


@pytest.mark.asyncio
async def test_dns_rrset_paths(client, router) -> None:
    router.json("GET", "/zones/example.com/rrsets/www/A", {"rrset": rrset_payload()})
    router.json("POST", "/zones/example.com/rrsets/www/A/actions/add_records", {"action": action_payload(command="add_rrset_records")})

    rrset = await client.dns.get_rrset("example.com", "www", "A")
    await client.dns.add_rrset_records("example.com", "www", "A", [{"value": "5.6.7.8"}], ttl=300)

    assert rrset.records[0].value == "1.2.3.4"
    assert router.body() == {"records": [{"value": "5.6.7.8"}], "ttl": 300}


@pytest.mark.asyncio
async def test_dns_list_rrsets_type_is_scalar(client, router) -> None:
    router.json("GET", "/zones/77/rrsets", {"rrsets": [rrset_payload()]})

    await client.dns.list_rrsets(77, type="A")

    assert router.last.url.params.get_list("type") == ["A"]
    assert router.last.url.query == b"type=A"


@pytest.mark.asyncio
async def test_dns_export_zone(client, router) -> None:
    router.json("GET", "/zones/example.com/zonefile", {"zonefile": "$ORIGIN example.com.\n"})

    assert await client.dns.export_zone("example.com") == "$ORIGIN example.com.\n"


@pytest.mark.asyncio
async def test_floating_ip_get(client, router) -> None:
    router.json("GET", "/floating_ips/7", {"floating_ip": floating_ip_payload()})

    floating_ip = await client.floating_ips.get(7)

    assert floating_ip.dns_ptr[0].dns_ptr == "server.example.com"
