"""One endpoint group per Cloud API resource family."""

from hcloud_client.adapters.endpoints.actions import ActionsEndpoint
from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, ResourceEndpoint, build_query
from hcloud_client.adapters.endpoints.certificates import CertificatesEndpoint
from hcloud_client.adapters.endpoints.dns import DnsEndpoint
from hcloud_client.adapters.endpoints.firewalls import FirewallsEndpoint
from hcloud_client.adapters.endpoints.floating_ips import FloatingIPsEndpoint, PrimaryIPsEndpoint
from hcloud_client.adapters.endpoints.images import ImagesEndpoint, IsosEndpoint
from hcloud_client.adapters.endpoints.load_balancers import LoadBalancersEndpoint
from hcloud_client.adapters.endpoints.locations import DatacentersEndpoint, LocationsEndpoint
from hcloud_client.adapters.endpoints.networks import NetworksEndpoint
from hcloud_client.adapters.endpoints.placement_groups import PlacementGroupsEndpoint
from hcloud_client.adapters.endpoints.pricing import PricingEndpoint
from hcloud_client.adapters.endpoints.server_types import ServerTypesEndpoint
from hcloud_client.adapters.endpoints.servers import ServersEndpoint
from hcloud_client.adapters.endpoints.ssh_keys import SSHKeysEndpoint
from hcloud_client.adapters.endpoints.volumes import VolumesEndpoint

__all__ = [
    "ActionResourceEndpoint",
    "ActionsEndpoint",
    "CertificatesEndpoint",
    "DatacentersEndpoint",
    "DnsEndpoint",
    "FirewallsEndpoint",
    "FloatingIPsEndpoint",
    "ImagesEndpoint",
    "IsosEndpoint",
    "LoadBalancersEndpoint",
    "LocationsEndpoint",
    "NetworksEndpoint",
    "PlacementGroupsEndpoint",
    "PricingEndpoint",
    "PrimaryIPsEndpoint",
    "ResourceEndpoint",
    "ServerTypesEndpoint",
    "ServersEndpoint",
    "SSHKeysEndpoint",
    "VolumesEndpoint",
    "build_query",
]
