"""Python client for the seeip.org IP address and geolocation API.

Every function issues one blocking GET and either returns the result or
raises a subclass of :class:`SeeIpError`::

    import seeip

    print(seeip.get_ip())
    print(seeip.get_geo("208.67.222.222").country)

The ``_v4`` and ``_v6`` variants pin the query to one address family. Geo
fields the API leaves out keep their empty default.
"""

from . import config
from .client import SeeIpClient, call_addr, call_geo
from .config import DEFAULT_SETTINGS, ClientSettings, Config, IpKind, add_ip
from .exceptions import DecodeError, RemoteStatusError, SeeIpError, TransportError
from .models import GeoInfo

__version__ = "0.1.0"

__all__ = [
    "ClientSettings",
    "Config",
    "DEFAULT_SETTINGS",
    "DecodeError",
    "GeoInfo",
    "IpKind",
    "RemoteStatusError",
    "SeeIpClient",
    "SeeIpError",
    "TransportError",
    "add_ip",
    "call_addr",
    "call_geo",
    "get_caller_geo",
    "get_caller_geo_v4",
    "get_caller_geo_v6",
    "get_geo",
    "get_geo_v4",
    "get_geo_v6",
    "get_ip",
    "get_ip_v4",
    "get_ip_v6",
    "lookup",
    "lookup_v4",
    "lookup_v6",
]


# -- IP address calls --

def get_ip(settings: ClientSettings = DEFAULT_SETTINGS) -> str:
    """Return the caller's IPv4 or IPv6 address."""
    return call_addr(config.default_config(), settings)


def get_ip_v4(settings: ClientSettings = DEFAULT_SETTINGS) -> str:
    """Return the caller's IPv4 address."""
    return call_addr(config.ipv4_config(), settings)


def get_ip_v6(settings: ClientSettings = DEFAULT_SETTINGS) -> str:
    """Return the caller's IPv6 address."""
    return call_addr(config.ipv6_config(), settings)


# -- Geo calls for the caller --

def get_caller_geo(settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    """Return geo info for the caller's IPv4 or IPv6 address."""
    return call_geo(config.geo_default_config(), settings)


def get_caller_geo_v4(settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    return call_geo(config.geo_ipv4_config(), settings)


def get_caller_geo_v6(settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    return call_geo(config.geo_ipv6_config(), settings)


# -- Geo calls for a given address --

def get_geo(ip_addr: str, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    """Return geo info for ``ip_addr`` (IPv4 or IPv6)."""
    return call_geo(add_ip(config.geo_default_config(), ip_addr), settings)


def get_geo_v4(ip_addr: str, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    return call_geo(add_ip(config.geo_ipv4_config(), ip_addr), settings)


def get_geo_v6(ip_addr: str, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    return call_geo(add_ip(config.geo_ipv6_config(), ip_addr), settings)


def lookup(ip_addr: str | None = None, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    """Return geo info for ``ip_addr``, or for the caller when it is None."""
    if ip_addr is None:
        return get_caller_geo(settings)
    return get_geo(ip_addr, settings)


def lookup_v4(ip_addr: str | None = None, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    if ip_addr is None:
        return get_caller_geo_v4(settings)
    return get_geo_v4(ip_addr, settings)


def lookup_v6(ip_addr: str | None = None, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    if ip_addr is None:
        return get_caller_geo_v6(settings)
    return get_geo_v6(ip_addr, settings)
