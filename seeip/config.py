"""Endpoint and transport configuration for the seeip.org API."""

from dataclasses import dataclass, replace
from enum import Enum


class IpKind(Enum):
    """Which address family the selected seeip host answers with."""

    V4 = "v4"
    V6 = "v6"
    BOTH = "both"


BASE_URLS = {
    IpKind.BOTH: "https://api.seeip.org",
    IpKind.V4: "https://ipv4.seeip.org",
    IpKind.V6: "https://ipv6.seeip.org",
}

GEO_PATH = "/geoip"


@dataclass(frozen=True)
class Config:
    ip_kind: IpKind
    url: str


def default_config() -> Config:
    return Config(ip_kind=IpKind.BOTH, url=BASE_URLS[IpKind.BOTH])


def ipv4_config() -> Config:
    return Config(ip_kind=IpKind.V4, url=BASE_URLS[IpKind.V4])


def ipv6_config() -> Config:
    return Config(ip_kind=IpKind.V6, url=BASE_URLS[IpKind.V6])


def geo_default_config() -> Config:
    return Config(ip_kind=IpKind.BOTH, url=BASE_URLS[IpKind.BOTH] + GEO_PATH)


def geo_ipv4_config() -> Config:
    return Config(ip_kind=IpKind.V4, url=BASE_URLS[IpKind.V4] + GEO_PATH)


def geo_ipv6_config() -> Config:
    return Config(ip_kind=IpKind.V6, url=BASE_URLS[IpKind.V6] + GEO_PATH)


def add_ip(config: Config, ip_address: str) -> Config:
    """Return a copy of ``config`` whose url ends with ``/<ip_address>``.

    The address is not validated; the API answers malformed input with an
    error status.
    """
    return replace(config, url=f"{config.url}/{ip_address}")


@dataclass(frozen=True)
class ClientSettings:
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 5.0
    user_agent: str = "seeip-python"
    debug: bool = False

    def __post_init__(self) -> None:
        if self.connect_timeout_seconds <= 0:
            raise ValueError("connect_timeout_seconds must be positive")
        if self.read_timeout_seconds <= 0:
            raise ValueError("read_timeout_seconds must be positive")

    @property
    def timeout(self) -> tuple[float, float]:
        return (self.connect_timeout_seconds, self.read_timeout_seconds)


DEFAULT_SETTINGS = ClientSettings()
