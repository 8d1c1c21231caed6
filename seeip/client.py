"""HTTP client for the seeip.org address and geoip endpoints."""

from dataclasses import dataclass

import requests

from .config import DEFAULT_SETTINGS, ClientSettings, Config
from .exceptions import DecodeError, RemoteStatusError, TransportError
from .log_utils import log_debug
from .models import GeoInfo


@dataclass
class SeeIpClient:
    settings: ClientSettings = DEFAULT_SETTINGS
    session: requests.Session | None = None

    def call_addr(self, config: Config) -> str:
        """Return the body of the address endpoint in ``config`` unchanged.

        requests decodes the body with replacement characters, so a body
        that cannot be read fails inside ``get`` as a TransportError.
        """
        return self._get(config).text

    def call_geo(self, config: Config) -> GeoInfo:
        """Return the geo-info record the endpoint in ``config`` answers with."""
        response = self._get(config)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"response is not valid JSON: {exc}", url=config.url) from exc
        try:
            return GeoInfo.from_dict(payload)
        except DecodeError as exc:
            exc.url = config.url
            self._log(config, f"decode error url={config.url} exc={exc}")
            raise

    def _get(self, config: Config) -> requests.Response:
        headers = {"User-Agent": self.settings.user_agent}
        getter = self.session.get if self.session is not None else requests.get
        try:
            self._log(config, f"request url={config.url}")
            response = getter(config.url, headers=headers, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            self._log(config, f"error url={config.url} exc={exc}")
            raise TransportError(str(exc), url=config.url) from exc
        if not 200 <= response.status_code < 300:
            self._log(config, f"error url={config.url} status={response.status_code}")
            raise RemoteStatusError(response.status_code, response.reason or "", url=config.url)
        self._log(config, f"ok url={config.url} status={response.status_code}")
        return response

    def _log(self, config: Config, message: str) -> None:
        log_debug(self.settings.debug, message, source=f"seeip.{config.ip_kind.value}")


def call_addr(config: Config, settings: ClientSettings = DEFAULT_SETTINGS) -> str:
    return SeeIpClient(settings=settings).call_addr(config)


def call_geo(config: Config, settings: ClientSettings = DEFAULT_SETTINGS) -> GeoInfo:
    return SeeIpClient(settings=settings).call_geo(config)
