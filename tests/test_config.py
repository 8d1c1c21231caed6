import dataclasses
import unittest

from seeip import config
from seeip.config import ClientSettings, IpKind


BUILDERS = [
    config.default_config,
    config.ipv4_config,
    config.ipv6_config,
    config.geo_default_config,
    config.geo_ipv4_config,
    config.geo_ipv6_config,
]


class ConfigTests(unittest.TestCase):

    def test_builders_use_https(self):
        for builder in BUILDERS:
            cfg = builder()
            self.assertTrue(cfg.url.startswith("https://"), cfg.url)

    def test_families_have_distinct_urls(self):
        addr_urls = {b().url for b in BUILDERS[:3]}
        geo_urls = {b().url for b in BUILDERS[3:]}
        self.assertEqual(len(addr_urls), 3)
        self.assertEqual(len(geo_urls), 3)

    def test_ip_kinds(self):
        self.assertEqual(config.default_config().ip_kind, IpKind.BOTH)
        self.assertEqual(config.ipv4_config().ip_kind, IpKind.V4)
        self.assertEqual(config.ipv6_config().ip_kind, IpKind.V6)
        self.assertEqual(config.geo_default_config().ip_kind, IpKind.BOTH)
        self.assertEqual(config.geo_ipv4_config().ip_kind, IpKind.V4)
        self.assertEqual(config.geo_ipv6_config().ip_kind, IpKind.V6)

    def test_geo_urls(self):
        self.assertEqual(config.geo_default_config().url, "https://api.seeip.org/geoip")
        self.assertEqual(config.geo_ipv4_config().url, "https://ipv4.seeip.org/geoip")
        self.assertEqual(config.geo_ipv6_config().url, "https://ipv6.seeip.org/geoip")

    def test_add_ip_appends_segment(self):
        cfg = config.geo_default_config()
        with_ip = config.add_ip(cfg, "208.67.222.222")
        self.assertEqual(with_ip.url, cfg.url + "/208.67.222.222")
        self.assertEqual(with_ip.ip_kind, cfg.ip_kind)
        # input config is left untouched
        self.assertEqual(cfg.url, "https://api.seeip.org/geoip")

    def test_add_ip_does_not_validate(self):
        cfg = config.add_ip(config.geo_ipv6_config(), "not-an-ip")
        self.assertEqual(cfg.url, "https://ipv6.seeip.org/geoip/not-an-ip")

    def test_config_is_frozen(self):
        cfg = config.default_config()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.url = "https://example.com"


class ClientSettingsTests(unittest.TestCase):

    def test_defaults(self):
        settings = ClientSettings()
        self.assertEqual(settings.timeout, (5.0, 5.0))
        self.assertFalse(settings.debug)

    def test_rejects_non_positive_timeouts(self):
        with self.assertRaises(ValueError):
            ClientSettings(connect_timeout_seconds=0)
        with self.assertRaises(ValueError):
            ClientSettings(read_timeout_seconds=-1)


if __name__ == '__main__':
    unittest.main()
