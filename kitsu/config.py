# config.py
from __future__ import annotations

import configparser
from dataclasses import dataclass

from kitsu.endpoints import API_URL

DEFAULT_TIMEOUT = 15.0
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "kitsu-edge-client/0.1"


@dataclass
class NetworkConfig:
    proxy_enabled: bool = False
    proxy_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT


@dataclass
class ApiConfig:
    base_url: str = API_URL
    user_agent: str = DEFAULT_USER_AGENT


class ConfigManager:
    """
    Reads `[network]` and `[api]` sections from an ini file.

    Missing file, section or key falls back to the defaults above, so
    `ConfigManager()` alone gives a working setup.
    """

    def __init__(self, config_file: str | None = None):
        self.config = configparser.ConfigParser()
        if config_file:
            self.config.read(config_file, encoding="utf-8")

        # Ленивая загрузка конфигов
        self._network_config: NetworkConfig | None = None
        self._api_config: ApiConfig | None = None

    @property
    def network(self) -> NetworkConfig:
        if self._network_config is None:
            self._network_config = self._load_network_config()
        return self._network_config

    @property
    def api(self) -> ApiConfig:
        if self._api_config is None:
            self._api_config = self._load_api_config()
        return self._api_config

    def _load_network_config(self) -> NetworkConfig:
        try:
            section = self.config["network"]
        except KeyError:
            return NetworkConfig()
        return NetworkConfig(
            proxy_enabled=section.getboolean("proxy_enabled", fallback=False),
            proxy_url=section.get("proxy_url", fallback=None) or None,
            timeout=section.getfloat("timeout", fallback=DEFAULT_TIMEOUT),
            connect_timeout=section.getfloat("connect_timeout", fallback=DEFAULT_CONNECT_TIMEOUT),
        )

    def _load_api_config(self) -> ApiConfig:
        try:
            section = self.config["api"]
        except KeyError:
            return ApiConfig()
        return ApiConfig(
            base_url=(section.get("base_url", fallback=API_URL) or API_URL).rstrip("/"),
            user_agent=section.get("user_agent", fallback=DEFAULT_USER_AGENT),
        )
