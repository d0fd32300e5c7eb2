# net_client.py
import httpx

from kitsu.config import ApiConfig, NetworkConfig

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


class NetClient:
    """Creates httpx clients sharing proxy, timeouts and JSON:API headers."""

    def __init__(self, cfg: NetworkConfig, api: ApiConfig | None = None):
        if cfg.proxy_enabled and cfg.proxy_url:
            self._proxy_url = cfg.proxy_url
        else:
            self._proxy_url = None
        self._timeout = httpx.Timeout(cfg.timeout, connect=cfg.connect_timeout)
        self._api = api or ApiConfig()

    @property
    def proxy_url(self) -> str | None:
        return self._proxy_url

    def default_headers(self) -> dict:
        return {
            "User-Agent": self._api.user_agent,
            "Accept": JSON_API_MEDIA_TYPE,
        }

    def create_httpx_client(self, *, headers: dict | None = None,
                            timeout: httpx.Timeout | float | None = None,
                            limits: httpx.Limits | None = None,
                            transport: httpx.BaseTransport | None = None) -> httpx.Client:
        return httpx.Client(
            proxy=self._proxy_url,
            http1=True,
            http2=False,
            headers={**self.default_headers(), **(headers or {})},
            timeout=timeout or self._timeout,
            limits=limits or httpx.Limits(max_keepalive_connections=6, max_connections=6),
            transport=transport,
        )

    def create_async_httpx_client(self, *, headers: dict | None = None,
                                  timeout: httpx.Timeout | float | None = None,
                                  limits: httpx.Limits | None = None,
                                  transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            proxy=self._proxy_url,
            http1=True,
            http2=False,
            headers={**self.default_headers(), **(headers or {})},
            timeout=timeout or self._timeout,
            limits=limits or httpx.Limits(max_keepalive_connections=6, max_connections=6),
            transport=transport,
        )
