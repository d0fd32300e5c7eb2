# api.py - blocking Kitsu client (endpoints only)
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Optional

import httpx

from kitsu import endpoints
from kitsu.config import ConfigManager, NetworkConfig
from kitsu.endpoints import ANIME, API_URL, CHARACTERS, MANGA, PRODUCERS, USERS
from kitsu.models import Anime, Character, Manga, Producer, Response, User
from kitsu.net_client import NetClient
from kitsu.search import Search
from kitsu.transport import Decoder, HttpTransport

SearchFn = Callable[[Search], Search]


def item_request(path: str, model: Any) -> tuple[str, Decoder]:
    return path, partial(Response.single, model=model.from_dict)


def search_request(collection: str, model: Any, f: Optional[SearchFn]) -> tuple[str, Decoder, str]:
    """Runs the caller's filter function on a fresh builder and encodes it once."""
    search = Search()
    if f is not None:
        search = f(search)
    return collection, partial(Response.many, model=model.from_dict), search.encode()


class KitsuClient:
    """
    Thin Kitsu API client: one method per endpoint, no orchestration.

    Borrows the httpx.Client passed in (TLS, pooling, default headers and
    timeouts are configured there). When none is passed, it builds its own
    and closes it in close().

        with KitsuClient() as client:
            anime = client.get_anime(1)
            print(anime.data.attributes.canonical_title)
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        *,
        base_url: str = API_URL,
        logger: logging.Logger | None = None,
        owns_http: bool | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._owns_http = http is None if owns_http is None else owns_http
        self._http = http if http is not None else NetClient(NetworkConfig()).create_httpx_client()
        self.transport = HttpTransport(self._http, base_url=base_url, logger=self.logger)

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        *,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "KitsuClient":
        net_client = NetClient(config.network, config.api)
        return cls(
            net_client.create_httpx_client(transport=transport),
            base_url=config.api.base_url,
            logger=logger,
            owns_http=True,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "KitsuClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---- endpoints ----

    def get_anime(self, anime_id: int | str) -> Response[Anime]:
        """GET /anime/{id}"""
        return self.transport.get(*item_request(endpoints.anime(anime_id), Anime))

    def get_manga(self, manga_id: int | str) -> Response[Manga]:
        """GET /manga/{id}"""
        return self.transport.get(*item_request(endpoints.manga(manga_id), Manga))

    def get_character(self, character_id: int | str) -> Response[Character]:
        return self.transport.get(*item_request(endpoints.character(character_id), Character))

    def get_producer(self, producer_id: int | str) -> Response[Producer]:
        return self.transport.get(*item_request(endpoints.producer(producer_id), Producer))

    def get_user(self, user_id: int | str) -> Response[User]:
        return self.transport.get(*item_request(endpoints.user(user_id), User))

    def search_anime(self, f: Optional[SearchFn] = None) -> Response[list[Anime]]:
        """
        Searches anime with the filters `f` adds to an empty Search.

            client.search_anime(lambda s: s.filter("text", "Beyond the Boundary"))
        """
        return self.transport.get(*search_request(ANIME, Anime, f))

    def search_manga(self, f: Optional[SearchFn] = None) -> Response[list[Manga]]:
        return self.transport.get(*search_request(MANGA, Manga, f))

    def search_characters(self, f: Optional[SearchFn] = None) -> Response[list[Character]]:
        return self.transport.get(*search_request(CHARACTERS, Character, f))

    def search_producers(self, f: Optional[SearchFn] = None) -> Response[list[Producer]]:
        return self.transport.get(*search_request(PRODUCERS, Producer, f))

    def search_users(self, f: Optional[SearchFn] = None) -> Response[list[User]]:
        """
        Searches users, e.g. by name:

            client.search_users(lambda s: s.filter("name", "vikhyat"))
        """
        return self.transport.get(*search_request(USERS, User, f))
