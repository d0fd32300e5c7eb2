# async_api.py - async/await Kitsu client, same method set as KitsuClient
from __future__ import annotations

import logging
from typing import Optional

import httpx

from kitsu import endpoints
from kitsu.api import SearchFn, item_request, search_request
from kitsu.config import ConfigManager, NetworkConfig
from kitsu.endpoints import ANIME, API_URL, CHARACTERS, MANGA, PRODUCERS, USERS
from kitsu.models import Anime, Character, Manga, Producer, Response, User
from kitsu.net_client import NetClient
from kitsu.transport import AsyncHttpTransport


class AsyncKitsuClient:
    """
    httpx.AsyncClient flavour of KitsuClient.

    Calls are independent; several of them may run at once on one client:

        async with AsyncKitsuClient() as client:
            anime, manga = await asyncio.gather(client.get_anime(1), client.get_manga(1))
    """

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        *,
        base_url: str = API_URL,
        logger: logging.Logger | None = None,
        owns_http: bool | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._owns_http = http is None if owns_http is None else owns_http
        self._http = http if http is not None else NetClient(NetworkConfig()).create_async_httpx_client()
        self.transport = AsyncHttpTransport(self._http, base_url=base_url, logger=self.logger)

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        *,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AsyncKitsuClient":
        net_client = NetClient(config.network, config.api)
        return cls(
            net_client.create_async_httpx_client(transport=transport),
            base_url=config.api.base_url,
            logger=logger,
            owns_http=True,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncKitsuClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ---- endpoints ----

    async def get_anime(self, anime_id: int | str) -> Response[Anime]:
        return await self.transport.get(*item_request(endpoints.anime(anime_id), Anime))

    async def get_manga(self, manga_id: int | str) -> Response[Manga]:
        return await self.transport.get(*item_request(endpoints.manga(manga_id), Manga))

    async def get_character(self, character_id: int | str) -> Response[Character]:
        return await self.transport.get(*item_request(endpoints.character(character_id), Character))

    async def get_producer(self, producer_id: int | str) -> Response[Producer]:
        return await self.transport.get(*item_request(endpoints.producer(producer_id), Producer))

    async def get_user(self, user_id: int | str) -> Response[User]:
        return await self.transport.get(*item_request(endpoints.user(user_id), User))

    async def search_anime(self, f: Optional[SearchFn] = None) -> Response[list[Anime]]:
        return await self.transport.get(*search_request(ANIME, Anime, f))

    async def search_manga(self, f: Optional[SearchFn] = None) -> Response[list[Manga]]:
        return await self.transport.get(*search_request(MANGA, Manga, f))

    async def search_characters(self, f: Optional[SearchFn] = None) -> Response[list[Character]]:
        return await self.transport.get(*search_request(CHARACTERS, Character, f))

    async def search_producers(self, f: Optional[SearchFn] = None) -> Response[list[Producer]]:
        return await self.transport.get(*search_request(PRODUCERS, Producer, f))

    async def search_users(self, f: Optional[SearchFn] = None) -> Response[list[User]]:
        return await self.transport.get(*search_request(USERS, User, f))
