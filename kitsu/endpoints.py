# endpoints.py
from kitsu.errors import UrlError

API_URL = "https://kitsu.io/api/edge"

ANIME = "anime"
MANGA = "manga"
CHARACTERS = "characters"
PRODUCERS = "producers"
# single producers live under the singular path
PRODUCER = "producer"
USERS = "users"


def resource(collection: str, resource_id: int | str) -> str:
    """`{collection}/{id}`; ids are non-negative integers."""
    if isinstance(resource_id, bool) or not isinstance(resource_id, (int, str)):
        raise UrlError(f"Invalid {collection} id: {resource_id!r}")
    rid = str(resource_id)
    if not rid.isdigit() or not rid.isascii():
        raise UrlError(f"Invalid {collection} id: {resource_id!r}")
    return f"{collection}/{rid}"


def anime(anime_id: int | str) -> str:
    return resource(ANIME, anime_id)


def manga(manga_id: int | str) -> str:
    return resource(MANGA, manga_id)


def character(character_id: int | str) -> str:
    return resource(CHARACTERS, character_id)


def producer(producer_id: int | str) -> str:
    return resource(PRODUCER, producer_id)


def user(user_id: int | str) -> str:
    return resource(USERS, user_id)
