# models.py - typed shapes for Kitsu JSON:API resources
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what}: expected object, got {type(value).__name__}")
    return value


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


def _frozen_mapping(value: Any, what: str) -> Mapping[str, Any]:
    """Read-only view over a copy of an optional JSON object (shallow)."""
    if value is None:
        return _empty_mapping()
    return MappingProxyType(dict(_mapping(value, what)))


def _str_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeError(f"expected list, got {type(value).__name__}")
    return tuple(str(v) for v in value)


def _resource_parts(raw: Any, expected_type: str) -> tuple[str, str, dict[str, Any], Mapping[str, Any]]:
    """Splits a JSON:API resource object into (id, type, attributes, links)."""
    raw = _mapping(raw, expected_type)
    if "id" not in raw or raw["id"] is None:
        raise KeyError(f"{expected_type}: missing 'id'")
    attributes = _mapping(raw.get("attributes"), f"{expected_type}.attributes")
    links = _frozen_mapping(raw.get("links"), f"{expected_type}.links")
    return str(raw["id"]), str(raw.get("type", expected_type)), attributes, links


@dataclass(frozen=True)
class Image:
    tiny: Optional[str] = None
    small: Optional[str] = None
    medium: Optional[str] = None
    large: Optional[str] = None
    original: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Image"]:
        if raw is None:
            return None
        raw = _mapping(raw, "image")
        return cls(
            tiny=raw.get("tiny"),
            small=raw.get("small"),
            medium=raw.get("medium"),
            large=raw.get("large"),
            original=raw.get("original"),
        )


@dataclass(frozen=True)
class AnimeAttributes:
    slug: str
    canonical_title: str
    titles: Mapping[str, Optional[str]] = field(default_factory=_empty_mapping)
    abbreviated_titles: tuple[str, ...] = ()
    synopsis: Optional[str] = None
    average_rating: Optional[str] = None
    rating_frequencies: Mapping[str, str] = field(default_factory=_empty_mapping)
    user_count: Optional[int] = None
    favorites_count: Optional[int] = None
    popularity_rank: Optional[int] = None
    rating_rank: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    age_rating: Optional[str] = None
    age_rating_guide: Optional[str] = None
    subtype: Optional[str] = None
    show_type: Optional[str] = None
    status: Optional[str] = None
    episode_count: Optional[int] = None
    episode_length: Optional[int] = None
    youtube_video_id: Optional[str] = None
    nsfw: bool = False
    poster_image: Optional[Image] = None
    cover_image: Optional[Image] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AnimeAttributes":
        return cls(
            slug=raw["slug"],
            canonical_title=raw["canonicalTitle"],
            titles=_frozen_mapping(raw.get("titles"), "titles"),
            abbreviated_titles=_str_tuple(raw.get("abbreviatedTitles")),
            synopsis=raw.get("synopsis"),
            average_rating=raw.get("averageRating"),
            rating_frequencies=_frozen_mapping(raw.get("ratingFrequencies"), "ratingFrequencies"),
            user_count=raw.get("userCount"),
            favorites_count=raw.get("favoritesCount"),
            popularity_rank=raw.get("popularityRank"),
            rating_rank=raw.get("ratingRank"),
            start_date=raw.get("startDate"),
            end_date=raw.get("endDate"),
            age_rating=raw.get("ageRating"),
            age_rating_guide=raw.get("ageRatingGuide"),
            subtype=raw.get("subtype"),
            show_type=raw.get("showType"),
            status=raw.get("status"),
            episode_count=raw.get("episodeCount"),
            episode_length=raw.get("episodeLength"),
            youtube_video_id=raw.get("youtubeVideoId"),
            nsfw=bool(raw.get("nsfw", False)),
            poster_image=Image.from_dict(raw.get("posterImage")),
            cover_image=Image.from_dict(raw.get("coverImage")),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )


@dataclass(frozen=True)
class MangaAttributes:
    slug: str
    canonical_title: str
    titles: Mapping[str, Optional[str]] = field(default_factory=_empty_mapping)
    abbreviated_titles: tuple[str, ...] = ()
    synopsis: Optional[str] = None
    average_rating: Optional[str] = None
    rating_frequencies: Mapping[str, str] = field(default_factory=_empty_mapping)
    user_count: Optional[int] = None
    favorites_count: Optional[int] = None
    popularity_rank: Optional[int] = None
    rating_rank: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    age_rating: Optional[str] = None
    age_rating_guide: Optional[str] = None
    subtype: Optional[str] = None
    manga_type: Optional[str] = None
    status: Optional[str] = None
    serialization: Optional[str] = None
    chapter_count: Optional[int] = None
    volume_count: Optional[int] = None
    poster_image: Optional[Image] = None
    cover_image: Optional[Image] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "MangaAttributes":
        return cls(
            slug=raw["slug"],
            canonical_title=raw["canonicalTitle"],
            titles=_frozen_mapping(raw.get("titles"), "titles"),
            abbreviated_titles=_str_tuple(raw.get("abbreviatedTitles")),
            synopsis=raw.get("synopsis"),
            average_rating=raw.get("averageRating"),
            rating_frequencies=_frozen_mapping(raw.get("ratingFrequencies"), "ratingFrequencies"),
            user_count=raw.get("userCount"),
            favorites_count=raw.get("favoritesCount"),
            popularity_rank=raw.get("popularityRank"),
            rating_rank=raw.get("ratingRank"),
            start_date=raw.get("startDate"),
            end_date=raw.get("endDate"),
            age_rating=raw.get("ageRating"),
            age_rating_guide=raw.get("ageRatingGuide"),
            subtype=raw.get("subtype"),
            manga_type=raw.get("mangaType"),
            status=raw.get("status"),
            serialization=raw.get("serialization"),
            chapter_count=raw.get("chapterCount"),
            volume_count=raw.get("volumeCount"),
            poster_image=Image.from_dict(raw.get("posterImage")),
            cover_image=Image.from_dict(raw.get("coverImage")),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )


@dataclass(frozen=True)
class CharacterAttributes:
    name: str
    slug: Optional[str] = None
    canonical_name: Optional[str] = None
    names: Mapping[str, Optional[str]] = field(default_factory=_empty_mapping)
    other_names: tuple[str, ...] = ()
    description: Optional[str] = None
    mal_id: Optional[int] = None
    image: Optional[Image] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CharacterAttributes":
        return cls(
            name=raw.get("name") or raw["canonicalName"],
            slug=raw.get("slug"),
            canonical_name=raw.get("canonicalName"),
            names=_frozen_mapping(raw.get("names"), "names"),
            other_names=_str_tuple(raw.get("otherNames")),
            description=raw.get("description"),
            mal_id=raw.get("malId"),
            image=Image.from_dict(raw.get("image")),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )


@dataclass(frozen=True)
class ProducerAttributes:
    name: str
    slug: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ProducerAttributes":
        return cls(
            name=raw["name"],
            slug=raw.get("slug"),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )


@dataclass(frozen=True)
class UserAttributes:
    name: str
    slug: Optional[str] = None
    about: Optional[str] = None
    location: Optional[str] = None
    gender: Optional[str] = None
    birthday: Optional[str] = None
    waifu_or_husbando: Optional[str] = None
    followers_count: Optional[int] = None
    following_count: Optional[int] = None
    life_spent_on_anime: Optional[int] = None
    comments_count: Optional[int] = None
    favorites_count: Optional[int] = None
    likes_given_count: Optional[int] = None
    likes_received_count: Optional[int] = None
    posts_count: Optional[int] = None
    ratings_count: Optional[int] = None
    reviews_count: Optional[int] = None
    pro_tier: Optional[str] = None
    title: Optional[str] = None
    avatar: Optional[Image] = None
    cover_image: Optional[Image] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "UserAttributes":
        return cls(
            name=raw["name"],
            slug=raw.get("slug"),
            about=raw.get("about"),
            location=raw.get("location"),
            gender=raw.get("gender"),
            birthday=raw.get("birthday"),
            waifu_or_husbando=raw.get("waifuOrHusbando"),
            followers_count=raw.get("followersCount"),
            following_count=raw.get("followingCount"),
            life_spent_on_anime=raw.get("lifeSpentOnAnime"),
            comments_count=raw.get("commentsCount"),
            favorites_count=raw.get("favoritesCount"),
            likes_given_count=raw.get("likesGivenCount"),
            likes_received_count=raw.get("likesReceivedCount"),
            posts_count=raw.get("postsCount"),
            ratings_count=raw.get("ratingsCount"),
            reviews_count=raw.get("reviewsCount"),
            pro_tier=raw.get("proTier"),
            title=raw.get("title"),
            avatar=Image.from_dict(raw.get("avatar")),
            cover_image=Image.from_dict(raw.get("coverImage")),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )


@dataclass(frozen=True)
class Anime:
    id: str
    kind: str
    attributes: AnimeAttributes
    links: Mapping[str, str] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, raw: Any) -> "Anime":
        rid, kind, attributes, links = _resource_parts(raw, "anime")
        return cls(id=rid, kind=kind, attributes=AnimeAttributes.from_dict(attributes), links=links)


@dataclass(frozen=True)
class Manga:
    id: str
    kind: str
    attributes: MangaAttributes
    links: Mapping[str, str] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, raw: Any) -> "Manga":
        rid, kind, attributes, links = _resource_parts(raw, "manga")
        return cls(id=rid, kind=kind, attributes=MangaAttributes.from_dict(attributes), links=links)


@dataclass(frozen=True)
class Character:
    id: str
    kind: str
    attributes: CharacterAttributes
    links: Mapping[str, str] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, raw: Any) -> "Character":
        rid, kind, attributes, links = _resource_parts(raw, "characters")
        return cls(id=rid, kind=kind, attributes=CharacterAttributes.from_dict(attributes), links=links)


@dataclass(frozen=True)
class Producer:
    id: str
    kind: str
    attributes: ProducerAttributes
    links: Mapping[str, str] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, raw: Any) -> "Producer":
        rid, kind, attributes, links = _resource_parts(raw, "producers")
        return cls(id=rid, kind=kind, attributes=ProducerAttributes.from_dict(attributes), links=links)


@dataclass(frozen=True)
class User:
    id: str
    kind: str
    attributes: UserAttributes
    links: Mapping[str, str] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, raw: Any) -> "User":
        rid, kind, attributes, links = _resource_parts(raw, "users")
        return cls(id=rid, kind=kind, attributes=UserAttributes.from_dict(attributes), links=links)


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    `{"data": ...}` envelope every successful body is wrapped in.

    `meta` and `links` are copied from the top level when the service sends
    them (search results carry `meta.count` and `links.next`); nothing here
    follows them. Both are read-only views, like every mapping on the
    resource models; `data` itself is a plain value or list owned by the caller.
    """
    data: T
    meta: Mapping[str, Any] = field(default_factory=_empty_mapping)
    links: Mapping[str, Any] = field(default_factory=_empty_mapping)

    @classmethod
    def single(cls, payload: Any, model: Callable[[Any], T]) -> "Response[T]":
        body = _mapping(payload, "response")
        if "data" not in body:
            raise KeyError("response: missing 'data'")
        return cls(
            data=model(body["data"]),
            meta=_frozen_mapping(body.get("meta"), "meta"),
            links=_frozen_mapping(body.get("links"), "links"),
        )

    @classmethod
    def many(cls, payload: Any, model: Callable[[Any], T]) -> "Response[list[T]]":
        body = _mapping(payload, "response")
        if "data" not in body:
            raise KeyError("response: missing 'data'")
        items = body["data"]
        if not isinstance(items, list):
            raise TypeError(f"response.data: expected list, got {type(items).__name__}")
        return cls(
            data=[model(item) for item in items],
            meta=_frozen_mapping(body.get("meta"), "meta"),
            links=_frozen_mapping(body.get("links"), "links"),
        )
