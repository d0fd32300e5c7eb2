from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from kitsu import (
    API_URL,
    Anime,
    BadRequestError,
    Character,
    ConfigManager,
    DeserializationError,
    InvalidResponseError,
    KitsuClient,
    Manga,
    Producer,
    UnauthorizedError,
    UrlError,
    User,
)


def make_client(handler):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return KitsuClient(http), http


@pytest.mark.parametrize("method, collection, model", [
    ("get_anime", "anime", Anime),
    ("get_manga", "manga", Manga),
    ("get_character", "characters", Character),
    ("get_producer", "producer", Producer),
    ("get_user", "users", User),
])
def test_get_by_id(recorder, payload, method, collection, model):
    recorder.reply(f"/api/edge/{collection}/1", json={"data": payload(collection, "1")})
    client, _ = make_client(recorder)

    res = getattr(client, method)(1)

    assert isinstance(res.data, model)
    assert res.data.id == "1"
    assert str(recorder.requests[0].url) == f"{API_URL}/{collection}/1"
    assert recorder.requests[0].method == "GET"


@pytest.mark.parametrize("method, collection, model", [
    ("search_anime", "anime", Anime),
    ("search_manga", "manga", Manga),
    ("search_characters", "characters", Character),
    ("search_producers", "producers", Producer),
    ("search_users", "users", User),
])
def test_search_sends_filters(recorder, payload, method, collection, model):
    recorder.reply(f"/api/edge/{collection}", json={
        "data": [payload(collection, "1"), payload(collection, "2")],
        "meta": {"count": 2},
    })
    client, _ = make_client(recorder)

    res = getattr(client, method)(lambda s: s.filter("text", "non non biyori"))

    assert [item.id for item in res.data] == ["1", "2"]
    assert all(isinstance(item, model) for item in res.data)
    assert res.meta == {"count": 2}
    url = recorder.requests[0].url
    assert url.path == f"/api/edge/{collection}"
    assert url.params.get_list("filter[text]") == ["non non biyori"]


def test_search_without_filters_has_empty_query(recorder, payload):
    recorder.reply("/api/edge/anime", json={"data": [payload("anime", "1")]})
    client, _ = make_client(recorder)

    res = client.search_anime()

    assert len(res.data) == 1
    assert str(recorder.requests[0].url) == f"{API_URL}/anime"
    assert recorder.requests[0].url.query == b""


def test_search_identity_filter_has_empty_query(recorder):
    recorder.reply("/api/edge/manga", json={"data": []})
    client, _ = make_client(recorder)

    res = client.search_manga(lambda s: s)

    assert res.data == []
    assert recorder.requests[0].url.query == b""


def test_search_preserves_duplicate_filters(recorder):
    recorder.reply("/api/edge/anime", json={"data": []})
    client, _ = make_client(recorder)

    client.search_anime(lambda s: s.filter("genres", "action").filter("genres", "comedy"))

    assert recorder.requests[0].url.params.get_list("filter[genres]") == ["action", "comedy"]


def test_filter_fn_called_once_with_empty_builder(recorder):
    recorder.reply("/api/edge/users", json={"data": []})
    client, _ = make_client(recorder)
    seen = []

    def f(search):
        seen.append(len(search))
        return search.filter("name", "vikhyat")

    client.search_users(f)
    assert seen == [0]


@pytest.mark.parametrize("status, error", [
    (400, BadRequestError),
    (401, UnauthorizedError),
    (404, InvalidResponseError),
    (500, InvalidResponseError),
])
def test_status_errors(recorder, status, error):
    body = {"errors": [{"status": str(status)}]}
    recorder.reply("/api/edge/anime/1", status_code=status, json=body)
    client, _ = make_client(recorder)

    with pytest.raises(error) as exc:
        client.get_anime(1)

    assert exc.value.status_code == status
    assert exc.value.response.json() == body
    assert exc.value.url == f"{API_URL}/anime/1"


def test_bad_body_is_deserialization_error(recorder):
    recorder.reply("/api/edge/anime/1", content=b"<html>oops</html>")
    client, _ = make_client(recorder)

    with pytest.raises(DeserializationError):
        client.get_anime(1)


def test_list_body_for_single_resource_is_deserialization_error(recorder, payload):
    recorder.reply("/api/edge/manga/1", json={"data": [payload("manga", "1")]})
    client, _ = make_client(recorder)

    with pytest.raises(DeserializationError):
        client.get_manga(1)


@pytest.mark.parametrize("bad_id", [-1, "abc", "1/2", 1.5, True, None])
def test_invalid_id_never_sends(recorder, bad_id):
    client, _ = make_client(recorder)

    with pytest.raises(UrlError):
        client.get_anime(bad_id)
    assert recorder.requests == []


def test_string_digit_id_is_accepted(recorder, payload):
    recorder.reply("/api/edge/anime/42", json={"data": payload("anime", "42")})
    client, _ = make_client(recorder)

    assert client.get_anime("42").data.id == "42"


def test_concurrent_calls_are_independent(recorder, payload):
    recorder.reply("/api/edge/anime/1", json={"data": payload("anime", "1")})
    recorder.reply("/api/edge/manga/1", json={"data": payload("manga", "1")})
    client, _ = make_client(recorder)

    with ThreadPoolExecutor(max_workers=2) as pool:
        anime_future = pool.submit(client.get_anime, 1)
        manga_future = pool.submit(client.get_manga, 1)
        anime, manga = anime_future.result(), manga_future.result()

    assert isinstance(anime.data, Anime)
    assert isinstance(manga.data, Manga)
    assert anime.data.attributes.canonical_title == "Anime 1"
    assert manga.data.attributes.canonical_title == "Manga 1"


def test_borrowed_http_client_is_not_closed(recorder):
    client, http = make_client(recorder)
    client.close()
    assert not http.is_closed


def test_owned_http_client_is_closed():
    with KitsuClient() as client:
        http = client._http
    assert http.is_closed


def test_from_config(tmp_path, recorder, payload):
    config_file = tmp_path / "config.ini"
    config_file.write_text(
        "[api]\nbase_url = https://example.test/api/edge/\nuser_agent = test-agent\n",
        encoding="utf-8",
    )
    recorder.reply("/api/edge/users/5", json={"data": payload("users", "5")})

    client = KitsuClient.from_config(ConfigManager(str(config_file)), transport=httpx.MockTransport(recorder))
    with client:
        res = client.get_user(5)

    request = recorder.requests[0]
    assert res.data.attributes.name == "Users 5"
    assert str(request.url) == "https://example.test/api/edge/users/5"
    assert request.headers["User-Agent"] == "test-agent"
    assert request.headers["Accept"] == "application/vnd.api+json"
    assert client._http.is_closed


def test_producer_get_uses_singular_path_and_search_plural(recorder, payload):
    recorder.reply("/api/edge/producer/1", json={"data": payload("producers", "1")})
    recorder.reply("/api/edge/producers", json={"data": []})
    client, _ = make_client(recorder)

    assert client.get_producer(1).data.attributes.name == "Producers 1"
    client.search_producers(lambda s: s.filter("slug", "sunrise"))

    assert str(recorder.requests[0].url) == f"{API_URL}/producer/1"
    assert recorder.requests[1].url.path == "/api/edge/producers"
