import httpx
import pytest


def resource_payload(kind="anime", rid="1", **attrs):
    attributes = {
        "slug": f"{kind}-{rid}",
        "canonicalTitle": f"{kind.title()} {rid}",
        "name": f"{kind.title()} {rid}",
        "titles": {"en": f"{kind.title()} {rid}", "ja_jp": None},
        "posterImage": {"tiny": "https://media.kitsu.io/tiny.jpg", "original": "https://media.kitsu.io/o.jpg"},
    }
    attributes.update(attrs)
    return {
        "id": rid,
        "type": kind,
        "links": {"self": f"https://kitsu.io/api/edge/{kind}/{rid}"},
        "attributes": attributes,
    }


@pytest.fixture
def payload():
    return resource_payload


@pytest.fixture
def recorder():
    """MockTransport handler that records requests and answers from a route table."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.routes = {}

        def reply(self, path, status_code=200, **kwargs):
            self.routes[path] = (status_code, kwargs)

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            status_code, kwargs = self.routes.get(request.url.path, (404, {"json": {"errors": []}}))
            return httpx.Response(status_code, **kwargs)

    return Recorder()
