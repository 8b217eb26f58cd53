import httpx
import pytest


class FakeFilesService:
    """Stands in for the document service; records every upload it receives."""

    def __init__(self, fail=()):
        self.fail = set(fail)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        name = request.headers["x-file-name"]
        if name in self.fail:
            return httpx.Response(500, json={"error": f"cannot store {name}"})
        return httpx.Response(201, json={"id": len(self.requests), "name": name})

    @property
    def names(self):
        return [r.headers["x-file-name"] for r in self.requests]


@pytest.fixture
def service():
    return FakeFilesService()


@pytest.fixture
def transport(service):
    return httpx.MockTransport(service)

