import httpx
import pytest
from dependency_injector import providers

from tranco_rank.application.domain import ListSpecification
from tranco_rank.application.service import TrancoList
from tranco_rank.infrastructure.api_client import HttpListIdResolver
from tranco_rank.infrastructure.cache import DirectoryCache
from tranco_rank.infrastructure.containers import Container
from tranco_rank.infrastructure.downloader import HttpDownloader

BASE_URL = "https://tranco-list.eu"
USER_AGENT = "python/3.12.0 python-httpx/0.27.0 tranco-rank/0.1.0"
LIST_ID = "X5Y7N"
CSV_BODY = b"1,example.com\n2,test.org\n"


class FakeTrancoServer:
    """Answers the two Tranco endpoints and records every request."""

    def __init__(self):
        self.list_id = LIST_ID
        self.id_status = 200
        self.id_body = None
        self.csv_body = CSV_BODY
        self.download_error = None
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/daily_list_id":
            body = self.list_id if self.id_body is None else self.id_body
            return httpx.Response(self.id_status, text=body)
        if request.url.path.startswith("/download/"):
            if self.download_error is not None:
                raise self.download_error(
                    "connection dropped", request=request
                )
            return httpx.Response(200, content=self.csv_body)
        return httpx.Response(404)

    @property
    def downloads(self):
        return [r for r in self.requests if r.url.path.startswith("/download/")]


@pytest.fixture
def server():
    return FakeTrancoServer()


@pytest.fixture
def http_client(server):
    with httpx.Client(transport=httpx.MockTransport(server)) as client:
        yield client


@pytest.fixture
def cache_root(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def make_list(http_client, cache_root):
    def _make(date="2024-01-01", include_subdomains=False, scale="1000000"):
        return TrancoList(
            ListSpecification(date, include_subdomains, scale),
            resolver=HttpListIdResolver(http_client, BASE_URL, USER_AGENT),
            downloader=HttpDownloader(
                http_client, BASE_URL, USER_AGENT, show_progress=False
            ),
            cache=DirectoryCache(cache_root),
        )

    return _make


@pytest.fixture
def container(http_client):
    container = Container()
    container.http_client.override(providers.Object(http_client))
    yield container
    container.http_client.reset_override()
