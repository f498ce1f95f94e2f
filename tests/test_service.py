import httpx
import pytest

from tranco_rank.application.exceptions import (
    DownloadError,
    NotFoundError,
    ResolutionError,
)
from tranco_rank.application.service import TrancoList

from .conftest import CSV_BODY, LIST_ID


def test_construction_downloads_list(make_list, server, cache_root):
    tranco = make_list()

    assert tranco.id == LIST_ID
    assert tranco.default_file_path() == (
        cache_root / "2024-01-01_sld_1000000_X5Y7N.csv"
    )
    assert tranco.default_file_path().read_bytes() == CSV_BODY
    assert len(server.downloads) == 1


def test_second_construction_does_not_download(make_list, server):
    make_list()
    make_list()

    assert len(server.downloads) == 1


def test_default_file_path_is_stable(make_list):
    tranco = make_list(include_subdomains=True, scale="1000")

    assert tranco.default_file_path() == tranco.default_file_path()
    assert tranco.default_file_path().name == "2024-01-01_fqdn_1000_X5Y7N.csv"


def test_url(make_list):
    tranco = make_list(scale="1000")

    assert tranco.url() == "https://tranco-list.eu/download/X5Y7N/1000"


def test_rank(make_list):
    tranco = make_list()

    assert tranco.rank("example.com") == 1
    assert tranco.rank("test.org") == 2

    tranco.default_file_path().unlink()
    assert tranco.rank("example.com") == 1


def test_rank_missing_domain(make_list):
    tranco = make_list()

    with pytest.raises(NotFoundError, match="missing.org"):
        tranco.rank("missing.org")


def test_null_list_fails_construction(make_list, server, cache_root):
    server.id_body = "null"

    with pytest.raises(ResolutionError, match="2024-01-01"):
        make_list()

    assert server.downloads == []
    assert not cache_root.exists()


def test_error_status_fails_construction(make_list, server):
    server.id_status = 500

    with pytest.raises(ResolutionError, match="500"):
        make_list()


def test_download_failure_fails_construction(make_list, server, cache_root):
    server.download_error = httpx.RemoteProtocolError

    with pytest.raises(DownloadError):
        make_list()

    assert server.downloads
    assert list(cache_root.iterdir()) == []


def test_documented_as_single_thread():
    assert "Not thread-safe" in TrancoList.__doc__
    assert "single-thread" in TrancoList.__doc__
