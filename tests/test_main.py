import pytest

import tranco_rank
from tranco_rank import __main__ as cli

from .conftest import CSV_BODY, LIST_ID


@pytest.fixture
def wired(monkeypatch, container):
    monkeypatch.setattr(cli, "Container", lambda: container)
    monkeypatch.setattr(tranco_rank, "_shared_container", lambda: container)
    return container


def test_cli_prints_ranks(wired, server, tmp_path, capsys):
    status = cli.main([
        "--date", "2024-01-01",
        "--cache-root", str(tmp_path),
        "example.com", "missing.org", "test.org",
    ])

    assert status == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["example.com\t1", "missing.org\t-", "test.org\t2"]
    assert server.requests[0].url.params["subdomains"] == "false"


def test_cli_show_source(wired, tmp_path, capsys):
    status = cli.main([
        "--date", "2024-01-01",
        "--subdomains",
        "--scale", "1000",
        "--cache-root", str(tmp_path),
        "--show-source",
    ])

    assert status == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"url\thttps://tranco-list.eu/download/{LIST_ID}/1000",
        f"path\t{tmp_path / ('2024-01-01_fqdn_1000_' + LIST_ID + '.csv')}",
    ]


def test_cli_resolution_failure_exits_nonzero(wired, server, tmp_path):
    server.id_body = "null"

    status = cli.main(["--date", "2024-01-01", "--cache-root", str(tmp_path)])

    assert status == 1


def test_cli_requires_date():
    with pytest.raises(SystemExit):
        cli.main(["example.com"])


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert tranco_rank.version() in capsys.readouterr().out


def test_open_list(wired, tmp_path):
    tranco = tranco_rank.open_list("2024-01-01", cache_root=str(tmp_path))

    assert tranco.default_file_path().read_bytes() == CSV_BODY
    assert tranco.specification.scale == "1000000"
    assert tranco.rank("test.org") == 2


def test_version():
    assert tranco_rank.version() == f"v{tranco_rank.__version__}"


def test_open_list_reuses_http_client(wired, server, tmp_path):
    first = tranco_rank.open_list("2024-01-01", cache_root=str(tmp_path))
    second = tranco_rank.open_list(
        "2024-01-02", include_subdomains=True, cache_root=str(tmp_path)
    )

    assert first.downloader.client is second.downloader.client
    assert second.default_file_path().name == f"2024-01-02_fqdn_1000000_{LIST_ID}.csv"
    assert len(server.downloads) == 2


def test_shared_container_is_created_once():
    assert tranco_rank._shared_container() is tranco_rank._shared_container()
