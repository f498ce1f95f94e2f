"""
Look up the popularity rank of domains in the Tranco top-sites list.

    >>> from tranco_rank import open_list
    >>> tranco = open_list("2024-01-01")
    >>> tranco.rank("google.com")
    1
"""

import functools
from typing import Optional

from .application.domain import ListSpecification
from .application.exceptions import *
from .application.service import TrancoList
from .infrastructure.containers import Container
from .version import __version__, version


@functools.lru_cache(maxsize=None)
def _shared_container() -> Container:
    """Returns the container, and so the httpx.Client, every list shares."""
    return Container()


def open_list(
    date: str,
    include_subdomains: bool = False,
    scale: Optional[str] = None,
    cache_root: Optional[str] = None,
) -> TrancoList:
    """
    Builds a ready TrancoList wired from the package configuration.

    `scale` and `cache_root` default to the `tranco.default_scale` and
    `paths.cache_root` settings. All lists share one HTTP client.
    """
    container = _shared_container()
    config = container.config()
    specification = ListSpecification(
        date=date,
        include_subdomains=include_subdomains,
        scale=str(scale or config.tranco.default_scale),
    )
    return container.tranco_list(
        specification=specification,
        cache=container.cache(root=cache_root or config.paths.cache_root),
    )
