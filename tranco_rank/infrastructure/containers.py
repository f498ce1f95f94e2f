"""
Dependency Injection container for the tranco_rank package.

This container uses the `dependency-injector` library to wire together the
resolver, the downloader, the cache layout and the TrancoList service,
based on the package configuration.
"""

from dependency_injector import containers, providers
import httpx

from ..application.domain import *
from ..application.service import TrancoList
from ..settings import settings

from .api_client import HttpListIdResolver
from .base_client import default_user_agent
from .cache import DirectoryCache
from .downloader import HttpDownloader


class Container(containers.DeclarativeContainer):
    """DI container for wiring the package components."""

    cli_args = providers.Configuration()

    config = providers.Object(settings)

    user_agent = providers.Object(
        config().http.user_agent or default_user_agent()
    )

    http_client = providers.Singleton(
        httpx.Client,
        timeout=config().http.timeout or None,
    )

    resolver: providers.Factory[ListIdResolver] = providers.Factory(
        HttpListIdResolver,
        client=http_client,
        base_url=config().tranco.base_url,
        user_agent=user_agent,
    )

    downloader: providers.Factory[ListDownloader] = providers.Factory(
        HttpDownloader,
        client=http_client,
        base_url=config().tranco.base_url,
        user_agent=user_agent,
        chunk_size=config().downloader.chunk_size,
        show_progress=config().downloader.show_progress,
    )

    cache: providers.Factory[CacheLocation] = providers.Factory(
        DirectoryCache,
        root=cli_args.cache_root,
    )

    specification = providers.Factory(
        ListSpecification,
        date=cli_args.date,
        include_subdomains=cli_args.include_subdomains,
        scale=cli_args.scale,
    )

    tranco_list = providers.Factory(
        TrancoList,
        specification=specification,
        resolver=resolver,
        downloader=downloader,
        cache=cache,
    )
