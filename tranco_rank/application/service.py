"""
The core application service for answering Tranco rank queries.

TrancoList ties the resolver, the downloader and the rank lookup into one
construct-then-query lifecycle.
"""

import logging
from pathlib import Path

from .domain import (
    CacheLocation,
    ListDownloader,
    ListIdResolver,
    ListSpecification,
)
from .ranking import RankLookup

logger = logging.getLogger(__name__)


class TrancoList:
    """
    One published Tranco list, downloaded and ready for rank queries.

    Building an instance resolves the list id and downloads the list file,
    so an instance that exists is always ready. If either step fails the
    exception propagates and no instance is returned.

    Not thread-safe: an instance is meant for single-instance,
    single-thread use. Concurrent instances sharing one cache file may
    download it twice, but the rename keeps the file intact.
    """

    def __init__(
        self,
        specification: ListSpecification,
        resolver: ListIdResolver,
        downloader: ListDownloader,
        cache: CacheLocation,
    ):
        """
        Resolves and downloads the list described by `specification`.

        Raises:
            ResolutionError: If the list id cannot be obtained.
            DownloadError: If the list file cannot be downloaded.
            CacheDirectoryError: If the cache root cannot be created.
        """
        self.specification = specification
        self.downloader = downloader
        self.cache = cache

        logger.debug(
            f"Obtaining tranco list id for date={specification.date}, "
            f"include_subdomains={specification.include_subdomains}, "
            f"scale={specification.scale}"
        )
        self.id = resolver.resolve(
            specification.date, specification.include_subdomains
        )

        self.cache.ensure_root()
        logger.debug(f"Downloading tranco list {self.id}")
        self.downloader.download(
            self.id, specification.scale, self.default_file_path()
        )
        logger.debug(f"Tranco list {self.id} downloaded")

        self._lookup = RankLookup(self.default_file_path())

    def url(self) -> str:
        """Returns the URL the list file is downloaded from."""
        return self.downloader.url_for(self.id, self.specification.scale)

    def default_file_path(self) -> Path:
        """Returns the path of the cached list file."""
        return self.cache.path_for(self.specification, self.id)

    def rank(self, domain: str) -> int:
        """Returns the rank of `domain`; raises NotFoundError if unlisted."""
        return self._lookup.rank(domain)
