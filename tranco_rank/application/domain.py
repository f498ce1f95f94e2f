"""
This module defines the core domain models for the package.

These classes represent the pure, technology-agnostic entities and the
ports that the application's logic operates on.
"""

import dataclasses
from pathlib import Path

from abc import ABC, abstractmethod


# --- Domain Models ---

@dataclasses.dataclass(frozen=True)
class ListSpecification:
    """
    The user-facing description of a Tranco list.

    It determines both the remote identifier query and the name of the
    cached file.
    """

    date: str
    include_subdomains: bool
    scale: str

    @property
    def list_type(self) -> str:
        return "fqdn" if self.include_subdomains else "sld"

    def filename(self, list_id: str) -> str:
        """Returns the cache file name for this specification and list id."""
        return f"{self.date}_{self.list_type}_{self.scale}_{list_id}.csv"


# --- Ports (Interfaces) ---

class ListIdResolver(ABC):
    """A port for anything that maps a date to a published list id."""

    @abstractmethod
    def resolve(self, date: str, include_subdomains: bool) -> str:
        """Returns the opaque identifier of the list published on `date`."""
        pass


class ListDownloader(ABC):
    """A port for any list file downloader."""

    @abstractmethod
    def url_for(self, list_id: str, scale: str) -> str:
        """Returns the URL the list file is fetched from."""
        pass

    @abstractmethod
    def download(self, list_id: str, scale: str, destination: Path) -> Path:
        """
        Guarantees the list file exists at `destination`.
        Raises DownloadError on failure.
        """
        pass


class CacheLocation(ABC):
    """A port for where cached list files live on disk."""

    @abstractmethod
    def ensure_root(self) -> Path:
        """
        Creates the cache root if needed and returns it.
        Raises CacheDirectoryError if it cannot be created.
        """
        pass

    @abstractmethod
    def path_for(self, specification: ListSpecification, list_id: str) -> Path:
        """Returns the cache path for a specification and list id."""
        pass
