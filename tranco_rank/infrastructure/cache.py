"""Filesystem implementation of the CacheLocation port."""

import logging
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..application.domain import CacheLocation, ListSpecification
from ..application.exceptions import CacheDirectoryError

logger = logging.getLogger(__name__)

_CACHE_DIR_NAME = ".tranco"
_CACHE_DIR_MODE = 0o755


def default_cache_root() -> Path:
    """Returns `~/.tranco`, or `<tempdir>/.tranco` without a home directory."""
    try:
        base_folder = Path.home()
    except (RuntimeError, KeyError) as e:
        logger.debug(f"No home directory ({e}), using the temp directory")
        base_folder = Path(tempfile.gettempdir())
    return base_folder / _CACHE_DIR_NAME


class DirectoryCache(CacheLocation):
    """Keeps list files as flat CSV files under one root directory."""

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root).expanduser() if root else default_cache_root()

    def ensure_root(self) -> Path:
        try:
            self.root.mkdir(mode=_CACHE_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(
                f"Cannot create cache directory {self.root}: {e}"
            ) from e
        return self.root

    def path_for(self, specification: ListSpecification, list_id: str) -> Path:
        return self.root / specification.filename(list_id)
