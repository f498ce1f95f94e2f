"""HTTP implementation of the ListDownloader port."""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Generator, Iterator, Optional

import httpx
from tqdm import tqdm

from ..application.domain import ListDownloader
from ..application.exceptions import DownloadError

from .base_client import BaseClient

_DOWNLOAD_ENDPOINT = "/download"


def _content_length(response: httpx.Response) -> Optional[int]:
    """Returns the announced body size, or None when absent or malformed."""
    value = response.headers.get("Content-Length", "")
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


class HttpDownloader(BaseClient, ListDownloader):
    """A downloader that fetches list files via HTTP atomically."""

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        user_agent: str,
        chunk_size: int = 65536,
        show_progress: bool = True,
    ):
        """Initializes the downloader adapter."""
        super().__init__(client, base_url, user_agent)
        self.chunk_size = chunk_size
        self.show_progress = show_progress

    def url_for(self, list_id: str, scale: str) -> str:
        return f"{self.base_url}{_DOWNLOAD_ENDPOINT}/{list_id}/{scale}"

    @contextlib.contextmanager
    def _atomic_target(self, destination: Path) -> Generator[Path, None, None]:
        """Provides a temporary '.part' path and ensures cleanup."""
        fd, part_name = tempfile.mkstemp(
            prefix=destination.name + ".", suffix=".part", dir=destination.parent
        )
        os.close(fd)
        part_path = Path(part_name)
        try:
            yield part_path
        finally:
            part_path.unlink(missing_ok=True)

    def _stream_chunks(
        self, response: httpx.Response, target_file: Path
    ) -> Iterator[int]:
        """Produce byte chunks from a response and write them to a file."""
        with open(target_file, "wb") as f:
            for chunk in response.iter_bytes(self.chunk_size):
                f.write(chunk)
                yield len(chunk)

    def _consume_stream_with_progress(
        self, stream: Iterator[int], total_size: Optional[int], desc: str
    ):
        """Consume the byte stream to update a TQDM progress bar."""
        with tqdm(
            total=total_size,
            unit="B",
            unit_scale=True,
            desc=desc,
            disable=not self.show_progress,
        ) as progress_bar:
            for progress in stream:
                progress_bar.update(progress)

    def _stream_from_network(self, url: str, target_file: Path):
        """Manage the network request and the streaming process."""
        with self.client.stream("GET", url, headers=self.headers) as response:
            if not response.is_success:
                self.logger.warning(
                    f"Download from {url} returned {response.status_code}"
                )
            stream = self._stream_chunks(response, target_file)
            self._consume_stream_with_progress(
                stream, _content_length(response), "downloading"
            )

    def _execute_atomic_download(self, url: str, destination: Path):
        """Orchestrate the entire atomic download operation."""
        self.logger.info(f"Downloading from {url} to {destination}")
        try:
            with self._atomic_target(destination) as part_path:
                self._stream_from_network(url, part_path)
                os.replace(part_path, destination)
        except httpx.HTTPError as e:
            raise DownloadError(f"Failed to download {url}: {e}") from e
        except OSError as e:
            raise DownloadError(
                f"Failed to write {destination} from {url}: {e}"
            ) from e
        self.logger.info(f"Downloaded {destination}")

    def download(self, list_id: str, scale: str, destination: Path) -> Path:
        """
        Guarantee that the list file exists, downloading only if necessary.

        This is the public method that fulfills the ListDownloader port
        contract. Presence of the destination file is the only freshness
        check; the file is never compared or refreshed once it exists.

        Args:
            list_id: The resolved Tranco list id.
            scale: The size of the list to download.
            destination: The final desired path for the file.

        Returns:
            The destination path.

        Raises:
            DownloadError: If streaming the download to file fails.
        """

        if destination.is_file():
            self.logger.info(
                f"List {destination.name} already exists. Skipping download."
            )
        else:
            self._execute_atomic_download(
                self.url_for(list_id, scale), destination
            )

        return destination
