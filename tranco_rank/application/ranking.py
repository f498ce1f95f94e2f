"""
Rank lookup over a cached Tranco CSV file.

The file holds one `rank,domain` pair per line. Lookups are memoized: every
line read during a scan is remembered, so one miss can answer many later
queries without touching the disk.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Tuple

from .exceptions import ListFileError, NotFoundError

logger = logging.getLogger(__name__)

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1
_RANK_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_line(line: str) -> Tuple[int, str]:
    """
    Parses one stripped CSV line into a (rank, domain) pair.

    Parsing is permissive. A line that does not hold exactly two fields
    yields (0, ""), and a rank that is not a base-10 64-bit integer yields
    0 while the domain is still kept.
    """
    parts = line.split(",")
    if len(parts) != 2:
        return 0, ""

    rank_field, domain = parts
    if not _RANK_PATTERN.fullmatch(rank_field):
        return 0, domain

    rank = int(rank_field)
    if not _INT64_MIN <= rank <= _INT64_MAX:
        return 0, domain

    return rank, domain


class RankLookup:
    """Answers rank queries against one immutable list file."""

    def __init__(self, path: Path):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.path = path
        self._cache: Dict[str, int] = {}

    @property
    def cached_ranks(self) -> int:
        return len(self._cache)

    def rank(self, domain: str) -> int:
        """
        Returns the rank of `domain`, scanning the file on a cache miss.

        A miss always rescans from the first line. Every line read along the
        way is added to the cache, and the scan stops at the first match.

        Args:
            domain: The domain to look up, matched exactly as stored.

        Returns:
            The rank recorded for the domain.

        Raises:
            NotFoundError: If the whole file was read without a match.
            ListFileError: If the file cannot be opened or read.
        """

        if domain in self._cache:
            return self._cache[domain]

        self.logger.debug(f"Scanning {self.path.name} for {domain}")

        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                for raw_line in f:
                    current_rank, current_domain = parse_line(raw_line.strip())
                    self._cache[current_domain] = current_rank
                    if current_domain == domain:
                        return current_rank
        except OSError as e:
            raise ListFileError(
                f"Failed to read tranco list {self.path}: {e}"
            ) from e

        raise NotFoundError(domain)
