"""
Core exceptions for the tranco_rank package.

This module defines a hierarchy of custom exceptions to allow for granular
error handling and clear separation of failure domains.
"""


class TrancoError(Exception):
    """Base exception for all package-specific errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(TrancoError):
    """Raised for errors related to package configuration."""
    pass


class CacheDirectoryError(ConfigurationError):
    """Raised when the cache root directory cannot be created."""
    pass


# --- Infrastructure Errors ---

class InfrastructureError(TrancoError):
    """Base class for errors related to external systems (network, disk)."""
    pass


class ResolutionError(InfrastructureError):
    """Raised when a list identifier cannot be obtained from the Tranco API."""
    pass


class DownloadError(InfrastructureError):
    """Raised when a list file download fails."""
    pass


class ListFileError(InfrastructureError):
    """Raised when the cached list file cannot be opened or read."""
    pass


# --- Domain/Business Logic Errors ---

class DomainError(TrancoError):
    """Base class for errors related to business logic failures."""
    pass


class NotFoundError(DomainError):
    """Raised when a domain is absent from the whole list file."""

    def __init__(self, domain: str):
        super().__init__(f"domain {domain} not found in tranco list")
        self.domain = domain
