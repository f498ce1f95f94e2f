"""Static version metadata for the tranco_rank package."""

__version__ = "0.1.0"


def version() -> str:
    """Returns the build tag, unrelated to any list data."""
    return f"v{__version__}"
