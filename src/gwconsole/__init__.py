"""Console for gateway objects on a security management server."""

__version__ = "0.1.0"
