"""Release size tracking: measure a package tree and publish a size snapshot."""

__version__ = "1.0.0"
