"""pktctl — packet ordering toolkit."""

__version__ = "0.1.0"
