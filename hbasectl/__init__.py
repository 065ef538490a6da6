"""HBase cluster administration toolkit."""

__version__ = "0.1.0"
