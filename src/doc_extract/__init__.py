"""Document text extraction and chunking service."""

__version__ = "0.1.0"
