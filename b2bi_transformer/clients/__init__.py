"""B2BI client wrapper module."""

from .b2bi_client import TransformerClient

__all__ = ["TransformerClient"]
