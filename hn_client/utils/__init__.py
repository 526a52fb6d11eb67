"""Utility modules for the client."""

from .http_client import HTTPClient

__all__ = ['HTTPClient']
