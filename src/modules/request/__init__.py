"""Outbound HTTP fetching."""

from .http_client import HttpClient, HttpClientConfig

__all__ = ['HttpClient', 'HttpClientConfig']
