"""Adapters: I/O against the community API (httpx)."""

from adapters.wow_api import WoWCommunityAPI

__all__ = ["WoWCommunityAPI"]
