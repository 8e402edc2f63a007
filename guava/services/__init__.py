"""
Application services layer (use cases).

Services orchestrate the catalog use cases on top of the ports from core/:
- ContentService: content_id -> hash resolution and asset opening
- PlaylistService: playlist documents and catalog listing

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/ or infrastructure/.
"""

from guava.services.content import ContentService
from guava.services.integrity import IntegrityChecker
from guava.services.playlist import PlaylistService

__all__ = [
    "ContentService",
    "IntegrityChecker",
    "PlaylistService",
]
