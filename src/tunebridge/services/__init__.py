"""Business logic services for tunebridge.

Public API:
    TrackMatcherService - Resolve imported tracks to catalog results
    RecommendationService - Recommend new tracks from library tracks
    analyze - Build a taste profile from library tracks

Protocols (for dependency injection):
    CatalogSearch - Catalog search abstraction (see tunebridge.client)
"""

from tunebridge.services.matcher import TrackMatcherService
from tunebridge.services.profiler import analyze
from tunebridge.services.recommender import RecommendationService

__all__ = [
    "RecommendationService",
    "TrackMatcherService",
    "analyze",
]
