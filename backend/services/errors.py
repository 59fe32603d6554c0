"""Exceptions raised by the recommendation pipeline."""


class RecommendationError(Exception):
    """Base class for recommendation pipeline errors."""


class EmptyCatalogError(RecommendationError):
    """The role catalog handed to the pipeline has no roles to score."""

    def __init__(self, message: str = "No roles available in the catalog") -> None:
        super().__init__(message)


class BackendError(RecommendationError):
    """The generative backend failed: API error, timeout or empty text."""
