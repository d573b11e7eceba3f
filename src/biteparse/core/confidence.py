"""Confidence scoring utilities for recognition results."""


def recognition_confidence(component_count: int, phrase_count: int) -> float:
    """
    Share of phrases that produced a recognized component.

    Args:
        component_count: Number of distinct recognized foods
        phrase_count: Number of phrases the input was split into

    Returns:
        Confidence score (0-1); 0.0 when there were no phrases
    """
    if phrase_count <= 0:
        return 0.0
    return clamp(component_count / phrase_count)


def clamp(score: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, score))
