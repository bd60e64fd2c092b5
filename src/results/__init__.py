"""Quiz scoring and statistics."""

from .scoring import score_quiz, summarize_results

__all__ = ["score_quiz", "summarize_results"]
