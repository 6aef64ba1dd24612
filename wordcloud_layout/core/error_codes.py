"""
Structured error codes for layout configuration and run failures.
Use these keys in exceptions and report rows; map to user-facing messages in the CLI.
"""

from __future__ import annotations

# Known error keys
INVALID_VIEWPORT = "invalid_viewport"
INVALID_ORIENTATIONS = "invalid_orientations"
UNKNOWN_PLACEMENT_STRATEGY = "unknown_placement_strategy"
UNKNOWN_SPIRAL = "unknown_spiral"
NO_WORDS = "no_words"
WORDS_DISCARDED = "words_discarded"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_VIEWPORT: "Viewport width and height must both be positive.",
    INVALID_ORIENTATIONS: "Rotation orientations must be at least 1.",
    UNKNOWN_PLACEMENT_STRATEGY: "Unknown placement strategy. Use one of the registered names.",
    UNKNOWN_SPIRAL: "Unknown spiral. Use one of the registered names.",
    NO_WORDS: "No words to lay out. Check the input file.",
    WORDS_DISCARDED: "Some words did not fit and were dropped. Try a larger viewport or smaller font size.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LayoutConfigError(ValueError):
    """Invalid layout configuration (viewport, rotation or registry name)."""

    def __init__(self, error_key: str, detail: str = "") -> None:
        self.error_key = error_key
        message = user_message(error_key)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
