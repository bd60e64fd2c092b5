"""Errors raised by the response normalization pipeline."""


class PipelineError(Exception):
    """Base class for normalization failures."""


class MalformedAIResponse(PipelineError):
    """No JSON value of the expected shape could be recovered from the model text."""

    def __init__(self, text: str, reason: str = "Failed to parse AI response as JSON"):
        super().__init__(reason)
        self.text = text
        self.reason = reason

    def preview(self, limit: int = 200) -> str:
        """Truncated copy of the offending text for log lines."""
        if len(self.text) <= limit:
            return self.text
        return f"{self.text[:limit]}..."


class MissingRequiredFields(PipelineError):
    """Parsed course information lacks one or more required keys."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"AI response missing required fields: {', '.join(self.missing)}"
        )
