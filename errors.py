class StartupError(RuntimeError):
    """Raised when the service cannot start, e.g. the Gemini API key is missing."""


class ValidationError(ValueError):
    """Raised when a request is missing a required field. Maps to HTTP 400."""


class LLMError(RuntimeError):
    """Transport-level failure talking to the Gemini API. Agents wrap it in UpstreamError."""


class UpstreamError(RuntimeError):
    """Raised when the Gemini call fails or returns output we cannot use. Maps to HTTP 500."""
