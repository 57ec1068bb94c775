class LLMUpstreamError(RuntimeError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMModelNotFoundError(LLMUpstreamError):
    """Raised when every configured model candidate was rejected as not found."""
    pass


class PlatformSendError(RuntimeError):
    """Raised when the messaging platform rejects an outbound message."""
    pass
