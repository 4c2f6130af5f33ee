from typing import Any, Optional


class FunFactError(Exception):
    """Anything that stops /funfact from producing a fact."""


class ConfigurationError(FunFactError):
    pass


class UpstreamError(FunFactError):
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        base = super().__str__()
        if self.payload is not None:
            return f"{base}: {self.payload}"
        return base
