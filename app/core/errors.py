# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Typed errors for the deployment engine.

Every error the engine raises on purpose derives from ``DeployerError`` and
knows the HTTP status it maps to, so the exception handler in ``main.py``
can turn it into an ``{"error": ...}`` payload without inspecting types.

    DeployerError
    ├── ValidationError           400  bad upload / bad name, before any remote call
    ├── AccessDenied              401  admin key mismatch
    ├── NameResolutionExhausted   409  no free subdomain within the bounded rounds
    ├── ConfigurationError        500  provider credential missing
    ├── ProviderError             502  non-success response from the hosting API
    └── DeploymentFailed          ---  pipeline stage failure, status of its cause
"""
from typing import Any, Dict, Optional


class DeployerError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(DeployerError):
    status_code = 400


class AccessDenied(DeployerError):
    status_code = 401


class NameResolutionExhausted(DeployerError):
    status_code = 409


class ConfigurationError(DeployerError):
    status_code = 500


class ProviderError(DeployerError):
    """Non-success response from the hosting provider.

    ``provider_status`` is the HTTP status the provider answered with, or
    ``None`` when the request never got a response.
    """
    status_code = 502

    def __init__(self, message: str, provider_status: Optional[int] = None):
        super().__init__(message)
        self.provider_status = provider_status


class DeploymentFailed(DeployerError):
    """A pipeline stage failed; ``stage`` names it, ``detail`` is user-facing."""

    def __init__(self, stage: str, detail: str, cause: Optional[DeployerError] = None):
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.cause = cause
        self.status_code = cause.status_code if cause is not None else 500

    def __repr__(self) -> str:
        return f"DeploymentFailed(stage={self.stage!r}, detail={self.detail!r})"
