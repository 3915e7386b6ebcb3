"""
Hook Pipeline Exceptions - Custom error hierarchy.

Every error carries the hook id and the pipeline stage it was raised in
so the API layer can build an informative 500 body. ``details`` is for
internal logging only and is never sent to the caller.
"""

from typing import Any, Optional


class HookPipelineError(Exception):
    """Base exception for all hook pipeline errors."""

    def __init__(
        self,
        message: str,
        hook_id: Optional[str] = None,
        stage: str = "",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.hook_id = hook_id
        self.stage = stage
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "hookId": self.hook_id,
            "stage": self.stage,
        }


class ConfigurationError(HookPipelineError):
    """Hook configuration is invalid."""
    pass


class TemplateError(ConfigurationError):
    """URL template does not contain exactly one record id placeholder."""

    def __init__(
        self,
        message: str,
        template: str = "",
        hook_id: Optional[str] = None,
    ) -> None:
        super().__init__(message, hook_id=hook_id, stage="configuration")
        self.template = template


class HookNotFoundError(HookPipelineError):
    """Requested hook id is not registered."""
    pass


class FetchError(HookPipelineError):
    """Remote source could not be reached or answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        hook_id: Optional[str] = None,
        stage: str = "",
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        body: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, hook_id, stage, details)
        self.status_code = status_code
        self.url = url
        self.body = body[:500] if body else None  # Truncate for safety

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["statusCode"] = self.status_code
        return data


class DecodeError(HookPipelineError):
    """Remote body was expected to be JSON but could not be parsed."""

    def __init__(
        self,
        message: str,
        hook_id: Optional[str] = None,
        stage: str = "",
        raw_data: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, hook_id, stage, details)
        self.raw_data = raw_data[:500] if raw_data else None


class ShapeError(HookPipelineError):
    """Remote JSON parsed but does not have the shape the hook declares."""

    def __init__(
        self,
        message: str,
        hook_id: Optional[str] = None,
        stage: str = "",
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, hook_id, stage, details)
        self.field = field
