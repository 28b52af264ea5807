"""Uniform response envelope returned by the posts endpoints."""

from typing import Generic, TypeVar

from blog_api.models.base import CamelModel

T = TypeVar("T")


class ApiResult(CamelModel, Generic[T]):
    """Success/error wrapper.

    A successful result carries ``data`` and no ``errors``; a failed one
    carries a non-empty ``errors`` list and no ``data``.
    """

    success: bool
    message: str
    data: T | None = None
    errors: list[str] | None = None

    @classmethod
    def ok(
        cls, data: T, message: str = "Operation completed successfully"
    ) -> "ApiResult[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(
        cls, errors: list[str], message: str = "Operation failed"
    ) -> "ApiResult[T]":
        return cls(success=False, message=message, errors=list(errors))

    @classmethod
    def not_found(cls, message: str = "Resource not found") -> "ApiResult[T]":
        """Not-found result; the message doubles as the single error entry."""
        return cls(success=False, message=message, errors=[message])
