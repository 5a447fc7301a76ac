"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Generic, Optional, TypeVar

from backoffice.domain.events.base import publish_event
from backoffice.domain.events.project_events import NotificationRaised
from backoffice.domain.models.base import DomainException, ValidationError, utcnow


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(
        cls,
        data: T = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, message=message, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(success=False, error=error, error_code=error_code, metadata=metadata)

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for use cases that report their outcome as a UseCaseResult
    instead of raising.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T) -> UseCaseResult[R]:
        """Execute the use case with error handling and timing."""
        self.execution_start = utcnow()

        try:
            result = await self._execute_business_logic(request)
        except Exception as exc:
            self.execution_end = utcnow()
            logger.error(f"{self.__class__.__name__} failed: {str(exc)}")
            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": (self.execution_end - self.execution_start).total_seconds(),
                "exception_type": type(exc).__name__
            }
            return error_result

        self.execution_end = utcnow()
        if isinstance(result, UseCaseResult):
            return result
        return UseCaseResult.success_result(
            result,
            metadata={"execution_time_seconds": (self.execution_end - self.execution_start).total_seconds()}
        )

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """Execute the core business logic. Must be implemented by subclasses."""
        pass


async def notify_failure(title: str, description: str) -> None:
    """Publish a destructive user-facing notification."""
    await publish_event(NotificationRaised(title=title, description=description, variant="destructive"))


def failure_description(exc: Exception, fallback: str) -> str:
    """Message shown to the user for a failed operation."""
    if isinstance(exc, DomainException):
        return exc.message
    return str(exc) or fallback
