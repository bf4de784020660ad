"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from renewdesk.domain.models.base import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock for the application."""
    return datetime.now(timezone.utc)


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, EntityNotFoundError):
            return cls.error_result(exc.message, "ENTITY_NOT_FOUND")
        elif isinstance(exc, ValidationError):
            result = cls.error_result(exc.message, exc.code)
            if exc.field:
                result.metadata = {"field": exc.field}
            return result
        elif isinstance(exc, BusinessRuleViolation):
            return cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")

    @property
    def is_not_found(self) -> bool:
        return self.error_code == "ENTITY_NOT_FOUND"


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain errors are returned as error results; anything else propagates.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T = None) -> UseCaseResult[R]:
        """
        Execute the use case with error handling and logging.
        """
        self.execution_start = utc_now()
        name = self.__class__.__name__

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except DomainException as exc:
            self.execution_end = utc_now()
            logger.info(f"{name} failed: {exc.code}: {exc.message}")

            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                **(error_result.metadata or {}),
                "execution_time_seconds": self._elapsed(),
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }
            return error_result

        self.execution_end = utc_now()
        logger.debug(f"{name} completed in {self._elapsed():.3f}s")

        return UseCaseResult.success_result(
            result,
            metadata={
                "execution_time_seconds": self._elapsed(),
                "executed_at": self.execution_end.isoformat()
            }
        )

    def _elapsed(self) -> float:
        return (self.execution_end - self.execution_start).total_seconds()

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    """

    async def _execute_business_logic(self, request: T) -> R:
        result = await self._execute_command_logic(request)
        logger.info(f"{self.__class__.__name__} applied")
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


class GetByIdUseCase(QueryUseCase[str, R]):
    """Base class for get-by-id use cases."""

    async def _validate_request(self, request: str) -> None:
        if not request or not str(request).strip():
            raise ValidationError("ID is required", "id")


# Specific use case patterns
class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""
    pass


class UpdateUseCase(CommandUseCase[T, R]):
    """Base class for entity update use cases."""
    pass
