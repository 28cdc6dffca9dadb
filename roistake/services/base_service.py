"""
Base service class.

Provides common functionality for all service classes including session management,
logging, and helper decorators.
"""

import functools
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.utils.exceptions import must_raise


# Type variable for generic decorator return types
T = TypeVar("T")
D = TypeVar("D")


@dataclass
class ServiceResult(Generic[D]):
    """
    Standard service result container.

    Used to return structured results from service methods. Rejections
    carry an ``error`` message and a typed ``error_code``; ``data`` may
    still hold details about the rejection.
    """
    success: bool
    data: D | None = None
    error: str | None = None
    error_code: Any = None

    @classmethod
    def ok(cls, data: D | None = None) -> "ServiceResult[D]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls, error_code: Any, error: str, data: Any = None
    ) -> "ServiceResult[D]":
        return cls(success=False, data=data, error=error, error_code=error_code)


class BaseService:
    """
    Base service class.

    Provides common functionality for all service classes:
    - Session management
    - Logging with bound service context
    - Transaction helpers
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize base service.

        Args:
            session: Async database session
        """
        self.session = session
        self.logger = logger.bind(service=self.__class__.__name__)

    async def commit(self) -> None:
        """
        Commit current transaction.

        Raises:
            Exception: If commit fails
        """
        await self.session.commit()

    async def rollback(self) -> None:
        """
        Rollback current transaction.

        Raises:
            Exception: If rollback fails
        """
        await self.session.rollback()


def transaction(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to wrap method in transaction with automatic commit/rollback.

    Commits when the method returns a successful result. Rolls back when
    it returns a failed ServiceResult or raises, so a rejected operation
    leaves no partial state behind.

    Usage:
        @transaction
        async def my_service_method(self, ...) -> ServiceResult:
            # Your code here
            pass

    Args:
        func: Async method to wrap

    Returns:
        Wrapped async method
    """
    @functools.wraps(func)
    async def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> Any:
        try:
            result = await func(self, *args, **kwargs)
        except Exception as e:
            await self.rollback()
            log = self.logger.critical if must_raise(e) else self.logger.error
            log(
                f"Transaction failed in {func.__name__}",
                extra={
                    "error": str(e),
                    "function": func.__name__,
                },
            )
            raise

        if isinstance(result, ServiceResult) and not result.success:
            await self.rollback()
            self.logger.info(
                f"Transaction rolled back in {func.__name__}",
                extra={
                    "function": func.__name__,
                    "error_code": str(result.error_code),
                },
            )
        else:
            await self.commit()
        return result

    return wrapper


def log_operation(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator to log method entry/exit with timing.

    Logs:
    - Method entry with arguments
    - Method exit with duration
    - Exceptions if any

    Usage:
        @log_operation
        async def my_service_method(self, address: str):
            # Your code here
            pass

    Args:
        func: Async method to wrap

    Returns:
        Wrapped async method
    """
    @functools.wraps(func)
    async def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> Any:
        start_time = time.time()

        self.logger.debug(
            f"Starting {func.__name__}",
            extra={
                "function": func.__name__,
                "args_count": len(args),
                "kwargs_keys": list(kwargs.keys()),
            },
        )

        try:
            result = await func(self, *args, **kwargs)
            duration = time.time() - start_time

            self.logger.debug(
                f"Completed {func.__name__}",
                extra={
                    "function": func.__name__,
                    "duration_seconds": round(duration, 3),
                    "success": getattr(result, "success", True),
                },
            )

            return result

        except Exception as e:
            duration = time.time() - start_time

            self.logger.error(
                f"Failed {func.__name__}",
                extra={
                    "function": func.__name__,
                    "duration_seconds": round(duration, 3),
                    "error": str(e),
                    "success": False,
                },
            )

            raise

    return wrapper
