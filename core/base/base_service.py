"""
Base class for the restaurant services.

A service owns the repository of its entity and logs through a named
``restaurant.*`` logger, rendering keyword context as ``key=value``.
"""

from abc import ABC
from typing import Any, Generic, TypeVar
import logging

RepositoryType = TypeVar("RepositoryType")


class BaseService(Generic[RepositoryType], ABC):
    def __init__(self, repository: RepositoryType, logger_name: str):
        self.repository = repository
        self.logger = logging.getLogger(logger_name)

    @staticmethod
    def _with_context(message: str, context: dict[str, Any]) -> str:
        if not context:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {rendered}"

    def log_info(self, message: str, **context: Any) -> None:
        self.logger.info(self._with_context(message, context))

    def log_warning(self, message: str, **context: Any) -> None:
        self.logger.warning(self._with_context(message, context))
