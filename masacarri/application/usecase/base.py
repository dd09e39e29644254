"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One client-facing operation, taking a request model to a response."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
