"""HTTP request methods."""
from enum import Enum
from typing import Union


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the request builder."""

    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    PATCH = 'PATCH'
    DELETE = 'DELETE'
    OPTIONS = 'OPTIONS'
    TRACE = 'TRACE'

    @classmethod
    def resolve(cls, method: Union['HttpMethod', str]) -> 'HttpMethod':
        """
        Resolve a method from an enum member or a verb name.

        Args:
            method: HttpMethod member or case-insensitive verb name

        Returns:
            Matching HttpMethod

        Raises:
            ValueError: If the verb is unknown
        """
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            try:
                return cls(method.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unsupported HTTP method: {method!r}")

    def __str__(self) -> str:
        return self.value
