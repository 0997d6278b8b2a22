"""
Staged request builder.

Each stage is its own class and only offers the calls that are legal at
that point:

    UrlStep.url() -> MethodStep.method() -> HeadersStep.add_header()*
        -> HeadersStep.headers_done() -> BodyStep.set_body()?
        -> BodyStep.body_done() -> BuildStep.build()

Calling a step out of order fails with AttributeError at runtime and is
flagged by static type checkers.
"""
from typing import Generic, Optional, TypeVar, Union

from ...exceptions import BuilderError
from ..headers import HttpHeaders
from ..methods import HttpMethod
from .executor import RestApiExecutor
from .request_spec import RequestSpec

T = TypeVar('T')
R = TypeVar('R')


class _RequestDraft:
    """Mutable state shared by the stages of one builder chain."""

    __slots__ = ('url', 'method', 'headers', 'body')

    def __init__(self):
        self.url: Optional[str] = None
        self.method: Optional[HttpMethod] = None
        self.headers = HttpHeaders()
        self.body = None


class _Stage:
    __slots__ = ('_draft',)

    def __init__(self, draft: _RequestDraft):
        self._draft = draft

    def __repr__(self) -> str:
        return f"<{type(self).__name__} url={self._draft.url!r} method={self._draft.method}>"


class UrlStep(_Stage, Generic[T, R]):
    """First stage: set the target URL."""

    __slots__ = ()

    def url(self, url: str) -> 'MethodStep[T, R]':
        """
        Set the request URL.

        Raises:
            BuilderError: If url is not a non-empty string
        """
        if not isinstance(url, str) or not url.strip():
            raise BuilderError(f"URL must be a non-empty string, got {url!r}")
        self._draft.url = url.strip()
        return MethodStep(self._draft)


class MethodStep(_Stage, Generic[T, R]):
    """Second stage: set the HTTP method."""

    __slots__ = ()

    def method(self, method: Union[HttpMethod, str]) -> 'HeadersStep[T, R]':
        """
        Set the HTTP method.

        Args:
            method: HttpMethod member or verb name such as 'post'

        Raises:
            BuilderError: If the verb is unknown
        """
        try:
            self._draft.method = HttpMethod.resolve(method)
        except ValueError as e:
            raise BuilderError(str(e)) from e
        return HeadersStep(self._draft)


class HeadersStep(_Stage, Generic[T, R]):
    """Third stage: add zero or more headers."""

    __slots__ = ()

    def add_header(self, key: str, value: str) -> 'HeadersStep[T, R]':
        """
        Append a header; values under an existing key are kept.

        Raises:
            BuilderError: If key is empty
            TypeError: If key or value is not a string
        """
        if isinstance(key, str) and not key:
            raise BuilderError("Header name must not be empty")
        self._draft.headers.add(key, value)
        return self

    def headers_done(self) -> 'BodyStep[T, R]':
        return BodyStep(self._draft)


class BodyStep(_Stage, Generic[T, R]):
    """Fourth stage: optionally set the body."""

    __slots__ = ()

    def set_body(self, body: T) -> 'BodyStep[T, R]':
        """Set the request body, replacing any previous one."""
        self._draft.body = body
        return self

    def body_done(self) -> 'BuildStep[T, R]':
        return BuildStep(self._draft)


class BuildStep(_Stage, Generic[T, R]):
    """Final stage."""

    __slots__ = ()

    def build(self) -> RestApiExecutor[T, R]:
        """
        Build an executor around an immutable snapshot of the draft.

        Every call returns a new executor; later changes through earlier
        stages never reach executors already built.
        """
        draft = self._draft
        request = RequestSpec(
            url=draft.url,
            method=draft.method,
            headers=draft.headers.frozen(),
            body=draft.body
        )
        return RestApiExecutor(request)


def new_request() -> UrlStep:
    """Start a new builder chain."""
    return UrlStep(_RequestDraft())
