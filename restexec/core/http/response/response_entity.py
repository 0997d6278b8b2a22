"""Response entity returned by request execution."""
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from ..headers import HttpHeaders

R = TypeVar('R')


@dataclass(frozen=True)
class ResponseEntity(Generic[R]):
    """
    HTTP response with a decoded body.

    Attributes:
        status_code: HTTP status code
        headers: Read-only response headers
        body: Body decoded into the requested response type
        reason: HTTP reason phrase
    """
    status_code: int
    headers: HttpHeaders = field(default_factory=lambda: HttpHeaders().frozen())
    body: Optional[R] = None
    reason: str = ''

    def __post_init__(self):
        if not self.headers.read_only:
            object.__setattr__(self, 'headers', self.headers.frozen())

    @property
    def is_success(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    def has_body(self) -> bool:
        return self.body is not None
