"""Request construction and execution using the Builder pattern."""
from .request_spec import RequestSpec
from .executor import RestApiExecutor
from .request_builder import (
    UrlStep,
    MethodStep,
    HeadersStep,
    BodyStep,
    BuildStep,
    new_request,
)

__all__ = [
    'RequestSpec',
    'RestApiExecutor',
    'UrlStep',
    'MethodStep',
    'HeadersStep',
    'BodyStep',
    'BuildStep',
    'new_request',
]
