"""Response model and body decoding."""
from .response_entity import ResponseEntity
from .response_handler import ResponseHandler, decode_body

__all__ = [
    'ResponseEntity',
    'ResponseHandler',
    'decode_body',
]
