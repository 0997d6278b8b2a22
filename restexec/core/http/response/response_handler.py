"""Response handling shared by the HTTP client adapters."""
import dataclasses
import json
from typing import Any, Optional, get_origin

from ...exceptions import HttpStatusError, ResponseDecodeError

_JSON_CONTAINERS = (dict, list)


class ResponseHandler:
    """Decodes response bodies and classifies error statuses."""

    MAX_ERROR_BODY = 200

    @staticmethod
    def decode_body(content: bytes, response_type: Any, encoding: Optional[str] = None) -> Any:
        """
        Decode raw response content into response_type.

        Args:
            content: Raw response bytes
            response_type: Target type (None, bytes, str, dict, list, object,
                a dataclass, a class with ``from_dict`` or any callable)
            encoding: Charset announced by the response, utf-8 if missing

        Returns:
            Decoded body, or None for an empty body with a structured type

        Raises:
            ResponseDecodeError: If the content does not fit response_type
        """
        if response_type is None or response_type is type(None):
            return None
        if response_type is bytes:
            return content

        text = ResponseHandler._decode_text(content, encoding)
        if response_type is str:
            return text
        if not text.strip():
            return None

        try:
            data = json.loads(text)
        except ValueError as e:
            raise ResponseDecodeError(f"Could not parse response body as JSON: {e}") from e

        return ResponseHandler._convert(data, response_type)

    @staticmethod
    def _decode_text(content: bytes, encoding: Optional[str]) -> str:
        try:
            return content.decode(encoding or 'utf-8')
        except LookupError:
            return content.decode('utf-8', errors='replace')
        except UnicodeDecodeError as e:
            raise ResponseDecodeError(f"Could not decode response body: {e}") from e

    @staticmethod
    def _convert(data: Any, response_type: Any) -> Any:
        if response_type is object or response_type is Any:
            return data

        container = get_origin(response_type) or response_type
        if container in _JSON_CONTAINERS:
            if not isinstance(data, container):
                raise ResponseDecodeError(
                    f"Expected JSON {container.__name__}, got {type(data).__name__}"
                )
            return data

        if isinstance(response_type, type) and dataclasses.is_dataclass(response_type):
            if not isinstance(data, dict):
                raise ResponseDecodeError(
                    f"Expected JSON object for {response_type.__name__}, got {type(data).__name__}"
                )
            try:
                return response_type(**data)
            except TypeError as e:
                raise ResponseDecodeError(f"Could not build {response_type.__name__}: {e}") from e

        if hasattr(response_type, 'from_dict'):
            try:
                return response_type.from_dict(data)
            except (KeyError, TypeError, ValueError) as e:
                name = getattr(response_type, '__name__', repr(response_type))
                raise ResponseDecodeError(f"Could not build {name}: {e!r}") from e

        if callable(response_type):
            try:
                return response_type(data)
            except (TypeError, ValueError) as e:
                raise ResponseDecodeError(f"Could not convert response body: {e}") from e

        raise TypeError(f"Unsupported response type: {response_type!r}")

    @staticmethod
    def error_message(status_code: int, reason: str = '', body: Optional[str] = None) -> str:
        """Build '<status> <reason>[: <body>]' with the body truncated."""
        message = f"{status_code} {reason}".strip()
        if body:
            body = body.strip()
            if len(body) > ResponseHandler.MAX_ERROR_BODY:
                body = body[:ResponseHandler.MAX_ERROR_BODY] + '...'
            if body:
                message = f"{message}: {body}"
        return message

    @staticmethod
    def check_status(status_code: int, reason: str = '', body: Optional[str] = None):
        """
        Raise the classified HttpStatusError for 4xx/5xx statuses.

        Raises:
            HttpClientError: For 4xx statuses
            HttpServerError: For 5xx statuses
        """
        if status_code < 400:
            return
        message = ResponseHandler.error_message(status_code, reason, body)
        raise HttpStatusError.from_status(status_code, message, reason, body)


decode_body = ResponseHandler.decode_body
