"""Fixed parts of every generated client module.

The generated module talks to the server through a backend object with an
``httpx.Client``-compatible ``request()`` method, so it has no import-time
dependency on any HTTP library.
"""

from __future__ import annotations

from .profile import GenerationProfile

# Module level names defined or used by the fixed part of the generated module.
RUNTIME_NAMES = frozenset(
    {
        "Any",
        "Dict",
        "List",
        "Mapping",
        "Optional",
        "Protocol",
        "Tuple",
        "Union",
        "TimeoutType",
        "Response",
        "SyncBackend",
        "ClientError",
        "ParameterEncodeError",
        "TransportError",
        "BadFunctionError",
        "DecodeError",
        "ServerError",
        "_UNION_TYPES",
        "_FRACTION",
        "_status_text",
        "_parse_timestamp",
        "_encode",
        "_decode",
        "_decode_struct",
        "Exception",
        "KeyError",
        "TypeError",
        "ValueError",
    }
)

# Typing names used by the fixed part.
RUNTIME_TYPING_IMPORTS = frozenset(
    {
        "Any",
        "Optional",
        "Protocol",
        "Union",
        "get_args",
        "get_origin",
        "get_type_hints",
    }
)

RUNTIME_MODULE_IMPORTS = [
    "import dataclasses",
    "import datetime",
    "import enum",
    "import http",
    "import json",
    "import re",
    "import types",
    "from collections.abc import Mapping",
]


def emit_backend_protocols(profile: GenerationProfile) -> list[str]:
    """Generate the timeout alias and the Protocol classes for backends."""
    timeout_type = "float | None" if profile.use_pep604 else "Optional[float]"
    return [
        f"TimeoutType = {timeout_type}",
        "",
        "",
        "class Response(Protocol):",
        "    status_code: int",
        "    content: bytes",
        "",
        "",
        "class SyncBackend(Protocol):",
        "    def request(",
        "        self,",
        "        method: str,",
        "        url: str,",
        "        *,",
        "        content: bytes | None = None,",
        "        headers: Mapping[str, str] | None = None,",
        "        timeout: TimeoutType = None,",
        "    ) -> Response:",
        "        ...",
        "",
        "",
    ]


def emit_client_errors() -> list[str]:
    """Generate the error classes raised by generated clients.

    Every error carries a sherpa error code; ServerError carries the code
    the server reported.
    """
    return [
        "class ClientError(Exception):",
        "    code = 'sherpa:error'",
        "",
        "    def __init__(self, message: str, code: str | None = None) -> None:",
        "        super().__init__(message)",
        "        self.message = message",
        "        if code is not None:",
        "            self.code = code",
        "",
        "    def __str__(self) -> str:",
        "        return f'{self.code}: {self.message}'",
        "",
        "",
        "class ParameterEncodeError(ClientError):",
        "    code = 'sherpa:parameter encode error'",
        "",
        "",
        "class TransportError(ClientError):",
        "    code = 'sherpa:http'",
        "",
        "",
        "class BadFunctionError(ClientError):",
        "    code = 'sherpa:badFunction'",
        "",
        "",
        "class DecodeError(ClientError):",
        "    code = 'sherpa:badResponse'",
        "",
        "",
        "class ServerError(ClientError):",
        "    pass",
        "",
        "",
    ]


def emit_codec() -> list[str]:
    """Generate the helpers converting between values and JSON data."""
    return [
        "_UNION_TYPES = (Union, getattr(types, 'UnionType', Union))",
        "_FRACTION = re.compile(r'\\.(\\d+)')",
        "",
        "",
        "def _status_text(status: int) -> str:",
        "    try:",
        "        return f'{status} {http.HTTPStatus(status).phrase}'",
        "    except ValueError:",
        "        return str(status)",
        "",
        "",
        "def _parse_timestamp(value: Any) -> datetime.datetime:",
        "    if not isinstance(value, str):",
        "        raise TypeError(f'expected timestamp string, saw {type(value).__name__}')",
        "    text = value[:-1] + '+00:00' if value.endswith(('Z', 'z')) else value",
        "    text = _FRACTION.sub(lambda match: '.' + match.group(1)[:6].ljust(6, '0'), text, count=1)",
        "    return datetime.datetime.fromisoformat(text)",
        "",
        "",
        "def _encode(value: Any, as_string: bool = False) -> Any:",
        "    if isinstance(value, enum.Enum):",
        "        return value.value",
        "    if value is None or isinstance(value, bool):",
        "        return value",
        "    if isinstance(value, int):",
        "        return str(value) if as_string else value",
        "    if isinstance(value, datetime.datetime):",
        "        if value.tzinfo is None:",
        "            value = value.replace(tzinfo=datetime.timezone.utc)",
        "        return value.isoformat()",
        "    if dataclasses.is_dataclass(value) and not isinstance(value, type):",
        "        return {",
        "            field.metadata.get('json', field.name): _encode(",
        "                getattr(value, field.name),",
        "                field.metadata.get('string', False),",
        "            )",
        "            for field in dataclasses.fields(value)",
        "        }",
        "    if isinstance(value, Mapping):",
        "        return {str(key): _encode(item, as_string) for key, item in value.items()}",
        "    if isinstance(value, (list, tuple)):",
        "        return [_encode(item, as_string) for item in value]",
        "    return value",
        "",
        "",
        "def _decode(tp: Any, value: Any, as_string: bool = False) -> Any:",
        "    if tp is Any:",
        "        return value",
        "    origin = get_origin(tp)",
        "    if origin in _UNION_TYPES:",
        "        if value is None:",
        "            return None",
        "        inner = [arg for arg in get_args(tp) if arg is not type(None)]",
        "        return _decode(inner[0], value, as_string)",
        "    if origin is list:",
        "        if value is None:",
        "            return []",
        "        if not isinstance(value, list):",
        "            raise TypeError(f'expected array, saw {type(value).__name__}')",
        "        item_type = get_args(tp)[0]",
        "        return [_decode(item_type, item, as_string) for item in value]",
        "    if origin is dict:",
        "        if value is None:",
        "            return {}",
        "        if not isinstance(value, dict):",
        "            raise TypeError(f'expected object, saw {type(value).__name__}')",
        "        value_type = get_args(tp)[1]",
        "        return {key: _decode(value_type, item, as_string) for key, item in value.items()}",
        "    if value is None:",
        "        return None",
        "    if isinstance(tp, type) and issubclass(tp, enum.Enum):",
        "        return tp(value)",
        "    if dataclasses.is_dataclass(tp):",
        "        return _decode_struct(tp, value)",
        "    if tp is datetime.datetime:",
        "        return _parse_timestamp(value)",
        "    if tp is bool:",
        "        if not isinstance(value, bool):",
        "            raise TypeError(f'expected boolean, saw {type(value).__name__}')",
        "        return value",
        "    if tp is int:",
        "        if as_string and isinstance(value, str):",
        "            return int(value)",
        "        if isinstance(value, bool) or not isinstance(value, int):",
        "            raise TypeError(f'expected integer, saw {type(value).__name__}')",
        "        return value",
        "    if tp is float:",
        "        if isinstance(value, bool) or not isinstance(value, (int, float)):",
        "            raise TypeError(f'expected number, saw {type(value).__name__}')",
        "        return float(value)",
        "    if tp is str:",
        "        if not isinstance(value, str):",
        "            raise TypeError(f'expected string, saw {type(value).__name__}')",
        "        return value",
        "    return value",
        "",
        "",
        "def _decode_struct(cls: Any, value: Any) -> Any:",
        "    if not isinstance(value, dict):",
        "        raise TypeError(f'expected object for {cls.__name__}, saw {type(value).__name__}')",
        "    hints = get_type_hints(cls, globalns=globals())",
        "    kwargs = {}",
        "    for field in dataclasses.fields(cls):",
        "        key = field.metadata.get('json', field.name)",
        "        kwargs[field.name] = _decode(hints[field.name], value.get(key), field.metadata.get('string', False))",
        "    return cls(**kwargs)",
        "",
        "",
    ]


def emit_client_init(api_name: str, base_url: str) -> list[str]:
    """Generate the client class header, constructor and call primitive.

    The call primitive POSTs {"params": [...]} to base_url + function name
    and decodes the "result" member of the response into one value per
    declared return type.
    """
    return [
        f"class {api_name}:",
        "    def __init__(",
        "        self,",
        "        backend: SyncBackend,",
        f"        base_url: str = {base_url!r},",
        "        headers: Mapping[str, str] | None = None,",
        "    ) -> None:",
        "        self._backend = backend",
        "        self._base_url = base_url",
        "        self._headers = dict(headers or {})",
        "",
        "    def _call(",
        "        self,",
        "        timeout: TimeoutType,",
        "        function_name: str,",
        "        params: list[Any],",
        "        result_types: list[Any],",
        "    ) -> list[Any]:",
        "        try:",
        "            payload = json.dumps({'params': [_encode(param) for param in params]}).encode('utf-8')",
        "        except (TypeError, ValueError) as exc:",
        "            raise ParameterEncodeError(f'encoding request parameters: {exc}') from exc",
        "        headers = dict(self._headers)",
        "        headers['Content-Type'] = 'application/json; charset=utf-8'",
        "        try:",
        "            response = self._backend.request(",
        "                'POST',",
        "                self._base_url + function_name,",
        "                content=payload,",
        "                headers=headers,",
        "                timeout=timeout,",
        "            )",
        "        except Exception as exc:",
        "            raise TransportError(f'sending POST request: {exc}') from exc",
        "        if response.status_code == 404:",
        "            raise BadFunctionError('no such function')",
        "        if response.status_code != 200:",
        "            raise TransportError(f'HTTP error from server: {_status_text(response.status_code)}')",
        "        try:",
        "            body = json.loads(response.content)",
        "        except ValueError as exc:",
        "            raise DecodeError(f'parsing response: {exc}') from exc",
        "        if not isinstance(body, dict):",
        "            raise DecodeError('parsing response: expected object')",
        "        error = body.get('error')",
        "        if error is not None:",
        "            if not isinstance(error, dict):",
        "                raise DecodeError('parsing response: malformed error')",
        "            raise ServerError(str(error.get('message', '')), str(error.get('code', '')))",
        "        if not result_types:",
        "            return []",
        "        result = body.get('result')",
        "        try:",
        "            if len(result_types) == 1:",
        "                return [_decode(result_types[0], result)]",
        "            if not isinstance(result, list) or len(result) != len(result_types):",
        "                raise ValueError(f'expected array of {len(result_types)} results')",
        "            return [_decode(tp, item) for tp, item in zip(result_types, result)]",
        "        except (TypeError, ValueError, KeyError) as exc:",
        "            raise DecodeError(f'parsing result: {exc}') from exc",
        "",
    ]
