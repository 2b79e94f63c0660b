"""
Compact JSON encoding of immutable value trees.

Serializes a tree of ``Null``/``Bool``/``Number``/``String``/``Array``/
``Object`` values into an appendable ``TextBuilder`` so JSON can be embedded
efficiently in larger text-based protocols. Strings are escaped so the output
is safe to place inside HTML ``<script>`` blocks and comments, and numbers are
formatted exactly from their decimal coefficient and exponent.
"""

import warnings
from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ._builder import TextBuilder
from ._escape import escape_string
from ._number import format_number
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._profile import log_hot_path_stats
from ._value import FALSE
from ._value import NON_FINITE_MESSAGE
from ._value import NULL
from ._value import TRUE
from ._value import VALUE_TYPES
from ._value import Array
from ._value import Bool
from ._value import JSONEncodeError
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

__version__ = "0.1.0"

# Hook for objects to_value cannot convert on its own
DefaultHook = Callable[[Any], Any] | None

# Marks an exhausted container iterator on the traversal stack
_EXHAUSTED = object()


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures conversion of native Python objects into value trees.

    Only affects ``to_value``/``dumps``; encoding a value tree has no
    options.
    """

    skipkeys: bool = False
    sort_keys: bool = False
    default: DefaultHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if self.default is not None and not callable(self.default):
            raise TypeError("default must be callable")


_DEFAULT_CONFIG = EncodeConfig()


def _not_a_value(obj: Any) -> TypeError:
    msg = f"Object of type {type(obj).__name__} is not a JSON value"
    return TypeError(msg)


def _emit_scalar(value: Value, append: Callable[[str], Any]) -> None:
    """Writes a leaf value; containers are handled by the traversal loop."""
    if isinstance(value, String):
        append(escape_string(value.value))
    elif isinstance(value, Number):
        append(format_number(value.coefficient, value.exponent))
    elif isinstance(value, Bool):
        append("true" if value.value else "false")
    elif isinstance(value, Null):
        append("null")
    else:
        raise _not_a_value(value)


def encode_to_text_builder(
    value: Value, builder: TextBuilder | None = None
) -> TextBuilder:
    """
    Encodes a value tree into a ``TextBuilder``.

    When ``builder`` is given the JSON text is appended after whatever it
    already holds and the same builder is returned, which lets callers
    splice JSON into a larger document without copying.

    Traversal keeps its own stack of container iterators, so arbitrarily
    deep trees do not hit the interpreter recursion limit.
    """
    if builder is None:
        builder = TextBuilder()
    append = builder.append

    with ProfileContext("encode_to_text_builder"):
        # Each entry: (iterator over remaining children, closer, is_object)
        stack: list[tuple[Iterator[Any], str, bool]] = []
        current: Any = value

        while True:
            # Descend through the first child of each non-empty container
            while True:
                if isinstance(current, Array):
                    if not current.items:
                        append("[]")
                        break
                    items = iter(current.items)
                    append("[")
                    stack.append((items, "]", False))
                    current = next(items)
                elif isinstance(current, Object):
                    if not current.pairs:
                        append("{}")
                        break
                    pairs = iter(current.pairs)
                    key, current = next(pairs)
                    append("{")
                    append(escape_string(key))
                    append(":")
                    stack.append((pairs, "}", True))
                else:
                    _emit_scalar(current, append)
                    break

            # Close finished containers until one has another child
            while stack:
                children, closer, is_object = stack[-1]
                child = next(children, _EXHAUSTED)
                if child is _EXHAUSTED:
                    append(closer)
                    stack.pop()
                    continue
                append(",")
                if is_object:
                    key, current = child
                    append(escape_string(key))
                    append(":")
                else:
                    current = child
                break
            else:
                return builder


def encode_to_text(value: Value) -> str:
    """Encodes a value tree as a JSON string."""
    return encode_to_text_builder(value).to_text()


def encode(value: Value) -> bytes:
    """Encodes a value tree as UTF-8 JSON bytes."""
    return encode_to_text_builder(value).to_bytes()


def encode_to_bytearray(
    value: Value, buffer: bytearray | None = None
) -> bytearray:
    """
    Appends the UTF-8 JSON encoding of a value tree to ``buffer``.

    A new buffer is created when none is given. The buffer is returned.
    """
    if buffer is None:
        buffer = bytearray()
    buffer += encode(value)
    return buffer


def from_value(value: Value) -> TextBuilder:
    """Deprecated alias of ``encode_to_text_builder``."""
    warnings.warn(
        "from_value is deprecated, use encode_to_text_builder instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return encode_to_text_builder(value)


def _key_to_str(key: Any) -> str | None:
    """Converts a dict key to text, or None when it has no JSON form."""
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int | float):
        return str(key)
    return None


def _object_to_value(d: dict[Any, Any], config: EncodeConfig) -> Object:
    pairs = []
    for key, item in d.items():
        str_key = _key_to_str(key)
        if str_key is None:
            if config.skipkeys:
                continue
            msg = f"keys must be strings, not {type(key).__name__}"
            raise TypeError(msg)
        pairs.append((key, str_key, item))

    if config.sort_keys:
        pairs.sort(key=lambda x: x[0])  # Sort by original key

    return Object(
        [(str_key, to_value(item, config)) for _, str_key, item in pairs]
    )


def to_value(obj: Any, config: EncodeConfig | None = None) -> Value:  # noqa: PLR0911
    """
    Converts native Python objects into a value tree.

    ``None``, ``bool``, ``int``, ``float``, ``Decimal``, ``str``, lists,
    tuples and dicts are supported; value tree nodes are returned as they
    are. Anything else is passed through ``config.default`` when set.
    """
    if config is None:
        config = _DEFAULT_CONFIG

    if isinstance(obj, VALUE_TYPES):
        return obj
    elif obj is None:
        return NULL
    elif obj is True:
        return TRUE
    elif obj is False:
        return FALSE
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, int):
        return Number.from_int(obj)
    elif isinstance(obj, float):
        return Number.from_float(obj)
    elif isinstance(obj, Decimal):
        return Number.from_decimal(obj)
    elif isinstance(obj, dict):
        return _object_to_value(obj, config)
    elif isinstance(obj, list | tuple):
        return Array([to_value(item, config) for item in obj])
    elif config.default is not None:
        return to_value(config.default(obj), config)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes native Python objects to compact JSON text.

    Keyword arguments build an ``EncodeConfig``.
    """
    config = EncodeConfig(**kwargs)
    return encode_to_text(to_value(obj, config))


__all__ = [
    "FALSE",
    "NON_FINITE_MESSAGE",
    "NULL",
    "TRUE",
    "Array",
    "Bool",
    "EncodeConfig",
    "HotPathStats",
    "JSONEncodeError",
    "Null",
    "Number",
    "Object",
    "ProfileContext",
    "String",
    "TextBuilder",
    "Value",
    "clear_hot_path_stats",
    "dumps",
    "encode",
    "encode_to_bytearray",
    "encode_to_text",
    "encode_to_text_builder",
    "escape_string",
    "format_number",
    "from_value",
    "get_hot_path_stats",
    "log_hot_path_stats",
    "to_value",
]
