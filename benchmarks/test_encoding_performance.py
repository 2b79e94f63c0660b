"""
JSON encoding performance benchmarks comparing jsonemit against other libraries.

Compares serialization speed across different document shapes:
- Standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)
- jsonemit (our implementation)
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jsonemit
from benchmarks.data_generators import DATA_TYPES
from benchmarks.data_generators import generate_test_data
from benchmarks.data_generators import generate_test_value

ENCODERS = [
    ("stdlib_json", lambda obj: json.dumps(obj, separators=(",", ":"))),
    ("orjson", orjson.dumps),
    ("ujson", ujson.dumps),
    ("jsonemit", jsonemit.dumps),
]


class TestEncodingBenchmarks:
    """Benchmarks for JSON encoding performance across different libraries."""

    @pytest.mark.benchmark(group="dumps")
    @pytest.mark.parametrize("data_type", DATA_TYPES)
    @pytest.mark.parametrize("encoder,encode_func", ENCODERS)
    def test_dumps(
        self,
        benchmark: Any,
        data_type: str,
        encoder: str,
        encode_func: Callable[[Any], str | bytes],
    ) -> None:
        """Benchmarks serializing native documents."""
        test_data = generate_test_data(data_type)
        result = benchmark(encode_func, test_data)

        assert result
        if encoder == "jsonemit":
            assert orjson.loads(result) == test_data

    @pytest.mark.benchmark(group="value_tree")
    @pytest.mark.parametrize("data_type", DATA_TYPES)
    def test_encode_value_tree(self, benchmark: Any, data_type: str) -> None:
        """Benchmarks encoding a prebuilt value tree to UTF-8 bytes."""
        value = generate_test_value(data_type)
        result = benchmark(jsonemit.encode, value)

        assert isinstance(result, bytes)

    @pytest.mark.benchmark(group="escaping")
    def test_escape_string_heavy(self, benchmark: Any) -> None:
        """Benchmarks the string escaper on escape-dense input."""
        text = "".join(generate_test_data("string_heavy")["strings"])
        result = benchmark(jsonemit.escape_string, text)

        assert "<" not in result
