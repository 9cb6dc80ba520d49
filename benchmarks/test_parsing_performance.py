"""
Performance benchmarks comparing jtree against standard libraries.

Compares parse and serialize speed across document shapes, and dot-path
lookups against hand-written dict traversal:
- Standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)
- jtree (owned value tree)
"""

import json
from collections.abc import Callable
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jtree
from benchmarks.data_generators import DOCUMENT_SHAPES
from benchmarks.data_generators import generate_test_data
from benchmarks.data_generators import lookup_paths

PARSERS: list[tuple[str, Callable[[Any], Any]]] = [
    ("stdlib_json", json.loads),
    ("orjson", orjson.loads),
    ("ujson", ujson.loads),
    ("jtree", jtree.parse),
]

SERIALIZERS: list[tuple[str, Callable[[Any], Any]]] = [
    ("stdlib_json", json.dumps),
    ("orjson", orjson.dumps),
    ("ujson", ujson.dumps),
    ("jtree", jtree.dumps),
]


def _native_lookup(data: Any, path: str) -> Any:
    for segment in path.split("."):
        data = data[int(segment)] if segment.isdigit() else data[segment]
    return data


class TestParsingBenchmarks:
    """Benchmarks for JSON parsing performance across different libraries."""

    @pytest.mark.parametrize("shape", DOCUMENT_SHAPES)
    @pytest.mark.parametrize("parser,parse_func", PARSERS)
    def test_parsing(
        self,
        benchmark: Any,
        shape: str,
        parser: str,
        parse_func: Callable[[Any], Any],
    ) -> None:
        """Benchmarks parsing one document shape."""
        benchmark.group = f"parse_{shape}"
        test_data = generate_test_data(shape)

        if parser == "orjson":
            # orjson expects bytes for optimal performance
            result = benchmark(parse_func, test_data.encode("utf-8"))
        else:
            result = benchmark(parse_func, test_data)

        if parser == "jtree":
            result = result.to_python()
        assert result == json.loads(test_data)


class TestSerializationBenchmarks:
    """Benchmarks for serializing equivalent trees in each library."""

    @pytest.mark.parametrize("shape", DOCUMENT_SHAPES)
    @pytest.mark.parametrize("serializer,dump_func", SERIALIZERS)
    def test_serialization(
        self,
        benchmark: Any,
        shape: str,
        serializer: str,
        dump_func: Callable[[Any], Any],
    ) -> None:
        """Benchmarks compact serialization of one document shape."""
        benchmark.group = f"dump_{shape}"
        test_data = generate_test_data(shape)
        tree = (
            jtree.parse(test_data)
            if serializer == "jtree"
            else json.loads(test_data)
        )

        result = benchmark(dump_func, tree)

        if isinstance(result, bytes):
            result = result.decode("utf-8")
        assert json.loads(result) == json.loads(test_data)

    @pytest.mark.benchmark(group="dump_pretty")
    def test_pretty_serialization(self, benchmark: Any) -> None:
        """Benchmarks indented output of the roster document."""
        tree = jtree.parse(generate_test_data("roster"))

        result = benchmark(tree.dump, 2)

        assert jtree.parse(result) == tree


class TestPathBenchmarks:
    """Benchmarks for dot-path reads against plain dict traversal."""

    @pytest.mark.parametrize("shape", ["settings", "roster", "deep_tree"])
    @pytest.mark.parametrize("method", ["jtree_at_path", "native_dict"])
    def test_path_lookup(
        self, benchmark: Any, shape: str, method: str
    ) -> None:
        """Benchmarks resolving every lookup path of one document."""
        benchmark.group = f"path_{shape}"
        test_data = generate_test_data(shape)
        paths = lookup_paths(shape)

        if method == "jtree_at_path":
            tree = jtree.parse(test_data)

            def run() -> list[Any]:
                return [jtree.at_path(tree, path) for path in paths]

            results = [node.to_python() for node in benchmark(run)]
        else:
            data = json.loads(test_data)

            def run() -> list[Any]:
                return [_native_lookup(data, path) for path in paths]

            results = benchmark(run)

        assert len(results) == len(paths)
