"""
Test data generators for jtree benchmarks.

Creates JSON documents shaped like the configuration and save files the
value tree is meant for:
- Different sizes (single record up to large rosters)
- Different shapes (flat, wide arrays, deep trees)
- String-heavy content with escapes and non-ASCII text
"""

import json
import random
import string
from typing import Any

DOCUMENT_SHAPES = (
    "settings",
    "roster",
    "mixed_array",
    "deep_tree",
    "escaped_strings",
)

# Fixed seed so every library sees identical documents across runs
_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]
_NON_ASCII = "\xe9\xf1\xfc\u4e2d\u6587\U0001f600"


def generate_test_data(shape: str) -> str:
    """Generates JSON text for the named document shape."""
    generators = {
        "settings": _generate_settings,
        "roster": _generate_roster,
        "mixed_array": _generate_mixed_array,
        "deep_tree": _generate_deep_tree,
        "escaped_strings": _generate_escaped_strings,
    }

    if shape not in generators:
        raise ValueError(f"Unknown document shape: {shape}")

    return json.dumps(generators[shape](random.Random(_SEED)))


def lookup_paths(shape: str) -> list[str]:
    """Dot paths that resolve in the generated document of this shape."""
    paths = {
        "settings": ["video.resolution.width", "audio.volume", "name"],
        "roster": ["players.0.stats.health", "players.99.name", "team"],
        "deep_tree": ["child.child.child.child.child.child.label"],
    }
    return paths.get(shape, [])


def _generate_settings(rng: random.Random) -> dict[str, Any]:
    """A small settings object (< 1KB)."""
    return {
        "name": "default",
        "version": 3,
        "video": {
            "fullscreen": True,
            "resolution": {"width": 1920, "height": 1080},
            "gamma": 2.2,
        },
        "audio": {"volume": round(rng.uniform(0, 1), 3), "muted": False},
        "keybindings": ["w", "a", "s", "d", "space"],
        "last_profile": None,
    }


def _generate_roster(rng: random.Random) -> dict[str, Any]:
    """A large object (> 10KB) holding a hundred player records."""
    return {
        "team": _random_string(rng, 12),
        "season": rng.randint(2000, 2030),
        "players": [
            {
                "id": f"p_{i:04d}",
                "name": f"{_random_string(rng, 6)} {_random_string(rng, 9)}",
                "active": rng.choice([True, False]),
                "stats": {
                    "health": rng.randint(1, 100),
                    "speed": round(rng.uniform(0.5, 3.0), 2),
                    "score": rng.randint(-(2**40), 2**40),
                },
                "inventory": [
                    _random_string(rng, rng.randint(3, 10))
                    for _ in range(rng.randint(0, 6))
                ],
            }
            for i in range(100)
        ],
    }


def _generate_mixed_array(rng: random.Random) -> list[Any]:
    """A wide array cycling through every JSON kind."""
    makers = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "tag": _random_string(rng, 8)},
        lambda i: [i, i * 0.5, str(i)],
    ]
    return [rng.choice(makers)(i) for i in range(300)]


def _generate_deep_tree(rng: random.Random) -> dict[str, Any]:
    """A binary-ish tree nested ten levels deep."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"label": _random_string(rng, 10)}
        return {
            "depth": depth,
            "label": _random_string(rng, 12),
            "leaves": [node(depth - 2) for _ in range(2)],
            "child": node(depth - 1),
        }

    return node(10)


def _generate_escaped_strings(rng: random.Random) -> dict[str, Any]:
    """Strings dense with escapes, control characters and non-ASCII text."""

    def escaped(length: int) -> str:
        chars = []
        for _ in range(length):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(json.loads(f'"{rng.choice(_ESCAPES)}"'))
            elif rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_NON_ASCII))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    return {
        "lines": [escaped(60) for _ in range(100)],
        "controls": ["".join(map(chr, range(32))) for _ in range(10)],
        "paths": {
            f"file_{i}": f"C:\\Users\\{_random_string(rng, 8)}\\save_{i}.json"
            for i in range(30)
        },
    }


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random ASCII string of the given length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
