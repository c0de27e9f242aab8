"""Shared pytest fixtures for the entitygen test suite.

Provides reusable fixtures for:
- Sample JSON documents covering every value kind
- Default and customised configurations
- A recording fake host for session tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest

from entitygen.config import Config, LayoutConfig, NamingConfig


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

@pytest.fixture
def flat_document() -> dict[str, Any]:
    """Primitive-only document: string, float and a list of strings."""
    return {"name": "x", "age": 3.5, "tags": ["a", "b"]}


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """Object field plus an array of objects."""
    return {
        "uuid": "abc",
        "address": {"city": "NYC", "zip": 10001},
        "items": [{"id": 1, "price": 9.99}],
    }


@pytest.fixture
def car_document() -> dict[str, Any]:
    """A realistic document exercising every value kind."""
    return {
        "id": 42,
        "model_name": "Roadster",
        "price": 129999.95,
        "is_electric": True,
        "discontinued_at": None,
        "features": [],
        "ratings": [4, 5, 3],
        "engine": {
            "power_kw": 215,
            "manufacturer": {"name": "Acme", "country": "SE"},
        },
        "owners": [
            {"first-name": "Ada", "since": 2019, "contacts": [{"kind": "email"}]},
        ],
        "matrix": [[1.5, 2.5]],
    }


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default configuration."""
    return Config()


@pytest.fixture
def hive_config() -> Config:
    """Configuration with Hive annotations and snake-cased file names."""
    return Config(
        naming=NamingConfig(snake_case_filenames=True),
        layout=LayoutConfig(hive_type_id=3),
    )


# ---------------------------------------------------------------------------
# Fake host
# ---------------------------------------------------------------------------

class FakeHost:
    """Scripted host that records everything the session does."""

    def __init__(
        self,
        answers: Optional[dict[str, Optional[str]]] = None,
        directories: Optional[dict[str, Optional[Path]]] = None,
        fail_writes: bool = False,
    ) -> None:
        self.answers = answers or {}
        self.directories = directories or {}
        self.fail_writes = fail_writes
        self.written: dict[Path, str] = {}
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def ask_string(self, key: str, prompt: str) -> Optional[str]:
        return self.answers.get(key)

    def pick_directory(self, key: str, label: str) -> Optional[Path]:
        return self.directories.get(key)

    async def write_file(self, path: Path, content: str) -> None:
        if self.fail_writes:
            raise PermissionError(f"read-only: {path}")
        self.written[path] = content

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def fake_host_factory():
    """Factory for ``FakeHost`` instances."""
    return FakeHost
