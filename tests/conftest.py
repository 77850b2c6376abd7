from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", payload: Any = None) -> None:
        self.status_code = status_code
        self.text = text if payload is None else json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


@pytest.fixture
def feed_fixture() -> Callable[[str], str]:
    def load(name: str) -> str:
        return (FIXTURES / "feeds" / name).read_text(encoding="utf-8")

    return load


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse
