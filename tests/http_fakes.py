from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FakeResponse:
    status_code: int = 200
    json_data: Any = None
    text_data: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.text_data

    def json(self) -> Any:
        if self.json_data is not None:
            return self.json_data
        return json.loads(self.text_data)


class FakeTransport:
    """Stands in for ``requests.Session.get``; replays queued responses or exceptions."""

    def __init__(self, responses: list[FakeResponse | Exception] | None = None) -> None:
        self._responses = list(responses or [])
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def enqueue(self, *responses: FakeResponse | Exception) -> None:
        self._responses.extend(responses)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append((url, kwargs))
        if not self._responses:
            msg = "No fake responses available"
            raise AssertionError(msg)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
