"""JSONL event sink for request-chaos.

Writes Pydantic event models to JSONL files so a test session's chaos can be
reviewed afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO

from pydantic import TypeAdapter

from request_chaos.events.types import Event


class JsonlSink:
    """Append-only JSONL event sink.

    Each line is a complete JSON object that deserializes back to the original
    event type through the discriminated union.

    Example:
        sink = JsonlSink("chaos.jsonl")
        sink.emit(ErrorInjectedEvent(method="GET", path="/orders", status=503))
        sink.close()
    """

    def __init__(self, path: str | Path):
        """Initialize the JSONL sink.

        Args:
            path: Path to the JSONL file. Parent directories will be created.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh: IO[str] = self.path.open("a", encoding="utf-8")

    def emit(self, event: Event) -> None:
        """Write an event as one line and flush."""
        self._fh.write(event.model_dump_json() + "\n")
        self._fh.flush()

    def close(self) -> None:
        """Close the file handle. Safe to call multiple times."""
        if not self._fh.closed:
            self._fh.close()

    def __enter__(self) -> JsonlSink:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def read_events(path: str | Path) -> list[Event]:
    """Read events from a JSONL file.

    Args:
        path: Path to the JSONL file.

    Returns:
        List of Event objects in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValidationError: If any line fails to parse.
    """
    adapter = TypeAdapter(Event)
    events: list[Event] = []

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(adapter.validate_json(line))

    return events
