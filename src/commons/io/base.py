"""Protocols for reading orders and writing hook results. Implement these for other stores."""

from typing import Any, Protocol


class FileReader(Protocol):
    """Load a JSON document (an order) from a path or URL."""

    def read_json(self, path: str) -> Any:
        ...


class FileWriter(Protocol):
    """Persist a JSON-serializable result."""

    def write_json(self, data: Any, path: str) -> None:
        ...
