"""Local filesystem implementation of FileReader and FileWriter."""

import json
from pathlib import Path
from typing import Any


class LocalFileReader:
    def read_json(self, path: str) -> Any:
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundError(f"JSON file not found: {path}")
        return json.loads(p.read_text(encoding="utf-8"))


class LocalFileWriter:
    """Write JSON results, creating parent directories as needed."""

    def write_json(self, data: Any, path: str) -> None:
        if isinstance(data, str):
            data = json.loads(data)
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
