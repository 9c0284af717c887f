# infrastructure/request_file/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.request_file.base_loader import RequestFileLoaderBase, RequestFileLoadError


class JsonRequestFileLoader(RequestFileLoaderBase):
    def _load_file(self, path: Path) -> Any:
        content = path.read_text(encoding="utf-8")
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise RequestFileLoadError(f"Invalid JSON in {path}: {exc}") from exc
