# infrastructure/request_file/yaml_loader.py
"""
Request files in YAML, e.g.

    method: POST
    url: https://httpbin.org/post
    headers:
      User-Agent: Litepost/1.0
    body:
      type: json
      content: '{"name": "litepost"}'
    auth:
      type: bearer
      token: abc
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.request_file.base_loader import RequestFileLoaderBase, RequestFileLoadError


class YamlRequestFileLoader(RequestFileLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise RequestFileLoadError(f"Invalid YAML in {path}: {exc}") from exc
