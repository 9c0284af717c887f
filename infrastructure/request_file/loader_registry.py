from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from domain.request_fields import RequestFieldState
from infrastructure.request_file.base_loader import RequestFileLoaderBase, RequestFileLoadError
from infrastructure.request_file.json_loader import JsonRequestFileLoader
from infrastructure.request_file.yaml_loader import YamlRequestFileLoader


class RequestFileLoaderRegistry:
    """Picks the request file loader by extension (case-insensitive)."""

    def __init__(self) -> None:
        yaml_loader = YamlRequestFileLoader()
        self._loaders: Dict[str, RequestFileLoaderBase] = {
            ".yaml": yaml_loader,
            ".yml": yaml_loader,
            ".json": JsonRequestFileLoader(),
        }

    @property
    def supported_extensions(self) -> Tuple[str, ...]:
        return tuple(sorted(self._loaders))

    def get_loader(self, path: Path) -> RequestFileLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            supported = ", ".join(self.supported_extensions)
            raise RequestFileLoadError(
                f"Unsupported request file format: {ext or '(no extension)'} (expected one of {supported})"
            )
        return loader

    def load(self, path: str | Path) -> RequestFieldState:
        request_path = Path(path)
        return self.get_loader(request_path).load_from_file(request_path)
