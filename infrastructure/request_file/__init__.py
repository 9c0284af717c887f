# infrastructure/request_file/__init__.py
from infrastructure.request_file.base_loader import RequestFileLoadError, RequestFileLoaderBase
from infrastructure.request_file.json_loader import JsonRequestFileLoader
from infrastructure.request_file.loader_registry import RequestFileLoaderRegistry
from infrastructure.request_file.yaml_loader import YamlRequestFileLoader

__all__ = [
    "RequestFileLoadError",
    "RequestFileLoaderBase",
    "RequestFileLoaderRegistry",
    "YamlRequestFileLoader",
    "JsonRequestFileLoader",
]
