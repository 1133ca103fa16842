"""Entity loader contract and adapters."""

from courseboard.infra.loader.file_loader import JsonFileEntityLoader
from courseboard.infra.loader.http_loader import HttpEntityLoader
from courseboard.infra.loader.protocol import EntityLoader

__all__ = [
    "EntityLoader",
    "HttpEntityLoader",
    "JsonFileEntityLoader",
]
