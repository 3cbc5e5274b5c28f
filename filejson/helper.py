"""
filejson.helper - FileJSONHelper, the configured entry point.

Wraps the module-level operations and fills omitted arguments from a
FileJSONConfig.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from filejson.config import (
    EncoderOptions,
    FileAttributes,
    FileJSONConfig,
    ReadingOptions,
    load_config,
)
from filejson.io import PathOrURL, read_json_from_path, write_encodable_to_url
from filejson.resources import Domain, read_json_from_resource, resource_path
from filejson.tempdirs import create_temporary_directory


class FileJSONHelper:
    """Reads and writes JSON files using a shared set of defaults."""

    def __init__(self, config: FileJSONConfig | None = None) -> None:
        self.config = config or FileJSONConfig()

    @classmethod
    def from_yaml(cls, path: Path) -> FileJSONHelper:
        """Build a helper from a YAML config file."""
        return cls(load_config(path))

    def read_json_from_path(
        self, path: PathOrURL, options: ReadingOptions | None = None
    ) -> dict[str, Any] | None:
        return read_json_from_path(path, options or self.config.reading)

    def read_json_from_resource(
        self,
        name: str,
        domain: Domain = None,
        options: ReadingOptions | None = None,
    ) -> dict[str, Any] | None:
        return read_json_from_resource(
            name,
            domain,
            options or self.config.reading,
            resource_root=self.config.resource_root,
        )

    def resource_path(self, name: str, extension: str = "json", domain: Domain = None) -> Any | None:
        return resource_path(name, extension, domain, resource_root=self.config.resource_root)

    def write_encodable_to_url(
        self,
        value: Any,
        url: PathOrURL,
        encoder: EncoderOptions | None = None,
        attributes: FileAttributes | None = None,
    ) -> bool:
        return write_encodable_to_url(value, url, encoder or self.config.encoder, attributes)

    def create_temporary_directory(self, appropriate_for: os.PathLike | None = None) -> Path:
        return create_temporary_directory(
            appropriate_for,
            root=self.config.temp_root,
            prefix=self.config.temp_prefix,
        )
