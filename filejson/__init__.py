"""
filejson - JSON file helpers.

Reads JSON documents by path or by bundled resource name, writes encodable
values to files, and hands out fresh temporary directories.
"""

from filejson.helper import FileJSONHelper
from filejson.io import read_json_from_path, write_encodable_to_url
from filejson.logging import configure_logging
from filejson.resources import read_json_from_resource
from filejson.tempdirs import create_temporary_directory

__version__ = "0.1.0"

__all__ = [
    "FileJSONHelper",
    "configure_logging",
    "create_temporary_directory",
    "read_json_from_path",
    "read_json_from_resource",
    "write_encodable_to_url",
]
