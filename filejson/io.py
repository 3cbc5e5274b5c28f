"""
filejson.io - JSON read/write helpers.

Reads a whole file and parses it as a JSON object, and writes encodable
values to a path or file:// URL. I/O, parse and encoding errors propagate
unchanged; only the file-create step reports failure through its return
value.
"""

from __future__ import annotations

import dataclasses
import errno
import json
import mmap
import os
import re
import stat
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from filejson.config import EncoderOptions, FileAttributes, ReadingOptions
from filejson.logging import logger

PathOrURL = Union[str, os.PathLike]

_URL_SCHEME = re.compile(r"^([A-Za-z][\w+.-]*)://")
_SNAKE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def read_json_from_path(path: PathOrURL, options: ReadingOptions | None = None) -> dict[str, Any] | None:
    """Read a JSON file and return its top-level object.

    Args:
        path: Path (or file:// URL) of the JSON file
        options: Parser leniency; defaults to ReadingOptions()

    Returns:
        The parsed object as a dictionary, or None if the document's
        top-level value is not an object

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file contains invalid JSON
    """
    return load_json(to_path(path), options)


def load_json(source: Any, options: ReadingOptions | None = None) -> dict[str, Any] | None:
    """Parse the bytes behind ``source`` (a Path or importlib Traversable)."""
    options = options or ReadingOptions()
    data = _read_bytes(source, options.mapped_if_safe)
    document = json.loads(data)

    if not options.allow_fragments and not isinstance(document, (dict, list)):
        raise json.JSONDecodeError("JSON text did not start with array or object", "", 0)

    if isinstance(document, dict):
        return document
    logger.debug("Top-level JSON value in %s is %s, not an object", source, type(document).__name__)
    return None


def _read_bytes(source: Any, mapped_if_safe: bool) -> bytes:
    if not isinstance(source, Path):
        return source.read_bytes()

    with open(source, "rb") as f:
        if mapped_if_safe:
            st = os.fstat(f.fileno())
            # Empty files and non-regular files cannot be mapped.
            if st.st_size > 0 and stat.S_ISREG(st.st_mode):
                try:
                    with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
                        return mapped[:]
                except (OSError, ValueError) as e:
                    logger.debug("Falling back to a plain read for %s: %s", source, e)
        return f.read()


def to_path(location: PathOrURL) -> Path:
    """Turn a path, path string or file:// URL into a Path.

    Raises:
        ValueError: If ``location`` is a URL with a scheme other than file.
            Strings without ``scheme://`` are always plain paths, so names
            like "notes:v2.json" are fine.
    """
    if not isinstance(location, str):
        return Path(location)

    if not location.startswith("file:"):
        match = _URL_SCHEME.match(location)
        if match:
            raise ValueError(f"Unsupported URL scheme: {match.group(1)}")
        return Path(location)

    parsed = urlparse(location)
    if parsed.netloc not in ("", "localhost"):
        raise ValueError(f"Remote file URLs are not supported: {location}")
    return Path(url2pathname(parsed.path))


def convert_to_snake_case(key: str) -> str:
    """Convert a camelCase key to snake_case, keeping leading/trailing underscores."""
    stripped = key.strip("_")
    if not stripped:
        return key
    start = key.index(stripped)
    converted = _SNAKE_BOUNDARY.sub("_", stripped).lower()
    return key[:start] + converted + key[start + len(stripped) :]


def _encode_date(value: date, encoder: EncoderOptions) -> str | float:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), tzinfo=timezone.utc)
    elif value.tzinfo is None and encoder.date_encoding != "iso8601":
        # Naive datetimes count as UTC, like plain dates.
        value = value.replace(tzinfo=timezone.utc)
    if encoder.date_encoding == "seconds_since_1970":
        return value.timestamp()
    if encoder.date_encoding == "milliseconds_since_1970":
        return value.timestamp() * 1000.0
    return value.isoformat()


def _prepare(value: Any, encoder: EncoderOptions) -> Any:
    """Reduce ``value`` to JSON-native types the json module can dump."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        prepared = {}
        for key, item in value.items():
            if isinstance(key, str) and encoder.key_encoding == "convert_to_snake_case":
                key = convert_to_snake_case(key)
            prepared[key] = _prepare(item, encoder)
        return prepared
    if isinstance(value, (list, tuple)):
        return [_prepare(item, encoder) for item in value]
    if isinstance(value, date):
        return _encode_date(value, encoder)
    if isinstance(value, BaseModel):
        return _prepare(value.model_dump(mode="python"), encoder)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _prepare(dataclasses.asdict(value), encoder)
    if hasattr(value, "__json__"):
        return _prepare(value.__json__(), encoder)
    try:
        return to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable") from e


def encode_json(value: Any, encoder: EncoderOptions | None = None) -> bytes:
    """Serialize an encodable value to UTF-8 JSON bytes.

    Raises:
        TypeError: If ``value`` contains something that is not encodable
        ValueError: If ``value`` contains NaN or infinity and the encoder
            does not allow them
    """
    encoder = encoder or EncoderOptions()
    text = json.dumps(
        _prepare(value, encoder),
        indent=encoder.indent,
        separators=encoder.separators,
        sort_keys=encoder.sorted_keys,
        ensure_ascii=encoder.ensure_ascii,
        allow_nan=encoder.allow_nan,
    )
    return text.encode("utf-8")


def _apply_attributes(path: Path, attributes: FileAttributes) -> None:
    if attributes.permissions is not None:
        os.chmod(path, attributes.permissions)
    if attributes.owner_id is not None or attributes.group_id is not None:
        if not hasattr(os, "chown"):
            raise OSError(errno.ENOTSUP, "Changing file ownership is not supported", str(path))
        uid = attributes.owner_id if attributes.owner_id is not None else -1
        gid = attributes.group_id if attributes.group_id is not None else -1
        os.chown(path, uid, gid)
    if attributes.modification_date is not None:
        accessed = os.stat(path).st_atime
        os.utime(path, (accessed, attributes.modification_date.timestamp()))


def create_file(path: Path, contents: bytes, attributes: FileAttributes | None = None) -> bool:
    """Create or overwrite ``path`` with ``contents`` and apply ``attributes``.

    Returns:
        True if the file was written and all attributes applied, else False
    """
    try:
        with open(path, "wb") as f:
            f.write(contents)
        if attributes is not None and not attributes.is_empty():
            _apply_attributes(path, attributes)
    except OSError as e:
        logger.debug("Could not create %s: %s", path, e)
        return False
    return True


def write_encodable_to_url(
    value: Any,
    url: PathOrURL,
    encoder: EncoderOptions | None = None,
    attributes: FileAttributes | None = None,
) -> bool:
    """Encode ``value`` as JSON and write it to ``url``.

    Encoding errors raise; a failure to create the file is reported by
    returning False.

    Args:
        value: Encodable value (JSON types, pydantic models, dataclasses,
            dates, or objects with a ``__json__`` method)
        url: Destination path or file:// URL
        encoder: Encoder configuration; defaults to EncoderOptions()
        attributes: Optional metadata for the new file

    Returns:
        Whether the file was created

    Raises:
        TypeError: If ``value`` is not encodable
        ValueError: If ``value`` holds non-finite floats the encoder
            rejects, or ``url`` is not a file location
    """
    path = to_path(url)
    data = encode_json(value, encoder)
    return create_file(path, data, attributes)
