"""
filejson.resources - Named JSON resources inside a lookup domain.

A lookup domain is where bundled files live: the primary domain (the
application's own directory), an explicit directory, or an importable
package read through importlib.resources.
"""

from __future__ import annotations

import importlib.resources
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Union

from filejson.config import ReadingOptions
from filejson.io import load_json
from filejson.logging import logger

Domain = Union[None, str, os.PathLike, ModuleType]


def main_domain(resource_root: os.PathLike | None = None) -> Path:
    """Return the primary resource directory.

    That is ``resource_root`` when given, else the directory of the running
    ``__main__`` script, else the current working directory.
    """
    if resource_root is not None:
        return Path(resource_root)
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


def resolve_domain(domain: Domain = None, resource_root: os.PathLike | None = None) -> Any | None:
    """Resolve a lookup domain to a Path or importlib Traversable.

    Strings name packages. A package that cannot be found, or an empty name,
    resolves to None rather than raising.
    """
    if domain is None:
        return main_domain(resource_root)
    if isinstance(domain, (str, ModuleType)):
        try:
            return importlib.resources.files(domain)
        except (ModuleNotFoundError, TypeError, ValueError) as e:
            logger.debug("Lookup domain %r not resolvable: %s", domain, e)
            return None
    return Path(domain)


def resource_path(
    name: str,
    extension: str = "json",
    domain: Domain = None,
    resource_root: os.PathLike | None = None,
) -> Any | None:
    """Locate ``<base>.<extension>`` in a lookup domain.

    ``base`` is ``name`` cut at its first dot, so "config", "config.json"
    and "config.v2.json" all look for "config.json".

    Returns:
        The resource location, or None if it does not exist
    """
    base = name.split(".")[0]
    if not base:
        return None

    root = resolve_domain(domain, resource_root)
    if root is None:
        return None

    candidate = root.joinpath(f"{base}.{extension}")
    if candidate.is_file():
        logger.debug("Resolved resource %r to %s", name, candidate)
        return candidate
    logger.debug("Resource %s.%s not found in %s", base, extension, root)
    return None


def read_json_from_resource(
    name: str,
    domain: Domain = None,
    options: ReadingOptions | None = None,
    resource_root: os.PathLike | None = None,
) -> dict[str, Any] | None:
    """Read a bundled JSON resource by name.

    Args:
        name: Resource name, with or without a ".json" suffix
        domain: Lookup domain; None means the primary domain
        options: Parser leniency; defaults to ReadingOptions()
        resource_root: Overrides the primary domain's directory

    Returns:
        The parsed object, or None if the resource does not exist or its
        top-level value is not an object

    Raises:
        OSError: If the resource exists but cannot be read
        json.JSONDecodeError: If the resource contains invalid JSON
    """
    location = resource_path(name, "json", domain, resource_root)
    if location is None:
        return None
    return load_json(location, options)
