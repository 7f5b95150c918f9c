"""Dump and load paths as JSON.

---------------
ENCODING SCHEME
---------------

Path:           {"platform": "posix", "directory": false, "components": [...]}

Root:           {"/": ""}               POSIX root, bare Windows root
                {"/": "C:"}             Windows drive
                {"/": "\\\\srv\\share"} UNC server and share

CurrentDir:     "."

ParentDir:      ".."

Normal:         "any other string"

"""

from __future__ import annotations

import json
import logging
import typing as t

from . import parser
from .component import Component, Parts
from .exceptions import MalformedPrefix
from .normalize import normalize
from .path import OsPath
from .platform import Platform


ROOT_KEY = "/"


logger = logging.getLogger(__name__)


def _dump(path: OsPath, output: t.TextIO | None = None) -> str | None:
    data = dump_path(path)

    if output:
        json.dump(data, output, separators=(",", ":"))
    else:
        return json.dumps(data, separators=(",", ":"))


def dump(path: OsPath, output: t.TextIO):
    return _dump(path, output)


def dumps(path: OsPath) -> str:
    return _dump(path)


def dump_path(path: OsPath) -> dict:
    return {
        "platform": path.platform.value,
        "directory": path.is_dir,
        "components": [dump_component(c) for c in path.components],
    }


def dump_component(component: Component) -> str | dict:
    if component.is_root:
        return {ROOT_KEY: component.name}

    return component.name


def load(data: dict | t.TextIO) -> OsPath:
    if not isinstance(data, dict):
        data = json.load(data)

    return load_path(data)


def loads(data: str) -> OsPath:
    return load_path(json.loads(data))


def load_path(data: dict) -> OsPath:
    if not isinstance(data, dict):
        raise ValueError(f"Path document must be an object, got {data!r}")

    try:
        platform = Platform(data["platform"])
    except KeyError:
        raise ValueError("Platform of path could not be found")
    except ValueError:
        raise ValueError(f"Platform of path was malformed: {data['platform']!r}")

    directory = data.get("directory", False)
    if not isinstance(directory, bool):
        raise ValueError(f"Directory flag of path was malformed: {directory!r}")

    tokens = data.get("components")
    if not isinstance(tokens, list):
        raise ValueError("Components of path not found")

    components = [load_component(token, platform) for token in tokens]

    for i, component in enumerate(components):
        if component.is_root and i > 0:
            raise ValueError(f"Root component found at position {i}")

    parts = normalize(Parts(tuple(components), directory))

    logger.debug("Loaded %s path with %d component(s)", platform, len(parts))

    return OsPath.from_parts(parts, platform)


def load_component(token: str | dict, platform: Platform) -> Component:
    if isinstance(token, str):
        return Component.from_segment(token)
    elif isinstance(token, dict) and list(token) == [ROOT_KEY]:
        prefix = token[ROOT_KEY]
        if isinstance(prefix, str) and _is_root_prefix(prefix, platform):
            return Component.root(prefix)

    raise ValueError(f"Failed to convert token to path component: '{token}'")


def _is_root_prefix(prefix: str, platform: Platform) -> bool:
    """Whether ``prefix`` is exactly what the parser yields for a root."""
    sep = platform.separator

    try:
        root, rest = parser.split_root(f"{prefix}{sep}", platform)
    except MalformedPrefix:
        return False

    return rest == "" and root == Component.root(prefix)
