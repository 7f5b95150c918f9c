import os
import pathlib
import typing as t

from . import joiner, parser, render, resolver
from .component import Component, Parts
from .platform import Platform
from .typing import PathLike, PlatformPath


class OsPath:
    """A path held as typed components rather than as a string.

    Joining never throws away an absolute base: ``/foo/bar`` joined with
    ``/baz.txt`` is ``/foo/bar/baz.txt``. A leading ``..`` in the joined
    path walks back up the base, stepping over a file name at its end, so
    ``/foo/bar/baz.txt`` joined with ``../pow.txt`` is ``/foo/pow.txt``.

    A path ending in a separator is a directory, anything else is a file.
    Nothing here looks at the filesystem.
    """

    def __init__(self, path: PathLike = "", platform: t.Optional[Platform] = None):
        self.platform = platform or _platform_of(path) or Platform.native()
        self._parts = _coerce(path, self.platform)

    def __bytes__(self):
        return render.to_bytes(self._parts, self.platform)

    def __eq__(self, other):
        if not isinstance(other, OsPath):
            return False

        return self.platform is other.platform and self._parts == other._parts

    def __fspath__(self) -> str:
        return str(self)

    def __getitem__(self, key: int) -> Component:
        return self._parts.components[key]

    def __hash__(self) -> int:
        return hash((self.platform, self._parts))

    def __iter__(self):
        return iter(self._parts.components)

    def __len__(self):
        return len(self._parts.components)

    def __repr__(self):
        return f"OsPath({str(self)!r}, platform={self.platform})"

    def __str__(self):
        return render.to_text(self._parts, self.platform)

    def __truediv__(self, other: PathLike) -> "OsPath":
        return self.join(other)

    @classmethod
    def from_parts(cls, parts: Parts, platform: Platform) -> "OsPath":
        path = cls.__new__(cls)
        path.platform = platform
        path._parts = parts
        return path

    @property
    def parts(self) -> Parts:
        return self._parts

    @property
    def components(self) -> tuple[Component, ...]:
        return self._parts.components

    def copy(self) -> "OsPath":
        return OsPath.from_parts(self._parts, self.platform)

    def join(self, *others: PathLike) -> "OsPath":
        parts = self._parts
        for other in others:
            parts = joiner.join(parts, _coerce(other, self.platform))
        return OsPath.from_parts(parts, self.platform)

    def push(self, other: PathLike):
        self._parts = joiner.join(self._parts, _coerce(other, self.platform))

    def resolve(self) -> "OsPath":
        return OsPath.from_parts(resolver.resolve(self._parts), self.platform)

    @property
    def is_absolute(self) -> bool:
        return self._parts.is_absolute

    @property
    def is_relative(self) -> bool:
        return not self._parts.is_absolute

    @property
    def is_dir(self) -> bool:
        return self._parts.directory

    @property
    def is_file(self) -> bool:
        return not self._parts.directory

    @property
    def name(self) -> t.Optional[str]:
        if self._parts.ends_in_normal:
            return self._parts.last_component.name

    @property
    def file_name(self) -> t.Optional[str]:
        if not self.is_dir:
            return self.name

    @property
    def extension(self) -> t.Optional[str]:
        name = self.file_name
        if name is None:
            return None

        stem, dot, extension = name.rpartition(".")
        if not dot or not stem:
            return None
        return extension

    @property
    def parent(self) -> t.Optional["OsPath"]:
        tail = self._parts.tail
        if not tail or tail[-1].is_parent:
            return None
        elif len(tail) == 1 and tail[0].is_current:
            return None

        components = self._parts.components[:-1]
        if not components:
            components = (Component.current(),)

        return OsPath.from_parts(Parts(components, True), self.platform)

    def to_text(self) -> str:
        return str(self)

    def to_pathlib(self) -> pathlib.PurePath:
        if self.platform is Platform.Windows:
            return pathlib.PureWindowsPath(str(self))
        return pathlib.PurePosixPath(str(self))


def parse(text: str | bytes, platform: t.Optional[Platform] = None) -> OsPath:
    platform = platform or Platform.native()
    return OsPath.from_parts(parser.parse(text, platform), platform)


def to_text(path: OsPath) -> str:
    return str(path)


def convert(parts: Parts, platform: Platform) -> Parts:
    """Carry ``parts`` over to another platform.

    Drives and UNC shares have no POSIX form, so a root becomes the target's
    bare root.
    """
    if parts.is_absolute and parts.root.name:
        return Parts((Component.root(),) + parts.tail, parts.directory)
    return parts


def _platform_of(path: PathLike) -> t.Optional[Platform]:
    if isinstance(path, (OsPath, PlatformPath)):
        return path.platform
    elif isinstance(path, pathlib.PureWindowsPath):
        return Platform.Windows
    elif isinstance(path, pathlib.PurePosixPath):
        return Platform.Posix


def _coerce(path: PathLike, platform: Platform) -> Parts:
    if isinstance(path, OsPath):
        if path.platform is platform:
            return path.parts
        return convert(path.parts, platform)

    source = _platform_of(path) or platform

    if isinstance(path, (str, bytes)):
        return parser.parse(path, platform)
    elif isinstance(path, os.PathLike):
        parts = parser.parse(os.fspath(path), source)
        if source is platform:
            return parts
        return convert(parts, platform)

    raise TypeError(f"Expected a path-like object, got {type(path).__name__}")
