import os
import typing as t

if t.TYPE_CHECKING:
    from .path import OsPath
    from .platform import Platform


@t.runtime_checkable
class PlatformPath(t.Protocol):
    platform: "Platform"

    def __fspath__(self) -> str | bytes:
        ...


PathLike = t.Union[str, bytes, "OsPath", PlatformPath, os.PathLike]
