"""Decompose path text into components.

Roots recognised per platform:

POSIX:      "/"                     leading separator, repeats collapse

Windows:    "\\\\server\\share"     UNC, either separator may be used
            "C:\\", "C:"            drive letter followed by a separator or end of text
            "\\"                    bare root, no drive

Windows drive-relative text such as "C:foo", and UNC prefixes missing the
server or share, are rejected with MalformedPrefix.
"""

import string
import typing as t

from .component import Component, Parts
from .exceptions import InvalidEncoding, MalformedPrefix
from .normalize import normalize
from .platform import Platform


def decode(text: str | bytes, platform: Platform) -> str:
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8", platform.encoding_errors)
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"Path is not valid {platform} path text", text) from e
    elif not isinstance(text, str):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")

    if "\0" in text:
        raise InvalidEncoding("Path contains a null character", text)

    try:
        text.encode("utf-8", platform.encoding_errors)
    except UnicodeEncodeError as e:
        raise InvalidEncoding(f"Path is not valid {platform} path text", text) from e

    return text


def split_root(text: str, platform: Platform) -> tuple[t.Optional[Component], str]:
    """Split ``text`` into its root component and the remainder after it.

    On Windows ``text`` must already use ``\\`` as its only separator.
    """
    sep = platform.separator

    if platform is Platform.Posix:
        if text.startswith(sep):
            return Component.root(), text.lstrip(sep)
        return None, text

    if text.startswith(sep * 2):
        server, _, rest = text[2:].partition(sep)
        share, _, rest = rest.partition(sep)

        if not server:
            raise MalformedPrefix("UNC prefix is missing its server", text)
        if not share:
            raise MalformedPrefix("UNC prefix is missing its share", text)

        return Component.root(f"{sep * 2}{server}{sep}{share}"), rest

    if len(text) >= 2 and text[1] == ":" and text[0] in string.ascii_letters:
        if len(text) > 2 and text[2] != sep:
            raise MalformedPrefix("Drive-relative paths are not supported", text)

        return Component.root(f"{text[0].upper()}:"), text[3:]

    if text.startswith(sep):
        return Component.root(), text[1:]

    return None, text


def split(text: str | bytes, platform: Platform) -> Parts:
    """Split ``text`` without normalizing it.

    Empty segments from repeated separators and every ``.`` are kept.
    """
    text = decode(text, platform)
    sep = platform.separator

    if platform is Platform.Windows:
        text = text.replace("/", sep)

    root, remainder = split_root(text, platform)

    components: list[Component] = []
    if root is not None:
        components.append(root)

    if remainder:
        for segment in remainder.split(sep):
            components.append(Component.from_segment(segment))

    directory = not text or text.endswith(sep) or not remainder

    return Parts(tuple(components), directory)


def parse(text: str | bytes, platform: Platform) -> Parts:
    return normalize(split(text, platform))
