import string

from .component import Component, Parts
from .platform import Platform


def root_text(root: Component, platform: Platform) -> str:
    return f"{root.name}{platform.separator}"


def _looks_like_drive(component: Component) -> bool:
    name = component.name
    return (
        component.is_normal
        and len(name) >= 2
        and name[1] == ":"
        and name[0] in string.ascii_letters
    )


def to_text(parts: Parts, platform: Platform) -> str:
    sep = platform.separator

    text = ""
    tail = parts.tail

    if parts.is_absolute:
        text = root_text(parts.root, platform)
    elif platform is Platform.Windows and tail and _looks_like_drive(tail[0]):
        # "C:x" as a first name would read back as a drive
        text = f"{Component.CURRENT_ID}{sep}"

    text += sep.join(component.name for component in tail)

    if parts.directory and tail:
        text += sep

    return text


def to_bytes(parts: Parts, platform: Platform) -> bytes:
    return to_text(parts, platform).encode("utf-8", platform.encoding_errors)
