import logging

from .component import Component, Parts
from .normalize import normalize


logger = logging.getLogger(__name__)


def strip_root(parts: Parts) -> Parts:
    return Parts(parts.tail, parts.directory)


def join(base: Parts, other: Parts) -> Parts:
    """Combine two normalized paths.

    An absolute ``other`` joined onto an absolute ``base`` loses its root
    and continues from ``base``. Onto a relative ``base`` it replaces it.

    A leading run of ``..`` in ``other`` is consumed against the end of
    ``base``, skipping over a trailing file name first. ``..`` further in is
    appended untouched; use :func:`os_path.resolver.resolve` to collapse it.
    """
    if other.is_absolute:
        if not base.is_absolute:
            return other

        _check_drive(base.root, other.root)
        other = strip_root(other)

    remaining = list(other.components)
    while remaining and remaining[0].is_current:
        remaining.pop(0)

    if not remaining:
        return base

    components = list(base.components)

    if remaining[0].is_parent and not base.directory and base.ends_in_normal:
        components.pop()

    discarded = 0
    while remaining and remaining[0].is_parent:
        if components and components[-1].is_normal:
            components.pop()
        elif base.is_absolute:
            discarded += 1
        else:
            break

        remaining.pop(0)

    if discarded:
        logger.debug("Discarded %d parent traversal(s) above root", discarded)

    components.extend(remaining)

    return normalize(Parts(tuple(components), other.directory))


def _check_drive(base_root: Component, other_root: Component):
    logger.debug("Discarding false root %r", other_root.name)

    if other_root.name and base_root.name and other_root.name != base_root.name:
        logger.warning(
            "Joining onto %r discards the root of the joined path %r",
            base_root.name,
            other_root.name,
        )
