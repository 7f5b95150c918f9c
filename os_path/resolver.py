from .component import Component, Parts
from .normalize import normalize


def resolve(parts: Parts) -> Parts:
    """Collapse every ``..`` against the component before it, and drop ``.``.

    Relative paths keep the ``..`` they cannot collapse. Absolute paths
    never go above their root.
    """
    stack: list[Component] = []

    for component in parts.components:
        if component.is_current:
            continue
        elif component.is_parent:
            if stack and stack[-1].is_normal:
                stack.pop()
                continue
            elif stack and stack[-1].is_root:
                continue

        stack.append(component)

    return normalize(Parts(tuple(stack), parts.directory))
