from .component import Component, Parts


def normalize(parts: Parts) -> Parts:
    """Collapse empty segments and ``.`` into canonical form.

    ``..`` is left exactly where it is. A relative path made only of ``.``
    keeps a single ``.`` so it still reads as relative to itself.
    """
    components: list[Component] = []
    had_current = False

    for i, component in enumerate(parts.components):
        if component.is_root:
            if i == 0:
                components.append(component)
            continue
        elif component.is_current:
            had_current = True
            continue
        elif component.is_normal and not component.name:
            continue

        components.append(component)

    if not components and had_current:
        components.append(Component.current())

    directory = parts.directory
    if not components or (len(components) == 1 and components[0].is_root):
        directory = True

    return Parts(tuple(components), directory)
