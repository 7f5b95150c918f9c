import typing as t

from dataclasses import dataclass
from enum import Enum


class Component:
    CURRENT_ID = "."
    PARENT_ID = ".."

    class Kind(Enum):
        Root = "Root"
        Current = "Current"
        Parent = "Parent"
        Normal = "Normal"

    __slots__ = ("kind", "name")

    def __init__(self, kind: Kind, name: str = ""):
        if kind is Component.Kind.Current:
            name = Component.CURRENT_ID
        elif kind is Component.Kind.Parent:
            name = Component.PARENT_ID

        self.kind = kind
        self.name = name

    def __eq__(self, other):
        if isinstance(other, Component):
            return self.kind is other.kind and self.name == other.name

        return False

    def __hash__(self) -> int:
        return hash((self.kind, self.name))

    def __repr__(self):
        if self.is_root:
            return f"Component.root({self.name!r})"
        elif self.is_normal:
            return f"Component.normal({self.name!r})"
        return f"Component.{self.kind.value.lower()}()"

    def __str__(self):
        return self.name

    @property
    def is_root(self) -> bool:
        return self.kind is Component.Kind.Root

    @property
    def is_current(self) -> bool:
        return self.kind is Component.Kind.Current

    @property
    def is_parent(self) -> bool:
        return self.kind is Component.Kind.Parent

    @property
    def is_normal(self) -> bool:
        return self.kind is Component.Kind.Normal

    @staticmethod
    def root(prefix: str = "") -> "Component":
        return Component(Component.Kind.Root, prefix)

    @staticmethod
    def current() -> "Component":
        return Component(Component.Kind.Current)

    @staticmethod
    def parent() -> "Component":
        return Component(Component.Kind.Parent)

    @staticmethod
    def normal(name: str) -> "Component":
        return Component(Component.Kind.Normal, name)

    @staticmethod
    def from_segment(segment: str) -> "Component":
        if segment == Component.CURRENT_ID:
            return Component.current()
        elif segment == Component.PARENT_ID:
            return Component.parent()
        return Component.normal(segment)


@dataclass(frozen=True)
class Parts:
    """Ordered components of a path plus its directory intent.

    ``directory`` is set when the path text ends in a separator. It does not
    take part in traversal, only in rendering and file/directory queries.
    """

    components: tuple[Component, ...] = ()
    directory: bool = False

    def __iter__(self):
        return iter(self.components)

    def __len__(self):
        return len(self.components)

    @property
    def is_absolute(self) -> bool:
        return bool(self.components) and self.components[0].is_root

    @property
    def root(self) -> t.Optional[Component]:
        if self.is_absolute:
            return self.components[0]

    @property
    def tail(self) -> tuple[Component, ...]:
        """Components following the root, or all of them for a relative path."""
        if self.is_absolute:
            return self.components[1:]
        return self.components

    @property
    def last_component(self) -> t.Optional[Component]:
        if self.components:
            return self.components[-1]

    @property
    def ends_in_normal(self) -> bool:
        last = self.last_component
        return last is not None and last.is_normal
