import os

from enum import Enum


class Platform(Enum):
    Posix = "posix"
    Windows = "windows"

    def __str__(self):
        return self.value

    @property
    def separator(self) -> str:
        return self is Platform.Windows and "\\" or "/"

    @property
    def separators(self) -> str:
        return self is Platform.Windows and "\\/" or "/"

    def is_separator(self, char: str) -> bool:
        return bool(char) and char in self.separators

    @property
    def encoding_errors(self) -> str:
        # POSIX names are arbitrary bytes, Windows names must be valid text
        return self is Platform.Posix and "surrogateescape" or "strict"

    @staticmethod
    def native() -> "Platform":
        return os.name == "nt" and Platform.Windows or Platform.Posix
