import pytest

from os_path import OsPath, Platform


@pytest.fixture(scope="session")
def posix():
    def _posix(text=""):
        return OsPath(text, Platform.Posix)

    return _posix


@pytest.fixture(scope="session")
def windows():
    def _windows(text=""):
        return OsPath(text, Platform.Windows)

    return _windows
