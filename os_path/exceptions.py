import typing as t


class PathError(ValueError):
    def __init__(self, message: str, path: t.Optional[str | bytes] = None):
        self.path = path

        if path is not None:
            message = f"{message}: {path!r}"

        super().__init__(message)


class MalformedPrefix(PathError):
    pass


class InvalidEncoding(PathError):
    pass
