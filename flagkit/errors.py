from typing import Optional


class FlagError(ValueError):
    """
    Base class for every error raised while registering or parsing flags.
    """

    flag: Optional[str]

    def __init__(self, msg: str, flag: Optional[str] = None):
        super().__init__(msg)
        self.flag = flag


# --- Registration ----------------------------------------------------------- #


class InvalidFlagName(FlagError):
    def __init__(self, name: str):
        super().__init__(f"Invalid flag name '{name}'", name)


class ReservedFlag(FlagError):
    def __init__(self, name: str):
        super().__init__(f"Flag '-{name}' is reserved for help", name)


class DuplicateFlag(FlagError):
    def __init__(self, name: str):
        super().__init__(f"Flag '-{name}' is already defined", name)


class UnsupportedType(FlagError):
    def __init__(self, name: str, typ: object):
        super().__init__(f"Unsupported destination type {typ!r} for flag '-{name}'", name)
        self.typ = typ


# --- Parsing ---------------------------------------------------------------- #


class UnknownFlag(FlagError):
    def __init__(self, name: str):
        super().__init__(f"Unknown flag '-{name}'", name)


class MissingValue(FlagError):
    def __init__(self, name: str):
        super().__init__(f"Missing value for flag '-{name}'", name)


class InvalidValue(FlagError):
    """
    Raised when the raw text of a flag can't be converted to the
    destination's type.
    """

    raw: str
    kind: str

    def __init__(self, name: str, raw: str, kind: str):
        super().__init__(
            f"Invalid value '{raw}' for flag '-{name}', expected {kind}", name
        )
        self.raw = raw
        self.kind = kind


class HelpRequested(FlagError):
    def __init__(self):
        super().__init__("Help requested")
