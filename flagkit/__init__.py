from . import const, slots, vt100  # noqa: F401
from .errors import (  # noqa: F401
    DuplicateFlag,
    FlagError,
    HelpRequested,
    InvalidFlagName,
    InvalidValue,
    MissingValue,
    ReservedFlag,
    UnknownFlag,
    UnsupportedType,
)
from .flagset import Flag, FlagSet, parseArg, parseArgs  # noqa: F401
from .slots import Attr, Destination, FlagKind, Slot  # noqa: F401
