import re
import types
import typing as tp
import logging

from enum import Enum
from typing import Any, Optional

from . import const

_logger = logging.getLogger(__name__)

T = tp.TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")

# --- Kinds ------------------------------------------------------------------ #


class FlagKind(Enum):
    """
    The closed set of destination types a flag can be bound to.
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"

    @staticmethod
    def fromType(typ: Any) -> Optional["FlagKind"]:
        """Maps a python type to its kind, or `None` if it isn't supported."""
        typ = _unwrapOptional(typ)
        # bool is checked by identity because it's a subclass of int
        if typ is bool:
            return FlagKind.BOOL
        elif typ is int:
            return FlagKind.INT
        elif typ is float:
            return FlagKind.FLOAT
        elif typ is str:
            return FlagKind.STR
        return None

    def isToggle(self) -> bool:
        """Toggles take no value, every other kind consumes one."""
        return self is FlagKind.BOOL

    def convert(self, raw: str) -> Any:
        """
        Converts the raw text of a flag to this kind.

        Raises:
            ValueError: if the text isn't a valid literal for this kind.
        """
        if self is FlagKind.BOOL:
            return parseBool(raw)
        elif self is FlagKind.INT:
            return parseInt(raw)
        elif self is FlagKind.FLOAT:
            return parseFloat(raw)
        return raw


def _unwrapOptional(typ: Any) -> Any:
    """Turns `Optional[X]` and `X | None` into `X`."""
    origin = tp.get_origin(typ)
    if origin is tp.Union or origin is types.UnionType:
        args = [a for a in tp.get_args(typ) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return typ


# --- Conversions ------------------------------------------------------------ #


def parseBool(raw: str) -> bool:
    if raw in const.TRUE_VALUES:
        return True
    elif raw in const.FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean: '{raw}'")


def parseInt(raw: str) -> int:
    # int() alone would also accept whitespace, underscores and non-ascii digits
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"Not a base-10 integer: '{raw}'")
    return int(raw)


def parseFloat(raw: str) -> float:
    if not raw.isascii() or "_" in raw or raw != raw.strip():
        raise ValueError(f"Not a float: '{raw}'")
    return float(raw)


# --- Destinations ----------------------------------------------------------- #


class Destination:
    """
    Caller-owned storage a flag writes its value into.
    """

    @property
    def typ(self) -> Any:
        raise NotImplementedError()

    @property
    def kind(self) -> Optional[FlagKind]:
        return FlagKind.fromType(self.typ)

    def get(self) -> Any:
        raise NotImplementedError()

    def set(self, value: Any):
        raise NotImplementedError()


class Slot(Destination, tp.Generic[T]):
    """
    A single-field mutable cell.

    Bool slots start at `False`, every other slot starts at `None` unless an
    initial value is given, so a value that is not `None` after parsing means
    the flag was seen on the command line.
    """

    _typ: type[T]
    value: Optional[T]

    def __init__(self, typ: type[T], value: Optional[T] = None):
        self._typ = typ
        if value is None and typ is bool:
            value = tp.cast(T, False)
        self.value = value

    @property
    def typ(self) -> type[T]:
        return self._typ

    def get(self) -> Optional[T]:
        return self.value

    def set(self, value: T):
        self.value = value

    def __repr__(self) -> str:
        return f"Slot({self._typ.__name__}, {self.value!r})"


class Attr(Destination):
    """
    Binds an attribute of an existing object, the kind is taken from the
    attribute's annotation on the object's class, or from its current value.
    """

    obj: Any
    name: str

    def __init__(self, obj: Any, name: str):
        self.obj = obj
        self.name = name

    @property
    def typ(self) -> Any:
        try:
            hints = tp.get_type_hints(type(self.obj))
        except (NameError, TypeError):
            _logger.debug(f"Could not resolve annotations of {type(self.obj)}")
            hints = {}

        if self.name in hints:
            return hints[self.name]

        return type(getattr(self.obj, self.name, None))

    def get(self) -> Any:
        return getattr(self.obj, self.name, None)

    def set(self, value: Any):
        setattr(self.obj, self.name, value)

    def __repr__(self) -> str:
        return f"Attr({type(self.obj).__name__}.{self.name})"
