import os
import sys
import typing as tp
import dataclasses as dt
import logging

from typing import Any, Iterator, Optional

from . import const, vt100
from .errors import (
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
from .slots import Destination, FlagKind

_logger = logging.getLogger(__name__)

# --- Tokens ----------------------------------------------------------------- #


@dt.dataclass
class FlagToken:
    name: str
    value: Optional[str] = None


@dt.dataclass
class OperandToken:
    value: str


Token = FlagToken | OperandToken


def parseArg(arg: str) -> Token:
    """
    Classifies a single command-line argument.

    Any number of leading dashes introduce a flag, `-num` and `--num` name
    the same flag. The value of `-name=value` is split at the first `=`.
    """
    if not arg.startswith(const.PREFIX):
        return OperandToken(arg)

    body = arg.lstrip(const.PREFIX)
    if const.SEPARATOR in body:
        name, value = body.split(const.SEPARATOR, 1)
        return FlagToken(name, value)
    return FlagToken(body)


# --- Flags ------------------------------------------------------------------ #


@dt.dataclass
class Flag:
    """
    A registered flag bound to its destination.
    """

    name: str
    description: str
    kind: FlagKind
    destination: Destination

    def isToggle(self) -> bool:
        return self.kind.isToggle()

    def putValue(self, raw: Optional[str]):
        """
        Converts the raw text and writes it to the destination, a toggle
        without text is set to `True`.
        """
        if raw is None:
            if not self.isToggle():
                raise MissingValue(self.name)
            value: Any = True
        else:
            try:
                value = self.kind.convert(raw)
            except ValueError:
                raise InvalidValue(self.name, raw, self.kind.value) from None

        _logger.debug(f"Setting '-{self.name}' to {value!r}")
        self.destination.set(value)

    def usage(self) -> str:
        if self.isToggle():
            return f"[-{self.name}]"
        return f"[-{self.name} <{self.kind.value}>]"


class FlagSet:
    """
    A flat namespace of flags for a single invocation.
    """

    prog: Optional[str]
    _flags: dict[str, Flag]

    def __init__(self, prog: Optional[str] = None):
        self.prog = prog
        self._flags = {}

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: str) -> bool:
        return name in self._flags

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags.values())

    def add(self, name: str, description: str, destination: Destination) -> Flag:
        """
        Registers a flag.

        Args:
            name: The name of the flag, without prefix (e.g., "num" for "-num").
            description: A description of the flag.
            destination: The slot the parsed value is written into, a bool
                destination makes the flag a toggle.

        Raises:
            InvalidFlagName: if the name is empty, starts with `-` or contains `=`.
            ReservedFlag: if the name is one of the help flags.
            DuplicateFlag: if a flag with the same name is already defined.
            UnsupportedType: if the destination isn't bool, int, float or str.
        """
        if (
            len(name) == 0
            or name.startswith(const.PREFIX)
            or const.SEPARATOR in name
        ):
            raise InvalidFlagName(name)

        if name in const.RESERVED:
            raise ReservedFlag(name)

        if name in self._flags:
            raise DuplicateFlag(name)

        kind = (
            destination.kind if isinstance(destination, Destination) else None
        )
        if kind is None:
            typ = (
                destination.typ
                if isinstance(destination, Destination)
                else type(destination)
            )
            raise UnsupportedType(name, typ)

        _logger.info(f"Registering flag '-{name}' ({kind.value})")
        flag = Flag(name, description, kind, destination)
        self._flags[name] = flag
        return flag

    def lookup(self, name: str) -> Optional[Flag]:
        return self._flags.get(name)

    def parse(self, args: tp.Sequence[str]) -> list[str]:
        """Parses `args` into the registered destinations, returns the remaining arguments."""
        return parseArgs(args, self)

    def progName(self) -> str:
        if self.prog:
            return self.prog
        if len(sys.argv) > 0 and sys.argv[0]:
            return os.path.basename(sys.argv[0])
        return const.ARGV0

    def usage(self) -> str:
        """Returns a usage string listing every flag in name order."""
        res = " ".join(f.usage() for f in sorted(self, key=lambda f: f.name))
        return f"{res} [args...]" if res else "[args...]"

    def help(self, file=None):
        """Prints the flags and their descriptions."""
        vt100.title("Usage", file=file)
        print(vt100.indent(f"{self.progName()} {self.usage()}"), file=file)
        print(file=file)

        if len(self) == 0:
            return

        vt100.subtitle("Options", file=file)
        for flag in sorted(self, key=lambda f: f.name):
            line = f"{vt100.GREEN}-{flag.name}{vt100.RESET}"
            if not flag.isToggle():
                line += f" <{flag.kind.value}>"
            if flag.description:
                line += f" {flag.description}"
            print(vt100.indent(line), file=file)
        print(file=file)

    def exec(self, argv: Optional[tp.Sequence[str]] = None) -> list[str]:
        """
        Parses the process arguments, printing help or the error and exiting
        when parsing doesn't succeed.
        """
        if argv is None:
            argv = sys.argv[1:]

        try:
            return self.parse(argv)

        except HelpRequested:
            self.help()
            raise SystemExit(0)

        except FlagError as e:
            _logger.info(f"Parsing failed: {e}")
            vt100.error(str(e))
            self.help(file=sys.stderr)
            raise SystemExit(1)


# --- Parsing ---------------------------------------------------------------- #


def parseArgs(args: tp.Sequence[str], flags: FlagSet) -> list[str]:
    """
    Parses a list of command-line arguments into the destinations of `flags`.

    Positional arguments are returned in their original order, flags and the
    values they consumed are dropped. Parsing stops at the first error,
    destinations written before it keep their new values.

    Raises:
        HelpRequested: on `-h` or `-help`.
        UnknownFlag: if a flag isn't registered.
        MissingValue: if a value flag is the last argument.
        InvalidValue: if a value can't be converted.
    """
    res: list[str] = []
    stack = list(args)
    while len(stack) > 0:
        tok = parseArg(stack.pop(0))

        if isinstance(tok, OperandToken):
            res.append(tok.value)

        else:
            if tok.name in const.RESERVED:
                raise HelpRequested()

            flag = flags.lookup(tok.name)
            if flag is None:
                raise UnknownFlag(tok.name)

            _logger.debug(f"Matched flag '-{flag.name}'")
            if flag.isToggle() or tok.value is not None:
                flag.putValue(tok.value)
                continue

            if len(stack) == 0:
                raise MissingValue(flag.name)

            flag.putValue(stack.pop(0))

    return res
