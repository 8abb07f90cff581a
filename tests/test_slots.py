import math
from typing import Optional

import pytest

from flagkit import slots
from flagkit.slots import Attr, FlagKind, Slot

# --- Kinds ------------------------------------------------------------------ #


def test_kind_from_type():
    assert FlagKind.fromType(bool) is FlagKind.BOOL
    assert FlagKind.fromType(int) is FlagKind.INT
    assert FlagKind.fromType(float) is FlagKind.FLOAT
    assert FlagKind.fromType(str) is FlagKind.STR
    assert FlagKind.fromType(list) is None
    assert FlagKind.fromType(type(None)) is None


def test_kind_from_optional_type():
    assert FlagKind.fromType(Optional[int]) is FlagKind.INT
    assert FlagKind.fromType(str | None) is FlagKind.STR
    assert FlagKind.fromType(int | str) is None


def test_only_bool_is_toggle():
    assert FlagKind.BOOL.isToggle()
    assert not FlagKind.INT.isToggle()
    assert not FlagKind.FLOAT.isToggle()
    assert not FlagKind.STR.isToggle()


# --- Conversions ------------------------------------------------------------ #


def test_parse_int():
    assert slots.parseInt("3") == 3
    assert slots.parseInt("+2") == 2
    assert slots.parseInt("-2") == -2
    assert slots.parseInt("007") == 7


@pytest.mark.parametrize("raw", ["", "abc", "1.5", " 1", "1_000", "0x10", "+", "٣"])
def test_parse_int_rejects(raw):
    with pytest.raises(ValueError):
        slots.parseInt(raw)


def test_parse_float():
    assert slots.parseFloat("1.5") == 1.5
    assert slots.parseFloat("-2") == -2.0
    assert slots.parseFloat("1e3") == 1000.0
    assert slots.parseFloat(".5") == 0.5
    assert math.isinf(slots.parseFloat("inf"))
    assert math.isnan(slots.parseFloat("NaN"))


@pytest.mark.parametrize("raw", ["", "abc", "1_0.5", " 1.5", "1.5 ", "1.5.2"])
def test_parse_float_rejects(raw):
    with pytest.raises(ValueError):
        slots.parseFloat(raw)


def test_parse_bool():
    for raw in ("true", "True", "y", "yes", "Y", "Yes", "1"):
        assert slots.parseBool(raw) is True
    for raw in ("false", "False", "n", "no", "N", "No", "0"):
        assert slots.parseBool(raw) is False

    with pytest.raises(ValueError):
        slots.parseBool("maybe")


def test_str_passes_through():
    assert FlagKind.STR.convert(" spaced -out= ") == " spaced -out= "


# --- Destinations ----------------------------------------------------------- #


def test_slot_defaults():
    assert Slot(bool).value is False
    assert Slot(int).value is None
    assert Slot(str).value is None
    assert Slot(int, 5).value == 5


def test_slot_set():
    slot = Slot(int)
    slot.set(3)
    assert slot.get() == 3
    assert slot.value == 3
    assert slot.kind is FlagKind.INT


class Options:
    verbose: bool = False
    jobs: int = 1
    name: Optional[str] = None


def test_attr_kind_from_annotation():
    opts = Options()
    assert Attr(opts, "verbose").kind is FlagKind.BOOL
    assert Attr(opts, "jobs").kind is FlagKind.INT
    assert Attr(opts, "name").kind is FlagKind.STR


def test_attr_kind_from_value():
    class Plain:
        def __init__(self):
            self.ratio = 0.5

    assert Attr(Plain(), "ratio").kind is FlagKind.FLOAT


def test_attr_set():
    opts = Options()
    attr = Attr(opts, "jobs")
    attr.set(4)
    assert opts.jobs == 4
    assert attr.get() == 4
    assert Options.jobs == 1
