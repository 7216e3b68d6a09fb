import pytest

from spacesim.cargo import Cargo


def test_first_member_is_zero():
    assert Cargo.GRAIN == 0
    assert Cargo(0) is Cargo.GRAIN


def test_values_are_contiguous_from_zero():
    assert [Cargo(i) for i in range(len(Cargo))] == list(Cargo)


def test_declaration_order_is_kept():
    assert [Cargo(i).name for i in range(3)] == ["GRAIN", "GENERIC_FOODS", "LUXURY_FOODS"]
    assert Cargo(len(Cargo) - 1) is Cargo.DATA_RECORDER


def test_lookup_by_name():
    assert Cargo(Cargo["HOME_ENTERTAINMENT"].value) is Cargo.HOME_ENTERTAINMENT
    assert Cargo(Cargo["PLAYTHING"].value).name == "PLAYTHING"


def test_ordering_follows_declaration():
    assert Cargo(Cargo.GEMS + 1) is Cargo.IRON
    assert Cargo(Cargo.FOOD_DISPENSERS + 1) is Cargo.HOLOGRAPHICS
    assert Cargo(Cargo.IRON.value) > Cargo.GEMS


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        Cargo(len(Cargo))