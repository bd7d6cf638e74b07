from dataclasses import FrozenInstanceError

import pytest

from bikeshop.domain.part import Part


def test_needs_spare_defaults_to_true():
    part = Part(name="chain", description="11-speed")
    assert part.needs_spare is True


def test_part_is_immutable():
    part = Part(name="chain", description="11-speed")
    with pytest.raises(FrozenInstanceError):
        part.needs_spare = False


def test_parts_with_same_fields_are_equal():
    assert Part("chain", "11-speed") == Part("chain", "11-speed", True)
    assert Part("chain", "11-speed") != Part("chain", "11-speed", False)


def test_str_shows_name_and_description():
    assert str(Part("tire_size", "23")) == "tire_size: 23"
