import pytest

from baconana.defs import (
    N_TRIG_BIT,
    N_TRIG_OBJECT_BIT,
    BitSet,
    FiducialFlag,
    MetFilterFailBit,
    trigger_bits,
    trigger_objects,
)


def test_trigger_bits_width():
    assert len(trigger_bits()) == 128
    assert trigger_bits().size == N_TRIG_BIT


def test_trigger_objects_width():
    assert len(trigger_objects()) == 256
    assert trigger_objects().size == N_TRIG_OBJECT_BIT


def test_value_round_trip():
    bits = trigger_bits(5)
    assert int(bits) == 5
    assert bits[0] is True
    assert bits[1] is False
    assert bits[2] is True


def test_set_and_clear():
    bits = trigger_objects()
    bits.set(200)
    assert bits[200]
    assert list(bits.set_bits()) == [200]
    bits.set(200, False)
    assert not bits[200]
    assert int(bits) == 0


def test_value_truncated_to_width():
    bits = BitSet(4, (1 << 4) | 3)
    assert int(bits) == 3


def test_count_matches_set_bits():
    bits = trigger_bits()
    for index in (0, 7, 64, 127):
        bits.set(index)
    assert bits.count() == len(list(bits.set_bits()))
    assert list(bits.set_bits()) == [0, 7, 64, 127]


@pytest.mark.parametrize("index", [-1, 128, 500])
def test_out_of_range_get(index):
    with pytest.raises(IndexError):
        trigger_bits()[index]


def test_out_of_range_set():
    with pytest.raises(IndexError):
        trigger_bits().set(128)


def test_invalid_construction():
    with pytest.raises(ValueError):
        BitSet(0)
    with pytest.raises(ValueError):
        BitSet(8, -1)


def test_copy_is_independent():
    original = trigger_bits(2)
    duplicate = original.copy()
    duplicate.set(0)
    assert original == trigger_bits(2)
    assert duplicate != original


def test_equality_depends_on_width():
    assert BitSet(8, 1) != BitSet(16, 1)
    assert BitSet(8, 1) == BitSet(8, 1)


def test_flag_values():
    fiducial = trigger_bits(FiducialFlag.IS_EB | FiducialFlag.IS_EE)
    assert list(fiducial.set_bits()) == [0, 1]
    assert list(trigger_bits(FiducialFlag.IS_EE_RING_GAP).set_bits()) == [9]
    assert list(trigger_bits(MetFilterFailBit.TRK_POG_LOG_ERROR_TOO_MANY_CLUSTERS).set_bits()) == [9]
    assert list(trigger_bits(MetFilterFailBit.CSC_TIGHT_HALO_FILTER).set_bits()) == [1]