"""Shared flag definitions and fixed-width bit sets for trigger information."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterator

N_TRIG_BIT = 128
N_TRIG_OBJECT_BIT = 256


class FiducialFlag(IntFlag):
    """ECAL fiducial region bits for electrons and photons."""

    IS_EB = 1
    IS_EE = 2
    IS_GAP = 4
    IS_EBEE_GAP = 8
    IS_EB_GAP = 16
    IS_EB_ETA_GAP = 32
    IS_EB_PHI_GAP = 64
    IS_EE_GAP = 128
    IS_EE_DEE_GAP = 256
    IS_EE_RING_GAP = 512


class MetFilterFailBit(IntFlag):
    """Bits set in the event's MET filter fail word."""

    HBHE_NOISE_FILTER = 1
    CSC_TIGHT_HALO_FILTER = 2
    HCAL_LASER_EVENT_FILTER = 4
    ECAL_DEAD_CELL_TRIGGER_PRIMITIVE_FILTER = 8
    TRACKING_FAILURE_FILTER = 16
    EE_BAD_SC_FILTER = 32
    ECAL_LASER_CORR_FILTER = 64
    TRK_POG_MANY_STRIP_CLUS53X = 128
    TRK_POG_TOO_MANY_STRIP_CLUS53X = 256
    TRK_POG_LOG_ERROR_TOO_MANY_CLUSTERS = 512


class BitSet:
    """A mutable bit set of fixed width."""

    __slots__ = ("_size", "_value")

    def __init__(self, size: int, value: int = 0) -> None:
        if size <= 0:
            raise ValueError(f"bit set size must be positive, got {size}")
        if value < 0:
            raise ValueError(f"bit set value must be non-negative, got {value}")
        self._size = size
        self._value = value & ((1 << size) - 1)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range for {self._size} bits")

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return bool((self._value >> index) & 1)

    def set(self, index: int, value: bool = True) -> None:
        """Set or clear the bit at ``index``."""
        self._check(index)
        if value:
            self._value |= 1 << index
        else:
            self._value &= ~(1 << index)

    def count(self) -> int:
        """Number of bits that are set."""
        return bin(self._value).count("1")

    def set_bits(self) -> Iterator[int]:
        """Indices of the set bits, in increasing order."""
        value, index = self._value, 0
        while value:
            if value & 1:
                yield index
            value >>= 1
            index += 1

    def any(self) -> bool:
        return self._value != 0

    def copy(self) -> "BitSet":
        return BitSet(self._size, self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._size == other._size and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitSet(size={self._size}, value={self._value:#x})"


def trigger_bits(value: int = 0) -> BitSet:
    """A bit set sized for fired trigger bits."""
    return BitSet(N_TRIG_BIT, value)


def trigger_objects(value: int = 0) -> BitSet:
    """A bit set sized for trigger object matches."""
    return BitSet(N_TRIG_OBJECT_BIT, value)