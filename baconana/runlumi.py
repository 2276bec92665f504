"""Certified run/luminosity-section bookkeeping."""

from __future__ import annotations

import json
from os import PathLike
from typing import Iterable, Iterator, Mapping, Sequence


class RunLumiSet:
    """An ordered set of (run, lumi) pairs."""

    def __init__(self, pairs: Iterable[tuple[int, int]] = ()) -> None:
        self._pairs: set[tuple[int, int]] = {(int(run), int(lumi)) for run, lumi in pairs}

    def merge(self, others: Iterable[object]) -> int:
        """Add the pairs of every RunLumiSet among ``others``; return how many were merged."""
        merged = 0
        for other in others:
            if isinstance(other, RunLumiSet):
                self._pairs |= other._pairs
                merged += 1
        return merged

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs


class RunLumiRangeMap:
    """Map of run number to accepted inclusive luminosity-section ranges."""

    def __init__(self) -> None:
        self.ranges: dict[int, list[tuple[int, int]]] = {}

    def has_run_lumi(self, run: int, lumi: int) -> bool:
        return any(first <= lumi <= last for first, last in self.ranges.get(run, ()))

    def add_json(self, data: Mapping[str, Sequence[Sequence[int]]]) -> None:
        """Add ranges from a mapping of run number strings to ``[first, last]`` pairs."""
        for key, pairs in data.items():
            run = int(key)
            run_ranges = self.ranges.setdefault(run, [])
            for pair in pairs:
                if len(pair) == 2:
                    run_ranges.append((int(pair[0]), int(pair[1])))

    def add_json_file(self, path: str | PathLike[str]) -> None:
        with open(path, encoding="utf-8") as handle:
            self.add_json(json.load(handle))

    def fill_run_lumi_set(self, run_lumi_set: RunLumiSet) -> None:
        """Replace the map with ranges of consecutive lumis from ``run_lumi_set``."""
        self.ranges = {}
        pairs = list(run_lumi_set)
        first_lumi = 0
        for position, (run, lumi) in enumerate(pairs):
            if first_lumi == 0:
                first_lumi = lumi
            run_ranges = self.ranges.setdefault(run, [])
            following = pairs[position + 1] if position + 1 < len(pairs) else None
            if following is None or following[0] != run or following[1] != lumi + 1:
                run_ranges.append((first_lumi, lumi))
                first_lumi = 0