"""Muon identification and selection."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .kinematics import LorentzVector, matches_any
from .physobjects import Muon, MuSelectorBit, MuType

MUON_MASS = 0.105
VETO_CONE = 0.3


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def _delta_beta_iso(muon: Muon) -> float:
    neutral = max(muon.gamma_iso04 + muon.neu_had_iso04 - 0.5 * muon.pu_iso04, 0.0)
    return muon.ch_had_iso04 + neutral


def _vector(muon: Muon) -> LorentzVector:
    return LorentzVector.from_pt_eta_phi_m(muon.pt, muon.eta, muon.phi, MUON_MASS)


def pass_loose(muon: Muon) -> bool:
    """Loose muon identification with delta-beta isolation."""
    if not muon.type_bits & (MuType.GLOBAL | MuType.TRACKER):
        return False
    if not muon.selector_bits & MuSelectorBit.ALL_ARBITRATED:
        return False
    if not muon.type_bits & MuType.PF_MUON:
        return False
    if abs(muon.dz) > 1.0:
        return False
    return not _ratio(_delta_beta_iso(muon), muon.pt) > 0.4


def pass_ww(muon: Muon) -> bool:
    """Loose analysis muon identification."""
    if not abs(muon.eta) < 2.4:
        return False
    if not muon.pt > 10:
        return False
    if not muon.type_bits & MuType.PF_MUON:
        return False
    if not muon.n_tk_layers > 0:
        return False
    if not muon.n_pix_hits > 0:
        return False
    if not muon.pt_err / muon.pt < 0.1:
        return False
    if not muon.trk_kink < 20.0:
        return False
    if abs(muon.dz) > 1.0:
        return False
    return not _delta_beta_iso(muon) / muon.pt > 0.4


def pass_tight(muon: Muon) -> bool:
    """Tight muon identification with isolation."""
    if not muon.type_bits & MuType.GLOBAL:
        return False
    if abs(muon.dz) > 0.2:
        return False
    if abs(muon.d0) > 0.045:
        return False
    if muon.mu_nchi2 > 10:
        return False
    if muon.n_valid_hits < 1:
        return False
    if muon.n_match_stn < 2:
        return False
    if muon.n_pix_hits < 1:
        return False
    if muon.n_tk_layers < 6:
        return False
    if not muon.type_bits & MuType.PF_MUON:
        return False
    return not _ratio(_delta_beta_iso(muon), muon.pt) > 0.15


def veto_muon(muons: Iterable[Muon]) -> bool:
    """Whether any muon passes the loose identification."""
    return any(pass_loose(muon) for muon in muons)


def _insert_by_pt(ordered: list, item) -> None:
    """Insert before the first entry whose pt does not exceed the new one."""
    for position, existing in enumerate(ordered):
        if existing.pt <= item.pt:
            ordered.insert(position, item)
            return
    ordered.append(item)


class MuonSelector:
    """Selects muons in an event and finds a dimuon pair within a mass window."""

    def __init__(self, mass_min: float = 115.0, mass_max: float = 130.0) -> None:
        self.mass_min = mass_min
        self.mass_max = mass_max
        self.selected: list[Muon] = []
        self.n_muons = 0
        self.dimuon = LorentzVector.from_pt_eta_phi_m(1e-9, 0.0, 0.0, 0.0)

    def select_muons(self, muons: Iterable[Muon], vetoes: Sequence[LorentzVector]) -> bool:
        """Keep identified muons away from the vetoes, ordered by decreasing pt."""
        self.selected = []
        count = 0
        for muon in muons:
            if muon.pt > 10 and abs(muon.eta) < 2.4:
                count += 1
            if not pass_ww(muon):
                continue
            if matches_any(muon.eta, muon.phi, vetoes, VETO_CONE):
                continue
            _insert_by_pt(self.selected, muon)
        self.n_muons = count
        return bool(self.selected)

    def select_dimuon(
        self, muons: Sequence[Muon], vetoes: Sequence[LorentzVector]
    ) -> list[LorentzVector]:
        """Return the vetoes extended by the first muon pair inside the mass window."""
        self.dimuon = LorentzVector.from_pt_eta_phi_m(1e-9, 0.0, 0.0, 0.0)
        result = list(vetoes)
        for i, first in enumerate(muons):
            if not pass_ww(first):
                continue
            for j, second in enumerate(muons):
                if i == j or not pass_ww(second):
                    continue
                vec1, vec2 = _vector(first), _vector(second)
                mass = (vec1 + vec2).m
                if self.mass_min > mass or self.mass_max < mass:
                    continue
                result.extend((vec1, vec2))
                break
            if len(result) > 1:
                break
        if len(result) > 1:
            pair = result[0] + result[1]
            self.dimuon = LorentzVector.from_pt_eta_phi_m(pair.pt, pair.eta, pair.phi, pair.m)
        return result

    def fill_vetoes(self, vetoes: Sequence[LorentzVector]) -> list[LorentzVector]:
        """Return the vetoes extended by the selected muons."""
        return list(vetoes) + [_vector(muon) for muon in self.selected]