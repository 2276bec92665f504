"""Combined lepton collection built from selected muons and electrons."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .kinematics import LorentzVector
from .physobjects import Electron, Muon, MuType

MUON_MASS = 0.105
ELECTRON_MASS = 0.000511
N_LEADING = 3


def _zero() -> LorentzVector:
    return LorentzVector.from_pt_eta_phi_m(0.0, 0.0, 0.0, 0.0)


@dataclass
class LeptonSummary:
    """The three leading leptons, their signed ids and tight-muon flags."""

    n_lep: int = 0
    momenta: list[LorentzVector] = field(default_factory=lambda: [_zero() for _ in range(N_LEADING)])
    ids: list[int] = field(default_factory=lambda: [0] * N_LEADING)
    is_tight_muon: list[bool] = field(default_factory=lambda: [False] * N_LEADING)


def pass_tight(muon: Muon) -> bool:
    """Tight muon identification without isolation."""
    if not muon.type_bits & MuType.GLOBAL:
        return False
    if not muon.type_bits & MuType.TRACKER:
        return False
    if muon.mu_nchi2 > 10:
        return False
    if muon.n_valid_hits < 1:
        return False
    if muon.n_match_stn < 2:
        return False
    if muon.n_pix_hits < 1:
        return False
    return bool(muon.type_bits & MuType.PF_MUON)


def fill_leptons(muons: Sequence[Muon], electrons: Sequence[Electron]) -> LeptonSummary:
    """Merge muons and electrons, inserting each electron before the first softer lepton."""
    entries: list[tuple[LorentzVector, int]] = []
    for muon in muons:
        vec = LorentzVector.from_pt_eta_phi_m(muon.pt, muon.eta, muon.phi, MUON_MASS)
        lepton_id = 13 * muon.q
        if pass_tight(muon):
            lepton_id += 20 * muon.q
        entries.append((vec, lepton_id))
    for electron in electrons:
        vec = LorentzVector.from_pt_eta_phi_m(
            electron.pt, electron.eta, electron.phi, ELECTRON_MASS
        )
        entry = (vec, 11 * electron.q)
        for position, (existing, _) in enumerate(entries):
            if existing.pt <= vec.pt:
                entries.insert(position, entry)
                break
        else:
            entries.append(entry)

    summary = LeptonSummary(n_lep=len(muons) + len(electrons))
    # the tight flag of every slot follows the leading lepton
    leading_tight = bool(entries) and entries[0][1] > 20
    for slot, (vec, lepton_id) in enumerate(entries[:N_LEADING]):
        summary.momenta[slot] = LorentzVector.from_pt_eta_phi_m(vec.pt, vec.eta, vec.phi, vec.m)
        summary.ids[slot] = int(math.fmod(lepton_id, 20))
        summary.is_tight_muon[slot] = leading_tight
    return summary