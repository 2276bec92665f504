"""Electron identification and selection."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .kinematics import LorentzVector, matches_any
from .physobjects import Electron, EleType

ELECTRON_MASS = 0.000511
VETO_CONE = 0.3
ECAL_GAP_LOW = 1.4442
ECAL_GAP_HIGH = 1.566

# MVA cuts indexed by (pt bin, eta bin)
_MVA_CUTS = {
    (0, 0): 0.470,
    (0, 1): 0.004,
    (0, 2): 0.295,
    (1, 0): -0.340,
    (1, 1): -0.650,
    (1, 2): 0.600,
}


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def effective_area(eta: float) -> float:
    """Effective area for the pile-up correction of the isolation."""
    eta = abs(eta)
    if eta < 1.0:
        return 0.19
    if eta < 1.479:
        return 0.25
    if eta < 2.0:
        return 0.12
    if eta < 2.2:
        return 0.21
    if eta < 2.3:
        return 0.27
    if eta < 2.4:
        return 0.44
    return 0.52


def _in_gap(electron: Electron) -> bool:
    sc_eta = abs(electron.sc_eta)
    return ECAL_GAP_LOW < sc_eta < ECAL_GAP_HIGH


def pass_veto(electron: Electron, rho: float) -> bool:
    """Veto-level electron identification."""
    if _in_gap(electron):
        return False
    if not electron.type_bits & EleType.ECAL_DRIVEN:
        return False
    if abs(electron.d0) > 0.02 or abs(electron.dz) > 0.1:
        return False
    if electron.n_missing_hits > 1 or electron.is_conv:
        return False
    area = effective_area(electron.sc_eta)
    iso = electron.ch_had_iso03 + max(
        electron.neu_had_iso03 + electron.gamma_iso03 - rho * area, 0.0
    )
    if iso > 0.15 * electron.pt:
        return False
    if abs(electron.sc_eta) <= ECAL_GAP_LOW:
        sieie_max, dphi_min, deta_min, hovere_max = 0.01, 0.06, 0.004, 0.12
    else:
        sieie_max, dphi_min, deta_min, hovere_max = 0.03, 0.03, 0.007, 0.10
    if electron.sieie > sieie_max:
        return False
    if abs(electron.d_phi_in) < dphi_min:
        return False
    if abs(electron.d_eta_in) < deta_min:
        return False
    if electron.hovere > hovere_max:
        return False
    return not abs(1.0 - electron.eoverp) > 0.05 * electron.ecal_energy


def pass_loose(electron: Electron, rho: float) -> bool:
    """MVA-based loose identification; the cut depends on pt and eta bins."""
    if electron.n_missing_hits > 1:
        return False
    if abs(electron.sip3d) >= 100 or abs(electron.d0) >= 0.5 or abs(electron.dz) >= 1.0:
        return False
    pt_bin = 1 if electron.pt_hzz4l > 10 else 0
    sc_eta = abs(electron.sc_eta)
    if sc_eta < 0.8:
        eta_bin = 0
    elif sc_eta < 1.479:
        eta_bin = 1
    else:
        eta_bin = 2
    return electron.mva > _MVA_CUTS[pt_bin, eta_bin]


def pass_vbtf95(electron: Electron) -> bool:
    """Cut-based identification at the 95% working point."""
    if _in_gap(electron):
        return False
    if not electron.type_bits & EleType.ECAL_DRIVEN:
        return False
    if abs(electron.d0) > 0.02 or abs(electron.dz) > 0.1:
        return False
    if electron.n_missing_hits > 1 or electron.is_conv:
        return False
    rel_iso = _ratio(
        electron.ch_had_iso03 + electron.neu_had_iso03 + electron.gamma_iso03, electron.pt
    )
    sc_eta = abs(electron.sc_eta)
    barrel = sc_eta < ECAL_GAP_LOW
    endcap = sc_eta > ECAL_GAP_LOW
    cuts = [
        (rel_iso, 0.13, 0.09),
        (electron.hovere, 0.15, 0.07),
        (electron.sieie, 0.01, 0.03),
        (abs(electron.d_phi_in), 0.8, 0.7),
        (abs(electron.d_eta_in), 0.007, 0.009),
    ]
    for value, barrel_max, endcap_max in cuts:
        if barrel and value > barrel_max:
            return False
        if endcap and value > endcap_max:
            return False
    return True


def veto_electron(electrons: Iterable[Electron], rho: float) -> bool:
    """Whether any electron passes the veto identification."""
    return any(pass_veto(electron, rho) for electron in electrons)


def _sc_vector(electron: Electron) -> LorentzVector:
    return LorentzVector.from_pt_eta_phi_m(
        electron.sc_et, electron.sc_eta, electron.sc_phi, ELECTRON_MASS
    )


def conversions(electrons: Iterable[Electron]) -> list[LorentzVector]:
    """Supercluster vectors of electrons flagged as conversions with missing hits."""
    return [
        _sc_vector(electron)
        for electron in electrons
        if electron.n_missing_hits != 0 and electron.is_conv
    ]


def non_conversions(electrons: Iterable[Electron]) -> list[LorentzVector]:
    """Supercluster vectors of electrons with no missing hits and no conversion flag."""
    return [
        _sc_vector(electron)
        for electron in electrons
        if electron.n_missing_hits == 0 and not electron.is_conv
    ]


class ElectronSelector:
    """Selects veto-identified electrons in an event, ordered by decreasing pt."""

    def __init__(self) -> None:
        self.selected: list[Electron] = []
        self.n_electrons = 0

    def select_electrons(
        self, electrons: Iterable[Electron], rho: float, vetoes: Sequence[LorentzVector]
    ) -> bool:
        self.selected = []
        for electron in electrons:
            if electron.pt < 10:
                continue
            if not pass_veto(electron, rho):
                continue
            if matches_any(electron.eta, electron.phi, vetoes, VETO_CONE):
                continue
            for position, existing in enumerate(self.selected):
                if existing.pt <= electron.pt:
                    self.selected.insert(position, electron)
                    break
            else:
                self.selected.append(electron)
        self.n_electrons = len(self.selected)
        return bool(self.selected)

    def fill_vetoes(self, vetoes: Sequence[LorentzVector]) -> list[LorentzVector]:
        """Return the vetoes extended by the selected electrons."""
        return list(vetoes) + [
            LorentzVector.from_pt_eta_phi_m(e.pt, e.eta, e.phi, ELECTRON_MASS)
            for e in self.selected
        ]