"""Photon identification and selection."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .kinematics import LorentzVector
from .physobjects import Photon

VETO_ETA_WINDOW = 0.01

# CiC4 sublead cuts; each row is indexed by category 1..4 (barrel/endcap, high/low r9)
_CIC_ISO_SUM = (6.0, 4.7, 5.6, 3.6)
_CIC_ISO_WORST = (10.0, 6.5, 5.6, 4.4)
_CIC_CH_ISO = (3.8, 2.5, 3.1, 2.2)
_CIC_SIEIE = (0.0108, 0.0102, 0.028, 0.028)
_CIC_HOVERE = (0.124, 0.092, 0.142, 0.063)
_CIC_R9 = (0.94, 0.28, 0.94, 0.24)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def _barrel(photon: Photon) -> bool | None:
    """True in the barrel, False in the endcap, None in the gap or beyond tracking."""
    sc_eta = abs(photon.sc_eta)
    if 1.4443 < sc_eta < 1.566:
        return None
    if sc_eta > 2.5:
        return None
    return not 1.566 < sc_eta < 2.5


def pass_loose(photon: Photon) -> bool:
    """Loose photon identification with a relative isolation cut."""
    if photon.pt < 15:
        return False
    if photon.hovere > 0.05:
        return False
    if photon.sieie > 0.01:
        return False
    total = photon.ch_had_iso03 + photon.gamma_iso03 + photon.neu_had_iso03
    return not total / photon.pt > 0.4


def pass_cic_photon_pre(photon: Photon, rho: float) -> bool:
    """Cut-in-category preselection."""
    barrel = _barrel(photon)
    if barrel is None:
        return False
    if photon.r9 < 0.9:
        if photon.hovere > 0.075:
            return False
        if photon.sieie > (0.014 if barrel else 0.034):
            return False
        if photon.gamma_iso03 - 0.012 * photon.pt > 4:
            return False
        if photon.neu_had_iso03 - 0.005 * photon.pt > 4:
            return False
    if photon.r9 > 0.9:
        if photon.hovere > (0.082 if barrel else 0.075):
            return False
        if photon.sieie > (0.014 if barrel else 0.034):
            return False
        if photon.gamma_iso03 - 0.012 * photon.pt > 50:
            return False
        if photon.neu_had_iso03 - 0.005 * photon.pt > 50:
            return False
    if photon.ch_had_iso03 < 2.8:
        return False
    return not (photon.neu_had_iso03 + photon.gamma_iso03) - 0.17 * rho < 3


def pass_cic_pf_iso(photon: Photon, rho: float) -> bool:
    """Cut-in-category identification with particle-flow isolation."""
    barrel = _barrel(photon)
    if barrel is None:
        return False
    category = 0 if barrel else 2
    if photon.r9 < 0.94:
        category += 1
    iso_sum = _ratio(
        (photon.gamma_iso03 + photon.hcal_iso04 + photon.ch_had_iso03 - 0.17 * rho) * 50.0,
        photon.pt,
    )
    iso_worst = _ratio(
        (photon.ecal_iso04 + photon.hcal_iso04 + photon.ch_had_iso03 - 0.52 * rho) * 50.0,
        photon.pt,
    )
    return (
        iso_sum < _CIC_ISO_SUM[category]
        and iso_worst < _CIC_ISO_WORST[category]
        and _ratio(photon.ch_had_iso03, photon.pt) < _CIC_CH_ISO[category]
        and photon.sieie < _CIC_SIEIE[category]
        and photon.hovere < _CIC_HOVERE[category]
        and photon.r9 > _CIC_R9[category]
    )


def veto_photon(photons: Iterable[Photon]) -> bool:
    """Whether any photon passes the loose identification."""
    return any(pass_loose(photon) for photon in photons)


class PhotonSelector:
    """Finds the leading identified photon of an event."""

    def __init__(self) -> None:
        self.n_photons = 0
        self.leading: LorentzVector | None = None

    def select_photons(
        self, photons: Iterable[Photon], vetoes: Sequence[LorentzVector], rho: float
    ) -> bool:
        """Pick the highest-pt identified photon not aligned in eta with a veto."""
        self.n_photons = 0
        self.leading = None
        best: Photon | None = None
        count = 0
        for photon in photons:
            if any(abs(veto.eta - photon.sc_eta) < VETO_ETA_WINDOW for veto in vetoes):
                continue
            if not pass_cic_pf_iso(photon, rho):
                continue
            if best is not None and best.pt > photon.pt:
                continue
            best = photon
            count += 1
        self.n_photons = count
        if best is None:
            return False
        self.leading = LorentzVector.from_pt_eta_phi_m(best.pt, best.eta, best.phi, 0.0)
        return True

    def fill_vetoes(self, vetoes: Sequence[LorentzVector]) -> list[LorentzVector]:
        """Return the vetoes extended by the leading photon, or by an empty vector."""
        vec = LorentzVector()
        if self.leading is not None and self.leading.pt > 0:
            vec = LorentzVector.from_pt_eta_phi_m(
                self.leading.pt, self.leading.eta, self.leading.phi, 0.0
            )
        return list(vetoes) + [vec]