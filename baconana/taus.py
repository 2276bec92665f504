"""Hadronic tau identification and selection."""

from __future__ import annotations

from typing import Iterable, Sequence

from .kinematics import LorentzVector, matches_any
from .physobjects import Tau

VETO_CONE = 0.5
MIN_PT = 15.0

# HPS discriminator bits used by the identifications
DECAY_MODE_FINDING = 1 << 0
MVA3_LOOSE_ELECTRON_REJECTION = 1 << 25
MVA3_MEDIUM_ELECTRON_REJECTION = 1 << 26
LOOSE_MUON_REJECTION = 1 << 29

_LOOSE_REQUIRED = DECAY_MODE_FINDING | MVA3_LOOSE_ELECTRON_REJECTION | LOOSE_MUON_REJECTION
_TIGHT_REQUIRED = DECAY_MODE_FINDING | MVA3_MEDIUM_ELECTRON_REJECTION | LOOSE_MUON_REJECTION

_ANTI_E_MVA3_CUTS: dict[str, tuple[float, ...]] = {
    "Loose": (
        0.835, 0.831, 0.849, 0.859, 0.873, 0.823, 0.85, 0.855,
        0.816, 0.861, 0.862, 0.847, 0.893, 0.82, 0.845, 0.851,
    ),
    "Medium": (
        0.933, 0.921, 0.944, 0.945, 0.918, 0.941, 0.981, 0.943,
        0.956, 0.947, 0.951, 0.95, 0.897, 0.958, 0.955, 0.942,
    ),
    "Tight": (
        0.96, 0.968, 0.971, 0.972, 0.969, 0.959, 0.981, 0.965,
        0.975, 0.972, 0.974, 0.971, 0.897, 0.971, 0.961, 0.97,
    ),
    "VeryTight": (
        0.978, 0.98, 0.982, 0.985, 0.977, 0.974, 0.989, 0.977,
        0.986, 0.983, 0.984, 0.983, 0.971, 0.987, 0.977, 0.981,
    ),
}


def _has_all(bits: int, required: int) -> bool:
    return bits & required == required


def pass_loose(tau: Tau) -> bool:
    """Loose tau identification."""
    if not _has_all(tau.hps_disc, _LOOSE_REQUIRED):
        return False
    return not tau.raw_iso3_hits > 3.0


def pass_tight(tau: Tau) -> bool:
    """Tight tau identification."""
    if not _has_all(tau.hps_disc, _TIGHT_REQUIRED):
        return False
    return not tau.raw_iso3_hits > 1.5


def pass_veto(tau: Tau) -> bool:
    """Veto-level tau identification: decay mode found and loose isolation."""
    if not tau.hps_disc & DECAY_MODE_FINDING:
        return False
    return not tau.raw_iso3_hits > 5.0


def pass_anti_e_mva3(category: int, raw: float, working_point: str) -> bool:
    """Anti-electron MVA3 decision for a category; unknown working points cut at zero."""
    if category < 0:
        return False
    if category > 15:
        return True
    cuts = _ANTI_E_MVA3_CUTS.get(working_point)
    cut = cuts[category] if cuts is not None else 0.0
    return raw > cut


def veto_tau(taus: Iterable[Tau]) -> bool:
    """Whether any tau passes the veto identification."""
    return any(pass_veto(tau) for tau in taus)


def _vector(tau: Tau) -> LorentzVector:
    return LorentzVector.from_pt_eta_phi_m(tau.pt, tau.eta, tau.phi, tau.m)


class TauSelector:
    """Finds the two leading identified taus of an event."""

    def __init__(self) -> None:
        self.n_taus = 0
        self.leading_tau: Tau | None = None
        self.subleading_tau: Tau | None = None
        self.leading: LorentzVector | None = None
        self.subleading: LorentzVector | None = None

    def select_taus(self, taus: Iterable[Tau], vetoes: Sequence[LorentzVector]) -> bool:
        """Pick the leading taus away from the vetoes; False when none is found.

        A tau that takes the lead also takes the second slot and is not counted.
        """
        self.n_taus = 0
        self.leading_tau = self.subleading_tau = None
        self.leading = self.subleading = None
        first: Tau | None = None
        second: Tau | None = None
        count = 0
        for tau in taus:
            if tau.pt < MIN_PT:
                continue
            if not pass_loose(tau):
                continue
            if matches_any(tau.eta, tau.phi, vetoes, VETO_CONE):
                continue
            if first is None:
                first = tau
            if tau.pt > first.pt:
                first = second = tau
                continue
            if second is None:
                second = tau
            if tau.pt > second.pt:
                second = tau
            count += 1
        self.n_taus = count
        if first is None:
            return False
        self.leading_tau, self.subleading_tau = first, second
        self.leading = _vector(first)
        if second is not None:
            self.subleading = _vector(second)
        return True

    def fill_vetoes(self, vetoes: Sequence[LorentzVector]) -> list[LorentzVector]:
        """Return the vetoes extended by the selected taus with positive pt."""
        extra = [
            _vector(tau)
            for tau in (self.leading_tau, self.subleading_tau)
            if tau is not None and tau.pt > 0
        ]
        return list(vetoes) + extra