"""Generator-level boson and decay-lepton summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .eventobjects import GenEventInfo, GenParticle

_BOSON_IDS = (23, 24, 25)
_NEUTRINO_IDS = (12, 14, 16)


@dataclass
class GenSummary:
    """Generator information for one event: partons, boson and its two leptons."""

    q: float = 0.0
    pid1: float = 0.0
    x1: float = 0.0
    pdf1: float = 0.0
    pid2: float = 0.0
    x2: float = 0.0
    pdf2: float = 0.0
    v_pt: float = 0.0
    v_eta: float = 0.0
    v_phi: float = 0.0
    v_m: float = 0.0
    v_id: int = 0
    pt1: float = 0.0
    eta1: float = 0.0
    phi1: float = 0.0
    m1: float = 0.0
    id1: int = 0
    pt2: float = 0.0
    eta2: float = 0.0
    phi2: float = 0.0
    m2: float = 0.0
    id2: int = 0


def is_neutrino(particle: GenParticle) -> bool:
    return abs(particle.pdg_id) in _NEUTRINO_IDS


def find_status1(particles: Sequence[GenParticle], index: int) -> GenParticle | None:
    """Follow the decay chain below ``index`` to its first stable descendant.

    The particle list is assumed ordered so that daughters follow their mothers.
    Returns the last descendant reached, which need not be stable, or None.
    """
    current = index
    found = None
    for position, particle in enumerate(particles):
        if particle.parent != current:
            continue
        found = particle
        if particle.status == 1:
            break
        current = position
    return found


def select_boson(particles: Sequence[GenParticle]) -> GenSummary:
    """Find the last Z, W or Higgs and its two decay leptons, leading one first."""
    boson = None
    boson_index = None
    lep1 = lep2 = None
    for position, particle in enumerate(particles):
        if abs(particle.pdg_id) in _BOSON_IDS:
            boson = particle
            boson_index = position
        if boson_index is not None and particle.parent == boson_index:
            candidate = particle if particle.status == 1 else find_status1(particles, position)
            if lep1 is None:
                lep1 = candidate
            else:
                lep2 = candidate
    if boson is None:
        raise ValueError("no Z, W or Higgs boson among the generator particles")

    summary = GenSummary(
        v_pt=boson.pt, v_eta=boson.eta, v_phi=boson.phi, v_m=boson.mass, v_id=boson.pdg_id
    )
    if lep1 is None or lep2 is None:
        return summary
    if lep2.pt > lep1.pt or is_neutrino(lep1):
        lep1, lep2 = lep2, lep1
    summary.pt1, summary.eta1, summary.phi1 = lep1.pt, lep1.eta, lep1.phi
    summary.m1, summary.id1 = lep1.mass, lep1.pdg_id
    summary.pt2, summary.eta2, summary.phi2 = lep2.pt, lep2.eta, lep2.phi
    summary.m2, summary.id2 = lep2.mass, lep2.pdg_id
    return summary


def gen_event_summary(info: GenEventInfo) -> GenSummary:
    """Parton-level fields of the summary; the boson fields are left at zero."""
    return GenSummary(
        q=info.scale_pdf,
        x1=info.x_1,
        x2=info.x_2,
        pid1=float(info.id_1),
        pid2=float(info.id_2),
    )