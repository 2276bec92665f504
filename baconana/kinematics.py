"""Four-vectors and angular matching helpers used by the object selections."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

_TWO_PI = 2.0 * math.pi


def _wrap_phi(angle: float) -> float:
    """Bring an angle into [-pi, pi)."""
    while angle >= math.pi:
        angle -= _TWO_PI
    while angle < -math.pi:
        angle += _TWO_PI
    return angle


@dataclass(frozen=True)
class LorentzVector:
    """A four-momentum in Cartesian components."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    @classmethod
    def from_pt_eta_phi_m(cls, pt: float, eta: float, phi: float, m: float) -> "LorentzVector":
        """Build a vector from transverse momentum, pseudorapidity, azimuth and mass."""
        pt = abs(pt)
        px = pt * math.cos(phi)
        py = pt * math.sin(phi)
        pz = pt * math.sinh(eta)
        p2 = px * px + py * py + pz * pz
        if m >= 0:
            energy = math.sqrt(p2 + m * m)
        else:
            energy = math.sqrt(max(p2 - m * m, 0.0))
        return cls(px, py, pz, energy)

    @property
    def p(self) -> float:
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    @property
    def pt(self) -> float:
        return math.hypot(self.px, self.py)

    @property
    def phi(self) -> float:
        if self.px == 0.0 and self.py == 0.0:
            return 0.0
        return math.atan2(self.py, self.px)

    @property
    def eta(self) -> float:
        p = self.p
        cos_theta = self.pz / p if p != 0.0 else 1.0
        if cos_theta * cos_theta < 1.0:
            return -0.5 * math.log((1.0 - cos_theta) / (1.0 + cos_theta))
        if self.pz == 0.0:
            return 0.0
        return 1e10 if self.pz > 0 else -1e10

    @property
    def m(self) -> float:
        mag2 = self.e * self.e - (self.px * self.px + self.py * self.py + self.pz * self.pz)
        return -math.sqrt(-mag2) if mag2 < 0 else math.sqrt(mag2)

    def __add__(self, other: "LorentzVector") -> "LorentzVector":
        if not isinstance(other, LorentzVector):
            return NotImplemented
        return LorentzVector(
            self.px + other.px, self.py + other.py, self.pz + other.pz, self.e + other.e
        )

    def delta_phi(self, other: "LorentzVector") -> float:
        """Azimuthal difference to ``other``, in [-pi, pi)."""
        return _wrap_phi(self.phi - other.phi)


def delta_r(eta1: float, phi1: float, eta2: float, phi2: float) -> float:
    """Angular distance between two directions, with the azimuth folded at pi."""
    d_eta = eta1 - eta2
    d_phi = abs(phi1 - phi2)
    if d_phi > _TWO_PI - d_phi:
        d_phi = _TWO_PI - d_phi
    return math.sqrt(d_phi * d_phi + d_eta * d_eta)


def matches_any(eta: float, phi: float, vetoes: Iterable[LorentzVector], cone: float) -> bool:
    """Whether any veto vector lies within ``cone`` of the given direction."""
    return any(delta_r(eta, phi, veto.eta, veto.phi) <= cone for veto in vetoes)