import pytest

from baconana.kinematics import LorentzVector
from baconana.physobjects import Tau
from baconana.taus import (
    DECAY_MODE_FINDING,
    LOOSE_MUON_REJECTION,
    MVA3_LOOSE_ELECTRON_REJECTION,
    MVA3_MEDIUM_ELECTRON_REJECTION,
    TauSelector,
    pass_anti_e_mva3,
    pass_loose,
    pass_tight,
    pass_veto,
    veto_tau,
)

LOOSE_BITS = DECAY_MODE_FINDING | MVA3_LOOSE_ELECTRON_REJECTION | LOOSE_MUON_REJECTION
TIGHT_BITS = DECAY_MODE_FINDING | MVA3_MEDIUM_ELECTRON_REJECTION | LOOSE_MUON_REJECTION


def make_tau(pt=30.0, eta=0.0, phi=0.0, bits=LOOSE_BITS, iso=0.5):
    return Tau(pt=pt, eta=eta, phi=phi, m=1.0, hps_disc=bits, raw_iso3_hits=iso)


def test_pass_loose_requires_all_bits():
    assert pass_loose(make_tau())
    assert not pass_loose(make_tau(bits=DECAY_MODE_FINDING | LOOSE_MUON_REJECTION))


def test_pass_loose_isolation():
    assert pass_loose(make_tau(iso=3.0))
    assert not pass_loose(make_tau(iso=3.1))


def test_pass_tight():
    assert pass_tight(make_tau(bits=TIGHT_BITS, iso=1.5))
    assert not pass_tight(make_tau(bits=TIGHT_BITS, iso=1.6))
    assert not pass_tight(make_tau(bits=LOOSE_BITS, iso=0.1))


def test_pass_veto():
    assert pass_veto(make_tau(bits=DECAY_MODE_FINDING, iso=5.0))
    assert not pass_veto(make_tau(bits=DECAY_MODE_FINDING, iso=5.5))
    assert not pass_veto(make_tau(bits=LOOSE_MUON_REJECTION, iso=0.0))


def test_veto_tau():
    assert veto_tau([make_tau(bits=0), make_tau(bits=DECAY_MODE_FINDING)])
    assert not veto_tau([make_tau(bits=0)])
    assert not veto_tau([])


@pytest.mark.parametrize(
    "category, raw, working_point, expected",
    [
        (-1, 1.0, "Loose", False),
        (16, 0.0, "Loose", True),
        (0, 0.84, "Loose", True),
        (0, 0.83, "Loose", False),
        (0, 0.94, "Medium", True),
        (0, 0.93, "Medium", False),
        (12, 0.897, "Tight", False),
        (15, 0.982, "VeryTight", True),
        (3, 0.1, "Unknown", True),
        (3, -0.1, "Unknown", False),
    ],
)
def test_pass_anti_e_mva3(category, raw, working_point, expected):
    assert pass_anti_e_mva3(category, raw, working_point) is expected


def test_select_taus_none_found():
    selector = TauSelector()
    assert not selector.select_taus([make_tau(pt=10.0), make_tau(bits=0)], [])
    assert selector.leading is None
    assert selector.fill_vetoes([]) == []


def test_select_taus_single():
    selector = TauSelector()
    tau = make_tau(pt=25.0, eta=0.4, phi=1.0)
    assert selector.select_taus([tau], [])
    assert selector.n_taus == 1
    assert selector.leading_tau is tau
    assert selector.subleading_tau is tau
    assert selector.leading.pt == pytest.approx(25.0)
    assert selector.leading.eta == pytest.approx(0.4)
    assert len(selector.fill_vetoes([])) == 2


def test_select_taus_new_leader_fills_both_slots():
    selector = TauSelector()
    t20, t40, t30 = make_tau(pt=20.0), make_tau(pt=40.0), make_tau(pt=30.0)
    assert selector.select_taus([t20, t40, t30], [])
    assert selector.leading_tau is t40
    assert selector.subleading_tau is t40
    assert selector.n_taus == 2


def test_select_taus_veto_cone():
    selector = TauSelector()
    veto = LorentzVector.from_pt_eta_phi_m(20.0, 0.1, 0.0, 0.0)
    near = make_tau(pt=30.0, eta=0.0, phi=0.0)
    far = make_tau(pt=20.0, eta=0.0, phi=2.0)
    assert selector.select_taus([near, far], [veto])
    assert selector.leading_tau is far


def test_fill_vetoes_keeps_existing():
    selector = TauSelector()
    selector.select_taus([make_tau(pt=30.0, phi=1.5)], [])
    existing = LorentzVector.from_pt_eta_phi_m(5.0, 0.0, 0.0, 0.0)
    result = selector.fill_vetoes([existing])
    assert result[0] == existing
    assert result[1].phi == pytest.approx(1.5)