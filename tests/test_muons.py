import math
from dataclasses import replace

import pytest

from baconana.kinematics import LorentzVector
from baconana.muons import (
    MuonSelector,
    pass_loose,
    pass_tight,
    pass_ww,
    veto_muon,
)
from baconana.physobjects import Muon, MuSelectorBit, MuType


def good_muon(**changes):
    base = Muon(
        pt=20.0,
        eta=0.5,
        phi=0.3,
        pt_err=1.0,
        type_bits=MuType.PF_MUON | MuType.GLOBAL | MuType.TRACKER,
        selector_bits=MuSelectorBit.ALL_ARBITRATED,
        n_tk_layers=8,
        n_pix_hits=2,
        n_valid_hits=5,
        n_match_stn=3,
        mu_nchi2=1.0,
        trk_kink=0.0,
        dz=0.0,
        d0=0.0,
        ch_had_iso04=0.0,
        gamma_iso04=0.0,
        neu_had_iso04=0.0,
        pu_iso04=0.0,
    )
    return replace(base, **changes)


def test_good_muon_passes_all_ids():
    muon = good_muon()
    assert pass_ww(muon)
    assert pass_loose(muon)
    assert pass_tight(muon)


@pytest.mark.parametrize(
    "changes",
    [
        {"eta": 2.5},
        {"pt": 9.0},
        {"type_bits": MuType.GLOBAL},
        {"n_tk_layers": 0},
        {"n_pix_hits": 0},
        {"pt_err": 5.0},
        {"trk_kink": 25.0},
        {"dz": 1.5},
        {"ch_had_iso04": 10.0},
    ],
)
def test_ww_rejections(changes):
    assert not pass_ww(good_muon(**changes))


def test_delta_beta_neutral_part_is_clipped_at_zero():
    muon = good_muon(gamma_iso04=1.0, pu_iso04=100.0, ch_had_iso04=7.0)
    assert pass_ww(muon)
    assert not pass_tight(muon)


@pytest.mark.parametrize(
    "changes",
    [
        {"type_bits": MuType.PF_MUON | MuType.TRACKER},
        {"dz": 0.3},
        {"d0": 0.05},
        {"mu_nchi2": 11.0},
        {"n_valid_hits": 0},
        {"n_match_stn": 1},
        {"n_tk_layers": 5},
    ],
)
def test_tight_rejections(changes):
    assert not pass_tight(good_muon(**changes))


def test_loose_needs_arbitration_and_veto_uses_it():
    bad = good_muon(selector_bits=0)
    assert not pass_loose(bad)
    assert not veto_muon([bad])
    assert veto_muon([bad, good_muon()])


def test_select_muons_orders_by_pt_and_counts():
    muons = [good_muon(pt=15.0), good_muon(pt=30.0, phi=2.0), good_muon(pt=20.0, phi=-2.0)]
    selector = MuonSelector()
    assert selector.select_muons(muons, [])
    assert [m.pt for m in selector.selected] == [30.0, 20.0, 15.0]
    assert selector.n_muons == 3


def test_select_muons_applies_vetoes():
    muon = good_muon()
    veto = LorentzVector.from_pt_eta_phi_m(10.0, muon.eta, muon.phi, 0.0)
    selector = MuonSelector()
    assert not selector.select_muons([muon], [veto])
    assert selector.selected == []
    assert selector.n_muons == 1


def test_select_dimuon_finds_pair_in_window():
    mu1 = good_muon(pt=60.0, eta=0.0, phi=0.0)
    mu2 = good_muon(pt=60.0, eta=0.0, phi=math.pi)
    selector = MuonSelector()
    vetoes = selector.select_dimuon([mu1, mu2], [])
    assert len(vetoes) == 2
    assert selector.mass_min <= selector.dimuon.m <= selector.mass_max
    assert selector.dimuon.m == pytest.approx((vetoes[0] + vetoes[1]).m)


def test_select_dimuon_outside_window_keeps_vetoes():
    mu1 = good_muon(pt=60.0, eta=0.0, phi=0.0)
    mu2 = good_muon(pt=60.0, eta=0.0, phi=math.pi)
    selector = MuonSelector(mass_min=60.0, mass_max=100.0)
    assert selector.select_dimuon([mu1, mu2], []) == []
    assert selector.dimuon.pt == pytest.approx(1e-9)


def test_fill_vetoes_appends_selected_muons():
    selector = MuonSelector()
    selector.select_muons([good_muon(pt=25.0)], [])
    existing = [LorentzVector.from_pt_eta_phi_m(5.0, 1.0, 1.0, 0.0)]
    result = selector.fill_vetoes(existing)
    assert len(result) == 2
    assert len(existing) == 1
    assert result[1].pt == pytest.approx(25.0)
    assert result[1].m == pytest.approx(0.105, abs=1e-6)