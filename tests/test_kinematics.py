import math

import pytest

from baconana.kinematics import LorentzVector, delta_r, matches_any


def test_negative_pt_is_taken_as_magnitude():
    vec = LorentzVector.from_pt_eta_phi_m(-10.0, 0.3, 0.2, 0.0)
    assert vec.pt == pytest.approx(10.0)


def test_zero_vector_has_zero_eta_and_phi():
    vec = LorentzVector.from_pt_eta_phi_m(0.0, 0.0, 0.0, 0.0)
    assert vec.eta == 0.0
    assert vec.phi == 0.0
    assert vec.m == 0.0


def test_addition_is_commutative_and_componentwise():
    a = LorentzVector.from_pt_eta_phi_m(30.0, 0.4, 0.1, 0.105)
    b = LorentzVector.from_pt_eta_phi_m(25.0, -0.8, 2.9, 0.105)
    total = a + b
    assert total == b + a
    assert total.px == pytest.approx(a.px + b.px)
    assert total.e == pytest.approx(a.e + b.e)
    assert total.m >= a.m + b.m - 1e-9


def test_delta_phi_is_wrapped_and_antisymmetric():
    a = LorentzVector.from_pt_eta_phi_m(10.0, 0.0, 3.0, 0.0)
    b = LorentzVector.from_pt_eta_phi_m(10.0, 0.0, -3.0, 0.0)
    d = a.delta_phi(b)
    assert -math.pi <= d < math.pi
    assert d == pytest.approx(-b.delta_phi(a))


def test_delta_r_symmetric_and_folds_phi():
    assert delta_r(0.1, 3.1, -0.2, -3.1) == pytest.approx(delta_r(-0.2, -3.1, 0.1, 3.1))
    assert delta_r(0.0, 3.1, 0.0, -3.1) < 0.1
    assert delta_r(1.0, 0.5, 1.0, 0.5) == 0.0


def test_matches_any_uses_cone():
    veto = LorentzVector.from_pt_eta_phi_m(20.0, 0.5, 1.0, 0.0)
    assert matches_any(0.5, 1.0, [veto], 0.3)
    assert not matches_any(2.0, -2.0, [veto], 0.3)
    assert not matches_any(0.5, 1.0, [], 0.3)