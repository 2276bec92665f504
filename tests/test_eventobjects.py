import dataclasses

import pytest

from baconana.defs import N_TRIG_BIT, N_TRIG_OBJECT_BIT
from baconana.eventobjects import (
    AddJet,
    EventInfo,
    GenEventInfo,
    GenParticle,
    Jet,
    PFParticle,
    Vertex,
)


def test_jet_defaults_follow_source():
    jet = Jet()
    assert jet.csv == -2.0
    assert jet.tau1 == -1.0
    assert jet.d0 == -999.0
    assert jet.pt == 0.0
    assert len(jet.hlt_match_bits) == N_TRIG_OBJECT_BIT


def test_jet_bitsets_are_not_shared():
    first, second = Jet(), Jet()
    first.hlt_match_bits.set(5)
    assert first.hlt_match_bits[5] is True
    assert second.hlt_match_bits[5] is False


def test_event_info_trigger_bits_width_and_independence():
    a, b = EventInfo(), EventInfo()
    assert len(a.trigger_bits) == N_TRIG_BIT
    a.trigger_bits.set(3)
    assert b.trigger_bits.count() == 0
    assert a.has_good_pv is False


def test_add_jet_default_index_and_all_floats_zero():
    add = AddJet()
    assert add.index == -1
    values = [getattr(add, f.name) for f in dataclasses.fields(add) if f.name != "index"]
    assert values and all(v == 0.0 for v in values)


def test_gen_particle_and_pf_defaults():
    assert GenParticle().parent == -1
    pf = PFParticle()
    assert pf.pf_type == -1
    assert pf.vtx_id == -1


def test_keyword_only_construction():
    with pytest.raises(TypeError):
        Vertex(1, 2.0)  # type: ignore[misc]
    vertex = Vertex(n_tracks_fit=7, ndof=4.5, z=-3.0)
    assert (vertex.n_tracks_fit, vertex.ndof, vertex.z) == (7, 4.5, -3.0)


def test_gen_event_info_roundtrip_replace():
    info = GenEventInfo(id_1=21, id_2=-2, x_1=0.1, x_2=0.2, scale_pdf=91.2)
    copy = dataclasses.replace(info, scale_pdf=125.0)
    assert copy.id_1 == info.id_1
    assert copy.scale_pdf == 125.0
    assert info.scale_pdf == 91.2