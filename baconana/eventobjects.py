"""Event-level records: event info, jets, generator truth, PF candidates and vertices."""

from __future__ import annotations

from dataclasses import dataclass, field

from .defs import BitSet, trigger_bits, trigger_objects


@dataclass(kw_only=True)
class AddJet:
    """Groomed-jet information attached to a jet by its index."""

    index: int = -1
    # pruning, default and tight
    pt_p1: float = 0.0
    ptraw_p1: float = 0.0
    eta_p1: float = 0.0
    phi_p1: float = 0.0
    mass_p1: float = 0.0
    area_p1: float = 0.0
    pt_p2: float = 0.0
    ptraw_p2: float = 0.0
    eta_p2: float = 0.0
    phi_p2: float = 0.0
    mass_p2: float = 0.0
    area_p2: float = 0.0
    # trimming: default, tight, tightish, small cone
    pt_t1: float = 0.0
    ptraw_t1: float = 0.0
    eta_t1: float = 0.0
    phi_t1: float = 0.0
    mass_t1: float = 0.0
    area_t1: float = 0.0
    pt_t2: float = 0.0
    ptraw_t2: float = 0.0
    eta_t2: float = 0.0
    phi_t2: float = 0.0
    mass_t2: float = 0.0
    area_t2: float = 0.0
    pt_t3: float = 0.0
    ptraw_t3: float = 0.0
    eta_t3: float = 0.0
    phi_t3: float = 0.0
    mass_t3: float = 0.0
    area_t3: float = 0.0
    pt_t4: float = 0.0
    ptraw_t4: float = 0.0
    eta_t4: float = 0.0
    phi_t4: float = 0.0
    mass_t4: float = 0.0
    area_t4: float = 0.0
    # filtering, default and tight
    pt_f1: float = 0.0
    ptraw_f1: float = 0.0
    eta_f1: float = 0.0
    phi_f1: float = 0.0
    mass_f1: float = 0.0
    area_f1: float = 0.0
    pt_f2: float = 0.0
    ptraw_f2: float = 0.0
    eta_f2: float = 0.0
    phi_f2: float = 0.0
    mass_f2: float = 0.0
    area_f2: float = 0.0
    # energy correlation functions of varying exponent
    c2_0: float = 0.0
    c2_0p2: float = 0.0
    c2_0p5: float = 0.0
    c2_1p0: float = 0.0
    c2_2p0: float = 0.0


@dataclass(kw_only=True)
class Jet:
    """A reconstructed jet."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    mass: float = 0.0
    pt_raw: float = 0.0
    unc: float = 0.0
    area: float = 0.0
    d0: float = -999.0
    dz: float = -999.0
    csv: float = -2.0
    csv1: float = -2.0
    csv2: float = -2.0
    mva: float = -2.0
    qgid: float = -2.0
    qg1: float = -2.0
    qg2: float = -2.0
    tau1: float = -1.0
    tau2: float = -1.0
    tau3: float = -1.0
    tau4: float = -1.0
    pruned_m: float = 0.0
    n_charged: int = 0
    n_neutrals: int = 0
    n_particles: int = 0
    beta: float = 0.0
    beta_star: float = 0.0
    d_r2_mean: float = 0.0
    pt_d: float = 0.0
    q: float = 0.0
    pull: float = 0.0
    pull_angle: float = 0.0
    ch_em_frac: float = 0.0
    neu_em_frac: float = 0.0
    ch_had_frac: float = 0.0
    neu_had_frac: float = 0.0
    mc_flavor: int = 0
    mc_flavor_phys: int = 0
    genpt: float = 0.0
    geneta: float = 0.0
    genphi: float = 0.0
    genm: float = 0.0
    hlt_match_bits: BitSet = field(default_factory=trigger_objects)


@dataclass(kw_only=True)
class EventInfo:
    """Per-event summary quantities."""

    run_num: int = 0
    evt_num: int = 0
    lumi_sec: int = 0
    met_filter_fail_bits: int = 0
    n_pu: int = 0
    n_pu_m: int = 0
    n_pu_p: int = 0
    n_pu_mean: float = 0.0
    n_pu_mean_m: float = 0.0
    n_pu_mean_p: float = 0.0
    pvx: float = 0.0
    pvy: float = 0.0
    pvz: float = 0.0
    bsx: float = 0.0
    bsy: float = 0.0
    bsz: float = 0.0
    pf_met: float = 0.0
    pf_met_phi: float = 0.0
    pf_met_cov00: float = 0.0
    pf_met_cov01: float = 0.0
    pf_met_cov11: float = 0.0
    mva_met: float = 0.0
    mva_met_phi: float = 0.0
    mva_met_cov00: float = 0.0
    mva_met_cov01: float = 0.0
    mva_met_cov11: float = 0.0
    mva_met_u: float = 0.0
    mva_met_u_phi: float = 0.0
    mva_met_u_cov00: float = 0.0
    mva_met_u_cov01: float = 0.0
    mva_met_u_cov11: float = 0.0
    trk_met: float = 0.0
    trk_met_phi: float = 0.0
    rho_iso: float = 0.0
    rho_jet: float = 0.0
    trigger_bits: BitSet = field(default_factory=trigger_bits)
    has_good_pv: bool = False


@dataclass(kw_only=True)
class GenEventInfo:
    """Generator-level parton information for an event."""

    id_1: int = 0
    id_2: int = 0
    x_1: float = 0.0
    x_2: float = 0.0
    scale_pdf: float = 0.0


@dataclass(kw_only=True)
class GenParticle:
    """A generator-level particle; ``parent`` is the index of its mother or -1."""

    parent: int = -1
    pdg_id: int = 0
    status: int = 0
    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    mass: float = 0.0
    y: float = 0.0


@dataclass(kw_only=True)
class PFParticle:
    """A particle-flow candidate."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    m: float = 0.0
    e: float = 0.0
    q: int = 0
    pf_type: int = -1
    vtx_id: int = -1
    trk_chi2: float = 0.0
    vtx_chi2: float = 0.0
    ecal_e: float = 0.0
    hcal_e: float = 0.0
    d0: float = 0.0
    dz: float = 0.0
    time: float = 0.0
    depth: float = 0.0


@dataclass(kw_only=True)
class Vertex:
    """A reconstructed primary vertex."""

    n_tracks_fit: int = 0
    ndof: float = 0.0
    chi2: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0