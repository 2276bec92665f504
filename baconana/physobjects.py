"""Reconstructed lepton, photon and tau records and their flag definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .defs import BitSet, trigger_objects


class EleType(IntFlag):
    ECAL_DRIVEN = 1
    TRACKER_DRIVEN = 2


class MuType(IntFlag):
    GLOBAL = 2
    TRACKER = 4
    STANDALONE = 8
    CALO_MUON = 16
    PF_MUON = 32
    RPC_MUON = 64


class MuSelectorBit(IntFlag):
    """Muon selector bits."""

    ALL = 0x0000001
    ALL_GLOBAL_MUONS = 0x0000002
    ALL_STANDALONE_MUONS = 0x0000004
    ALL_TRACKER_MUONS = 0x0000008
    TRACKER_MUON_ARBITRATED = 0x0000010
    ALL_ARBITRATED = 0x0000020
    GLOBAL_MUON_PROMPT_TIGHT = 0x0000040
    TM_LAST_STATION_LOOSE = 0x0000080
    TM_LAST_STATION_TIGHT = 0x0000100
    TM_2D_COMPATIBILITY_LOOSE = 0x0000200
    TM_2D_COMPATIBILITY_TIGHT = 0x0000400
    TM_ONE_STATION_LOOSE = 0x0000800
    TM_ONE_STATION_TIGHT = 0x0001000
    TM_LAST_STATION_OPTIMIZED_LOW_PT_LOOSE = 0x0002000
    TM_LAST_STATION_OPTIMIZED_LOW_PT_TIGHT = 0x0004000
    GM_TK_CHI_COMPATIBILITY = 0x0008000
    GM_STA_CHI_COMPATIBILITY = 0x0010000
    GM_TK_KINK_TIGHT = 0x0020000
    TM_LAST_STATION_ANG_LOOSE = 0x0040000
    TM_LAST_STATION_ANG_TIGHT = 0x0080000
    TM_ONE_STATION_ANG_LOOSE = 0x0100000
    TM_ONE_STATION_ANG_TIGHT = 0x0200000
    TM_LAST_STATION_OPTIMIZED_BARREL_LOW_PT_LOOSE = 0x0400000
    TM_LAST_STATION_OPTIMIZED_BARREL_LOW_PT_TIGHT = 0x0800000
    RPC_MU_LOOSE = 0x1000000


class PhotonType(IntFlag):
    EGAMMA = 1
    PF_PHOTON = 2
    PF_MUON_PHOTON = 4


class HPSDiscriminator(IntFlag):
    """HPS tau discriminator bits."""

    BY_DECAY_MODE_FINDING = 1 << 0
    BY_VLOOSE_ISOLATION = 1 << 1
    BY_LOOSE_ISOLATION = 1 << 2
    BY_MEDIUM_ISOLATION = 1 << 3
    BY_TIGHT_ISOLATION = 1 << 4
    BY_VLOOSE_ISOLATION_DB_SUM_PT_CORR = 1 << 5
    BY_LOOSE_ISOLATION_DB_SUM_PT_CORR = 1 << 6
    BY_MEDIUM_ISOLATION_DB_SUM_PT_CORR = 1 << 7
    BY_TIGHT_ISOLATION_DB_SUM_PT_CORR = 1 << 8
    BY_VLOOSE_COMBINED_ISOLATION_DB_SUM_PT_CORR = 1 << 9
    BY_LOOSE_COMBINED_ISOLATION_DB_SUM_PT_CORR = 1 << 10
    BY_MEDIUM_COMBINED_ISOLATION_DB_SUM_PT_CORR = 1 << 11
    BY_TIGHT_COMBINED_ISOLATION_DB_SUM_PT_CORR = 1 << 12
    BY_LOOSE_COMBINED_ISOLATION_DB_SUM_PT_CORR_3HITS = 1 << 13
    BY_MEDIUM_COMBINED_ISOLATION_DB_SUM_PT_CORR_3HITS = 1 << 14
    BY_TIGHT_COMBINED_ISOLATION_DB_SUM_PT_CORR_3HITS = 1 << 15
    BY_LOOSE_ISOLATION_MVA = 1 << 16
    BY_MEDIUM_ISOLATION_MVA = 1 << 17
    BY_TIGHT_ISOLATION_MVA = 1 << 18
    BY_LOOSE_ISOLATION_MVA2 = 1 << 19
    BY_MEDIUM_ISOLATION_MVA2 = 1 << 20
    BY_TIGHT_ISOLATION_MVA2 = 1 << 21
    BY_LOOSE_ELECTRON_REJECTION = 1 << 22
    BY_MEDIUM_ELECTRON_REJECTION = 1 << 23
    BY_TIGHT_ELECTRON_REJECTION = 1 << 24
    BY_MVA3_LOOSE_ELECTRON_REJECTION = 1 << 25
    BY_MVA3_MEDIUM_ELECTRON_REJECTION = 1 << 26
    BY_MVA3_TIGHT_ELECTRON_REJECTION = 1 << 27
    BY_MVA3_VTIGHT_ELECTRON_REJECTION = 1 << 28
    BY_LOOSE_MUON_REJECTION = 1 << 29
    BY_MEDIUM_MUON_REJECTION = 1 << 30
    BY_TIGHT_MUON_REJECTION = 1 << 31
    BY_LOOSE_MUON_REJECTION2 = 1 << 32
    BY_MEDIUM_MUON_REJECTION2 = 1 << 33
    BY_TIGHT_MUON_REJECTION2 = 1 << 34
    BY_LOOSE_MUON_REJECTION3 = 1 << 35
    BY_TIGHT_MUON_REJECTION3 = 1 << 36


@dataclass(kw_only=True)
class Electron:
    """A reconstructed electron."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    sc_et: float = 0.0
    sc_eta: float = 0.0
    sc_phi: float = 0.0
    pt_hzz4l: float = 0.0
    pt_err_hzz4l: float = 0.0
    sc_et_hzz4l: float = 0.0
    r9: float = 0.0
    ecal_energy: float = 0.0
    pf_pt: float = 0.0
    pf_eta: float = 0.0
    pf_phi: float = 0.0
    trk_iso03: float = -1.0
    ecal_iso03: float = -1.0
    hcal_iso03: float = -1.0
    ch_had_iso03: float = -1.0
    gamma_iso03: float = -1.0
    neu_had_iso03: float = -1.0
    ch_had_iso04: float = -1.0
    gamma_iso04: float = -1.0
    neu_had_iso04: float = -1.0
    d0: float = -999.0
    dz: float = -999.0
    sip3d: float = -999.0
    sieie: float = 0.0
    eoverp: float = 0.0
    hovere: float = 0.0
    fbrem: float = 0.0
    d_eta_in: float = 0.0
    d_phi_in: float = 0.0
    mva: float = -999.0
    q: int = 0
    classification: int = -999
    is_conv: bool = False
    n_missing_hits: int = 0
    type_bits: int = 0
    fiducial_bits: int = 0
    sc_id: int = -1
    trk_id: int = -1
    hlt_match_bits: BitSet = field(default_factory=trigger_objects)


@dataclass(kw_only=True)
class Muon:
    """A reconstructed muon."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    pt_err: float = 0.0
    pt_hzz4l: float = 0.0
    sta_pt: float = 0.0
    sta_eta: float = 0.0
    sta_phi: float = 0.0
    pf_pt: float = 0.0
    pf_eta: float = 0.0
    pf_phi: float = 0.0
    trk_iso03: float = -1.0
    ecal_iso03: float = -1.0
    hcal_iso03: float = -1.0
    ch_had_iso03: float = -1.0
    gamma_iso03: float = -1.0
    neu_had_iso03: float = -1.0
    pu_iso03: float = -1.0
    ch_had_iso04: float = -1.0
    gamma_iso04: float = -1.0
    neu_had_iso04: float = -1.0
    pu_iso04: float = -1.0
    d0: float = -999.0
    dz: float = -999.0
    sip3d: float = -999.0
    tk_nchi2: float = -999.0
    mu_nchi2: float = -999.0
    trk_kink: float = 0.0
    glb_kink: float = 0.0
    q: int = 0
    n_valid_hits: int = 0
    type_bits: int = 0
    selector_bits: int = 0
    n_tk_hits: int = 0
    n_pix_hits: int = 0
    n_tk_layers: int = 0
    n_pix_layers: int = 0
    n_match_stn: int = 0
    trk_id: int = -1
    hlt_match_bits: BitSet = field(default_factory=trigger_objects)


@dataclass(kw_only=True)
class Photon:
    """A reconstructed photon."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    sc_et: float = 0.0
    sc_eta: float = 0.0
    sc_phi: float = 0.0
    r9: float = 0.0
    pf_pt: float = 0.0
    pf_eta: float = 0.0
    pf_phi: float = 0.0
    trk_iso04: float = -1.0
    ecal_iso04: float = -1.0
    hcal_iso04: float = -1.0
    ch_had_iso03: float = -1.0
    gamma_iso03: float = -1.0
    neu_had_iso03: float = -1.0
    iso_for_fsr03: float = -1.0
    mva_nothing_gamma: float = 0.0
    hovere: float = 0.0
    sieie: float = 0.0
    sipip: float = 0.0
    fiducial_bits: int = 0
    type_bits: int = 0
    sc_id: int = -1
    has_pixel_seed: bool = False
    is_conv: bool = False
    hlt_match_bits: BitSet = field(default_factory=trigger_objects)


@dataclass(kw_only=True)
class Tau:
    """A reconstructed hadronic tau."""

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    m: float = 0.0
    e: float = 0.0
    q: int = 0
    dz_lead_ch_had: float = -999.0
    n_signal_ch_had: int = 0
    n_signal_gamma: int = 0
    ring_iso: float = -1.0
    ring_iso2: float = -1.0
    anti_ele_mva3: float = 0.0
    anti_ele_mva3_cat: float = 0.0
    raw_iso3_hits: float = 0.0
    raw_iso_mva3: float = 0.0
    hps_disc: int = 0
    hlt_match_bits: BitSet = field(default_factory=trigger_objects)