# baconana

Event data records and physics-object selections for collider analyses
that look for missing transverse energy recoiling against jets.

It has no dependencies outside the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `baconana.defs` | `FiducialFlag`, `MetFilterFailBit`, the fixed-width `BitSet`, and `trigger_bits()` (128 bits) / `trigger_objects()` (256 bits) |
| `baconana.physobjects` | `Electron`, `Muon`, `Photon`, `Tau` records and the flags `EleType`, `MuType`, `MuSelectorBit`, `PhotonType`, `HPSDiscriminator` |
| `baconana.eventobjects` | `EventInfo`, `Jet`, `AddJet`, `GenEventInfo`, `GenParticle`, `PFParticle`, `Vertex` records |
| `baconana.kinematics` | `LorentzVector`, `delta_r`, `matches_any` |
| `baconana.muons` | `pass_loose`, `pass_ww`, `pass_tight`, `veto_muon`, `MuonSelector` |
| `baconana.electrons` | `pass_veto`, `pass_loose`, `pass_vbtf95`, `effective_area`, `veto_electron`, `conversions`, `non_conversions`, `ElectronSelector` |
| `baconana.leptons` | `fill_leptons`, `LeptonSummary`, `pass_tight` |
| `baconana.photons` | `pass_loose`, `pass_cic_photon_pre`, `pass_cic_pf_iso`, `veto_photon`, `PhotonSelector` |
| `baconana.taus` | `pass_loose`, `pass_tight`, `pass_veto`, `pass_anti_e_mva3`, `veto_tau`, `TauSelector` |
| `baconana.genevents` | `select_boson`, `find_status1`, `is_neutrino`, `gen_event_summary`, `GenSummary` |
| `baconana.runlumi` | `RunLumiSet`, `RunLumiRangeMap` |

All records are keyword-only data classes whose defaults are the
"unset" values (for example `d0=-999.0`, isolation `-1.0`, empty bit sets).

## Bit sets

```python
from baconana.defs import trigger_bits

fired = trigger_bits(0b101)
fired[0], fired[1]          # (True, False)
fired.set(7)
list(fired.set_bits())      # [0, 2, 7]
```

Indices outside the set's width raise `IndexError`.

## Object identification

The identification functions take one object and return `True` or `False`:

```python
from baconana.physobjects import Muon, MuType
from baconana.muons import pass_ww

muon = Muon(
    pt=25.0, eta=0.5, phi=1.0, pt_err=0.5, dz=0.01,
    type_bits=MuType.PF_MUON, n_tk_layers=8, n_pix_hits=2,
    ch_had_iso04=0.0, gamma_iso04=0.0, neu_had_iso04=0.0, pu_iso04=0.0,
)
pass_ww(muon)   # True
```

## Selecting objects in an event

The selectors (`MuonSelector`, `ElectronSelector`, `PhotonSelector`,
`TauSelector`) pick objects from one event, drop those lying within a cone
of vectors already chosen ("vetoes"), and keep the result on the selector.
Their `fill_vetoes` method returns a new veto list extended by their own
picks, ready for the next selector:

```python
from baconana.muons import MuonSelector
from baconana.electrons import ElectronSelector
from baconana.taus import TauSelector
from baconana.leptons import fill_leptons

vetoes = []
muon_sel = MuonSelector()
muon_sel.select_muons(muons, vetoes)
vetoes = muon_sel.fill_vetoes(vetoes)

electron_sel = ElectronSelector()
electron_sel.select_electrons(electrons, rho, vetoes)
vetoes = electron_sel.fill_vetoes(vetoes)

leptons = fill_leptons(muon_sel.selected, electron_sel.selected)

tau_sel = TauSelector()
tau_sel.select_taus(taus, vetoes)
```

`MuonSelector(mass_min, mass_max)` (115 and 130 by default) also offers
`select_dimuon`, which returns the vetoes extended by the first pair of
identified muons whose invariant mass lies in the window and stores the
pair's four-vector in `dimuon`.

Angular matching uses `delta_r` and `matches_any` from
`baconana.kinematics`; `LorentzVector.from_pt_eta_phi_m` builds vectors
and `+` adds them.

## Generator truth

`select_boson(particles)` finds the last Z, W or Higgs in a list of
`GenParticle` records and its two daughters (followed down to stable
particles), leading one first, and returns a `GenSummary`. It raises
`ValueError` when there is no such boson. `gen_event_summary(info)` fills
the parton-level fields from a `GenEventInfo`.

## Certified luminosity sections

```python
from baconana.runlumi import RunLumiRangeMap

good = RunLumiRangeMap()
good.add_json_file("certified.json")
good.has_run_lumi(190645, 10)
```

The JSON file maps run numbers (as strings) to lists of inclusive
`[first, last]` luminosity-section ranges; `add_json` takes the same data
already loaded. `fill_run_lumi_set` rebuilds the map from a `RunLumiSet`,
joining consecutive sections of a run into ranges.

## What the package does not do

- It does not read or write event files; you build the records yourself
  and pass them in.
- It has no trigger-menu reader, and no jet selection.
- It does not compute event-level quantities such as MET significance,
  MET corrections, MET filter words, vertex counts or pile-up weights.
- There is no complete event loop and no command-line program.