"""Event data records, four-vectors, physics-object selections and certified luminosity filtering."""

__version__ = "0.1.0"