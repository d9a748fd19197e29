"""lpfcalc: low-pass IIR filter coefficient calculator."""

__version__ = "0.1.0"
