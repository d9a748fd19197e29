"""Domain layer: filter types, coefficient derivation, and analysis.

This layer depends only on stdlib, numpy, and scipy.signal.
It must never import from services, output, commands, or config.
"""
