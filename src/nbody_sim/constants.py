# MIT License (see LICENSE)
"""
Default parameters for the simulation.

Units are whatever the host uses for distance (typically pixels) and seconds.
The default gravitational strength is tuned for screen-space scenes of a few
hundred pixels, not SI units.
"""
from __future__ import annotations

# Strength constant of the pairwise inverse-square law, F = G / r².
DEFAULT_G: float = 66_700_000.0

# Separation below which the force law stops growing. The effective distance
# is max(r, DEFAULT_MIN_DISTANCE), so coincident bodies never produce inf/NaN.
DEFAULT_MIN_DISTANCE: float = 1.0

# Predictor defaults: number of samples, spacing between samples (distance
# units), and the step used when the tracked body is at rest.
DEFAULT_HORIZON: int = 200
DEFAULT_SAMPLING_DISTANCE: float = 10.0
DEFAULT_FALLBACK_DT: float = 1 / 60

# Speeds below this are treated as zero by the predictor.
SPEED_EPS: float = 1e-9
