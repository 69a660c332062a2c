"""Package for handling of Icgem data


"""

# Import relevant classes from harmonic_coeffs.py
from icgem.data.harmonic_coeffs import GravityField  # noqa
from icgem.data.harmonic_coeffs import HarmonicCoeffs  # noqa

# Do not support *-imports
__all__ = []
