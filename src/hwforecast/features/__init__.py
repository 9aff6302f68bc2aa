"""src/hwforecast/features/__init__.py"""

from .build_features import harmonic_design_matrix, harmonic_profile, make_seasonal_series, time_index

__all__ = ["harmonic_design_matrix", "harmonic_profile", "make_seasonal_series", "time_index"]
