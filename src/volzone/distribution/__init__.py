"""Daily return distribution."""

from volzone.distribution.builder import (
    BIN_WIDTH,
    bin_key,
    build_distribution,
    return_changes,
    sigma_markers,
)
from volzone.distribution.models import DistributionBin, DistributionResult, SigmaMarker

__all__ = [
    "BIN_WIDTH",
    "DistributionBin",
    "DistributionResult",
    "SigmaMarker",
    "bin_key",
    "build_distribution",
    "return_changes",
    "sigma_markers",
]
