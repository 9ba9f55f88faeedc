from .callrate import filter_callrate
from .monomorphs import filter_monomorphs
from .metrics import recalc_metrics, utils_callrate, monomorphic_loci

__all__ = [
    'filter_callrate', 'filter_monomorphs', 'recalc_metrics', 'utils_callrate',
    'monomorphic_loci'
]
