"""
mp_metrics – Label-keyed metric families.

Import path convention::

    from mp_metrics.metrics import Counter, Family, Histogram, Registry
    from mp_metrics.kernel.errors import LabelCardinalityError
    from mp_metrics.config import EnvSettingsLoader, MetricsSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
