"""
dephealth – dependency health aggregation.

Import path convention::

    from dephealth.health import HealthComponent, Status
    from dephealth.health.factory import open_component
    from dephealth.config import HealthSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
