"""Job file configuration: schema, loading and conversion to domain objects."""

from cutlist.application.config.adapter import (
    config_to_cuts,
    config_to_job,
    config_to_stock,
)
from cutlist.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutlist.application.config.schema import (
    MAX_ENTRIES,
    MAX_KERF,
    MAX_UNITS_PER_ENTRY,
    SUPPORTED_VERSIONS,
    CutConfig,
    CutListJobConfig,
    StockConfig,
)

__all__ = [
    # Schema
    "CutConfig",
    "CutListJobConfig",
    "StockConfig",
    "MAX_ENTRIES",
    "MAX_KERF",
    "MAX_UNITS_PER_ENTRY",
    "SUPPORTED_VERSIONS",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapters
    "config_to_cuts",
    "config_to_job",
    "config_to_stock",
]
