"""Config settings – MetricsSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_metrics.config.settings.base import Settings
from mp_metrics.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MetricsSettings(Settings):
    """Runtime knobs for families and the library's own logging.

    Environment variables: ``MP_METRICS_LOG_LEVEL``,
    ``MP_METRICS_CARDINALITY_WARNING_THRESHOLD``.
    """

    _prefix: ClassVar[str] = "MP_METRICS"

    log_level: str = "INFO"
    # 0 disables the warning
    cardinality_warning_threshold: int = 0

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.cardinality_warning_threshold < 0:
            raise InvalidSettingValueError(
                "cardinality_warning_threshold",
                self.cardinality_warning_threshold,
                "must be >= 0",
            )


__all__ = ["MetricsSettings"]
