"""Default configuration values for scrollwindow."""

from __future__ import annotations

import os
from typing import Final

# Delay after the last scroll activity before the window reports that
# scrolling has finished and drops its cached item placements.
DEBOUNCE_INTERVAL_MS: Final[int] = 150

# Reference frame length used to scale the measured scroll delta when
# ``use_adjusted_offsets`` is enabled.  Tuned for a 60 Hz display.
DRIFT_REFERENCE_INTERVAL_MS: Final[float] = 16.0

DEFAULT_OVERSCAN_COUNT: Final[int] = 2
DEFAULT_ESTIMATED_ITEM_SIZE: Final[float] = 50.0

# Cross-axis extent reported by item placements; items always fill the
# viewport across the scroll axis.
FILL: Final[str] = "100%"

# ``SCROLLWINDOW_ENV=production`` skips configuration validation entirely.
ENVIRONMENT: Final[str] = os.environ.get("SCROLLWINDOW_ENV", "development")
VALIDATION_ENABLED: bool = ENVIRONMENT != "production"
