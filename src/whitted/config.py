"""Configuration for whitted read from environment variables."""

from __future__ import annotations

import os

# Rendering settings
RECURSION_DEPTH = int(os.getenv("WHITTED_RECURSION_DEPTH", "5"))
RENDER_WORKERS = int(os.getenv("WHITTED_RENDER_WORKERS", str(os.cpu_count() or 1)))

# Anti-aliasing settings. A value of 0 or below removes the adaptive sample cap.
AA_MAX_SAMPLES: int | None = int(os.getenv("WHITTED_AA_MAX_SAMPLES", "4096"))
if AA_MAX_SAMPLES <= 0:
    AA_MAX_SAMPLES = None

# Logging settings
LOG_LEVEL = os.getenv("WHITTED_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("WHITTED_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
