"""Configuration constants for the reporting pipeline."""
from __future__ import annotations

import os

# Width of the left-justified label column in the text report
LABEL_WIDTH: int = int(os.getenv("REPORT_LABEL_WIDTH", "11"))

# Maximum comments listed per category when comments are rendered
MAX_COMMENTS: int = int(os.getenv("REPORT_MAX_COMMENTS", "50"))

# Legacy NPS policy: count absent/unparseable recommendation answers as
# detractors instead of leaving them out of the denominator
COUNT_MISSING_AS_DETRACTOR: bool = (
    os.getenv("REPORT_COUNT_MISSING_AS_DETRACTOR", "false").lower() == "true"
)
