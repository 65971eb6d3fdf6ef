"""
Deployment settings. Every value can be overridden by an environment variable.
"""

import os

DATA_SOURCE = os.getenv("MOBILITY_DATA_SOURCE", "data/data_vehicle.csv").strip()

# "coarse": student / employee / prof, everything else is excluded
# "status": raw employment status codes, nothing is excluded
GROUP_SCHEME = os.getenv("MOBILITY_GROUP_SCHEME", "coarse").strip()

FETCH_TIMEOUT_SECS = int(os.getenv("MOBILITY_FETCH_TIMEOUT_SECS", "30"))

CSV_SEP = ","
