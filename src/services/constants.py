"""
Constants shared by the cycle tracking services.
"""

# Identifier of the single entry collection kept per store
DEFAULT_COLLECTION_ID = "cycleTrackerData"

# Minimum number of entries before cycles can be projected
MIN_ENTRIES_FOR_PREDICTION = 3

# Number of future cycles projected per prediction request
PREDICTION_HORIZON = 12

SECONDS_PER_DAY = 24 * 60 * 60
