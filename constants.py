"""
Global constants used throughout the project
"""

# Signed 64-bit integer range accepted by arithmetic helpers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

LOG_FORMAT = "%(levelname)s | %(message)s"
