"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
Settings fall back to these values when no environment override is present.
"""

# Session size bounds enforced by the day splitter
MAX_EXERCISES_PER_SESSION = 6
MIN_EXERCISES_PER_SESSION = 4

# Iteration caps for the rebalancing and minimum-fill passes.
# Empirical safety valves: tested against catalogs of tens of exercises.
REBALANCE_MAX_ITERATIONS = 10
MINIMUM_FILL_MAX_ITERATIONS = 50

# Exercises picked per targeted muscle group during initial selection
EXERCISES_PER_MUSCLE = 2

# Generated programs run for a fixed number of weeks
DEFAULT_PROGRAM_DURATION_WEEKS = 8

# Recovery spacing only applies to splits with back-to-back training days
RECOVERY_SPACING_MIN_FREQUENCY = 4

# Supported weekly frequencies
MIN_FREQUENCY = 2
MAX_FREQUENCY = 5
