"""Global constants.

Default values shared by the compare engine, stack capture and asserter.
"""

# ============================================================
# Stack capture
# ============================================================

# Maximum frames read per capture; also caps the raw text length
DEFAULT_BUFFER_SIZE = 2048

# Frames skipped beyond capture() itself (Asserter._fail + the assertion method)
DEFAULT_SKIP_FRAMES = 2

# Frames shown per failure message
DEFAULT_FRAME_LIMIT = 10

# Only frames from files with this suffix survive filtering
SOURCE_SUFFIX = ".py"


# ============================================================
# Numeric comparison
# ============================================================

# Absolute tolerance for compare_numeric (float representation error)
NUMERIC_EPSILON = 1e-9
