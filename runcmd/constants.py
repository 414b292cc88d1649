"""
Centralized constants for runcmd.
"""

# Reported when the child has no exit status (terminated by a signal)
INTERRUPTED_EXIT_CODE = -1
INTERRUPTED_MESSAGE = "Interrupted! in RunCmd"

# Captured output is decoded strictly with this codec
OUTPUT_ENCODING = "utf-8"
