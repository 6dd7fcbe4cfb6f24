"""
System Parameters
=================
Logger names and debug switches.
"""

import os

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = 'fabrik2d'
"""Root logger of the solver package (no handlers are installed)"""

DEBUG_ENV_VAR = 'DEBUG_FABRIK'
"""Set to '1' to log per-solve diagnostics at DEBUG level"""


def debug_enabled() -> bool:
    """True when per-solve diagnostics were requested through the environment."""
    return os.environ.get(DEBUG_ENV_VAR) == '1'
