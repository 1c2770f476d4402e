import os
import logging


logger = logging.getLogger(__name__)


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


def getint(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(
            f"Ignoring {name}={value!r}: not an integer. "
            f"Using default {default}."
        )
        return default


# Number of decimal digits kept by scalar_multiply() and multiply().
# Rounding keeps float noise from piling up across repeated compositions
# (e.g. cos(pi/2) becomes exactly 0).
ROUND_DIGITS = getint("AFFINEKIT_ROUND_DIGITS", 5)

# Log every composed transform matrix at debug level.
TRACE_TRANSFORMS = getflag("AFFINEKIT_TRACE_TRANSFORMS")
