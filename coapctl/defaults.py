# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""This module contains the default values coapctl falls back to when the
command line does not say otherwise.

The ``_missing_modules`` functions are helpers for inspecting what is
reasonable to expect to work. They influence default values (eg. whether log
output is colored), but should not be used in the rest of the code for
feature checking.
"""

import os

from aiocoap.numbers.constants import COAP_PORT

from .util.cli import positive_seconds

#: Port used when a URL does not name one (CoAP over UDP)
DEFAULT_PORT = COAP_PORT

#: Seconds to wait for a response
DEFAULT_TIMEOUT = 1


def get_default_timeout(*, use_env=True):
    """Return the receive timeout in seconds.

    If a ``COAPCTL_TIMEOUT`` environment variable is set, it is read as a
    positive number of seconds (raising :class:`argparse.ArgumentTypeError`
    otherwise, like ``--timeout`` does); otherwise, :data:`DEFAULT_TIMEOUT` is
    used."""

    if use_env and "COAPCTL_TIMEOUT" in os.environ:
        return positive_seconds(os.environ["COAPCTL_TIMEOUT"])
    return DEFAULT_TIMEOUT


def color_missing_modules():
    """Return a list of modules that are missing in order to produce colored
    log output"""
    missing = []
    try:
        import colorlog  # noqa: F401
    except ImportError:
        missing.append("colorlog")
    return missing
