# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Container module for the command line utility bundled with coapctl.

These modules are not considered to be a part of the coapctl API, and are
subject to change even between minor versions.
"""
