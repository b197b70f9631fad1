# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Module that contains the various test scenarios.

Can be used most easily through `python3 -m unittest` (which just runs the
tests) or `pytest`. None of the tests needs network access; the CoAP
transport is replaced with the fakes from :mod:`tests.fixtures`."""
