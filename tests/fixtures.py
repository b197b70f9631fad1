# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Test fixtures that are not test specific"""

import asyncio

import aiocoap


class FakeRequest:
    """Stand-in for aiocoap's request handle; only ``.response`` is used"""

    def __init__(self, response):
        self.response = response


class FakeContext:
    """Client context that answers every request with a fixed response (or
    fails it with a fixed exception) without touching the network.

    Sent requests are recorded in :attr:`sent`."""

    def __init__(self, response=None, *, exception=None, delay=0):
        if response is None and exception is None:
            response = aiocoap.Message(code=aiocoap.CONTENT)
        self.response = response
        self.exception = exception
        self.delay = delay
        self.sent = []
        self.is_shut_down = False

    def request(self, message):
        self.sent.append(message)
        return FakeRequest(self._respond())

    async def _respond(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.exception is not None:
            raise self.exception
        return self.response

    async def shutdown(self):
        self.is_shut_down = True

    def factory(self):
        """A context_factory that hands out this very context"""

        async def create_client_context():
            return self

        return create_client_context


async def unreachable_context_factory():
    raise AssertionError("No context should have been created")
