# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Sending an assembled request and reading its response

Transport (UDP, retransmissions, message IDs, tokens, blockwise transfer) is
left to aiocoap. This module only decides where the request goes and how
long to wait for its response, and turns every way this can go wrong into a
:class:`coapctl.error.TransportFailure`.

A typical exchange reads::

    async with await connect(resolved, timeout=1) as connection:
        response = await connection.send(request)
    print(decode_payload(response))
"""

import asyncio
import logging

import aiocoap
import aiocoap.error
from aiocoap.message import UndecidedRemote
from aiocoap.util import hostportjoin

from .defaults import DEFAULT_PORT
from .error import TransportFailure

log = logging.getLogger("coap.coapctl.dispatch")


def target_port(resolved):
    """Port to send to: the one from the URL, or the CoAP default

    >>> from coapctl.uri import resolve
    >>> target_port(resolve("coap://localhost/"))
    5683
    >>> target_port(resolve("coap://localhost:61616/"))
    61616
    """
    if resolved.port is None:
        return DEFAULT_PORT
    return resolved.port


class Connection:
    """An aiocoap client context, together with the one endpoint requests are
    sent to and the time to wait for their responses.

    Connections are created by :func:`connect`; they can be used as
    asynchronous context managers, which shut the context down on exit."""

    def __init__(self, context, remote, timeout):
        self.context = context
        self.remote = remote
        self.timeout = timeout

    def __repr__(self):
        return "<%s to %s://%s, timeout %ss>" % (
            type(self).__name__,
            self.remote.scheme,
            self.remote.hostinfo,
            self.timeout,
        )

    async def send(self, request):
        """Send the request and return the response.

        Exactly one response is awaited; there is no retry beyond what the
        transport does on its own."""

        request.remote = self.remote

        try:
            return await asyncio.wait_for(
                self.context.request(request).response, self.timeout
            )
        except asyncio.TimeoutError as e:
            raise TransportFailure(
                "no response from %s within %s second(s)"
                % (self.remote.hostinfo, self.timeout)
            ) from e
        except (aiocoap.error.Error, OSError) as e:
            raise TransportFailure() from e

    async def shutdown(self):
        await self.context.shutdown()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.shutdown()


async def connect(resolved, timeout, *, context_factory=None):
    """Create a :class:`Connection` to the host and port of `resolved` (a
    :class:`coapctl.uri.ResolvedUrl`).

    The request is always sent as CoAP over UDP; the scheme of the URL is
    not consulted."""

    if context_factory is None:
        context_factory = aiocoap.Context.create_client_context

    remote = UndecidedRemote("coap", hostportjoin(resolved.host, target_port(resolved)))
    log.debug("Creating client context for %s", remote.hostinfo)

    try:
        context = await context_factory()
    except (aiocoap.error.Error, OSError) as e:
        raise TransportFailure() from e

    return Connection(context, remote, timeout)


def decode_payload(response):
    """Payload of a response as text; invalid UTF-8 is replaced rather than
    failing"""
    return response.payload.decode("utf8", errors="replace")


def describe_code(response):
    """Human readable form of the response code, as the transport renders it

    >>> describe_code(aiocoap.Message(code=aiocoap.CONTENT))
    '2.05 Content'
    """
    return str(response.code)
