# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Splitting a CoAP URL into the parts a request is built from

The scheme is not checked against the CoAP schemes; any URL with a host is
resolved structurally:

>>> resolve("coap://[::1]:5683/a")
ResolvedUrl(host='::1', port=5683, path='/a', query=None)
>>> resolve("coap://example.com/sensors?unit=%C2%B0C")
ResolvedUrl(host='example.com', port=None, path='/sensors', query='unit=%C2%B0C')
"""

import re
import urllib.parse
from collections import namedtuple

from .error import InvalidUrl, InvalidHost

#: Host in square brackets, as IPv6 literals are written in URLs
_bracketed_host = re.compile(r"^\[(.*?)]$")


class ResolvedUrl(namedtuple("_ResolvedUrl", ("host", "port", "path", "query"))):
    """Transport components of a URL.

    * :attr:`host`: Host name or IP literal, never empty and never in brackets
    * :attr:`port`: Port number given in the URL, or None
    * :attr:`path`: Path as written in the URL; may be empty
    * :attr:`query`: Raw (still percent-encoded) query string, or None if the
      URL has no ``?``
    """


def _split_host(netloc):
    """Extract the host part of a netloc, keeping brackets of IP literals

    >>> _split_host("user@[::1]:1234")
    '[::1]'
    >>> _split_host("example.com:5683")
    'example.com'
    """
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport[: hostport.find("]") + 1]
    return hostport.partition(":")[0]


def resolve(url: str) -> ResolvedUrl:
    """Parse a URL into a :class:`ResolvedUrl`.

    Raises :class:`InvalidUrl` if the string is not a URL, and
    :class:`InvalidHost` if it does not contain a host."""

    try:
        parsed = urllib.parse.urlsplit(url)
        # Accessing the port validates it
        port = parsed.port
    except ValueError as e:
        raise InvalidUrl(url, str(e)) from e

    if not parsed.scheme:
        raise InvalidUrl(url, "relative URL without a scheme")

    host = _bracketed_host.sub(r"\1", _split_host(parsed.netloc))
    if not host:
        raise InvalidHost(url)

    if "?" in url.partition("#")[0]:
        query = parsed.query
    else:
        query = None

    return ResolvedUrl(host, port, parsed.path, query)
