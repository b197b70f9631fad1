# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""
coapctl is a command line client for the `Constrained Application Protocol`_
built on aiocoap_.

It sends a single GET, POST, PUT or DELETE request to a CoAP URL, and takes
care of building the request's options (Uri-Host, Uri-Path, Uri-Query,
Content-Format, Accept) from the URL and from human readable content format
names. Transport is left to aiocoap.

.. _`Constrained Application Protocol`: http://coap.technology/
.. _aiocoap: https://aiocoap.readthedocs.io/

Module contents
---------------

This root module re-exports the steps a request goes through:
:func:`.resolve` (URL to its parts), :func:`.translate` (content format
tokens to registry entries), :func:`.assemble` (building the request) and
:func:`.connect` (sending it).
"""

from .uri import resolve, ResolvedUrl
from .contentformat import translate
from .request import assemble, Get, Post, Put, Delete
from .dispatch import connect

__all__ = [
    "resolve",
    "ResolvedUrl",
    "translate",
    "assemble",
    "Get",
    "Post",
    "Put",
    "Delete",
    "connect",
]
