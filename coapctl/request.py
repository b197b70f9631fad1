# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Assembly of CoAP requests

The request methods are a closed set of variants. GET and DELETE only carry
the content formats acceptable in the response; POST and PUT additionally
carry a payload and optionally its content format:

>>> print(Get().code)
GET
>>> Put(b"on").payload
b'on'

:func:`assemble` combines a method with a resolved URL into an
:class:`aiocoap.Message` that is ready to be handed to a transport.
"""

from collections import namedtuple

from aiocoap import Message
from aiocoap.numbers.codes import Code
from aiocoap.numbers.optionnumbers import OptionNumber

_Bodyless = namedtuple("_Bodyless", ("accept",), defaults=((),))
_WithBody = namedtuple(
    "_WithBody", ("payload", "content_format", "accept"), defaults=(None, ())
)


class Get(_Bodyless):
    """Retrieve a representation of a resource"""

    code = Code.GET


class Delete(_Bodyless):
    """Request that the resource be deleted"""

    code = Code.DELETE


class Post(_WithBody):
    """Request that the submitted payload be processed"""

    code = Code.POST


class Put(_WithBody):
    """Request that the resource be updated or created with the payload"""

    code = Code.PUT


#: All request variants by their command name
methods = {
    "get": Get,
    "post": Post,
    "put": Put,
    "delete": Delete,
}


def path_segments(path):
    """Split a URL path into the values of its Uri-Path options.

    Segments are taken as they are written in the URL. Only the empty part
    before the leading slash is skipped, so a bare slash gives one empty
    segment while an empty path gives none.

    >>> path_segments("/sensors/temp")
    ('sensors', 'temp')
    >>> path_segments("/")
    ('',)
    >>> path_segments("")
    ()
    >>> path_segments("/dir/")
    ('dir', '')
    """
    if not path:
        return ()
    return tuple(path.split("/")[1:])


def assemble(resolved, method, *, set_uri_host=True):
    """Build a request for the URL parts in `resolved` (a
    :class:`coapctl.uri.ResolvedUrl`) using the given method variant.

    * The host goes into the Uri-Host option unless ``set_uri_host=False``.
    * Every path segment becomes one Uri-Path option.
    * The raw query string, if any, becomes a single Uri-Query option; it is
      not split at ``&``.
    * Every entry of the method's ``accept`` list becomes one Accept option, in
      order and without deduplication.
    * POST and PUT set their Content-Format option (if given) and payload.

    The request's remote is not set; see :mod:`coapctl.dispatch`.
    """
    request = Message(code=method.code)

    if set_uri_host:
        request.opt.uri_host = resolved.host
    request.opt.uri_path = path_segments(resolved.path)
    if resolved.query is not None:
        request.opt.uri_query = (resolved.query,)

    if isinstance(method, _WithBody):
        if method.content_format is not None:
            request.opt.content_format = method.content_format
        request.payload = method.payload

    # Accept is not repeatable per RFC7252; still, one option is sent per
    # requested format
    for cf in method.accept:
        request.opt.add_option(OptionNumber.ACCEPT.create_option(value=cf))

    return request
