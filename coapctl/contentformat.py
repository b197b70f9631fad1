# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""Translation of user supplied content format tokens into entries of the
CoAP Content-Formats registry

A token is either the registry number of a content format or one of a few
media type strings:

>>> int(translate("50"))
50
>>> translate("application/json") == translate("50")
True
>>> as_u16(translate("text/plain"))
0
"""

import re

from aiocoap.numbers import ContentFormat

from .error import UnknownContentFormatCode, UnsupportedContentFormatString

_numeric = re.compile("[+]?[0-9]+")

# Media types are given in the form the registry uses, so that the numbers are
# taken from the registry rather than repeated here.
_registry_media_types = {
    "text/plain": "text/plain; charset=utf-8",
    "application/json": "application/json",
    "application/xml": "application/xml",
    "application/cbor": "application/cbor",
    "application/octet-stream": "application/octet-stream",
}

#: Media type strings accepted as tokens, and the content formats they stand for
by_token = {
    token: ContentFormat.by_media_type(media_type)
    for (token, media_type) in _registry_media_types.items()
}


def translate(token: str) -> ContentFormat:
    """Find the registered content format described by a token.

    Numeric tokens (digits with an optional leading ``+``) need to be
    registered content format numbers; anything else is matched case sensitively against :data:`by_token`."""

    if _numeric.fullmatch(token):
        number = int(token)
        if number > 0xFFFF:
            raise UnknownContentFormatCode(token)
        cf = ContentFormat(number)
        if not cf.is_known():
            raise UnknownContentFormatCode(token)
        return cf

    try:
        return by_token[token]
    except KeyError:
        raise UnsupportedContentFormatString(token) from None


def translate_list(tokens):
    """Translate all tokens of a sequence, keeping their order"""
    return [translate(t) for t in tokens]


def as_u16(cf: ContentFormat) -> int:
    """The value a content format has in a Content-Format or Accept option"""
    return int(cf)
