# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""
Errors that end a coapctl invocation

All of them are terminal: nothing in coapctl retries or recovers from them;
the command line tool reports them in a single line and exits.
"""

import asyncio
from typing import Optional

import aiocoap.error


class Error(Exception):
    """
    Base exception for all errors raised by coapctl
    """


class HelpfulError(Error):
    def __str__(self):
        """User presentable string. It is printed after an "ERROR: " prefix,
        so it should not repeat that."""
        return type(self).__name__

    def extra_help(self, hints={}) -> Optional[str]:
        """Information printed by the command line tool when the error message
        itself may be insufficient to point the user in the right direction

        The `hints` dictionary may be populated with context that the caller
        has; the implementation must tolerate their absence. Currently
        established keys:

        * original_uri (str): URL that was attempted to access
        """
        return None


class InvalidUrl(ValueError, HelpfulError):
    """The given string can not be parsed as a URL at all"""

    def __str__(self):
        if len(self.args) > 1:
            return f"url error: {self.args[1]} ({self.args[0]!r})"
        elif self.args:
            return f"url error: {self.args[0]!r}"
        else:
            return f"url error: {self.__cause__}"

    def extra_help(self, hints={}):
        return "URLs need to be given with a scheme and a host, eg. 'coap://example.com/path'."


class InvalidHost(ValueError, HelpfulError):
    """The URL parses, but has no usable host component"""

    def __str__(self):
        if self.args:
            return f"host error: no host in {self.args[0]!r}"
        return "host error"

    def extra_help(self, hints={}):
        return "IPv6 addresses need to be put in square brackets, eg. 'coap://[2001:db8::1]/path'."


class ContentFormatError(ValueError, HelpfulError):
    """A content format token could not be turned into a registered content
    format"""


class UnsupportedContentFormatString(ContentFormatError):
    def __str__(self):
        return f"unsupported content format string: {self.args[0]}"

    def extra_help(self, hints={}):
        from .contentformat import by_token

        return "Known content format strings are %s; other formats can be given by their number." % ", ".join(
            by_token
        )


class UnknownContentFormatCode(ContentFormatError):
    def __str__(self):
        return f"invalid content format number: {self.args[0]}"


class MissingPayloadSource(HelpfulError):
    """A POST or PUT was requested without anything to send"""

    def __str__(self):
        return "must specify either data string or file path"


class InvalidDataFile(HelpfulError):
    """The file given as payload source is not a regular file, or can not be
    read"""

    def __str__(self):
        if self.__cause__ is not None:
            return f"could not read data file {self.args[0]}: {self.__cause__}"
        return f"path must be file: {self.args[0]}"


class TransportFailure(HelpfulError):
    """Sending the request or receiving its response failed.

    The original exception (typically an :class:`aiocoap.error.NetworkError`,
    an :class:`OSError` or a timeout) is available as ``__cause__``."""

    def __str__(self):
        if self.args:
            return self.args[0]
        cause = self.__cause__
        text = str(cause) if cause is not None else ""
        # Some transport errors carry no message at all
        text = text or repr(cause)
        if getattr(cause, "__cause__", None) is not None:
            text += " (%s)" % (cause.__cause__,)
        return text

    def extra_help(self, hints={}):
        if isinstance(self.__cause__, aiocoap.error.HelpfulError):
            return self.__cause__.extra_help(hints)
        if isinstance(self.__cause__, asyncio.TimeoutError):
            return "No response was received in time. Check whether a CoAP server is running at the address, or try a larger --timeout."
        return None
