# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""coapctl is a command-line tool for sending single requests to CoAP servers"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from aiocoap.numbers.optionnumbers import OptionNumber

import coapctl.meta
from coapctl import contentformat, defaults, dispatch, error, request, uri
from coapctl.util.cli import ActionNoYes, comma_separated, positive_seconds

log = logging.getLogger("coap.coapctl")


def augment_parser_for_global(p):
    p.add_argument(
        "-v",
        "--verbose",
        help="Increase the debug output",
        action="count",
    )
    p.add_argument(
        "-q",
        "--quiet",
        help="Decrease the debug output",
        action="count",
    )
    p.add_argument(
        "--version", action="version", version="%(prog)s " + coapctl.meta.version
    )
    p.add_argument(
        "--color",
        help="Color log output (default on TTYs if colorlog is installed)",
        default=None,
        action=ActionNoYes,
    )
    p.add_argument(
        "--no-set-hostname",
        help="Suppress transmission of Uri-Host",
        dest="set_hostname",
        action="store_false",
        default=True,
    )


def augment_parser_for_timeout(p, default):
    help = "Receive timeout in seconds"
    if default is not argparse.SUPPRESS:
        help += " (default: %(default)s)"
    p.add_argument(
        "--timeout",
        help=help,
        metavar="SECONDS",
        type=positive_seconds,
        default=default,
    )


def augment_parser_for_accept(p):
    p.add_argument(
        "--accept",
        help="Acceptable content formats (comma-separated) for the response",
        metavar="FORMATS",
        type=comma_separated,
        action="extend",
        default=[],
    )


def augment_parser_for_payload(p):
    p.add_argument(
        "--content-format",
        help="Content format of the submitted data, as a number or media type",
        metavar="FORMAT",
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-d",
        "--data",
        help="Resource data",
    )
    source.add_argument(
        "-f",
        "--file",
        help="Path to file containing resource data",
        type=Path,
    )


def build_parser():
    p = argparse.ArgumentParser(description=__doc__)
    augment_parser_for_global(p)
    try:
        default_timeout = defaults.get_default_timeout()
    except argparse.ArgumentTypeError as e:
        p.error("COAPCTL_TIMEOUT: %s" % e)
    augment_parser_for_timeout(p, default_timeout)
    p.add_argument("url", help="CoAP resource URL")

    commands = p.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, help_text, with_payload in (
        ("get", "Retrieves a representation of a resource", False),
        ("post", "Requests that the submitted data be processed", True),
        (
            "put",
            "Requests that the resource be updated or created with the submitted data",
            True,
        ),
        ("delete", "Requests that the resource be deleted", False),
    ):
        sub = commands.add_parser(name, help=help_text, description=help_text)
        augment_parser_for_accept(sub)
        if with_payload:
            augment_parser_for_payload(sub)
        # --timeout is accepted after the command too; SUPPRESS keeps an
        # absent one from overriding the global value
        augment_parser_for_timeout(sub, argparse.SUPPRESS)

    return p


def configure_logging(verbosity, color):
    if color is None:
        color = sys.stderr.isatty() and not defaults.color_missing_modules()
    if color:
        import colorlog

        colorlog.basicConfig()
    else:
        logging.basicConfig()

    if verbosity <= -2:
        logging.getLogger("coap").setLevel(logging.CRITICAL + 1)
    elif verbosity == -1:
        logging.getLogger("coap").setLevel(logging.ERROR)
    elif verbosity == 0:
        logging.getLogger("coap").setLevel(logging.WARNING)
    elif verbosity == 1:
        logging.getLogger("coap").setLevel(logging.WARNING)
        logging.getLogger("coap.coapctl").setLevel(logging.INFO)
    elif verbosity == 2:
        logging.getLogger("coap").setLevel(logging.INFO)
    else:
        logging.getLogger("coap").setLevel(logging.DEBUG)

    log.debug("Logging configured.")


_described_options = (
    OptionNumber.URI_HOST,
    OptionNumber.URI_PATH,
    OptionNumber.URI_QUERY,
    OptionNumber.CONTENT_FORMAT,
    OptionNumber.ACCEPT,
)


def message_to_text(m, direction):
    """Describe a request or response for the log, one line at a time.

    The options coapctl sets are shown by name, with content formats as their
    numbers; any other option only by its number."""
    peer = "(unknown)" if m.remote is None else m.remote.hostinfo
    yield f"{m.code} {direction} {peer}"

    if m.opt.uri_host is not None:
        yield f"Uri-Host: {m.opt.uri_host}"
    if m.opt.uri_path:
        yield "Uri-Path: /" + "/".join(m.opt.uri_path)
    for query in m.opt.uri_query:
        yield f"Uri-Query: {query}"
    if m.opt.content_format is not None:
        yield f"Content-Format: {contentformat.as_u16(m.opt.content_format)}"
    for accept in m.opt.get_option(OptionNumber.ACCEPT):
        yield f"Accept: {contentformat.as_u16(accept.value)}"

    others = sorted(
        {
            int(o.number)
            for o in m.opt.option_list()
            if o.number not in _described_options
        }
    )
    if others:
        yield "Other options: " + ", ".join(str(n) for n in others)

    if m.payload:
        yield f"Payload: {len(m.payload)} byte(s)"
    else:
        yield "No payload"


def load_data_file(path):
    if not path.is_file():
        raise error.InvalidDataFile(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise error.InvalidDataFile(path) from e


def build_method(options):
    """Create the request method variant described by the parsed command line.

    Everything that can fail without the network (data sources, content
    format tokens) fails here."""
    method = request.methods[options.command]

    if options.command in ("get", "delete"):
        return method(accept=contentformat.translate_list(options.accept))

    if options.data is not None:
        # the argument's bytes as given, even where they are not UTF-8
        payload = os.fsencode(options.data)
    elif options.file is not None:
        payload = load_data_file(options.file)
    else:
        raise error.MissingPayloadSource()

    if options.content_format is not None:
        content_format = contentformat.translate(options.content_format)
    else:
        content_format = None

    return method(
        payload=payload,
        content_format=content_format,
        accept=contentformat.translate_list(options.accept),
    )


async def single_request(options, *, context_factory=None):
    resolved = uri.resolve(options.url)
    method = build_method(options)
    coap_request = request.assemble(
        resolved, method, set_uri_host=options.set_hostname
    )
    for cf in method.accept:
        log.debug("Accepting content format %d", contentformat.as_u16(cf))

    print(method.code, options.url, file=sys.stderr)

    async with await dispatch.connect(
        resolved, options.timeout, context_factory=context_factory
    ) as connection:
        log.info("Sending request:")
        coap_request.remote = connection.remote
        for line in message_to_text(coap_request, "to"):
            log.info(line)

        response = await connection.send(coap_request)

    log.info("Received response:")
    for line in message_to_text(response, "from"):
        log.info(line)

    print(dispatch.describe_code(response), file=sys.stderr)
    print(dispatch.decode_payload(response))


async def main(args=None, *, context_factory=None):
    if args is None:
        args = sys.argv[1:]

    parser = build_parser()
    options = parser.parse_args(args)

    configure_logging((options.verbose or 0) - (options.quiet or 0), options.color)

    try:
        await single_request(options, context_factory=context_factory)
    except error.Error as e:
        print("ERROR: %s" % e, file=sys.stderr)
        if isinstance(e, error.HelpfulError) and options.verbose:
            extra_help = e.extra_help(hints=dict(original_uri=options.url))
            if extra_help:
                print("Debugging hint:", extra_help, file=sys.stderr)
        sys.exit(1)


def sync_main(args=None):
    try:
        asyncio.run(main(args=args))
    except KeyboardInterrupt:
        sys.exit(3)


if __name__ == "__main__":
    sync_main()
