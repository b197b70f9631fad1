# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

"""argparse helpers shared by the coapctl command line

These are not particular to CoAP."""

import argparse


class ActionNoYes(argparse.Action):
    """Simple action that automatically manages --{,no-}something style options"""

    # adapted from Omnifarious's code on
    # https://stackoverflow.com/questions/9234258/in-python-argparse-is-it-possible-to-have-paired-no-something-something-arg#9236426
    def __init__(self, option_strings, dest, default=True, required=False, help=None):
        assert len(option_strings) == 1, "ActionNoYes takes only one option name"
        assert option_strings[0].startswith("--"), (
            "ActionNoYes options must start with --"
        )
        super().__init__(
            ["--" + option_strings[0][2:], "--no-" + option_strings[0][2:]],
            dest,
            nargs=0,
            const=None,
            default=default,
            required=required,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, not option_string.startswith("--no-"))


def comma_separated(value):
    """argparse type for lists given as a single comma separated argument.

    Whitespace around the items is ignored, as are empty items.

    >>> comma_separated("application/json, 60")
    ['application/json', '60']
    >>> comma_separated("")
    []
    """
    return [item.strip() for item in value.split(",") if item.strip()]


def positive_seconds(value):
    """argparse type for timeouts given in seconds"""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("not a number of seconds: %r" % value)
    if not seconds > 0:
        raise argparse.ArgumentTypeError("timeout must be positive")
    return seconds
