# SPDX-FileCopyrightText: Christian Amsüss and the aiocoap contributors
#
# SPDX-License-Identifier: MIT

import unittest

import aiocoap
from aiocoap.numbers import ContentFormat
from aiocoap.numbers.optionnumbers import OptionNumber

from coapctl.contentformat import translate_list
from coapctl.request import assemble, path_segments, methods, Get, Post, Put, Delete
from coapctl.uri import resolve


def option_values(message, number):
    return [o.value for o in message.opt.get_option(number)]


class TestMethods(unittest.TestCase):
    def test_codes(self):
        self.assertEqual(Get().code, aiocoap.GET)
        self.assertEqual(Post(b"").code, aiocoap.POST)
        self.assertEqual(Put(b"").code, aiocoap.PUT)
        self.assertEqual(Delete().code, aiocoap.DELETE)

    def test_fields(self):
        self.assertEqual(Get._fields, ("accept",))
        self.assertEqual(Delete._fields, ("accept",))
        self.assertEqual(Post._fields, ("payload", "content_format", "accept"))
        self.assertEqual(Put._fields, ("payload", "content_format", "accept"))

    def test_by_name(self):
        self.assertEqual(
            {name: m.code for (name, m) in methods.items()},
            {
                "get": aiocoap.GET,
                "post": aiocoap.POST,
                "put": aiocoap.PUT,
                "delete": aiocoap.DELETE,
            },
        )


class TestPathSegments(unittest.TestCase):
    def test_segments(self):
        self.assertEqual(path_segments(""), ())
        self.assertEqual(path_segments("/"), ("",))
        self.assertEqual(path_segments("/a"), ("a",))
        self.assertEqual(path_segments("/sensors/temp"), ("sensors", "temp"))
        self.assertEqual(path_segments("/a//b/"), ("a", "", "b", ""))

    def test_not_decoded(self):
        self.assertEqual(path_segments("/%7Esensors"), ("%7Esensors",))


class TestAssemble(unittest.TestCase):
    def test_get_with_accept(self):
        accept = translate_list(["application/json", "application/cbor"])
        request = assemble(resolve("coap://localhost:5683/sensors/temp"), Get(accept))

        self.assertEqual(request.code, aiocoap.GET)
        self.assertEqual(request.opt.uri_host, "localhost")
        self.assertEqual(request.opt.uri_path, ("sensors", "temp"))
        self.assertEqual(request.opt.uri_query, ())
        self.assertEqual(
            [int(v) for v in option_values(request, OptionNumber.ACCEPT)], [50, 60]
        )
        self.assertIsNone(request.opt.content_format)
        self.assertEqual(request.payload, b"")

    def test_accept_not_deduplicated(self):
        accept = translate_list(["50", "application/json", "60"])
        request = assemble(resolve("coap://h/"), Delete(accept))
        self.assertEqual(
            [int(v) for v in option_values(request, OptionNumber.ACCEPT)],
            [50, 50, 60],
        )

    def test_put_with_content_format(self):
        method = Put(b"on", ContentFormat.TEXT)
        request = assemble(resolve("coap://10.0.0.1/led"), method)

        self.assertEqual(request.code, aiocoap.PUT)
        self.assertEqual(request.payload, b"on")
        self.assertEqual(
            [int(v) for v in option_values(request, OptionNumber.CONTENT_FORMAT)], [0]
        )
        self.assertEqual(option_values(request, OptionNumber.ACCEPT), [])
        self.assertEqual(request.opt.uri_host, "10.0.0.1")
        self.assertEqual(request.opt.uri_path, ("led",))

    def test_post_without_content_format(self):
        request = assemble(resolve("coap://h/x"), Post(b"\x00\xff"))
        self.assertEqual(request.payload, b"\x00\xff")
        self.assertEqual(option_values(request, OptionNumber.CONTENT_FORMAT), [])

    def test_query_is_one_option(self):
        request = assemble(
            resolve("coap://h/p?query=string&argument=x%26y"), Get()
        )
        self.assertEqual(request.opt.uri_query, ("query=string&argument=x%26y",))

    def test_empty_query(self):
        request = assemble(resolve("coap://h/p?"), Get())
        self.assertEqual(request.opt.uri_query, ("",))

    def test_ipv6_host(self):
        request = assemble(resolve("coap://[::1]:5683/a"), Get())
        self.assertEqual(request.opt.uri_host, "::1")
        self.assertEqual(request.opt.uri_path, ("a",))

    def test_root_path(self):
        request = assemble(resolve("coap://h"), Get())
        self.assertEqual(request.opt.uri_path, ())

        request = assemble(resolve("coap://h/"), Get())
        self.assertEqual(request.opt.uri_path, ("",))

    def test_root_path_wire_format(self):
        request = assemble(resolve("coap://h/"), Get())
        request.mtype = aiocoap.CON
        request.mid = 0

        self.assertEqual(
            request.encode(),
            bytes(
                (
                    0x40, 0x01, 0x00, 0x00,  # CON GET, MID 0, no token
                    0x31, ord("h"),  # Uri-Host
                    0x80,  # Uri-Path, empty
                )
            ),
        )

    def test_no_uri_host(self):
        request = assemble(resolve("coap://h/p"), Get(), set_uri_host=False)
        self.assertIsNone(request.opt.uri_host)
        self.assertEqual(request.opt.uri_path, ("p",))

    def test_remote_left_unset(self):
        request = assemble(resolve("coap://h/p"), Get())
        self.assertIsNone(request.remote)

    def test_wire_format(self):
        accept = translate_list(["application/json", "application/cbor"])
        request = assemble(resolve("coap://h/a"), Get(accept))
        request.mtype = aiocoap.CON
        request.mid = 0

        self.assertEqual(
            request.encode(),
            bytes(
                (
                    0x40, 0x01, 0x00, 0x00,  # CON GET, MID 0, no token
                    0x31, ord("h"),  # Uri-Host
                    0x81, ord("a"),  # Uri-Path
                    0x61, 50,  # Accept: application/json
                    0x01, 60,  # Accept: application/cbor
                )
            ),
        )
