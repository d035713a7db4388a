from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from unittest import TestCase

from ..serializers.json import JSONObjectSerializer, compactJSON


@dataclass
class Account:
    owner: str
    balance: float


@dataclass
class Lease:
    holder: str
    term: timedelta


class CompactJSONTests(TestCase):
    def test_noWhitespace(self) -> None:
        self.assertEqual(compactJSON({"a": [1, 2]}), '{"a":[1,2]}')

    def test_unicodeUnescaped(self) -> None:
        self.assertEqual(compactJSON("été"), '"été"')

    def test_durations(self) -> None:
        self.assertEqual(
            compactJSON({"every": timedelta(seconds=5)}),
            '{"every":"0h0m5s0ms"}',
        )


class JSONObjectSerializerTests(TestCase):
    def setUp(self) -> None:
        self.serializer = JSONObjectSerializer()

    def test_none(self) -> None:
        self.assertIs(self.serializer.toBytes(None), None)
        self.assertIs(self.serializer.toString(None), None)

    def test_textIsRaw(self) -> None:
        self.assertEqual(self.serializer.toBytes("hi"), b"hi")
        self.assertEqual(self.serializer.toString("hi"), "hi")
        self.assertEqual(self.serializer.fromBytes(b"hi", str), "hi")

    def test_bytesAreRaw(self) -> None:
        self.assertEqual(self.serializer.toBytes(b"\x00\xff"), b"\x00\xff")
        self.assertEqual(
            self.serializer.fromBytes(b"\x00\xff", bytes), b"\x00\xff"
        )

    def test_numbers(self) -> None:
        self.assertEqual(self.serializer.toString(12), "12")
        self.assertEqual(self.serializer.fromBytes(b"12", int), 12)
        self.assertEqual(self.serializer.fromBytes(b"12", float), 12.0)
        self.assertIs(self.serializer.fromBytes(b"false", bool), False)

    def test_dataclass(self) -> None:
        account = Account("alice", 10.5)
        data = self.serializer.toBytes(account)
        self.assertEqual(data, b'{"owner":"alice","balance":10.5}')
        assert data is not None
        self.assertEqual(self.serializer.fromBytes(data, Account), account)

    def test_containers(self) -> None:
        self.assertEqual(
            self.serializer.fromBytes(b'{"a":[1,null]}', dict),
            {"a": [1, None]},
        )

    def test_emptyIsNothing(self) -> None:
        self.assertIs(self.serializer.fromBytes(b"", int), None)

    def test_unserializable(self) -> None:
        with self.assertRaises(TypeError):
            self.serializer.toBytes(object())

    def test_dataclassDurations(self) -> None:
        lease = Lease("bob", timedelta(minutes=90, microseconds=5))
        data = self.serializer.toBytes(lease)
        self.assertEqual(data, b'{"holder":"bob","term":"1h30m0s0ms5us"}')
        assert data is not None
        self.assertEqual(self.serializer.fromBytes(data, Lease), lease)

    def test_dataclassDurationNotText(self) -> None:
        with self.assertRaises(TypeError):
            self.serializer.fromBytes(b'{"holder":"bob","term":60}', Lease)

    def test_dataclassNotObject(self) -> None:
        with self.assertRaises(TypeError):
            self.serializer.fromBytes(b"[1]", Lease)

    def test_bytesNotUTF8AsText(self) -> None:
        """
        Bytes can only be given as text when they are UTF-8.
        """
        with self.assertRaises(ValueError):
            self.serializer.toString(b"\xff\xfe")
