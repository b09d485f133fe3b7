"""
Integration tests for complete relaxed JSON documents.

Tests run realistic configuration-style documents through the transpiler and
the default codec and compare against values decoded by the json module.
"""

import json
import math
import unittest

import relaxjson

KITCHEN_SINK = """\
// Server configuration
{
  /* identity */
  name: 'edge-proxy',
  "version": "1.2.0",
  description: 'Handles "public" traffic, \\
mostly.',
  quoted: 'It\\'s fine',

  ports: [80, 443, 0x1F90,],     // 0x1F90 == 8080
  ratios: { low: .25, high: 1., neg: -.5, pos: +3, },
  limits: {
    max: Infinity,
    min: -Infinity,
  },
  flags: [true, false, null],
  0xFF: 'hex key',
  $meta: { _internal: 'yes' },
  url: 'https://example.com/a//b',
}
"""


class TestKitchenSinkDocument(unittest.TestCase):
    """A document using every relaxed feature at once."""

    def setUp(self):
        self.result = relaxjson.loads(KITCHEN_SINK)

    def test_strings(self):
        self.assertEqual(self.result["name"], "edge-proxy")
        self.assertEqual(self.result["version"], "1.2.0")
        self.assertEqual(self.result["description"], 'Handles "public" traffic, mostly.')
        self.assertEqual(self.result["quoted"], "It's fine")
        self.assertEqual(self.result["url"], "https://example.com/a//b")

    def test_numbers(self):
        self.assertEqual(self.result["ports"], [80, 443, 8080])
        self.assertEqual(
            self.result["ratios"], {"low": 0.25, "high": 1.0, "neg": -0.5, "pos": 3}
        )
        self.assertEqual(self.result["limits"]["max"], math.inf)
        self.assertEqual(self.result["limits"]["min"], -math.inf)

    def test_keys(self):
        self.assertEqual(self.result["0xFF"], "hex key")
        self.assertEqual(self.result["$meta"], {"_internal": "yes"})
        self.assertEqual(self.result["flags"], [True, False, None])

    def test_line_structure_preserved(self):
        strict = relaxjson.transpile(KITCHEN_SINK)
        # One line continuation joins two source lines
        self.assertEqual(strict.count("\n"), KITCHEN_SINK.count("\n") - 1)
        self.assertNotIn("//", strict.replace("https://example.com/a//b", ""))
        self.assertNotIn("/*", strict)


class TestStrictJSONCompatibility(unittest.TestCase):
    """Standard JSON decodes exactly as the json module decodes it."""

    def test_matches_json_module(self):
        documents = [
            '{"a": 1, "b": [1.5, -2e3, "x\\ty"], "c": {"d": null}}',
            "[]",
            "{}",
            '"\\ud83d\\ude00"',
            "-0.0",
            '[{"nested": [[[]]]}]',
        ]
        for document in documents:
            with self.subTest(document=document):
                self.assertEqual(relaxjson.transpile(document), document)
                self.assertEqual(relaxjson.loads(document), json.loads(document))


class TestTypedConfigurationDocument(unittest.TestCase):
    """Decoding a relaxed document straight into dataclasses."""

    def test_decode_into_dataclass(self):
        from dataclasses import dataclass, field

        @dataclass
        class Listener:
            port: int
            tls: bool = False

        @dataclass
        class Service:
            name: str
            listeners: list[Listener] = field(default_factory=list)

        text = """
        {
          name: 'api', // service name
          listeners: [
            { port: 0x50 },
            { port: 443, tls: true, },
          ],
          ignored: 'by default',
        }
        """
        service = relaxjson.decode(text, into=Service)
        self.assertEqual(
            service, Service("api", [Listener(80), Listener(443, tls=True)])
        )
        self.assertEqual(
            json.loads(relaxjson.dumps(service)),
            {"name": "api", "listeners": [{"port": 80, "tls": False}, {"port": 443, "tls": True}]},
        )


if __name__ == "__main__":
    unittest.main()
