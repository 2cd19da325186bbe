"""Tests for the Delta container."""

import json
import unittest

from pydantic import ValidationError

from deltahtml.models import Delta, Op


class DeltaTest(unittest.TestCase):
    def test_parse_bare_list(self):
        delta = Delta.model_validate([{"insert": "a"}, {"retain": 2}, {"delete": 1}])
        self.assertEqual(len(delta), 3)
        self.assertEqual(delta[0], Op.insert("a"))
        self.assertEqual(delta[1], Op.retain(2))
        self.assertEqual(delta[2], Op.delete(1))

    def test_parse_ops_document(self):
        delta = Delta.model_validate({"ops": [{"insert": "a\n"}]})
        self.assertEqual(delta.ops, (Op.insert("a\n"),))

    def test_from_json_and_back(self):
        text = json.dumps(
            {"ops": [{"insert": "Hi", "attributes": {"bold": True}}, {"insert": "\n"}]}
        )
        delta = Delta.from_json(text)
        self.assertEqual(list(delta), [Op.insert("Hi", {"bold": True}), Op.insert("\n")])
        self.assertEqual(json.loads(delta.to_json()), json.loads(text))

    def test_length_sums_ops(self):
        delta = Delta.model_validate(
            [{"insert": "abc"}, {"insert": {"image": "x.png"}}, {"retain": 4}]
        )
        self.assertEqual(delta.length(), 8)

    def test_empty(self):
        self.assertEqual(len(Delta()), 0)
        self.assertEqual(Delta().length(), 0)

    def test_invalid_op_rejected(self):
        with self.assertRaises(ValidationError):
            Delta.model_validate([{"insert": "a"}, {"retain": 0}])

    def test_unknown_keys_rejected(self):
        with self.assertRaises(ValidationError):
            Delta.model_validate([{"insert": "a", "color": "red"}])


if __name__ == "__main__":
    unittest.main()
