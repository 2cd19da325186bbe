"""Tests for line/inline segmentation."""

import unittest

from deltahtml.models import Op
from deltahtml.rendering.segmenter import Embed, Inline, Line, Segmenter


def _kinds(segmenter):
    out = []
    for seg in segmenter:
        if isinstance(seg, Line):
            out.append(("line", seg.text))
        elif isinstance(seg, Inline):
            out.append(("inline", seg.text))
        else:
            out.append(("embed", seg.op.value()))
    return out


class SegmenterTest(unittest.TestCase):
    def test_empty(self):
        seg = Segmenter([])
        self.assertIsNone(seg.current())
        self.assertIsNone(seg.advance())
        self.assertTrue(seg.exhausted)

    def test_plain_text_is_one_inline(self):
        self.assertEqual(_kinds(Segmenter([Op.insert("Hello")])), [("inline", "Hello")])

    def test_multiline_insert(self):
        ops = [Op.insert("First line\nSecond line\nThird line")]
        self.assertEqual(
            _kinds(Segmenter(ops)),
            [
                ("line", "First line"),
                ("line", "Second line"),
                ("inline", "Third line"),
            ],
        )

    def test_lines_share_owning_op(self):
        op = Op.insert("a\nb\n", {"header": 2})
        segs = list(Segmenter([op]))
        self.assertEqual([s.text for s in segs], ["a", "b"])
        self.assertTrue(all(s.op is op for s in segs))

    def test_empty_lines(self):
        self.assertEqual(
            _kinds(Segmenter([Op.insert("\n\nx\n")])),
            [("line", ""), ("line", ""), ("line", "x")],
        )

    def test_document_order_across_ops(self):
        ops = [
            Op.insert("Title"),
            Op.insert("\n", {"header": 1}),
            Op.insert("Body"),
            Op.insert("\n"),
        ]
        self.assertEqual(
            _kinds(Segmenter(ops)),
            [("inline", "Title"), ("line", ""), ("inline", "Body"), ("line", "")],
        )

    def test_skips_retain_delete_and_embeds(self):
        ops = [
            Op.retain(3, {"bold": True}),
            Op.insert("a"),
            Op.delete(2),
            Op.insert({"image": "x.png"}),
            Op.insert(""),
            Op.insert("b\n"),
        ]
        self.assertEqual(_kinds(Segmenter(ops)), [("inline", "a"), ("line", "b")])

    def test_include_embeds(self):
        ops = [Op.insert("a"), Op.insert({"image": "x.png"}), Op.insert("b")]
        self.assertEqual(
            _kinds(Segmenter(ops, include_embeds=True)),
            [("inline", "a"), ("embed", {"image": "x.png"}), ("inline", "b")],
        )

    def test_current_is_idempotent_until_advance(self):
        seg = Segmenter([Op.insert("a\nb\n")])
        first = seg.current()
        self.assertIs(seg.current(), first)
        self.assertEqual(first, seg.current())
        second = seg.advance()
        self.assertEqual(second.text, "b")
        self.assertIs(seg.current(), second)
        self.assertIsNone(seg.advance())
        self.assertIsNone(seg.current())

    def test_does_not_mutate_input(self):
        ops = [Op.insert("a\nb"), Op.retain(1)]
        before = [op.model_dump() for op in ops]
        list(Segmenter(ops))
        self.assertEqual([op.model_dump() for op in ops], before)


if __name__ == "__main__":
    unittest.main()
