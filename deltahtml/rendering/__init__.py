"""Rendering support for Deltas.

Contains:
- renderer_iface: the TextSink protocol and an in-memory StringSink
- segmenter: line/inline segmentation of the op stream
- renderer: block-handler chain and inline formatting (fragment + page)
- embeds: placeholders for non-text inserts
"""
