"""Example of how to render a Delta and inspect its segments."""

import argparse
import logging

from rich import print_json
from rich.console import Console
from rich.traceback import install

from deltahtml import Delta, DeltaRenderer, RenderConfig
from deltahtml.rendering.debug_tools import dump_segments_text

install(show_locals=True)

console = Console()

SAMPLE = {
    "ops": [
        {"insert": "Shopping"},
        {"insert": "\n", "attributes": {"header": 2}},
        {"insert": "eggs"},
        {"insert": "\n", "attributes": {"list": "bullet"}},
        {"insert": "milk", "attributes": {"bold": True}},
        {"insert": "\n", "attributes": {"list": "bullet"}},
        {"insert": "That's all."},
    ]
}


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Delta rendering example.")
    parser.add_argument("--file", help="Delta JSON file (defaults to a sample).")
    parser.add_argument("--debug", action="store_true", help="Log every segment.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            delta = Delta.from_json(f.read())
    else:
        delta = Delta.model_validate(SAMPLE)

    console.rule("ops")
    print_json(delta.to_json())

    console.rule("segments")
    console.print(dump_segments_text(delta), markup=False)

    console.rule("html")
    renderer = DeltaRenderer(RenderConfig(debug=args.debug))
    console.print(renderer.render(delta), markup=False)


if __name__ == "__main__":
    main()
