#!/usr/bin/env python3
"""
Quick Start Guide for the SSML Parser.

This example walks through parsing a document, inspecting the tree,
flattening it to plain text, and handling invalid markup.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ssml_parser import (
    ParserConfig,
    SSMLParseError,
    SSMLParser,
    flatten,
    parse,
    parse_document,
    to_ssml,
)
from ssml_parser.tree import format_tree

DOCUMENT = (
    '<speak version="1.1">'
    "Welcome to <emphasis level=\"strong\">the show</emphasis>."
    '<break time="500ms"/>'
    "<s>Tom &amp; Jerry are &lt;live&gt; tonight.</s>"
    "</speak>"
)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - SSML Parser")
    print("=" * 45)

    # Step 1: Parse a document
    print("\n📄 Step 1: Parsing SSML")
    print("-" * 30)

    root = parse(DOCUMENT)
    print(f"✅ Root element: <{root.name}> version={root.get_attribute('version')}")
    print(f"📏 Tree depth: {root.get_depth()}")
    print(format_tree(root))

    # Step 2: Flatten to text
    print("\n🔤 Step 2: Plain Text")
    print("-" * 30)
    print(repr(flatten(root)))

    # Step 3: Navigate the tree
    print("\n🔍 Step 3: Navigation")
    print("-" * 30)
    for element in root.find_all("break"):
        print(f"  - <{element.name}> time={element.get_attribute('time')}")

    # Step 4: Render back to markup
    print("\n📝 Step 4: Serialization")
    print("-" * 30)
    markup = to_ssml(root)
    print(markup)
    print(f"✅ Round trip equal: {parse(markup) == root}")

    # Step 5: Invalid markup
    print("\n⚠️  Step 5: Error Handling")
    print("-" * 30)
    for bad in ["<a></a>", "<speak><s>x</speak>", "<speak><s attr>x</s></speak>"]:
        try:
            parse(bad)
        except SSMLParseError as e:
            print(f"  - {e.kind.value}: {e}")

    result = parse_document("<speak></foo>")
    print(f"📊 parse_document success={result.success} kind={result.error_kind}")


def profiling_example():
    """Parse with profiling enabled and print the metrics."""

    print("\n⏱️  PROFILING")
    print("=" * 45)

    parser = SSMLParser(ParserConfig(enable_profiling=True))
    result = parser.parse_document(DOCUMENT)
    for key, value in result.performance.to_dict().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    quick_start_example()
    profiling_example()
