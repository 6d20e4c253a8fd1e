"""Quickstart Example - Nugget Parsing, Extraction and Localization.

Demonstrates the three things nuggetlex does:

1. Parse a document and substitute every nugget through a callback
2. Extract messages from program source into a Babel catalog
3. Translate rendered output with compiled Babel translations

Python 3.13+.
"""

from __future__ import annotations

import io


def example_1_substitution() -> None:
    """Replace nuggets with a callback."""
    from nuggetlex import NuggetContext, NuggetParser

    print("=" * 60)
    print("Example 1: Substitution")
    print("=" * 60)

    page = "<h1>[[[Welcome %0|||(((Dear [[[Customer]]])))]]]</h1>\n<p>[[[Bye///footer]]]</p>"
    parser = NuggetParser(context=NuggetContext.RESPONSE)

    def shout(nugget_text, offset, nugget, entity):
        print(f"  callback: {nugget_text!r} items={nugget.format_items}")
        return nugget.msgid.upper()

    print(parser.parse(page, shout))
    print()


def example_2_extraction() -> None:
    """Collect messages from source files into a catalog."""
    from nuggetlex.extract import collect_catalog

    print("=" * 60)
    print("Example 2: Extraction")
    print("=" * 60)

    documents = [
        ("Views/Home.cshtml", "<p>[[[Hello]]]</p>\n<p>[[[Pick %0|||(((Red)))]]]</p>"),
        ("Controllers/Home.cs", 'var s = "[[[Hello///greeting]]]";\nvar t = "[[[Line one\\nLine two]]]";'),
    ]
    catalog = collect_catalog(documents)

    for message in catalog:
        if message.id:
            print(f"  {message.id!r:24} {message.locations} {list(message.auto_comments)}")
    print()


def example_3_localization() -> None:
    """Translate a rendered page."""
    from babel.messages.catalog import Catalog
    from babel.messages.mofile import write_mo
    from babel.support import Translations

    from nuggetlex.localize import localize

    print("=" * 60)
    print("Example 3: Localization")
    print("=" * 60)

    catalog = Catalog(locale="de")
    catalog.add("Welcome %0", "Willkommen %0")
    catalog.add("Customer", "Kunde")
    catalog.add("Bye", "Tschüss", auto_comments=["footer"])
    buf = io.BytesIO()
    write_mo(buf, catalog)
    buf.seek(0)
    translations = Translations(fp=buf)

    page = "<h1>[[[Welcome %0|||(((Dear [[[Customer]]])))]]]</h1>\n<p>[[[Bye///footer]]]</p>"
    print(localize(page, translations))
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("nuggetlex Quickstart Examples")
    print()

    example_1_substitution()
    example_2_extraction()
    example_3_localization()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
