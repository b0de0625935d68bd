"""
gujtranslit CLI

Command-line interface for Gujarati transliteration of text, documents
and invoices.

Usage:
    gujtranslit text "amit patel, rajkot"
    echo "surat" | gujtranslit text
    gujtranslit convert customers.xlsx notes.docx     # convert multiple files
    gujtranslit convert ./documents/                  # convert all files in directory
    gujtranslit convert letter.html --stdout
    gujtranslit invoice bundle.json --format markdown
    gujtranslit language gu
    gujtranslit --formats
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .core import DocumentTransliterator
from .i18n import LanguagePreference
from .invoice import load_invoice_bundle
from .transliteration import transliterate_to_gujarati


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gujtranslit",
        description=(
            "Latin-to-Gujarati transliteration for shop records.\n\n"
            "Converts typed names, addresses and notes to Gujarati script,\n"
            "transliterates whole documents, and renders bilingual invoices."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  gujtranslit text "amit shah"\n'
            "  gujtranslit convert customers.xlsx -o ./gujarati\n"
            "  gujtranslit convert ./letters/ --stdout\n"
            "  gujtranslit invoice INV-001.json --format text\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported document formats and exit",
    )

    sub = parser.add_subparsers(dest="command")

    text = sub.add_parser("text", help="Transliterate text given as arguments or on stdin")
    text.add_argument("words", nargs="*", help="Text to transliterate")

    convert = sub.add_parser("convert", help="Transliterate documents")
    convert.add_argument("sources", nargs="+", help="Files or directories to convert")
    convert.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./gujtranslit_output)",
    )
    convert.add_argument(
        "--stdout",
        action="store_true",
        help="Print transliterated text instead of saving files",
    )

    invoice = sub.add_parser("invoice", help="Render a bilingual invoice from a JSON bundle")
    invoice.add_argument("bundle", help="JSON file with invoice, customer and workOrder")
    invoice.add_argument(
        "--format",
        choices=["html", "markdown", "text"],
        default="html",
        help="Output format (default: html)",
    )
    invoice.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")

    language = sub.add_parser("language", help="Show or set the display language")
    language.add_argument("value", nargs="?", choices=["en", "gu"], help="Language to store")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return 0

    if args.command == "text":
        return _run_text(args)
    if args.command == "convert":
        return _run_convert(args)
    if args.command == "invoice":
        return _run_invoice(args)
    if args.command == "language":
        return _run_language(args)

    parser.print_help()
    print("\nError: No command given.")
    return 1


def _run_text(args) -> int:
    if args.words:
        print(transliterate_to_gujarati(" ".join(args.words)))
        return 0

    if sys.stdin.isatty():
        print("Error: No text provided. Pass words as arguments or pipe them on stdin.", file=sys.stderr)
        return 1

    for line in sys.stdin:
        print(transliterate_to_gujarati(line))
    return 0


def _run_convert(args) -> int:
    engine = DocumentTransliterator(output_dir=args.output)
    save = not args.stdout

    print("=" * 60)
    print("  GUJTRANSLIT - Gujarati Document Transliteration")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            text = engine.convert(source, save=save)
            if args.stdout:
                print(text)
                print("\n" + "=" * 60 + "\n")
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    return 1 if error_count else 0


def _run_invoice(args) -> int:
    try:
        rendered = load_invoice_bundle(args.bundle).render(args.format)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {args.bundle}: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        print(f"[SAVED] {args.output}")
    else:
        print(rendered, end="")
    return 0


def _run_language(args) -> int:
    preference = LanguagePreference()
    if args.value:
        preference.set_language(args.value)
        print(f"[SAVED] Language set to {args.value} ({preference.settings_path})")
    else:
        print(preference.language.value)
    return 0


def _show_formats():
    """Display all supported formats."""
    formats = DocumentTransliterator.supported_formats()
    print("\nSupported Document Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
