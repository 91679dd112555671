"""Quickstart - Parsing Numbers With Unknown Separators.

PARSER-ONLY: Examples 1-4 work WITHOUT Babel. Install with:
    pip install numsniff

Example 5 needs the locale bridge:
    pip install numsniff[babel]

Demonstrates:

1. Parsing mixed-format input with try_parse_*()
2. Inspecting failures returned by parse_*()
3. Seeing which convention the heuristic picks
4. Restricting accepted forms with NumericStyle
5. Looking up the convention of a known locale

Python 3.13+.
"""

from __future__ import annotations


def example_1_mixed_input() -> None:
    """Parse values exported by systems in different locales."""
    from numsniff import try_parse_decimal, try_parse_float64

    print("=" * 60)
    print("Example 1: Mixed-Format Input")
    print("=" * 60)

    for text in ("1.943.100,84", "15,019.33", "000,7832", "21,500,000", "-743923"):
        _, as_float = try_parse_float64(text)
        _, as_decimal = try_parse_decimal(text)
        print(f"  {text!r:>16} -> float {as_float!r:<14} decimal {as_decimal}")
    print()


def example_2_failures() -> None:
    """Inspect structured errors for rejected input."""
    from numsniff import parse_float64

    print("=" * 60)
    print("Example 2: Failures")
    print("=" * 60)

    for text in ("9392gk381", "1,23.5", "", "1" + "0" * 400):
        result, errors = parse_float64(text)
        print(f"  {text[:20]!r}: result={result}")
        for error in errors:
            print(f"    category={error.category} convention={error.convention or '-'}")
            if error.diagnostic is not None:
                print(f"    {error.diagnostic.code.name}: {error.diagnostic.message}")
    print()


def example_3_convention() -> None:
    """Show the convention chosen for each text."""
    from numsniff import detect_convention, scan_separators

    print("=" * 60)
    print("Example 3: Convention Detection")
    print("=" * 60)

    for text in ("15", "482.392.923", "40593,84", "1.943.100,84", "1,234"):
        scan = scan_separators(text)
        print(f"  {text!r:>16} -> {detect_convention(text)!s:<10} {scan}")

    print()
    print("  Note: '1,234' has a single group sign and is read as 1.234.")
    print()


def example_4_styles() -> None:
    """Restrict or widen the accepted textual forms."""
    from numsniff import NumericStyle, try_parse_decimal

    print("=" * 60)
    print("Example 4: Numeric Styles")
    print("=" * 60)

    accounting = NumericStyle.NUMBER | NumericStyle.ALLOW_PARENTHESES
    cases = [
        ("(1.234,50)", NumericStyle.NUMBER),
        ("(1.234,50)", accounting),
        ("21,500,000", NumericStyle.FLOAT),
        ("1,5", NumericStyle.INTEGER),
        ("394,955-", NumericStyle.NUMBER),
    ]
    for text, style in cases:
        print(f"  {text!r:>14} {style!s:<40} -> {try_parse_decimal(text, style)}")
    print()


def example_5_locale_bridge() -> None:
    """Ask CLDR which convention a locale uses (requires Babel)."""
    from numsniff.core import is_babel_available

    print("=" * 60)
    print("Example 5: Locale Bridge")
    print("=" * 60)

    if not is_babel_available():
        print("  Babel not installed - skipping (pip install numsniff[babel])")
        print()
        return

    from numsniff.locale_utils import convention_for_locale

    for locale_code in ("en_US", "de-DE", "it_IT", "fr_FR", "xx_YY"):
        convention, errors = convention_for_locale(locale_code)
        if errors:
            print(f"  {locale_code:>6}: {errors[0].diagnostic}")
        else:
            print(f"  {locale_code:>6}: {convention}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("numsniff Quickstart")
    print()

    example_1_mixed_input()
    example_2_failures()
    example_3_convention()
    example_4_styles()
    example_5_locale_bridge()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
