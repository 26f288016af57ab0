"""Custom Directives Example - Extending and replacing the directive table.

This example shows how to extend strftimeengine with directives for
domain-specific needs:

1. Optional extra renderers shipped with the library (milliseconds, epoch)
2. Derived directives from plain functions (fiscal quarter)
3. Overriding a built-in directive for one pattern
4. Fully custom directive tables
5. Duck-typed renderer objects

Per-pattern directives never leak into the shared default table.

Python 3.13+.
"""

from __future__ import annotations

from datetime import UTC, datetime

from strftimeengine import (
    MICROSECONDS,
    MILLISECONDS,
    UNIX_SECONDS,
    DirectiveTable,
    Strftime,
    UnknownDirectiveError,
    create_default_table,
    derived,
    get_default_table,
    verbatim,
)

TS = datetime(2009, 11, 10, 23, 0, 0, 123_456, tzinfo=UTC)


# Example 1: Shipped extras
def example_1_extras() -> None:
    """Example 1: Register the optional extra renderers under any letter."""
    print("=" * 60)
    print("Example 1: Extra Renderers")
    print("=" * 60)

    stamp = Strftime(
        "%T.%L (%f us) epoch=%s",
        directives={"L": MILLISECONDS, "f": MICROSECONDS, "s": UNIX_SECONDS},
    )
    print(stamp(TS))
    # Output: 23:00:00.123 (123456 us) epoch=1257894000


# Example 2: Derived directive
@derived
def fiscal_quarter(ts: datetime) -> str:
    """Fiscal quarter for a year starting in October."""
    return f"FQ{((ts.month - 10) % 12) // 3 + 1}"


def example_2_derived() -> None:
    """Example 2: Turn a function of the timestamp into a directive."""
    print("\n" + "=" * 60)
    print("Example 2: Derived Directive")
    print("=" * 60)

    stamp = Strftime("%Y %q", directives={"q": fiscal_quarter})
    print(stamp(TS))
    # Output: 2009 FQ1

    try:
        Strftime("%q")
    except UnknownDirectiveError as e:
        print(f"[ISOLATED] Without the option: {e.diagnostic}")
    print(f"[ISOLATED] Default table has 'q': {'q' in get_default_table()}")


# Example 3: Override a built-in
def example_3_override() -> None:
    """Example 3: Replace a built-in for one pattern only."""
    print("\n" + "=" * 60)
    print("Example 3: Override Built-in")
    print("=" * 60)

    iso_ish = Strftime("%FT%T%z", directives={"z": verbatim("Z")})
    print(iso_ish(TS))
    # Output: 2009-11-10T23:00:00Z
    print(Strftime("%z")(TS))
    # Output: +0000


# Example 4: Custom table
def example_4_custom_table() -> None:
    """Example 4: A minimal table that only knows a few directives."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Directive Table")
    print("=" * 60)

    table = DirectiveTable(
        {
            "Y": get_default_table().lookup("Y"),
            "q": fiscal_quarter,
            "%": verbatim("%"),
        }
    )
    table.freeze()
    print(repr(table))
    print(Strftime("%Y/%q 100%%", directive_table=table)(TS))
    # Output: 2009/FQ1 100%

    extended = create_default_table()
    extended.set("q", fiscal_quarter)
    print(f"Extended default table: {len(extended)} directives")


# Example 5: Duck-typed renderer
class Emoji:
    """Renderer object: anything with render(buffer, timestamp) works."""

    def render(self, buffer: list[str], timestamp: datetime) -> list[str]:
        buffer.append("night" if timestamp.hour >= 20 or timestamp.hour < 6 else "day")
        return buffer


def example_5_renderer_object() -> None:
    """Example 5: Register a renderer object directly."""
    print("\n" + "=" * 60)
    print("Example 5: Renderer Object")
    print("=" * 60)

    print(Strftime("%H:%M (%E)", directives={"E": Emoji()})(TS))
    # Output: 23:00 (night)


if __name__ == "__main__":
    example_1_extras()
    example_2_derived()
    example_3_override()
    example_4_custom_table()
    example_5_renderer_object()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
