"""Quickstart example for strftimeengine.

This example demonstrates compiling a pattern once and rendering it for
many timestamps, the one-shot format() API, and handling compile errors.
"""

import io
from datetime import UTC, datetime, timedelta, timezone

from strftimeengine import Strftime, StrftimeError, format
from strftimeengine.diagnostics import DiagnosticFormatter, OutputFormat

ts = datetime(2009, 11, 10, 23, 0, 0, tzinfo=UTC)

# Example 1: Compile once, render many
print("=" * 50)
print("Example 1: Compiled Pattern")
print("=" * 50)

stamp = Strftime("%Y-%m-%d %H:%M:%S %z")
print(stamp.format_string(ts))
# Output: 2009-11-10 23:00:00 +0000

for minutes in (1, 2, 3):
    print(stamp(ts + timedelta(minutes=minutes)))
# Output: 2009-11-10 23:01:00 +0000 ...

# Example 2: One-shot formatting
print("\n" + "=" * 50)
print("Example 2: One-shot format()")
print("=" * 50)

print(format("%A, %B %e, %Y", ts))
# Output: Tuesday, November 10, 2009

print(format("%c", ts.astimezone(timezone(timedelta(hours=9), "JST"))))
# Output: Wed Nov 11 08:00:00 2009

# Example 3: Output targets
print("\n" + "=" * 50)
print("Example 3: Buffers and Byte Streams")
print("=" * 50)

buffer = ["[access] "]
Strftime("%d/%b/%Y:%T %z").render_into(buffer, ts)
print("".join(buffer))
# Output: [access] 10/Nov/2009:23:00:00 +0000

stream = io.BytesIO()
Strftime("%F\n").format_to(stream, ts)
print(stream.getvalue())
# Output: b'2009-11-10\n'

# Example 4: Compile errors
print("\n" + "=" * 50)
print("Example 4: Compile Errors")
print("=" * 50)

for bad_pattern in ("Progress: 100%", "%Y-%Q"):
    try:
        Strftime(bad_pattern)
    except StrftimeError as e:
        print(e)
        if e.diagnostic is not None:
            simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
            print(f"  simple: {simple.format(e.diagnostic)}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
