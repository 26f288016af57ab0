"""Thread Safety Example - Sharing compiled patterns across threads.

Thread Safety:
    A Strftime is immutable after construction and every render builds its
    own buffer, so one instance can be shared by any number of threads
    without locks. The shared default table is frozen; per-pattern
    directives always go onto a private copy.

Demonstrates:
1. Compile at startup, render concurrently (recommended)
2. Concurrent compilation with different per-pattern directives
3. Mutating the shared default table is rejected

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

from strftimeengine import (
    ImmutableTableError,
    Strftime,
    get_default_table,
    verbatim,
)

BASE = datetime(2009, 11, 10, 23, 0, 0, tzinfo=UTC)


# Example 1: Compile once, share everywhere (RECOMMENDED)
def example_1_shared_pattern() -> None:
    """Example 1: One compiled pattern rendered by many threads."""
    print("=" * 60)
    print("Example 1: Recommended Pattern - Shared Compiled Pattern")
    print("=" * 60)

    stamp = Strftime("%F %T")
    print("[STARTUP] Pattern compiled (single-threaded)")

    def worker(thread_id: int) -> str:
        return f"  [Thread-{thread_id}] {stamp(BASE + timedelta(hours=thread_id))}"

    with ThreadPoolExecutor(max_workers=4) as pool:
        for line in pool.map(worker, range(4)):
            print(line)


# Example 2: Per-thread options
def example_2_private_options() -> None:
    """Example 2: Each thread compiles with its own extra directive."""
    print("\n" + "=" * 60)
    print("Example 2: Per-pattern Directives Are Private")
    print("=" * 60)

    def worker(thread_id: int) -> str:
        stamp = Strftime("%T worker=%w", directives={"w": verbatim(str(thread_id))})
        return f"  {stamp(BASE)}"

    with ThreadPoolExecutor(max_workers=4) as pool:
        for line in pool.map(worker, range(4)):
            print(line)

    print(f"  Shared %w still means weekday: {Strftime('%w')(BASE)}")


# Example 3: Frozen default table
def example_3_frozen_default() -> None:
    """Example 3: The shared table cannot be changed from any thread."""
    print("\n" + "=" * 60)
    print("Example 3: Frozen Default Table")
    print("=" * 60)

    try:
        get_default_table().set("q", verbatim("Q"))
    except ImmutableTableError as e:
        print(e)


if __name__ == "__main__":
    example_1_shared_pattern()
    example_2_private_options()
    example_3_frozen_default()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
