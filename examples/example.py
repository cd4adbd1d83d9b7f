"""
errorchain Basic Usage Example

This example demonstrates:
1. Wrapping a Python exception into an error chain
2. Aggregating parallel failures
3. Printing and serializing the whole chain
"""

import json

from errorchain import (
    ArgumentNullError,
    BaseError,
    MultiError,
    collect,
    print_error,
)


def parse_port(value):
    ArgumentNullError.validate(value, "value")
    try:
        return int(value)
    except ValueError as e:
        raise BaseError(f"Invalid port {value!r}", e).set(target="parse_port", code="E_PORT") from e


def main():
    print("=" * 60)
    print("errorchain Basic Example")
    print("=" * 60)

    # ===== Example 1: Wrap a Python exception =====
    print("\n📌 Example 1: Wrapping a ValueError")
    print("-" * 60)

    try:
        parse_port("http")
    except BaseError as e:
        print(f"Code: {e.code}")
        print(f"Target: {e.target}")
        print(f"Inner: {e.inner_error.message}")

    # ===== Example 2: Aggregate several failures =====
    print("\n📌 Example 2: Aggregating failures")
    print("-" * 60)

    failures = []
    for value in ("80", "x", None):
        try:
            parse_port(value)
        except BaseError as e:
            failures.append(e)

    aggregate = MultiError("Some ports are invalid.", failures)
    print(f"Collected {len(collect(aggregate))} errors")

    # ===== Example 3: Print and serialize =====
    print("\n📌 Example 3: Print chain to stderr and serialize")
    print("-" * 60)

    print_error(aggregate, lambda e: f"[{e.code}] {e}")
    print(json.dumps(aggregate.to_dict(), indent=2))


if __name__ == "__main__":
    main()
