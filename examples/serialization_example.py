"""Example demonstrating the cassette serializer registry."""

import ast
import os

import msgspec

from cassette_serializers import (
    DependencyUnavailableError,
    configure_logging,
    serializers,
    shutdown_logging,
)


class LiteralSerializer:
    """Stores cassettes as Python literals."""

    file_extension = "py"

    def serialize(self, value: dict) -> str:
        return repr(value)

    def deserialize(self, data: str) -> dict:
        return ast.literal_eval(data)


def record_cassette() -> dict:
    """Build the data a recorder would persist for one interaction."""
    return {
        "http_interactions": [
            {
                "request": {"method": "get", "uri": "http://example.com/"},
                "response": {
                    "status": {"code": 200, "message": "OK"},
                    "headers": {"Content-Type": ["text/plain"]},
                    "body": {"encoding": "UTF-8", "string": "Hello"},
                },
            }
        ],
        "recorded_with": "cassette-serializers 0.1.0",
    }


def main():
    """Run serializer examples."""
    configure_logging()
    cassette = record_cassette()

    # Example 1: Save and load with every built-in format
    print("=== Built-in Serializers ===")
    written = []
    for name in serializers.builtin_names():
        try:
            serializer = serializers[name]
        except DependencyUnavailableError as e:
            print(f"Skipping {name}: {e}")
            continue

        path = f"example_cassette_{name}.{serializer.file_extension}"
        data = serializer.serialize(cassette)
        if isinstance(data, str):
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
        else:
            with open(path, "wb") as f:
                f.write(data)
        written.append(path)

        mode = "r" if isinstance(data, str) else "rb"
        encoding = "utf-8" if mode == "r" else None
        with open(path, mode, encoding=encoding) as f:
            loaded = serializer.deserialize(f.read())
        print(f"{name}: {path} round-trips: {loaded == cassette}")

    # Example 2: Register a custom serializer
    print("\n=== Custom Serializer ===")
    serializers["literal"] = LiteralSerializer()
    literal = serializers["literal"]
    print(literal.serialize(cassette)[:60] + "...")

    # Example 3: Error hints
    print("\n=== Error Hints ===")
    raw_body = b"\xfa".decode("utf-8", errors="surrogateescape")
    try:
        serializers["yaml"].serialize({"body": raw_body})
    except UnicodeEncodeError as e:
        print(f"Encoding error: {e}")

    try:
        serializers["json"].deserialize('{"a": <%= 1 + 1 %>}')
    except msgspec.DecodeError as e:
        print(f"Syntax error: {e}")

    # Clean up
    for path in written:
        if os.path.exists(path):
            os.remove(path)
            print(f"\nCleaned up {path}")

    shutdown_logging()


if __name__ == "__main__":
    main()
