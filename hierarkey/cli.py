"""Command line entry point that runs one of the bundled examples."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from hierarkey.examples import run_example_a, run_example_b, run_example_c

_EXAMPLES = {"A": run_example_a, "B": run_example_b, "C": run_example_c}


def main(argv: Sequence[str] | None = None) -> None:
    """Run the example named by the first argument; example A by default."""
    args = sys.argv[1:] if argv is None else list(argv)
    name = args[0] if args and args[0] in _EXAMPLES else "A"
    print(f"Running Example {name}...\n---------------")
    _EXAMPLES[name]()


if __name__ == "__main__":
    main()