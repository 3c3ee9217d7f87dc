"""Input validation for CLI arguments."""
import sys
from pathlib import Path


def validate_bindings_root(root: str) -> None:
    """
    Validate that an explicit bindings root is an existing directory.

    Args:
        root: Value of --root

    Raises:
        SystemExit with code 2 if validation fails
    """
    path = Path(root)
    if not path.exists():
        print(f"Error: Bindings root does not exist: {path}", file=sys.stderr)
        sys.exit(2)
    if not path.is_dir():
        print(f"Error: Bindings root is not a directory: {path}", file=sys.stderr)
        print("\nThe root must contain one subdirectory per binding, e.g.:", file=sys.stderr)
        print("  <root>/my-db/type", file=sys.stderr)
        print("  <root>/my-db/host", file=sys.stderr)
        sys.exit(2)
