"""Discover bindings mounted on the filesystem."""
import os
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

from .models import Binding, BindingError, Bindings
from .preferences import BINDINGS_ROOT, get_preference

logger = logging.getLogger(__name__)

SERVICE_BINDING_ROOT = "SERVICE_BINDING_ROOT"
# Cloud Native Buildpacks root, predates SERVICE_BINDING_ROOT
CNB_BINDINGS = "CNB_BINDINGS"

METADATA_KEYS = ("kind", "type", "provider")


def resolve_bindings_root(environ: Optional[Mapping[str, str]] = None) -> Tuple[Optional[str], Optional[str]]:
    """
    Resolve the bindings root directory and where it came from.

    Priority order:
    1. SERVICE_BINDING_ROOT
    2. CNB_BINDINGS (legacy)
    3. User preference `bindings_root` (for running outside a container)

    Returns:
        (root, source) where source is the variable name or "preference",
        or (None, None) if no root is configured
    """
    environ = os.environ if environ is None else environ
    for variable in (SERVICE_BINDING_ROOT, CNB_BINDINGS):
        root = environ.get(variable)
        if root:
            logger.debug(f"Using bindings root from {variable}: {root}")
            return root, variable

    root = get_preference(BINDINGS_ROOT)
    if root:
        logger.debug(f"Using bindings root from preference: {root}")
        return root, "preference"
    return None, None


def get_bindings_root(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    return resolve_bindings_root(environ)[0]


def _read_entries(directory: Path) -> Dict[str, str]:
    entries = {}
    for entry in sorted(directory.iterdir()):
        # Kubernetes projects secrets through hidden ..data symlinks
        if entry.name.startswith(".") or not entry.is_file():
            continue
        try:
            entries[entry.name] = entry.read_text(encoding="utf-8").strip()
        except UnicodeDecodeError:
            # Keystores and truststores are binary; they are referenced by path
            logger.warning(f"Skipping binary file {entry}")
    return entries


def load_binding(path: Union[str, Path]) -> Binding:
    """
    Read one binding directory.

    Supports the Kubernetes layout (flat files, `type` marker) and the
    legacy CNB layout (`metadata/` and `secret/` subdirectories).

    Raises:
        BindingError: If the directory has no kind marker
    """
    path = Path(path)
    metadata_dir = path / "metadata"

    if metadata_dir.is_dir():
        metadata = _read_entries(metadata_dir)
        secret_dir = path / "secret"
        secret = _read_entries(secret_dir) if secret_dir.is_dir() else {}
    else:
        metadata = {}
        secret = {}
        for key, value in _read_entries(path).items():
            if key in METADATA_KEYS:
                metadata[key] = value
            else:
                secret[key] = value

    if "kind" not in metadata and "type" in metadata:
        metadata["kind"] = metadata.pop("type")

    if not metadata.get("kind"):
        raise BindingError(
            f"Binding at {path} has no kind\n"
            f"Expected a 'type' file or a 'metadata/kind' file"
        )

    logger.debug(f"Loaded binding '{path.name}' of kind '{metadata['kind']}' with {len(secret)} secret entries")
    return Binding(name=path.name, path=path, metadata=metadata, secret=secret)


def load_bindings(root: Optional[Union[str, Path]] = None) -> Bindings:
    """
    Load every binding under the bindings root.

    Args:
        root: Bindings root directory (resolved from the environment or
            the bindings_root preference if not provided)

    Returns:
        Bindings sorted by directory name; empty if no root is configured
        or the root doesn't exist

    Raises:
        BindingError: If a binding directory is malformed
    """
    if root is None:
        root = get_bindings_root()
    if root is None:
        logger.info(f"No bindings root configured ({SERVICE_BINDING_ROOT} not set)")
        return Bindings()

    root_path = Path(root)
    if not root_path.is_dir():
        logger.warning(f"Bindings root doesn't exist or is not a directory: {root_path}")
        return Bindings()

    bindings = [
        load_binding(entry)
        for entry in sorted(root_path.iterdir())
        if entry.is_dir() and not entry.name.startswith(".")
    ]
    logger.info(f"Discovered {len(bindings)} bindings in {root_path}")
    return Bindings(bindings)
