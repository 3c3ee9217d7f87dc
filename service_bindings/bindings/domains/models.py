"""Domain models for service bindings."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, Union


class BindingError(Exception):
    """Structurally invalid binding exception."""
    pass


@dataclass(frozen=True)
class Binding:
    """A named bundle of metadata and secret values for one service instance."""
    name: str
    path: Union[str, Path]
    metadata: Mapping[str, str] = field(default_factory=dict)
    secret: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Private copies so callers can't mutate the binding through their dicts
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        object.__setattr__(self, "secret", MappingProxyType(dict(self.secret)))

    @property
    def kind(self) -> Optional[str]:
        """Service kind, from the `kind` metadata entry (or legacy `type`)."""
        return self.metadata.get("kind") or self.metadata.get("type")

    @property
    def provider(self) -> Optional[str]:
        return self.metadata.get("provider")

    def get_secret_file_path(self, key: str) -> str:
        """
        Resolve a secret value to a file inside the binding directory.

        Args:
            key: File name relative to the binding path

        Returns:
            Binding path joined with key using the host path separator
        """
        return f"{self.path}{os.sep}{key}"


class Bindings:
    """Ordered, immutable collection of bindings."""

    def __init__(self, bindings: Sequence[Binding] = ()):
        self._bindings = tuple(bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __getitem__(self, index: int) -> Binding:
        return self._bindings[index]

    def __repr__(self) -> str:
        names = ", ".join(b.name for b in self._bindings)
        return f"Bindings([{names}])"

    def filter_bindings(self, kind: str, provider: Optional[str] = None) -> List[Binding]:
        """
        Return bindings of a given kind, preserving order.

        Args:
            kind: Service kind to match (case-insensitive)
            provider: Optional provider to match as well (case-insensitive)

        Returns:
            List of matching bindings, empty if none match
        """
        matches = []
        for binding in self._bindings:
            if binding.kind is None or binding.kind.lower() != kind.lower():
                continue
            if provider is not None:
                if binding.provider is None or binding.provider.lower() != provider.lower():
                    continue
            matches.append(binding)
        return matches

    def get_binding(self, name: str) -> Optional[Binding]:
        """Return the first binding called `name`, or None."""
        for binding in self._bindings:
            if binding.name == name:
                return binding
        return None


@dataclass(frozen=True)
class FieldMapping:
    """Copies one secret entry to one target property."""
    secret_key: str
    property_key: str
