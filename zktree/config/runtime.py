"""
Runtime Configuration

Central configuration for building commitment trees.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from dotenv import load_dotenv

from zktree.crypto.hashing import get_hasher
from zktree.merkle.merkle_tree import DEFAULT_ZERO, IncrementalMerkleTree
from zktree.schemas.errors import InvalidArgumentException

load_dotenv()


@dataclass
class TreeConfig:
    """
    Configuration for a commitment tree.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    levels: int = 20
    zero_element: str = DEFAULT_ZERO
    hasher: str = "mimc"

    def __post_init__(self):
        if isinstance(self.levels, bool) or not isinstance(self.levels, int) or self.levels < 1:
            raise InvalidArgumentException(
                f"levels must be a positive int, got {self.levels!r}",
                argument="levels",
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ZKTREE_LEVELS: Tree depth
        - ZKTREE_ZERO_ELEMENT: Decimal string of the empty-leaf value
        - ZKTREE_HASHER: Hasher name ("mimc" or "sha256")
        """
        overrides: dict[str, Any] = {}

        if os.getenv("ZKTREE_LEVELS"):
            raw = os.getenv("ZKTREE_LEVELS", "")
            try:
                overrides["levels"] = int(raw)
            except ValueError as e:
                raise InvalidArgumentException(
                    f"ZKTREE_LEVELS must be an integer, got {raw!r}",
                    argument="levels",
                ) from e
        if os.getenv("ZKTREE_ZERO_ELEMENT"):
            overrides["zero_element"] = os.getenv("ZKTREE_ZERO_ELEMENT")
        if os.getenv("ZKTREE_HASHER"):
            overrides["hasher"] = os.getenv("ZKTREE_HASHER")

        return overrides

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TreeConfig":
        """Load configuration from a YAML file (top-level or under a `tree` key)."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("tree", data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TreeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        defaults = cls()
        return cls(
            levels=data.get("levels", defaults.levels),
            zero_element=str(data.get("zero_element", defaults.zero_element)),
            hasher=data.get("hasher", defaults.hasher),
        )

    def with_env_overrides(self) -> "TreeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self
        return TreeConfig.from_dict({**self.to_dict(), **overrides})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "levels": self.levels,
            "zero_element": self.zero_element,
            "hasher": self.hasher,
        }

    def build_tree(self, elements: Optional[Iterable[int]] = None) -> IncrementalMerkleTree:
        """Construct a tree from this configuration."""
        return IncrementalMerkleTree(
            self.levels,
            zero_element=self.zero_element,
            hasher=get_hasher(self.hasher),
            elements=elements,
        )


# Global default configuration
_default_config: Optional[TreeConfig] = None


def get_default_config() -> TreeConfig:
    """Get the default tree configuration."""
    global _default_config
    if _default_config is None:
        _default_config = TreeConfig.from_env()
    return _default_config


def set_default_config(config: TreeConfig) -> None:
    """Set the default tree configuration."""
    global _default_config
    _default_config = config
