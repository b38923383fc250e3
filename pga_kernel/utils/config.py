"""
Configuration management for the PGA kernel verification harness.

Provides the harness configuration class and JSON load/save helpers.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List
from pathlib import Path


@dataclass
class HarnessConfig:
    """
    Configuration for a verification run.

    Attributes:
        only: Names of the checks to run; empty runs every registered check
        show_progress: Show a tqdm progress bar on stderr
        strict: Exit with status 1 when any check fails
        log_level: Override for the ``pga_kernel`` logger level
    """

    only: List[str] = field(default_factory=list)
    show_progress: bool = False
    strict: bool = False
    log_level: Optional[str] = None

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'HarnessConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(config_dict.get('extra', {}))

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'HarnessConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return HarnessConfig.from_dict(config_dict)


def load_config(filepath: str) -> HarnessConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        HarnessConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return HarnessConfig.from_dict(config_dict)


def save_config(config: HarnessConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: HarnessConfig object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
