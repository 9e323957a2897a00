"""
Configuration loading for the ABI export CLI

Settings come from three layers, later ones winning: built-in defaults,
an optional JSON or YAML config file, and command line flags.

Config file keys:
- artifacts_dir: directory holding <Name>.sol/<Name>.json build artifacts
- output_dir: directory receiving <Name>.abi.json files (must already exist)
- contracts: ordered list of contract names to export
"""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..extractor import DEFAULT_ARTIFACTS_DIR, DEFAULT_CONTRACTS, DEFAULT_OUTPUT_DIR
from .exceptions import ConfigurationError, ErrorCodes

LOG = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class ExportConfig:
    """Resolved settings for one export run"""
    artifacts_dir: Path = Path(DEFAULT_ARTIFACTS_DIR)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    contracts: List[str] = field(default_factory=lambda: list(DEFAULT_CONTRACTS))

    def with_overrides(
        self,
        artifacts_dir: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> "ExportConfig":
        """Return a copy with the non-None overrides applied"""
        changes: Dict[str, Any] = {}
        if artifacts_dir is not None:
            changes["artifacts_dir"] = Path(artifacts_dir)
        if output_dir is not None:
            changes["output_dir"] = Path(output_dir)
        return replace(self, **changes)


class ConfigManager:
    """Loads and validates ExportConfig files."""

    KNOWN_KEYS = ("artifacts_dir", "output_dir", "contracts")

    def load(self, config_file: Optional[Union[str, Path]] = None) -> ExportConfig:
        """
        Load configuration from a file.

        Args:
            config_file: Path to a .json, .yaml or .yml file. None means defaults.

        Returns:
            ExportConfig with file values layered over the defaults

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        if config_file is None:
            return ExportConfig()

        config_file = Path(config_file)
        raw = self._read(config_file)
        config = self._validate(raw, config_file)
        LOG.debug(f"Loaded configuration from {config_file}: {config}")
        return config

    def _read(self, config_file: Path) -> Any:
        if not config_file.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                config_file=str(config_file),
                code=ErrorCodes.CONFIG_FILE_NOT_FOUND
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_file}: {e}",
                config_file=str(config_file),
                code=ErrorCodes.CONFIG_VALIDATION_FAILED
            ) from e
        except (json.JSONDecodeError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Invalid configuration file {config_file}: {e}",
                config_file=str(config_file),
                code=ErrorCodes.CONFIG_VALIDATION_FAILED
            ) from e

    def _validate(self, raw: Any, config_file: Path) -> ExportConfig:
        # An empty YAML document loads as None
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Configuration in {config_file} must be a mapping",
                config_file=str(config_file)
            )

        unknown = sorted(str(key) for key in raw if key not in self.KNOWN_KEYS)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys in {config_file}: {', '.join(unknown)}",
                config_file=str(config_file),
                field=unknown[0]
            )

        config = ExportConfig()
        for key in ("artifacts_dir", "output_dir"):
            if key in raw:
                value = raw[key]
                if not isinstance(value, str) or not value:
                    raise ConfigurationError(
                        f"'{key}' must be a non-empty string",
                        config_file=str(config_file),
                        field=key
                    )
                setattr(config, key, Path(value))

        if "contracts" in raw:
            contracts = raw["contracts"]
            if not isinstance(contracts, list) or not all(
                isinstance(name, str) and name for name in contracts
            ):
                raise ConfigurationError(
                    "'contracts' must be a list of non-empty strings",
                    config_file=str(config_file),
                    field="contracts"
                )
            config.contracts = list(contracts)

        return config
