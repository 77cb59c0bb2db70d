"""
Library settings loaded from dictionaries, files or environment variables.
"""
import os
import json
import yaml
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import decoders as d
from decoders.utils.logging_config import LoggerFactory, get_logger
from decoders.utils.exceptions import ConfigurationError, DecodeError

logger = get_logger(__name__)


SETTINGS_VALIDATOR = d.object({
    'log_level': d.optional(d.literal('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')),
    'enable_console': d.optional(d.boolean),
    'enable_file': d.optional(d.boolean),
    'enable_structured': d.optional(d.boolean),
    'log_dir': d.optional(d.string),
})


@dataclass(frozen=True)
class DecoderSettings:
    """Logging settings for the decoders library."""

    log_level: str = 'WARNING'
    enable_console: bool = True
    enable_file: bool = False
    enable_structured: bool = False
    log_dir: str = 'logs'

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DecoderSettings':
        """
        Build settings from a mapping.

        Unknown keys and values of the wrong type are rejected.
        """
        try:
            decoded = SETTINGS_VALIDATOR.decode(data)
        except DecodeError as e:
            raise ConfigurationError(
                f"Invalid decoder settings: {e.message or e.error_code}",
                details=e.to_dict()
            ) from e

        return cls(**{key: value for key, value in decoded.items() if value is not d.UNDEFINED})

    @classmethod
    def from_file(cls, filepath: str) -> 'DecoderSettings':
        """
        Load settings from file (JSON or YAML).

        Args:
            filepath: Path to settings file
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {filepath}",
                details={'filepath': str(path)}
            )

        with open(path, 'r') as f:
            try:
                if path.suffix in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                elif path.suffix == '.json':
                    data = json.load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported file format: {path.suffix}",
                        details={'filepath': str(path)}
                    )
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigurationError(
                    f"Failed to parse settings from {filepath}: {e}",
                    details={'filepath': str(path), 'error': str(e)}
                ) from e

        # empty YAML document
        if data is None:
            data = {}

        settings = cls.from_dict(data)
        logger.info(f"Loaded decoder settings from {filepath}")
        return settings

    @classmethod
    def from_env(
        cls,
        prefix: str = "DECODERS_",
        environ: Optional[Mapping[str, str]] = None
    ) -> 'DecoderSettings':
        """
        Load settings from environment variables.

        ``DECODERS_LOG_LEVEL=DEBUG`` sets ``log_level``. Values are parsed as
        JSON when possible so ``DECODERS_ENABLE_FILE=true`` is a boolean.

        Args:
            prefix: Prefix for environment variables
            environ: Mapping to read instead of ``os.environ``
        """
        environ = os.environ if environ is None else environ
        env_config: Dict[str, Any] = {}

        for key, value in environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()
                try:
                    parsed_value = json.loads(value)
                except json.JSONDecodeError:
                    parsed_value = value
                env_config[config_key] = parsed_value

        logger.debug(f"Loaded {len(env_config)} decoder settings from environment")
        return cls.from_dict(env_config)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def apply(self):
        """Configure library logging from these settings."""
        LoggerFactory.configure(**self.to_dict())
