"""Configuration loading and validation for the Elm translations generator."""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = "elm-i18n.yaml"


@dataclass
class GeneratorConfig:
    """How to launch the external elm-codegen tool."""

    command: list[str] = field(default_factory=lambda: ["elm-codegen"])
    script: str = "Generate.elm"


@dataclass
class AppConfig:
    """Top-level application configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)


def _parse_command(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        return shlex.split(value)
    return [str(part) for part in value]


def load_config(config_path: str | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    When no path is given, ``elm-i18n.yaml`` in the current directory is used
    if present, otherwise the defaults apply. Environment variable
    ELM_CODEGEN_BIN overrides the generator command.

    Args:
        config_path: Path to the YAML configuration file, or None.

    Returns:
        Validated AppConfig instance.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        ValueError: If configuration values are invalid.
    """
    raw: dict = {}
    path = Path(config_path or DEFAULT_CONFIG_PATH)

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ValueError(f"Cannot read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    elif config_path is not None:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration in {path} must be a mapping.")

    gen_raw = raw.get("generator") or {}
    if not isinstance(gen_raw, dict):
        raise ValueError("generator must be a mapping with 'command' and 'script' keys.")

    command = gen_raw.get("command", GeneratorConfig().command)
    if not isinstance(command, (str, list)):
        raise ValueError("generator.command must be a string or a list of strings.")

    generator = GeneratorConfig(
        command=_parse_command(command),
        script=gen_raw.get("script", GeneratorConfig.script),
    )

    # Environment variable override for the generator binary
    env_command = os.environ.get("ELM_CODEGEN_BIN")
    if env_command:
        generator.command = shlex.split(env_command)

    config = AppConfig(generator=generator)
    _validate_config(config)
    return config


def _validate_config(config: AppConfig) -> None:
    """Validate that all required configuration values are present.

    Args:
        config: The configuration to validate.

    Raises:
        ValueError: If validation fails.
    """
    if not config.generator.command:
        raise ValueError(
            "Generator command must not be empty. "
            "Set generator.command in the config file or ELM_CODEGEN_BIN."
        )

    if not isinstance(config.generator.script, str):
        raise ValueError("generator.script must be a string.")

    if not config.generator.script:
        raise ValueError("Generator script must not be empty.")
