from pathlib import Path
from typing import Any, cast

import yaml

from sdl_decompose import log
from sdl_decompose.models import DecompositionOptions


def load_options_config(config_path: Path | None) -> DecompositionOptions:
    """
    Load and validate decomposition options from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None to use the defaults.

    Returns:
        The validated options.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against DecompositionOptions fails.
    """
    if config_path is None:
        log.debug("No options config provided")
        return DecompositionOptions()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug(f"Loaded options config from {config_path}")

    # Treat empty file or explicit YAML null as "defaults"
    if raw is None or raw == {}:
        return DecompositionOptions()

    if not isinstance(raw, dict):
        raise TypeError(f"Options config root must be a mapping (YAML object), got {type(raw).__name__}")

    return DecompositionOptions.model_validate(cast(dict[str, Any], raw))


def merge_cli_flags(
    options: DecompositionOptions,
    include_builtins: bool,
    exclude_comments: bool,
    include_deprecated: bool,
) -> DecompositionOptions:
    """Switch on every option whose flag was given on the command line."""
    return options.model_copy(
        update={
            "include_builtin_scalars": options.include_builtin_scalars or include_builtins,
            "exclude_comments": options.exclude_comments or exclude_comments,
            "include_deprecated": options.include_deprecated or include_deprecated,
        }
    )
