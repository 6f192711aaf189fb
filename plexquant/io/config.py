"""
Configuration file I/O for quantification parameters.
"""

import json
from pathlib import Path
from typing import Optional, Union

import yaml

from plexquant.core.logger import get_logger
from plexquant.model.parameters import QuantificationParameters

logger = get_logger("plexquant.io.config")


def _infer_format(path: Path) -> Optional[str]:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    if suffix == ".json":
        return "json"
    return None


def load_parameters(config_path: Union[str, Path]) -> QuantificationParameters:
    """
    Load quantification parameters from a YAML or JSON file.

    Parameters
    ----------
    config_path : Union[str, Path]
        Path to configuration file (.yaml, .yml, or .json).

    Returns
    -------
    QuantificationParameters
        Parameters built by :meth:`QuantificationParameters.from_dict`.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file format is not supported.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    fmt = _infer_format(config_path)
    if fmt == "yaml":
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    elif fmt == "json":
        with open(config_path, "r") as f:
            data = json.load(f)
    else:
        raise ValueError(
            f"Unsupported config format: {config_path.suffix}. Use .yaml, .yml, or .json"
        )

    logger.info("Loaded quantification parameters from %s", config_path)
    return QuantificationParameters.from_dict(data)


def save_parameters(
    parameters: QuantificationParameters,
    output_path: Union[str, Path],
    format: Optional[str] = None,
) -> None:
    """
    Save quantification parameters to a YAML or JSON file.

    Parameters
    ----------
    parameters : QuantificationParameters
        Parameters to save.
    output_path : Union[str, Path]
        Output file path.
    format : str, optional
        Output format ('yaml' or 'json'). Inferred from the extension if not
        provided, YAML otherwise.
    """
    output_path = Path(output_path)
    if format is None:
        format = _infer_format(output_path) or "yaml"

    data = parameters.to_dict()

    if format == "yaml":
        with open(output_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    else:
        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)

    logger.info("Saved quantification parameters to %s", output_path)
