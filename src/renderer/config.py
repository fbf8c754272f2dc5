# renderer/config.py
from typing import Optional

import hjson
from pydantic import BaseModel, Field, ValidationError

from renderer.exceptions import ConfigurationError


class GradientConfiguration(BaseModel):
    width: int = Field(default=256, ge=2)
    height: int = Field(default=256, ge=2)
    blue: float = Field(default=0.25, allow_inf_nan=False)
    intensity: float = Field(default=1.0, allow_inf_nan=False)
    output_path: str = Field(default="gradient.png")
    use_kernel: bool = Field(default=True)


def load_configuration(configuration_filepath: Optional[str] = None) -> GradientConfiguration:
    """
    Read an hjson file into a GradientConfiguration. Without a path the
    defaults are returned.

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or fails validation
    """
    if configuration_filepath is None:
        return GradientConfiguration()

    try:
        with open(configuration_filepath, 'r') as infile:
            file_contents: str = infile.read()
    except OSError as e:
        raise ConfigurationError(f"Could not read configuration {configuration_filepath}: {e}") from e

    try:
        configuration_dict = hjson.loads(file_contents)
    except hjson.HjsonDecodeError as e:
        raise ConfigurationError(f"Could not parse configuration {configuration_filepath}: {e}") from e

    if not isinstance(configuration_dict, dict):
        raise ConfigurationError(f"Configuration {configuration_filepath} must contain an object")

    try:
        return GradientConfiguration(**configuration_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration {configuration_filepath}: {e}") from e
