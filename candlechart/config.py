"""User configuration file for candlechart.

Chart defaults live in the ``[chart]`` table of
``~/.config/candlechart/config.toml``::

    [chart]
    interval = "5m"
    precision = 2
    bullish_color = "green"
    bearish_color = "red"
    fit_mode = "fit"
"""

import logging
from pathlib import Path
from typing import Any, Optional

import toml

from candlechart.render.config import ChartConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "candlechart" / "config.toml"

# Keys of the [chart] table that belong to the Numeric label policy
NUMERIC_KEYS = ("precision", "min_width")


def chart_config_from_dict(section: dict[str, Any]) -> ChartConfig:
    """Build a ChartConfig from a ``[chart]`` table.

    Raises:
        pydantic.ValidationError: If a value is invalid.
    """
    options = dict(section)
    numeric = {key: options.pop(key) for key in NUMERIC_KEYS if key in options}
    if numeric:
        options["numeric"] = numeric
    return ChartConfig.model_validate(options)


def load_chart_config(path: Optional[Path] = None) -> ChartConfig:
    """Load chart defaults from the config file.

    A missing file gives the built-in defaults. So does a file that cannot
    be read or parsed, with a warning logged.

    Raises:
        pydantic.ValidationError: If the file holds invalid chart values.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return ChartConfig()

    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return ChartConfig()

    return chart_config_from_dict(data.get("chart", {}))
