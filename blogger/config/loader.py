import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from blogger.config.models import BloggerConfig
from blogger.domain.errors import ConfigError

logger = logging.getLogger(__name__)


def _strip_code_fence(content: str) -> str:
    """Return the body of the first ```yaml block, or the content unchanged."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_config(path: Path) -> BloggerConfig:
    """
    Load and validate the blogger configuration file.
    Raises ConfigError if the file is missing, is not YAML or does not validate.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found at: {path}")

    content = _strip_code_fence(path.read_text())

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in config file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        config = BloggerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed:\n{e}") from e

    logger.info("Config loaded from %s", path)
    return config
