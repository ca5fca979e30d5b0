"""Parsing of the repository-hosted checklist configuration blob."""

from typing import Union

import yaml
from pydantic import ValidationError

from models.checklist import ChecklistConfig
from modules.checklist.errors import ChecklistConfigError


def parse_checklist_config(blob: Union[str, bytes]) -> ChecklistConfig:
    """Parse a prchecklist.yml blob.

    Args:
        blob: Raw YAML of the config file, as text or UTF-8 bytes.

    Returns:
        ChecklistConfig. An empty document yields the default configuration.

    Raises:
        ChecklistConfigError: If the blob is not UTF-8, is not valid YAML or
            does not match the configuration schema.

    Example:
        config = parse_checklist_config(
            "notification:\\n"
            "  events:\\n"
            "    on_check: [default]\\n"
            "  channels:\\n"
            "    default:\\n"
            "      url: https://hooks.slack.com/services/T/B/X\\n"
        )
    """
    if isinstance(blob, bytes):
        try:
            blob = blob.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ChecklistConfigError(f"config is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(blob)
    except yaml.YAMLError as e:
        raise ChecklistConfigError(f"invalid YAML: {e}") from e

    if data is None:
        return ChecklistConfig()
    if not isinstance(data, dict):
        raise ChecklistConfigError(
            f"config must be a mapping, got {type(data).__name__}"
        )

    try:
        return ChecklistConfig.model_validate(data)
    except ValidationError as e:
        raise ChecklistConfigError(f"invalid config: {e}") from e
