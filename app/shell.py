# =============================================================================
# app/shell.py - Native App Shell Descriptor
# =============================================================================
# The mobile app wraps the built web app in a native shell. The packaging
# tool reads capacitor.config.json; write_capacitor_config() produces it from
# SHELL_CONFIG.
# =============================================================================

import json
import logging
from pathlib import Path

from core.models.app_shell import AppShellConfig

logger = logging.getLogger(__name__)

CAPACITOR_CONFIG_FILENAME = "capacitor.config.json"

SHELL_CONFIG = AppShellConfig(
    app_id="town.flyer.app",
    app_name="FlyerTown",
    web_dir="dist",
)


def write_capacitor_config(
    path: str | Path = CAPACITOR_CONFIG_FILENAME,
    config: AppShellConfig = SHELL_CONFIG,
) -> Path:
    """
    Write the shell descriptor as JSON for the packaging tool.

    Args:
        path: Target file, or a directory to place capacitor.config.json in
        config: Descriptor to write

    Returns:
        Path of the written file
    """
    target = Path(path)
    if target.is_dir():
        target = target / CAPACITOR_CONFIG_FILENAME

    target.write_text(json.dumps(config.to_capacitor_dict(), indent=2) + "\n", encoding="utf-8")
    logger.info(f"Wrote {config.app_id} shell config to {target}")
    return target
