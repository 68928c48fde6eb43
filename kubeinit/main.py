#!/usr/bin/env python3
"""
Kubeinit - Main Entry Point

Thin orchestration layer that:
1. Loads configuration
2. Configures logging
3. Runs the kubeconfig init step

All behavior lives in the modules.
"""

import logging
import os
import sys
from typing import Optional, Protocol, TextIO

from kubeinit.config.provider import ConfigProvider, EnvConfigProvider, FileConfigProvider
from kubeinit.logging_config import configure_logging
from kubeinit.modules.initkube import ConfigWriter, KubeInitError

logger = logging.getLogger("kubeinit.main")

SETTINGS_FILE_ENV = "KUBEINIT_SETTINGS_FILE"


class Step(Protocol):
    """A two-phase pipeline step."""

    def prepare(self) -> None:
        ...

    def execute(self) -> None:
        ...


def run_step(step: Step) -> None:
    """Prepare then execute a step. Errors propagate unchanged."""
    step.prepare()
    step.execute()


def get_config_provider() -> ConfigProvider:
    """Settings file when KUBEINIT_SETTINGS_FILE is set, environment otherwise."""
    settings_file = os.getenv(SETTINGS_FILE_ENV)
    if settings_file:
        return FileConfigProvider(settings_file)
    return EnvConfigProvider()


def main(provider: Optional[ConfigProvider] = None, stderr: Optional[TextIO] = None) -> int:
    """Run the init step, returning a process exit status."""
    provider = provider or get_config_provider()
    try:
        config = provider.get_step_config()
    except ValueError as e:
        configure_logging()
        logger.error("Configuration error: %s", e)
        return 1

    configure_logging(
        "DEBUG" if config.debug else "INFO",
        secrets=[config.values.token],
    )

    writer = ConfigWriter(
        config.values,
        template_path=config.template_path,
        config_path=config.config_path,
        debug=config.debug,
        stderr=stderr,
    )
    try:
        run_step(writer)
    except KubeInitError as e:
        logger.error("Kubeconfig initialization failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
