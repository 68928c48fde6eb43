"""
ConfigWriter - initializes the kubernetes config file.

The step has two phases. prepare() validates the credentials, loads the
template and opens the destination. execute() writes the kubeconfig.
Both must run, in that order, exactly once per instance.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from .errors import (
    FileOpenError,
    LiteralWriteError,
    MissingField,
    RenderError,
    TemplateLoadError,
)
from .values import DEFAULT_SERVICE_ACCOUNT, ConnectionValues, LiteralMode, Mode, resolve_mode

logger = logging.getLogger("kubeinit.initkube")

# rw-r--r--
CONFIG_FILE_MODE = 0o644


def open_config_file(path: str) -> TextIO:
    """
    Create or truncate path for writing.

    Newlines are written untranslated and surrogate-escaped characters
    (undecodable bytes from os.environ) are written back as the original bytes.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
    return os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="")


def load_template(template_path: str) -> Template:
    """
    Load and compile a kubeconfig template from disk.

    Raises:
        TemplateLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(template_path)
    env = Environment(
        loader=FileSystemLoader(str(path.parent)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.get_template(path.name)
    except (TemplateError, OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(
            template_path, f"could not load kubeconfig template: {e}"
        ) from e


class ConfigWriter:
    """Pipeline step that writes the kubeconfig used by later helm calls."""

    def __init__(
        self,
        values: ConnectionValues,
        template_path: str,
        config_path: str,
        debug: bool = False,
        stderr: Optional[TextIO] = None,
    ):
        """
        Create a writer. No validation is performed at this time.

        Args:
            values: Connection values for the target cluster
            template_path: Kubeconfig template to render in templated mode
            config_path: Destination kubeconfig path
            debug: Emit diagnostic lines to stderr
            stderr: Diagnostics sink, defaults to sys.stderr
        """
        self._values = values
        self.template_path = template_path
        self.config_path = config_path
        self.debug = debug
        self.stderr = stderr if stderr is not None else sys.stderr

        self._mode: Optional[Mode] = None
        self._template: Optional[Template] = None
        self._config_file: Optional[TextIO] = None
        self._executed = False

    @property
    def values(self) -> ConnectionValues:
        """Connection values as seen by the template, defaults applied."""
        if self._mode is not None and not isinstance(self._mode, LiteralMode):
            return self._mode.values
        return self._values

    @property
    def mode(self) -> Optional[Mode]:
        """The mode selected by prepare(), None before that."""
        return self._mode

    def _diag(self, message: str) -> None:
        if self.debug:
            self.stderr.write(message + "\n")

    def prepare(self) -> None:
        """
        Ensure all required configuration is present and the config file is writable.

        Raises:
            MissingField: API server or token missing in templated mode
            TemplateLoadError: Template missing or malformed
            FileOpenError: Destination cannot be created or truncated
        """
        mode = resolve_mode(self._values)

        if isinstance(mode, LiteralMode):
            self.stderr.write(
                f"Kubeconfig is present and will be written to {self.config_path}\n"
            )
            self._mode = mode
            logger.debug("Using supplied kubeconfig for %s", self.config_path)
            return

        values = mode.values
        if not values.api_server:
            raise MissingField("api_server", "an API Server is needed to deploy")
        if not values.token:
            raise MissingField("token", "token is needed to deploy")

        if not values.service_account:
            values.service_account = DEFAULT_SERVICE_ACCOUNT

        self._diag(f"loading kubeconfig template from {self.template_path}")
        template = load_template(self.template_path)

        if self.debug:
            action = "truncating" if os.path.exists(self.config_path) else "creating"
            self._diag(f"{action} kubeconfig file at {self.config_path}")

        try:
            config_file = open_config_file(self.config_path)
        except OSError as e:
            raise FileOpenError(
                self.config_path, f"could not open kubeconfig file for writing: {e}"
            ) from e

        self._mode = mode
        self._template = template
        self._config_file = config_file
        logger.debug(
            "Prepared templated kubeconfig for %s (service account %s)",
            values.api_server,
            values.service_account,
        )

    def execute(self) -> None:
        """
        Write the kubeconfig file.

        Raises:
            LiteralWriteError: Supplied kubeconfig could not be written
            RenderError: Template rendering or writing failed
        """
        if self._mode is None:
            raise RuntimeError("prepare() must succeed before execute()")
        if self._executed:
            raise RuntimeError("execute() may only run once per prepare()")

        self._diag(f"writing kubeconfig file to {self.config_path}")

        try:
            if isinstance(self._mode, LiteralMode):
                self._write_literal(self._mode.content)
            else:
                self._render()
        finally:
            self._executed = True
            self._template = None
            self._config_file = None

        logger.info("Kubeconfig written to %s", self.config_path)

    def _write_literal(self, content: str) -> None:
        self._diag("writing literal kubeconfig contents to file")
        try:
            with open_config_file(self.config_path) as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            raise LiteralWriteError(
                self.config_path, f"could not write kubeconfig file: {e}"
            ) from e

    def _render(self) -> None:
        context = self._mode.values.to_context()
        try:
            # closed on every path, buffered write errors surface on close
            with self._config_file as config_file:
                self._template.stream(context).dump(config_file)
        except (TemplateError, OSError, UnicodeError) as e:
            raise RenderError(f"could not render kubeconfig: {e}") from e
