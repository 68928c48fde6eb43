"""
InitKube Module - Black Box Interface

Purpose: Materialize the kubeconfig file used by later helm invocations
Interface: ConfigWriter.prepare(), ConfigWriter.execute(), default_template_path()
Hidden: Mode selection, template loading, file lifecycle

Either writes a supplied kubeconfig verbatim or renders kubeconfig.tpl
against the connection values.
"""

from pathlib import Path

from .errors import (
    FileOpenError,
    KubeInitError,
    LiteralWriteError,
    MissingField,
    RenderError,
    TemplateLoadError,
)
from .values import (
    DEFAULT_SERVICE_ACCOUNT,
    TEMPLATE_FIELDS,
    ConnectionValues,
    LiteralMode,
    TemplatedMode,
    resolve_mode,
)
from .writer import CONFIG_FILE_MODE, ConfigWriter, load_template


def default_template_path() -> str:
    """Path of the kubeconfig template shipped with the package."""
    return str(Path(__file__).resolve().parents[2] / "templates" / "kubeconfig.tpl")


__all__ = [
    "CONFIG_FILE_MODE",
    "DEFAULT_SERVICE_ACCOUNT",
    "TEMPLATE_FIELDS",
    "ConfigWriter",
    "ConnectionValues",
    "FileOpenError",
    "KubeInitError",
    "LiteralMode",
    "LiteralWriteError",
    "MissingField",
    "RenderError",
    "TemplateLoadError",
    "TemplatedMode",
    "default_template_path",
    "load_template",
    "resolve_mode",
]
