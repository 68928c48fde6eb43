"""Errors raised by the kubeconfig initialization step."""

from typing import Optional


class KubeInitError(Exception):
    """Base class for every failure of the init step."""


class MissingField(KubeInitError):
    """A credential required for templated mode was left empty."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class TemplateLoadError(KubeInitError):
    """The kubeconfig template could not be read or parsed."""

    def __init__(self, template_path: str, message: Optional[str] = None):
        super().__init__(message or f"could not load kubeconfig template: {template_path}")
        self.template_path = template_path


class FileOpenError(KubeInitError):
    """The destination kubeconfig could not be opened for writing."""

    def __init__(self, config_path: str, message: Optional[str] = None):
        super().__init__(message or f"could not open kubeconfig file for writing: {config_path}")
        self.config_path = config_path


class RenderError(KubeInitError):
    """Rendering the template into the destination failed."""


class LiteralWriteError(KubeInitError):
    """Writing a supplied kubeconfig verbatim failed."""

    def __init__(self, config_path: str, message: Optional[str] = None):
        super().__init__(message or f"could not write kubeconfig file: {config_path}")
        self.config_path = config_path
