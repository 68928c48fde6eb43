"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from kubeinit.modules.initkube import ConnectionValues, default_template_path

DEFAULT_CONFIG_FILE = "~/.kube/config"

TRUE_VALUES = {"true", "1", "yes", "on"}


@dataclass
class StepConfig:
    """Everything the init step needs for one run."""
    values: ConnectionValues
    debug: bool
    template_path: str
    config_path: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_step_config(self) -> StepConfig:
        """Get the init step configuration."""
        ...


# Setting name -> accepted environment variable names, most specific first.
# Each name is also tried with the PLUGIN_ prefix Drone uses for settings.
ENV_ALIASES: Dict[str, Sequence[str]] = {
    "api_server": ("API_SERVER", "KUBE_API_SERVER"),
    "token": ("KUBE_TOKEN", "KUBERNETES_TOKEN"),
    "certificate": ("KUBE_CERTIFICATE", "KUBERNETES_CERTIFICATE"),
    "service_account": ("KUBE_SERVICE_ACCOUNT", "SERVICE_ACCOUNT"),
    "namespace": ("NAMESPACE",),
    "skip_tls_verify": ("SKIP_TLS_VERIFY", "KUBE_SKIP_TLS"),
    "literal_config": ("KUBE_CONFIG",),
    "context_name": ("KUBE_CONTEXT",),
    "debug": ("DEBUG",),
    "template_path": ("KUBE_CONFIG_TEMPLATE",),
    "config_path": ("KUBE_CONFIG_FILE",),
}


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUE_VALUES


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def _lookup(self, setting: str) -> Optional[str]:
        for name in ENV_ALIASES[setting]:
            for key in (f"PLUGIN_{name}", name):
                value = self._environ.get(key)
                if value:
                    return value
        return None

    def get_step_config(self) -> StepConfig:
        """Get the init step configuration from environment variables."""
        values = ConnectionValues(
            skip_tls_verify=_parse_bool(self._lookup("skip_tls_verify")),
            certificate=self._lookup("certificate") or "",
            api_server=self._lookup("api_server") or "",
            namespace=self._lookup("namespace") or "",
            service_account=self._lookup("service_account") or "",
            token=self._lookup("token") or "",
            literal_config=self._lookup("literal_config") or "",
            context_name=self._lookup("context_name") or "",
        )
        return StepConfig(
            values=values,
            debug=_parse_bool(self._lookup("debug")),
            template_path=self._lookup("template_path") or default_template_path(),
            config_path=os.path.expanduser(self._lookup("config_path") or DEFAULT_CONFIG_FILE),
        )


class StepSettings(BaseModel):
    """Schema of a YAML settings file."""

    model_config = ConfigDict(extra="forbid")

    skip_tls_verify: bool = False
    certificate: str = ""
    api_server: str = ""
    namespace: str = ""
    service_account: str = ""
    token: str = ""
    literal_config: str = ""
    context_name: str = ""
    debug: bool = False
    template_path: Optional[str] = None
    config_path: str = DEFAULT_CONFIG_FILE


class FileConfigProvider:
    """YAML settings file configuration provider."""

    def __init__(self, path: str):
        self.path = path

    def get_step_config(self) -> StepConfig:
        """
        Get the init step configuration from the settings file.

        Raises:
            ValueError: If the file cannot be read or does not match StepSettings
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            settings = StepSettings(**data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            raise ValueError(f"Invalid settings file {self.path}: {e}") from e

        values = ConnectionValues(
            skip_tls_verify=settings.skip_tls_verify,
            certificate=settings.certificate,
            api_server=settings.api_server,
            namespace=settings.namespace,
            service_account=settings.service_account,
            token=settings.token,
            literal_config=settings.literal_config,
            context_name=settings.context_name,
        )
        return StepConfig(
            values=values,
            debug=settings.debug,
            template_path=settings.template_path or default_template_path(),
            config_path=os.path.expanduser(settings.config_path),
        )
