"""
Shared pytest fixtures for Kubeinit tests.

This module provides common fixtures including:
- Connection values for templated and literal runs
- Template and destination paths under tmp_path
- A diagnostics sink that replaces stderr
- Environment cleanup for config provider tests
"""

import io
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubeinit.config.provider import ENV_ALIASES
from kubeinit.modules.initkube import ConnectionValues

SIMPLE_TEMPLATE = (
    "server: {{ api_server }}\n"
    "token: {{ token }}\n"
    "user: {{ service_account }}\n"
)

LITERAL_KUBECONFIG = (
    "apiVersion: v1\n"
    "kind: Config\n"
    "clusters:\n"
    "- cluster:\n"
    "    server: https://literal.example:6443\n"
    "  name: literal\n"
)


# =============================================================================
# Step fixtures
# =============================================================================


@pytest.fixture
def stderr():
    """In-memory diagnostics sink."""
    return io.StringIO()


@pytest.fixture
def template_file(tmp_path):
    """A minimal kubeconfig template using the API server, token and service account."""
    path = tmp_path / "templates" / "config.tpl"
    path.parent.mkdir()
    path.write_text(SIMPLE_TEMPLATE, encoding="utf-8")
    return str(path)


@pytest.fixture
def config_path(tmp_path):
    """Destination kubeconfig path that does not exist yet."""
    return str(tmp_path / "kube" / "config")


@pytest.fixture(autouse=True)
def _kube_dir(tmp_path):
    (tmp_path / "kube").mkdir()


@pytest.fixture
def templated_values():
    """Connection values selecting templated mode."""
    return ConnectionValues(
        api_server="https://k8s.example:6443",
        token="abc",
        namespace="default",
    )


@pytest.fixture
def literal_values():
    """Connection values selecting literal mode."""
    return ConnectionValues(literal_config=LITERAL_KUBECONFIG)


# =============================================================================
# Environment fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the config provider reads."""
    for names in ENV_ALIASES.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
            monkeypatch.delenv(f"PLUGIN_{name}", raising=False)
    monkeypatch.delenv("KUBEINIT_SETTINGS_FILE", raising=False)
    return monkeypatch
