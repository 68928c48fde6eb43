"""
Kubeinit - Kubernetes config initialization step

Writes the kubeconfig file that later helm invocations in the same
pipeline run use to reach the target cluster.

Modules:
- initkube: kubeconfig materialization (literal or templated)
- config: step configuration from the environment or a settings file
"""

__version__ = "1.0.0"
