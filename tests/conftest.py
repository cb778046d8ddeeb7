"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def http_delay_chaos():
    """Fixture providing a valid JVMChaos document for an HTTP delay."""
    return {
        "apiVersion": "chaos-mesh.org/v1alpha1",
        "kind": "JVMChaos",
        "metadata": {
            "name": "http-delay",
            "namespace": "shop",
        },
        "spec": {
            "target": "http",
            "action": "delay",
            "mode": "one",
            "selector": {
                "labelSelectors": {"app": "orders"},
            },
            "flags": {
                "time": "100",
                "offset": "10",
            },
            "matchers": {
                "uri": "/orders",
                "httpclient4": "true",
            },
            "duration": "30s",
        },
    }


@pytest.fixture
def jvm_return_chaos():
    """Fixture providing a valid JVMChaos document overriding a return value."""
    return {
        "apiVersion": "chaos-mesh.org/v1alpha1",
        "kind": "JVMChaos",
        "metadata": {"name": "jvm-return"},
        "spec": {
            "target": "jvm",
            "action": "return",
            "mode": "all",
            "flags": {"value": "hello"},
            "matchers": {
                "classname": "com.example.OrderService",
                "methodname": "placeOrder",
                "effect-percent": "50",
            },
        },
    }


HTTP_DELAY_YAML = """
apiVersion: chaos-mesh.org/v1alpha1
kind: JVMChaos
metadata:
  name: http-delay
  namespace: shop
spec:
  target: http
  action: delay
  mode: one
  selector:
    labelSelectors:
      app: orders
  flags:
    time: "100"
  matchers:
    uri: /orders
"""

BROKEN_DUBBO_YAML = """
apiVersion: chaos-mesh.org/v1alpha1
kind: JVMChaos
metadata:
  name: dubbo-exception
spec:
  target: dubbo
  action: exception
  mode: one
  flags:
    exception: ""
  matchers:
    provider: "maybe"
"""

DEPLOYMENT_YAML = """
apiVersion: apps/v1
kind: Deployment
metadata:
  name: orders
spec:
  replicas: 1
"""


@pytest.fixture
def chaos_dir(tmp_path):
    """Directory holding one valid JVMChaos, one invalid JVMChaos and a Deployment."""
    (tmp_path / "http-delay.yaml").write_text(HTTP_DELAY_YAML)
    (tmp_path / "dubbo-exception.yaml").write_text(BROKEN_DUBBO_YAML)
    (tmp_path / "deployment.yaml").write_text(DEPLOYMENT_YAML)
    return tmp_path


@pytest.fixture
def valid_chaos_file(tmp_path):
    """Single YAML file holding a valid JVMChaos."""
    path = tmp_path / "http-delay.yaml"
    path.write_text(HTTP_DELAY_YAML)
    return path
