"""kubediscover - Kubernetes cluster discovery reports."""

__version__ = "1.0.0"
