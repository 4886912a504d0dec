"""EKS demo API: health, landing page and system info over HTTP."""

__version__ = "1.0.0"
