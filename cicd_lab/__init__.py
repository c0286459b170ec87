"""K8s CI/CD lab: info backend and polling dashboard."""

__version__ = "1.0.0"
