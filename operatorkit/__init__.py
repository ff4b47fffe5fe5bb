"""Helpers for Kubernetes operators: labels, finalizers, CRD status, create-or-update, reconcile results, filtering and secrets."""

__version__ = "0.1.0"