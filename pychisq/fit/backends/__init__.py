"""Compute backends for chi-squared fits."""

from pychisq.fit.backends.cpu import CPUFitBackend

__all__ = ["CPUFitBackend"]
