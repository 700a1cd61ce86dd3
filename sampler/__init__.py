"""Sampler - scaffold runnable integration samples from template repositories."""

__version__ = "0.1.0"
