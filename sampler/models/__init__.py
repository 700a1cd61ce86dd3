"""Data models for Sampler."""
from sampler.models.manifest import (
    MAIN_INTEGRATION,
    Integration,
    RequiredResourceRef,
    SampleManifest,
    SelectionState,
)

__all__ = [
    'MAIN_INTEGRATION',
    'Integration',
    'RequiredResourceRef',
    'SampleManifest',
    'SelectionState',
]
