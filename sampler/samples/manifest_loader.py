"""Load the sample manifest from a repository working copy."""
import json
from pathlib import Path

from pydantic import ValidationError

from sampler.core.errors import ConfigurationError
from sampler.models.manifest import SampleManifest

MANIFEST_FILE = ".cli.json"


def load_manifest(repo_path: Path) -> SampleManifest:
    """Parse ``.cli.json`` at the repository root.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid
    """
    manifest_path = Path(repo_path) / MANIFEST_FILE
    if not manifest_path.exists():
        raise ConfigurationError(
            f"Sample manifest not found at {manifest_path}"
        )

    try:
        with open(manifest_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Sample manifest {manifest_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Sample manifest {manifest_path} must be a JSON object")

    try:
        return SampleManifest.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid sample manifest {manifest_path}: {e}") from e
