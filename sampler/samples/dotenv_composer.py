"""Compose ``server/.env`` from the sample's ``.env.example``."""
from pathlib import Path
from typing import Callable, Dict, Optional

from dotenv import dotenv_values, set_key

from sampler.core.config import get_config
from sampler.core.errors import ConfigurationError, DataError
from sampler.core.logger import get_logger
from sampler.core.profile import Profile
from sampler.models.manifest import SampleManifest, SelectionState
from sampler.services.api_client import APIClient

logger = get_logger(__name__)

EXAMPLE_FILE = ".env.example"
PUBLISHABLE_KEY_VAR = "STRIPE_PUBLISHABLE_KEY"
SECRET_KEY_VAR = "STRIPE_SECRET_KEY"
WEBHOOK_SECRET_VAR = "STRIPE_WEBHOOK_SECRET"
STATIC_DIR_VAR = "STATIC_DIR"
STATIC_DIR = "../client"


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse a dotenv file; keys without a value map to ''."""
    if not Path(path).exists():
        raise ConfigurationError(f"Environment example file not found at {path}")
    return {key: value or "" for key, value in dotenv_values(path).items()}


def write_env_file(path: Path, values: Dict[str, str]) -> None:
    """Write ``values`` to ``path`` sorted by key, replacing prior contents."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    for key in sorted(values):
        set_key(str(path), key, values[key], quote_mode="always")


class EnvironmentComposer:
    """Fills the sample's env file with account keys and resource ids."""

    def __init__(
        self,
        profile: Profile,
        client_factory: Optional[Callable[[str], APIClient]] = None,
    ):
        self.profile = profile
        self.client_factory = client_factory or self._default_client

    @staticmethod
    def _default_client(api_key: str) -> APIClient:
        config = get_config()
        return APIClient(config.api_base_url, api_key, timeout=config.request_timeout)

    def webhook_secret(self, api_key: str) -> str:
        device_name = self.profile.get_device_name()
        session = self.client_factory(api_key).authorize(device_name, "webhooks")
        secret = session.get("secret")
        if not isinstance(secret, str) or not secret:
            raise DataError("Authorization response did not contain a webhook signing secret")
        return secret

    def compose(
        self,
        manifest: SampleManifest,
        selection: SelectionState,
        sample_location: Path,
    ) -> Optional[Path]:
        """Write ``<sample_location>/server/.env``.

        Does nothing unless the integration has servers and the manifest
        opts in via ``configureDotEnv``.

        Returns:
            Path of the written file, or None when skipped
        """
        if not selection.integration.has_servers():
            return None
        if not manifest.configure_dot_env:
            return None

        sample_location = Path(sample_location)
        dotenv = read_env_file(sample_location / EXAMPLE_FILE)

        publishable_key = self.profile.get_publishable_key()
        if not publishable_key:
            raise ConfigurationError(
                "we could not set the publishable key in the .env file; please set "
                "this manually or login again to set it automatically next time"
            )
        api_key = self.profile.get_api_key(livemode=False)

        dotenv[PUBLISHABLE_KEY_VAR] = publishable_key
        dotenv[SECRET_KEY_VAR] = api_key
        dotenv[WEBHOOK_SECRET_VAR] = self.webhook_secret(api_key)
        dotenv[STATIC_DIR_VAR] = STATIC_DIR

        for ref in manifest.required_resources:
            resource_id = self.profile.get_sample_resource_id(ref.name)
            if resource_id:
                dotenv[ref.env_var] = resource_id

        env_file = sample_location / "server" / ".env"
        write_env_file(env_file, dotenv)
        logger.info(f"Configured {env_file}")
        return env_file
