"""Persistent user profile store.

The profile file keeps account credentials and the ids of sample resources
created on the user's behalf. Resource ids recorded here are the idempotency
ledger for resource provisioning: they survive across invocations and are
never touched by cache invalidation.
"""
import os
import socket
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sampler.core.errors import ConfigurationError
from sampler.core.logger import get_logger

logger = get_logger(__name__)

API_KEY_ENV = "STRIPE_API_KEY"
DEVICE_NAME_ENV = "STRIPE_DEVICE_NAME"


class Profile:
    """A named profile backed by a YAML file.

    Layout on disk::

        profiles:
          default:
            account_id: acct_123
            test_mode_api_key: sk_test_...
            test_mode_pub_key: pk_test_...
            device_name: laptop
            stripe_samples_price_recurring_basic_id: price_123
    """

    def __init__(self, profile_file: Path, name: str = "default"):
        self.profile_file = Path(profile_file)
        self.name = name
        self.data = self._load()
        self.fields: Dict[str, Any] = dict(
            self.data.setdefault("profiles", {}).get(name) or {}
        )

    def _load(self) -> dict:
        if not self.profile_file.exists():
            return {"profiles": {}}

        try:
            with open(self.profile_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Profile store {self.profile_file} is not valid YAML: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Profile store {self.profile_file} must contain a mapping"
            )
        if not isinstance(data.get("profiles"), dict):
            data["profiles"] = {}
        logger.debug(f"Loaded profile '{self.name}' from {self.profile_file}")
        return data

    def _get_str(self, key: str) -> str:
        value = self.fields.get(key)
        return str(value) if value is not None else ""

    # Account attributes

    def get_account_id(self) -> str:
        account_id = self._get_str("account_id")
        if not account_id:
            raise ConfigurationError(
                "No account id configured; run login to configure your profile"
            )
        return account_id

    def get_api_key(self, livemode: bool = False) -> str:
        """Return the secret API key, preferring the STRIPE_API_KEY override."""
        env_key = os.environ.get(API_KEY_ENV)
        if env_key:
            return env_key

        key = self._get_str("live_mode_api_key" if livemode else "test_mode_api_key")
        if not key:
            mode = "live" if livemode else "test"
            raise ConfigurationError(
                f"No {mode} mode API key configured for profile '{self.name}'"
            )
        return key

    def get_publishable_key(self, livemode: bool = False) -> str:
        return self._get_str("live_mode_pub_key" if livemode else "test_mode_pub_key")

    def get_device_name(self) -> str:
        device_name = os.environ.get(DEVICE_NAME_ENV) or self._get_str("device_name")
        if device_name:
            return device_name
        return socket.gethostname()

    # Sample resource ledger

    def get_sample_resource_id(self, resource_name: str) -> str:
        return self._get_str(resource_name)

    def set_sample_resource_id(self, resource_name: str, resource_id: str) -> None:
        """Record a resource id in memory only; see write_config_field."""
        self.fields[resource_name] = resource_id

    def write_config_field(self, field_name: str, value: Any) -> None:
        """Durably write a single field of this profile.

        Re-reads the file first so fields written by other code paths since
        this profile was loaded are preserved.
        """
        data = self._load()
        profile = data["profiles"].setdefault(self.name, {}) or {}
        profile[field_name] = value
        data["profiles"][self.name] = profile

        self.profile_file.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.profile_file.with_suffix(".tmp")
        with open(temp_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)
        os.chmod(temp_file, 0o600)
        temp_file.rename(self.profile_file)

        self.data = data
        self.fields[field_name] = value
        logger.debug(f"Wrote profile field '{field_name}' to {self.profile_file}")


def load_profile(profile_file: Optional[Path] = None, name: Optional[str] = None) -> Profile:
    """Load the active profile using the global configuration defaults."""
    from sampler.core.config import get_config

    config = get_config()
    return Profile(profile_file or config.profile_file, name or config.profile_name)
