"""Sampler runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "sampler"
DEFAULT_API_BASE_URL = "https://api.stripe.com"


@dataclass
class SamplerConfig:
    """Runtime configuration for Sampler operations.

    Attributes:
        config_dir: Root directory for sampler state (default: ~/.config/sampler)
        cache_dir: Where template repositories are cloned (default: <config_dir>/samples-cache)
        profile_file: YAML profile store (default: <config_dir>/config.yml)
        profile_name: Active profile inside the profile store (default: default)
        api_base_url: Base URL for API requests
        request_timeout: Timeout in seconds for API requests (default: 30)
        git_timeout: Timeout in seconds for clone/pull (default: 300)
    """

    config_dir: Path = DEFAULT_CONFIG_DIR
    cache_dir: Optional[Path] = None
    profile_file: Optional[Path] = None
    profile_name: str = "default"
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: int = 30
    git_timeout: int = 300  # large samples take a while to clone

    def __post_init__(self):
        self.config_dir = Path(self.config_dir)
        if self.cache_dir is None:
            self.cache_dir = self.config_dir / "samples-cache"
        if self.profile_file is None:
            self.profile_file = self.config_dir / "config.yml"
        self.cache_dir = Path(self.cache_dir)
        self.profile_file = Path(self.profile_file)

    @classmethod
    def from_env(cls) -> "SamplerConfig":
        """Create config from environment variables.

        Environment variables:
            SAMPLER_CONFIG_DIR: Root state directory
            SAMPLER_CACHE_DIR: Repository cache directory
            SAMPLER_PROFILE_FILE: Profile store file
            SAMPLER_PROFILE: Profile name
            SAMPLER_API_BASE_URL: API base URL
            SAMPLER_REQUEST_TIMEOUT: API request timeout in seconds
            SAMPLER_GIT_TIMEOUT: Git clone/pull timeout in seconds

        Returns:
            SamplerConfig instance with values from environment or defaults
        """
        cache_dir = os.getenv("SAMPLER_CACHE_DIR")
        profile_file = os.getenv("SAMPLER_PROFILE_FILE")
        return cls(
            config_dir=Path(os.getenv("SAMPLER_CONFIG_DIR", str(DEFAULT_CONFIG_DIR))),
            cache_dir=Path(cache_dir) if cache_dir else None,
            profile_file=Path(profile_file) if profile_file else None,
            profile_name=os.getenv("SAMPLER_PROFILE", cls.profile_name),
            api_base_url=os.getenv("SAMPLER_API_BASE_URL", cls.api_base_url),
            request_timeout=int(
                os.getenv("SAMPLER_REQUEST_TIMEOUT", cls.request_timeout)
            ),
            git_timeout=int(os.getenv("SAMPLER_GIT_TIMEOUT", cls.git_timeout)),
        )


# Global config instance (can be overridden)
_config: Optional[SamplerConfig] = None


def get_config() -> SamplerConfig:
    """Get the global Sampler configuration.

    Returns:
        SamplerConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = SamplerConfig.from_env()
    return _config


def set_config(config: Optional[SamplerConfig]):
    """Set the global Sampler configuration.

    Args:
        config: SamplerConfig instance to use globally (None resets to environment)
    """
    global _config
    _config = config
