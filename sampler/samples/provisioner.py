"""Create required resources on the account and record their ids."""
import json
from typing import Optional

from sampler.core.config import get_config
from sampler.core.errors import ConfigurationError, DataError
from sampler.core.logger import get_logger
from sampler.core.profile import Profile
from sampler.samples.catalog import get_required_resource
from sampler.services.api_client import APIClient

logger = get_logger(__name__)


class ResourceProvisioner:
    """Creates catalog resources in test mode.

    Each created id is written to the profile immediately, so a later run
    only creates what is still missing.
    """

    def __init__(self, profile: Profile, client: Optional[APIClient] = None):
        self.profile = profile
        self._client = client

    @property
    def client(self) -> APIClient:
        if self._client is None:
            config = get_config()
            self._client = APIClient(
                config.api_base_url,
                self.profile.get_api_key(livemode=False),
                timeout=config.request_timeout,
            )
        return self._client

    def create(self, resource_name: str) -> str:
        """Create one resource and return its id.

        Raises:
            ConfigurationError: Name is not in the catalog, or no API key
            NetworkError: The request failed
            DataError: The response has no string ``id``
        """
        template = get_required_resource(resource_name)
        if template is None:
            raise ConfigurationError(
                f"Unexpected: tried to create unknown required resource {resource_name}"
            )

        logger.info(f"Creating {template.description}")
        body = self.client.post(template.http_path, template.data)

        resource_id = body.get("id")
        if not isinstance(resource_id, str) or not resource_id:
            raise DataError(
                f"Unexpected response when creating {resource_name}, "
                f"did not contain ID: {json.dumps(body)}"
            )

        logger.debug(f"Created {resource_name} = {resource_id}")
        return resource_id

    def persist(self, resource_name: str, resource_id: str) -> None:
        """Record the id in memory and durably in the profile store."""
        self.profile.set_sample_resource_id(resource_name, resource_id)
        self.profile.write_config_field(resource_name, resource_id)

    def create_and_persist(self, resource_name: str) -> str:
        resource_id = self.create(resource_name)
        self.persist(resource_name, resource_id)
        return resource_id
