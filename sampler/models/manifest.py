"""Sample manifest models parsed from a template's ``.cli.json``."""
from dataclasses import dataclass
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Integration name meaning "files live at the repository root"
MAIN_INTEGRATION = "main"


class Integration(BaseModel):
    """A named grouping of client and server variants."""

    model_config = ConfigDict(frozen=True)

    name: str
    clients: List[str] = Field(default_factory=list, description="Frontend client variants")
    servers: List[str] = Field(default_factory=list, description="Backend server variants")

    @field_validator('clients', 'servers', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @property
    def path(self) -> str:
        """Subfolder holding this integration's files ('' for main)."""
        if self.name == MAIN_INTEGRATION:
            return ""
        return self.name

    def has_clients(self) -> bool:
        return len(self.clients) > 0

    def has_servers(self) -> bool:
        return len(self.servers) > 0

    def has_multiple_clients(self) -> bool:
        return len(self.clients) > 1

    def has_multiple_servers(self) -> bool:
        return len(self.servers) > 1


class RequiredResourceRef(BaseModel):
    """A prerequisite resource and the env var that receives its id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    env_var: str = Field(..., alias='envVar')


class SampleManifest(BaseModel):
    """Declarative descriptor at the root of a sample repository."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    configure_dot_env: bool = Field(False, alias='configureDotEnv')
    post_install: Dict[str, str] = Field(default_factory=dict, alias='postInstall')
    integrations: List[Integration] = Field(..., min_length=1)
    required_resources: List[RequiredResourceRef] = Field(
        default_factory=list, alias='requiredResources'
    )

    @field_validator('post_install', 'required_resources', mode='before')
    @classmethod
    def none_as_default(cls, v, info):
        if v is None:
            return {} if info.field_name == 'post_install' else []
        return v

    def has_multiple_integrations(self) -> bool:
        return len(self.integrations) > 1

    def integration_names(self) -> List[str]:
        return [integration.name for integration in self.integrations]

    def get_integration(self, name: str) -> Integration:
        for integration in self.integrations:
            if integration.name == name:
                return integration
        raise KeyError(name)

    @property
    def post_install_message(self) -> str:
        return self.post_install.get('message', '')


@dataclass
class SelectionState:
    """The integration, client and server chosen for one run.

    An empty client or server means nothing was chosen for that axis.
    """

    integration: Integration
    client: str = ""
    server: str = ""

    @property
    def effective_client(self) -> str:
        """Client subfolder to copy; a lone variant is used without prompting."""
        if not self.client and len(self.integration.clients) == 1:
            return self.integration.clients[0]
        return self.client

    @property
    def effective_server(self) -> str:
        """Server subfolder to copy; a lone variant is used without prompting."""
        if not self.server and len(self.integration.servers) == 1:
            return self.integration.servers[0]
        return self.server
