"""Variant selection and required-resource gap detection."""
from typing import Callable, List, Optional, Sequence

from rich.console import Console

from sampler.core.logger import get_logger
from sampler.core.profile import Profile
from sampler.models.manifest import SampleManifest, SelectionState
from sampler.prompts import AUTO_CREATE_AXIS, Prompter
from sampler.samples.catalog import RequiredResourceTemplate, get_required_resource

logger = get_logger(__name__)


def _choose(prompter: Prompter, axis: str, label: str, options: Sequence[str]) -> str:
    """Prompt only when there is a real choice; otherwise leave the axis empty."""
    if len(options) > 1:
        return prompter.select(axis, label, options)
    return ""


def select_variants(manifest: SampleManifest, prompter: Prompter) -> SelectionState:
    """Resolve integration, then client, then server.

    Raises:
        UserCancelled: If the user aborts a prompt
    """
    if manifest.has_multiple_integrations():
        name = prompter.select(
            "integration",
            "What type of integration would you like to use",
            manifest.integration_names(),
        )
        integration = manifest.get_integration(name)
    else:
        integration = manifest.integrations[0]

    client = _choose(
        prompter, "client", "Which client would you like to use", integration.clients
    )
    server = _choose(
        prompter, "server", "What server would you like to use", integration.servers
    )

    logger.debug(
        f"Selected integration={integration.name!r} client={client!r} server={server!r}"
    )
    return SelectionState(integration=integration, client=client, server=server)


def missing_required_resources(
    manifest: SampleManifest, profile: Profile
) -> List[RequiredResourceTemplate]:
    """Catalog entries the manifest needs that have no id in the profile yet.

    Names that are not in the catalog are skipped with a warning. A name
    listed more than once is returned once, at its first position.
    """
    missing = []
    seen = set()
    for ref in manifest.required_resources:
        template = get_required_resource(ref.name)
        if template is None:
            logger.warning(f"Sample requires unknown resource '{ref.name}'; skipping")
            continue
        if template.name in seen:
            continue
        seen.add(template.name)
        if not profile.get_sample_resource_id(template.name):
            missing.append(template)
    return missing


def confirm_resource_creation(
    missing: Sequence[RequiredResourceTemplate],
    prompter: Prompter,
    console: Optional[Console] = None,
) -> bool:
    """Ask whether to auto-create the listed resources."""
    console = console or Console()
    descriptions = "\n  * ".join(template.description for template in missing)
    console.print(
        "This sample requires a few pre-existing resources to exist in test mode "
        f"on your account:\n  * {descriptions}"
    )
    choice = prompter.select(
        AUTO_CREATE_AXIS,
        "Would you like us to automatically create these and configure their IDs?",
        ["yes", "no"],
    )
    return choice == "yes"


def ensure_required_resources(
    manifest: SampleManifest,
    profile: Profile,
    prompter: Prompter,
    create: Callable[[str], str],
    console: Optional[Console] = None,
) -> List[str]:
    """Offer to create missing resources and create them one by one.

    ``create`` provisions and persists a single resource by catalog name. A
    failure stops the loop; resources created before it stay recorded.

    Returns:
        Catalog names of the resources created during this call
    """
    missing = missing_required_resources(manifest, profile)
    if not missing:
        return []

    if not confirm_resource_creation(missing, prompter, console):
        logger.info("Skipping creation of required resources")
        return []

    created = []
    for template in missing:
        create(template.name)
        created.append(template.name)
    return created
