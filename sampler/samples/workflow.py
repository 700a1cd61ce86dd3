"""End-to-end sample scaffolding.

Runs strictly in order: sync the cached repository, parse its manifest,
select variants (creating missing resources if the user agrees), copy the
files, then compose the server's .env file.
"""
import shutil
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from sampler.core.errors import SamplerError
from sampler.core.logger import get_logger
from sampler.core.profile import Profile
from sampler.models.manifest import SampleManifest, SelectionState
from sampler.prompts import Prompter
from sampler.samples.cache import RepositoryCache
from sampler.samples.dotenv_composer import EnvironmentComposer
from sampler.samples.manifest_loader import load_manifest
from sampler.samples.materializer import FileMaterializer
from sampler.samples.provisioner import ResourceProvisioner
from sampler.samples.selector import ensure_required_resources, select_variants

logger = get_logger(__name__)


class SampleWorkflow:
    """Holds the state of one scaffolding run.

    Example:
        workflow = SampleWorkflow(cache, profile, RichPrompter())
        workflow.initialize("accept-a-payment")
        workflow.select_options()
        workflow.copy(target)
        workflow.configure_dotenv(target)
        print(workflow.post_install())
    """

    def __init__(
        self,
        cache: RepositoryCache,
        profile: Profile,
        prompter: Prompter,
        provisioner: Optional[ResourceProvisioner] = None,
        materializer: Optional[FileMaterializer] = None,
        composer: Optional[EnvironmentComposer] = None,
        console: Optional[Console] = None,
    ):
        self.cache = cache
        self.profile = profile
        self.prompter = prompter
        self.provisioner = provisioner or ResourceProvisioner(profile)
        self.materializer = materializer or FileMaterializer()
        self.composer = composer or EnvironmentComposer(profile)
        self.console = console or Console()

        self.name: Optional[str] = None
        self.repo: Optional[Path] = None
        self.manifest: Optional[SampleManifest] = None
        self.selection: Optional[SelectionState] = None
        self.created_resources: List[str] = []

    def _require(self, attribute: str, step: str):
        value = getattr(self, attribute)
        if value is None:
            raise SamplerError(f"Cannot {step} before the sample is initialized and selected")
        return value

    def initialize(self, sample: str) -> SampleManifest:
        """Sync the cached repository and parse its manifest."""
        self.name = sample
        self.repo = self.cache.sync(sample)
        self.manifest = load_manifest(self.repo)
        logger.debug(f"Loaded manifest for '{self.manifest.name or sample}'")
        return self.manifest

    def select_options(self) -> SelectionState:
        """Choose variants and offer to create missing required resources."""
        manifest = self._require("manifest", "select options")
        self.selection = select_variants(manifest, self.prompter)
        self.created_resources = ensure_required_resources(
            manifest,
            self.profile,
            self.prompter,
            self.provisioner.create_and_persist,
            console=self.console,
        )
        return self.selection

    def copy(self, target: Path) -> None:
        selection = self._require("selection", "copy files")
        self.materializer.copy(self.repo, selection, Path(target))

    def configure_dotenv(self, sample_location: Path) -> Optional[Path]:
        selection = self._require("selection", "configure .env")
        return self.composer.compose(self.manifest, selection, Path(sample_location))

    def post_install(self) -> str:
        """Post-installation instructions from the manifest, or ''."""
        if self.manifest is None:
            return ""
        return self.manifest.post_install_message

    def run(self, sample: str, target: Path) -> Path:
        """Run every step in order and return the target directory."""
        target = Path(target)
        self.initialize(sample)
        self.select_options()
        self.copy(target)
        self.configure_dotenv(target)
        return target

    def cleanup(self, target: Path) -> None:
        """Remove a partially created sample directory."""
        target = Path(target)
        self.console.print("Cleaning up...")
        if target.exists():
            shutil.rmtree(target)
            logger.debug(f"Removed {target}")

    def delete_cache(self, sample: str) -> bool:
        """Drop the cached repository; the resource ledger is untouched."""
        return self.cache.delete(sample)
