"""Local cache of sample template repositories."""
import shutil
from pathlib import Path
from typing import Optional

from sampler.core.logger import get_logger
from sampler.samples.registry import resolve_sample
from sampler.services.git_manager import GitManager, PullResult

logger = get_logger(__name__)


class RepositoryCache:
    """Keeps one working copy per sample under the cache directory.

    Example:
        cache = RepositoryCache(Path("~/.config/sampler/samples-cache"), GitManager())
        repo = cache.sync("accept-a-payment")
    """

    def __init__(self, cache_dir: Path, git: Optional[GitManager] = None):
        self.cache_dir = Path(cache_dir)
        self.git = git or GitManager()

    def cache_path(self, identifier: str) -> Path:
        """Deterministic working-copy location for a sample."""
        return self.cache_dir / resolve_sample(identifier).name

    def sync(self, identifier: str) -> Path:
        """Ensure a current working copy exists and return its path.

        Clones when the working copy is missing, pulls otherwise. A pull that
        reports nothing to update counts as success.

        Raises:
            ConfigurationError: Unknown sample identifier
            NetworkError: Clone failed, or pull failed for another reason
        """
        sample = resolve_sample(identifier)
        repo_path = self.cache_dir / sample.name

        if not repo_path.exists():
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.git.clone(repo_path, sample.url)
            return repo_path

        result = self.git.pull(repo_path)
        if result is PullResult.ALREADY_UP_TO_DATE:
            logger.info(f"Sample '{sample.name}' is already up to date")
        else:
            logger.info(f"Updated cached sample '{sample.name}'")
        return repo_path

    def delete(self, identifier: str) -> bool:
        """Remove the working copy so the next sync clones fresh.

        Returns:
            True if a cached copy was removed
        """
        repo_path = self.cache_path(identifier)
        if not repo_path.exists():
            logger.debug(f"No cached copy at {repo_path}")
            return False

        shutil.rmtree(repo_path)
        logger.info(f"Removed cached sample at {repo_path}")
        return True
