"""Git repository management for sample templates."""
import subprocess
from enum import Enum
from pathlib import Path
from typing import List, Optional

from sampler.core.errors import NetworkError
from sampler.core.logger import get_logger

logger = get_logger(__name__)

# git has printed both spellings across releases
_UP_TO_DATE_MARKERS = ("already up to date", "already up-to-date")


class PullResult(Enum):
    """Outcome of a successful pull."""

    UPDATED = "updated"
    ALREADY_UP_TO_DATE = "already-up-to-date"


class GitManager:
    """Manages local git operations for the sample cache."""

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    def _run(self, args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        cmd = ['git'] + args
        try:
            return subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.debug(f"git {' '.join(args)} failed: {stderr}")
            raise NetworkError(
                f"git {args[0]} failed: {stderr or e}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise NetworkError(f"git {args[0]} timed out after {self.timeout}s") from e
        except FileNotFoundError as e:
            raise NetworkError("Git not found. Please install git first.") from e

    def clone(self, destination: Path, url: str, branch: Optional[str] = None) -> None:
        """Clone a git repository into a local directory.

        Args:
            destination: Directory to clone into (must not exist)
            url: Git repository URL
            branch: Branch to check out (default: remote HEAD)

        Raises:
            NetworkError: If the clone fails
        """
        args = ['clone', '--quiet']
        if branch:
            args += ['-b', branch]
        args += [url, str(destination)]

        logger.info(f"Cloning {url} to {destination}")
        self._run(args)
        logger.debug(f"✓ Successfully cloned repository to {destination}")

    def pull(self, path: Path) -> PullResult:
        """Pull latest changes in an existing working copy.

        Args:
            path: Path to git repository

        Returns:
            PullResult.ALREADY_UP_TO_DATE when nothing changed, else PullResult.UPDATED

        Raises:
            NetworkError: For any failure other than "already up to date"
        """
        logger.info(f"Pulling latest changes in {path}")
        result = self._run(['pull'], cwd=path)

        output = f"{result.stdout or ''}\n{result.stderr or ''}".lower()
        if any(marker in output for marker in _UP_TO_DATE_MARKERS):
            logger.debug(f"{path} is already up to date")
            return PullResult.ALREADY_UP_TO_DATE

        if result.stdout:
            logger.debug(f"Git output: {result.stdout}")
        return PullResult.UPDATED

