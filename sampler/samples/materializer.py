"""Copy the selected subset of a sample repository into a target directory."""
import shutil
from pathlib import Path
from typing import Callable, List

from sampler.core.logger import get_logger
from sampler.models.manifest import SelectionState

logger = get_logger(__name__)


def list_files(directory: Path) -> List[str]:
    """Names of the regular files directly inside ``directory``."""
    return sorted(entry.name for entry in Path(directory).iterdir() if entry.is_file())


def copy_path(source: Path, destination: Path) -> None:
    """Copy a file or a whole directory tree, merging into existing folders."""
    source = Path(source)
    destination = Path(destination)
    if source.is_dir():
        shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)


class FileMaterializer:
    """Lays out a sample as ``server/``, ``client/`` and shared top-level files.

    The server and client variants are flattened so the result reads:

        example-sample/
        ├── client/
        ├── server/
        ├── README.md
        └── .env.example
    """

    def __init__(
        self,
        lister: Callable[[Path], List[str]] = list_files,
        copier: Callable[[Path, Path], None] = copy_path,
    ):
        self.lister = lister
        self.copier = copier

    def copy(self, repo_path: Path, selection: SelectionState, target: Path) -> None:
        """Materialize the selection into ``target``.

        Any copy error propagates; files already copied stay in place.
        """
        repo_path = Path(repo_path)
        target = Path(target)
        integration = selection.integration
        source_root = repo_path / integration.path if integration.path else repo_path

        if integration.has_servers():
            server_source = source_root / "server"
            if selection.effective_server:
                server_source = server_source / selection.effective_server
            logger.debug(f"Copying server from {server_source}")
            self.copier(server_source, target / "server")

        if integration.has_clients():
            client_source = source_root / "client"
            if selection.effective_client:
                client_source = client_source / selection.effective_client
            logger.debug(f"Copying client from {client_source}")
            self.copier(client_source, target / "client")

        for name in self.lister(source_root):
            self.copier(source_root / name, target / name)

        # Sample-wide files shared by every integration
        for name in self.lister(repo_path):
            self.copier(repo_path / name, target / name)

        logger.info(f"Copied sample files to {target}")
