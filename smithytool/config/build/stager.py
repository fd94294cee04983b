"""
Stages projection artifacts for inclusion in a packaged archive.
"""
import logging
import shutil
from pathlib import Path
from typing import List

from ...core.exceptions import MissingProjectionError
from .models import StagingRequest


class ArtifactStager:
    """Copies a projection's `sources` plugin output into the staging layout"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def stage(self, request: StagingRequest) -> None:
        """
        Copy models for the requested projection into the staging directory.

        A missing primary projection is a warning: projects without Smithy
        models legitimately produce nothing. A missing projection that was
        asked for by name is an error.

        Args:
            request: What to stage and where

        Raises:
            MissingProjectionError: If an explicitly requested projection has no output
        """
        self.logger.info("Copying smithy models to staging")
        sources = request.sources_plugin_path

        if not self.validate_sources(request):
            return

        target = request.resource_dir
        target.mkdir(parents=True, exist_ok=True)
        shutil.copytree(sources, target, dirs_exist_ok=True)
        self.logger.info(f"Staged models from {sources} into {target}")

    def validate_sources(self, request: StagingRequest) -> bool:
        """
        Check the sources plugin directory for a request.

        Returns:
            True if there is something to copy
        """
        sources = request.sources_plugin_path
        if sources.is_dir():
            return True

        if request.is_primary:
            self.logger.warning(f"No Smithy model files were found in {sources}")
            return False

        raise MissingProjectionError(request.projection_name, sources)

    def list_staged_files(self, request: StagingRequest) -> List[str]:
        """
        Relative paths of the files a stage() of this request copies.

        Only the projection's sources are listed; content already present in
        the resource directory is left out.
        """
        root: Path = request.sources_plugin_path
        if not root.is_dir():
            return []
        return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
