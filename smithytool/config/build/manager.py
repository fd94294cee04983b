"""
Main build manager that orchestrates smithy builds and jar staging.
"""
import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ...utils.paths import projection_plugin_path
from .models import (
    BuildConfiguration,
    BuildResult,
    ResolvedInvocation,
    StagingResult,
)
from .resolver import InvocationResolver
from .stager import ArtifactStager
from .executor import CliExecutor
from .hasher import InvocationHasher

if TYPE_CHECKING:
    from ..project_config_loader import ProjectConfig


class SmithyBuildManager:
    """
    Host-side orchestrator: resolves the build, runs the CLI, stages artifacts.
    """

    def __init__(
        self,
        project_config: 'ProjectConfig',
        executor: Optional[CliExecutor] = None
    ):
        """
        Initialize smithy build manager.

        Args:
            project_config: Loaded project configuration
            executor: CLI executor; built from the project's `cli` section if omitted
        """
        self.project_config = project_config
        self.logger = logging.getLogger(__name__)

        self.resolver = InvocationResolver()
        self.stager = ArtifactStager()
        self.hasher = InvocationHasher()
        self.executor = executor or CliExecutor(
            java=project_config.cli.java,
            main_class=project_config.cli.main_class,
            env=project_config.cli.env
        )

    def build_configuration(self) -> BuildConfiguration:
        return self.project_config.to_build_configuration()

    def resolve(self) -> ResolvedInvocation:
        """Resolve the smithy build invocation without running it"""
        return self.resolver.resolve(self.build_configuration())

    def build(self) -> BuildResult:
        """
        Run smithy build for the project.

        Returns:
            BuildResult for the successful run

        Raises:
            ConfigurationError: If the configuration cannot be resolved
            ExternalToolFailure: If the CLI fails
        """
        self.logger.info("Running smithy build")
        config = self.build_configuration()
        invocation = self.resolver.resolve(config)
        invocation_hash = self.hasher.compute_invocation_hash(invocation)
        self.logger.debug(f"Invocation hash: {invocation_hash}")

        config_hashes = {}
        for config_file in config.config_files or ():
            if config_file.exists():
                config_hashes[str(config_file)] = self.hasher.compute_file_content_hash(config_file)

        exit_code = self.executor.execute(invocation)

        self.logger.info("Smithy build complete")
        return BuildResult(
            success=True,
            exit_code=exit_code,
            invocation_hash=invocation_hash,
            arguments=invocation.argv(),
            output_dir=str(config.output_dir),
            config_hashes=config_hashes
        )

    def stage(self, projection: Optional[str] = None) -> StagingResult:
        """
        Stage a projection's models for packaging.

        Args:
            projection: Projection to stage; the configured one if omitted

        Raises:
            MissingProjectionError: If an explicitly requested projection is missing
        """
        request = self.project_config.to_staging_request(projection)
        result = StagingResult(
            projection=request.projection_name,
            source_path=str(request.sources_plugin_path),
            resource_dir=str(request.resource_dir)
        )

        if not self.stager.validate_sources(request):
            result.skipped = True
            return result

        self.stager.stage(request)
        result.copied_files = self.stager.list_staged_files(request)
        return result

    def plugin_projection_dir(self, projection: str, plugin: str) -> Path:
        """Directory containing a plugin's artifacts for a projection"""
        return projection_plugin_path(self.project_config.output_dir, projection, plugin)
