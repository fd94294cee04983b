"""
smithytool - build orchestration for Smithy models

Main modules:
- core: Enums and error types
- config: Project configuration loading
- config.build: Invocation resolution, CLI execution and jar staging
- cli: Command line interface
"""

from .core.enums import Severity, LogLevel
from .core.exceptions import (
    SmithyToolError,
    ConfigurationError,
    MissingProjectionError,
    ExternalToolFailure
)
from .config.build import (
    BuildConfiguration,
    ResolvedInvocation,
    StagingRequest,
    InvocationResolver,
    ArtifactStager,
    CliExecutor,
    SmithyBuildManager
)
from .config.project_config_loader import ProjectConfig, load_project_config

__version__ = "0.1.0"
__all__ = [
    'Severity',
    'LogLevel',
    'SmithyToolError',
    'ConfigurationError',
    'MissingProjectionError',
    'ExternalToolFailure',
    'BuildConfiguration',
    'ResolvedInvocation',
    'StagingRequest',
    'InvocationResolver',
    'ArtifactStager',
    'CliExecutor',
    'SmithyBuildManager',
    'ProjectConfig',
    'load_project_config'
]
