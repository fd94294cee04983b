"""
Smithy build orchestration.
Resolves CLI invocations, runs them, and stages projection artifacts.
"""

from .models import (
    LoggingOptions,
    BuildConfiguration,
    BuildParameters,
    ResolvedInvocation,
    StagingRequest,
    BuildResult,
    StagingResult
)
from .resolver import InvocationResolver, format_arguments
from .stager import ArtifactStager
from .executor import CliExecutor
from .hasher import InvocationHasher
from .manager import SmithyBuildManager

__all__ = [
    'LoggingOptions',
    'BuildConfiguration',
    'BuildParameters',
    'ResolvedInvocation',
    'StagingRequest',
    'BuildResult',
    'StagingResult',
    'InvocationResolver',
    'format_arguments',
    'ArtifactStager',
    'CliExecutor',
    'InvocationHasher',
    'SmithyBuildManager',
]
