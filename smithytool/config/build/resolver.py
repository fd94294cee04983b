"""
Turns a BuildConfiguration into the argument list for `smithy build`.
"""
import logging
from pathlib import Path
from typing import List, Tuple

from ...core.exceptions import ConfigurationError
from ...utils.paths import join_classpath
from .models import BuildConfiguration, BuildParameters, ResolvedInvocation


def format_arguments(params: BuildParameters) -> List[str]:
    """
    Serialize build parameters in the order the Smithy CLI expects.

    Severity is always the final pair so nothing in extra_args can shadow it.
    """
    args = [
        "--library-classpath", params.library_classpath,
        "--build-classpath", params.build_classpath,
    ]
    if params.projection_source_tags:
        args += ["--projection-source-tags", ",".join(params.projection_source_tags)]
    if params.allow_unknown_traits:
        args.append("--allow-unknown-traits")
    args += ["--output", params.output]
    args += ["--source-projection", params.source_projection]
    for config in params.configs:
        args += ["--config", config]
    for source in params.sources:
        args += ["--model", source]
    args += ["--discover", "true" if params.discover else "false"]
    args.extend(params.extra_args)
    args += ["--severity", params.severity.value]
    return args


class InvocationResolver:
    """Validates build inputs and assembles a ResolvedInvocation"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def resolve(self, config: BuildConfiguration) -> ResolvedInvocation:
        """
        Resolve a build configuration.

        Args:
            config: Build configuration; config_files must be set (possibly empty)

        Returns:
            Immutable invocation for the executor

        Raises:
            ConfigurationError: If config files are unset, or were given but none exist
        """
        configs = self._existing_configs(config)
        sources = self._existing_sources(config.model_sources)

        params = BuildParameters(
            library_classpath=join_classpath(p.absolute() for p in config.discovery_classpath),
            build_classpath=join_classpath(p.absolute() for p in config.execution_classpath),
            projection_source_tags=tuple(sorted(config.projection_source_tags)),
            allow_unknown_traits=config.allow_unknown_traits,
            output=str(config.output_dir.absolute()),
            source_projection=config.source_projection,
            configs=configs,
            sources=sources,
            discover=config.discover,
            extra_args=tuple(config.logging.to_flags()) + config.extra_args,
            severity=config.severity,
        )

        invocation = ResolvedInvocation(
            arguments=tuple(format_arguments(params)),
            execution_classpath=tuple(str(p.absolute()) for p in config.execution_classpath),
            working_dir=(config.working_dir or Path.cwd()).absolute(),
            fork=config.fork,
        )
        self.logger.debug(f"Resolved smithy build arguments: {list(invocation.arguments)}")
        return invocation

    def _existing_configs(self, config: BuildConfiguration) -> Tuple[str, ...]:
        if config.config_files is None:
            raise ConfigurationError(
                "No smithy-build configs found. "
                "If this was intentional, set `config_files` to an empty list."
            )
        if config.config_files_explicitly_empty:
            self.logger.debug("smithy-build configs explicitly set to an empty list")
            return ()

        files = config.config_files
        existing = tuple(dict.fromkeys(str(f.absolute()) for f in files if f.exists()))
        if not existing:
            missing = ", ".join(str(f) for f in files)
            raise ConfigurationError(
                f"No smithy-build configs found (looked for: {missing}). "
                "If this was intentional, set `config_files` to an empty list."
            )
        return existing

    def _existing_sources(self, model_sources) -> Tuple[str, ...]:
        sources = []
        for source in model_sources:
            if source.exists():
                sources.append(str(source.absolute()))
            else:
                self.logger.debug(f"Skipping missing model source: {source}")
        return tuple(sources)
