"""
Models for the Smithy build domain.
"""
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, Any, Tuple, FrozenSet
from pathlib import Path

from ...core.enums import Severity, LogLevel
from ...utils.paths import (
    projection_plugin_path,
    smithy_meta_inf_dir,
    smithy_staging_dir,
    smithy_resource_temp_dir,
)

SOURCE_PROJECTION = "source"
SOURCES_PLUGIN_NAME = "sources"
DEFAULT_STAGING_NAME = "smithyJarStaging"
BUILD_COMMAND = "build"


@dataclass(frozen=True)
class LoggingOptions:
    """Verbosity forwarded to the Smithy CLI"""
    level: LogLevel = LogLevel.INFO
    stacktrace: bool = False

    def to_flags(self) -> List[str]:
        """Convert to CLI flags"""
        flags = []
        if self.stacktrace:
            flags.append("--stacktrace")
        if self.level == LogLevel.DEBUG:
            flags.append("--debug")
        elif self.level == LogLevel.QUIET:
            flags.append("--quiet")
        return flags


@dataclass(frozen=True)
class BuildConfiguration:
    """
    Fully resolved inputs for one `smithy build` invocation.

    `config_files` is None while unset; loaders replace None with the
    conventional default and the resolver rejects it. An empty tuple is an
    explicit opt-out of smithy-build configs.
    """
    output_dir: Path
    config_files: Optional[Tuple[Path, ...]] = None
    model_sources: Tuple[Path, ...] = ()
    discovery_classpath: Tuple[Path, ...] = ()
    execution_classpath: Tuple[Path, ...] = ()
    projection_source_tags: FrozenSet[str] = frozenset()
    source_projection: str = SOURCE_PROJECTION
    severity: Severity = Severity.WARNING
    allow_unknown_traits: bool = False
    logging: LoggingOptions = field(default_factory=LoggingOptions)
    extra_args: Tuple[str, ...] = ()
    discover: bool = True
    fork: bool = True
    working_dir: Optional[Path] = None

    def __post_init__(self):
        # Coerce loose inputs so the value compares and hashes by content
        object.__setattr__(self, 'output_dir', Path(self.output_dir))
        if self.config_files is not None:
            object.__setattr__(self, 'config_files', tuple(Path(p) for p in self.config_files))
        object.__setattr__(self, 'model_sources', tuple(Path(p) for p in self.model_sources))
        object.__setattr__(self, 'discovery_classpath', tuple(Path(p) for p in self.discovery_classpath))
        object.__setattr__(self, 'execution_classpath', tuple(Path(p) for p in self.execution_classpath))
        object.__setattr__(self, 'projection_source_tags', frozenset(self.projection_source_tags))
        object.__setattr__(self, 'severity', Severity.from_value(self.severity))
        object.__setattr__(self, 'extra_args', tuple(str(a) for a in self.extra_args))
        if self.working_dir is not None:
            object.__setattr__(self, 'working_dir', Path(self.working_dir))

    @property
    def config_files_explicitly_empty(self) -> bool:
        return self.config_files is not None and len(self.config_files) == 0


@dataclass(frozen=True)
class BuildParameters:
    """
    Structured request for the Smithy CLI, serialized by `format_arguments`.
    Holds only values that survived validation.
    """
    library_classpath: str
    build_classpath: str
    projection_source_tags: Tuple[str, ...]
    allow_unknown_traits: bool
    output: str
    source_projection: str
    configs: Tuple[str, ...]
    sources: Tuple[str, ...]
    discover: bool
    extra_args: Tuple[str, ...]
    severity: Severity


@dataclass(frozen=True)
class ResolvedInvocation:
    """Arguments and execution context for a single Smithy CLI run"""
    arguments: Tuple[str, ...]
    execution_classpath: Tuple[str, ...]
    working_dir: Path
    fork: bool = True
    command: str = BUILD_COMMAND

    def argv(self) -> List[str]:
        """Full argument vector including the CLI subcommand"""
        return [self.command, *self.arguments]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'command': self.command,
            'arguments': list(self.arguments),
            'execution_classpath': list(self.execution_classpath),
            'working_dir': str(self.working_dir),
            'fork': self.fork,
        }


@dataclass(frozen=True)
class StagingRequest:
    """Copy one projection's `sources` artifacts into a packaging layout"""
    input_dir: Path
    staging_root: Path
    name: str = DEFAULT_STAGING_NAME
    projection: Optional[str] = None
    primary_projection: str = SOURCE_PROJECTION

    def __post_init__(self):
        object.__setattr__(self, 'input_dir', Path(self.input_dir))
        object.__setattr__(self, 'staging_root', Path(self.staging_root))

    @property
    def projection_name(self) -> str:
        return self.projection or self.primary_projection

    @property
    def is_primary(self) -> bool:
        return self.projection_name == self.primary_projection

    @property
    def sources_plugin_path(self) -> Path:
        return projection_plugin_path(self.input_dir, self.projection_name, SOURCES_PLUGIN_NAME)

    @property
    def meta_inf_dir(self) -> Path:
        return smithy_meta_inf_dir(self.staging_root)

    @property
    def staging_dir(self) -> Path:
        return smithy_staging_dir(self.staging_root)

    @property
    def resource_dir(self) -> Path:
        return smithy_resource_temp_dir(self.name, self.staging_root)


@dataclass
class BuildResult:
    """Result of running the Smithy CLI build"""
    success: bool
    exit_code: int
    invocation_hash: str
    arguments: List[str] = field(default_factory=list)
    output_dir: Optional[str] = None
    config_hashes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)


@dataclass
class StagingResult:
    """Result of staging one projection"""
    projection: str
    source_path: str
    resource_dir: str
    copied_files: List[str] = field(default_factory=list)
    skipped: bool = False

    def print_summary(self):
        """Print human-readable summary"""
        if self.skipped:
            print(f"No models staged for projection '{self.projection}' ({self.source_path} missing)")
            return
        print(f"Staged {len(self.copied_files)} files from projection '{self.projection}'")
        print(f"   into {self.resource_dir}")
        for rel in self.copied_files:
            print(f"   - {rel}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)
