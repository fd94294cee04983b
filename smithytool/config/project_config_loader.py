import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

from ..core.enums import Severity, LogLevel
from ..core.exceptions import ConfigurationError
from ..utils.paths import projection_output_dir
from .build.models import (
    BuildConfiguration,
    LoggingOptions,
    StagingRequest,
    SOURCE_PROJECTION,
    DEFAULT_STAGING_NAME,
)
from .build.executor import DEFAULT_MAIN_CLASS

DEFAULT_CONFIG_FILE = "smithy-build.json"
DEFAULT_MODEL_SOURCES = [
    "model",
    "src/main/smithy",
    "src/main/resources/META-INF/smithy",
]
LIST_FIELDS = (
    "config_files",
    "model_sources",
    "discovery_classpath",
    "execution_classpath",
    "projection_source_tags",
    "extra_args",
)


@dataclass
class LoggingConfig:
    """Smithy CLI verbosity"""
    level: str = "INFO"
    stacktrace: bool = False


@dataclass
class SmithyConfig:
    """Inputs to the smithy build command"""
    # None means the key was absent; [] is an explicit opt-out
    config_files: Optional[List[str]] = None
    model_sources: Optional[List[str]] = None
    discovery_classpath: List[str] = field(default_factory=list)
    execution_classpath: List[str] = field(default_factory=list)
    projection_source_tags: List[str] = field(default_factory=list)
    source_projection: str = SOURCE_PROJECTION
    severity: str = "WARNING"
    output_dir: Optional[str] = None
    allow_unknown_traits: bool = False
    discover: bool = True
    fork: bool = True
    extra_args: List[str] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SmithyConfig':
        """Create SmithyConfig from dictionary"""
        if not isinstance(data, dict):
            raise ConfigurationError(f"`smithy` must be a mapping, got {type(data).__name__}")
        data = dict(data)
        for name in LIST_FIELDS:
            value = data.get(name)
            # A bare string would otherwise be split into one entry per character
            if value is not None and not isinstance(value, list):
                raise ConfigurationError(
                    f"`smithy.{name}` must be a list, got {type(value).__name__}: {value!r}"
                )
        logging_data = data.pop('logging', None) or {}
        return cls(logging=LoggingConfig(**logging_data), **data)


@dataclass
class CliConfig:
    """How to launch the Smithy CLI"""
    java: str = "java"
    main_class: str = DEFAULT_MAIN_CLASS
    env: Dict[str, str] = field(default_factory=dict)


@dataclass
class StagingConfig:
    """Jar staging settings"""
    name: str = DEFAULT_STAGING_NAME
    projection: Optional[str] = None
    staging_root: Optional[str] = None


@dataclass
class ProjectConfig:
    """Project-level configuration for smithytool"""
    project_dir: Path
    project_name: str
    build_dir: str = "build"
    smithy: SmithyConfig = field(default_factory=SmithyConfig)
    cli: CliConfig = field(default_factory=CliConfig)
    staging: StagingConfig = field(default_factory=StagingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> 'ProjectConfig':
        """Create ProjectConfig from dictionary"""
        base_dir = Path(base_dir or Path.cwd())
        project_dir = (base_dir / data.get('project_dir', '.')).resolve()
        try:
            return cls(
                project_dir=project_dir,
                project_name=data.get('project_name') or project_dir.name,
                build_dir=data.get('build_dir', 'build'),
                smithy=SmithyConfig.from_dict(data.get('smithy') or {}),
                cli=CliConfig(**(data.get('cli') or {})),
                staging=StagingConfig(**(data.get('staging') or {}))
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid project configuration: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'ProjectConfig':
        """Load ProjectConfig from YAML file"""
        path = Path(yaml_path)
        if not path.exists():
            raise ConfigurationError(f"Project config not found: {path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(f"Project config must be a mapping: {path}")

        return cls.from_dict(data or {}, base_dir=path.parent)

    @classmethod
    def default(cls, project_dir: Optional[Path] = None) -> 'ProjectConfig':
        """Return default configuration for a project directory"""
        project_dir = Path(project_dir or Path.cwd()).resolve()
        return cls(project_dir=project_dir, project_name=project_dir.name)

    def _path(self, value: str) -> Path:
        return self.project_dir / value

    @property
    def build_path(self) -> Path:
        return self._path(self.build_dir)

    @property
    def output_dir(self) -> Path:
        if self.smithy.output_dir:
            return self._path(self.smithy.output_dir)
        return projection_output_dir(self.build_path, self.project_name)

    def to_build_configuration(self) -> BuildConfiguration:
        """Resolve paths and defaults into an immutable BuildConfiguration"""
        smithy = self.smithy

        if smithy.config_files is None:
            config_files = (self._path(DEFAULT_CONFIG_FILE),)
        else:
            config_files = tuple(self._path(p) for p in smithy.config_files)

        model_sources = smithy.model_sources
        if model_sources is None:
            model_sources = DEFAULT_MODEL_SOURCES

        return BuildConfiguration(
            output_dir=self.output_dir,
            config_files=config_files,
            model_sources=tuple(self._path(p) for p in model_sources),
            discovery_classpath=tuple(self._path(p) for p in smithy.discovery_classpath),
            execution_classpath=tuple(self._path(p) for p in smithy.execution_classpath),
            projection_source_tags=frozenset(smithy.projection_source_tags),
            source_projection=smithy.source_projection,
            severity=Severity.from_value(smithy.severity),
            allow_unknown_traits=smithy.allow_unknown_traits,
            logging=LoggingOptions(
                level=LogLevel.from_value(smithy.logging.level),
                stacktrace=smithy.logging.stacktrace
            ),
            extra_args=tuple(smithy.extra_args),
            discover=smithy.discover,
            fork=smithy.fork,
            working_dir=self.project_dir
        )

    def to_staging_request(self, projection: Optional[str] = None) -> StagingRequest:
        """Build a StagingRequest for the configured (or given) projection"""
        staging_root = self.staging.staging_root
        return StagingRequest(
            input_dir=self.output_dir,
            staging_root=self._path(staging_root) if staging_root else self.build_path,
            name=self.staging.name,
            projection=projection or self.staging.projection,
            primary_projection=self.smithy.source_projection
        )


def load_project_config(config_path: Optional[str] = None) -> ProjectConfig:
    """
    Load project configuration from YAML file.
    If no path provided, looks for smithy-project.yaml in standard locations.
    """
    if config_path:
        return ProjectConfig.from_yaml(config_path)

    search_paths = [
        Path("./smithy-project.yaml"),
        Path("./smithy-project.yml"),
        Path("./config/smithy-project.yaml"),
    ]

    for path in search_paths:
        if path.exists():
            return ProjectConfig.from_yaml(str(path))

    return ProjectConfig.default()
