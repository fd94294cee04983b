"""
Path derivations shared with the Smithy CLI and the packaging step.
"""
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

PROJECTIONS_DIR_NAME = "smithyprojections"
META_INF_DIR_NAME = "META-INF"
SMITHY_DIR_NAME = "smithy"


def projection_plugin_path(root: PathLike, projection: str, plugin: str) -> Path:
    """
    Directory holding one plugin's artifacts for one projection.

    The Smithy CLI writes to exactly this location, so the join must not change.
    """
    return Path(root) / projection / plugin


def projection_output_dir(build_dir: PathLike, project_name: str) -> Path:
    """Default output directory for all projections of a project"""
    return Path(build_dir) / PROJECTIONS_DIR_NAME / project_name


def smithy_meta_inf_dir(staging_root: PathLike) -> Path:
    return Path(staging_root) / META_INF_DIR_NAME


def smithy_staging_dir(staging_root: PathLike) -> Path:
    return smithy_meta_inf_dir(staging_root) / SMITHY_DIR_NAME


def smithy_resource_temp_dir(name: str, staging_root: PathLike) -> Path:
    """Per-invocation directory the staged models are copied into"""
    return smithy_staging_dir(staging_root) / name


def join_classpath(entries) -> str:
    """Join classpath entries with the platform path separator"""
    return os.pathsep.join(str(entry) for entry in entries)
