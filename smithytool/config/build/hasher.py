"""
Canonical fingerprints for resolved invocations.
Lets a scheduler key cached build outputs on exactly what was run.
"""
import hashlib
import json
import logging
from pathlib import Path

from .models import ResolvedInvocation


class InvocationHasher:
    """Computes canonical hashes for invocations and build inputs"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def compute_invocation_hash(self, invocation: ResolvedInvocation) -> str:
        """
        Compute hash from a resolved invocation.
        Uses canonical JSON serialization so dict ordering never matters.

        Args:
            invocation: Resolved invocation

        Returns:
            SHA256 hash hex string
        """
        canonical_json = json.dumps(
            invocation.to_dict(),
            sort_keys=True,
            separators=(',', ':')
        )
        return hashlib.sha256(canonical_json.encode('utf-8')).hexdigest()

    def compute_file_content_hash(self, file_path: Path) -> str:
        """
        Compute hash of raw file content, e.g. a smithy-build.json.

        Args:
            file_path: Path to file

        Returns:
            SHA256 hash hex string
        """
        try:
            hash_obj = hashlib.sha256()
            with open(file_path, 'rb') as f:
                for chunk in iter(lambda: f.read(1024 * 1024), b""):
                    hash_obj.update(chunk)
            return hash_obj.hexdigest()
        except OSError as e:
            self.logger.error(f"Failed to compute file hash for {file_path}: {e}")
            raise
