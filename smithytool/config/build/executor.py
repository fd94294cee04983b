"""
Runs a ResolvedInvocation against the Smithy CLI.

The argument spellings produced by `format_arguments` (`--library-classpath`,
`--build-classpath`, `--source-projection`, `--model`, `--discover`) assume a
front-end that accepts them. Point `main_class` (or the in-process runner) at
such an entry point when the stock SmithyCli options differ.
"""
import logging
import os
import subprocess
from typing import Callable, Dict, List, Optional

from ...core.exceptions import ConfigurationError, ExternalToolFailure
from ...utils.paths import join_classpath
from .models import ResolvedInvocation

DEFAULT_MAIN_CLASS = "software.amazon.smithy.cli.SmithyCli"

InProcessRunner = Callable[[List[str]], int]


class CliExecutor:
    """
    Executes the Smithy CLI either in a forked JVM or through an in-process runner.
    """

    def __init__(
        self,
        java: str = "java",
        main_class: str = DEFAULT_MAIN_CLASS,
        env: Optional[Dict[str, str]] = None,
        in_process_runner: Optional[InProcessRunner] = None
    ):
        """
        Initialize executor.

        Args:
            java: Java executable used in fork mode
            main_class: Entry point class of the Smithy CLI
            env: Extra environment variables for the forked process
            in_process_runner: Callable used when the invocation is not forked;
                receives the argument vector and returns an exit code
        """
        self.java = java
        self.main_class = main_class
        self.env = dict(env or {})
        self.in_process_runner = in_process_runner
        self.logger = logging.getLogger(__name__)

    def build_command(self, invocation: ResolvedInvocation) -> List[str]:
        """Full command line for fork mode"""
        return [
            self.java,
            "-cp", join_classpath(invocation.execution_classpath),
            self.main_class,
            *invocation.argv(),
        ]

    def execute(self, invocation: ResolvedInvocation) -> int:
        """
        Run the invocation and block until it finishes.

        Returns:
            Exit code (always 0; failures raise)

        Raises:
            ExternalToolFailure: If the CLI exits non-zero or the runner raises
            ConfigurationError: If fork is disabled and no runner is configured
        """
        if invocation.fork:
            return self._execute_forked(invocation)
        return self._execute_in_process(invocation)

    def _execute_forked(self, invocation: ResolvedInvocation) -> int:
        cmd = self.build_command(invocation)
        self.logger.info(f"Running smithy {invocation.command} in {invocation.working_dir}")
        self.logger.debug(f"Command: {cmd}")

        env = os.environ.copy()
        env.update(self.env)
        try:
            r = subprocess.run(
                cmd,
                cwd=str(invocation.working_dir),
                env=env,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            self.logger.error(f"Failed to start {self.java}: {e}")
            raise ExternalToolFailure(invocation.argv(), -1, str(e)) from e

        for line in (r.stdout or "").splitlines():
            self.logger.info(line)

        if r.returncode != 0:
            self.logger.error(f"Smithy CLI exited with code {r.returncode}")
            raise ExternalToolFailure(invocation.argv(), r.returncode, r.stderr)

        for line in (r.stderr or "").splitlines():
            self.logger.warning(line)
        return r.returncode

    def _execute_in_process(self, invocation: ResolvedInvocation) -> int:
        if self.in_process_runner is None:
            raise ConfigurationError(
                "Fork is disabled but no in-process Smithy CLI runner is configured"
            )

        argv = invocation.argv()
        self.logger.info(f"Running smithy {invocation.command} in-process")
        try:
            code = self.in_process_runner(argv)
        except Exception as e:
            self.logger.error(f"In-process smithy {invocation.command} raised: {e}")
            raise ExternalToolFailure(argv, 1, str(e)) from e

        code = int(code or 0)
        if code != 0:
            self.logger.error(f"Smithy CLI exited with code {code}")
            raise ExternalToolFailure(argv, code)
        return code
