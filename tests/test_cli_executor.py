"""Test cases for CliExecutor - running resolved invocations."""

import os
import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from smithytool.config.build.executor import CliExecutor, DEFAULT_MAIN_CLASS
from smithytool.config.build.models import ResolvedInvocation
from smithytool.core.exceptions import ConfigurationError, ExternalToolFailure


@pytest.fixture
def invocation(tmp_path):
    return ResolvedInvocation(
        arguments=("--output", str(tmp_path / "out"), "--severity", "WARNING"),
        execution_classpath=("/libs/smithy-cli.jar", "/libs/smithy-model.jar"),
        working_dir=tmp_path,
        fork=True,
    )


def completed(returncode=0, stdout="", stderr=""):
    return Mock(returncode=returncode, stdout=stdout, stderr=stderr)


class TestForkedExecution:
    """Fork mode runs java as a subprocess"""

    def test_success_runs_java_with_classpath(self, invocation, tmp_path):
        executor = CliExecutor(java="/opt/java/bin/java", env={"SMITHY_HOME": "/opt/smithy"})

        with patch("smithytool.config.build.executor.subprocess.run", return_value=completed(stdout="done")) as run:
            assert executor.execute(invocation) == 0

        cmd = run.call_args.args[0]
        assert cmd[:4] == [
            "/opt/java/bin/java",
            "-cp",
            os.pathsep.join(["/libs/smithy-cli.jar", "/libs/smithy-model.jar"]),
            DEFAULT_MAIN_CLASS,
        ]
        assert cmd[4:] == ["build", "--output", str(tmp_path / "out"), "--severity", "WARNING"]
        assert run.call_args.kwargs["cwd"] == str(tmp_path)
        assert run.call_args.kwargs["env"]["SMITHY_HOME"] == "/opt/smithy"

    def test_custom_main_class_is_launched(self, invocation):
        executor = CliExecutor(main_class="com.example.SmithyFrontEnd")

        cmd = executor.build_command(invocation)

        assert cmd[3] == "com.example.SmithyFrontEnd"
        assert cmd[4] == "build"

    def test_non_zero_exit_raises(self, invocation):
        executor = CliExecutor()

        with patch(
            "smithytool.config.build.executor.subprocess.run",
            return_value=completed(returncode=1, stderr="Validation error: foo"),
        ):
            with pytest.raises(ExternalToolFailure) as exc_info:
                executor.execute(invocation)

        err = exc_info.value
        assert err.exit_code == 1
        assert err.arguments == invocation.argv()
        assert "--severity" in str(err)
        assert "Validation error: foo" in str(err)

    def test_missing_java_raises(self, invocation):
        executor = CliExecutor(java="no-such-java")

        with patch("smithytool.config.build.executor.subprocess.run", side_effect=FileNotFoundError("no-such-java")):
            with pytest.raises(ExternalToolFailure) as exc_info:
                executor.execute(invocation)

        assert exc_info.value.exit_code == -1


class TestInProcessExecution:
    """In-process mode delegates to a runner callable"""

    def test_runner_receives_argv(self, invocation):
        runner = Mock(return_value=0)
        executor = CliExecutor(in_process_runner=runner)
        in_process = ResolvedInvocation(
            arguments=invocation.arguments,
            execution_classpath=invocation.execution_classpath,
            working_dir=invocation.working_dir,
            fork=False,
        )

        assert executor.execute(in_process) == 0
        runner.assert_called_once_with(in_process.argv())

    def test_runner_non_zero_raises(self, invocation):
        executor = CliExecutor(in_process_runner=lambda argv: 2)
        in_process = ResolvedInvocation(invocation.arguments, (), Path("."), fork=False)

        with pytest.raises(ExternalToolFailure) as exc_info:
            executor.execute(in_process)

        assert exc_info.value.exit_code == 2

    def test_runner_exception_is_wrapped(self, invocation):
        def boom(argv):
            raise RuntimeError("model failed to load")

        executor = CliExecutor(in_process_runner=boom)
        in_process = ResolvedInvocation(invocation.arguments, (), Path("."), fork=False)

        with pytest.raises(ExternalToolFailure) as exc_info:
            executor.execute(in_process)

        assert "model failed to load" in str(exc_info.value)

    def test_no_runner_configured(self, invocation):
        in_process = ResolvedInvocation(invocation.arguments, (), Path("."), fork=False)

        with pytest.raises(ConfigurationError):
            CliExecutor().execute(in_process)
