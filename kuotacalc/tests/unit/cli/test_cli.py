"""Tests for the kuota-calc command line."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from kuotacalc import __version__, cli

_configure_logging = cli.configure_logging

DEPLOYMENT_YAML = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
spec:
  replicas: 10
  template:
    spec:
      containers:
        - name: nginx
          resources:
            requests:
              cpu: 250m
              memory: 64Mi
            limits:
              cpu: 500m
              memory: 256Mi
"""

JOB_YAML = """\
apiVersion: batch/v1
kind: Job
metadata:
  name: migrate
spec:
  template:
    spec:
      containers:
        - name: migrate
          resources:
            requests:
              cpu: "1"
              memory: 1Gi
"""


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    """Keep the CLI away from the root logger and the caller's environment."""
    calls: list[bool] = []
    monkeypatch.setattr(cli, "configure_logging", calls.append)
    for name in ("KUOTA_CALC_MAX_ROLLOUTS", "KUOTA_CALC_DETAILED", "KUOTA_CALC_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return calls


def _run(argv: list[str], stdin: str = "") -> tuple[int, str]:
    out = io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(stdin), stdout=out)
    return code, out.getvalue()


class TestSummaryOutput:
    """Tests for the default output."""

    def test_deployment_from_stdin(self) -> None:
        """Test the rollout total of a single deployment."""
        code, output = _run([], DEPLOYMENT_YAML)
        assert code == 0
        assert output.splitlines() == [
            "CPU Request: 3250m",
            "CPU Limit: 6500m",
            "Memory Request: 832Mi",
            "Memory Limit: 3328Mi",
        ]

    def test_reads_files(self, tmp_path: Path) -> None:
        """Test manifests are read from file arguments and stdin."""
        manifest = tmp_path / "job.yaml"
        manifest.write_text(JOB_YAML, encoding="utf-8")
        code, output = _run([str(manifest), "-"], DEPLOYMENT_YAML)
        assert code == 0
        assert "CPU Request: 4250m" in output

    def test_max_rollouts(self) -> None:
        """Test a limit of zero reports the steady state."""
        code, output = _run(["--max-rollouts", "0"], DEPLOYMENT_YAML)
        assert code == 0
        assert "CPU Request: 2500m" in output
        assert "Memory Limit: 2560Mi" in output

    def test_max_rollouts_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the environment supplies the rollout limit."""
        monkeypatch.setenv("KUOTA_CALC_MAX_ROLLOUTS", "0")
        _, output = _run([], DEPLOYMENT_YAML)
        assert "CPU Request: 2500m" in output

    def test_empty_input(self) -> None:
        """Test empty input reports zero totals."""
        code, output = _run([], "")
        assert code == 0
        assert "CPU Request: 0" in output
        assert "Memory Limit: 0" in output


class TestDetailedOutput:
    """Tests for --detailed."""

    def test_table_and_total(self) -> None:
        """Test the table row and the total section."""
        code, output = _run(["--detailed"], DEPLOYMENT_YAML)
        assert code == 0
        lines = output.splitlines()
        assert lines[0].split() == [
            "Version",
            "Kind",
            "Name",
            "Replicas",
            "Strategy",
            "MaxReplicas",
            "CPURequest",
            "CPULimit",
            "MemoryRequest",
            "MemoryLimit",
        ]
        assert lines[1].split() == [
            "apps/v1",
            "Deployment",
            "web",
            "10",
            "RollingUpdate",
            "13",
            "3250m",
            "6500m",
            "832Mi",
            "3328Mi",
        ]
        assert "Table and Total assuming simultaneous rollout of all resources" in output
        assert "Total\nCPU Request: 3250m" in output

    def test_limited_rollouts_note(self) -> None:
        """Test the notes when the total is limited."""
        _, output = _run(["--detailed", "--max-rollouts", "1"], DEPLOYMENT_YAML)
        assert "Table assuming simultaneous rollout of all resources" in output
        assert "Total assuming simultaneous rollout of 1 resources" in output


class TestErrors:
    """Tests for exit codes and error reporting."""

    def test_decode_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid manifests exit with 1 and print nothing on stdout."""
        code, output = _run([], DEPLOYMENT_YAML.replace("250m", "lots"))
        assert code == 1
        assert output == ""
        assert "Error: decoding apps/v1/Deployment" in capsys.readouterr().err

    def test_strategy_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unknown strategy types exit with 1."""
        manifest = DEPLOYMENT_YAML.replace(
            "  replicas: 10\n", "  replicas: 10\n  strategy:\n    type: BlueGreen\n"
        )
        code, _ = _run([], manifest)
        assert code == 1
        assert 'strategy "BlueGreen" is unknown' in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unreadable files exit with 1."""
        code, _ = _run([str(tmp_path / "missing.yaml")])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unsupported_kind_is_skipped(self) -> None:
        """Test unsupported documents do not fail the run."""
        code, output = _run([], f"apiVersion: v1\nkind: Service\n---\n{JOB_YAML}")
        assert code == 0
        assert "CPU Request: 1" in output

    def test_invalid_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid settings exit with 2."""
        monkeypatch.setenv("KUOTA_CALC_MAX_ROLLOUTS", "many")
        code, _ = _run([], DEPLOYMENT_YAML)
        assert code == 2

    def test_invalid_utf8_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a file that is not UTF-8 exits with 1."""
        manifest = tmp_path / "binary.yaml"
        manifest.write_bytes(b"kind: Pod\nname: \xff\xfe\n")
        code, output = _run([str(manifest)])
        assert code == 1
        assert output == ""
        assert "Error: reading input" in capsys.readouterr().err

    def test_invalid_utf8_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test undecodable stdin exits with 1."""
        stdin = io.TextIOWrapper(io.BytesIO(b"kind: \xff\n"), encoding="utf-8")
        code = cli.main([], stdin=stdin, stdout=io.StringIO())
        assert code == 1
        assert "Error: reading input" in capsys.readouterr().err

    def test_huge_quantity(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a quantity too large to represent exits with 1."""
        code, _ = _run([], JOB_YAML.replace("memory: 1Gi", "memory: 1e3000000"))
        assert code == 1
        assert "Error: decoding batch/v1/Job" in capsys.readouterr().err


class TestMisc:
    """Tests for --version and logging setup."""

    def test_version(self) -> None:
        """Test the version banner."""
        code, output = _run(["--version"])
        assert code == 0
        assert output.startswith(f"version {__version__}\n\tpython version: ")

    def test_version_ignores_invalid_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test --version works whatever the settings."""
        monkeypatch.setenv("KUOTA_CALC_MAX_ROLLOUTS", "many")
        code, output = _run(["--version"])
        assert code == 0
        assert output.startswith("version ")

    def test_debug_flag(self, logging_calls: list[bool]) -> None:
        """Test --debug turns on debug logging."""
        _run(["--debug"], "")
        assert logging_calls == [True]

    def test_debug_default(self, logging_calls: list[bool]) -> None:
        """Test logging stays at warning level by default."""
        _run([], "")
        assert logging_calls == [False]


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(("debug", "level"), [(True, logging.DEBUG), (False, logging.WARNING)])
    def test_levels(self, monkeypatch: pytest.MonkeyPatch, debug: bool, level: int) -> None:
        """Test the root level follows the debug flag."""
        captured: dict[str, object] = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        _configure_logging(debug)
        assert captured["level"] == level
        assert captured["force"] is True
