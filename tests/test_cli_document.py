"""CLI document stories: show and get against files, JSON text and LSX_CONFIG."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import orjson
import pytest
from click.testing import CliRunner

from lsx.adapters import cli as cli_mod
from lsx.adapters.cli import ExitCode
from lsx.adapters.memory import ConfigSourceStub
from lsx.composition import AppServices, build_testing
from lsx.domain.serializer import compact, reindent


def _invoke(runner: CliRunner, factory: Callable[[], AppServices], *args: str):
    return runner.invoke(cli_mod.cli, list(args), obj=factory)


# ---------------------------------------------------------------- show


@pytest.mark.os_agnostic
def test_show_prints_file_as_compact_json(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
    example_config_text: str,
) -> None:
    """show emits the whole document on one line."""
    result = _invoke(cli_runner, testing_factory, "show", str(example_config_path))

    assert result.exit_code == 0
    assert result.stdout == compact(example_config_text) + "\n"


@pytest.mark.os_agnostic
def test_show_indented_format(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
    example_config_text: str,
) -> None:
    """--format indented emits two-space indented JSON."""
    result = _invoke(cli_runner, testing_factory, "show", str(example_config_path), "--format", "INDENTED")

    assert result.exit_code == 0
    assert result.stdout == reindent(example_config_text) + "\n"


@pytest.mark.os_agnostic
def test_show_accepts_inline_json(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """SOURCE may be the JSON document itself."""
    result = _invoke(cli_runner, testing_factory, "show", '{ "a" : [1, 2] }')

    assert result.exit_code == 0
    assert result.stdout == '{"a":[1,2]}\n'


@pytest.mark.os_agnostic
def test_show_falls_back_to_environment(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Without SOURCE the LSX_CONFIG variable is used."""
    monkeypatch.setenv("LSX_CONFIG", str(example_config_path))

    result = _invoke(cli_runner, testing_factory, "show")

    assert result.exit_code == 0
    assert len(orjson.loads(result.stdout)) == 4


@pytest.mark.os_agnostic
def test_show_scoped_document(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """--scope prints only the sub-document, without bookkeeping keys."""
    result = _invoke(cli_runner, testing_factory, "show", str(example_config_path), "--scope", "servers.svr00")

    assert result.exit_code == 0
    assert result.stdout == '{"name":"svr00","type":"csi","addrs":["tcp://127.0.0.1:7979"]}\n'


@pytest.mark.os_agnostic
def test_show_unknown_scope_prints_empty_object(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """A scope that does not resolve is an empty document, not an error."""
    result = _invoke(cli_runner, testing_factory, "show", str(example_config_path), "--scope", "services.svc01")

    assert result.exit_code == 0
    assert result.stdout == "{}\n"


@pytest.mark.os_agnostic
def test_show_without_any_source_exits_with_config_error(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """No SOURCE and no LSX_CONFIG exits with EX_CONFIG."""
    result = _invoke(cli_runner, testing_factory, "show")

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "error: missing config" in result.output


@pytest.mark.os_agnostic
def test_show_malformed_json_exits_with_config_error(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """Undecodable SOURCE exits with EX_CONFIG."""
    result = _invoke(cli_runner, testing_factory, "show", "{broken")

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "error: invalid configuration JSON" in result.output


@pytest.mark.os_agnostic
def test_show_unreadable_file_exits_with_permission_denied(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A file that cannot be read exits with EACCES."""

    def deny(self: Path) -> bytes:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", deny)

    result = _invoke(cli_runner, testing_factory, "show", str(example_config_path))

    assert result.exit_code == ExitCode.PERMISSION_DENIED
    assert "error: read config failed" in result.output


@pytest.mark.os_agnostic
def test_show_directory_reports_a_read_failure(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    tmp_path: Path,
) -> None:
    """A directory SOURCE is reported as unreadable, never as invalid JSON."""
    result = _invoke(cli_runner, testing_factory, "show", str(tmp_path))

    assert result.exit_code not in (ExitCode.SUCCESS, ExitCode.CONFIG_ERROR)
    assert "error: read config failed" in result.output
    assert "invalid configuration JSON" not in result.output


@pytest.mark.os_agnostic
def test_show_uses_the_services_loader(cli_runner: CliRunner) -> None:
    """The document comes from the wired LoadConfig port."""
    stub = ConfigSourceStub({"prepared": {"from": "stub"}})
    services = build_testing(source=stub)

    result = cli_runner.invoke(cli_mod.cli, ["show", "prepared"], obj=lambda: services)

    assert result.exit_code == 0
    assert result.stdout == '{"from":"stub"}\n'
    assert stub.requests == ["prepared"]


# ---------------------------------------------------------------- get


@pytest.mark.os_agnostic
def test_get_prints_scalar_value(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """get prints text values as-is."""
    result = _invoke(cli_runner, testing_factory, "get", "services.svc00.api.volume.mount.host", str(example_config_path))

    assert result.exit_code == 0
    assert result.stdout == "tcp://192.168.0.192:7979\n"


@pytest.mark.os_agnostic
def test_get_prints_containers_as_compact_json(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """Lists and maps print as compact JSON."""
    result = _invoke(cli_runner, testing_factory, "get", "servers.svr00.addrs", str(example_config_path))

    assert result.exit_code == 0
    assert result.stdout == '["tcp://127.0.0.1:7979"]\n'


@pytest.mark.os_agnostic
def test_get_prints_booleans_as_words(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """Boolean values print as true/false."""
    result = _invoke(cli_runner, testing_factory, "get", "services.svc00.logging.requests", str(example_config_path))

    assert result.exit_code == 0
    assert result.stdout == "true\n"


@pytest.mark.os_agnostic
def test_get_within_scope_falls_back_to_parent(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """A scoped get retries the parent for keys the scope lacks."""
    result = _invoke(
        cli_runner, testing_factory, "get", "logging.level", str(example_config_path), "--scope", "servers.svr01"
    )

    assert result.exit_code == 0
    assert result.stdout == "debug\n"


@pytest.mark.os_agnostic
def test_get_honours_environment_override(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """LSX_<PATH> wins over the document."""
    monkeypatch.setenv("LSX_LOGGING_LEVEL", "warn")

    result = _invoke(cli_runner, testing_factory, "get", "logging.level", str(example_config_path))

    assert result.exit_code == 0
    assert result.stdout == "warn\n"


@pytest.mark.os_agnostic
def test_get_unknown_path_exits_with_invalid_argument(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
    example_config_path: Path,
) -> None:
    """An unresolved path exits with EINVAL and names the path."""
    result = _invoke(cli_runner, testing_factory, "get", "servers.svr99", str(example_config_path))

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "error: path not found: servers.svr99" in result.output


@pytest.mark.os_agnostic
def test_get_through_main_returns_the_exit_code(
    managed_traceback_state: None,
    example_config_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() reports a command's own exit code instead of a traceback."""
    exit_code = cli_mod.main(["get", "nope", str(example_config_path)], services_factory=build_testing)

    assert exit_code == ExitCode.INVALID_ARGUMENT
    assert "path not found: nope" in capsys.readouterr().err
