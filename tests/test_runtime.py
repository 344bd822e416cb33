"""Tests for kickoff.pipeline.runtime module."""

from unittest.mock import MagicMock, patch

import pytest

from kickoff.pipeline.models import RunContext
from kickoff.pipeline.runtime import RuntimeReconciler
from kickoff.utils.errors import RuntimeInstallError


@pytest.fixture
def ctx():
    return RunContext(lts_version="v22.11.0", lts_major=22)


@pytest.fixture(autouse=True)
def quiet_console():
    with (
        patch("kickoff.pipeline.runtime.print_info"),
        patch("kickoff.pipeline.runtime.print_success"),
        patch("kickoff.pipeline.runtime.print_warning") as mock_warning,
    ):
        yield mock_warning


class TestRuntimeReconciler:
    def test_matching_major_skips_install(self, ctx):
        install = MagicMock()
        reconciler = RuntimeReconciler(read_version=lambda: "v22.3.0", install=install)

        reconciler.run(ctx)

        install.assert_not_called()
        assert ctx.current_major == 22
        assert ctx.runtime_install_attempted is False

    def test_different_major_installs_once(self, ctx):
        install = MagicMock()
        reconciler = RuntimeReconciler(read_version=lambda: "v20.18.0", install=install)

        reconciler.run(ctx)

        install.assert_called_once_with(22, "v22.11.0", "fnm")
        assert ctx.current_major == 20
        assert ctx.runtime_install_attempted is True

    def test_missing_node_installs_once(self, ctx):
        install = MagicMock()
        reconciler = RuntimeReconciler(read_version=lambda: None, install=install)

        reconciler.run(ctx)

        install.assert_called_once_with(22, "v22.11.0", "fnm")
        assert ctx.current_version is None
        assert ctx.current_major is None

    def test_unparseable_version_installs(self, ctx):
        install = MagicMock()
        reconciler = RuntimeReconciler(read_version=lambda: "garbage", install=install)

        reconciler.run(ctx)

        assert ctx.current_version == "garbage"
        install.assert_called_once()

    def test_install_failure_reported_and_continues(self, ctx, quiet_console):
        error = RuntimeInstallError(22, "v22.11.0", reason="fnm not found in PATH")
        reconciler = RuntimeReconciler(read_version=lambda: None, install=MagicMock(side_effect=error))

        reconciler.run(ctx)

        assert ctx.runtime_install_error == str(error)
        assert str(error) in [c[0][0] for c in quiet_console.call_args_list]

    def test_install_failure_fatal_when_strict(self, ctx):
        error = RuntimeInstallError(22, "v22.11.0")
        reconciler = RuntimeReconciler(
            strict=True, read_version=lambda: None, install=MagicMock(side_effect=error)
        )

        with pytest.raises(RuntimeInstallError):
            reconciler.run(ctx)

        assert ctx.runtime_install_error == str(error)

    def test_custom_tool_passed_to_installer(self, ctx):
        install = MagicMock()
        reconciler = RuntimeReconciler("volta", read_version=lambda: None, install=install)

        reconciler.run(ctx)

        assert install.call_args[0][2] == "volta"

    def test_defaults_use_node_integration(self, ctx):
        with (
            patch("kickoff.pipeline.runtime.get_node_version", return_value="v22.1.0") as mock_read,
            patch("kickoff.pipeline.runtime.install_node_major") as mock_install,
        ):
            RuntimeReconciler().run(ctx)

        mock_read.assert_called_once()
        mock_install.assert_not_called()

    def test_install_requires_lts(self):
        reconciler = RuntimeReconciler(read_version=lambda: None, install=MagicMock())

        with pytest.raises(ValueError):
            reconciler.install_lts(RunContext())
