"""Tests for the CLI entry points."""

import io
import json

import httpx
import pytest
from click.testing import CliRunner

from openwrt_pkgdiff.cli.main import _wait_for_enter, cli
from openwrt_pkgdiff.core import fetcher

BASE_TEMPLATE = "http://mirror.test/{version}/{arch}/base/Packages"
ADDON_TEMPLATE = "http://mirror.test/{version}/{arch}/packages/Packages"


@pytest.fixture
def mock_upstream(monkeypatch, base_index, addon_index):
    """Route every AsyncClient created by the fetcher to an in-memory mirror."""
    routes = {
        "/23.05.5/x86_64/base/Packages": (200, base_index),
        "/23.05.5/x86_64/packages/Packages": (200, addon_index),
    }
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        status, body = routes.get(request.url.path, (404, ""))
        return httpx.Response(status, text=body)

    class MirrorClient(httpx.AsyncClient):
        def __init__(self, **kwargs):
            super().__init__(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(fetcher.httpx, "AsyncClient", MirrorClient)
    return requested


def _diff_args(*extra):
    return [
        "diff",
        "--release",
        "23.05.5",
        "--base-url-template",
        BASE_TEMPLATE,
        "--addon-url-template",
        ADDON_TEMPLATE,
        "--no-pause",
        *extra,
    ]


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "openwrt-pkgdiff" in result.output

    def test_diff_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["diff", "--help"])
        assert result.exit_code == 0
        assert "--release" in result.output
        assert "--arch" in result.output
        assert "--verbose" in result.output
        assert "--format" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestDiffCommand:
    def test_release_required(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["diff"])
        assert result.exit_code == 2
        assert "--release" in result.output

    def test_table_from_stdin(self, mock_upstream, manifest_text):
        runner = CliRunner()
        result = runner.invoke(cli, _diff_args(), input=manifest_text)
        assert result.exit_code == 0, result.output
        assert "Version differences" in result.stdout
        assert "dnsmasq" in result.stdout
        assert "my-custom-pkg" in result.stdout
        assert mock_upstream == [
            "http://mirror.test/23.05.5/x86_64/base/Packages",
            "http://mirror.test/23.05.5/x86_64/packages/Packages",
        ]

    def test_json_from_file(self, mock_upstream, manifest_text, tmp_path):
        manifest = tmp_path / "release.manifest"
        manifest.write_text(manifest_text)
        runner = CliRunner()
        result = runner.invoke(cli, _diff_args("--format", "json", str(manifest)))
        assert result.exit_code == 0, result.output

        data = json.loads(result.stdout)
        diffs = {d["name"]: d for d in data["differences"]}
        assert set(diffs) == {"6in4", "dnsmasq"}
        assert diffs["dnsmasq"]["upstream_version"] == "2.90-r5"
        assert data["downstream_only"] == [{"name": "my-custom-pkg", "version": "0.1.0-r1"}]

    def test_version_alias(self, mock_upstream):
        runner = CliRunner()
        args = _diff_args("--format", "json")
        args[1] = "--version"
        result = runner.invoke(cli, args, input="6in4 - 28\n")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["differences"] == []

    def test_network_error_exits_nonzero(self, mock_upstream):
        runner = CliRunner()
        result = runner.invoke(cli, _diff_args("--arch", "mips_24kc"), input="a - 1\n")
        assert result.exit_code == 1
        assert "404" in result.output

    def test_missing_manifest_exits_nonzero(self, mock_upstream, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, _diff_args(str(tmp_path / "missing.manifest")))
        assert result.exit_code == 1
        assert "cannot read manifest" in result.output

    def test_invalid_manifest_exits_nonzero(self, mock_upstream):
        runner = CliRunner()
        result = runner.invoke(cli, _diff_args(), input="not a manifest line\n")
        assert result.exit_code == 1
        assert "not a manifest line" in result.output

    def test_empty_release_is_usage_error(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["diff", "--release", "", "--no-pause"], input="")
        assert result.exit_code == 2


class TestCompareCommand:
    @pytest.mark.parametrize(
        "v1, v2, symbol",
        [
            ("1.0.0-r1", "1.0.0-r2", "<"),
            ("2:1.0.0", "1:9.9.9", ">"),
            ("a", "a", "="),
        ],
    )
    def test_compare(self, v1, v2, symbol):
        runner = CliRunner()
        result = runner.invoke(cli, ["compare", v1, v2])
        assert result.exit_code == 0
        assert result.output.strip() == f"{v1} {symbol} {v2}"


class TestUrlsCommand:
    def test_default(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["urls", "--release", "23.05.5", "--arch", "mips_24kc"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "base\thttps://downloads.openwrt.org/releases/23.05.5/packages/mips_24kc/base/Packages"
        assert lines[1].startswith("addon\t")

    def test_fixed_x86_64_and_feeds(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["urls", "-V", "23.05.5", "--arch", "mips_24kc", "--fixed-x86-64", "--feed", "luci"]
        )
        assert result.exit_code == 0
        assert "mips_24kc" not in result.output
        assert "/x86_64/luci/Packages" in result.output


class _TtyIO(io.StringIO):
    def isatty(self):
        return True


class TestPauseBetweenTables:
    def test_reads_one_line_on_terminal(self, monkeypatch):
        stdin, stdout = _TtyIO("\nleftover\n"), _TtyIO()
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.stdout", stdout)
        _wait_for_enter()
        assert stdin.read() == "leftover\n"
        assert "Press Enter" in stdout.getvalue()

    def test_skipped_without_terminal(self, monkeypatch):
        stdin = io.StringIO("untouched\n")
        monkeypatch.setattr("sys.stdin", stdin)
        _wait_for_enter()
        assert stdin.read() == "untouched\n"

    def test_diff_with_pause_enabled(self, mock_upstream, manifest_text):
        runner = CliRunner()
        args = [a for a in _diff_args() if a != "--no-pause"]
        result = runner.invoke(cli, args, input=manifest_text)
        assert result.exit_code == 0, result.output
        assert "Downstream-only packages" in result.stdout
