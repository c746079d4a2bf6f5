"""Tests for the trailertally command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

import trailertally.cli.main
from tests.fixtures.repos import TARGET, make_commit
from trailertally.cli.main import cli
from trailertally.config import TrailerTallySettings


@pytest.fixture
def output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Send charts to a temporary directory."""
    out = tmp_path / "charts"
    out.mkdir()
    new_settings = TrailerTallySettings(output_dir=out, chart_width=300,
                                        chart_height=300, chart_dpi=50)
    monkeypatch.setattr(trailertally.cli.main, "settings", new_settings)
    return out


@pytest.fixture
def scenario_repo(temp_repo):
    """Authored, touched and ignored commits for the target."""
    repo_path, repo = temp_repo
    make_commit(repo, "Unrelated work", "other@example.org", "2023-12-31")
    make_commit(
        repo,
        f"Fix bug\n\nSigned-off-by: Target <{TARGET}>\n",
        "other@example.org",
        "2024-01-05",
    )
    make_commit(repo, "Add feature", TARGET, "2024-01-10", author_name="Target")
    return repo_path, repo


class TestHelpAndErrors:
    """Tests for --help output and argument errors."""

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for option in ["--path", "--email", "--since", "--partial", "--verbose"]:
            assert option in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "trailertally" in result.output

    def test_email_required(self, scenario_repo) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(cli, ["--path", str(repo_path)])
        assert result.exit_code != 0
        assert "--email" in result.output

    def test_bad_since_format(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--path", str(repo_path), "--email", TARGET, "--since", "05/01/2024"]
        )
        assert result.exit_code != 0
        assert "Summary:" not in result.output
        assert list(output_dir.iterdir()) == []

    def test_not_a_repository(self, tmp_path: Path, output_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--path", str(tmp_path), "--email", TARGET])
        assert result.exit_code == 1
        assert "Failed to open git repository" in result.output
        assert "Summary:" not in result.output


class TestAuditRun:
    """Tests for complete runs."""

    def test_end_to_end(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(cli, ["--path", str(repo_path), "--email", TARGET])

        assert result.exit_code == 0, result.output
        assert f"Scanning repository: {repo_path.resolve()}" in result.output
        assert "Total Scanned: 3" in result.output
        assert "Authored:      1" in result.output
        assert "Touched:       1" in result.output
        assert "Ignored:       1" in result.output
        assert "Signed-off-by: 1" in result.output
        assert "Reviewed:      0" in result.output
        assert (output_dir / "project.png").exists()

    def test_since_cutoff(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--path", str(repo_path), "--email", TARGET, "--since", "2024-01-05"],
        )

        assert result.exit_code == 0, result.output
        assert "Timeframe:           Since 2024-01-05" in result.output
        assert "Total Scanned: 2" in result.output
        assert "Ignored:       0" in result.output

    def test_email_case_insensitive(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--path", str(repo_path), "--email", TARGET.upper()]
        )
        assert result.exit_code == 0, result.output
        assert "Authored:      1" in result.output

    def test_partial_matching(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--path", str(repo_path), "--email", "example.com", "--partial"],
        )
        assert result.exit_code == 0, result.output
        assert "Authored:      1" in result.output

    def test_verbose_lists_authored_commits(self, scenario_repo, output_dir: Path) -> None:
        repo_path, repo = scenario_repo
        head = repo.head.commit.hexsha[:7]
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--path", str(repo_path), "--email", TARGET, "--verbose"]
        )
        assert result.exit_code == 0, result.output
        assert f"{head} | 2024-01-10 | Add feature" in result.output
        assert "Unrelated work" not in result.output

    def test_multi_identity_report(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "--path", str(repo_path),
                "--email", TARGET,
                "--email", "nobody@example.net",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Target Emails:" in result.output
        assert "No interaction: 1" in result.output
        assert "Touched" not in result.output
        assert (output_dir / "project.png").exists()

    def test_multi_identity_signed_off_only(self, temp_repo, output_dir: Path) -> None:
        """Test a sign-off-only history still produces a chart in multi mode."""
        repo_path, repo = temp_repo
        make_commit(
            repo,
            f"Fix bug\n\nSigned-off-by: Target <{TARGET}>\n",
            "other@example.org",
            "2024-01-05",
        )
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "--path", str(repo_path),
                "--email", TARGET,
                "--email", "b@x.org",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Total Scanned: 1" in result.output
        assert "No interaction: 0" in result.output
        assert "Signed-off-by: 1" in result.output
        assert (output_dir / "project.png").exists()

    def test_explicit_single_mode_with_several_emails(
        self, scenario_repo, output_dir: Path
    ) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "--path", str(repo_path),
                "--email", TARGET,
                "--email", "nobody@example.net",
                "--report-mode", "single",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Touched:       1" in result.output

    def test_empty_repository(self, temp_repo, output_dir: Path) -> None:
        """Test an empty repository prints zeros and writes no chart."""
        repo_path, _ = temp_repo
        runner = CliRunner()
        result = runner.invoke(cli, ["--path", str(repo_path), "--email", TARGET])

        assert result.exit_code == 0, result.output
        assert "Total Scanned: 0" in result.output
        assert "Authored:      0" in result.output
        assert list(output_dir.iterdir()) == []

    def test_repeat_runs_identical(self, scenario_repo, output_dir: Path) -> None:
        repo_path, _ = scenario_repo
        runner = CliRunner()
        args = ["--path", str(repo_path), "--email", TARGET]
        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)
        assert first.output == second.output
