"""Tests for the command-line interface."""

from typer.testing import CliRunner

from flatsplit.cli import app

runner = CliRunner()


class TestSplitCommand:
    def test_split_plain_file(self, flat_file, tmp_path) -> None:
        source = flat_file([("/a", "x"), ("/b", "x"), ("/c", "x")])
        work_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            [
                "split",
                str(source),
                "--plain",
                "--work-dir",
                str(work_dir),
                "--partitions",
                "3",
                "--min-size",
                "0",
                "--threshold",
                "0",
            ],
        )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in work_dir.iterdir()) == [
            "split-1-store.json",
            "split-2-store.json",
            "split-3-store.json",
        ]

    def test_split_with_protected_categories(self, flat_file, tmp_path, fixtures_dir) -> None:
        source = flat_file(
            [
                ("/content", "sling:Folder"),
                ("/content/a", "nt:unstructured"),
                ("/content/b", "nt:unstructured"),
                ("/etc", "nt:unstructured"),
            ]
        )
        work_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            [
                "split",
                str(source),
                "--plain",
                "-w",
                str(work_dir),
                "-n",
                "4",
                "--min-size",
                "0",
                "--threshold",
                "0",
                "--hierarchy",
                str(fixtures_dir / "hierarchy.yaml"),
                "--indexes",
                str(fixtures_dir / "indexes.yaml"),
            ],
        )

        assert result.exit_code == 0, result.output
        assert len(list(work_dir.iterdir())) == 2

    def test_skip_reported(self, flat_file, tmp_path) -> None:
        source = flat_file([("/a", "x")])

        result = runner.invoke(
            app, ["split", str(source), "--plain", "-w", str(tmp_path / "out")]
        )

        assert result.exit_code == 0, result.output
        assert "Not split" in result.output
        assert not (tmp_path / "out").exists()

    def test_error_exit_code(self, tmp_path) -> None:
        source = tmp_path / "store.json"
        source.write_text("/a|{}\n")

        result = runner.invoke(app, ["split", str(source), "-w", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_partition_count(self, flat_file) -> None:
        source = flat_file([("/a", "x")])

        result = runner.invoke(app, ["split", str(source), "--plain", "-n", "0"])

        assert result.exit_code == 1
        assert "Invalid partition count" in result.output


class TestOtherCommands:
    def test_categories(self, fixtures_dir) -> None:
        result = runner.invoke(
            app,
            [
                "categories",
                "--hierarchy",
                str(fixtures_dir / "hierarchy.yaml"),
                "--indexes",
                str(fixtures_dir / "indexes.yaml"),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "sling:OrderedFolder" in result.output
        assert "3 protected categories" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "flatsplit 0.1.0" in result.output
