"""Tests for the command line entry point."""

import tarfile

import pytest

from unity_template import main as main_module
from unity_template.bundle import build_template
from unity_template.domain import Editor_Version
from unity_template.exceptions import PathNotFoundError


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UNITY_HUB_PATH", raising=False)
    for name in ("UNITY_TEMPLATE_CONFIG", "UNITY_TEMPLATE_BUILDS_DIR", "UNITY_TEMPLATE_OUTPUTS_DIR"):
        # set first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def config_file(tmp_path):
    hub = tmp_path / "hub"
    hub.mkdir()
    path = tmp_path / "config.toml"
    path.write_text(f'[essentials]\nunity_hub_path = "{hub.as_posix()}"\ndefault_dependencies = []\n')
    return path


def run(*argv):
    return main_module.main(list(argv))


class TestParser:
    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            main_module.build_parser().parse_args([])

    def test_pack_options(self):
        args = main_module.build_parser().parse_args(["--builds-dir", "b", "pack", "--build", "x", "--outputs-dir", "o"])
        assert (args.cmd, args.builds_dir, args.build, args.outputs_dir) == ("pack", "b", "x", "o")


class TestMain:
    def test_missing_config_writes_default(self, workspace, capsys):
        assert run("--config", "config.toml", "pack") == 1
        assert (workspace / "config.toml").is_file()
        assert "CONFIGURATION_ERROR" in capsys.readouterr().err

    def test_pack_named_build(self, config_file, make_project, descriptor, builds_dir, outputs_dir):
        root = build_template(make_project(), descriptor, builds_dir).build_root

        status = run(
            "--config", str(config_file),
            "--builds-dir", str(builds_dir),
            "pack", "--build", root.name, "--outputs-dir", str(outputs_dir),
        )

        assert status == 0
        archive = outputs_dir / f"{root.name}.tgz"
        with tarfile.open(archive, "r:gz") as tar:
            assert "package/package.json" in tar.getnames()

    def test_folder_settings_from_dotenv(self, workspace, make_project, descriptor):
        hub = workspace / "hub"
        hub.mkdir()
        (workspace / "custom.toml").write_text(f'[essentials]\nunity_hub_path = "{hub.as_posix()}"\n')
        (workspace / ".env").write_text(
            "UNITY_TEMPLATE_CONFIG=custom.toml\n"
            "UNITY_TEMPLATE_BUILDS_DIR=my-builds\n"
            "UNITY_TEMPLATE_OUTPUTS_DIR=my-outputs\n"
        )
        root = build_template(make_project(), descriptor, workspace / "my-builds").build_root

        assert run("pack", "--build", root.name) == 0
        assert not (workspace / "config.toml").exists()
        assert (workspace / "my-outputs" / f"{root.name}.tgz").is_file()

    def test_malformed_build_writes_no_archive(self, config_file, make_project, descriptor, builds_dir, outputs_dir):
        root = build_template(make_project(), descriptor, builds_dir).build_root
        (root / "package" / "package.json").write_text("{broken")

        status = run(
            "--config", str(config_file),
            "--builds-dir", str(builds_dir),
            "pack", "--build", root.name, "--outputs-dir", str(outputs_dir),
        )

        assert status == 1
        assert not outputs_dir.exists()

    def test_pack_without_builds(self, config_file, builds_dir, capsys):
        status = run("--config", str(config_file), "--builds-dir", str(builds_dir), "pack", "--build", "x")
        assert status == 1
        err = capsys.readouterr().err
        assert "PATH_NOT_FOUND" in err

    def test_new_builds_from_collected_answers(
        self, config_file, make_project, descriptor, builds_dir, monkeypatch
    ):
        project = make_project()
        seen = {}

        def fake_collect(raw_name, config, versions, discover, console=None):
            seen["name"] = raw_name
            seen["versions"] = versions
            return descriptor, project

        monkeypatch.setattr(main_module, "load_versions", lambda config: [Editor_Version("2022.3", "10f1")])
        monkeypatch.setattr(main_module, "collect_descriptor", fake_collect)

        status = run("--config", str(config_file), "--builds-dir", str(builds_dir), "new", "my-template")

        assert status == 0
        assert seen == {"name": "my-template", "versions": [Editor_Version("2022.3", "10f1")]}
        assert (builds_dir / "com.unity.template.mytemplate-0.0.1" / "package" / "package.json").is_file()

    def test_new_reports_missing_project(self, config_file, make_project, descriptor, builds_dir, monkeypatch):
        project = make_project(with_assets=False)
        monkeypatch.setattr(main_module, "load_versions", lambda config: [])
        monkeypatch.setattr(main_module, "collect_descriptor", lambda *a, **kw: (descriptor, project))

        assert run("--config", str(config_file), "--builds-dir", str(builds_dir), "new", "x") == 1
        assert not builds_dir.exists()


def test_report_error_shows_path_and_cause():
    import io

    from rich.console import Console

    buffer = io.StringIO()
    try:
        try:
            raise FileNotFoundError(2, "No such file or directory")
        except FileNotFoundError as cause:
            raise PathNotFoundError("Failed to read [things]", path="/tmp/x") from cause
    except PathNotFoundError as error:
        main_module.report_error(error, Console(file=buffer, width=200))

    output = buffer.getvalue()
    assert "error[PATH_NOT_FOUND]: Failed to read [things]" in output
    assert "at: /tmp/x" in output
    assert "> [Errno 2] No such file or directory" in output
