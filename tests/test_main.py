import json
import logging
import sys
import textwrap
from pathlib import Path

import pytest

from clab.__main__ import bootstrap, find_clab_config, main
from clab.parsers import get_root_parser, split_tokens

CONFIG = textwrap.dedent(
    """
    specs:
      - id: input
        tags: [i]
        consume: 1
        required: true
      - id: help
        tags: [h]
        abort: true
    """
)


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path):
    """Redirect Path.home() and the cwd to temporary directories."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    monkeypatch.delenv("CLAB_CONFIG", raising=False)
    monkeypatch.setenv("CLAB_LOG_MODE", "cli")
    yield home


@pytest.fixture(autouse=True)
def restore_environment():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    sys_path = list(sys.path)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sys.path[:] = sys_path


def write_config(path: Path) -> Path:
    path.write_text(CONFIG, encoding="UTF-8")
    return path


def test_split_tokens():
    assert split_tokens(["spec.yaml", "--json", "--", "-i", "--", "x"]) == (
        ["spec.yaml", "--json"],
        ["-i", "--", "x"],
    )
    assert split_tokens(["spec.yaml"]) == (["spec.yaml"], [])


def test_root_parser():
    args = get_root_parser().parse_args(["spec.yaml", "--json", "-v"])
    assert args.config == "spec.yaml"
    assert args.json
    assert args.verbose
    assert not args.specs
    assert args.log_mode is None


def test_find_clab_config():
    assert find_clab_config() is None
    config_file = write_config(Path("clab.yaml")).resolve()
    assert find_clab_config().resolve() == config_file


def test_find_global_config(fake_home):
    config_file = fake_home / ".config" / "clab" / "clab.toml"
    config_file.parent.mkdir(parents=True)
    config_file.touch()
    assert find_clab_config() == config_file


def test_find_config_from_env(monkeypatch, tmp_path):
    config_file = write_config(tmp_path / "custom.yaml")
    monkeypatch.setenv("CLAB_CONFIG", str(config_file))
    assert find_clab_config() == config_file


def test_bootstrap_adds_config_dir_to_path(tmp_path):
    config_file = write_config(tmp_path / "specs.yaml")
    assert bootstrap(str(config_file)) == config_file
    assert str(tmp_path.resolve()) in sys.path


def test_bootstrap_without_config():
    sys_path_before = list(sys.path)
    assert bootstrap(None) is None
    assert sys.path == sys_path_before


def test_main_no_config(capsys):
    assert main([]) == 2
    assert "No spec file found" in capsys.readouterr().out


def test_main_evaluates_tokens(capsys):
    write_config(Path("clab.yaml"))
    assert main(["--", "-i", "in.txt"]) == 0
    out = capsys.readouterr().out
    assert "in.txt" in out


def test_main_json(capsys, tmp_path):
    config_file = write_config(tmp_path / "spec.yaml")
    assert main([str(config_file), "--json", "--", "-i", "in.txt"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result == {
        "aborted_by": None,
        "states": {"input": True, "help": False},
        "values": {"input": ["in.txt"], "help": []},
    }


def test_main_json_abort(capsys):
    write_config(Path("clab.yaml"))
    assert main(["--json", "--", "-h"]) == 0
    assert json.loads(capsys.readouterr().out)["aborted_by"] == "help"


def test_main_evaluation_error(capsys):
    write_config(Path("clab.yaml"))
    assert main(["--json", "--", "stray"]) == 1
    error = json.loads(capsys.readouterr().out)
    assert error["error"] == "unexpected_argument"
    assert error["value"] == "stray"

    assert main([]) == 1
    assert "missing_argument" in capsys.readouterr().out


def test_main_bad_config(capsys):
    Path("clab.yaml").write_text("specs: [{id: x, bogus: 1}]", encoding="UTF-8")
    assert main([]) == 2
    assert "Could not load" in capsys.readouterr().out


def test_main_specs(capsys):
    write_config(Path("clab.yaml"))
    assert main(["--specs"]) == 0
    out = capsys.readouterr().out
    assert "Argument specs" in out
    assert "input" in out
