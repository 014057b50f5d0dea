import pytest

from hotreload.cli import ArgOptions, main, parse_args


def _script(path, body):
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return str(path)


def test_parse_args_defaults():
    assert parse_args([]) == ArgOptions()


def test_parse_args_exclude():
    opts = parse_args(["-e", "build,out"])
    assert opts.exclude_list == ["build", "out"]
    assert opts.include_list == []


def test_parse_args_later_option_wins():
    opts = parse_args(["-e", "build", "-i", "src,include"])
    assert opts.include_list == ["src", "include"]
    assert opts.exclude_list == []

    opts = parse_args(["-i", "src", "-e", "build"])
    assert opts.exclude_list == ["build"]
    assert opts.include_list == []


def test_parse_args_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["-x"])
    assert excinfo.value.code == 1
    assert "Unknown option: x" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_directory(tmp_path, capsys):
    script = _script(tmp_path / "b.sh", "exit 0")
    assert main([str(tmp_path / "nodir"), script, script]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_missing_build_script(tmp_path):
    target = _script(tmp_path / "t.sh", "exit 0")
    assert main([str(tmp_path), str(tmp_path / "b.sh"), target]) == 1


def test_main_missing_target(tmp_path):
    build = _script(tmp_path / "b.sh", "exit 0")
    assert main([str(tmp_path), build, str(tmp_path / "t.sh")]) == 1


def test_main_failing_build_returns_its_status(tmp_path):
    build = _script(tmp_path / "b.sh", "exit 3")
    target = _script(tmp_path / "t.sh", "exit 0")
    assert main([str(tmp_path), build, target]) == 3