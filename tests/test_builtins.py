import os

import pytest

from tinysh.builtins import (
    contain_error,
    execute_cd,
    execute_env,
    execute_setenv,
    execute_unsetenv,
    handle_echo,
    handle_env,
)
from tinysh.environment import Environment


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    start = tmp_path / "start"
    start.mkdir()
    monkeypatch.chdir(start)
    return start


def make_env(**values):
    env = Environment()
    for name, value in values.items():
        env.set(name, value)
    return env


def test_cd_null_command():
    assert execute_cd(None, None) == 1


def test_cd_go_back(workdir):
    assert execute_cd(["cd", ".."], None) == 0
    assert os.path.samefile(os.getcwd(), workdir.parent)


def test_cd_go_home_tilde(workdir, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    env = make_env(HOME=str(home))
    assert execute_cd(["cd", "~"], env) == 0
    assert os.path.samefile(os.getcwd(), home)
    assert os.path.samefile(env.get("OLDPWD"), workdir)


def test_cd_go_home_null_value(workdir):
    env = make_env(HOME=None)
    assert execute_cd(["cd", "~"], env) == 1
    assert os.path.samefile(os.getcwd(), workdir)


def test_cd_go_home_without_env(workdir, capsys):
    assert execute_cd(["cd", "~"], None) == 1
    assert os.path.samefile(os.getcwd(), workdir)
    assert "cd: No home directory." in capsys.readouterr().err


def test_cd_no_argument_without_env(workdir):
    assert execute_cd(["cd"], None) == 1
    assert os.path.samefile(os.getcwd(), workdir)


def test_cd_no_argument_null_home(workdir):
    env = make_env(HOME=None)
    assert execute_cd(["cd"], env) == 1
    assert os.path.samefile(os.getcwd(), workdir)


def test_cd_absolute(workdir, tmp_path):
    target = tmp_path / "elsewhere"
    target.mkdir()
    assert execute_cd(["cd", str(target)], None) == 0
    assert os.path.samefile(os.getcwd(), target)


def test_cd_invalid_destination(workdir, capsys):
    assert execute_cd(["cd", "dbuazoadp6e9a"], None) == 1
    assert os.path.samefile(os.getcwd(), workdir)
    assert "dbuazoadp6e9a: No such file or directory." in capsys.readouterr().err


def test_cd_into_file(workdir, capsys):
    (workdir / "main.c").write_text("int x;\n")
    assert execute_cd(["cd", "main.c"], None) == 1
    assert os.path.samefile(os.getcwd(), workdir)
    assert "main.c: Not a directory." in capsys.readouterr().err


def test_cd_back(workdir, tmp_path):
    previous = tmp_path / "previous"
    previous.mkdir()
    env = make_env(OLDPWD=str(previous))
    assert execute_cd(["cd", "-"], env) == 0
    assert os.path.samefile(os.getcwd(), previous)
    assert os.path.samefile(env.get("OLDPWD"), workdir)


def test_cd_back_without_oldpwd(workdir, capsys):
    env = make_env(USER="someone")
    assert execute_cd(["cd", "-"], env) == 1
    assert os.path.samefile(os.getcwd(), workdir)
    assert os.path.samefile(env.get("OLDPWD"), workdir)
    assert ": No such file or directory." in capsys.readouterr().err


def test_cd_too_many_arguments(workdir, capsys):
    assert execute_cd(["cd", "a", "b"], None) == 1
    assert "cd: Too many arguments." in capsys.readouterr().err


def test_env_with_args():
    assert execute_env(Environment(), ["env", "something"]) == 1


@pytest.mark.parametrize(
    "name, expected",
    [("_hey", True), ("Hey!", True), ("Hey", False)],
)
def test_contain_error(name, expected):
    assert contain_error(name) is expected


def test_contain_error_messages(capsys):
    contain_error("_hey")
    contain_error("Hey!")
    out = capsys.readouterr().out
    assert "setenv: Variable name must begin with a letter." in out
    assert "setenv: Variable name must contain alphanumeric characters." in out


def test_execute_env_all_null():
    assert execute_env(None, None) == 0


def test_execute_env_command_null(capsys):
    env = make_env(**{"/bin": "PATH"})
    assert execute_env(env, None) == 0
    assert capsys.readouterr().out == "/bin=PATH\n"


def test_execute_env_env_null():
    assert execute_env(None, ["env", "*"]) == 1


def test_unsetenv_unset_all():
    env = make_env(_o="o_")
    env.set("/bin", "PATH")
    assert execute_unsetenv(env, ["PATH", "o_"]) == 0
    assert len(env) == 2


def test_unsetenv_removes_named():
    env = make_env(A="1", B="2")
    assert execute_unsetenv(env, ["unsetenv", "A"]) == 0
    assert "A" not in env
    assert env.get("B") == "2"


def test_unsetenv_inexistent():
    assert execute_unsetenv(None, ["PATH", "o_"]) == 0


def test_unsetenv_star():
    assert execute_unsetenv(None, ["*"]) == 0


def test_unsetenv_star_keeps_everything():
    env = make_env(A="1")
    assert execute_unsetenv(env, ["unsetenv", "A", "*"]) == 0
    assert env.get("A") == "1"


def test_setenv_sets_value():
    env = Environment()
    assert execute_setenv(env, "Name", "value") == 0
    assert env.get("Name") == "value"


def test_setenv_rejects_bad_name():
    env = Environment()
    assert execute_setenv(env, "1abc", "value") == 1
    assert "1abc" not in env


def test_handle_env_setenv_without_value():
    env = Environment()
    assert handle_env(["setenv", "FOO"], env) == 0
    assert env.to_strings() == ["FOO="]


def test_handle_env_setenv_alone_prints(capsys):
    env = make_env(A="b")
    assert handle_env(["setenv"], env) == 0
    assert capsys.readouterr().out == "A=b\n"


def test_handle_env_setenv_too_many(capsys):
    assert handle_env(["setenv", "a", "b", "c"], Environment()) == 1
    assert "setenv: Too many arguments." in capsys.readouterr().err


def test_handle_env_unsetenv_too_few(capsys):
    assert handle_env(["unsetenv"], Environment()) == 1
    assert "unsetenv: Too few arguments." in capsys.readouterr().err


def test_handle_env_other_command():
    assert handle_env(["ls", "-l"], Environment()) == 257


def test_echo_status(capsys):
    assert handle_echo(["echo", "$?"], 84, Environment()) == 0
    assert capsys.readouterr().out == "84\n"


def test_echo_variable(capsys):
    env = make_env(HOME="/home")
    assert handle_echo(["echo", "$HOME"], 0, env) == 0
    assert capsys.readouterr().out == "/home\n"


def test_echo_unknown_variable():
    assert handle_echo(["echo", "$NOPE"], 0, Environment()) == 257


def test_echo_plain_text_and_no_argument():
    assert handle_echo(["echo", "hello"], 0, Environment()) == 257
    assert handle_echo(["echo"], 0, Environment()) == 257