from tinysh.environment import Environment, divide_line, size_first_word


def test_size_first_word_valid_word():
    assert size_first_word("hey!=Gabin", "=") == 4


def test_size_first_word_null_word():
    assert size_first_word(None, "=") == 0


def test_size_first_word_size_null():
    assert size_first_word(None, "\0") == 0


def test_size_first_word_not_null():
    assert size_first_word("hey !", "!") == 4


def test_size_first_word_without_separator():
    assert size_first_word("hey", "=") == 3


def test_divide_line():
    assert divide_line("hey=bonjour", "=") == ("hey", "bonjour")


def test_divide_a_line():
    assert divide_line("hey !", "!") == ("hey ", "")


def test_divide_line_keeps_later_separators():
    assert divide_line("A=b=c", "=") == ("A", "b=c")


def test_fill_list_line_without_value():
    env = Environment()
    env.add_line("hey")
    assert list(env) == ["hey"]
    assert env.get("hey") == ""


def test_from_strings_round_trip():
    entries = ["PATH=/bin:/usr/bin", "HOME=/home/user", "EMPTY="]
    env = Environment.from_strings(entries)
    assert env.to_strings() == entries
    assert len(env) == 3
    assert env.get("PATH") == "/bin:/usr/bin"


def test_from_strings_none():
    env = Environment.from_strings(None)
    assert len(env) == 0
    assert env.to_strings() == []


def test_from_strings_first_duplicate_wins():
    env = Environment.from_strings(["A=1", "A=2"])
    assert env.get("A") == "1"
    assert len(env) == 1


def test_set_updates_in_place_and_appends():
    env = Environment.from_strings(["A=1", "B=2"])
    env.set("A", "9")
    env.set("C", "3")
    assert env.to_strings() == ["A=9", "B=2", "C=3"]


def test_set_none_value_renders_empty():
    env = Environment()
    env.set("X", None)
    assert "X" in env
    assert env.get("X") is None
    assert env.to_strings() == ["X="]


def test_unset_existing_and_missing():
    env = Environment.from_strings(["_o=o_", "/bin=PATH"])
    env.unset("_o")
    env.unset("missing")
    assert list(env) == ["/bin"]
    assert "_o" not in env


def test_get_missing_is_none():
    env = Environment.from_strings(["A=1"])
    assert env.get("B") is None