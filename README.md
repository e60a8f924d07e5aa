# tinysh

A small POSIX command shell. It reads commands from a terminal, with a
colour prompt showing the date and the name of the current directory, or
line by line from a pipe or file on standard input.

## Features

- Built-ins: `cd` (no argument or `~` goes to `HOME`, `-` goes back to
  `OLDPWD`), `env`, `setenv NAME [VALUE]`, `unsetenv NAME...`, and `exit [N]`.
- `echo $?` prints the last status and `echo $VAR` prints a variable;
  any other `echo` runs the system's `echo` program.
- External programs found through `PATH`, or run by path such as
  `./program`.
- Command sequences with `;`, and `&&`, which skips the next command when
  the previous one failed.
- Pipes with `|`.
- Redirections: `>`, `>>`, `<` and here-documents with `<<`.
- Quoted arguments with `'...'` and `"..."`; an unclosed quote is reported
  as `Unmatched '"'.`
- Aliases read from a `.zshrc` file in the current directory, one per line
  in the form `name = replacement`, where the name is the whole command
  line. The file is created empty when it does not exist.
- In-line editing on a terminal: left and right arrows, backspace and
  forward delete. `Ctrl-D` leaves the shell.
- Malformed sequences such as `ls |`, `> out` or `ls > a > b` are rejected
  with `Invalid null command.`, `Missing name for redirect.` or
  `Ambiguous output redirect.`

## Installation

```
pip install .
```

## Usage

Start an interactive session:

```
tinysh
```

Run commands from standard input:

```
echo "ls -l | wc -l ; echo done" | tinysh
```

The shell takes no arguments. It exits with the status of the last
command, or with the value given to `exit`.

## Using it from Python

The pieces of the shell can be used on their own:

```python
from tinysh.environment import Environment
from tinysh.parsing import divide_commands, is_in_right_order
from tinysh.quoting import crop_strings

env = Environment.from_strings(["HOME=/home/me", "PATH=/bin:/usr/bin"])
env.get("HOME")
# '/home/me'
tokens = divide_commands("ls -l | grep py > out.txt")
# ['ls -l', '|', 'grep py', '>', 'out.txt']
assert is_in_right_order(tokens)
crop_strings('echo "hello world"', " ")
# ['echo', 'hello world']
```

`tinysh.executor.execute` runs one input line against an `Environment`
and a list of search directories and returns its status.
`tinysh.shell.run_shell` runs the read-and-execute loop over a given list
of `NAME=value` strings and an input stream, and returns the exit status.

## What it does not do

tinysh has no `||`, no background jobs or job control, no command
history, no filename globbing, and no variable expansion outside
`echo $VAR`. Line editing is limited to the keys listed above.

## Running the tests

```
pip install .[test]
pytest
```