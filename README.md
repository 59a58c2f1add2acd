# minishell

A small shell core. It finds a command on `PATH`, opens its input and
output redirection files, and runs it as a child process. The package also
holds the string, character, buffer, line-reading and linked-list helpers
that the shell is built on.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
minishell
```

The command takes no arguments. If it is given any, it prints
`Minishell doesn't get arguments.` and exits with status 1.

Otherwise it runs one fixed sample command: `cat`, with standard input read
from `infile.txt` and standard output written to `test.txt`, both in the
current directory. `test.txt` is created with mode 0644 if needed and
truncated. If `cat` is not found on `PATH`, it prints
`command not found: cat`. If `infile.txt` cannot be opened, the reason is
printed on standard error and `test.txt` is not touched. In all of these
cases the command itself exits with status 0.

## What it does not do

There is no prompt and no reading of command lines. Nothing parses, expands
or quotes input, there are no built-in commands, and pipelines are not run:
`Command.next` can link commands, but `execute` runs only the command it is
given.

## Using it as a library

```python
from minishell.command import Command
from minishell.executor import execute
from minishell.pathfind import resolve

cmd = Command(args=["sort"], infile="names.txt", outfile="sorted.txt")
cmd.args = resolve(cmd.args)
status = execute(cmd)
```

- `minishell.command.Command` is a dataclass with `args`, `infile`,
  `outfile`, `append` and `next`, and a `name` property. `tester_command()`
  returns the sample command described above.
- `minishell.pathfind.search_path(env)` lists the `PATH` directories, each
  ending in `/`. `resolve(args, env)` returns `args` with the program name
  replaced by the path of its executable and raises `CommandNotFound` when
  there is none. A name containing `/` is only checked for being executable.
- `minishell.redirect.open_redirections(command)` is a context manager that
  opens the input file and then the output file (appending when
  `command.append` is set) and yields a `Redirections` with `stdin` and
  `stdout`. It raises `RedirectError` when a file cannot be opened.
- `minishell.executor.execute(command, env)` runs a command with its
  redirections and returns its exit status, or 1 after printing the reason
  on standard error when a file cannot be opened or the program cannot be
  started. `executor(env)` resolves and runs the sample command.
- `minishell.lines.LineReader` reads file descriptors one line at a time and
  keeps what was read past each line for the next call. `read_lines(fd,
  buffer_size)` yields every remaining line.
- `minishell.collector.Collector` tracks objects by identity and releases
  them with `free`, `clear`, or when its `with` block ends.
- `minishell.linked.LinkedList` is a singly linked list with `push_front`,
  `push_back`, `last`, `pop_front`, `clear`, `for_each` and `map`.
- `minishell.chars` classifies and converts ASCII characters (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `minishell.search` measures, searches and compares strings (`strlen`,
  `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `atoi`).
- `minishell.transform` builds new strings (`itoa`, `split`, `substr`,
  `strjoin`, `strtrim`, `strmapi`, `striteri`).
- `minishell.memory` works on byte buffers (`memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`).
- `minishell.output` writes to a stream or file descriptor (`put_char`,
  `put_str`, `put_endl`, `put_nbr`).