# ypts

A small toolkit of everyday helpers: fixed working-directory names, simple
text-file reading and writing, string splitting, timestamps in UTC+08:00, a
date-stamped log writer, and a plain-text registry of enabled plug-ins.

It has no dependencies outside the standard library and needs Python 3.10
or later.

## Modules

### `ypts.paths`

Names of the working directories, each relative and ending in `/`:
`data()` gives `"data/"`, and likewise `res()`, `rep()`, `log()`, `bin()`
and `temp()`. Nothing here creates the directories.

### `ypts.fio`

- `file_write_new(fpath, text)` replaces a file's contents;
  `file_write_c(fpath, text)` appends to it, creating it if needed. Both
  raise `OSError` when the file cannot be opened.
- `file_read_all(fpath)` returns the whole file, or `""` if it cannot be
  read.
- `file_read_lines(fpath)` returns the lines without their `\n`; an
  unreadable file gives `[]`.
- `file_read_line(fpath, line_num)` returns one line. `0` is the first line,
  a negative number counts from the end (`-1` is the last). A number outside
  the file, or an unreadable file, gives `""`.
- `filter_files_by_extension(files, fileextname)` keeps the paths whose
  extension, without the dot, equals `fileextname`.
- `get_file_extension(file)` returns a path's extension without the dot;
  for a dot-file such as `.bashrc` it returns the name after the dot
  (`"bashrc"`).
- `trans_path_to_dot(path)` turns `a/b/c.txt` into `a.b_c.txt`: backslashes
  count as separators, the last separator becomes `_` and the others `.`.
- `remove_prefix(text, prefix)` drops a leading prefix if it is there.

### `ypts.data_process`

- `get_all_files(root_path)` lists every regular file below a directory,
  recursively. It raises `FileNotFoundError` or `NotADirectoryError` when
  the path is missing or not a directory.
- `is_dir_has_file(root_path)` returns whether the path is an existing,
  non-empty directory. For a missing path, a non-directory or a filesystem
  error it prints a short message and returns `False`.
- `part_str(text, part_by)` splits on every occurrence of a separator; an
  empty separator raises `ValueError`.
- `part_str_once(text, part_by)` splits on the first occurrence only and
  always returns a pair; the second part is `""` when the separator is
  absent.

### `ypts.timeutil`

- `utc_p0800(now=None)` gives a timestamp at UTC+08:00 such as
  `2024-05-01T09:30:00+0800`. Without `now` it uses the current time; an
  aware `datetime` is converted, a naive one is taken as local time.
- `date(now=None)` gives the date as `YYYY-M-D` without zero padding, for
  example `2024-5-1`; without `now` it uses the local date.

### `ypts.logger`

`write(level, msg, logpath=None)` takes a `Level` (`ERROR`, `WARNING`,
`DEBUG`, `INFO`) or its letter (`"E"`, `"W"`, `"D"`, `"I"`) and builds a
record such as `[2024-05-01T09:30:00+0800]I:message` followed by a newline.
The record is appended to `<current directory>/<logpath>/<date>.log`
(`logpath` defaults to `log/`), printed, and returned. If the log file
cannot be written — for instance because the directory does not exist — it
is skipped silently and the record is still printed. `error`, `warning`,
`debug` and `info` are shortcuts for the four levels.

### `ypts.plug`

The names of enabled plug-ins are kept in `data/plugs.ypts` under the
current directory, one per line; the `data/` directory must already exist.

- `enable(name)` appends a name (enabling twice adds it twice).
- `disable(name)` removes every entry of that name; `disable_all()` clears
  the list.
- `list_plugs()` returns the enabled names in the order they were enabled.
- `plug_main(argu)` accepts the argument forms `["able", name]`,
  `["unable", name]` and `["unable_all"]`. Anything else logs an error and
  raises `PlugCommandError`.
- `load(plug_name, argu)` calls the function registered for that name in
  the `HANDLERS` dict with the argument list and returns its result, or
  returns `None` when none is registered.

### `ypts.run`

`run_main(argu)` starts `argu[0]`: an enabled plug-in (through
`plug.load`) takes precedence over a function registered in the `BUILTINS`
dict; an unknown name returns `None`. An empty argument list logs an error
and raises `RunArgumentError`.

### `ypts.workdir`

- `executable_dir(executable=None)` returns the directory part of a path
  (default: the running program's path), or `None` if it has no separator.
- `set_current_dir_to_executable_dir(executable=None)` changes into that
  directory and returns whether it succeeded, so relative names such as
  `data/` resolve next to the program.

## Example

```python
import os

from ypts import data_process, fio, logger, plug

fio.file_write_new("notes.txt", "first\nsecond\nlast\n")
print(fio.file_read_line("notes.txt", -1))             # last
print(data_process.part_str("a,b,,c", ","))            # ['a', 'b', '', 'c']
print(data_process.part_str_once("key=value=x", "="))  # ('key', 'value=x')
print(fio.trans_path_to_dot("src/pkg/mod.py"))         # src.pkg_mod.py

os.makedirs("data", exist_ok=True)
plug.enable("reports")
print(plug.list_plugs())                               # ['reports']

os.makedirs("log", exist_ok=True)
logger.info("started")
```

## What it does not do

There is no command-line program: plug-in and run commands are reached
through `plug_main` and `run_main` from Python code. No plug-ins or
built-in functions come with the package; `plug.HANDLERS` and
`run.BUILTINS` start empty and are filled by the code that uses them.

## Tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```