# jestingjaguar

Escape `{{ ... }}` template delimiters so that text passes through a
template engine unchanged.

For example, the line

    artifacts/{{ workflow.name }}

becomes

    artifacts/{{"{{"}} workflow.name {{"}}"}}

Text that is already escaped this way is left alone, so running the tool
twice over the same file changes nothing the second time.

## Installation

    pip install .

## Command line

Escape a single file in place:

    jestingjaguar escape path/to/file.txt

Escape every file in a directory tree, recursively (files are visited in
lexical order):

    jestingjaguar escape path/to/directory

A file is rewritten only when at least one delimiter needed escaping. Files
are read and written as UTF-8; bytes that are not valid UTF-8 and line
endings are kept as they were.

Running `jestingjaguar` with no command prints the help text.

Options, given before the command:

- `-v`, `--verbose` — raise the log level; repeat for more detail
  (`-v` info, `-vv` debug, `-vvv` trace). Log messages go to standard error.
- `--config FILE` — YAML configuration file to load. Without it,
  `~/.jestingjaguar.yaml` is loaded when present.

With `-v` the tool reports a summary such as
`INFO: Processed 3 files, performed 5 escapes`.

When a path cannot be read or written, the tool prints `Error: ...` to
standard error and exits with status 1. In a directory, processing stops at
the first file that fails. Usage errors also exit with status 1.

## Library use

```python
from jestingjaguar.escaper import TemplateEscaper

text, count = TemplateEscaper().escape("{{ first }} and {{ second }}")
# text  == '{{"{{"}} first {{"}}"}} and {{"{{"}} second {{"}}"}}'
# count == 2
```

To escape files on disk:

```python
from jestingjaguar.processor import FileProcessor
from jestingjaguar.service import Service

stats = Service(FileProcessor()).process("templates/")
print(stats.files_processed, stats.escapes_performed)
```

`FileProcessor(escaper)` accepts any object with an
`escape(content) -> (text, count)` method and defaults to `TemplateEscaper`;
`Service(processor)` accepts any object with a `process_file(path) -> int`
method and defaults to `FileProcessor`. Both raise `OSError` on file errors.

`jestingjaguar.logger` offers `set_verbosity(count)`, `current_level()` and
the `error`, `info`, `debug` and `trace` functions, which take a
`%`-style message and arguments.

`jestingjaguar.cli.load_config(path)` returns the YAML configuration as a
dictionary, or an empty one when the file is missing, unreadable or not a
mapping.

## Limitations

- Only delimiters whose inner text contains no `}` are escaped.
- The configuration file is loaded, but no setting in it changes what the
  tool does.

## Running the tests

    pip install ".[test]"
    pytest