# nitroterm

A terminal tool for release housekeeping: semantic version bumps, git
tagging, a version history listing and a check for newer releases, behind a
coloured interactive menu.

## Installation

```
pip install nitroterm
```

To run the test suite, install the `test` extra:

```
pip install "nitroterm[test]"
pytest
```

## Usage

Run without arguments (or with arguments it does not recognise) to open the
interactive menu:

```
nitroterm
```

The menu starts with a gradient banner, then accepts a choice by number or
by name:

- `8` or `version` opens the version sub-menu (bump patch, minor or major,
  show the current version, show the version history; any other choice shows
  the current version);
- `9` or `help` prints the list of commands and usage examples;
- `0`, `exit`, `quit` or `q` leaves the menu, as does the end of input.

`nitroterm -V` / `nitroterm --version` prints the program version.

### Version management

```
nitroterm version show       # print the current version
nitroterm version history    # list the ten most recent v* tags, newest first
nitroterm version patch      # bump the patch number
nitroterm version minor      # bump the minor number, reset patch
nitroterm version major      # bump the major number, reset minor and patch
```

`nitroterm version` with no action shows the current version. The command
exits with status 1 and prints the error when a bump fails.

A bump replaces the line `version = "<current>"` in `Cargo.toml` in the
working directory with the new version, runs `git add Cargo.toml`,
`git commit`, creates an annotated tag `v<new version>` (message
`Release v<new version>` unless one is given) and pushes `main` and the tag
to `origin`. The outcome of the individual git commands is not checked.

Bumps accept only plain `MAJOR.MINOR.PATCH` versions. From the command line
and the menu the bump starts from nitroterm's own version, `0.1.0-alpha.2`;
since that is a pre-release, those bumps currently stop with
`Invalid version format`. From Python, pass the version to start from:

```python
from nitroterm.version_management import bump_and_release, bump_version

bump_version("minor", "1.2.3")                        # "1.3.0"
bump_and_release("patch", current_version="1.2.3")    # updates Cargo.toml, tags v1.2.4
```

### Update checks

When the interactive menu starts, nitroterm asks the GitHub releases API
for the latest release, at most once every 24 hours. The time of the last
check is kept in `.nitroterm_version_cache.json` in the working directory.
If a newer version exists a notice is printed; failures are silent.
`nitroterm.version_check.check_for_updates(version, force_check=True)` checks
regardless of the cache and reports the result or the error.

## Library use

- `nitroterm.version_check.compare_versions(current, latest)` compares two
  semantic versions (a leading `v` is ignored) and returns -1, 0 or 1; it
  raises `ValueError` for invalid versions.
- `nitroterm.log` offers `log`, `log_info`, `log_warning`, `log_error` and
  `log_success` for UTC-timestamped, coloured console lines.
- `nitroterm.i18n.I18n.from_directory(path)` loads every `<locale>.json` file
  in a directory; `set_locale` ignores unknown locales and `t(key)` falls back
  to the key itself. The default locale is `en`.
- `nitroterm.git.get_repository(path)` opens the git repository at exactly
  `path` (normal, bare or linked with a `.git` file) and raises `GitError`
  otherwise; `Repository.head()` returns the reference HEAD points at.
- `nitroterm.file_system` has `file_exists`, `read_file_to_string` and
  `write_string_to_file` for UTF-8 files.
- `nitroterm.config.Config.load_config()` returns the default settings
  (project name `nitroterm`, remote `origin`, release format `markdown`).

## What it does not do

The main menu and the help screen also list create-release, release-notes,
update-dependencies, sync-translations, code-quality, github-labels and
config. These are not available: choosing them in the menu prints
"Unknown command", and they are not accepted as command-line subcommands.
There is no release-notes generation, dependency updating, translation
syncing, code-quality checking, label management or stored configuration;
`Config.load_config()` only returns defaults.