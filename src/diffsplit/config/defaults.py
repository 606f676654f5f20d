"""Starter .diffsplit.toml template."""

CONFIG_FILENAME = ".diffsplit.toml"

DEFAULT_TOML = """\
# diffsplit configuration
version = "1.0"

[output]
format = "terminal"       # terminal | json
show_summary = true
include_diff = false      # json only: embed each file's diff text

[filter]
skip_binary = false
# include = ["src/*"]     # empty = every file
# exclude = ["*.lock", "docs/*"]
# operations = ["new", "modified"]   # new | deleted | renamed | copied | modified

[log]
level = "warning"         # debug | info | warning | error
"""
