"""Starter .stylescan.toml template."""

DEFAULT_TOML = """\
# StyleScan Configuration
version = "1.0"

[scan]
fail_on = "high"            # low | medium | high: exit 1 at or above this level
function_checks = true      # function length and lead-in comment rules
max_file_size_kb = 512

[output]
format = "terminal"         # terminal | json | sarif
show_summary = true
max_shown = 3               # line numbers listed per finding before "etc"

[rules]
# enable = ["LINE_LENGTH", "INDENT_LEVEL"]   # empty = all enabled
# disable = ["TOO_FEW_COMMENTS"]

[style]
max_line_length = 80
max_function_lines = 25
max_inline_function_lines = 5
comment_stretch = 25
# extra_types = ["long", "size_t"]
# header_fields = ["/*", "\\tName:", "\\tCopyright:", "\\tAuthor:", "\\tDate:", "\\tDescription:"]
"""
