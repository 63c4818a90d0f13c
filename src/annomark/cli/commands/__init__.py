# topmark:header:start
#
#   project      : AnnoMark
#   file         : __init__.py
#   file_relpath : src/annomark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark CLI subcommands."""
