# topmark:header:start
#
#   project      : AnnoMark
#   file         : __main__.py
#   file_relpath : src/annomark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AnnoMark via ``python -m annomark``.

Delegates to `annomark.cli.main.cli`, the same entry point as the
``annomark`` console script.
"""

from __future__ import annotations

from annomark.cli.main import cli

if __name__ == "__main__":
    cli()
