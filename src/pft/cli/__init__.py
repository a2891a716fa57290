"""
Command Line Interface Package

The `pft` command: a thin presentation layer over the stores and the
aggregation core.

Command Structure:
- pft: main entry point with utility commands (version, config)
- pft entries: add, edit, delete, list, clear
- pft reports: summary, export-csv, chart
- pft tips: list, show, favorite, favorites, clear-favorites, categories

Every command opens the stores fresh from the data directory, so it always
sees what earlier commands saved.
"""
