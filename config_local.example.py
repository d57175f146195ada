# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. Only the names below are read by duke_bot.config.
"""

# Example: match keywords anywhere in the line, like the old bot did
# PARSER_MODE = "legacy"

# Example: keep the task file somewhere else
# TASKS_PATH = "~/Documents/duke/tasks.txt"
