"""
clickuTime: A CLI tool that shows how much time you tracked in ClickUp today.

- Fetches today's time entries and the running timer from the ClickUp API
- Prints the day total as H:M, flagging a running timer [+] and overtime [!]
- Can be used as a CLI (via `python -m clickutime` or `clickutime` if installed as a package)
"""

__version__ = "0.1.0"
