"""loanmatch: loan offer matching and a conversational loan advisor."""

__version__ = "0.1.0"
