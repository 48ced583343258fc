"""Bash-style brace expansion.

Only comma alternation is supported (``{a,b,c}``); sequence expressions such
as ``{1..5}`` are left to the shell.
"""
