"""
itemq: run Python expressions against a JSON document.

Reads one JSON document from standard input, threads it through the
expressions given on the command line (in order), and prints the result
as pretty-printed JSON.

LAYERS:
-------
    options   -> command line scanning (no I/O)
    wrapper   -> expression text to statement text (pure)
    evaluator -> runtime that owns the shared document
    pipeline  -> orchestration, first failure wins
    cli       -> process entry point

Only `cli` touches the process streams or exit codes.
"""

__version__ = "0.1.0"
