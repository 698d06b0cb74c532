"""
Expression wrapping.

Turns a raw expression into the statement the evaluator runs:

    item["a"] = 1    ->    item = __fragment__('item["a"] = 1', item)

The fragment is embedded as a Python string literal, so its own syntax
is never inspected here. The evaluator decides what the fragment means
(see PythonEvaluator.run_fragment).
"""

DOCUMENT_BINDING = "item"
FRAGMENT_RUNNER = "__fragment__"


def wrap(expression: str) -> str:
    """
    Build the statement that rebinds the shared document.

    Args:
        expression: Raw expression text from the command line

    Returns:
        Statement text; same input always gives the same output
    """
    return f"{DOCUMENT_BINDING} = {FRAGMENT_RUNNER}({expression!r}, {DOCUMENT_BINDING})"
