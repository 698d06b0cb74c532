"""
Evaluators own the shared document.

The pipeline never touches the document directly. It asks an evaluator
to:
    - initialize the document from input
    - evaluate a statement against it
    - serialize it to output

Each of these returns an EvalResult instead of raising, so callers get
the error detail together with the outcome.
"""
from __future__ import annotations

import ast
import json
import math
import platform
import re
import sys
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

import yaml

from itemq.wrapper import DOCUMENT_BINDING, FRAGMENT_RUNNER


@dataclass(frozen=True)
class EvalResult:
    """
    Outcome of one evaluator operation.

    Properties:
        error: Error detail, None on success
    """

    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> EvalResult:
        return cls()

    @classmethod
    def failure(cls, exc: BaseException) -> EvalResult:
        return cls(error=describe_exception(exc))


def describe_exception(exc: BaseException) -> str:
    """Format an exception like the last line of a traceback."""
    return "".join(traceback.format_exception_only(type(exc), exc)).strip()


class Evaluator(ABC):
    """
    Interface the pipeline runs against.

    Implementations keep exactly one document per instance.
    """

    name: str = "evaluator"
    version: str = "unknown"

    @abstractmethod
    def initialize_document(self) -> EvalResult:
        """Read the input once and bind it as the shared document."""

    @abstractmethod
    def evaluate(self, statement: str) -> EvalResult:
        """Run one statement against the shared document."""

    @abstractmethod
    def serialize_document(self, indent: int = 2) -> EvalResult:
        """Write the shared document to the output once."""


class PythonEvaluator(Evaluator):
    """
    Evaluates statements as Python, with the document bound to `item`.

    The namespace starts with json, math, re and yaml imported, plus the
    fragment runner used by wrapped expressions.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.name = platform.python_implementation()
        self.version = platform.python_version()
        self.namespace: Dict[str, Any] = {
            "__name__": "__itemq__",
            "json": json,
            "math": math,
            "re": re,
            "yaml": yaml,
            FRAGMENT_RUNNER: self.run_fragment,
            DOCUMENT_BINDING: None,
        }

    @property
    def document(self) -> Any:
        return self.namespace[DOCUMENT_BINDING]

    def initialize_document(self) -> EvalResult:
        try:
            document = json.loads(self.input_stream.read())
        except (ValueError, OSError, RecursionError) as exc:
            return EvalResult.failure(exc)
        self.namespace[DOCUMENT_BINDING] = document
        return EvalResult.success()

    def evaluate(self, statement: str) -> EvalResult:
        # exit() in an expression is a failed expression
        try:
            code = compile(statement, "<statement>", "exec")
            exec(code, self.namespace)
        except (Exception, SystemExit) as exc:
            return EvalResult.failure(exc)
        return EvalResult.success()

    def serialize_document(self, indent: int = 2) -> EvalResult:
        try:
            text = json.dumps(self.document, indent=indent, ensure_ascii=False, allow_nan=False)
            self.output_stream.write(text + "\n")
            self.output_stream.flush()
        except (TypeError, ValueError, RecursionError, OSError) as exc:
            return EvalResult.failure(exc)
        return EvalResult.success()

    def run_fragment(self, source: str, document: Any) -> Any:
        """
        Run one expression and return the new document.

        If the last statement is a bare expression its value is the new
        document. Otherwise whatever `item` holds afterwards is.

        Examples:
            item["a"]                      -> value of item["a"]
            item["a"] = item["a"] + 1      -> item, with a incremented
            {k: 0 for k in item}           -> the new dict

        Raises:
            SyntaxError: If the fragment is not valid Python
            Exception: Whatever the fragment itself raises
        """
        tree = ast.parse(source, filename="<expression>", mode="exec")

        last = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            last = ast.Expression(body=tree.body.pop().value)

        # Names the fragment defines are dropped with the copy
        scope = dict(self.namespace)
        scope[DOCUMENT_BINDING] = document

        exec(compile(tree, "<expression>", "exec"), scope)
        if last is not None:
            return eval(compile(last, "<expression>", "eval"), scope)
        return scope[DOCUMENT_BINDING]


__all__ = [
    "Evaluator",
    "EvalResult",
    "PythonEvaluator",
    "describe_exception",
]
