"""
Expression pipeline.

Runs a list of expressions against one evaluator:

    1. initialize the document from input
    2. evaluate each wrapped expression, in order
    3. serialize the document to output

The first failure raises and nothing after it runs. In particular,
output is only produced when every expression succeeded.
"""

import logging
from typing import Sequence

from itemq.evaluator import Evaluator
from itemq.wrapper import wrap


logger = logging.getLogger(__name__)

OUTPUT_INDENT = 2


class PipelineError(Exception):
    """Base class for failures while running the pipeline."""

    def __init__(self, message: str, detail: str):
        self.detail = detail
        super().__init__(message)


class InputParseError(PipelineError):
    """Raised when the input could not be read as a document."""

    def __init__(self, detail: str):
        super().__init__("read from stdin failed", detail)


class ExpressionError(PipelineError):
    """Raised when an expression fails. Carries its position and text."""

    def __init__(self, index: int, source: str, detail: str):
        self.index = index
        self.source = source
        super().__init__(f"expression {index} ({source}) failed to run", detail)


class OutputSerializeError(PipelineError):
    """Raised when the final document could not be written."""

    def __init__(self, detail: str):
        super().__init__("printing item failed", detail)


def run_pipeline(expressions: Sequence[str], evaluator: Evaluator) -> None:
    """
    Run every expression against the evaluator's document.

    Args:
        expressions: Expressions in execution order (may be empty)
        evaluator: Evaluator owning the shared document

    Raises:
        InputParseError: If the document could not be initialized
        ExpressionError: On the first expression that fails
        OutputSerializeError: If the final document could not be written
    """
    logger.info("reading document from input")
    result = evaluator.initialize_document()
    if not result.ok:
        logger.debug("input failed: %s", result.error)
        raise InputParseError(result.error)

    logger.info("running %d expressions", len(expressions))
    for index, expression in enumerate(expressions):
        statement = wrap(expression)
        logger.debug("----> %s", statement)
        result = evaluator.evaluate(statement)
        if not result.ok:
            logger.debug("expression %d failed: %s", index, result.error)
            raise ExpressionError(index, expression, result.error)

    logger.info("printing document")
    result = evaluator.serialize_document(indent=OUTPUT_INDENT)
    if not result.ok:
        logger.debug("output failed: %s", result.error)
        raise OutputSerializeError(result.error)


__all__ = [
    "run_pipeline",
    "PipelineError",
    "InputParseError",
    "ExpressionError",
    "OutputSerializeError",
]
