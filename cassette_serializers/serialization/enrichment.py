"""Hints appended to format library errors.

Serializers run their native encode/decode calls inside
:func:`handle_encoding_errors` and :func:`handle_syntax_errors`. Matching
errors are re-raised as the very same exception object with an operator
hint appended to the message, so callers catching the library's own
exception classes see no difference apart from the extra guidance.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import yaml  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

ENCODING_ERROR_HINT = (
    "\nNote: This cassette contains a string that cannot be encoded as UTF-8, "
    "most likely a recorded body made of raw bytes. Enable the "
    "`preserve_exact_body_bytes` option to have such bodies base64-encoded "
    "instead of stored as text; doing so resolves this error."
)

ERB_SYNTAX_ERROR_HINT = (
    "\nNote: The serialized data contains unevaluated ERB markers "
    "(`<% ... %>`). Enable the `erb` option so they are evaluated before "
    "the cassette is deserialized; this is most likely the cause of this error."
)

ERB_MARKERS = ("<%", "%>")

ErrorClasses = tuple[type[BaseException], ...]


def contains_erb_markers(data: str | bytes) -> bool:
    """Return True if ``data`` still holds templating delimiters."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return any(marker in data for marker in ERB_MARKERS)


def append_hint(error: BaseException, hint: str) -> None:
    """Extend the message of ``error`` in place with ``hint``.

    Unicode errors, YAML reader errors and YAML marked errors build their
    message from attributes rather than ``args``, so those attributes are
    extended.
    Appending is idempotent per hint.
    """
    if hint in str(error):
        return

    if isinstance(error, (UnicodeError, yaml.reader.ReaderError)) and hasattr(
        error, "reason"
    ):
        error.reason = f"{error.reason}{hint}"
    elif isinstance(error, yaml.MarkedYAMLError):
        note = hint.lstrip("\n")
        error.note = f"{error.note}\n{note}" if error.note else note
    elif error.args and isinstance(error.args[0], str):
        error.args = (f"{error.args[0]}{hint}", *error.args[1:])
    else:
        error.args = (*error.args, hint.lstrip("\n"))


@contextmanager
def handle_encoding_errors(error_classes: ErrorClasses) -> Iterator[None]:
    """Append the ``preserve_exact_body_bytes`` hint to encoding errors."""
    try:
        yield
    except error_classes as e:
        logger.debug("Adding preserve_exact_body_bytes hint to %s", type(e).__name__)
        append_hint(e, ENCODING_ERROR_HINT)
        raise


@contextmanager
def handle_syntax_errors(
    data: str | bytes, error_classes: ErrorClasses
) -> Iterator[None]:
    """Append the ``erb`` hint to parse errors caused by templating markers.

    Parse errors on input without markers propagate untouched.
    """
    try:
        yield
    except error_classes as e:
        if contains_erb_markers(data):
            logger.debug("Adding erb hint to %s", type(e).__name__)
            append_hint(e, ERB_SYNTAX_ERROR_HINT)
        raise
