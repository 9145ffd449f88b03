"""High-level parse entrypoint for Clausewitz source text."""

import logging

from shroudingers.diagnostics import EMPTY_INPUT, Diagnostic
from shroudingers.lexer import tokenize
from shroudingers.lexer.lexer import is_blank
from shroudingers.parser.options import ParseMode, ParserOptions
from shroudingers.parser.parser import Parser
from shroudingers.parser.result import ParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParseResult:
    """Parse Clausewitz script text into a Document.

    Bad input never raises: the result carries the first diagnostic instead.
    """
    resolved_options = _resolve_options(options=options, mode=mode)

    if is_blank(text):
        return ParseResult(diagnostic=Diagnostic.from_spec(EMPTY_INPUT))

    lexed = tokenize(text)
    if not lexed.success:
        return ParseResult(diagnostic=lexed.diagnostic)

    result = Parser(lexed.tokens, options=resolved_options).parse()
    if result.document is not None:
        logger.debug("Parsed %d top-level properties", len(result.document.properties))
    return result
