"""Response-side localization of nuggets.

Replaces the nuggets of already-rendered text with translations looked up in
a gettext-style translations object, typically ``babel.support.Translations``
loaded from a compiled catalog.

Lookup rules:
    - Nuggets are looked up by message id with ``gettext``; the comment is a
      translator note (extracted as an auto comment), never a message context
    - Untranslated messages fall back to the message id
    - Format items fill ``%0``, ``%1``, ... placeholders in the translation

Python 3.13+. External dependency: Babel (translations).
"""

import logging
import re
from collections.abc import Sequence

from babel.support import NullTranslations

from nuggetlex.constants import LOG_TRUNCATE
from nuggetlex.enums import NuggetContext
from nuggetlex.syntax import DEFAULT_TOKENS, Nugget, NuggetCallback, TokenSet, parse_nuggets

__all__ = ["format_message", "localize", "translating_callback"]

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"%(\d+)")


def format_message(message: str, items: Sequence[str]) -> str:
    """Substitute %N placeholders with format items.

    Placeholders without a matching item are left as they are and logged.

    Example:
        >>> format_message("%1 scored %0", ["10", "Ann"])
        'Ann scored 10'
        >>> format_message("%0 and %2", ["a"])
        'a and %2'
    """

    def substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(items):
            return items[index]
        logger.warning(
            "No format item %d for message %r (%d items)",
            index,
            message[:LOG_TRUNCATE],
            len(items),
        )
        return match.group()

    return _PLACEHOLDER.sub(substitute, message)


def translating_callback(translations: NullTranslations) -> NuggetCallback:
    """Build a response-processing callback backed by a translations object.

    Args:
        translations: Any object with gettext(), e.g.
            babel.support.Translations

    Returns:
        Callback for NuggetParser.parse() under RESPONSE processing
    """

    def on_nugget(nugget_text: str, offset: int, nugget: Nugget, entity: str) -> str:
        message = translations.gettext(nugget.msgid)
        if nugget.format_items:
            return format_message(message, nugget.format_items)
        return message

    return on_nugget


def localize(
    entity: str,
    translations: NullTranslations,
    *,
    tokens: TokenSet = DEFAULT_TOKENS,
) -> str:
    """Translate every nugget of a rendered document.

    Example:
        >>> localize("<b>[[[Hi %0|||Bob]]]</b>", NullTranslations())
        '<b>Hi Bob</b>'
    """
    return parse_nuggets(
        entity,
        translating_callback(translations),
        context=NuggetContext.RESPONSE,
        tokens=tokens,
    )
