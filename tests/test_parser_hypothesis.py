"""Property-based tests for NuggetParser.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from nuggetlex import NuggetContext, NuggetParser
from tests.helpers.callbacks import CallRecorder
from tests.strategies import (
    nested_nuggets,
    nugget_documents,
    plain_text,
    simple_nuggets,
    token_soup,
)

contexts = st.sampled_from(list(NuggetContext))


def _echo(nugget_text: str, offset: int, nugget: object, entity: str) -> str:
    return nugget_text


def _constant(nugget_text: str, offset: int, nugget: object, entity: str) -> str:
    return "X"


class TestParserProperties:
    """Invariants that hold for every document."""

    @given(text=plain_text(max_size=100), context=contexts)
    def test_text_without_nuggets_unchanged(self, text: str, context: NuggetContext) -> None:
        """Documents without tokens pass through and trigger no callback."""
        recorder = CallRecorder()

        assert NuggetParser(context=context).parse(text, recorder) == text
        assert recorder.calls == []

    @given(
        pieces=st.lists(st.one_of(plain_text(min_size=1), simple_nuggets()), max_size=8),
        context=contexts,
    )
    def test_echo_preserves_flat_documents(
        self, pieces: list[str], context: NuggetContext
    ) -> None:
        """Returning the nugget text unchanged reproduces a flat document."""
        document = "".join(pieces)

        assert NuggetParser(context=context).parse(document, _echo) == document

    @given(nuggets=st.lists(simple_nuggets(), max_size=6), separator=plain_text(min_size=1))
    def test_one_call_per_flat_nugget(self, nuggets: list[str], separator: str) -> None:
        """Every flat nugget triggers exactly one callback."""
        recorder = CallRecorder()
        NuggetParser().parse(separator.join(nuggets), recorder)

        assert recorder.texts == nuggets

    @given(nugget=nested_nuggets(), context=contexts)
    def test_well_formed_nugget_fully_replaced(
        self, nugget: str, context: NuggetContext
    ) -> None:
        """A well-formed nugget, however nested, is replaced as a whole."""
        event(f"nesting={nugget.count('(((')}")

        assert NuggetParser(context=context).parse(nugget, _constant) == "X"

    @given(document=nugget_documents(), context=contexts)
    def test_replacement_is_idempotent(self, document: str, context: NuggetContext) -> None:
        """Output with every nugget replaced contains no further nuggets."""
        parser = NuggetParser(context=context)
        once = parser.parse(document, _constant)
        recorder = CallRecorder()

        assert parser.parse(once, recorder) == once
        assert recorder.calls == []

    @given(document=st.one_of(nugget_documents(), token_soup()), context=contexts)
    def test_callback_text_matches_entity(self, document: str, context: NuggetContext) -> None:
        """Real nuggets are slices of the document; others are their own entity."""
        recorder = CallRecorder()
        NuggetParser(context=context).parse(document, recorder)

        for nugget_text, offset, nugget, entity in recorder.calls:
            assert nugget.msgid
            if entity is document:
                assert entity[offset : offset + len(nugget_text)] == nugget_text
            else:
                assert entity == nugget_text
                assert offset in (0, 3)

    @given(document=token_soup(), context=contexts)
    def test_malformed_input_never_raises(self, document: str, context: NuggetContext) -> None:
        """Arbitrary token soup always parses to a string."""
        result = NuggetParser(context=context).parse(document, _constant)

        assert isinstance(result, str)

    @given(document=token_soup())
    def test_contexts_agree_under_constant_callback(self, document: str) -> None:
        """Both contexts find the same nuggets; only callback inputs differ."""
        source = NuggetParser(context=NuggetContext.SOURCE).parse(document, _constant)
        response = NuggetParser(context=NuggetContext.RESPONSE).parse(document, _constant)

        assert source == response

