import logging

from infrastructure.observability import clear_view_context, get_log_context, make_session_tag, set_log_context
from infrastructure.observability.logging import ContextInjectFilter


def test_session_tag_is_stable_and_short() -> None:
    assert make_session_tag("abc") == make_session_tag("abc")
    assert len(make_session_tag("abc")) == 8
    assert make_session_tag("abc") != make_session_tag("abd")


def test_context_is_injected_into_records() -> None:
    set_log_context(session_id_full="session-1", list_id="L1", taxonomy_id="T1", term_id="ex:Widget")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert ContextInjectFilter().filter(record)
    assert record.session == make_session_tag("session-1")
    assert record.voc == "T1"
    assert record.term == "ex:Widget"


def test_empty_string_resets_a_field() -> None:
    set_log_context(taxonomy_id="T1", term_id="ex:Widget")

    set_log_context(term_id="")

    assert get_log_context()["term_id"] == "-"
    assert get_log_context()["taxonomy_id"] == "T1"


def test_clear_view_context_keeps_session() -> None:
    set_log_context(session_id_full="session-2", list_id="L1", taxonomy_id="T1")

    clear_view_context()

    ctx = get_log_context()
    assert ctx["session_id_full"] == "session-2"
    assert ctx["list_id"] == ctx["taxonomy_id"] == ctx["term_id"] == "-"
