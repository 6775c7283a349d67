import pytest

from apps.domains.assignments.dto.answer_payload import (
    ListeningAnswers,
    ReadingAnswers,
    WritingAnswers,
    parse_answer_sheet,
    parse_section_answers,
)


def test_listening_payload_is_tagged_and_looked_up_by_number():
    p = parse_section_answers(
        "listening",
        {"parts": {"10": {"c1": {"1": "A", " 2 ": "london"}}}, "time_spent": "45"},
    )
    assert isinstance(p, ListeningAnswers)
    assert p.section == "listening"
    assert p.answer_for("10", 2) == "london"
    assert p.answer_for("10", 3) is None
    assert p.answer_for("11", 1) is None
    assert p.time_spent == 45


def test_reading_container_mapping_is_ordered_by_question_number():
    p = parse_section_answers("reading", {"parts": {"1": {"c1": {"10": "x", "9": "y", "11": "z"}}}})
    assert isinstance(p, ReadingAnswers)
    assert p.container_answers("1", "c1") == ["y", "x", "z"]
    assert p.container_answers("1", "missing") == []


def test_multi_select_values_are_lists():
    p = parse_section_answers("reading", {"parts": {"1": {"c1": [["A", "C"], "B"]}}})
    assert p.container_answers("1", "c1") == [["A", "C"], "B"]


def test_writing_blank_detection():
    assert WritingAnswers().is_blank
    assert WritingAnswers(task1_answer="   ").is_blank
    assert not parse_section_answers("writing", {"task2_answer": "essay"}).is_blank


@pytest.mark.parametrize(
    "section, raw",
    [
        ("speaking", {}),
        ("listening", []),
        ("listening", {"parts": ["x"]}),
        ("listening", {"parts": {"1": {"c1": ["not", "a", "mapping"]}}}),
        ("reading", {"parts": {"1": {"c1": "A"}}}),
        ("reading", {"parts": {"1": {"c1": [{"nested": 1}]}}}),
        ("reading", {"parts": {"1": {"c1": [True]}}}),
        ("writing", {"word_count": "many"}),
        ("writing", {"time_spent": -1}),
    ],
)
def test_malformed_payloads_raise_value_error(section, raw):
    with pytest.raises(ValueError):
        parse_section_answers(section, raw)


def test_storage_shape_round_trips():
    raw = {"parts": {"1": {"c1": ["A", None]}}, "time_spent": 5, "current_question": "3"}
    assert parse_section_answers("reading", raw).to_storage() == raw


def test_answer_sheet_rejects_unknown_sections():
    with pytest.raises(ValueError):
        parse_answer_sheet({"speaking": {}})


def test_answer_sheet_skips_null_sections():
    sheet = parse_answer_sheet({"listening": None, "writing": {"task1_answer": "a"}})
    assert set(sheet) == {"writing"}
