import pytest

from sixfactors.config import Settings
from sixfactors.core.errors import InvalidParameter, MissingParameter
from sixfactors.question_service.service import (
    END_OF_TEST_ID,
    get_answer_code,
    get_next_question,
    parse_question_id,
    save_answer,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", 3),
        (" 3", 3),
        ("3abc", 3),
        ("-1", -1),
        ("+2", 2),
        ("", None),
        ("abc", None),
        (None, None),
    ],
)
def test_parse_question_id(value, expected):
    assert parse_question_id(value) == expected


def test_next_question_uses_explicit_id(catalog, store, settings, fake_collection):
    result = get_next_question(catalog, store, settings, "u1", "en_US", "1")

    assert result == {"isComplete": False, "questionId": 2, "questionText": "Question two"}
    assert fake_collection.reads == 0


def test_next_question_reads_stored_id(catalog, store, settings, fake_collection):
    fake_collection.documents["u1"] = {"user_id": "u1", "lastQuestionId": 2, "2": 3}

    result = get_next_question(catalog, store, settings, "u1", "en_US")

    assert result["questionId"] == 3
    assert fake_collection.reads == 1


def test_next_question_without_record_starts_at_zero(catalog, store, settings):
    result = get_next_question(catalog, store, settings, "new-user", "en_US", "abc")

    assert result["questionId"] == 0
    assert result["questionText"] == "Question zero"


def test_last_question_and_beyond(catalog, store, settings):
    last = get_next_question(catalog, store, settings, "u1", "en_US", "3")
    done = get_next_question(catalog, store, settings, "u1", "en_US", "4")

    assert last == {"isComplete": False, "questionId": 4, "questionText": "Question four"}
    assert done == {"isComplete": True, "questionId": END_OF_TEST_ID, "questionText": ""}


def test_negative_index_is_end_of_test(catalog, store, settings):
    result = get_next_question(catalog, store, settings, "u1", "en_US", "-5")

    assert result["isComplete"] is True


def test_locale_language_when_enabled(catalog, store):
    settings = Settings(LOCALE_LANGUAGE_ENABLED=True)

    translated = get_next_question(catalog, store, settings, "u1", "fr_FR", "1")
    fallback = get_next_question(catalog, store, settings, "u1", "fr_FR", "0")

    assert translated["questionText"] == "Question deux"
    assert fallback["questionText"] == "Question one"


@pytest.mark.parametrize(
    "user_id, locale, message",
    [
        (None, "en_US", "Unable to find the user id."),
        ("", "en_US", "Unable to find the user id."),
        ("u1", None, "Unable to find the user locale."),
        ("u1", "", "Unable to find the user locale."),
    ],
)
def test_next_question_missing_params(
    catalog, store, settings, fake_collection, user_id, locale, message
):
    with pytest.raises(MissingParameter) as exc_info:
        get_next_question(catalog, store, settings, user_id, locale)

    assert exc_info.value.message == message
    assert fake_collection.reads == 0


@pytest.mark.parametrize(
    "answer, code",
    [("I agree", 3), ("I don't know", 0), ("I disagree", -3)],
)
def test_save_answer_codes(catalog, store, settings, fake_collection, answer, code):
    save_answer(catalog, store, settings, "u1", "en_US", "0", answer)

    assert fake_collection.documents["u1"] == {
        "user_id": "u1",
        "lastQuestionId": 0,
        "0": code,
    }


def test_save_answer_merges_into_record(catalog, store, settings, fake_collection):
    save_answer(catalog, store, settings, "u1", "en_US", "0", "I agree")
    save_answer(catalog, store, settings, "u1", "en_US", "1", "I disagree")

    assert fake_collection.documents["u1"] == {
        "user_id": "u1",
        "lastQuestionId": 1,
        "0": 3,
        "1": -3,
    }


def test_unknown_answer_stored_as_null(catalog, store, settings, fake_collection):
    save_answer(catalog, store, settings, "u1", "en_US", "2", "Maybe")

    assert fake_collection.documents["u1"]["2"] is None
    assert fake_collection.documents["u1"]["lastQuestionId"] == 2


def test_unknown_answer_rejected_when_strict(catalog, store, fake_collection):
    settings = Settings(STRICT_ANSWERS=True)

    with pytest.raises(InvalidParameter):
        save_answer(catalog, store, settings, "u1", "en_US", "2", "Maybe")

    assert fake_collection.writes == 0


def test_unparseable_question_id_rejected(catalog, store, settings, fake_collection):
    with pytest.raises(InvalidParameter):
        save_answer(catalog, store, settings, "u1", "en_US", "first", "I agree")

    assert fake_collection.writes == 0


@pytest.mark.parametrize(
    "fields, message",
    [
        ((None, "en", "0", "I agree"), "Unable to find the user id."),
        (("u1", "", "0", "I agree"), "Unable to find the user locale."),
        (("u1", "en", None, "I agree"), "Unable to find the question ID."),
        (("u1", "en", "0", ""), "Unable to find the user answer."),
    ],
)
def test_save_answer_missing_params(
    catalog, store, settings, fake_collection, fields, message
):
    with pytest.raises(MissingParameter) as exc_info:
        save_answer(catalog, store, settings, *fields)

    assert exc_info.value.message == message
    assert fake_collection.writes == 0


def test_answer_code_language_fallback(catalog):
    assert get_answer_code(catalog, "fr", "Je suis d'accord", "en") == 3
    assert get_answer_code(catalog, "de", "I disagree", "en") == -3
    assert get_answer_code(catalog, "fr", "I agree", "en") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("9" * 5000, 10**9),
        ("-" + "9" * 5000, -(10**9)),
        ("9" * 25, 10**9),
        ("0" * 5000 + "4", 4),
    ],
)
def test_parse_question_id_clamps_long_digit_runs(value, expected):
    assert parse_question_id(value) == expected


def test_oversized_explicit_id_is_end_of_test(catalog, store, settings):
    result = get_next_question(catalog, store, settings, "u1", "en_US", "9" * 5000)

    assert result == {"isComplete": True, "questionId": END_OF_TEST_ID, "questionText": ""}


@pytest.mark.parametrize("question_id", ["5", "-1", "9" * 25, "9" * 5000])
def test_save_answer_rejects_ids_outside_catalog(
    catalog, store, settings, fake_collection, question_id
):
    with pytest.raises(InvalidParameter) as exc_info:
        save_answer(catalog, store, settings, "u1", "en_US", question_id, "I agree")

    assert exc_info.value.message.startswith("Unknown question ID")
    assert fake_collection.writes == 0
