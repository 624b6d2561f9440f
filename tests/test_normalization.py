from hoyalist.services.normalization import extract_digits, normalize_email, normalize_lead_form


def test_normalize_email():
    assert normalize_email("test@example.com") == "test@example.com"
    assert normalize_email("  Test@Example.COM  ") == "test@example.com"
    assert normalize_email(None) == ""
    assert normalize_email("") == ""


def test_extract_digits():
    assert extract_digits("2,500") == "2500"
    assert extract_digits("$ 1 000") == "1000"
    assert extract_digits("abc") == ""
    assert extract_digits("") == ""


def test_normalize_trims_and_lowercases():
    form = normalize_lead_form({
        "name": "  Dana  ",
        "email": " DANA@Example.COM ",
        "phone": " +18885551234 ",
        "project": "\tDeck\n",
        "zip": " 06119 ",
    })
    assert form.name == "Dana"
    assert form.email == "dana@example.com"
    assert form.phone == "+18885551234"
    assert form.project == "Deck"
    assert form.zip == "06119"


def test_missing_fields_become_empty():
    form = normalize_lead_form({})
    assert form.name == ""
    assert form.email == ""
    assert form.phone == ""
    assert form.project == ""
    assert form.zip == ""
    assert form.ready_to_hire is False
    assert form.urgent is False
    assert form.consent is False
    assert form.budget is None


def test_flags_only_true_for_literal_yes():
    assert normalize_lead_form({"readyToHire": "yes"}).ready_to_hire is True
    assert normalize_lead_form({"urgent": "yes"}).urgent is True
    assert normalize_lead_form({"concent": "yes"}).consent is True

    for value in ("Yes", "YES", "on", "true", "1", ""):
        form = normalize_lead_form({"readyToHire": value, "urgent": value, "concent": value})
        assert form.ready_to_hire is False
        assert form.urgent is False
        assert form.consent is False


def test_non_string_values_are_coerced():
    form = normalize_lead_form({"zip": 6119, "name": 42})
    assert form.zip == "6119"
    assert form.name == "42"


def test_budget_digits():
    form = normalize_lead_form({"budgetText": " 2,500 "})
    assert form.budget_text == "2,500"
    assert form.budget_digits == "2500"
    assert form.budget == 2500

    blank = normalize_lead_form({"budgetText": "   "})
    assert blank.budget_text == ""
    assert blank.budget is None

    zero = normalize_lead_form({"budgetText": "0"})
    assert zero.budget == 0

    words = normalize_lead_form({"budgetText": "abc"})
    assert words.budget_text == "abc"
    assert words.budget_digits == ""
    assert words.budget is None
