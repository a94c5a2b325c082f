from proofer_migration.trademark.lookup_tables import ALTERNATE_NAME_RULES, YES_OR_NO_MAP
from proofer_migration.trademark.mapper_utils import (
    build_field_lookup,
    build_group_lookup,
    first_matching_rule,
    format_phone_number,
    get_country_name_by_id,
    parse_used_trademark_in_commerce,
    safe_lookup,
    split_full_name,
    split_registration_numbers,
)
from proofer_migration.trademark.models import FieldAnswer


# --- indexers -----------------------------------------------------------------

def test_field_lookup_trims_and_last_write_wins():
    lookup = build_field_lookup([
        {"fieldName": "mark", "fieldValue": "  Acme  "},
        {"fieldName": "mark", "fieldValue": "Acme 2"},
    ])
    assert lookup == {"mark": "Acme 2"}


def test_field_lookup_skips_nameless_and_valueless_answers():
    lookup = build_field_lookup([
        {"fieldValue": "orphan"},
        {"fieldName": "no_value"},
        {"fieldName": "blank", "fieldValue": ""},
        {"fieldName": "null", "fieldValue": None},
    ])
    assert "no_value" not in lookup
    assert lookup["blank"] == ""
    assert lookup["null"] is None
    assert lookup.text("blank") is None
    assert not lookup.has("null")


def test_field_lookup_keeps_non_string_values():
    lookup = build_field_lookup([{"fieldName": "count", "fieldValue": 3}])
    assert lookup["count"] == 3


def test_field_lookup_accepts_models_and_rejects_non_lists():
    lookup = build_field_lookup([FieldAnswer(fieldName="mark", fieldValue="Acme")])
    assert lookup.text("mark") == "Acme"
    assert build_field_lookup(None) == {}
    assert build_field_lookup("not a list") == {}


def test_group_lookup_requires_group_name_and_index():
    lookup = build_group_lookup([
        {"groupName": "g", "fieldName": "g_a_1", "fieldValue": "x", "groupIndex": 1},
        {"groupName": "g", "fieldName": "g_a_2", "fieldValue": "y", "groupIndex": 2},
        {"groupName": "g", "fieldName": "g_b", "fieldValue": "z"},
        {"fieldName": "g_c", "fieldValue": "w", "groupIndex": 1},
    ])
    assert list(lookup) == ["g"]
    assert [e.field_value for e in lookup.entries("g")] == ["x", "y"]
    assert lookup.find_value("g", "a", 2) == "y"
    assert lookup.find_value("g", "a", 3) is None
    assert lookup.find_value("missing", "a") is None


# --- table lookups --------------------------------------------------------------

def test_safe_lookup_is_case_insensitive():
    assert safe_lookup(YES_OR_NO_MAP, "YES") == "yes"
    assert safe_lookup(YES_OR_NO_MAP, None) is None
    assert safe_lookup({}, "anything") is None


def test_alternate_name_rule_priority():
    assert first_matching_rule("DBA (Doing Business As)", ALTERNATE_NAME_RULES) == "DBA"
    assert first_matching_rule("TA - Trading As", ALTERNATE_NAME_RULES) == "TA"
    assert first_matching_rule("aka", ALTERNATE_NAME_RULES) == "AKA"
    # "dba" is checked before "ta"
    assert first_matching_rule("dba/ta", ALTERNATE_NAME_RULES) == "DBA"
    assert first_matching_rule("FKA", ALTERNATE_NAME_RULES) is None
    assert first_matching_rule(None, ALTERNATE_NAME_RULES) is None


# --- formatting -------------------------------------------------------------------

def test_format_phone_number():
    assert format_phone_number("555-123-4567") == "+15551234567"
    assert format_phone_number("15551234567") == "+15551234567"
    assert format_phone_number("+15551234567") == "+15551234567"
    assert format_phone_number("+1 (555) 123-4567") == "+1 (555) 123-4567"
    assert format_phone_number("123") == "123"
    assert format_phone_number(None) is None
    assert format_phone_number("") is None


def test_split_full_name():
    assert split_full_name("Doe") == {"firstName": None, "middleName": None, "lastName": "Doe"}
    assert split_full_name("Jane Doe") == {"firstName": "Jane", "middleName": None, "lastName": "Doe"}
    assert split_full_name("Jane Q Public Doe") == {
        "firstName": "Jane", "middleName": "Q Public", "lastName": "Doe",
    }
    assert split_full_name("   ") == {"firstName": None, "middleName": None, "lastName": None}


def test_get_country_name_by_id():
    assert get_country_name_by_id("US") == "United States"
    assert get_country_name_by_id("ca") == "Canada"
    assert get_country_name_by_id("canada") == "canada"
    assert get_country_name_by_id("Atlantis") is None
    assert get_country_name_by_id(None) is None


def test_parse_used_trademark_in_commerce():
    note = "Some intake text\nUsed trademark in commerce: yes\nmore"
    assert parse_used_trademark_in_commerce(note) == "yes"
    assert parse_used_trademark_in_commerce("Used trademark in commerce:No") == "No"
    assert parse_used_trademark_in_commerce("nothing here") is None
    assert parse_used_trademark_in_commerce(None) is None


def test_split_registration_numbers():
    assert split_registration_numbers(" 123, 456 ,,789 ") == ["123", "456", "789"]
    assert split_registration_numbers(None) == []


def test_indexers_skip_malformed_entries():
    fields = build_field_lookup([None, 7, {"fieldName": ["not", "a", "name"], "fieldValue": "x"},
                                 {"fieldName": "mark", "fieldValue": "Acme"}])
    assert fields == {"mark": "Acme"}

    groups = build_group_lookup([
        {"groupName": "g", "fieldName": "g_a_1", "fieldValue": "x", "groupIndex": "first"},
        None,
        {"groupName": "g", "fieldName": "g_a_2", "fieldValue": "y", "groupIndex": 2},
    ])
    assert [e.group_index for e in groups.entries("g")] == [2]
