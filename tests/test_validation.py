"""Tests for the declarative registration validation rules"""

import pytest

from retreat_registration.models.registration import PhotoAttachment
from retreat_registration.models.rule_kind import RuleKind
from retreat_registration.validation import (
    REGISTRATION_RULES,
    WIRE_NAMES,
    FieldRule,
    to_submission,
    validate_field,
    validate_registration,
)


class TestValidateField:
    """Each rule variant accepts or refuses values without raising"""

    @pytest.mark.parametrize("age", [1, 120, "1", "120", " 42 "])
    def test_age_boundaries_accepted(self, age):
        assert validate_field(age, REGISTRATION_RULES["age"]) is None

    @pytest.mark.parametrize("age", [0, -3, "0", None, "", "abc", "12.5", 12.5, True])
    def test_age_too_low_or_not_numeric(self, age):
        assert validate_field(age, REGISTRATION_RULES["age"]) == "Your age is important"

    @pytest.mark.parametrize("age", [121, "121", 500])
    def test_age_too_high(self, age):
        assert validate_field(age, REGISTRATION_RULES["age"]) == "Please enter a valid age"

    def test_required_text_min_length(self):
        rule = REGISTRATION_RULES["full_name"]
        assert validate_field("G", rule) == "Please share your full name"
        assert validate_field("  ", rule) == "Please share your full name"
        assert validate_field("A ", rule) == "Please share your full name"
        assert validate_field(None, rule) == "Please share your full name"
        assert validate_field("Gr", rule) is None

    def test_phone_needs_ten_characters(self):
        rule = REGISTRATION_RULES["phone"]
        assert validate_field("080123456", rule) == "Please provide a valid phone number"
        assert validate_field("0801234567", rule) is None

    @pytest.mark.parametrize("email", ["grace@example.com", "a.b+c@mail.example.org"])
    def test_valid_email(self, email):
        assert validate_field(email, REGISTRATION_RULES["email"]) is None

    @pytest.mark.parametrize(
        "email",
        [
            "",
            None,
            "grace",
            "grace@",
            "@example.com",
            "a b@x.com",
            "Grace Adeyemi <grace@example.com>",
            "<grace@example.com>",
        ],
    )
    def test_invalid_email(self, email):
        assert (
            validate_field(email, REGISTRATION_RULES["email"])
            == "Please enter a valid email address"
        )

    def test_enumerated_choice(self):
        rule = REGISTRATION_RULES["gender"]
        assert validate_field("Male", rule) is None
        assert validate_field("Female", rule) is None
        assert validate_field("male", rule) == "Please select your gender"
        assert validate_field(None, rule) == "Please select your gender"

    def test_affiliation_choices(self):
        rule = REGISTRATION_RULES["affiliation"]
        for value in ("ELOHIM'S", "RDG", "Nil"):
            assert validate_field(value, rule) is None
        assert validate_field("", rule) == "Please select your affiliation"

    def test_optional_choice_accepts_blank(self):
        rule = REGISTRATION_RULES["wants_drama_ministry"]
        assert validate_field(None, rule) is None
        assert validate_field("", rule) is None
        assert validate_field("Not Sure Yet", rule) is None
        assert validate_field("Maybe", rule) is not None

    def test_optional_text(self):
        rule = REGISTRATION_RULES["prayer_requests"]
        assert validate_field(None, rule) is None
        assert validate_field("Pray for my family", rule) is None
        assert validate_field(42, rule) is not None

    @pytest.mark.parametrize("value", [True, "true", "TRUE"])
    def test_confirmation_true(self, value):
        assert validate_field(value, REGISTRATION_RULES["confirmation"]) is None

    @pytest.mark.parametrize("value", [False, None, "false", "", "yes"])
    def test_confirmation_must_be_true(self, value):
        assert (
            validate_field(value, REGISTRATION_RULES["confirmation"])
            == "Please confirm to proceed"
        )

    def test_photo_rule(self, photo):
        rule = REGISTRATION_RULES["photo"]
        assert validate_field(None, rule) is None
        assert validate_field(photo, rule) is None

        empty = PhotoAttachment(filename="", content=b"", content_type="application/octet-stream")
        assert validate_field(empty, rule) is None

        pdf = PhotoAttachment(filename="cv.pdf", content=b"%PDF", content_type="application/pdf")
        assert validate_field(pdf, rule) == "Please upload an image file"

    def test_unknown_value_types_do_not_raise(self):
        rule = FieldRule(RuleKind.ENUMERATED_CHOICE, "Pick one", choices=("a",))
        assert validate_field(["a"], rule) == "Pick one"
        assert validate_field({"a": 1}, REGISTRATION_RULES["email"]) is not None


class TestValidateRegistration:
    def test_valid_registration_has_no_errors(self, valid_values):
        assert validate_registration(valid_values) == {}

    def test_empty_registration_reports_every_required_field(self):
        errors = validate_registration({})
        assert set(errors) == {
            "full_name",
            "gender",
            "age",
            "phone",
            "email",
            "location",
            "affiliation",
            "confirmation",
        }
        assert all(errors.values())

    def test_confirmation_false_blocks_otherwise_valid(self, valid_values):
        valid_values["confirmation"] = False
        assert validate_registration(valid_values) == {
            "confirmation": "Please confirm to proceed"
        }

    def test_only_invalid_fields_reported(self, valid_values):
        valid_values["age"] = 0
        valid_values["email"] = "nope"
        errors = validate_registration(valid_values)
        assert set(errors) == {"age", "email"}


class TestToSubmission:
    def test_builds_normalized_submission(self, valid_values):
        valid_values.update(
            {
                "full_name": "  Grace Adeyemi ",
                "age": "29",
                "church": "   ",
                "expectations": " Renewal ",
                "confirmation": "true",
            }
        )
        submission = to_submission(valid_values)

        assert submission.full_name == "Grace Adeyemi"
        assert submission.age == 29
        assert submission.church is None
        assert submission.expectations == "Renewal"
        assert submission.confirmation is True
        assert submission.photo is None

    def test_empty_photo_dropped(self, valid_values):
        valid_values["photo"] = PhotoAttachment(filename="", content=b"")
        assert to_submission(valid_values).photo is None

    def test_invalid_values_raise(self, valid_values):
        valid_values["confirmation"] = False
        with pytest.raises(ValueError):
            to_submission(valid_values)

    def test_display_name_email_not_accepted(self, valid_values):
        valid_values["email"] = "Grace Adeyemi <grace@example.com>"
        with pytest.raises(ValueError):
            to_submission(valid_values)

    def test_wire_names(self):
        assert WIRE_NAMES["full_name"] == "fullName"
        assert WIRE_NAMES["wants_drama_ministry"] == "dramaMINISTRY"
        assert WIRE_NAMES["is_worship_minister"] == "worshipMinister"
        assert WIRE_NAMES["email"] == "email"

    def test_form_fields_serialization(self, valid_values):
        submission = to_submission(valid_values)
        fields = submission.to_form_fields()

        assert fields["fullName"] == "Grace Adeyemi"
        assert fields["age"] == "29"
        assert fields["confirmation"] == "true"
        assert "church" not in fields
        assert "photo" not in fields
