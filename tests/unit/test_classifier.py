"""Tests for personal-record classification."""

import pytest

from app.services.records import is_personal_record


class TestFlags:
    @pytest.mark.parametrize("field", ["isPersonalRecord", "personal_record"])
    def test_true_flag(self, field):
        assert is_personal_record({field: True})

    @pytest.mark.parametrize("field", ["isPersonalRecord", "personal_record"])
    def test_false_flag(self, field):
        assert not is_personal_record({field: False})

    def test_truthy_non_bool_is_not_a_flag(self):
        assert not is_personal_record({"isPersonalRecord": "yes"})


class TestRecordTag:
    def test_exact(self):
        assert is_personal_record({"record_tag": "PR"})

    def test_case_insensitive_substring(self):
        assert is_personal_record({"record_tag": "single pr"})

    def test_loose_match_kept(self):
        assert is_personal_record({"record_tag": "SPRING"})

    def test_other_tag(self):
        assert not is_personal_record({"record_tag": "NR"})


class TestTags:
    def test_element_equal(self):
        assert is_personal_record({"tags": ["NR", "pr"]})

    def test_element_must_match_whole(self):
        assert not is_personal_record({"tags": ["SPRING", "WR"]})

    def test_not_a_collection(self):
        assert not is_personal_record({"tags": "PR"})


class TestNoSignal:
    def test_empty(self):
        assert not is_personal_record({})

    def test_unrelated_fields(self):
        assert not is_personal_record({"name": "Anna", "best": 900})

    def test_not_a_mapping(self):
        assert not is_personal_record(None)
        assert not is_personal_record(["PR"])
