"""Tests for field value objects."""

import pytest

from medibook.model.fields import Address, Email, Name, Phone, Remark, Tag


class TestName:
    @pytest.mark.parametrize("text", ["peter jack", "12345", "peter the 2nd", "David Roger Jackson Ray Jr 2nd"])
    def test_valid(self, text):
        assert Name.is_valid(text)

    @pytest.mark.parametrize("text", ["", " ", "^", "peter*", " leading"])
    def test_invalid(self, text):
        assert not Name.is_valid(text)

    def test_constructor_rejects_invalid(self):
        with pytest.raises(ValueError, match="alphanumeric"):
            Name("peter*")

    def test_is_same_ignores_case_and_spacing(self):
        assert Name("John Tan").is_same(Name("john   TAN"))
        assert not Name("John Tan").is_same(Name("John Tang"))

    def test_equality_is_exact(self):
        assert Name("John Tan") != Name("john tan")


class TestPhone:
    def test_valid(self):
        assert Phone.is_valid("911")
        assert Phone.is_valid("124293842033123")

    @pytest.mark.parametrize("text", ["", "91", "phone", "9011p041", "9312 1534"])
    def test_invalid(self, text):
        assert not Phone.is_valid(text)


class TestEmail:
    @pytest.mark.parametrize(
        "text",
        ["PeterJack_1190@example.com", "a@bc", "test@localhost", "a1+be.d@example1.com", "e1@e-x.com"],
    )
    def test_valid(self, text):
        assert Email.is_valid(text)

    @pytest.mark.parametrize(
        "text",
        ["", "@example.com", "peterjack@", "peterjackexample.com", "-peter@example.com",
         "peter@example.c", "peter@-example.com", "peter@example-.com", "peter@example.com-"],
    )
    def test_invalid(self, text):
        assert not Email.is_valid(text)


class TestAddressRemarkTag:
    def test_address(self):
        assert Address.is_valid("Blk 456, Den Road, #01-355")
        assert not Address.is_valid("")
        assert not Address.is_valid(" ")

    def test_remark_may_be_empty(self):
        assert str(Remark()) == ""
        assert Remark.is_valid("")

    def test_tag(self):
        assert Tag.is_valid("diabetic")
        assert not Tag.is_valid("high risk")
        assert not Tag.is_valid("")
        assert str(Tag("elderly")) == "[elderly]"
