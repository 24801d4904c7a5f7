"""Tests for the persisted schema: completeness check and conversion."""

from __future__ import annotations

import pytest

from addressbook.domain.errors import DuplicatePersonError, IllegalValueError
from addressbook.domain.models import AddressBook, Person
from addressbook.infrastructure.persistence.schema import (
    AdaptedAddressBook,
    AdaptedContactDetail,
    AdaptedPerson,
    AdaptedTag,
)

# ─── Helpers ─────────────────────────────────────────────────────────────────


def _adapted_person(**overrides) -> AdaptedPerson:
    data = dict(
        name="John Doe",
        phone={"value": "98765432", "is_private": False},
        email={"value": "johnd@example.com", "is_private": True},
        address={"value": "311, Clementi Ave 2", "is_private": False},
        tagged=[{"name": "friends"}],
    )
    data.update(overrides)
    return AdaptedPerson.model_validate(data)


# ═══════════════════════════════════════════════════════════════════════════════
# Completeness
# ═══════════════════════════════════════════════════════════════════════════════


class TestRequiredFields:
    """is_any_required_field_missing() inspects every record and sub-field."""

    def test_complete_person(self):
        assert _adapted_person().is_any_required_field_missing() is False

    @pytest.mark.parametrize("field", ["name", "phone", "email", "address"])
    def test_missing_top_level_field(self, field):
        assert _adapted_person(**{field: None}).is_any_required_field_missing() is True

    @pytest.mark.parametrize("field", ["phone", "email", "address"])
    def test_missing_detail_value(self, field):
        person = _adapted_person(**{field: {"is_private": True}})
        assert person.is_any_required_field_missing() is True

    def test_privacy_flag_is_optional(self):
        person = _adapted_person(phone={"value": "123"})
        assert person.is_any_required_field_missing() is False
        assert person.phone.is_private is False

    def test_tags_are_optional(self):
        person = AdaptedPerson.model_validate(
            {
                "name": "John Doe",
                "phone": {"value": "1"},
                "email": {"value": "a@b"},
                "address": {"value": "x"},
            }
        )
        assert person.tagged == []
        assert person.is_any_required_field_missing() is False

    def test_tag_without_name(self):
        assert _adapted_person(tagged=[{}]).is_any_required_field_missing() is True

    def test_empty_book_is_complete(self):
        assert AdaptedAddressBook().is_any_required_field_missing() is False

    def test_book_checks_every_person(self):
        book = AdaptedAddressBook(persons=[_adapted_person(), _adapted_person(name=None)])
        assert book.is_any_required_field_missing() is True

    def test_book_checks_master_tags(self):
        book = AdaptedAddressBook(persons=[_adapted_person()], tags=[AdaptedTag()])
        assert book.is_any_required_field_missing() is True

    def test_detail_without_value(self):
        assert AdaptedContactDetail().is_any_required_field_missing() is True

    def test_incomplete_data_still_deserializes(self):
        book = AdaptedAddressBook.model_validate_json('{"persons": [{"name": "Ann"}]}')
        assert book.persons[0].phone is None
        assert book.is_any_required_field_missing() is True


# ═══════════════════════════════════════════════════════════════════════════════
# Conversion
# ═══════════════════════════════════════════════════════════════════════════════


class TestConversion:
    """to_model_type() / from_model()."""

    def test_person_to_model(self):
        person = _adapted_person().to_model_type()
        assert isinstance(person, Person)
        assert person.email.is_private is True
        assert [t.name for t in person.tags] == ["friends"]

    def test_illegal_phone_names_field(self):
        with pytest.raises(IllegalValueError, match="only contain numbers") as exc_info:
            _adapted_person(phone={"value": "12ab"}).to_model_type()
        assert exc_info.value.field == "phone"

    def test_illegal_tag_names_position(self):
        with pytest.raises(IllegalValueError) as exc_info:
            _adapted_person(tagged=[{"name": "ok"}, {"name": "not ok"}]).to_model_type()
        assert exc_info.value.field == "tagged[1]"

    def test_book_prefixes_person_index(self):
        book = AdaptedAddressBook(
            persons=[_adapted_person(), _adapted_person(name="Alex Yeoh", email={"value": "bad"})]
        )
        with pytest.raises(IllegalValueError) as exc_info:
            book.to_model_type()
        assert exc_info.value.field == "persons[1].email"

    def test_illegal_master_tag(self):
        book = AdaptedAddressBook(tags=[AdaptedTag(name="two words")])
        with pytest.raises(IllegalValueError) as exc_info:
            book.to_model_type()
        assert exc_info.value.field == "tags[0]"

    def test_duplicate_persons_rejected(self):
        book = AdaptedAddressBook(persons=[_adapted_person(), _adapted_person()])
        with pytest.raises(DuplicatePersonError):
            book.to_model_type()

    def test_round_trip_through_schema(self):
        book = AddressBook()
        book.add_person(_adapted_person().to_model_type())
        book.add_person(_adapted_person(name="Alex Yeoh", tagged=[]).to_model_type())
        assert AdaptedAddressBook.from_model(book).to_model_type() == book

    def test_from_model_shape(self):
        book = AddressBook()
        book.add_person(_adapted_person().to_model_type())
        dumped = AdaptedAddressBook.from_model(book).model_dump()
        assert dumped["tags"] == [{"name": "friends"}]
        assert dumped["persons"][0]["email"] == {
            "value": "johnd@example.com",
            "is_private": True,
        }


# ═══════════════════════════════════════════════════════════════════════════════
# Explicit nulls on optional fields
# ═══════════════════════════════════════════════════════════════════════════════


class TestNullOptionals:
    """``null`` on an optional field reads as its default."""

    def test_null_top_level_lists(self):
        book = AdaptedAddressBook.model_validate_json('{"persons": null, "tags": null}')
        assert book.persons == []
        assert book.tags == []
        assert book.to_model_type() == AddressBook()

    def test_null_tagged(self):
        person = _adapted_person(tagged=None)
        assert person.tagged == []
        assert person.is_any_required_field_missing() is False

    def test_null_is_private(self):
        person = _adapted_person(phone={"value": "123", "is_private": None})
        assert person.phone.is_private is False
        assert person.to_model_type().phone.is_private is False

    def test_null_required_value_is_still_missing(self):
        person = _adapted_person(phone={"value": None, "is_private": None})
        assert person.is_any_required_field_missing() is True

    def test_repeated_person_tag_names_position(self):
        book = AdaptedAddressBook(
            persons=[_adapted_person(tagged=[{"name": "friends"}, {"name": "friends"}])]
        )
        with pytest.raises(IllegalValueError) as exc_info:
            book.to_model_type()
        assert exc_info.value.field == "persons[0].tags"
