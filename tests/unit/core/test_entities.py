import pytest

from user_crud.core.entities.user import EDITABLE_FIELDS, FormDraft, User, parse_user_id


class TestParseUserId:
    def test_numeric_ids_become_int(self):
        assert parse_user_id("7") == 7
        assert parse_user_id(" 12 ") == 12

    def test_other_ids_stay_strings(self):
        assert parse_user_id("a1b2") == "a1b2"


class TestUser:
    def test_keeps_extra_server_fields(self):
        user = User.model_validate(
            {"id": 1, "name": "Leanne", "username": "Bret", "address": {"city": "Gwenborough"}}
        )

        assert user.model_extra == {"username": "Bret", "address": {"city": "Gwenborough"}}
        assert user.model_dump()["address"] == {"city": "Gwenborough"}

    def test_missing_text_fields_default_to_empty(self):
        user = User.model_validate({"id": "x"})

        assert (user.name, user.email, user.phone, user.website) == ("", "", "", "")

    def test_id_is_required(self):
        with pytest.raises(ValueError):
            User.model_validate({"name": "Nobody"})


class TestFormDraft:
    def test_default_draft_is_empty(self):
        assert FormDraft().is_empty()

    def test_from_user_copies_editable_fields_only(self):
        user = User(id=5, name="N", email="e@x.io", phone=None, website="w.io", username="nick")

        draft = FormDraft.from_user(user)

        assert draft.model_dump() == {"name": "N", "email": "e@x.io", "phone": "", "website": "w.io"}

    def test_with_field_returns_copy(self):
        draft = FormDraft(name="Before")

        changed = draft.with_field("name", "After")

        assert changed.name == "After"
        assert draft.name == "Before"

    @pytest.mark.parametrize("field_name", ["id", "username", ""])
    def test_with_field_rejects_unknown_fields(self, field_name):
        with pytest.raises(ValueError):
            FormDraft().with_field(field_name, "value")

    def test_payload_merges_extra_values(self):
        payload = FormDraft(name="N", email="e@x.io").to_payload(id=123)

        assert payload == {"name": "N", "email": "e@x.io", "phone": "", "website": "", "id": 123}
        assert set(EDITABLE_FIELDS) < set(payload)
