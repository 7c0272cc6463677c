from crudmixin import CrudMixinError, InvalidSlotError, MissingTypeError


class TestErrors:
    def test_default_message(self):
        err = CrudMixinError()
        assert str(err) == "crud-mixin error"
        assert err.details == {}

    def test_to_dict(self):
        err = InvalidSlotError("bad slot", details={"slot": "update"})
        assert err.to_dict() == {
            "error": "InvalidSlotError",
            "message": "bad slot",
            "details": {"slot": "update"},
        }

    def test_cause_is_preserved(self):
        cause = ValueError("inner")
        err = CrudMixinError("outer", cause=cause)
        assert err.get_cause() is cause
        assert err.to_dict(include_cause=True)["cause"] == repr(cause)

    def test_missing_type_from_value(self):
        err = MissingTypeError.from_value(None)
        assert isinstance(err, TypeError)
        assert err.details == {"value": "None", "value_type": "NoneType"}
        assert "missing type definition" in err.message
