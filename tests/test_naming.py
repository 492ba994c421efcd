import pytest

from objectvalidator import ConfigurationError
from objectvalidator.naming import read_path, resolve_accessor, resolve_name

from subjects import Message, Person


class TestReadPath:
    def test_attribute(self):
        assert read_path(Message(subject="s"), "subject") == "s"

    def test_mapping_key(self):
        assert read_path({"subject": "s"}, "subject") == "s"
        assert read_path({}, "subject") is None

    def test_dotted_path(self):
        message = Message(person=Person(first_name="Ann"))
        assert read_path(message, "person.first_name") == "Ann"

    def test_none_propagates(self):
        assert read_path(Message(), "person.first_name") is None

    def test_missing_attribute_raises(self):
        with pytest.raises(AttributeError):
            read_path(Message(), "nope")


class TestResolveAccessor:
    def test_string_names_itself(self):
        getter, name = resolve_accessor("subject")
        assert name() == "subject"
        assert getter(Message(subject="x")) == "x"

    def test_string_with_explicit_name(self):
        _, name = resolve_accessor("subject", name="Subject")
        assert name() == "Subject"

    def test_callable_with_name(self):
        getter, name = resolve_accessor(lambda m: m.body, name="body")
        assert name() == "body"
        assert getter(Message(body="b")) == "b"

    def test_callable_with_name_supplier(self):
        _, name = resolve_accessor(lambda m: m.body, name=lambda: "Body")
        assert name() == "Body"

    def test_callable_without_name_fails(self):
        with pytest.raises(ConfigurationError):
            resolve_accessor(lambda m: m.body)

    @pytest.mark.parametrize("accessor", ["", "a..b", ".a", 42])
    def test_invalid_accessors(self, accessor):
        with pytest.raises(ConfigurationError):
            resolve_accessor(accessor)

    def test_invalid_name(self):
        with pytest.raises(ConfigurationError):
            resolve_name(3)
