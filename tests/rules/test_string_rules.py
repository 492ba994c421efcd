import pytest

from objectvalidator import ConfigurationError, config, validator

from subjects import Message


class TestLength:
    @pytest.mark.anyio
    async def test_too_long(self):
        v = validator(Message(subject="Subject1"))
        v.for_("subject").length(3, 5)

        failure = (await v.validate())[0]

        assert failure.property_name == "subject"
        assert failure.error_code == "LengthValidator"
        assert failure.error_message == (
            "'subject' must be between 3 and 5 characters. "
            "You entered 8 characters."
        )

    @pytest.mark.anyio
    async def test_none_counts_as_zero(self):
        v = validator(Message())
        v.for_("subject").length(1, 5)
        failure = (await v.validate())[0]
        assert failure.error_message.endswith("You entered 0 characters.")

    @pytest.mark.anyio
    @pytest.mark.parametrize("subject", ["abc", "abcd", "abcde"])
    async def test_within_bounds(self, subject):
        v = validator(Message(subject=subject))
        v.for_("subject").length(3, 5)
        assert await v.validate() == []

    @pytest.mark.anyio
    async def test_open_upper_bound(self):
        v = validator(Message(subject="x" * 1000))
        v.for_("subject").length(3)
        assert await v.validate() == []

    @pytest.mark.parametrize("bounds", [(-1, 5), (5, 3)])
    def test_invalid_bounds(self, bounds):
        with pytest.raises(ConfigurationError):
            validator(Message()).for_("subject").length(*bounds)


class TestEmailAddress:
    @pytest.mark.anyio
    async def test_invalid_address(self):
        v = validator(Message(subject="test@testcom"))
        v.for_("subject").email_address()

        failure = (await v.validate())[0]

        assert failure.property_name == "subject"
        assert failure.error_code == "EmailAddressValidator"
        assert failure.error_message == "'subject' is not a valid email address."

    @pytest.mark.anyio
    @pytest.mark.parametrize("subject", ["test@test.com", None])
    async def test_valid_or_missing(self, subject):
        v = validator(Message(subject=subject))
        v.for_("subject").email_address()
        assert await v.validate() == []

    @pytest.mark.anyio
    async def test_pattern_from_settings(self):
        config.configure(EMAIL_PATTERN=r"^[^@]+@[^@]+$")
        v = validator(Message(subject="test@testcom"))
        v.for_("subject").email_address()
        assert await v.validate() == []
