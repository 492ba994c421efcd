import pytest

from objectvalidator import ConfigurationError, validator

from subjects import Entity


class TestNotEqual:
    @pytest.mark.anyio
    async def test_equal_value_fails(self):
        v = validator(Entity(int2=7))
        v.for_("int2").not_equal(7)

        failure = (await v.validate())[0]

        assert failure.property_name == "int2"
        assert failure.property_localized_name == "int2"
        assert failure.error_code == "NotEqualValidator"
        assert failure.error_message == "'int2' should not be equal to '7'."

    @pytest.mark.anyio
    async def test_structural_equality(self):
        v = validator({"tags": ["a", "b"]})
        v.for_("tags").not_equal(["a", "b"])
        assert len(await v.validate()) == 1

    @pytest.mark.anyio
    async def test_different_value_passes(self):
        v = validator(Entity(int2=8))
        v.for_("int2").not_equal(7)
        assert await v.validate() == []


class TestInclusiveBetween:
    @pytest.mark.anyio
    async def test_below_range(self):
        v = validator(Entity(long1=-25))
        v.for_("long1").inclusive_between(1, 200)

        failure = (await v.validate())[0]

        assert failure.property_name == "long1"
        assert failure.error_code == "InclusiveBetweenValidator"
        assert failure.error_message == (
            "'long1' must be between 1 and 200. You entered -25."
        )
        for part in ("-25", "1", "200"):
            assert part in failure.error_message

    @pytest.mark.anyio
    @pytest.mark.parametrize("value", [1, 100, 200])
    async def test_bounds_included(self, value):
        v = validator(Entity(long1=value))
        v.for_("long1").inclusive_between(1, 200)
        assert await v.validate() == []

    @pytest.mark.anyio
    async def test_above_range(self):
        v = validator(Entity(long1=201))
        v.for_("long1").inclusive_between(1, 200)
        assert len(await v.validate()) == 1

    @pytest.mark.anyio
    async def test_none_passes(self):
        v = validator(Entity())
        v.for_("nullable_int").inclusive_between(1, 2)
        assert await v.validate() == []

    def test_inverted_range_rejected(self):
        with pytest.raises(ConfigurationError):
            validator(Entity()).for_("long1").inclusive_between(5, 1)


class TestExclusiveBetween:
    @pytest.mark.anyio
    async def test_below_range(self):
        v = validator(Entity(long1=-25))
        v.for_("long1").exclusive_between(1, 200)

        failure = (await v.validate())[0]

        assert failure.error_code == "ExclusiveBetweenValidator"
        assert failure.error_message == (
            "'long1' must be between 1 and 200 (exclusive). You entered -25."
        )

    @pytest.mark.anyio
    @pytest.mark.parametrize("value", [1, 200])
    async def test_bounds_excluded(self, value):
        v = validator(Entity(long1=value))
        v.for_("long1").exclusive_between(1, 200)
        assert len(await v.validate()) == 1

    @pytest.mark.anyio
    async def test_inside_range(self):
        v = validator(Entity(long1=2))
        v.for_("long1").exclusive_between(1, 200)
        assert await v.validate() == []
