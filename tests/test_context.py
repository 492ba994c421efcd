from objectvalidator import FailureData, ValidationContext


def _failure(path=None):
    return FailureData(error_message="failed", property_name=path)


class TestValidationContext:
    def test_starts_empty(self):
        context = ValidationContext()
        assert context.errors == []
        assert not context.contains("subject")
        assert len(context) == 0

    def test_add_with_property_marks_seen(self):
        context = ValidationContext()
        failure = _failure("subject")
        context.add(failure, "subject")

        assert context.errors == [failure]
        assert context.contains("subject")
        assert "subject" in context
        assert context.seen == frozenset({"subject"})

    def test_add_without_property_does_not_mark_seen(self):
        context = ValidationContext()
        context.add(_failure("subject"))

        assert len(context.errors) == 1
        assert not context.contains("subject")
        assert context.seen == frozenset()

    def test_insertion_order_kept(self):
        context = ValidationContext()
        first, second, third = _failure("b"), _failure(), _failure("a")
        context.add(first, "b")
        context.add(second)
        context.add(third, "a")
        assert context.errors == [first, second, third]
