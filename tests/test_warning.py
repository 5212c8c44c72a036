from railwind.warning import Position, Warning


def test_class_not_found_display():
    warning = Warning.class_not_found("px-9", Position(2, 5))
    assert str(warning) == "Warning on Line: 2, Col: 5; Could not match class 'px-9'"


def test_state_not_found_message():
    warning = Warning.state_not_found("foo:px-5", Position(1, 1), "foo")
    assert warning.message == (
        "Could not match state at class 'foo:px-5', 'foo' is not a valid state"
    )


def test_invalid_arg_lists_choices():
    warning = Warning.invalid_arg("table-x", Position(1, 1), "x", ["auto", "fixed"])
    assert warning.message.endswith("possible arguments: 'auto, fixed'")
    assert "'x'" in warning.message


def test_value_not_found_mentions_class_and_value():
    warning = Warning.value_not_found("w-99", Position(3, 7), "99")
    assert "'w-99'" in warning.message
    assert "'99'" in warning.message
    assert warning.message.endswith("could not be found")


def test_display_carries_position():
    warning = Warning.class_not_found("x", Position(12, 34))
    text = str(warning)
    assert text.startswith("Warning on Line: 12, Col: 34; ")
    assert text.endswith(warning.message)


def test_position_equality_and_hash():
    assert Position(1, 2) == Position(1, 2)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_warning_equality():
    a = Warning.class_not_found("x", Position(1, 1))
    b = Warning.class_not_found("x", Position(1, 1))
    assert a == b
    assert a.position == Position(1, 1)