from heaprec.filterparameters import INT64_MAX, FilterParameters


def test_defaults():
    params = FilterParameters()
    assert params.min_time == 0
    assert params.max_time == INT64_MAX == 2**63 - 1
    assert params.suppressions == []
    assert params.disable_embedded_suppressions is False
    assert params.disable_builtin_suppressions is False


def test_default_is_not_filtered():
    assert FilterParameters().is_filtered_by_time(80) is False


def test_min_time_filters():
    assert FilterParameters(min_time=10).is_filtered_by_time(80) is True


def test_max_time_below_total_filters():
    assert FilterParameters(max_time=50).is_filtered_by_time(80) is True


def test_max_time_equal_to_total_does_not_filter():
    assert FilterParameters(max_time=80).is_filtered_by_time(80) is False


def test_suppression_lists_are_independent():
    a = FilterParameters()
    b = FilterParameters()
    a.suppressions.append("leak:foobar")
    assert b.suppressions == []