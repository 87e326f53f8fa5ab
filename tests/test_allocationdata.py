from heaprec.allocationdata import AllocationData


def _sample():
    return AllocationData(allocations=2896, temporary=729, leaked=30463, peak=996970)


def test_defaults_are_zero():
    assert AllocationData() == AllocationData(0, 0, 0, 0)


def test_clear_cost_resets_everything():
    data = _sample()
    data.clear_cost()
    assert data == AllocationData()


def test_add_then_sub_round_trips():
    a = _sample()
    b = AllocationData(allocations=5, temporary=0, leaked=5, peak=72714)
    assert (a + b) - b == a
    assert a + AllocationData() == a


def test_add_is_commutative():
    a = _sample()
    b = AllocationData(1, 2, 3, 4)
    assert a + b == b + a


def test_sub_of_self_is_zero():
    a = _sample()
    assert a - a == AllocationData()


def test_binary_ops_do_not_mutate():
    a = _sample()
    b = AllocationData(1, 1, 1, 1)
    _ = a + b
    _ = a - b
    assert a == _sample()


def test_inplace_ops_mutate_same_object():
    a = _sample()
    original = a
    b = AllocationData(1, 2, 3, 4)
    a += b
    assert a is original
    assert a == _sample() + b
    a -= b
    assert a is original
    assert a == _sample()


def test_difference_can_be_negative():
    diff = AllocationData(leaked=1046377) - AllocationData(leaked=1047379)
    assert diff.leaked == -1002


def test_inequality():
    assert _sample() != AllocationData()