from lazyval import Lazy, Suspension, fp


def test_lazy_wraps_a_suspension():
    x = Lazy(lambda: 1)
    assert isinstance(x.suspension, Suspension)
    assert fp.force(x.suspension) == 1
    assert x.is_val()


def test_wrap_shares_the_memoized_outcome():
    calls = []
    s = fp.lazy(lambda: calls.append(None) or 2)
    x = Lazy.wrap(s)
    assert x.force() == 2
    assert fp.force(s) == 2
    assert fp.is_val(s)
    assert len(calls) == 1


def test_named_constructors():
    assert Lazy.from_fun(lambda: 3).force() == 3
    assert fp.force(fp.from_fun(lambda: 3)) == 3
    assert Lazy.Undefined is fp.Undefined


def test_repr():
    assert repr(Lazy.from_val(1)) == "Lazy(Done(value=1))"
