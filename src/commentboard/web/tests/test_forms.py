from pytest import mark

from commentboard.web.forms.filters import default


def test_default_filter():
    anon = default("anon")
    assert anon(None) == "anon"
    assert anon("") == "anon"
    assert anon("joe") == "joe"
    assert anon(42) == "42"
    assert anon(" ") == " "
    assert anon("0") == "0"


@mark.parametrize("data", [None, "", 0, 0.0, False])
def test_default_filter_falsy_data(data):
    assert default("anon")(data) == "anon"
    assert default("")(data) == ""
