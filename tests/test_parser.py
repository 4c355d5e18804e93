import pytest

from quizline.parser import default_bool_parser, parse_type


@pytest.mark.parametrize("text", ["yes", "y", "YES", "Y", "yEs", "YeS"])
def test_valid_yes_inputs(text):
    assert default_bool_parser(text) is True


@pytest.mark.parametrize(
    "text", ["yess", "ye", "yea", "1", "si", "s", "sim", "simm"]
)
def test_invalid_yes_inputs(text):
    with pytest.raises(ValueError):
        default_bool_parser(text)


@pytest.mark.parametrize("text", ["no", "n", "NO", "N", "nO", "No"])
def test_valid_no_inputs(text):
    assert default_bool_parser(text) is False


@pytest.mark.parametrize("text", ["noo", "nao", "0", "naoo", "não"])
def test_invalid_no_inputs(text):
    with pytest.raises(ValueError):
        default_bool_parser(text)


def test_parse_type_float_accepts_numbers():
    parser = parse_type(float)
    assert parser("32.44") == 32.44
    assert parser("11e15") == 11e15


@pytest.mark.parametrize("text", ["32f", "11^2"])
def test_parse_type_float_rejects_garbage(text):
    parser = parse_type(float)
    with pytest.raises(ValueError):
        parser(text)


def test_parse_type_custom_target_errors_become_value_error():
    def only_si_no(text):
        return {"si": True, "no": False}[text]

    def strict(text):
        if text not in ("si", "no"):
            raise TypeError("bad")
        return only_si_no(text)

    parser = parse_type(strict)
    assert parser("si") is True
    assert parser("no") is False
    with pytest.raises(ValueError):
        parser("yes")


def test_parse_type_int_rejects_decimal():
    parser = parse_type(int)
    assert parser("42") == 42
    with pytest.raises(ValueError):
        parser("3.5")