import suite
from seqops import S, Options, get_options, set_options, options

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


@test("defaults use strict equality")
def test_defaults():
    assert_that(isinstance(get_options(), Options), "options object")
    assert_that(Options().strict_equality is True, "strict by default")


@test("set_options returns previous options")
def test_set_options():
    previous = set_options(strict_equality=False)
    try:
        assert_that(get_options().strict_equality is False, "option changed")
        assert_that(S([1]).has_element(1.0), "loose equality applies")
    finally:
        set_options(strict_equality=previous.strict_equality)
    assert_that(get_options() == previous, "restored")


@test("options context manager restores on error")
def test_options_context():
    before = get_options()
    try:
        with options(log_level='DEBUG'):
            assert_that(get_options().log_level == 'DEBUG', "inside block")
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert_that(get_options() == before, "restored after exception")


@test("unknown options are rejected")
def test_unknown_option():
    with raises(ValueError, "unknown option"):
        set_options(colour='blue')


if __name__ == "__main__":
    suite.run(title="seqops configuration test suite")
