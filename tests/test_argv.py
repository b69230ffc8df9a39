from unittest import mock

from jiebaseg.argv import ArgvContext

ARGV = ["prog", "-a", "1", "-b", "--flag", "file"]


def test_options_and_flags():
    ctx = ArgvContext(ARGV)
    assert ctx["-a"] == "1"
    assert ctx["--flag"] == "file"
    assert ctx.has_key("-b")
    assert ctx["-b"] == ""
    assert not ctx.has_key("-c")


def test_positionals():
    ctx = ArgvContext(["prog", "x", "-k", "v", "y"])
    assert ctx[0] == "prog"
    assert ctx[1] == "x"
    assert ctx[2] == "y"
    assert ctx[3] == ""


def test_missing_option_is_empty():
    ctx = ArgvContext(["prog"])
    assert ctx["-missing"] == ""
    assert ctx[-1] == ""


def test_trailing_dash_word_is_flag():
    ctx = ArgvContext(["prog", "-v"])
    assert ctx.has_key("-v")
    assert ctx.options == {}


def test_str_format():
    ctx = ArgvContext(ARGV)
    assert str(ctx) == '["prog"]{--flag:file, -a:1}{-b}'


def test_defaults_to_sys_argv():
    with mock.patch("sys.argv", ["tool", "-n", "3"]):
        ctx = ArgvContext()
    assert ctx[0] == "tool"
    assert ctx["-n"] == "3"