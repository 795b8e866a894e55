import sys

import pytest

from vexargs_pkg import (
    ArgContext, ContextInfo, InvalidValueError, StatusKind, UnknownArgumentError, ValueKind,
)

from conftest import argv


def _only(ctx):
    assert ctx.token_count() == 1
    return ctx.get_token(0)


# 1) Long options with =value round-trip the declared type
@pytest.mark.parametrize("arg, kind, value", [
    ("--count=42", ValueKind.INTEGER, 42),
    ("--ratio=2.5", ValueKind.FLOAT, 2.5),
    ("--input=file.txt", ValueKind.STRING, "file.txt"),
    ("--input=", ValueKind.STRING, ""),
    ("--input=a=b", ValueKind.STRING, "a=b"),
    ("--count=-7", ValueKind.INTEGER, -7),
])
def test_long_option_with_value(ctx, arg, kind, value):
    ctx.parse(argv(arg))
    token = _only(ctx)
    assert token.value_kind is kind
    assert token.values == (value,)


def test_long_flag():
    ctx = ArgContext(ContextInfo("demo"))
    ctx.parse(argv("--help"))
    token = _only(ctx)
    assert (token.short_name, token.long_name) == ("h", "help")
    assert token.value_kind is ValueKind.FLAG
    assert token.values == ()


def test_long_value_conversion_failure(ctx):
    with pytest.raises(InvalidValueError) as exc:
        ctx.parse(argv("--count=abc"))
    assert exc.value.message == "Invalid integer value for --count: 'abc'"


def test_flag_rejects_attached_value(ctx):
    with pytest.raises(InvalidValueError):
        ctx.parse(argv("--extra=1"))


def test_unknown_long_option(ctx):
    with pytest.raises(UnknownArgumentError) as exc:
        ctx.parse(argv("--nope"))
    assert ctx.status.kind is StatusKind.UNKNOWN_ARGUMENT
    assert ctx.status.message == "Unknown option: --nope"
    assert exc.value.status is StatusKind.UNKNOWN_ARGUMENT


# 2) Long names must match exactly
@pytest.mark.parametrize("arg", ["--help", "--version"])
def test_long_exact_names_accepted(arg):
    ctx = ArgContext(ContextInfo("demo"))
    ctx.parse(argv(arg))
    assert ctx.token_count() == 1


@pytest.mark.parametrize("arg", ["--helper", "--help-me", "--he", "--=x"])
def test_long_prefixes_and_extensions_rejected(arg):
    ctx = ArgContext(ContextInfo("demo"))
    with pytest.raises(UnknownArgumentError):
        ctx.parse(argv(arg))


# 3) Short options and clusters
def test_short_option_then_value(ctx):
    ctx.parse(argv("-i", "file.txt"))
    token = _only(ctx)
    assert token.short_name == "i"
    assert token.values == ("file.txt",)


def test_cluster_of_flags():
    ctx = ArgContext(ContextInfo("demo"))
    ctx.add_option("a", "all")
    ctx.add_option("b", "brief")
    ctx.parse(argv("-ab"))
    assert [t.short_name for t in ctx] == ["a", "b"]


def test_cluster_with_unknown_flag_fails():
    ctx = ArgContext(ContextInfo("demo"))
    ctx.add_option("a", "all")
    ctx.add_option("b", "brief")
    with pytest.raises(UnknownArgumentError) as exc:
        ctx.parse(argv("-abc"))
    assert exc.value.message == "Unknown option: -c"


def test_cluster_attached_string_value(ctx):
    ctx.parse(argv("-iname.txt"))
    token = _only(ctx)
    assert token.short_name == "i"
    assert token.values == ("name.txt",)


def test_cluster_attached_value_after_flags(ctx):
    ctx.parse(argv("-xc7"))
    assert [t.short_name for t in ctx] == ["x", "c"]
    assert ctx.get_token(1).values == (7,)


def test_cluster_attached_value_wrong_type(ctx):
    with pytest.raises(InvalidValueError):
        ctx.parse(argv("-cabc"))


def test_cluster_unknown_after_flag(ctx):
    with pytest.raises(UnknownArgumentError) as exc:
        ctx.parse(argv("-xz"))
    assert exc.value.message == "Unknown option: -z"


def test_cluster_does_not_attach_across_arguments(ctx):
    # a new option argument clears the previous option
    with pytest.raises(UnknownArgumentError):
        ctx.parse(argv("-c", "-5"))


# 4) Free-standing values and grouping
def test_values_group_onto_unbounded_option(ctx):
    ctx.parse(argv("-f", "a.txt", "b.txt", "c.txt"))
    token = _only(ctx)
    assert token.values == ("a.txt", "b.txt", "c.txt")


def test_grouping_stops_at_max_count(ctx):
    ctx.parse(argv("-r", "1.5", "2.5", "3.5", "4.5"))
    assert ctx.token_count() == 3
    assert ctx.get_token(0).values == (1.5, 2.5)
    free = ctx.get_token(1)
    assert not free.is_option
    assert free.value_kind is ValueKind.FLOAT
    assert free.values == (3.5,)
    # last token is cleared after a free value starts its own token
    assert ctx.get_token(2).values == (4.5,)


def test_attached_value_counts_toward_max_count(ctx):
    ctx.parse(argv("--count=1", "2"))
    assert ctx.get_token(0).values == (1,)
    assert ctx.get_token(1).values == (2,)
    assert ctx.get_token(1).short_name is None


def test_long_option_then_free_value(ctx):
    ctx.parse(argv("--count", "5"))
    assert _only(ctx).values == (5,)


def test_type_mismatch_is_a_hard_failure(ctx):
    with pytest.raises(InvalidValueError) as exc:
        ctx.parse(argv("-c", "abc"))
    assert "Unexpected value for --count" in exc.value.message
    with pytest.raises(InvalidValueError):
        ctx.parse(argv("-r", "3"))


def test_flag_never_groups(ctx):
    ctx.parse(argv("-x", "5", "6"))
    assert ctx.token_count() == 3
    assert [t.values for t in ctx] == [(), (5,), (6,)]


def test_repeated_short_option_makes_separate_tokens(ctx):
    ctx.parse(argv("-cc1"))
    assert [t.values for t in ctx] == [(), (1,)]


def test_option_without_capacity_rejects_values():
    ctx = ArgContext(ContextInfo("demo"))
    ctx.add_option("s", "name", ValueKind.STRING, max_count=0)
    with pytest.raises(InvalidValueError) as exc:
        ctx.parse(argv("-sabc"))
    assert exc.value.message == "Too many values for --name"
    with pytest.raises(InvalidValueError):
        ctx.parse(argv("--name=abc"))
    ctx.parse(argv("-s", "abc"))
    assert [t.long_name for t in ctx] == ["name", None]


def test_lone_dash_is_a_value(ctx):
    ctx.parse(argv("-i", "-"))
    assert _only(ctx).values == ("-",)


def test_none_entries_are_skipped(ctx):
    ctx.parse(["demo", None, "-x", None])
    assert _only(ctx).short_name == "x"


def test_program_name_only():
    ctx = ArgContext(ContextInfo("demo"))
    assert ctx.parse(["demo"]) == ()
    assert ctx.parse([]) == ()


# 5) End of options
def test_double_dash_disables_options(ctx):
    ctx.parse(argv("--", "-x"))
    token = _only(ctx)
    assert not token.is_option
    assert token.value_kind is ValueKind.STRING
    assert token.values == ("-x",)
    assert not ctx.arg_found("x")


def test_double_dash_values_are_typed(ctx):
    ctx.parse(argv("--", "12", "--count=3"))
    assert [(t.value_kind, t.values) for t in ctx] == [
        (ValueKind.INTEGER, (12,)),
        (ValueKind.STRING, ("--count=3",)),
    ]


def test_double_dash_stops_grouping(ctx):
    ctx.parse(argv("-f", "--", "a"))
    assert ctx.get_token(0).values == ()
    assert ctx.get_token(1).values == ("a",)


def test_second_double_dash_is_a_value(ctx):
    ctx.parse(argv("--", "--"))
    assert _only(ctx).values == ("--",)


# 6) Numeric strictness
@pytest.mark.parametrize("arg", ["--count=1_000", "--count= 42 ", "--ratio=nan", "--ratio=inf", "-c1_0"])
def test_attached_numbers_must_be_plain_digits(ctx, arg):
    with pytest.raises(InvalidValueError):
        ctx.parse(argv(arg))
    assert ctx.status.kind is StatusKind.INVALID_VALUE


@pytest.mark.parametrize("arg, value", [
    ("--count=+3", 3),
    ("--ratio=2", 2.0),
    ("--ratio=-0.25", -0.25),
])
def test_attached_numbers_with_sign_or_no_fraction(ctx, arg, value):
    ctx.parse(argv(arg))
    assert _only(ctx).values == (value,)


def test_trailing_newline_is_a_string_value(ctx):
    ctx.parse(argv("--", "5\n", "1.5\n"))
    assert [(t.value_kind, t.values) for t in ctx] == [
        (ValueKind.STRING, ("5\n",)),
        (ValueKind.STRING, ("1.5\n",)),
    ]


def test_trailing_newline_does_not_group_onto_integer_option(ctx):
    with pytest.raises(InvalidValueError):
        ctx.parse(argv("-c", "5\n"))


@pytest.mark.skipif(not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
                    reason="int() has no digit limit on this interpreter")
@pytest.mark.parametrize("args", [("9" * 5000,), ("-c", "9" * 5000)])
def test_oversized_integer_is_an_invalid_value(ctx, args):
    with pytest.raises(InvalidValueError):
        ctx.parse(argv(*args))
    assert ctx.status.kind is StatusKind.INVALID_VALUE
    assert ctx.token_count() == 0
