import pytest

from optcompose import AppState, Application
from optcompose.argparse_adapter import ArgparseAdapter
from optcompose.composer import Composer
from optcompose.exceptions import DuplicateOptionError, ParseError
from optcompose.module import InlineModule
from optcompose.modules import BasicOptions, ExtDBOptions
from optcompose.parser_config import ParserConfig
from optcompose.protocols import ParsingAdapter


def compose(*modules):
    return Composer().compose(list(modules))


@pytest.fixture
def db_spec():
    return compose(ExtDBOptions(), BasicOptions())


def parse(spec, raw_args, **config):
    return ArgparseAdapter().parse(spec, raw_args, ParserConfig(prog="test", **config))


def test_adapter_satisfies_protocol():
    assert isinstance(ArgparseAdapter(), ParsingAdapter)


def test_string_option_round_trip(db_spec):
    opts, args = parse(db_spec, ["--dbname", "Emma"])
    assert opts["dbname"] == "Emma"
    assert opts.is_given("dbname")
    assert opts["dbhost"] is None
    assert not opts.is_given("dbhost")
    assert args == []


def test_equals_form(db_spec):
    opts, _ = parse(db_spec, ["--dbname=Emma"])
    assert opts["dbname"] == "Emma"


def test_single_dash_long_option(db_spec):
    opts, _ = parse(db_spec, ["-dbhost", "12.13.14.15", "--dbshow"])
    assert opts["dbhost"] == "12.13.14.15"
    assert opts["dbshow"] is True


def test_absent_switch_is_none(db_spec):
    opts, _ = parse(db_spec, [])
    assert opts["dbshow"] is None
    assert opts.get("dbshow") is None
    assert opts.get("dbshow", False) is False


def test_aliases(db_spec):
    opts, _ = parse(db_spec, ["-v"])
    assert opts["version"] is True
    opts, _ = parse(db_spec, ["-h"])
    assert opts["h"] is True


def test_leftover_arguments_intermixed(db_spec):
    opts, args = parse(db_spec, ["first", "--dbname", "Emma", "second"])
    assert opts["dbname"] == "Emma"
    assert args == ["first", "second"]


def test_unknown_option_fails(db_spec):
    with pytest.raises(ParseError, match="--bogus"):
        parse(db_spec, ["--bogus"])


def test_missing_value_fails(db_spec):
    with pytest.raises(ParseError):
        parse(db_spec, ["--dbname"])


def test_pass_through_keeps_unknown_options(db_spec):
    opts, args = parse(
        db_spec, ["file", "--bogus", "--dbname", "Emma"], pass_through=True
    )
    assert opts["dbname"] == "Emma"
    assert args == ["file", "--bogus"]


def test_abbreviation(db_spec):
    opts, _ = parse(db_spec, ["--dbn", "Emma"])
    assert opts["dbname"] == "Emma"


def test_abbreviation_disabled(db_spec):
    with pytest.raises(ParseError):
        parse(db_spec, ["--dbn", "Emma"], allow_abbreviation=False)


def test_case_insensitive(db_spec):
    opts, _ = parse(
        db_spec, ["--DBName", "Emma", "--DBHOST=Host"], case_sensitive=False
    )
    assert opts["dbname"] == "Emma"
    assert opts["dbhost"] == "Host"


def test_case_sensitive_by_default(db_spec):
    with pytest.raises(ParseError):
        parse(db_spec, ["--DBName", "Emma"])


def test_bundling_requires_double_dash_for_long_names():
    spec = compose(InlineModule(["all|a", "brief|b", "dbname=s"]))
    opts, _ = parse(spec, ["-ab", "--dbname", "x"], bundling=True)
    assert opts["all"] is True
    assert opts["brief"] is True
    with pytest.raises(ParseError):
        parse(spec, ["-dbname", "x"], bundling=True)


def test_typed_values():
    spec = compose(InlineModule(["port=i", "ratio=f"]))
    opts, _ = parse(spec, ["--port", "5432", "--ratio", "0.5"])
    assert opts["port"] == 5432
    assert opts["ratio"] == 0.5
    with pytest.raises(ParseError):
        parse(spec, ["--port", "many"])


def test_append_count_and_negatable():
    spec = compose(InlineModule(["tag=s@", "verbose|v+", "color!"]))
    opts, _ = parse(spec, ["--tag", "a", "--tag", "b", "-v", "-v", "--no-color"])
    assert opts["tag"] == ["a", "b"]
    assert opts["verbose"] == 2
    assert opts["color"] is False
    opts, _ = parse(spec, ["--color"])
    assert opts["color"] is True
    assert opts["tag"] is None


def test_optional_value():
    spec = compose(InlineModule(["level:i"]))
    opts, _ = parse(spec, ["--level"])
    assert opts["level"] == 0
    opts, _ = parse(spec, ["--level", "4"])
    assert opts["level"] == 4


def test_defaults_choices_and_required():
    spec = compose(
        InlineModule(
            [
                ("mode=s", "", {"choices": ["fast", "slow"], "default": "fast"}),
                ("target=s", "", {"required": True}),
            ]
        )
    )
    opts, _ = parse(spec, ["--target", "db"])
    assert opts["mode"] == "fast"
    assert not opts.is_given("mode")
    with pytest.raises(ParseError):
        parse(spec, ["--target", "db", "--mode", "medium"])
    with pytest.raises(ParseError, match="target"):
        parse(spec, [])


def test_case_folding_clash_is_a_duplicate():
    spec = compose(
        InlineModule(["all|A"], name="first"),
        InlineModule(["any|a"], name="second"),
    )
    with pytest.raises(DuplicateOptionError):
        parse(spec, [], case_sensitive=False)

    app = Application(
        program="folded",
        modules=list(spec.modules),
        parser_config=ParserConfig(case_sensitive=False),
    )
    with pytest.raises(DuplicateOptionError):
        app.configure()
    assert app.state is AppState.UNCONFIGURED


def test_inverted_switch():
    spec = compose(InlineModule([("cache", "use the cache", {"action": "false"})]))
    opts, _ = parse(spec, [])
    assert opts["cache"] is True
    assert not opts.is_given("cache")
    opts, _ = parse(spec, ["--cache"])
    assert opts["cache"] is False
    assert opts.is_given("cache")


def test_inverted_switch_explicit_default():
    spec = compose(InlineModule([("cache", "", {"action": "false", "default": None})]))
    opts, _ = parse(spec, [])
    assert opts["cache"] is None
