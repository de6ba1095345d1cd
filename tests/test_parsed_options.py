import pytest

from optcompose.composer import Composer
from optcompose.exceptions import UnknownOptionError
from optcompose.module import InlineModule
from optcompose.parsed_options import ParsedOptions


@pytest.fixture
def spec():
    module = InlineModule(
        [
            ("dbname=s", "database name"),
            ("retries=i", "retries", {"default": 3}),
            ("dry-run", "do nothing"),
        ]
    )
    return Composer().compose([module])


def test_absent_options_are_none_or_default(spec):
    opts = ParsedOptions.from_spec(spec, {})
    assert opts["dbname"] is None
    assert opts["retries"] == 3
    assert opts["dry_run"] is None
    assert len(opts) == 3


def test_access_styles_agree(spec):
    opts = ParsedOptions.from_spec(spec, {"dbname": "Emma"}, given=["dbname"])
    assert opts["dbname"] == "Emma"
    assert opts.get("dbname") == "Emma"
    assert opts.dbname == "Emma"
    assert opts["--dbname"] == "Emma"


def test_get_default_only_for_none(spec):
    opts = ParsedOptions.from_spec(spec, {"dry_run": False})
    assert opts.get("dbname", "fallback") == "fallback"
    assert opts.get("dry_run", True) is False


def test_unknown_key_raises_everywhere(spec):
    opts = ParsedOptions.from_spec(spec, {})
    with pytest.raises(UnknownOptionError):
        opts["nosuch"]
    with pytest.raises(UnknownOptionError):
        opts.get("nosuch")
    with pytest.raises(UnknownOptionError):
        opts.nosuch
    with pytest.raises(UnknownOptionError):
        opts.is_given("nosuch")


def test_unknown_key_is_a_key_error(spec):
    opts = ParsedOptions.from_spec(spec, {})
    with pytest.raises(KeyError):
        opts["nosuch"]


def test_undeclared_value_rejected(spec):
    with pytest.raises(UnknownOptionError):
        ParsedOptions.from_spec(spec, {"nosuch": 1})


def test_is_given(spec):
    opts = ParsedOptions.from_spec(spec, {"dbname": "Emma"}, given=["dbname"])
    assert opts.is_given("dbname")
    assert not opts.is_given("retries")
    assert opts["retries"] == 3


def test_read_only(spec):
    opts = ParsedOptions.from_spec(spec, {})
    with pytest.raises(AttributeError):
        opts.dbname = "other"
    with pytest.raises(AttributeError):
        del opts.dbname
    with pytest.raises(TypeError):
        opts["dbname"] = "other"


def test_mapping_behaviour(spec):
    opts = ParsedOptions.from_spec(spec, {"dbname": "Emma"})
    assert list(opts) == ["dbname", "retries", "dry_run"]
    assert opts.as_dict() == {"dbname": "Emma", "retries": 3, "dry_run": None}
    assert "dbname" in opts
    assert repr(opts).startswith("ParsedOptions(dbname='Emma'")
