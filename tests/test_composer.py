import pytest

from optcompose.composer import Composer, check_for_duplicates
from optcompose.descriptor import OptionDescriptor, descriptors_from
from optcompose.exceptions import DuplicateOptionError, InvalidModuleError
from optcompose.module import InlineModule, OptionModule
from optcompose.modules import BasicOptions, DBOptions, ExtDBOptions

DB_KEYS = ("dbname", "dbhost", "dbport", "dbuser", "dbpasswd", "dbsocket")


def test_compose_keeps_module_order():
    first = InlineModule(["alpha", "beta"], name="first")
    second = InlineModule(["gamma"], name="second")
    spec = Composer().compose([first, second])
    assert spec.keys() == ("alpha", "beta", "gamma")
    assert spec.modules == (first, second)
    assert spec.owner_of("gamma").module is second


def test_compose_empty():
    spec = Composer().compose([])
    assert len(spec) == 0
    assert spec.modules == ()


def test_extended_module_includes_parent_options():
    module = ExtDBOptions()
    spec = Composer().compose([module])
    assert spec.keys() == DB_KEYS + ("dbshow",)
    assert spec.owner_of("dbname").declared_by == "DBOptions"
    assert spec.owner_of("dbname").module is module
    assert spec.owner_of("dbshow").declared_by == "ExtDBOptions"


def test_parent_and_extension_compose_without_duplicates():
    db = DBOptions()
    ext = ExtDBOptions()
    spec = Composer().compose([db, ext])
    assert spec.keys() == DB_KEYS + ("dbshow",)
    assert spec.owner_of("dbhost").module is db
    assert spec.owner_of("dbshow").module is ext
    assert spec.modules == (db, ext)


def test_extension_before_parent_composes_too():
    spec = Composer().compose([ExtDBOptions(), DBOptions()])
    assert spec.keys() == DB_KEYS + ("dbshow",)


def test_same_module_twice_is_a_duplicate():
    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose([DBOptions(), DBOptions()])
    assert exc_info.value.name == "dbname"


def test_extension_twice_is_a_duplicate():
    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose([ExtDBOptions(), ExtDBOptions()])
    assert exc_info.value.name == "dbshow"


def test_duplicate_names_across_modules():
    app_module = InlineModule([("dbname=s", "my own database")], name="myapp")
    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose([app_module, DBOptions()])
    error = exc_info.value
    assert error.name == "dbname"
    assert error.first_module == "myapp"
    assert error.second_module == "DBOptions"
    assert "dbname" in str(error)


def test_duplicate_alias():
    verbose = InlineModule(["verbose|v"], name="verbose")
    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose([verbose, BasicOptions()])
    assert exc_info.value.name == "v"
    assert exc_info.value.first == "verbose|v"
    assert exc_info.value.second == "version|v"


def test_duplicate_accessor_key():
    with pytest.raises(DuplicateOptionError) as exc_info:
        check_for_duplicates(descriptors_from(["db-name=s", "db_name=s"]))
    assert exc_info.value.name == "db_name"


def test_no_duplicates_passes():
    check_for_duplicates(descriptors_from(["a", "b|x", "c=s"]))


def test_non_module_rejected():
    with pytest.raises(InvalidModuleError):
        Composer().compose([object()])
    with pytest.raises(InvalidModuleError):
        Composer().compose([DBOptions])


def test_level_must_extend_parent():
    class Reordering(DBOptions):
        def get_opt_spec(self):
            return list(reversed(super().get_opt_spec()))

    with pytest.raises(InvalidModuleError, match="Reordering"):
        Composer().compose([Reordering()])


def test_level_must_return_descriptors():
    class Sloppy(OptionModule):
        def get_opt_spec(self):
            return ["dbname=s"]

    with pytest.raises(InvalidModuleError):
        Composer().compose([Sloppy()])


def test_declarations_report_declaring_class():
    declarations = Composer().declarations(ExtDBOptions(name="ext"))
    assert [entry.declared_by for entry in declarations] == ["DBOptions"] * 6 + ["ext"]
    assert [entry.inherited for entry in declarations] == [True] * 6 + [False]
    assert declarations[0].declared_in is DBOptions


def test_subclass_without_own_spec_inherits_everything():
    class Quiet(ExtDBOptions):
        pass

    spec = Composer().compose([Quiet()])
    assert "dbshow" in spec
    assert spec.owner_of("dbshow").declared_by == "ExtDBOptions"


def test_module_name_defaults_to_class_name():
    assert DBOptions().name == "DBOptions"
    assert DBOptions(name="db").name == "db"


def test_inline_module_accepts_descriptors():
    descriptor = OptionDescriptor.from_spec("check|c")
    module = InlineModule([descriptor, "quiet"])
    assert module.get_opt_spec()[0] is descriptor
    assert module.name == "InlineModule"


def test_inline_module_rejects_non_callable_validator():
    with pytest.raises(TypeError):
        InlineModule([], validator="nope")


def test_same_subclass_twice_is_a_duplicate():
    class AuditedDB(DBOptions):
        def validate_opts(self, app, caller, opts, args):
            pass

    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose([AuditedDB(), AuditedDB()])
    assert exc_info.value.name == "dbname"


def test_parent_and_validator_only_subclass_compose():
    class AuditedDB(DBOptions):
        def validate_opts(self, app, caller, opts, args):
            pass

    spec = Composer().compose([DBOptions(), AuditedDB()])
    assert spec.keys() == DB_KEYS
    assert len(spec.modules) == 2


def test_case_insensitive_composition_folds_names():
    modules = [
        InlineModule(["all|A"], name="first"),
        InlineModule(["any|a"], name="second"),
    ]
    Composer().compose(modules)
    with pytest.raises(DuplicateOptionError) as exc_info:
        Composer().compose(modules, case_sensitive=False)
    assert exc_info.value.name == "a"
    assert exc_info.value.second_module == "second"
