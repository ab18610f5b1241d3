import pytest

from entity_forms.config import EntityFormSettings
from entity_forms.exceptions import ConfigurationError, ResolutionError
from entity_forms.generators import EntityFormGenerator
from entity_forms.types import FieldKind, PropertyDescriptor, PropertyKind

pytestmark = pytest.mark.unit


class _Row:
    def __init__(self, pk, name):
        self.pk = pk
        self.name = name

    def display_label(self):
        return self.name


class _UnlabelledRow:
    def __init__(self, pk):
        self.pk = pk


class _StoreStub:
    def __init__(self, rows_by_type=None, types=None):
        self.rows_by_type = rows_by_type or {}
        self.types = types or {}
        self.reads: list[str] = []

    def get_entity_type(self, entity_type):
        return self.types.get(entity_type, _Row)

    def find_all(self, entity_type):
        self.reads.append(entity_type)
        return sorted(self.rows_by_type.get(entity_type, []), key=lambda row: row.pk)


class _ReaderStub:
    def __init__(self, properties):
        self.properties = properties

    def get_properties(self, entity_type):
        if entity_type not in self.properties:
            raise ResolutionError(f"Entity type '{entity_type}' not found.")
        return list(self.properties[entity_type])


def _column(name, declared_type=None, is_identifier=False):
    return PropertyDescriptor(
        name=name,
        kind=PropertyKind.COLUMN,
        declared_type=declared_type,
        is_identifier=is_identifier,
    )


def _reference(name, target, kind=PropertyKind.REFERENCE_ONE):
    return PropertyDescriptor(name=name, kind=kind, target_entity_type=target)


def _generator(properties, store=None, **kwargs):
    reader = _ReaderStub({"app.Entity": properties})
    return EntityFormGenerator(
        store or _StoreStub(),
        reader,
        settings=EntityFormSettings(),
        **kwargs,
    )


def test_plain_column_becomes_text_field_and_identifier_is_skipped():
    generator = _generator([_column("id", "integer", is_identifier=True), _column("name")])

    form = generator.generate("app.Entity")

    assert form.field_names() == ["name"]
    field = form.get_field("name")
    assert field.kind is FieldKind.TEXT
    assert field.label == "name"
    assert form.submit.name == "save"
    assert form.submit.value == "save"


@pytest.mark.parametrize(
    "declared_type, kind",
    [
        ("datetime", FieldKind.DATETIME),
        ("date", FieldKind.DATE),
        ("time", FieldKind.TIME),
        ("text", FieldKind.TEXTAREA),
        ("boolean", FieldKind.CHECKBOX),
        ("string", FieldKind.TEXT),
        ("integer", FieldKind.TEXT),
    ],
)
def test_declared_type_selects_field_kind(declared_type, kind):
    generator = _generator([_column("value", declared_type)])

    assert generator.generate("app.Entity").get_field("value").kind is kind


def test_email_property_overrides_untyped_column():
    generator = _generator(
        [_column("contact", "string")], email_properties=["contact"]
    )

    assert generator.generate("app.Entity").get_field("contact").kind is FieldKind.EMAIL


def test_declared_type_wins_over_email_and_password_overrides():
    generator = _generator(
        [_column("about", "text"), _column("secret", "boolean")],
        email_properties=["about"],
        password_properties=["secret"],
    )

    form = generator.generate("app.Entity")

    assert form.get_field("about").kind is FieldKind.TEXTAREA
    assert form.get_field("secret").kind is FieldKind.CHECKBOX


def test_password_property_expands_to_repeat_field():
    generator = _generator(
        [_column("password"), _column("username")],
        password_properties=["password"],
    )

    form = generator.generate("app.Entity")

    assert [(f.name, f.kind, f.label) for f in form.fields] == [
        ("password", FieldKind.PASSWORD, "password"),
        ("password2", FieldKind.PASSWORD, "password (repeat)"),
        ("username", FieldKind.TEXT, "username"),
    ]


def test_email_is_checked_before_password():
    generator = _generator(
        [_column("login")],
        email_properties=["login"],
        password_properties=["login"],
    )

    form = generator.generate("app.Entity")

    assert form.field_names() == ["login"]
    assert form.get_field("login").kind is FieldKind.EMAIL


def test_whitelist_only_includes_listed_properties():
    generator = _generator(
        [_column("name"), _column("age", "integer"), _column("bio", "text")],
        property_whitelist=["name"],
    )

    assert generator.generate("app.Entity").field_names() == ["name"]


def test_blacklist_dominates_whitelist():
    generator = _generator(
        [_column("name"), _column("age", "integer")],
        property_whitelist=["name", "age"],
        property_blacklist=["age"],
    )

    assert generator.generate("app.Entity").field_names() == ["name"]


def test_empty_lists_do_not_filter():
    generator = _generator([_column("name"), _column("age", "integer")])
    generator.set_property_whitelist([])
    generator.set_property_blacklist([])

    assert generator.generate("app.Entity").field_names() == ["name", "age"]


def test_single_reference_prepends_sentinel_option():
    store = _StoreStub(
        {"app.Person": [_Row(3, "Cy"), _Row(1, "Ann"), _Row(2, "Bo")]}
    )
    generator = _generator([_reference("manager", "app.Person")], store=store)

    field = generator.generate("app.Entity").get_field("manager")

    assert field.kind is FieldKind.SELECT
    assert list(field.options.items()) == [
        (0, "-none-"),
        (1, "Ann"),
        (2, "Bo"),
        (3, "Cy"),
    ]


def test_single_reference_without_rows_keeps_sentinel_only():
    generator = _generator([_reference("manager", "app.Person")])

    field = generator.generate("app.Entity").get_field("manager")

    assert field.options == {0: "-none-"}


def test_single_reference_sentinel_wins_key_collision():
    store = _StoreStub({"app.Person": [_Row(0, "Zero"), _Row(1, "Ann")]})
    generator = _generator([_reference("manager", "app.Person")], store=store)

    field = generator.generate("app.Entity").get_field("manager")

    assert list(field.options.items()) == [(0, "-none-"), (1, "Ann")]


def test_single_reference_radio_choice():
    generator = _generator(
        [_reference("manager", "app.Person")], to_one_field_choice="RADIO"
    )

    assert generator.generate("app.Entity").get_field("manager").kind is FieldKind.RADIO


def test_multi_reference_uses_configured_field_and_no_sentinel():
    store = _StoreStub({"app.Tag": [_Row(5, "red"), _Row(7, "blue")]})
    properties = [_reference("tags", "app.Tag", PropertyKind.REFERENCE_MANY)]

    checkbox_form = _generator(properties, store=store).generate("app.Entity")
    select_form = _generator(
        properties, store=store, to_many_field_choice="MULTI_SELECT"
    ).generate("app.Entity")

    assert checkbox_form.get_field("tags").kind is FieldKind.MULTI_CHECKBOX
    assert select_form.get_field("tags").kind is FieldKind.MULTI_SELECT
    assert checkbox_form.get_field("tags").options == {5: "red", 7: "blue"}


def test_multi_reference_without_rows_is_dropped():
    generator = _generator(
        [
            _column("name"),
            _reference("tags", "app.Tag", PropertyKind.REFERENCE_MANY),
        ]
    )

    form = generator.generate("app.Entity")

    assert "tags" not in form
    assert form.field_names() == ["name"]


def test_other_properties_are_skipped():
    generator = _generator(
        [PropertyDescriptor(name="children", kind=PropertyKind.OTHER), _column("name")]
    )

    assert generator.generate("app.Entity").field_names() == ["name"]


def test_field_order_follows_property_order():
    store = _StoreStub({"app.Person": [_Row(1, "Ann")], "app.Tag": [_Row(1, "red")]})
    generator = _generator(
        [
            _reference("tags", "app.Tag", PropertyKind.REFERENCE_MANY),
            _column("name"),
            _reference("manager", "app.Person"),
            _column("bio", "text"),
        ],
        store=store,
    )

    assert generator.generate("app.Entity").field_names() == [
        "tags",
        "name",
        "manager",
        "bio",
    ]


def test_store_is_read_once_per_reference_property():
    store = _StoreStub()
    generator = _generator(
        [
            _column("name"),
            _reference("manager", "app.Person"),
            _reference("tags", "app.Tag", PropertyKind.REFERENCE_MANY),
        ],
        store=store,
    )

    generator.generate("app.Entity")

    assert store.reads == ["app.Person", "app.Tag"]


def test_unknown_entity_type_raises_resolution_error():
    generator = _generator([_column("name")])

    with pytest.raises(ResolutionError):
        generator.generate("app.Missing")


def test_target_without_display_label_raises_configuration_error():
    store = _StoreStub(
        {"app.Badge": [_UnlabelledRow(1)]}, types={"app.Badge": _UnlabelledRow}
    )
    generator = _generator([_reference("badge", "app.Badge")], store=store)

    with pytest.raises(ConfigurationError):
        generator.generate("app.Entity")
    assert store.reads == []


def test_generate_is_idempotent():
    store = _StoreStub({"app.Person": [_Row(2, "Bo"), _Row(1, "Ann")]})
    generator = _generator(
        [_column("name"), _reference("manager", "app.Person")], store=store
    )

    first = generator.generate("app.Entity")
    second = generator.generate("app.Entity")

    assert first == second
    assert first.version == second.version


def test_invalid_field_choice_raises_configuration_error():
    generator = _generator([_column("name")])

    with pytest.raises(ConfigurationError):
        generator.set_to_one_field_choice("CHECKBOX")
    with pytest.raises(ConfigurationError):
        generator.set_to_many_field_choice("SELECT")
