"""Tests for field descriptor extraction and action list parsing."""

import dataclasses
from enum import Enum
from typing import Annotated, ClassVar, NamedTuple

import pytest
from pydantic import BaseModel

from pom_actions.errors import MalformedActionListError, NotARecordError
from pom_actions.generation.extractor import (
    ActionListSyntaxError,
    FieldDescriptorExtractor,
    actions,
    extract_fields,
    parse_action_list,
)


class TestParseActionList:
    """Tests for the action list syntax."""

    def test_bare_identifiers(self):
        assert parse_action_list(("click", "enter_keys")) == ["click", "enter_keys"]

    def test_comma_separated(self):
        assert parse_action_list("click, enter_keys") == ["click", "enter_keys"]

    def test_parenthesized(self):
        assert parse_action_list("methods(click, enter_keys)") == ["click", "enter_keys"]

    def test_all_forms_normalize_identically(self):
        forms = [
            ("click", "enter_keys", "get_text"),
            "click,enter_keys,get_text",
            " methods ( click , enter_keys , get_text ) ",
            (["click", "enter_keys"], "get_text"),
        ]
        results = [parse_action_list(form) for form in forms]

        assert all(result == ["click", "enter_keys", "get_text"] for result in results)

    def test_trailing_comma_allowed(self):
        assert parse_action_list("methods(click, hover,)") == ["click", "hover"]
        assert parse_action_list("click,") == ["click"]

    def test_empty_parenthesized_list(self):
        assert parse_action_list("methods()") == []
        assert parse_action_list(()) == []

    def test_duplicates_are_kept_by_parser(self):
        assert parse_action_list("click, click") == ["click", "click"]

    @pytest.mark.parametrize(
        "raw, fragment",
        [
            ("", "empty action list"),
            ("click,,hover", "empty action name"),
            ("click hover", "not a valid action name"),
            ("1click", "not a valid action name"),
            ("actions(click)", "expected 'methods'"),
            ("methods(click", "expected 'methods(<action>, ...)'"),
            ("methods(click) extra", "expected 'methods(<action>, ...)'"),
            ("methods(click(x))", "nested parentheses"),
        ],
    )
    def test_malformed_text(self, raw, fragment):
        with pytest.raises(ActionListSyntaxError) as exc_info:
            parse_action_list(raw)

        assert fragment in str(exc_info.value)

    def test_non_string_item(self):
        with pytest.raises(ActionListSyntaxError) as exc_info:
            parse_action_list(("click", 42))

        assert "int" in str(exc_info.value)


class PydanticPage(BaseModel):
    email: Annotated[str, actions("click", "enter_keys")] = "#email"
    banner: str = ".banner"
    submit: Annotated[str, actions("methods(click, is_enabled)")] = "#submit"


@dataclasses.dataclass
class DataclassPage:
    search: Annotated[str, actions("enter_keys")] = "#q"
    results: str = "#results"
    registry: ClassVar[str] = "ignored"


class TuplePage(NamedTuple):
    menu: Annotated[str, actions("hover")] = "#menu"
    logo: str = "#logo"


class PlainPage:
    header: Annotated[str, actions("get_text")] = "h1"
    footer: str = "footer"
    _private: str = "hidden"
    shared: ClassVar[int] = 1


class TestExtractFields:
    """Tests for reading fields off record classes."""

    def test_pydantic_model(self):
        description = extract_fields(PydanticPage)

        assert description.name == "PydanticPage"
        assert description.field_names() == ["email", "banner", "submit"]
        assert description.fields[0].actions == ["click", "enter_keys"]
        assert description.fields[1].actions == []
        assert description.fields[2].actions == ["click", "is_enabled"]

    def test_dataclass(self):
        description = extract_fields(DataclassPage)

        assert description.field_names() == ["search", "results"]
        assert description.fields[0].actions == ["enter_keys"]

    def test_named_tuple(self):
        description = extract_fields(TuplePage)

        assert description.field_names() == ["menu", "logo"]
        assert description.fields[0].actions == ["hover"]

    def test_plain_class_skips_private_and_classvars(self):
        description = extract_fields(PlainPage)

        assert description.field_names() == ["header", "footer"]
        assert description.fields[0].actions == ["get_text"]

    def test_locator_attribute_is_field_name(self):
        description = extract_fields(PydanticPage)

        assert all(f.locator_attribute == f.name for f in description.fields)

    def test_module_recorded(self):
        assert extract_fields(PydanticPage).module == __name__

    def test_multiple_markers_concatenate(self):
        class Page(BaseModel):
            field: Annotated[str, actions("click"), actions("hover, get_text")] = "#f"

        description = extract_fields(Page)

        assert description.fields[0].actions == ["click", "hover", "get_text"]

    def test_duplicate_actions_collapse(self, caplog):
        class Page(BaseModel):
            field: Annotated[str, actions("click", "hover", "click")] = "#f"

        description = extract_fields(Page)

        assert description.fields[0].actions == ["click", "hover"]
        assert "more than once" in caplog.text

    def test_empty_class_is_a_record(self):
        class Empty(BaseModel):
            pass

        assert extract_fields(Empty).fields == []

    def test_inherited_fields_come_first(self):
        class Base(BaseModel):
            header: str = "h1"

        class Child(Base):
            body: Annotated[str, actions("click")] = "main"

        assert extract_fields(Child).field_names() == ["header", "body"]


class TestExtractionErrors:
    """Tests for rejected declarations."""

    def test_function_is_not_a_record(self):
        def login_page():
            pass

        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(login_page)

        assert "login_page is not a record type" in str(exc_info.value)
        assert exc_info.value.type_name == "login_page"

    def test_instance_is_not_a_record(self):
        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(PydanticPage())

        assert "must be classes" in str(exc_info.value)

    def test_enum_is_not_a_record(self):
        class Color(Enum):
            RED = "red"

        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(Color)

        assert "Color" in str(exc_info.value)

    @pytest.mark.parametrize("builtin", [int, str, dict, object])
    def test_builtin_type_is_not_a_record(self, builtin):
        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(builtin)

        assert f"{builtin.__name__} is not a record type" in str(exc_info.value)

    def test_page_object_on_builtin_attaches_nothing(self):
        from pom_actions import page_object

        with pytest.raises(NotARecordError):
            page_object(int)

        assert not hasattr(int, "__page_methods__")

    def test_positional_tuple_is_not_a_record(self):
        class Pair(tuple):
            pass

        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(Pair)

        assert "positional" in str(exc_info.value)

    def test_unresolvable_annotation(self):
        class Broken:
            field: "DoesNotExist"  # noqa: F821

        with pytest.raises(NotARecordError) as exc_info:
            extract_fields(Broken)

        assert "cannot resolve field annotations" in str(exc_info.value)

    def test_malformed_action_list_names_field(self):
        class Page(BaseModel):
            ok: Annotated[str, actions("click")] = "#ok"
            search: Annotated[str, actions("methods(click")] = "#q"

        with pytest.raises(MalformedActionListError) as exc_info:
            FieldDescriptorExtractor().extract(Page)

        error = exc_info.value
        assert error.type_name == "Page"
        assert error.field_name == "search"
        assert "field search of Page" in str(error)
