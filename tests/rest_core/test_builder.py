from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest

from rest_core.builder import RequestBuilder
from rest_core.errors import ConfigurationError, UnsupportedValueError
from rest_core.metadata import RequestDescriptor, Verb, body, query, route
from rest_core.models import WireModel
from rest_core.naming import to_snake

BASE_URL = "https://trivia.example.com/api"


@route("/category/{id}", Verb.GET)
@dataclass(frozen=True)
class GetCategory(RequestDescriptor[Dict[str, Any]]):
    id: Optional[int] = None
    offset: Optional[int] = None


@route("/clues", Verb.GET)
@dataclass(frozen=True)
class SearchClues(RequestDescriptor[List[Dict[str, Any]]]):
    ids: Optional[List[int]] = None
    MinDate: Optional[dt.date] = None
    text: Optional[str] = query(alias="q")


@route("/clues/{clue_id}/notes", Verb.POST)
@dataclass(frozen=True)
class AddNote(RequestDescriptor[Dict[str, Any]]):
    clue_id: int = 0
    NoteText: Optional[str] = body()
    author: Optional[str] = body(alias="written_by")
    draft: Optional[bool] = None


class Answer(WireModel):
    AnswerText: str
    points: int


@route("/clues/{clue_id}/answer", Verb.PUT)
@dataclass(frozen=True)
class ReplaceAnswer(RequestDescriptor[Dict[str, Any]]):
    clue_id: int = 0
    answer: Optional[Answer] = body(value_only=True)
    comment: Optional[str] = body()


@route("/categories/{category}/clues/{value}", Verb.DELETE)
@dataclass(frozen=True)
class DeleteClues(RequestDescriptor[None]):
    category: Optional[int] = None


@pytest.fixture
def builder() -> RequestBuilder:
    return RequestBuilder(BASE_URL, naming=to_snake)


def test_path_field_is_substituted_and_not_repeated_in_query(builder: RequestBuilder) -> None:
    request = builder.build(GetCategory(id=7))

    assert request.method == "GET"
    assert request.url == f"{BASE_URL}/category/7"
    assert request.body is None


def test_null_query_fields_are_omitted(builder: RequestBuilder) -> None:
    assert builder.build(GetCategory(id=7, offset=None)).url == f"{BASE_URL}/category/7"
    assert builder.build(GetCategory(id=7, offset=3)).url == f"{BASE_URL}/category/7?offset=3"


def test_missing_path_value_fails_at_build_time(builder: RequestBuilder) -> None:
    with pytest.raises(ConfigurationError, match="id is a required field"):
        builder.build(GetCategory())


def test_placeholder_without_field_fails_at_build_time(builder: RequestBuilder) -> None:
    with pytest.raises(ConfigurationError, match="value"):
        builder.build(DeleteClues(category=3))


def test_query_keys_are_converted_and_values_encoded(builder: RequestBuilder) -> None:
    request = builder.build(SearchClues(ids=[1, 2, 3], MinDate=dt.date(2008, 1, 5), text="who & what"))

    assert request.url == f"{BASE_URL}/clues?ids=1,2,3&min_date=2008-01-05&q=who%20%26%20what"


def test_empty_descriptor_has_no_trailing_separator(builder: RequestBuilder) -> None:
    assert builder.build(SearchClues()).url == f"{BASE_URL}/clues"


def test_unencodable_query_value_raises(builder: RequestBuilder) -> None:
    with pytest.raises(UnsupportedValueError):
        builder.build(SearchClues(ids={"a": 1}))  # type: ignore[arg-type]


def test_body_fields_are_collected_into_one_object(builder: RequestBuilder) -> None:
    request = builder.build(AddNote(clue_id=5, NoteText="Nice one", author="alex", draft=True))

    assert request.method == "POST"
    assert request.url == f"{BASE_URL}/clues/5/notes?draft=true"
    assert request.headers["Content-Type"].startswith("application/json")
    assert json.loads(request.body_text or "") == {"note_text": "Nice one", "written_by": "alex"}
    assert list(json.loads(request.body_text or "")) == ["note_text", "written_by"]


def test_null_body_fields_produce_no_body(builder: RequestBuilder) -> None:
    request = builder.build(AddNote(clue_id=5))

    assert request.body is None
    assert "Content-Type" not in request.headers


def test_value_only_field_becomes_the_whole_body(builder: RequestBuilder) -> None:
    request = builder.build(
        ReplaceAnswer(clue_id=9, answer=Answer(AnswerText="Paris", points=200), comment="ignored")
    )

    assert request.method == "PUT"
    assert request.url == f"{BASE_URL}/clues/9/answer"
    assert json.loads(request.body_text or "") == {"answer_text": "Paris", "points": 200}


def test_body_fields_are_used_when_value_only_field_is_null(builder: RequestBuilder) -> None:
    request = builder.build(ReplaceAnswer(clue_id=9, comment="later"))

    assert json.loads(request.body_text or "") == {"comment": "later"}


def test_default_headers_and_absolute_templates() -> None:
    @route("https://other.example.com/health", Verb.GET)
    @dataclass(frozen=True)
    class Health(RequestDescriptor[None]):
        pass

    builder = RequestBuilder(BASE_URL, default_headers={"Authorization": "Bearer token"})
    request = builder.build(Health())

    assert request.url == "https://other.example.com/health"
    assert request.headers["Authorization"] == "Bearer token"
    assert request.headers["Accept"] == "application/json"


@route("/category/{id}", Verb.GET)
@dataclass(frozen=True)
class GetCategoryByCamelId(RequestDescriptor[Dict[str, Any]]):
    Id: Optional[int] = None
    Offset: Optional[int] = None


def test_camel_case_field_fills_snake_case_placeholder(builder: RequestBuilder) -> None:
    assert builder.build(GetCategoryByCamelId(Id=7)).url == f"{BASE_URL}/category/7"
    assert builder.build(GetCategoryByCamelId(Id=7, Offset=3)).url == f"{BASE_URL}/category/7?offset=3"


def test_camel_case_path_field_is_still_required(builder: RequestBuilder) -> None:
    with pytest.raises(ConfigurationError, match="Id is a required field"):
        builder.build(GetCategoryByCamelId())


@pytest.mark.parametrize("value", [{"a": "object"}, {1, 2}, [{"nested": True}], object()])
def test_complex_body_field_values_are_rejected(builder: RequestBuilder, value: Any) -> None:
    with pytest.raises(UnsupportedValueError):
        builder.build(AddNote(clue_id=5, NoteText=value))


def test_sequence_body_field_keeps_its_json_shape(builder: RequestBuilder) -> None:
    request = builder.build(AddNote(clue_id=5, NoteText=["a", "b"]))  # type: ignore[arg-type]

    assert json.loads(request.body_text or "") == {"note_text": ["a", "b"]}
