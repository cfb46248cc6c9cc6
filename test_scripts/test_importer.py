# Tests for CSV/JSON import normalization
from __future__ import annotations

import pytest

from riceboard.interchange.importer import import_csv, import_json, normalize
from riceboard.schemas.interchange import RowError, SourceKind
from riceboard.services.scoring.calculator import compute_score
from riceboard.services.scoring.values import LabelValue, NumericValue

HEADER = "name,reach,impact,confidence,effort"


@pytest.fixture
def deterministic(id_factory, clock):
    return {"id_factory": id_factory, "now": clock}


def test_import_minimal_csv(deterministic, fixed_now):
    csv_text = f"{HEADER}\nTest Feature,100,High,80%,M"
    result = import_csv(csv_text, **deterministic)

    assert result.errors == []
    assert len(result.features) == 1
    f = result.features[0]
    assert f.id == "feat-1"
    assert f.name == "Test Feature"
    assert f.reach == 100.0
    assert f.impact == LabelValue(label="High")
    assert f.confidence == LabelValue(label="80%")
    assert f.effort == LabelValue(label="M")
    assert f.description is None
    assert f.created_at == f.updated_at == fixed_now
    assert compute_score(f) == pytest.approx(80.0)


def test_unrecognized_values_are_row_warnings(deterministic):
    result = import_csv(f"{HEADER}\nX,10,Unknown,10%,ZZ\n", **deterministic)

    assert [f.name for f in result.features] == ["X"]
    assert result.errors == [
        RowError(row=2, message="Unrecognized impact: Unknown"),
        RowError(row=2, message="Unrecognized confidence: 10%"),
        RowError(row=2, message="Unrecognized effort: ZZ"),
    ]
    f = result.features[0]
    assert f.reach == 10.0
    assert f.impact is None and f.confidence is None and f.effort is None
    assert compute_score(f) is None


def test_missing_required_header_rejects_document(deterministic):
    result = import_csv("name,reach,impact,confidence\nA,1,High,80%\n", **deterministic)
    assert result.features == []
    assert result.errors == [RowError(row=1, message="Missing headers: effort")]


def test_headers_and_labels_are_case_insensitive(deterministic):
    result = import_csv("Name, REACH ,Impact,Confidence,EFFORT\nA,5,HIGH,80,xl\n", **deterministic)
    assert result.errors == []
    f = result.features[0]
    assert f.impact == LabelValue(label="High")
    assert f.confidence == LabelValue(label="80%")
    assert f.effort == LabelValue(label="XL")


@pytest.mark.parametrize("cell", ["80", "80%", "80 %"])
def test_confidence_shorthand(deterministic, cell):
    result = import_csv(f"{HEADER}\nA,1,High,{cell},M\n", **deterministic)
    assert result.features[0].confidence == LabelValue(label="80%")


def test_numeric_scale_cells(deterministic):
    result = import_csv(f"{HEADER}\nA,1,1.5,0.8,3\n", **deterministic)
    f = result.features[0]
    assert f.impact == NumericValue(value=1.5)
    assert f.confidence == NumericValue(value=0.8)
    assert f.effort == NumericValue(value=3.0)
    assert compute_score(f) == pytest.approx(0.4)


def test_missing_name_rejects_only_that_row(deterministic):
    result = import_csv(f"{HEADER}\n,1,High,80%,M\nB,2,Low,50%,S\n", **deterministic)
    assert [f.name for f in result.features] == ["B"]
    assert result.errors == [RowError(row=2, message="Missing required field: name")]


def test_non_numeric_reach_is_left_unset(deterministic):
    result = import_csv(f"{HEADER}\nA,lots,High,80%,M\n", **deterministic)
    assert result.errors == []
    assert result.features[0].reach is None


def test_out_of_range_numbers(deterministic):
    result = import_csv(f"{HEADER}\nA,-5,High,80%,0\n", **deterministic)
    f = result.features[0]
    assert f.reach is None
    assert f.effort is None
    assert result.errors == [
        RowError(row=2, message="Out-of-range reach: -5"),
        RowError(row=2, message="Out-of-range effort: 0"),
    ]


def test_description_column_and_short_rows(deterministic):
    text = f'{HEADER},description\nA,1,High,80%,M,"Tags, search and filters"\nB,2\n'
    result = import_csv(text, **deterministic)
    assert result.errors == []
    a, b = result.features
    assert a.description == "Tags, search and filters"
    assert b.reach == 2.0
    assert b.impact is None
    assert b.description is None


def test_ids_come_from_injected_factory(deterministic):
    result = import_csv(f"{HEADER}\nA,,,,\nB,,,,\n", **deterministic)
    assert [f.id for f in result.features] == ["feat-1", "feat-2"]


def test_pre_parsed_rows(deterministic):
    rows = [HEADER.split(","), ["A", "1", "High", "80%", "M"]]
    result = normalize(rows, SourceKind.DELIMITED, **deterministic)
    assert [f.name for f in result.features] == ["A"]


def test_unsupported_delimited_input(deterministic):
    result = normalize(42, SourceKind.DELIMITED, **deterministic)
    assert result.features == []
    assert len(result.errors) == 1 and result.errors[0].row == 1


def test_empty_documents(deterministic):
    assert import_csv("", **deterministic).errors == []
    assert import_csv("", **deterministic).features == []
    assert import_json("  ", **deterministic).features == []


def test_row_limit(deterministic):
    result = import_csv(f"{HEADER}\nA,,,,\nB,,,,\n", max_rows=1, **deterministic)
    assert [f.name for f in result.features] == ["A"]
    assert result.errors == [
        RowError(row=3, message="Row limit exceeded: only the first 1 rows were imported")
    ]


# --- JSON -----------------------------------------------------------------


def test_import_json_array(deterministic):
    text = '[{"name": "Test Feature", "reach": 100, "impact": "High", "confidence": "80%", "effort": "M"}]'
    result = import_json(text, **deterministic)
    assert result.errors == []
    f = result.features[0]
    assert f.name == "Test Feature"
    assert compute_score(f) == pytest.approx(80.0)


def test_invalid_json(deterministic):
    result = import_json("[{not json", **deterministic)
    assert result.features == []
    assert len(result.errors) == 1
    assert result.errors[0].row == 1
    assert result.errors[0].message.startswith("Invalid JSON")


def test_json_must_be_an_array(deterministic):
    result = import_json('{"name": "A"}', **deterministic)
    assert result.errors == [RowError(row=1, message="JSON must be an array of objects")]


def test_json_row_errors_use_element_position(deterministic):
    result = import_json('[{"name": "A"}, {"reach": 3}, "oops"]', **deterministic)
    assert [f.name for f in result.features] == ["A"]
    assert result.errors == [
        RowError(row=2, message="Missing required field: name"),
        RowError(row=3, message="Expected an object"),
    ]


def test_json_keeps_resolvable_labels_as_given(deterministic):
    result = import_json('[{"name": "A", "reach": 10, "impact": "high", "confidence": "100%", "effort": "s"}]', **deterministic)
    f = result.features[0]
    assert f.impact == LabelValue(label="high")
    assert f.effort == LabelValue(label="s")
    assert compute_score(f) == pytest.approx(20.0)


def test_json_normalizes_shorthand_and_numeric_text(deterministic):
    result = import_json('[{"name": "A", "reach": "12", "impact": "2", "confidence": "80", "effort": 4}]', **deterministic)
    f = result.features[0]
    assert f.reach == 12.0
    assert f.impact == NumericValue(value=2.0)
    assert f.confidence == LabelValue(label="80%")
    assert f.effort == NumericValue(value=4.0)


def test_json_unrecognized_values(deterministic):
    text = '[{"name": "A", "reach": "abc", "impact": "huge", "confidence": true, "effort": 0}]'
    result = import_json(text, **deterministic)
    f = result.features[0]
    assert f.reach is None
    assert f.impact is None and f.confidence is None and f.effort is None
    assert [e.message for e in result.errors] == [
        "Unrecognized impact: huge",
        "Unrecognized confidence: True",
        "Out-of-range effort: 0",
    ]


def test_json_accepts_decoded_data(deterministic):
    result = normalize([{"name": "A", "description": "d"}], SourceKind.STRUCTURED, **deterministic)
    assert result.features[0].description == "d"


def test_json_row_limit(deterministic):
    result = import_json('[{"name": "A"}, {"name": "B"}]', max_rows=1, **deterministic)
    assert [f.name for f in result.features] == ["A"]
    assert result.errors[0].row == 2


def test_deeply_nested_json_is_a_structural_error(deterministic):
    result = import_json("[" * 100000, **deterministic)
    assert result.features == []
    assert len(result.errors) == 1
    assert result.errors[0].row == 1
    assert result.errors[0].message.startswith("Invalid JSON")


@pytest.mark.parametrize("cell", ["1_000", "1__0"])
def test_underscore_digit_grouping_is_not_numeric(deterministic, cell):
    result = import_csv(f"{HEADER}\nA,{cell},{cell},1,{cell}\n", **deterministic)
    f = result.features[0]
    assert f.reach is None
    assert f.impact is None
    assert f.effort is None
    assert [e.message for e in result.errors] == [
        f"Unrecognized impact: {cell}",
        f"Unrecognized effort: {cell}",
    ]
