from concurso_similarity.models import DifferenceDetail
from concurso_similarity.schema import ABSENT, Present, TrackedField, lookup_path
from concurso_similarity.steps import diff_documents


def test_identical_documents_have_no_differences() -> None:
    document = {
        "especialidad": "Bombero",
        "bloques_detectados": {"pide_tasas": True, "especialidad_medicina": False},
        "comentarios": "Plazo de veinte días",
    }
    assert diff_documents(document, dict(document)) == []
    assert diff_documents({}, {}) == []


def test_flag_change_is_reported_as_yes_no() -> None:
    old = {"bloques_detectados": {"pide_tasas": False}}
    new = {"bloques_detectados": {"pide_tasas": True}}

    assert diff_documents(new, old) == [DifferenceDetail(label="Tasas", previous="No", current="Sí")]


def test_missing_values_render_as_not_available() -> None:
    differences = diff_documents({"especialidad": "Bombero"}, {"comentarios": "Revisado"})

    assert differences == [
        DifferenceDetail(label="Especialidad", previous="N/A", current="Bombero"),
        DifferenceDetail(label="Comentarios", previous="Revisado", current="N/A"),
    ]


def test_output_follows_tracked_field_order() -> None:
    old = {"comentarios": "a", "bloques_detectados": {"especialidad_medicina": True}, "especialidad": "Medicina"}
    new = {"comentarios": "b", "bloques_detectados": {}, "especialidad": "Medicina interna"}

    labels = [difference.label for difference in diff_documents(new, old)]

    assert labels == ["Especialidad", "Carnet Medicina", "Comentarios"]


def test_absent_and_false_flags_are_equivalent() -> None:
    assert diff_documents({"bloques_detectados": {"pide_tasas": False}}, {}) == []
    assert diff_documents({"bloques_detectados": "sin datos"}, {"bloques_detectados": {}}) == []


def test_custom_fields_and_formatting() -> None:
    fields = [TrackedField("Plazas", ("plazas",)), TrackedField("Urgente", ("meta", "urgente"))]

    differences = diff_documents({"plazas": 3.0, "meta": {"urgente": True}}, {"plazas": 2}, fields)

    assert differences == [
        DifferenceDetail(label="Plazas", previous="2", current="3"),
        DifferenceDetail(label="Urgente", previous="N/A", current="true"),
    ]


def test_lookup_path_distinguishes_null_from_absent() -> None:
    document = {"a": {"b": None}, "c": "texto"}

    assert lookup_path(document, ["a", "b"]) == Present(None)
    assert lookup_path(document, ["a", "x"]) is ABSENT
    assert lookup_path(document, ["c", "d"]) is ABSENT
    assert lookup_path(None, ["a"]) is ABSENT
    assert lookup_path(document, []) == Present(document)
