from concurso_similarity.models import ConcursoRecord, DifferenceDetail
from concurso_similarity.steps import MatchRanker


def _corpus() -> list[ConcursoRecord]:
    return [
        ConcursoRecord(1, "medicina.pdf", {"especialidad": "Medicina interna"}),
        ConcursoRecord(None, "municipal.pdf", {"descripcion_convocatoria": "Bombero municipal"}),
        ConcursoRecord(3, "bombero.pdf", {"especialidad": "Bombero"}),
    ]


def test_empty_document_returns_no_matches() -> None:
    ranker = MatchRanker()
    corpus = _corpus() * 10
    assert ranker.rank({}, corpus) == []
    assert ranker.rank({"especialidad": None, "bloques": []}, corpus) == []
    assert ranker.compare({}, corpus) == []


def test_rank_sorts_by_score_and_drops_zero_scores() -> None:
    results = MatchRanker().rank({"especialidad": "Bombero"}, _corpus())

    assert [result.filename for result in results] == ["bombero.pdf", "municipal.pdf"]
    assert results[0].score == 1.0
    assert abs(results[1].score - 2 ** -0.5) < 1e-12
    assert all(result.score > 0 for result in results)
    assert all(result.differences is None for result in results)


def test_rank_resolves_specialty_label_and_missing_ids() -> None:
    results = MatchRanker().rank({"especialidad": "Bombero"}, _corpus())

    assert results[0].record_id == 3
    assert results[0].specialty == "Bombero"
    assert results[1].record_id == 0
    assert results[1].specialty == "Bombero municipal"


def test_rank_returns_at_most_ten_results() -> None:
    corpus = [ConcursoRecord(idx, f"{idx}.pdf", {"especialidad": "Bombero"}) for idx in range(15)]

    results = MatchRanker().rank({"especialidad": "bombero"}, corpus)

    assert len(results) == 10
    assert [result.record_id for result in results] == list(range(10))


def test_compare_attaches_field_differences() -> None:
    new_document = {"especialidad": "Bombero", "bloques_detectados": {"pide_tasas": True}}

    results = MatchRanker().compare(new_document, _corpus())

    by_file = {result.filename: result for result in results}
    assert by_file["bombero.pdf"].differences == [DifferenceDetail(label="Tasas", previous="No", current="Sí")]
    assert by_file["municipal.pdf"].differences == [
        DifferenceDetail(label="Especialidad", previous="N/A", current="Bombero"),
        DifferenceDetail(label="Tasas", previous="No", current="Sí"),
    ]
    assert "medicina.pdf" not in by_file


def test_match_result_serializes_store_field_names() -> None:
    result = MatchRanker().compare({"especialidad": "Bombero"}, _corpus())[0]

    assert result.to_dict() == {
        "id": 3,
        "nombre_archivo": "bombero.pdf",
        "score": 1.0,
        "descripcion": "Bombero",
        "diferencias": [],
    }


def test_whitespace_specialty_wins_over_description() -> None:
    corpus = [
        ConcursoRecord(7, "blanco.pdf", {"especialidad": "   ", "descripcion_convocatoria": "Bombero municipal"}),
        ConcursoRecord(8, "descripcion.pdf", {"descripcion_convocatoria": "  Bombero conductor  "}),
    ]

    results = MatchRanker().rank({"descripcion_convocatoria": "Bombero"}, corpus)

    assert {result.filename: result.specialty for result in results} == {
        "blanco.pdf": "",
        "descripcion.pdf": "Bombero conductor",
    }
