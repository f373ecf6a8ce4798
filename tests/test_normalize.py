import logging

from concurso_similarity.models import ConcursoRecord
from concurso_similarity.steps import TermFrequencyVectorizer, TextNormalizer, flatten_json, tokenize


def test_flatten_json_walks_values_in_order() -> None:
    document = {
        "Titulo": "  Hola   Mundo ",
        "lista": [1, True, None, {"clave": "X"}],
        "importe": 2.0,
        "ratio": 0.5,
    }
    assert flatten_json(document) == "hola mundo 1 true x 2 0.5"


def test_flatten_json_of_null_and_empty_is_empty() -> None:
    assert flatten_json(None) == ""
    assert flatten_json({}) == ""
    assert flatten_json({"a": None, "b": [], "c": "   "}) == ""


def test_depth_guard_drops_deep_content(caplog) -> None:
    normalizer = TextNormalizer(max_depth=2)
    with caplog.at_level(logging.WARNING):
        text = normalizer.normalize({"a": {"b": {"c": "deep"}}, "z": "top"})
    assert text == "top"
    assert "normalization truncated" in caplog.text


def test_node_guard_stops_walk() -> None:
    assert TextNormalizer(max_nodes=3).normalize(["a", "b", "c"]) == "a b"


def test_cycles_are_skipped() -> None:
    document: dict = {"a": "x"}
    document["self"] = document
    document["items"] = [document, "y"]
    assert flatten_json(document) == "x y"


def test_tokenize_keeps_spanish_letters_and_digits() -> None:
    assert tokenize("Técnico-de_educación, 2024! ñu Ü") == ["técnico", "de", "educación", "2024", "ñu"]
    assert tokenize("  ---  ") == []


def test_vectorize_text_counts_tokens() -> None:
    vector = TermFrequencyVectorizer().vectorize_text("Bombero  BOMBERO municipal")
    assert vector.summary == "bombero bombero municipal"
    assert vector.frequencies == {"bombero": 2, "municipal": 1}


def test_vectorize_record_prefers_specialty_then_filename() -> None:
    vectorizer = TermFrequencyVectorizer()
    with_specialty = ConcursoRecord(1, "a.pdf", {"especialidad": "Bombero", "comentarios": "largo"})
    with_description = ConcursoRecord(2, "b.pdf", {"descripcion_convocatoria": "Medicina interna"})
    bare = ConcursoRecord(3, "Convocatoria_2024.pdf", {"comentarios": "otro"})

    assert vectorizer.vectorize_record(with_specialty).frequencies == {"bombero": 1}
    assert vectorizer.vectorize_record(with_description).frequencies == {"medicina": 1, "interna": 1}
    assert vectorizer.vectorize_record(bare).frequencies == {"convocatoria": 1, "2024": 1, "pdf": 1}
    assert vectorizer.vectorize_record(with_specialty, "document").summary == "bombero largo"


def test_vectors_are_memoized_by_text() -> None:
    vectorizer = TermFrequencyVectorizer()
    first = vectorizer.vectorize_text("Policía local de Sevilla")
    second = vectorizer.vectorize_text("policía   local de sevilla")
    assert first is second
