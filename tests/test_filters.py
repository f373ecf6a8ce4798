import pytest

from concurso_similarity.schema import BlockFlag
from concurso_similarity.steps import matches_filters


def test_required_flag_must_match() -> None:
    filters = {BlockFlag.PIDE_TASAS: True}

    assert matches_filters({"bloques_detectados": {"pide_tasas": False}}, filters) is False
    assert matches_filters({"bloques_detectados": {"pide_tasas": True}}, filters) is True


def test_dont_care_filters_always_match() -> None:
    record = {"bloques_detectados": {"pide_tasas": True}}

    assert matches_filters(record, {}) is True
    assert matches_filters(record, {flag: None for flag in BlockFlag}) is True


def test_missing_blocks_read_as_false() -> None:
    assert matches_filters({}, {"pide_tasas": False}) is True
    assert matches_filters({}, {"pide_tasas": True}) is False
    assert matches_filters({"bloques_detectados": None}, {"especialidad_medicina": False}) is True


def test_any_mismatch_rejects_record() -> None:
    record = {"bloques_detectados": {"pide_tasas": True, "especialidad_medicina": 0}}
    filters = {"pide_tasas": True, "especialidad_medicina": True, "especialidad_carnet_bombero": None}

    assert matches_filters(record, filters) is False


def test_unknown_filter_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        matches_filters({}, {"pide_cafe": True})
