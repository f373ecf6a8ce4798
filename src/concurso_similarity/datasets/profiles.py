from __future__ import annotations

from concurso_similarity.schema import BlockFlag

# Typical convocatorias seen in the extracted forms, with the blocks they usually carry.
SPECIALTY_PROFILES: list[dict[str, object]] = [
    {
        "especialidad": "Bombero",
        "organismo": "Ayuntamiento",
        "flags": {BlockFlag.PIDE_TASAS, BlockFlag.ESPECIALIDAD_CARNET_BOMBERO},
    },
    {
        "especialidad": "Bombero conductor",
        "organismo": "Consorcio provincial de bomberos",
        "flags": {BlockFlag.PIDE_TASAS, BlockFlag.ESPECIALIDAD_CARNET_BOMBERO},
    },
    {
        "especialidad": "Medicina interna",
        "organismo": "Servicio de salud",
        "flags": {BlockFlag.ESPECIALIDAD_MEDICINA, BlockFlag.SOLICITA_ADAPTACION_DISCAPACIDAD},
    },
    {
        "especialidad": "Medicina familiar y comunitaria",
        "organismo": "Servicio de salud",
        "flags": {BlockFlag.ESPECIALIDAD_MEDICINA},
    },
    {
        "especialidad": "Auxiliar administrativo",
        "organismo": "Diputación",
        "flags": {BlockFlag.PIDE_TASAS, BlockFlag.SOLICITA_ADAPTACION_DISCAPACIDAD},
    },
    {
        "especialidad": "Policía local",
        "organismo": "Ayuntamiento",
        "flags": {BlockFlag.PIDE_TASAS},
    },
    {
        "especialidad": "Técnico de educación infantil",
        "organismo": "Consejería de educación",
        "flags": set(),
    },
]

COMMENTS = [
    "Plazo de presentación de veinte días hábiles",
    "Se requiere titulación oficial",
    "Concurso oposición con fase de méritos",
    "Bolsa de empleo temporal",
    "",
]

PROVINCES = ["Madrid", "Sevilla", "Valencia", "Zaragoza", "Málaga", "Bilbao"]
