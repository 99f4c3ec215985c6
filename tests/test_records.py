from arboleda.records import (
    BIRTHDATE_FIELDS,
    DAY_FIELDS,
    lookup,
    normalize_header,
    to_records,
)


def test_normalize_header():
    assert normalize_header("Fecha de  Nacimiento") == "fecha_de_nacimiento"
    assert normalize_header(" Inscripción ") == "inscripcion"
    assert normalize_header("Día") == "dia"
    assert normalize_header("Cumpleaños") == "cumpleaños"


def test_header_only_grid():
    assert to_records([["Nombre", "Fecha"]]) == []
    assert to_records([]) == []


def test_blank_rows_dropped_and_order_kept():
    grid = [
        ["Nombre", "Fecha"],
        ["Ana", "05/02/1990"],
        ["", ""],
        ["  ", ""],
        ["Luis", "01/03/1985"],
    ]
    recs = to_records(grid)
    assert [r["nombre"] for r in recs] == ["Ana", "Luis"]


def test_short_and_long_rows():
    grid = [["Lugar", "Día", "Hora"], ["Centro", " Lunes "], ["Casa", "Martes", "19:00", "extra"]]
    recs = to_records(grid)
    assert recs[0] == {"lugar": "Centro", "dia": "Lunes", "hora": ""}
    assert recs[1] == {"lugar": "Casa", "dia": "Martes", "hora": "19:00"}


def test_lookup_candidates_in_order():
    rec = {"fecha": "", "fecha_de_nacimiento": "05/02/1990"}
    assert lookup(rec, BIRTHDATE_FIELDS) == "05/02/1990"
    assert lookup({"dia": "Jueves"}, DAY_FIELDS) == "Jueves"
    assert lookup({}, BIRTHDATE_FIELDS) == ""


def test_lookup_literal_fallback():
    rec = {"Tipo de actividad": "Retiro"}
    assert lookup(rec, ["Tipo de actividad"]) == "Retiro"
