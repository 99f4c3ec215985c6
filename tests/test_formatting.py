from datetime import date

from arboleda.formatting import format_long_date, format_range, parse_day_month, signup_url


def test_same_month_range():
    assert format_range("2026-03-05", "2026-03-08") == "Fechas: 5 al 8 de marzo"
    assert format_range("05/03/2026", "08.03.2026") == "Fechas: 5 al 8 de marzo"


def test_cross_month_range():
    assert format_range("2026-03-28", "2026-04-02") == "Fechas: 28 de marzo al 2 de abril"


def test_missing_start_falls_back_to_raw_end():
    assert format_range("", "2026-04-02") == "Fechas: 2026-04-02"
    assert format_range("a confirmar", "fin de abril") == "Fechas: fin de abril"
    assert format_range("", "") == "—"


def test_missing_end_renders_start_only():
    assert format_range("2026-03-05", "") == "Fechas: 5 de marzo"
    assert format_range("2026-03-05", "pronto") == "Fechas: 5 de marzo"


def test_parse_day_month_variants():
    dm = parse_day_month("45000")  # 2023-03-15
    assert (dm.day, dm.month, dm.month_name) == (15, 3, "marzo")
    dm = parse_day_month("2026/07")
    assert (dm.day, dm.month) == (1, 7)
    dm = parse_day_month("14/9")
    assert (dm.day, dm.month, dm.month_name) == (14, 9, "septiembre")
    assert parse_day_month("14/13/2026") is None
    assert parse_day_month("hoy") is None
    assert parse_day_month("") is None


def test_format_long_date():
    assert format_long_date(date(2026, 3, 5)) == "jueves, 5 de marzo de 2026"
    assert format_long_date("2026-03-08") == "domingo, 8 de marzo de 2026"
    assert format_long_date("sin fecha") == "sin fecha"


def test_huge_tokens_do_not_raise():
    huge = "9" * 5000
    assert parse_day_month(huge) is None
    assert parse_day_month("1/" + huge) is None
    assert format_range(huge, "") == "—"
    assert format_range(huge, "2026-04-02") == "Fechas: 2026-04-02"
    assert format_range("2026-03-05", huge) == "Fechas: 5 de marzo"


def test_signup_url():
    assert signup_url("forms.example.com/cv") == "https://forms.example.com/cv"
    assert signup_url(" http://example.com/a ") == "http://example.com/a"
    assert signup_url("https://example.com/b") == "https://example.com/b"
    assert signup_url("") == ""
    assert signup_url(None) == ""
