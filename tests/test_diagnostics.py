from __future__ import annotations

import pytest

from ethiocal.diagnostics import new_years_table, pretty_month, round_trip


def test_layout_weeks_pads_to_full_weeks():
    cells = [pretty_month.cell(str(i), "") for i in range(1, 6)]
    weeks = pretty_month.layout_weeks(5, cells)
    assert len(weeks) == 2
    assert all(len(wk) == 7 for wk in weeks)
    assert weeks[0][5][0].strip() == "1"


def test_ethiopian_month_grid_starts_on_weekday():
    # Pagume 2017 starts on Saturday 2025-09-06
    grid = pretty_month.ethiopian_month_calendar(2017, 13, "en")
    lines = grid.splitlines()
    assert lines[1].startswith("Mon")
    assert lines[3].split() == ["1", "2"]


def test_gregorian_month_grid_labels():
    grid = pretty_month.gregorian_month_calendar(2023, 9)
    assert "13-06" in grid   # 2023-09-11 is Pagume 6, 2015
    assert "01-01" in grid   # 2023-09-12 is Meskerem 1, 2016


def test_new_years_table_main(capsys):
    assert new_years_table.main(["--from-year", "2011", "--to-year", "2012", "--dates", "mmdd"]) == 0
    out = capsys.readouterr().out
    assert "09-11" in out and "09-12" in out
    assert "disagreements" not in out


def test_new_years_table_reports_rule_divergence(capsys):
    assert new_years_table.main(["--from-year", "2090", "--to-year", "2092"]) == 0
    assert "2091" in capsys.readouterr().out.split("disagreements")[-1]


def test_round_trip_helper():
    assert round_trip.roundtrip_test(300, 1, 9990, seed=7, max_failures=1) == 0


def test_leap_rules():
    np = pytest.importorskip("numpy")
    from ethiocal.diagnostics import leap_rules

    years, masks = leap_rules.rule_masks(np, 1850, 2150)
    assert leap_rules.disagreements(np, years, masks, "pagume", "mod4") == [1891, 2091]
    assert leap_rules.disagreements(np, years, masks, "pagume", "greg+8") != []
    assert bool(masks["pagume"][years == 2011][0]) is True


def test_leap_rules_main(capsys):
    pytest.importorskip("numpy")
    from ethiocal.diagnostics import leap_rules

    assert leap_rules.main(["--start-year", "1892", "--end-year", "2090"]) == 0
    out = capsys.readouterr().out
    assert "pagume vs mod4   : 0 disagreements" in out


def test_leap_rules_plot(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from ethiocal.diagnostics import leap_rules

    out = tmp_path / "rules.png"
    assert leap_rules.main(["--start-year", "1990", "--end-year", "2030", "--plot", "--out", str(out)]) == 0
    assert out.exists()


def test_ethiopian_month_grid_title_carries_transliteration():
    title = pretty_month.ethiopian_month_calendar(2016, 1, "en").splitlines()[0]
    assert "September 2016 EC [Meskerem]" in title
    assert "2023-09-12 .. 2023-10-11" in title
