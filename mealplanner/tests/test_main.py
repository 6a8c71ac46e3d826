import json
from mealplanner import main as main_module
from mealplanner.domain.Plan import PlanState


def test_build_app_loads_catalog_and_plan(tmp_path):
    console = main_module.build_app(tmp_path, tmp_path)
    for category in ("breakfast", "lunch", "dinner"):
        console.catalog.add_meal(category, "Bread", ["bread"])
    planner = console.planner
    planner.start()
    while planner.current_slot():
        planner.select("Bread")

    reopened = main_module.build_app(tmp_path, tmp_path)
    assert len(reopened.catalog) == 3
    assert reopened.planner.state is PlanState.COMPLETE


def test_main_fails_on_unreadable_store(tmp_path, capsys):
    (tmp_path / "meals.json").write_text("{broken", encoding="utf-8")
    assert main_module.main(["--data-dir", str(tmp_path)]) == 1
    assert "Cannot open meal store" in capsys.readouterr().out


def test_main_runs_until_exit(tmp_path, monkeypatch, capsys):
    answers = iter(["show", "lunch", "exit"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    assert main_module.main(["--data-dir", str(tmp_path), "--export-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "No meals found." in out
    assert "Bye!" in out
    with open(tmp_path / "plan.json", encoding="utf-8") as f:
        assert json.load(f) == []


def test_day_planned_printed_once_with_several_apps(tmp_path, monkeypatch, capsys):
    seeded = main_module.build_app(tmp_path, tmp_path)
    for category in ("breakfast", "lunch", "dinner"):
        seeded.catalog.add_meal(category, "Bread", ["bread"])
    main_module.build_app(tmp_path / "other", tmp_path)

    answers = iter(["plan"] + ["Bread"] * 21 + ["exit"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    assert main_module.main(["--data-dir", str(tmp_path), "--export-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.count("Yeah! We planned the meals for Monday.") == 1
    assert out.count("Yeah! We planned the meals for Sunday.") == 1
