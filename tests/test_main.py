from training_calc.analysis.training_report import read_data
from training_calc.main import main, sample_trainings
from training_calc.domain.training import Running, Swimming, Walking


def test_sample_trainings_order():
    trainings = sample_trainings("ru")
    assert [type(t) for t in trainings] == [Swimming, Walking, Running]
    assert [t.training_type for t in trainings] == ["Плавание", "Ходьба", "Бег"]


def test_main_prints_three_reports(capsys, swimming, walking, running):
    main()
    out = capsys.readouterr().out
    expected = "".join(read_data(t, "ru") + "\n" for t in (swimming, walking, running))
    assert out == expected


def test_main_uses_locale(monkeypatch, capsys):
    monkeypatch.setenv("TRAINING_LOCALE", "en")
    main()
    out = capsys.readouterr().out
    assert out.startswith("Training type: Swimming\n")
    assert "Training type: Walking\n" in out
    assert "Training type: Running\n" in out
    assert "Тип тренировки" not in out
