import json

import pandas as pd

from cronograma.main import main

PAYLOAD = {
    "collaborators": [
        {"id": f"c{i}", "name": f"Cajero {i}", "originalJobTitle": "Cajero de Recaudo",
         "originalLocation": "Sede Norte"}
        for i in range(1, 4)
    ],
    "shiftPatterns": [{"jobTitle": "Cajero de Recaudo", "cycle": ["M8", "T8", "N8", "LIB"]}],
}


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Uso:" in capsys.readouterr().out


def test_invalid_month(capsys):
    assert main(["13", "2025", "datos.json"]) == 1
    assert "Error" in capsys.readouterr().out


def test_missing_data_file(tmp_path, capsys):
    assert main(["5", "2025", str(tmp_path / "no_existe.json")]) == 1
    assert "Error" in capsys.readouterr().out


def test_exports_schedule_and_chart(tmp_path, monkeypatch, capsys):
    data_file = tmp_path / "datos.json"
    data_file.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main(["5", "2025", str(data_file), "Sede Norte", "Cajero de Recaudo"]) == 0

    output = capsys.readouterr().out
    assert "Cronograma del período 2025-05" in output
    assert "Franjas sin cubrir" in output
    assert "Personal recomendado" in output

    table = pd.read_csv(tmp_path / "horario_2025-05.csv", index_col=0)
    assert list(table.index) == ["c1", "c2", "c3"]
    assert len(table.columns) == 30
    assert not table.isin(["N9"]).any().any()
    assert (tmp_path / "cobertura_2025-05.png").exists()
