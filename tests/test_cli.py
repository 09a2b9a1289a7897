# tests/test_cli.py
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

from txtreport import cli
from txtreport.cli import main, run

# --- Fixtures ---

@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Working directory for the run; the report lands in workdir/export/."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work

@pytest.fixture
def input_dir(tmp_path):
    texts = tmp_path / "texts"
    texts.mkdir()
    (texts / "b.txt").write_text("hello world\n\nfoo", encoding="utf-8")
    (texts / "a.txt").write_text("one two three", encoding="utf-8")
    return texts

def report_of(workdir: Path) -> Path:
    return workdir / "export" / "relatorio.txt"

# --- Test 1: run() ---

def test_run_writes_sorted_report(workdir, input_dir):
    path = run(input_dir)

    assert path == report_of(workdir).resolve()
    assert path.read_text(encoding="utf-8") == (
        "a.txt - 1 linhas - 3 palavras\n"
        "b.txt - 3 linhas - 3 palavras\n"
    )

def test_run_custom_destination(tmp_path, input_dir):
    dest = tmp_path / "elsewhere" / "out.txt"
    assert run(input_dir, dest) == dest.resolve()
    assert dest.exists()

def test_run_without_txt_files_writes_nothing(workdir, tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    (empty / "readme.md").write_text("not a txt", encoding="utf-8")

    assert run(empty) is None
    assert not (workdir / "export").exists()
    assert "Nenhum arquivo .txt foi encontrado" in capsys.readouterr().out

def test_run_file_deleted_after_listing(workdir, input_dir):
    listed = sorted(input_dir.glob("*.txt")) + [input_dir / "c.txt"]

    with patch.object(cli, "find_text_files", return_value=listed):
        path = run(input_dir)

    assert path.read_text(encoding="utf-8").splitlines() == [
        "a.txt - 1 linhas - 3 palavras",
        "b.txt - 3 linhas - 3 palavras",
        "c.txt - Erro ao processar.",
    ]

# --- Test 2: main() end to end ---

def test_main_with_argument(workdir, input_dir, capsys):
    with patch.object(sys, "argv", ["txtreport", str(input_dir)]):
        main()

    out = capsys.readouterr().out
    assert "2 arquivo(s) .txt encontrado(s):" in out
    assert "- a.txt" in out
    assert "Processamento concluído com sucesso!" in out
    assert f"Relatório gerado em: {report_of(workdir).resolve()}" in out
    assert report_of(workdir).exists()

def test_main_prompts_for_directory(workdir, input_dir, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda *args: f"  {input_dir}  ")

    with patch.object(sys, "argv", ["txtreport"]):
        main()

    assert "Informe o caminho" in capsys.readouterr().out
    assert report_of(workdir).exists()

@pytest.mark.parametrize("raw", ["", "   ", "does/not/exist", "~nosuchuser_txtreport/texts"])
def test_main_invalid_directory(workdir, monkeypatch, capsys, raw):
    monkeypatch.setattr("builtins.input", lambda *args: raw)

    with patch.object(sys, "argv", ["txtreport"]):
        with pytest.raises(SystemExit) as exc:
            main()

    assert exc.value.code == 1
    assert "Caminho inválido ou diretório não encontrado." in capsys.readouterr().err
    assert not (workdir / "export").exists()

def test_main_no_files_exits_cleanly(workdir, tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()

    with patch.object(sys, "argv", ["txtreport", str(empty)]):
        main()

    out = capsys.readouterr().out
    assert "Nenhum arquivo .txt" in out
    assert "Processamento concluído" not in out
    assert not (workdir / "export").exists()

def test_main_write_failure_is_reported(workdir, input_dir, capsys):
    # A plain file where the export directory should go
    (workdir / "export").write_text("blocker", encoding="utf-8")

    with patch.object(sys, "argv", ["txtreport", str(input_dir)]):
        with pytest.raises(SystemExit) as exc:
            main()

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Ocorreu um erro inesperado:" in captured.err
    assert "Traceback" not in captured.err

def test_main_cancelled_at_prompt(workdir, monkeypatch, capsys):
    def _interrupt(*args):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", _interrupt)

    with patch.object(sys, "argv", ["txtreport"]):
        with pytest.raises(SystemExit) as exc:
            main()

    assert exc.value.code == 1
    assert "Cancelado." in capsys.readouterr().out
