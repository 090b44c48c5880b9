import pytest
from pyq import extract
from pyq.config import Config

@pytest.fixture
def papers_dir(tmp_path):
    folder = tmp_path / "exam papers"
    folder.mkdir()
    for name in ["JEE_Main_2024_Jan_27_Shift1.pdf", "JEE_Main_2007.pdf", "notes.txt"]:
        (folder / name).write_bytes(b"%PDF-1.4")
    return folder

@pytest.fixture
def captured_runs(monkeypatch):
    runs = []

    def fake_run(filenames, input_dir, output_dir, delay):
        runs.append({"filenames": filenames, "input_dir": input_dir,
                     "output_dir": output_dir, "delay": delay})
        return {}

    monkeypatch.setattr(extract, "run_extraction", fake_run)
    monkeypatch.setattr(Config, "GEMINI_API_KEY", "test-key")
    return runs

def _args(papers_dir, tmp_path, *extra):
    return ["--input-dir", str(papers_dir), "--output-dir", str(tmp_path / "out"), *extra]

def test_missing_api_key_exits_1(monkeypatch, papers_dir, tmp_path, captured_runs):
    monkeypatch.setattr(Config, "GEMINI_API_KEY", None)
    assert extract.main(_args(papers_dir, tmp_path, "--all")) == 1
    assert captured_runs == []

def test_all_processes_every_pdf(papers_dir, tmp_path, captured_runs):
    assert extract.main(_args(papers_dir, tmp_path, "--all", "--delay", "0")) == 0
    assert captured_runs[0]["filenames"] == ["JEE_Main_2007.pdf", "JEE_Main_2024_Jan_27_Shift1.pdf"]
    assert captured_runs[0]["delay"] == 0.0

def test_single_file(papers_dir, tmp_path, captured_runs):
    assert extract.main(_args(papers_dir, tmp_path, "--file", "JEE_Main_2007.pdf")) == 0
    assert captured_runs[0]["filenames"] == ["JEE_Main_2007.pdf"]

def test_unknown_file_exits_1(papers_dir, tmp_path, captured_runs, capsys):
    assert extract.main(_args(papers_dir, tmp_path, "--file", "missing.pdf")) == 1
    err = capsys.readouterr().err
    assert "File not found: missing.pdf" in err
    assert "JEE_Main_2007.pdf" in err
    assert captured_runs == []

def test_no_arguments_processes_first_file(papers_dir, tmp_path, captured_runs):
    assert extract.main(_args(papers_dir, tmp_path)) == 0
    assert captured_runs[0]["filenames"] == ["JEE_Main_2007.pdf"]

def test_empty_folder_exits_1(tmp_path, captured_runs):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert extract.main(_args(empty, tmp_path, "--all")) == 1

def test_missing_folder_exits_1(tmp_path, captured_runs):
    assert extract.main(_args(tmp_path / "nope", tmp_path, "--all")) == 1

def test_all_wins_over_file(papers_dir, tmp_path, captured_runs):
    assert extract.main(_args(papers_dir, tmp_path, "--all", "--file", "JEE_Main_2007.pdf")) == 0
    assert captured_runs[0]["filenames"] == ["JEE_Main_2007.pdf", "JEE_Main_2024_Jan_27_Shift1.pdf"]
