from minishell.cli import main


def test_main_refuses_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().out == "Minishell doesn't get arguments.\n"


def test_main_runs_sample_command(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "infile.txt").write_bytes(b"through the shell\n")
    assert main([]) == 0
    assert (tmp_path / "test.txt").read_bytes() == b"through the shell\n"


def test_main_missing_infile_still_succeeds(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert "infile.txt" in capsys.readouterr().err
    assert not (tmp_path / "test.txt").exists()