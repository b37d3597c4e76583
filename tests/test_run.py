import json

from teamfit.run import main


class TestCommands:

    def test_rank(self, sample_pool_path, capsys):
        assert main(["rank", "--data", sample_pool_path, "--project", "p1"]) == 0
        out = capsys.readouterr().out
        assert "total_score" in out
        assert "alice" in out
        assert "ghost" not in out

    def test_rank_with_members(self, sample_pool_path, capsys):
        assert main(["rank", "--data", sample_pool_path, "--project", "p1", "--members", "bob"]) == 0
        assert "carol" in capsys.readouterr().out

    def test_suggest(self, sample_pool_path, capsys):
        assert main(["suggest", "--data", sample_pool_path, "--project", "p1", "--team-size", "2"]) == 0
        assert "avg_score" in capsys.readouterr().out

    def test_pair(self, sample_pool_path, capsys):
        assert main(["pair", "--data", sample_pool_path, "alice", "bob"]) == 0
        out = capsys.readouterr().out
        assert "quiz" in out
        assert "final_score" in out

    def test_diagnose_writes_report(self, sample_pool_path, tmp_path, capsys):
        output = tmp_path / "report.json"
        assert main(["diagnose", "--data", sample_pool_path, "--output", str(output)]) == 0
        assert "Symmetry Check" in capsys.readouterr().out
        assert json.loads(output.read_text())["symmetry_check"]["n_asymmetric"] == 0

    def test_with_config(self, sample_pool_path, config_path):
        assert main(["--config", config_path, "rank", "--data", sample_pool_path, "--project", "p2"]) == 0


class TestFailures:

    def test_unknown_project(self, sample_pool_path):
        assert main(["rank", "--data", sample_pool_path, "--project", "p9"]) == 1

    def test_unknown_freelancer(self, sample_pool_path):
        assert main(["pair", "--data", sample_pool_path, "alice", "nobody"]) == 1

    def test_missing_data_file(self, tmp_path):
        assert main(["diagnose", "--data", str(tmp_path / "missing.json")]) == 1
