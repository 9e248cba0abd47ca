from dashrunner.score_timer import ScoreTimer


def test_no_points_until_started(tmp_path):
    timer = ScoreTimer(tmp_path / "Scores")
    for _ in range(10):
        timer.update(1.0)
    assert timer.score == 0


def test_point_after_timer_runs_out(tmp_path):
    timer = ScoreTimer(tmp_path / "Scores")
    timer.start()
    timer.update(1.0)
    assert timer.score == 0
    timer.update(0.1)
    assert timer.score == 1


def test_stop_freezes_score(tmp_path):
    timer = ScoreTimer(tmp_path / "Scores")
    timer.start()
    timer.update(1.0)
    timer.update(0.1)
    timer.stop()
    for _ in range(5):
        timer.update(1.0)
    assert timer.score == 1


def test_save_sorts_best_first(tmp_path):
    timer = ScoreTimer(tmp_path / "Scores")
    assert timer.save_to_file("bob", 5)
    assert timer.save_to_file("al", 9)
    assert timer.scores_file.read_text() == "al 9\nbob 5\n"


def test_save_rejects_bad_name(tmp_path):
    timer = ScoreTimer(tmp_path / "Scores")
    assert not timer.save_to_file("toolongname", 3)
    assert not timer.save_to_file("a1", 3)
    assert timer.scores == []


def test_load_then_save_keeps_old_scores(tmp_path):
    scores_dir = tmp_path / "Scores"
    scores_dir.mkdir()
    (scores_dir / "Scores.txt").write_text("zed 4\namy 12\n")
    timer = ScoreTimer(scores_dir)
    assert timer.load_from_file()
    assert timer.scores == [("zed", 4), ("amy", 12)]
    assert timer.save_to_file("kim", 7)
    assert timer.scores_file.read_text() == "amy 12\nkim 7\nzed 4\n"


def test_load_malformed_deletes_file(tmp_path):
    scores_dir = tmp_path / "Scores"
    scores_dir.mkdir()
    (scores_dir / "Scores.txt").write_text("ok 1\nnot valid line\n")
    timer = ScoreTimer(scores_dir)
    assert timer.load_from_file() is False
    assert not (scores_dir / "Scores.txt").exists()


def test_load_missing_file_creates_directory(tmp_path):
    scores_dir = tmp_path / "Scores"
    timer = ScoreTimer(scores_dir)
    assert timer.load_from_file() is False
    assert scores_dir.is_dir()


def test_load_empty_file(tmp_path):
    scores_dir = tmp_path / "Scores"
    scores_dir.mkdir()
    (scores_dir / "Scores.txt").write_text("")
    timer = ScoreTimer(scores_dir)
    assert timer.load_from_file() is True
    assert timer.scores == []