import pytest

from morphosis.cli import main, parse_args
from morphosis.coords import hash_mean_matrix
from morphosis.quaternion import Quat
from morphosis.settings import ASK_ITER, ASK_SIZE, GRID, ErrorKind, MorphosisError


def _scripted(answers):
    asked = []
    queue = list(answers)

    def prompt(text):
        asked.append(text)
        return queue.pop(0)

    return prompt, asked


def test_no_arguments_is_an_error():
    with pytest.raises(MorphosisError) as info:
        parse_args([], lambda text: "")
    assert info.value.kind == ErrorKind.NO_ARG


def test_wrong_arguments_are_an_error():
    with pytest.raises(MorphosisError) as info:
        parse_args(["-x", "y"], lambda text: "")
    assert info.value.kind == ErrorKind.ARGS


def test_poem_mode_is_rejected():
    with pytest.raises(MorphosisError) as info:
        parse_args(["-p", "poem.txt"], lambda text: "")
    assert info.value.kind == ErrorKind.ARGS


def test_default_flag_gives_defaults():
    settings = parse_args(["-d"], lambda text: "")
    assert settings.step_size == 0.05
    assert settings.julia.c == Quat(-0.2, 0.8, 0.0, 0.0)
    assert settings.julia.max_iter == 6


def test_explicit_parameters():
    prompt, asked = _scripted(["10"])
    settings = parse_args(["0.1", "0.5", "-0.25", "0", "1e-1"], prompt)
    assert asked == [ASK_ITER]
    assert settings.step_size == 0.1
    assert settings.julia.c == Quat(0.5, -0.25, 0.0, 0.1)
    assert settings.julia.max_iter == 10


def test_out_of_range_step_is_asked_again():
    prompt, asked = _scripted(["0.2", "4"])
    settings = parse_args(["7", "0", "0", "0", "0"], prompt)
    assert asked[0] == GRID + ASK_SIZE
    assert settings.step_size == 0.2
    assert settings.julia.max_iter == 4


def test_matrix_file(tmp_path, capsys):
    path = tmp_path / "data.mat"
    line = ("000001" + " " * 6) * 6
    path.write_text("\n".join([line] * 36) + "\n")
    prompt, asked = _scripted(["0.1", "5"])
    settings = parse_args(["-m", str(path)], prompt)
    assert asked == [ASK_SIZE, ASK_ITER]
    assert settings.julia.c == hash_mean_matrix([[1] * 6] * 6)
    assert settings.step_size == 0.1
    assert settings.julia.max_iter == 5
    assert "Matrix processed" in capsys.readouterr().out


def test_missing_matrix_file(tmp_path):
    with pytest.raises(MorphosisError) as info:
        parse_args(["-m", str(tmp_path / "absent.mat")], lambda text: "")
    assert info.value.kind == ErrorKind.OPEN_FILE


def test_main_with_defaults(capsys):
    assert main(["-d"]) == 0
    assert "Max Iterations: 6" in capsys.readouterr().out


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "USAGE" in capsys.readouterr().out