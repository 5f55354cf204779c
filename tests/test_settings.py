import pytest

from morphosis.quaternion import Quat
from morphosis.settings import (
    ASK_SIZE,
    GRID,
    SMALL_S_SIZE,
    ErrorKind,
    FractalSettings,
    MorphosisError,
    check_step_size,
    error_message,
)


def _never(prompt):
    raise AssertionError(f"unexpected prompt: {prompt!r}")


def test_error_message_args_includes_usage():
    text = error_message(ErrorKind.ARGS)
    assert text.startswith("\nERROR: Invalid program arguments\n")
    assert "./morphosis -d" in text


def test_error_message_no_arg_includes_usage():
    text = error_message(ErrorKind.NO_ARG)
    assert "press ESC to exit or S to save" in text
    assert "USAGE" in text


def test_error_message_bad_file():
    assert error_message(ErrorKind.BAD_FILE) == "\nERROR: Invalid data in the file\n\n"


def test_error_message_accepts_plain_int():
    assert error_message(2) == error_message(ErrorKind.OPEN_FILE)


def test_morphosis_error_carries_kind_and_message():
    err = MorphosisError(ErrorKind.OPEN_FILE)
    assert err.kind is ErrorKind.OPEN_FILE
    assert "Could not open the file" in str(err)
    assert err.exit_code == 1


def test_valid_step_size_passes_without_prompt():
    assert check_step_size(0.1, _never, _never) == 0.1


def test_out_of_range_step_size_asks_again():
    prompts = []

    def ask_size(prompt):
        prompts.append(prompt)
        return 0.25

    assert check_step_size(0.9, ask_size, _never) == 0.25
    assert prompts == [GRID + ASK_SIZE]


def test_too_small_step_size_asks_again():
    answers = iter([0.0, 0.3])
    assert check_step_size(0.0, lambda p: next(answers), _never) == 0.3


def test_small_step_size_proceed():
    prompts = []

    def ask_choice(prompt):
        prompts.append(prompt)
        return 0

    assert check_step_size(0.01, _never, ask_choice) == 0.01
    assert prompts == [SMALL_S_SIZE]


def test_small_step_size_enter_new_value():
    assert check_step_size(0.01, lambda p: 0.2, lambda p: 1) == 0.2


def test_small_step_size_unknown_choice_asks_again():
    choices = iter([7, 0])
    assert check_step_size(0.01, _never, lambda p: next(choices)) == 0.01


def test_small_step_size_exit():
    with pytest.raises(SystemExit) as info:
        check_step_size(0.01, _never, lambda p: 2)
    assert info.value.code == 0


def test_fractal_settings_defaults():
    settings = FractalSettings()
    assert settings.p0 == (-1.5, -1.5, -1.5)
    assert settings.p1 == (1.5, 1.5, 1.5)
    assert settings.step_size == 0.05
    assert settings.julia.max_iter == 6
    assert settings.julia.c == Quat(-0.2, 0.8, 0.0, 0.0)
    assert settings.supersampling == 1
    assert settings.max_grid_depth == 3


def test_fractal_settings_julia_not_shared():
    a = FractalSettings()
    b = FractalSettings()
    a.julia.max_iter = 20
    assert b.julia.max_iter == 6