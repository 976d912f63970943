import logging
import random

import pytest

from guessing_game import Configuration, Console, main


def run_main(argv, lines, output):
    with pytest.raises(SystemExit) as exc:
        main(argv, Console.scripted(lines, output.append))
    return exc.value.code


def test_quit_exits_cleanly(output):
    assert run_main(["--no-banner"], ["quit"], output) == 0
    assert output[-1] == "Goodbye!"
    assert "Welcome to the guessing game." not in output


def test_seed_makes_secret_reproducible(output):
    secret = random.Random(42).randint(1, 100)

    assert run_main(["--seed", "42"], ["100", str(secret), "n"], output) == 0
    assert "You win!" in output
    assert "Too small." not in output
    assert "Too big." not in output


def test_closed_stdin_is_fatal(output, capsys, caplog):
    assert run_main([], ["10"], output) == 1

    err = capsys.readouterr().err
    assert "Failed to read line." in err
    assert "Traceback" not in err
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_keyboard_interrupt_says_goodbye(output):
    def reader():
        raise KeyboardInterrupt

    with pytest.raises(SystemExit) as exc:
        main(["--no-banner"], Console(reader, output.append))

    assert exc.value.code == 0
    assert output[-1] == "Goodbye!"


def test_negative_seed_accepted(output):
    secret = random.Random(-1).randint(1, 50)

    assert run_main(["--seed", "-1"], ["50", str(secret), "n"], output) == 0
    assert "You win!" in output


def test_log_level_reaches_logging(output, monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))

    assert run_main(["--log-level", "DEBUG", "--no-banner"], ["quit"], output) == 0
    assert seen["level"] == logging.DEBUG


def test_unknown_log_level_rejected(output):
    assert run_main(["--log-level", "LOUD"], ["quit"], output) == 2


def test_configuration_validate():
    assert Configuration().validate() == []
    assert Configuration(seed=-3).validate() == []
    errors = Configuration(log_level="LOUD").validate()
    assert len(errors) == 1
