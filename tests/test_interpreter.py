import logging

import pytest

from chispa import config
from chispa.interpreter import Interpreter
from chispa.types.primitive import Null, make_number


def test_state_persists_across_eval_calls(interp):
    interp.eval("def x = 1;")
    interp.eval("x = x + 1;")
    assert interp.eval("x") == make_number(2)


def test_empty_program_yields_null(interp):
    assert interp.eval("") is Null
    assert interp.eval(" ; ; ") is Null


def test_default_prelude_is_loaded():
    itp = Interpreter()
    assert itp.eval("identidad(4)") == make_number(4)
    assert itp.eval("no(0)").pintar() is True
    assert itp.eval("no([])").pintar() is False
    assert itp.eval("mapear([1, 2, 3], funcion (x){ retorna x * x; })").pintar() == [1, 4, 9]


def test_explicit_prelude_string():
    itp = Interpreter(prelude="def base = 40;")
    assert itp.eval("base + 2") == make_number(42)


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "b.chispa").write_text("def segundo = primero + 1;", encoding="utf-8")
    (tmp_path / "a.chispa").write_text("def primero = 1;", encoding="utf-8")
    (tmp_path / "ignorado.txt").write_text("esto no es chispa #", encoding="utf-8")
    monkeypatch.setenv("CHISPA_PRELUDE_PATH", str(tmp_path))
    itp = Interpreter()
    assert itp.eval("segundo") == make_number(2)


def test_missing_prelude_directory_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("CHISPA_PRELUDE_PATH", str(tmp_path / "no" / "existe"))
    itp = Interpreter()
    assert "identidad" not in itp.env


def test_max_depth_config(monkeypatch):
    monkeypatch.delenv("CHISPA_MAX_DEPTH", raising=False)
    assert config.get_max_depth() == 500
    monkeypatch.setenv("CHISPA_MAX_DEPTH", "25")
    assert config.get_max_depth() == 25
    monkeypatch.setenv("CHISPA_MAX_DEPTH", "muchos")
    assert config.get_max_depth() == 500
    monkeypatch.setenv("CHISPA_MAX_DEPTH", "-3")
    assert config.get_max_depth() == 500


def test_log_level_config(monkeypatch):
    monkeypatch.setenv("CHISPA_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("CHISPA_LOG_LEVEL", "ruido")
    assert config.get_log_level() == logging.WARNING


def test_debug_logging(monkeypatch, caplog):
    monkeypatch.setenv("CHISPA_LOG_LEVEL", "DEBUG")
    itp = Interpreter(prelude=None)
    with caplog.at_level(logging.DEBUG, logger="chispa"):
        itp.eval("funcion f(){ retorna 1; } f()")
    messages = [record.getMessage() for record in caplog.records]
    assert any("calling f" in m for m in messages)
    assert any("tokenized" in m for m in messages)


def test_logger_level_untouched_without_config(monkeypatch):
    monkeypatch.delenv("CHISPA_LOG_LEVEL", raising=False)
    package_logger = logging.getLogger("chispa")
    previous = package_logger.level
    package_logger.setLevel(logging.ERROR)
    try:
        Interpreter(prelude=None)
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)


def test_log_level_configured(monkeypatch):
    monkeypatch.delenv("CHISPA_LOG_LEVEL", raising=False)
    assert not config.log_level_configured()
    assert config.get_log_level() == logging.WARNING
    monkeypatch.setenv("CHISPA_LOG_LEVEL", "info")
    assert config.log_level_configured()


def test_prelude_mapear_over_long_list():
    itp = Interpreter()
    items = ", ".join(str(i) for i in range(150))
    result = itp.eval(f"mapear([{items}], funcion (x){{ retorna x * x; }})")
    assert result.pintar() == [i * i for i in range(150)]
