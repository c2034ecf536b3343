import pytest

from chispa import errors
from chispa.builtin.env_builtin import define_globals, register
from chispa.types.complex import FunctionVal
from chispa.types.environment import Environment
from chispa.types.primitive import FALSE, Null, TRUE, make_number


def test_register_declares_defaults(env):
    assert env.lookup_var("verdadero") is TRUE
    assert env.lookup_var("falso") is FALSE
    assert env.lookup_var("nulo") is Null
    for name in ("pintar", "tipoDe", "longitud", "aCadena"):
        fn = env.lookup_var(name)
        assert isinstance(fn, FunctionVal) and fn.native is not None
        assert fn.name == name
    assert env.globals[:4] == ["pintar", "tipoDe", "longitud", "aCadena"]


def test_constants_are_protected(interp):
    with pytest.raises(errors.ConstAssignmentError):
        interp.eval("verdadero = 0")
    with pytest.raises(errors.RedeclarationError):
        interp.eval("def nulo = 1;")


def test_builtin_variables_can_be_reassigned(interp):
    interp.eval("pintar = 1")
    assert interp.eval("pintar") == make_number(1)


def test_define_globals_variables_then_constants():
    env = Environment()
    define_globals(env, [("v", make_number(1))], [("c", make_number(2))])
    assert env.globals == ["v", "c"]
    assert not env.is_constant("v")
    assert env.is_constant("c")


def test_define_globals_rejects_duplicates():
    env = Environment()
    register(env)
    with pytest.raises(errors.RedeclarationError):
        define_globals(env, constants=[("falso", TRUE)])


def test_pintar_prints_display_text(run, capsys):
    result = run("pintar(1, [1, 2], { a: verdadero }, nulo)")
    assert capsys.readouterr().out == "1 [1, 2] { a: verdadero } nulo\n"
    assert result is None


def test_pintar_function_tag(run, capsys):
    run("funcion f(){} pintar(f)")
    assert capsys.readouterr().out == "[Funcion: f]\n"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("tipoDe(1)", "numero"),
        ("tipoDe(verdadero)", "booleano"),
        ("tipoDe(nulo)", "nulo"),
        ("tipoDe([])", "lista"),
        ("tipoDe({})", "objeto"),
        ("tipoDe(tipoDe)", "funcion"),
        ("tipoDe(aCadena(1))", "cadena"),
        ("longitud([1, 2, 3])", 3),
        ("longitud({ a: 1, b: 2 })", 2),
        ("longitud(aCadena(12345))", 5),
        ("aCadena([1, { b: 2 }])", "[1, { b: 2 }]"),
        ("aCadena(1) + 2", "12"),
    ]
)
def test_builtin_functions(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["longitud(1)", "longitud()"])
def test_longitud_type_errors(interp, source):
    with pytest.raises(errors.ChispaTypeError):
        interp.eval(source)
