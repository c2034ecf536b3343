import pytest

from chispa import errors
from chispa.types.primitive import make_number


def test_counter_keeps_private_state(interp):
    interp.eval(
        """
        funcion contador(){
          def n = 0;
          funcion inc(){
            n = n + 1;
            retorna n;
          }
          retorna inc;
        }
        def a = contador();
        def b = contador();
        """
    )
    assert interp.eval("a(); a(); a()") == make_number(3)
    assert interp.eval("b()") == make_number(1)


def test_closure_sees_later_assignments_in_its_scope(run):
    program = """
    def x = 1;
    funcion leer(){ retorna x; }
    x = 2;
    leer()
    """
    assert run(program) == 2


def test_closure_does_not_see_sibling_scope_bindings(interp):
    interp.eval(
        """
        funcion crear(){
          funcion leer(){ retorna y; }
          retorna leer;
        }
        def lector = crear();
        """
    )
    with pytest.raises(errors.UndeclaredVariableError):
        interp.eval("si (1) { def y = 5; lector(); }")


def test_scoping_is_lexical_not_dynamic(run):
    program = """
    def v = 1;
    funcion mostrar(){ retorna v; }
    funcion llamar(){
      def v = 99;
      retorna mostrar();
    }
    llamar()
    """
    assert run(program) == 1


def test_parameters_shadow_outer_names(run):
    program = """
    def a = 1;
    funcion f(a){ a = a + 10; retorna a; }
    [f(5), a]
    """
    assert run(program) == [15, 1]


def test_each_call_gets_a_fresh_scope(run):
    program = """
    funcion f(x){
      def local = x;
      retorna local;
    }
    [f(1), f(2)]
    """
    assert run(program) == [1, 2]


def test_higher_order_functions(run):
    program = """
    funcion sumador(n){
      retorna funcion (x){ retorna x + n; };
    }
    def mas5 = sumador(5);
    funcion aplicar(f, v){ retorna f(v); }
    aplicar(mas5, 10)
    """
    assert run(program) == 15


def test_methods_stored_on_objects_close_over_definition_scope(run):
    program = """
    funcion crearPunto(x, y){
      retorna {
        x: x,
        y: y,
        suma: funcion (){ retorna x + y; }
      };
    }
    def p = crearPunto(3, 4);
    p.suma()
    """
    assert run(program) == 7
