"""
A little vocabulary for writing expression trees by hand,
since there is no surface syntax to parse them from.

    app(lam("x", lam("y", ref("y"))), 420, 69)

means the same as

    Call(Call(Lam("x", Lam("y", Name("y"))), Put(420)), Put(69))

Anything that is not already an expression gets embedded as a literal.
A plain string therefore means a string literal; use `ref` for a name.
"""
from .syntax import Expr, Put, Name, Call, Lam

def form(it) -> Expr:
	if isinstance(it, Expr): return it
	if isinstance(it, list): it = tuple(it)
	return Put(it)

def ref(name:str) -> Name: return Name(name)

def lam(*params_then_body) -> Lam:
	""" lam("x", "y", body) is shorthand for lam("x", lam("y", body)) """
	*params, body = params_then_body
	assert params, "A lambda needs a parameter."
	body = form(body)
	for p in reversed(params): body = Lam(p, body)
	return body

def app(fn, *args) -> Expr:
	""" Curried application, associating to the left. """
	assert args, "An application needs an argument."
	it = form(fn)
	for a in args: it = Call(it, form(a))
	return it
