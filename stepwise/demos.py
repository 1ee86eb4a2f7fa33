"""
A few programs to run, since there is no parser to bring your own.
They all expect the preamble's root scope.
"""
from typing import Callable, NamedTuple
from .forms import app, lam, ref
from .syntax import Expr

def if_(condition, then_part, else_part) -> Expr:
	""" Selector booleans choose between two delayed branches, then we force the winner. """
	return app(condition, lam("_", then_part), lam("_", else_part), 0)

def fixpoint() -> Expr:
	""" The call-by-value fixed-point combinator: λf.(λx.f(λv.x x v))(λx.f(λv.x x v)) """
	half = lam("x", app(ref("f"), lam("v", app(ref("x"), ref("x"), ref("v")))))
	return lam("f", app(half, half))

def recursive(body:Expr) -> Expr:
	""" `body` should be a lambda whose first parameter, "self", stands for the function itself. """
	return app(fixpoint(), body)

def _is_zero(n): return app(ref("eq"), n, 0)
def _minus_one(n): return app(ref("sub"), n, 1)

def factorial(n:int) -> Expr:
	return app(recursive(lam("self", "n", if_(
		_is_zero(ref("n")),
		1,
		app(ref("mul"), ref("n"), app(ref("self"), _minus_one(ref("n")))),
	))), n)

def summation(n:int) -> Expr:
	""" 0 + 1 + ... + n, the hard way: every addition waits on the one after it. """
	return app(recursive(lam("self", "n", if_(
		_is_zero(ref("n")),
		0,
		app(ref("add"), ref("n"), app(ref("self"), _minus_one(ref("n")))),
	))), n)

def countdown(n:int) -> Expr:
	""" Nothing waits on the recursive call, so nothing piles up either. """
	return app(recursive(lam("self", "n", if_(
		_is_zero(ref("n")),
		"liftoff",
		app(ref("self"), _minus_one(ref("n"))),
	))), n)

def selector() -> Expr:
	"""
	lie 420 (tru 55 (λx. x lie)): the false selector picks its second argument,
	which in turn is the true selector picking 55.
	"""
	return app(
		app(ref("lie"), 420),
		app(app(ref("tru"), 55), lam("x", app(ref("x"), ref("lie")))),
	)

def omega() -> Expr:
	""" (λx. x x)(λx. x x) never finishes. Bring a step budget. """
	half = lam("x", app(ref("x"), ref("x")))
	return app(half, half)

class Demo(NamedTuple):
	blurb: str
	build: Callable[[], Expr]

DEMOS = {
	"selector": Demo("false-selector picks the second branch", selector),
	"constant": Demo("(λx.λy.y) 420 69", lambda: app(lam("x", "y", ref("y")), 420, 69)),
	"identity": Demo("(λx.x) 42", lambda: app(lam("x", ref("x")), 42)),
	"factorial": Demo("5! by way of the fixed-point combinator", lambda: factorial(5)),
	"countdown": Demo("a tail-recursive loop", lambda: countdown(10)),
	"twice": Demo("twice (add 3) 10", lambda: app(ref("twice"), app(ref("add"), 3), 10)),
	"greeting": Demo("say hello", lambda: app(ref("show"), app(ref("concat"), "Hello, ", "World!"))),
	"omega": Demo("runs until the step budget says stop", omega),
	"not-a-function": Demo("1 2", lambda: app(1, 2)),
	"undefined": Demo("a name nobody defined", lambda: ref("x")),
}
