"""
Direct evaluation strategy. A dead simple recursive tree walker.

Just call `evaluate` with an expression and an environment, and before
you know it you get the result. It leans on the Python call stack for
all its bookkeeping, so a deep enough program will exhaust the recursion
limit. That is fine: this exists as the reference for what the stepped
evaluator must agree with, not as the thing to run big programs on.
"""
from typing import Any, Callable
from boozetools.support.foundation import Visitor
from . import syntax
from .diagnostics import TypeMismatch
from .environment import Environment
from .values import Builtin, Closure, VALUE, describe

def primitive(name:str, fn:Callable[[Any], VALUE]) -> Builtin:
	""" For this strategy, a built-in is just the function itself. """
	return Builtin(name, fn)

class DirectEvaluator(Visitor):
	
	@staticmethod
	def visit_Put(expr:syntax.Put, env:Environment) -> VALUE:
		return expr.value
	
	@staticmethod
	def visit_Name(expr:syntax.Name, env:Environment) -> VALUE:
		return env.lookup(expr.id)
	
	def visit_Call(self, expr:syntax.Call, env:Environment) -> VALUE:
		fn = self.visit(expr.func, env)
		arg = self.visit(expr.arg, env)
		return self.apply(fn, arg)
	
	@staticmethod
	def visit_Lam(expr:syntax.Lam, env:Environment) -> VALUE:
		return Closure(expr.argname, expr.body, env.child())
	
	def apply(self, fn:VALUE, arg:VALUE) -> VALUE:
		if isinstance(fn, Builtin):
			return fn.fn(arg)
		if isinstance(fn, Closure):
			return self.visit(fn.body, fn.env.child().bind(fn.argname, arg))
		raise TypeMismatch("Cannot call %s" % describe(fn))

_EVALUATOR = DirectEvaluator()

def evaluate(expr:syntax.Expr, env:Environment) -> VALUE:
	return _EVALUATOR.visit(expr, env)

def apply(fn:VALUE, arg:VALUE) -> VALUE:
	return _EVALUATOR.apply(fn, arg)
