"""
Simplest possible persistent environment concept.

This is the canonical list-structured search: each frame holds its own
bindings plus a static link to the enclosing frame, and lookup walks
outward until something answers. A frame is never altered once built.
Extending one makes a new frame (copying only the local bindings) that
shares the same static link, so any closure holding the old frame keeps
seeing exactly what it saw before.
"""
from typing import Any, Iterable
import abc
from .diagnostics import UndefinedName

class Environment(abc.ABC):
	@abc.abstractmethod
	def lookup(self, name:str) -> Any:
		pass
	
	@abc.abstractmethod
	def holds(self, name:str) -> bool:
		pass
	
	def __contains__(self, name:str) -> bool: return self.holds(name)
	
	def child(self) -> "InnerEnv":
		return InnerEnv({}, self)
	
	@staticmethod
	def fresh() -> "InnerEnv":
		return null_env.child()

class NullEnv(Environment):
	""" The bottom of every chain. It knows nothing and cannot learn. """
	def lookup(self, name:str) -> Any:
		raise UndefinedName(name)
	def holds(self, name:str) -> bool: return False
	def __repr__(self): return "<NullEnv>"

null_env = NullEnv()

class InnerEnv(Environment):
	def __init__(self, bindings:dict[str, Any], static_link:Environment):
		assert isinstance(static_link, Environment), static_link
		self._bindings = bindings
		self._static_link = static_link
	
	def lookup(self, name:str) -> Any:
		env = self
		while isinstance(env, InnerEnv):
			try: return env._bindings[name]
			except KeyError: env = env._static_link
		return env.lookup(name)
	
	def holds(self, name:str) -> bool:
		return name in self._bindings or self._static_link.holds(name)
	
	@property
	def static_link(self) -> Environment: return self._static_link
	
	def local_names(self) -> list[str]: return list(self._bindings)
	
	def bind(self, name:str, value:Any) -> "InnerEnv":
		return self.bind_many([(name, value)])
	
	def bind_many(self, pairs:Iterable[tuple[str, Any]]) -> "InnerEnv":
		bindings = self._bindings.copy()
		bindings.update(pairs)
		return InnerEnv(bindings, self._static_link)
	
	def __repr__(self):
		return "<Env %s -> %r>" % (sorted(self._bindings), self._static_link)
