"""
Drivers: the things that actually push an evaluation to its end.

The stepper never loops on its own, so any limit on how long a program
may run is imposed here, by counting calls to `step`. Running out of
steps is reported as a `Misc` error, the same as any other failure.
"""
from collections import deque
from typing import NamedTuple, Sequence
from . import syntax, direct_evaluator
from .diagnostics import EvalError, Misc, Report, QUIET
from .environment import Environment
from .stepper import Stepper, Outcome

DEFAULT_MAX_STEPS = 1000

TOO_MANY_STEPS = "Too many steps!"
TOO_DEEP = "Too deep for the direct evaluator!"

class Run(NamedTuple):
	outcome: Outcome
	steps: int

def run(expr:syntax.Expr, env:Environment, max_steps:int=DEFAULT_MAX_STEPS, report:Report=QUIET) -> Run:
	""" Step the expression to completion, or until `max_steps` calls have not sufficed. """
	stepper = Stepper(expr, env)
	report.info("Evaluating", expr)
	steps = 0
	while steps < max_steps:
		steps += 1
		report.trace_step(steps, stepper.peek())
		outcome = stepper.step()
		if outcome is not None:
			report.info("Finished after", steps, "steps")
			return Run(outcome, steps)
	report.info("Gave up after", steps, "steps with", stepper.pending(), "continuations pending")
	return Run(Outcome(error=Misc(TOO_MANY_STEPS)), steps)

def run_direct(expr:syntax.Expr, env:Environment, report:Report=QUIET) -> Outcome:
	""" The reference strategy, with its errors captured the same way the stepper would. """
	report.info("Evaluating directly", expr)
	try: return Outcome(value=direct_evaluator.evaluate(expr, env))
	except EvalError as ex: return Outcome(error=ex)
	except RecursionError: return Outcome(error=Misc(TOO_DEEP))

def interleave(jobs:Sequence[tuple[syntax.Expr, Environment]], budget:int=DEFAULT_MAX_STEPS, report:Report=QUIET) -> list[Run]:
	"""
	Take turns: one step for each unfinished job, round and round,
	until every job has an outcome. Any job which uses up its budget
	fails with the same error `run` would give it.
	Results come back in the same order as the jobs went in.
	"""
	results = [None] * len(jobs)
	counts = [0] * len(jobs)
	queue = deque((i, Stepper(expr, env)) for i, (expr, env) in enumerate(jobs))
	while queue:
		i, stepper = queue.popleft()
		if counts[i] == budget:
			report.info("Job", i, "ran out of steps")
			results[i] = Run(Outcome(error=Misc(TOO_MANY_STEPS)), counts[i])
			continue
		counts[i] += 1
		outcome = stepper.step()
		if outcome is None: queue.append((i, stepper))
		else:
			report.info("Job", i, "finished after", counts[i], "steps")
			results[i] = Run(outcome, counts[i])
	return results
