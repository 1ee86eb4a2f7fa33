"""
This runs the bundled demonstration programs for the stepwise evaluator.

For example:

    stepwise factorial --max-steps 5000

will step 5! to completion and say how many steps it took.

    stepwise --list

will list the demonstrations, and

    stepwise -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="stepwise",
	description="Run a demonstration program one small step at a time.",
)
parser.add_argument("demo", nargs="?", default="selector", help="which demonstration to run (default: selector)")
parser.add_argument('-n', "--max-steps", type=int, default=None, help="give up after this many steps.")
parser.add_argument('-d', "--direct", action="store_true", help="Use the recursive direct evaluator instead of stepping.")
parser.add_argument('-l', "--list", action="store_true", help="List the demonstrations and exit.")
parser.add_argument('-v', "--verbose", action="count", help="Say more. Twice traces every step.")

def run(args) -> int:
	from .demos import DEMOS
	from .diagnostics import Report
	from .values import show
	from . import executive, preamble
	if args.list:
		for name, demo in DEMOS.items():
			print("%-16s %s" % (name, demo.blurb))
		return 0
	try: demo = DEMOS[args.demo]
	except KeyError:
		print("There's no demo called %r. Try --list." % args.demo, file=sys.stderr)
		return 2
	report = Report(verbose=args.verbose)
	expr = demo.build()
	if args.direct:
		outcome = executive.run_direct(expr, preamble.direct_scope(), report)
		steps = None
	else:
		max_steps = executive.DEFAULT_MAX_STEPS if args.max_steps is None else args.max_steps
		outcome, steps = executive.run(expr, preamble.stepped_scope(), max_steps, report)
	if outcome.ok():
		print("Result:", show(outcome.value))
	else:
		print("Result:", "%s(%r)" % (type(outcome.error).__name__, str(outcome.error)))
	if steps is not None:
		print("Steps:", steps)
	return 0 if outcome.ok() else 1

def main():
	sys.exit(run(parser.parse_args()))
