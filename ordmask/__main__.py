"""
Combine some masks given as boundary lists, and show what comes out.

Write each mask as comma-separated boundaries, like 0,10,20. Start it with an
underscore (like _,0,10) to include the region below the first boundary.
Boundaries are read as integers if possible, then floats, else plain strings.
"""

import sys, re, argparse

from ordmask import algebra, pretty
from ordmask.mask import OrdMask
from ordmask.interfaces import OrderingViolation

OPERATIONS = {
	'union': lambda masks: OrdMask.union(masks),
	'intersection': lambda masks: OrdMask.intersection(masks),
	'difference': lambda masks: masks[0].difference(masks[1:]),
	'symmetric-difference': lambda masks: masks[0].symmetric_difference(masks[1]),
	'complement': lambda masks: masks[0].complement(),
	'simplify': lambda masks: masks[0],
}
ARITY = {'symmetric-difference': 2, 'complement': 1, 'simplify': 1}

def parse_value(text:str):
	for kind in (int, float):
		try: return kind(text)
		except ValueError: pass
	return text

def parse_mask(text:str) -> OrdMask:
	""" Raises OrderingViolation for boundaries out of order. """
	items = [t.strip() for t in text.split(',') if t.strip()]
	leading = bool(items) and items[0] == '_'
	if leading: del items[0]
	return OrdMask.from_boundaries(map(parse_value, items), leading)

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m ordmask', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	# A mask like -10,30 is not an option, even though it starts with a dash.
	parser._negative_number_matcher = re.compile(r'^-\.?\d')
	parser.add_argument('operation', choices=sorted(OPERATIONS), help='what to do with the masks')
	parser.add_argument('masks', nargs='+', metavar='mask', help='boundaries, comma-separated')
	parser.add_argument('-p', '--probe', nargs='+', metavar='value', default=[], help='show whether the result includes these values')
	parser.add_argument('-g', '--grid', action='store_true', help='display the included intervals in grid format')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk, mainly about how many candidate boundaries were considered.")
	args = parser.parse_args(argv)
	arity = ARITY.get(args.operation)
	if arity is not None and len(args.masks) != arity:
		parser.error('%s takes exactly %d mask(s)'%(args.operation, arity))
	return args

def main(args):
	if args.verbose: algebra.VERBOSE = True
	try:
		masks = [parse_mask(text) for text in args.masks]
		result = OPERATIONS[args.operation](masks)
		probes = [(p, result.included(p)) for p in map(parse_value, args.probe)]
	except (OrderingViolation, TypeError) as e:
		# TypeError means the boundaries or probes mix types which don't compare.
		print(e, file=sys.stderr)
		sys.exit(1)
	else:
		print(repr(result))
		if args.grid: pretty.print_intervals(result)
		if probes: pretty.print_probes(probes)

if __name__ == '__main__': main(parse_arguments())
