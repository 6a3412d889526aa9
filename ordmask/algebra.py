"""
Logical combination of masks to produce a new one.

The state of a combination can only change where at least one input changes,
so the candidate boundaries are just the merged boundaries of all the inputs.
At each candidate the inputs are probed with `included(...)` AT the point
itself (not just before it) and some boolean function decides the outcome.
The leading state is that same function applied to the inputs' leading states,
because the leading state is nothing more than the inclusion of the region
below every boundary.

The functions here deal in anything with `.boundaries`, `.leading` and
`.included(...)`, and they answer with a `(boundaries, leading)` pair. The
`OrdMask` class wraps that pair up again.
"""
import operator
from . import boundaries

VERBOSE = False

def combine(op, masks) -> tuple:
	"""
	Arbitrary boolean combination of masks controlled by 'op :: tuple[bool, ...] -> bool'.
	"""
	masks = tuple(masks)
	points = list(boundaries.key_points(*(m.boundaries for m in masks)))
	leading = bool(op(tuple(m.leading for m in masks)))
	result = boundaries.select(points, lambda x: op(tuple(m.included(x) for m in masks)), leading)
	if VERBOSE: print("Combined %d masks: %d candidate points -> %d boundaries"%(len(masks), len(points), len(result)))
	return result, leading

def union(masks) -> tuple: return combine(any, masks)
def intersection(masks) -> tuple: return combine(all, masks)

def difference(mask, others) -> tuple:
	""" Included in `mask` and excluded from every one of the `others`. """
	return combine(lambda bits: bits[0] and not any(bits[1:]), (mask, *others))

def symmetric_difference(a, b) -> tuple:
	return combine(lambda bits: operator.xor(*bits), (a, b))

def complement(mask) -> tuple:
	# Inverting inclusion everywhere moves no boundary, so the tuple is shared.
	return mask.boundaries, not mask.leading
