"""
It's nonsense to work with uncompressed subsets of a big ordered domain.

I've chosen to define the mask data structure as a sorted list of boundaries
together with one flag telling whether the region below the first boundary is
included. Thus: a value is a member of the mask exactly when the count of
boundaries less-than-or-equal-to that value is odd, XOR the leading flag.
(See the `in_mask(...)` function.)

Nothing here needs more from the element type than `<` and `==`, so these work
as well for version tuples or timestamps as they do for integers.

The functions in this module operate on plain sequences. The `OrdMask` class
wraps them up with a validity guarantee; the set-algebra layer uses the
key-point and selection functions to rebuild boundaries after combination.
"""
import bisect, heapq

# How to tell if a value is a member of the mask:
def in_mask(bounds, leading:bool, value) -> bool: return leading != (bisect.bisect_right(bounds, value) % 2 == 1)

def first_descent_index(seq) -> int:
	"""
	Return the index of the first element which is less than its predecessor.
	Zero means the sequence is non-decreasing, since index zero has no predecessor to fall below.
	"""
	for i in range(1, len(seq)):
		if seq[i] < seq[i-1]: return i
	return 0

def is_simplified(seq) -> bool:
	return all(seq[i] != seq[i-1] for i in range(1, len(seq)))

def simplified(seq) -> list:
	"""
	Collapse each run of equal adjacent boundaries by parity: an odd-length run
	leaves one copy, an even-length run flips the state back and vanishes.
	The input must be non-decreasing.
	"""
	result = []
	i, size = 0, len(seq)
	while i < size:
		start = i
		while i < size and seq[i] == seq[start]: i += 1
		if (i - start) % 2: result.append(seq[start])
	return result

def key_points(*seqs):
	"""
	Merge some sorted boundary sequences into one ascending stream of distinct points.
	Only comparison is needed, so the points need not be hashable.
	"""
	previous = None
	for i, point in enumerate(heapq.merge(*seqs)):
		if i and point == previous: continue
		previous = point
		yield point

def select(points, is_included, leading:bool) -> list:
	"""
	Given candidate boundary points in ascending order and a predicate telling
	whether each point is included (starting at itself), choose exactly those
	points where the predicate disagrees with the state accumulated so far.
	The result is simplified by construction.
	"""
	result = []
	for p in points:
		if (bool(is_included(p)) == (len(result) % 2 == 0)) != leading:
			result.append(p)
	return result

def expand(bounds, leading:bool, points):
	""" Given a mask and a sorted sequence of points, yield a stream of booleans indicating whether each point is in the mask. """
	# Calling 'in_mask(...)' in a loop would be O(N*log(M)); this is O(N+M).
	idx = 0
	for x in points:
		while idx < len(bounds) and x >= bounds[idx]: idx += 1
		yield leading != (idx % 2 == 1)

def intervals(bounds, leading:bool):
	"""
	Yield the included half-open intervals as (start, stop) pairs.
	None stands in for an unbounded end.
	"""
	edges = [None, *bounds] if leading else list(bounds)
	if len(edges) % 2: edges.append(None)
	for i in range(0, len(edges), 2):
		yield edges[i], edges[i+1]
