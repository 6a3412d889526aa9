"""
This file aggregates the exception types which ordmask deals in.

There is exactly one way to go wrong while building a mask: hand over a list of
boundaries that is not in non-decreasing order. Everything past construction is
a total function over well-formed masks, so the set-algebra layer has nothing
of its own to complain about. If the element type refuses to be compared, the
resulting TypeError is not ours to re-label, and it propagates unchanged.
"""

class MaskError(ValueError):
	""" Base class of all exceptions arising from the mask machinery. """

class OrderingViolation(MaskError):
	"""
	Raised (or returned, from `OrdMask.try_from_boundaries`) when a boundary
	sequence descends somewhere. Parameters are:
		the index of the first element smaller than its predecessor;
		that element;
		the predecessor.
	"""
	def __init__(self, index:int, value, predecessor):
		super().__init__(index, value, predecessor)
		self.index, self.value, self.predecessor = index, value, predecessor

	def __str__(self):
		return (
			"Can't build a mask from these boundaries because they should be non-decreasing. "
			"The value at index %d (%r) is less than the value at index %d (%r)."
		)%(self.index, self.value, self.index-1, self.predecessor)
