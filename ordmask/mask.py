"""
The OrdMask class: a subset of some totally ordered domain, kept as boundaries.

For example, the boundaries `[0, 2, 4]` with the leading state off mean that
`[0, 2)` and `[4, +inf)` are included, while `(-inf, 0)` and `[2, 4)` are not.
Turn the leading state on and every one of those answers flips.

Every way of building a mask, other than `with_unchecked(...)`, checks the
boundaries for order and collapses duplicates, so the encoding is canonical:
two masks are equal exactly when they include the same values.
"""

from . import boundaries, algebra
from .interfaces import OrderingViolation


class OrdMask:
	__slots__ = ('_boundaries', '_leading')

	def __init__(self, bounds=(), leading:bool=False):
		""" Same as `from_boundaries(...)`: raises OrderingViolation unless `bounds` is non-decreasing. """
		bounds = list(bounds)
		index = boundaries.first_descent_index(bounds)
		if index: raise OrderingViolation(index, bounds[index], bounds[index-1])
		self._boundaries = tuple(boundaries.simplified(bounds))
		self._leading = bool(leading)

	@classmethod
	def _trusted(cls, bounds, leading:bool):
		""" For boundaries already known to be ordered and simplified. A tuple passes through unchanged. """
		mask = cls.__new__(cls)
		mask._boundaries = tuple(bounds)
		mask._leading = bool(leading)
		return mask

	# Construction:

	@classmethod
	def empty(cls): return cls._trusted((), False)
	@classmethod
	def universal(cls): return cls._trusted((), True)
	@classmethod
	def not_less_than(cls, value): return cls._trusted((value,), False)
	@classmethod
	def less_than(cls, value): return cls._trusted((value,), True)

	@classmethod
	def in_range(cls, start, end):
		""" Includes exactly [start, end); empty unless start < end. """
		return cls._trusted((start, end), False) if start < end else cls.empty()

	@classmethod
	def exclude_range(cls, start, end):
		""" Excludes exactly [start, end); universal unless start < end. """
		return cls._trusted((start, end), True) if start < end else cls.universal()

	@classmethod
	def from_boundary_set(cls, points, is_included, include_leading:bool=False):
		"""
		Build a mask from candidate boundary points and a predicate.

		The points are where the mask may change state. `is_included(p)` tells
		whether the region starting at `p` is in the mask. For example, to include
		just [1, 4) among the integers, supply points 1 and 4 with `is_included(1)`
		true and `is_included(4)` false, and leave `include_leading` false. To include
		everything below 2, supply point 2 with `is_included(2)` false and set
		`include_leading`.

		Points may arrive in any order and with repeats; they are sorted first.
		"""
		return cls._trusted(boundaries.select(boundaries.key_points(sorted(points)), is_included, include_leading), include_leading)

	@classmethod
	def from_boundary_mapping(cls, mapping, include_leading:bool=False):
		""" As `from_boundary_set`, but with a point -> bool mapping standing in for the predicate. """
		return cls.from_boundary_set(mapping.keys(), mapping.__getitem__, include_leading)

	@classmethod
	def try_from_boundaries(cls, seq, leading:bool=False):
		"""
		Validate and simplify a boundary sequence.
		Answers either a mask or (without raising it) the OrderingViolation found.
		"""
		seq = list(seq)
		index = boundaries.first_descent_index(seq)
		if index: return OrderingViolation(index, seq[index], seq[index-1])
		return cls._trusted(boundaries.simplified(seq), leading)

	@classmethod
	def from_boundaries(cls, seq, leading:bool=False):
		""" Like `try_from_boundaries`, but raises the OrderingViolation. """
		result = cls.try_from_boundaries(seq, leading)
		if isinstance(result, OrderingViolation): raise result
		return result

	@classmethod
	def from_complement(cls, seq): return cls.from_boundaries(seq, True)

	@classmethod
	def with_unchecked(cls, seq, leading:bool=False):
		"""
		Trust the caller: no ordering check and no simplification.
		If `seq` is not non-decreasing, queries give wrong answers (but nothing worse).
		If it has duplicates, call `simplify()` before relying on equality.
		This is the only way to build a mask that is not simplified.
		"""
		return cls._trusted(seq, leading)

	# Queries:

	@property
	def boundaries(self) -> tuple: return self._boundaries
	@property
	def leading(self) -> bool: return self._leading

	def included(self, value) -> bool: return boundaries.in_mask(self._boundaries, self._leading, value)
	def excluded(self, value) -> bool: return not self.included(value)
	def __contains__(self, value): return self.included(value)

	def is_empty(self) -> bool: return not self._leading and not self._boundaries
	def is_universal(self) -> bool: return self._leading and not self._boundaries
	def is_valid(self) -> bool: return boundaries.first_descent_index(self._boundaries) == 0
	def is_simplified(self) -> bool: return boundaries.is_simplified(self._boundaries)
	def includes_domain_min(self) -> bool: return self._leading
	def includes_domain_max(self) -> bool: return self._leading != (len(self._boundaries) % 2 == 1)

	def expand(self, points):
		""" Given an ascending sequence of points, yield whether each is included. """
		return boundaries.expand(self._boundaries, self._leading, points)

	def intervals(self):
		""" Yield the included [start, stop) intervals; None marks an unbounded end. """
		return boundaries.intervals(self._boundaries, self._leading)

	def to_list(self) -> list: return list(self._boundaries)

	# Mutation:

	def simplify(self):
		""" Needed only after `with_unchecked(...)`: every other constructor does this already. """
		self._boundaries = tuple(boundaries.simplified(self._boundaries))

	def reverse(self):
		""" Complement, in place. """
		self._leading = not self._leading

	# Set algebra:

	@classmethod
	def union(cls, masks): return cls._trusted(*algebra.union(masks))
	@classmethod
	def intersection(cls, masks): return cls._trusted(*algebra.intersection(masks))
	@classmethod
	def combine(cls, op, masks): return cls._trusted(*algebra.combine(op, masks))

	def difference(self, others): return type(self)._trusted(*algebra.difference(self, others))
	def symmetric_difference(self, other): return type(self)._trusted(*algebra.symmetric_difference(self, other))
	def complement(self): return type(self)._trusted(*algebra.complement(self))
	def new_complement(self): return self.complement()

	def __or__(self, other): return self.union([self, other]) if isinstance(other, OrdMask) else NotImplemented
	def __and__(self, other): return self.intersection([self, other]) if isinstance(other, OrdMask) else NotImplemented
	def __xor__(self, other): return self.symmetric_difference(other) if isinstance(other, OrdMask) else NotImplemented
	def __sub__(self, other): return self.difference([other]) if isinstance(other, OrdMask) else NotImplemented
	def __invert__(self): return self.complement()

	# Value semantics:

	def __eq__(self, other):
		if not isinstance(other, OrdMask): return NotImplemented
		return self._leading == other._leading and self._boundaries == other._boundaries

	__hash__ = None # simplify() and reverse() mutate.

	def __repr__(self):
		if self._leading: return "%s(%r, leading=True)"%(type(self).__name__, list(self._boundaries))
		return "%s(%r)"%(type(self).__name__, list(self._boundaries))
