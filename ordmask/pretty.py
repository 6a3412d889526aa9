""" Bits and bobs in support of visualizing masks. """

INFINITY = '∞'
CHECK, CROSS = '✓', '✕'

def print_table(header, rows):
	"""
	Right-justified columns in a box, with a rule under the header.
	Every row must be as wide as the header.
	"""
	table = [[str(cell) for cell in row] for row in (header, *rows)]
	assert all(len(row) == len(header) for row in table), table
	width = [max(map(len, column)) for column in zip(*table)]
	rules = ['─'*w for w in width]
	print('─┬─'.join(rules))
	print(' │ '.join(s.rjust(w) for s, w in zip(table[0], width)))
	if rows: print('─┼─'.join(rules))
	for row in table[1:]: print(' │ '.join(s.rjust(w) for s, w in zip(row, width)))
	print('─┴─'.join(rules))

def interval_text(start, stop) -> str:
	left = '(-'+INFINITY if start is None else '[%r'%(start,)
	right = '+'+INFINITY+')' if stop is None else '%r)'%(stop,)
	return left+', '+right

def print_intervals(mask):
	""" One row per included interval. An empty mask prints a header and nothing else. """
	print_table(('included',), [(interval_text(*pair),) for pair in mask.intervals()])

def print_probes(probes):
	""" Given (value, included) pairs, show values across the top and a mark beneath each. """
	print_table(('-', *(p for p, _ in probes)), [('', *(CHECK if hit else CROSS for _, hit in probes))])
