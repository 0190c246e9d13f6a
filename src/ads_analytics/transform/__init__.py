"""Value normalization utilities.

Provides the parser that turns heterogeneous cell values (numbers, locale
formatted strings) into floats, and the formatters that render floats back
into scale-abbreviated display strings.
"""
