"""Character classes shared by the word merger and the real parser.

Both follow the C locale so that a token the merger drops as whitespace
is also whitespace to the parser.
"""

# C isspace() in the "C" locale
C_WHITESPACE = " \t\n\v\f\r"
