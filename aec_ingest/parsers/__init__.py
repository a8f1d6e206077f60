"""
Parsers sub-package for aec-ingest.

Turns the text of an AEC results download into row mappings that the
field decoder can consume.  Each stage lives in its own module so it can
be tested in isolation:

- tokenizer.py: split one line into trimmed fields (toggle-quote rule).
- header.py: pick the header line and build the column-name index.
- grouping.py: partition rows into fixed-size consecutive groups.

The format is comma-separated text with an optional title line before
the header.  It is close to, but not, RFC 4180 CSV: a quote character
toggles quoting and doubled quotes are not an escape.  That is why the
stdlib ``csv`` module is not used here.
"""
