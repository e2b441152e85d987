"""Recursive message-document expansion.

A message document is an array of entries; expanding it walks the entries in
order, recursing into nested documents and inlining text and code files, and
prepends the collected text to a caller-supplied prompt.
"""
