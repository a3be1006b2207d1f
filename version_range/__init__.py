"""Contiguous version code ranges expressed as bracketed intervals."""
