"""Version expression parsing and validation.

The expression layer turns a bracketed range such as `[1000, 1203)` into a strict `Interval` of
inclusive version codes, or rejects it with a `VersionExpressionError`.
"""
