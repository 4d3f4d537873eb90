"""
Typed Admina API operations, one module per resource family.
"""
