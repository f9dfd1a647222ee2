"""Source filter tree representation.

This module provides classes for merging source-path rules into a tree of path
components and for tracking which parts of that tree are covered by a recursive
rule.
"""
