"""Exceptions raised by the Fenwick tree and its reference implementation."""

from __future__ import annotations


class FenwickTreeError(Exception):
    """Base class for caller-contract violations."""


class OutOfRangeError(FenwickTreeError, IndexError):
    """An index argument falls outside its documented bound."""


class UninitializedOriginalError(FenwickTreeError, RuntimeError):
    """``update`` was called on a tree that tracks no logical values."""


class InvalidRangeError(FenwickTreeError, ValueError):
    """A range query was given ``start > end``."""
