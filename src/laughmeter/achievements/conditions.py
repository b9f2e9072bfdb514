"""Comparison operators used by badge rules."""


def gte(value, target):
    return value is not None and value >= target


def lte(value, target):
    return value is not None and value <= target


def eq(value, target):
    return value is not None and value == target


def exists(value, target=None):
    # At least one matching entry; the target is ignored.
    return value is not None and value >= 1


OPERATORS = {
    "gte": gte,
    "lte": lte,
    "eq": eq,
    "exists": exists,
}
