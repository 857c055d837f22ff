from .. import _dispatch as _dp
from .. import _namespace as _ns


def add(x, y):
    return _dp.add(x, y)


def subtract(x, y):
    return _dp.subtract(x, y)


def multiply(x, y):
    return _dp.multiply(x, y)


def negative(x):
    return _dp.negative(x)


def divide(x, y):
    return getattr(_ns, "divide")(x, y)
