# core/utils.py

# Shared tolerance: approximate equality, the over/under point offset and the
# "nearly parallel" thresholds of the plane and cylinder.
EPSILON = 1e-5


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
