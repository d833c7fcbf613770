"""Error path construction for nested fields."""


def join_path(path: str, segment: str) -> str:
    """
    Append ``segment`` to an error path.

    A path ending in ``[`` is an open array element, so the segment is the
    element index and closes the bracket.

    Examples:
        >>> join_path("", "user")
        'user'
        >>> join_path("user", "age")
        'user.age'
        >>> join_path("ids[", "3")
        'ids[3]'
    """
    if not path:
        return segment
    if path.endswith("["):
        return f"{path}{segment}]"
    return f"{path}.{segment}"


def element_prefix(path: str, name: str) -> str:
    """Path prefix for the elements of array field ``name``, left open."""
    return f"{join_path(path, name)}["
