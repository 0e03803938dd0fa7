class PreconditionError(ValueError):
    """Raised when a transform is called with buffers or sizes it cannot accept"""


def check_same_length(*buffers):
    n = len(buffers[0])
    for buf in buffers[1:]:
        if len(buf) != n:
            lengths = ", ".join(str(len(b)) for b in buffers)
            raise PreconditionError(f"Buffers must have the same length. Given: {lengths}")
    return n
