"""
Plain-text dump of a tensor, for debugging.

The dump reads only the tensor's layout (`dim`, `offsets`), its flat buffer
and `index(flat_offset)`; it never mutates the tensor.

Example output for a ``(2, 3)`` tensor filled with ``fill_sequence``::

    Tensor:
       dims = 2 3
       offs = 3 1
       vals =
          0.0 1.0 2.0
          3.0 4.0 5.0
"""

from __future__ import annotations

from ...domain._tensor import ITensor

_INDENT = "      "


def format_tensor(t: ITensor, vals: bool = True) -> str:
    """
    Render a tensor as text.

    Values are printed in storage order. A line break is emitted whenever an
    element closes a line of the innermost axis, plus one more for every
    enclosing axis (except the outermost) that closes at the same element,
    so higher-rank blocks are separated by blank lines.

    Parameters
    ----------
    t : ITensor
        Tensor to render.
    vals : bool, optional
        Whether to include the element values. Defaults to True.

    Returns
    -------
    str
        The rendered dump, terminated by a newline.
    """
    dim = t.dim
    parts = [
        "Tensor:\n",
        "   dims = " + " ".join(str(d) for d in dim) + "\n",
        "   offs = " + " ".join(str(o) for o in t.offsets) + "\n",
    ]
    if vals:
        parts.append("   vals =\n" + _INDENT)
        vec = t.vec
        for i in range(t.nelem):
            parts.append(f"{vec[i]} ")
            ix = t.index(i)
            closing = True
            for axis in range(len(dim) - 1, 0, -1):
                closing = closing and ix[axis] == dim[axis] - 1
                if not closing:
                    break
                parts.append("\n" + _INDENT)
    lines = [line.rstrip() for line in "".join(parts).split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n"
