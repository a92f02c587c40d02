"""
Access-mode abstraction for coordinate mapping.

A tensor's access mode selects which implementation of the coordinate
mapping routines (`location`, `index`) is used:

- `AccessMode.UNCHECKED`: the production path. Coordinates are assumed valid
  and the mapping is a plain dot product with the stride vector.
- `AccessMode.CHECKED`: the debug path. Coordinates and flat offsets are
  validated and violations raise `OutOfRangeAccessError`.

The mode is fixed per tensor and acts as the dispatch state for the tensor
control-path manager.
"""

from enum import Enum


class AccessMode(Enum):
    """
    Enumeration of coordinate access modes.

    Attributes
    ----------
    UNCHECKED : AccessMode
        Branch-free mapping; out-of-range input is undefined.
    CHECKED : AccessMode
        Validating mapping; out-of-range input raises.
    """

    UNCHECKED = "unchecked"
    CHECKED = "checked"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, mode: "AccessMode | str") -> "AccessMode":
        """
        Normalize a user-facing access mode.

        Parameters
        ----------
        mode : AccessMode | str
            Either an `AccessMode` member or its string value
            (``"unchecked"`` / ``"checked"``).

        Returns
        -------
        AccessMode
            The normalized member.

        Raises
        ------
        ValueError
            If `mode` does not name a known access mode.
        """
        if isinstance(mode, AccessMode):
            return mode
        try:
            return cls(mode)
        except ValueError:
            raise ValueError(
                f"Invalid access mode {mode!r}. Expected 'unchecked' or 'checked'."
            ) from None
