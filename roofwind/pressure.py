"""Net pressure combination of external and internal pressure.

ASCE 7-22 Eq. 30.3-1::

    p = qz * [(GCp) - (GCpi)]

Internal pressure acts with either sign, so both combinations are
evaluated and the larger magnitude controls.
"""

from __future__ import annotations

from dataclasses import dataclass

from roofwind.enclosure import EnclosureClassification


@dataclass(frozen=True)
class NetPressure:
    positive: float
    negative: float
    controlling: float

    def scaled(self, factor: float) -> "NetPressure":
        """Same combination multiplied by *factor* (e.g. qz to get psf)."""
        return NetPressure(
            positive=self.positive * factor,
            negative=self.negative * factor,
            controlling=self.controlling * factor,
        )


def calculate_net_pressure(
    external_pressure: float,
    enclosure: EnclosureClassification,
    use_worst_case: bool = True,
) -> NetPressure:
    """Combine an external coefficient with the enclosure's GCpi.

    Parameters
    ----------
    external_pressure : float
        External pressure coefficient GCp, or any external quantity
        expressed in the same units as GCpi.
    enclosure : EnclosureClassification
        Supplies GCpi for both internal pressure signs.
    use_worst_case : bool
        When true the controlling value is the larger magnitude of the two
        combinations; otherwise the magnitude of the positive-internal case.

    Returns
    -------
    NetPressure
        ``positive`` uses the negative (suction) internal coefficient,
        ``negative`` the positive one; ``controlling`` is a magnitude.
    """
    positive = external_pressure - enclosure.gcpi_negative
    negative = external_pressure - enclosure.gcpi_positive
    if use_worst_case:
        controlling = max(abs(positive), abs(negative))
    else:
        controlling = abs(positive)
    return NetPressure(positive=positive, negative=negative, controlling=controlling)


__all__ = ["NetPressure", "calculate_net_pressure"]
