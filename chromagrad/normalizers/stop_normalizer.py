from __future__ import annotations
import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..colors import Color
from ..errors import ChromagradError, GradientBuildError
from ..gradients import Gradient, StopGradient
from ..markup import GradientRecord
from ..types import BlendMode, Interpolation

logger = logging.getLogger(__name__)


class RejectReason(str, Enum):
    INVALID_STOP = "invalid-stop"
    EMPTY = "empty"
    BUILD_FAILED = "build-failed"


_MESSAGES = {
    RejectReason.INVALID_STOP: "invalid gradient stop",
    RejectReason.EMPTY: "gradient has no stops",
}


class Rejected(ChromagradError):
    """A gradient record that cannot be turned into a gradient."""

    def __init__(self, reason: RejectReason, message: Optional[str] = None, gradient_id: Optional[str] = None) -> None:
        self.reason = reason
        self.message = message if message is not None else _MESSAGES.get(reason, reason.value)
        self.gradient_id = gradient_id
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.gradient_id is None:
            return self.message
        return f"{self.message} (id={self.gradient_id!r})"


def normalize(record: GradientRecord) -> Tuple[List[Color], List[float]]:
    """
    Turn a record into stop arrays covering [0, 1].

    The first color is repeated at 0 when the stops start later, and the last
    color is repeated at 1 when they end earlier. The record itself is left
    untouched.

    Raises:
        Rejected: INVALID_STOP for a poisoned record, EMPTY when it has no stops
    """
    if not record.valid:
        raise Rejected(RejectReason.INVALID_STOP, gradient_id=record.id)
    if not record.stops:
        raise Rejected(RejectReason.EMPTY, gradient_id=record.id)

    colors = record.colors
    positions = record.positions
    if positions[0] > 0.0:
        colors.insert(0, colors[0])
        positions.insert(0, 0.0)
    if positions[-1] < 1.0:
        colors.append(colors[-1])
        positions.append(1.0)
    return colors, positions


def build_gradient(
    record: GradientRecord,
    blend_mode: BlendMode = BlendMode.RGB,
    interpolation: Interpolation = Interpolation.LINEAR,
) -> Gradient:
    """
    Normalize a record and build its gradient.

    Raises:
        Rejected: the record is poisoned, empty, or the gradient cannot be built
    """
    colors, positions = normalize(record)
    try:
        return StopGradient.from_stops(colors, positions, blend_mode, interpolation)
    except GradientBuildError as exc:
        raise Rejected(RejectReason.BUILD_FAILED, str(exc), record.id) from exc


def iter_built_gradients(
    records: Iterable[GradientRecord],
    blend_mode: BlendMode = BlendMode.RGB,
    interpolation: Interpolation = Interpolation.LINEAR,
    report_empty: bool = False,
) -> Iterator[Tuple[GradientRecord, Union[Gradient, Rejected]]]:
    """
    Build every record of a document.

    Yields ``(record, gradient)`` for buildable records and ``(record, Rejected)``
    for the rest, in document order. Empty records are skipped silently unless
    ``report_empty`` is set (used when a single id was requested).
    """
    for record in records:
        try:
            yield record, build_gradient(record, blend_mode, interpolation)
        except Rejected as rejection:
            if rejection.reason is RejectReason.EMPTY and not report_empty:
                logger.debug("dropping empty gradient %r", record.id)
                continue
            yield record, rejection
