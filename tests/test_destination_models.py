import math

import pytest

from pdflinks.core.destination import XYZ, FitBH, FitH, FitR, FitV, default_kind, normalize_optional
from pdflinks.core.links import GoToR, FilePath, PageDestination, default_destination


def test_normalize_optional() -> None:
    assert normalize_optional(None) is None
    assert normalize_optional(float("nan")) is None
    assert normalize_optional(3) == 3.0
    assert normalize_optional(math.inf) == math.inf


def test_nan_fields_become_absent() -> None:
    kind = XYZ(left=float("nan"), top=10, zoom=float("nan"))
    assert kind.left is None
    assert kind.top == 10.0
    assert kind.zoom is None

    assert FitH(top=float("nan")).top is None
    assert FitBH(top=float("nan")).top is None
    assert FitV(left=float("nan")).left is None


def test_default_kind_is_empty_xyz() -> None:
    assert default_kind() == XYZ()
    assert default_kind().is_empty
    assert not XYZ(zoom=100).is_empty


def test_fitr_size() -> None:
    rect = FitR(left=50, bottom=100, right=200, top=300)
    assert rect.width == 150
    assert rect.height == 200


def test_default_destination() -> None:
    assert default_destination() == PageDestination(page=0, kind=XYZ())
    assert GoToR(FilePath("a.pdf")).dest == default_destination()


def test_negative_page_rejected() -> None:
    with pytest.raises(ValueError):
        PageDestination(page=-1)


@pytest.mark.parametrize("value", [float("nan"), math.inf, -math.inf])
def test_fitr_rejects_non_finite(value) -> None:
    with pytest.raises(ValueError):
        FitR(left=0, bottom=0, right=value, top=10)
    with pytest.raises(ValueError):
        FitR(left=value, bottom=0, right=10, top=10)
