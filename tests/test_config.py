import pytest
from pydantic import ValidationError

from pdflinks.config import LinkSettings


def test_defaults() -> None:
    cfg = LinkSettings(_env_file=None)
    assert cfg.border_width == 0
    assert cfg.resolve_named_destinations is True
    assert cfg.skip_unresolved_named is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PDFLINKS_BORDER_WIDTH", "2")
    monkeypatch.setenv("PDFLINKS_SKIP_UNRESOLVED_NAMED", "false")

    cfg = LinkSettings(_env_file=None)
    assert cfg.border_width == 2
    assert cfg.skip_unresolved_named is False


def test_negative_border_width_rejected() -> None:
    with pytest.raises(ValidationError):
        LinkSettings(border_width=-1, _env_file=None)
