"""Reporting API wrappers around renderer classes."""

from pathlib import Path

from core.reporting.renderers.excel import CurveSExcelRenderer
from core.services.curve_s import CurveSService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def generate_curve_s_excel(curve_s_service: CurveSService, project_id: str, output_path: str | Path) -> Path:
    result = curve_s_service.get_curve_s(project_id)
    renderer = CurveSExcelRenderer()
    return renderer.render(result, _ensure_parent(Path(output_path)))


__all__ = ["generate_curve_s_excel"]
