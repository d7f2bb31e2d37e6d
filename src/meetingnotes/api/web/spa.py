"""Static client bundle with single-page-app routing fallback."""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from meetingnotes.api.dependencies import SettingsDep

router = APIRouter(tags=["web"])


def resolve_static_path(static_dir: Path, full_path: str) -> Path | None:
    """Return the file to serve for a request path, or None if there is none.

    Existing files inside static_dir are served as-is; any other path falls
    back to index.html. Paths escaping static_dir are never served.
    """
    root = static_dir.resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if not candidate.is_relative_to(root):
            return None
        if candidate.is_file():
            return candidate

    index = root / "index.html"
    return index if index.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
async def spa_fallback(full_path: str, settings: SettingsDep) -> FileResponse:
    """Serve a bundle asset, or the entry page for client-side routes."""
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")

    path = resolve_static_path(Path(settings.static_dir), full_path)
    if path is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path)
