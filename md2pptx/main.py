# md2pptx/main.py
import io
import os
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import StreamingResponse

from .config import ALLOWED_EXTS, MAX_FILE_MB
from .convert import plan_deck
from .pptx_builder import build_presentation

app = FastAPI(title="md2pptx", version="1.0.0", docs_url="/docs")

PPTX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


@app.get("/healthz")
def healthz():
    return {"ok": True, "ts": datetime.utcnow().isoformat() + "Z"}


@app.post("/api/outline")
def outline(text: str = Form(..., description="Markdown source")):
    placed, diagnostics = plan_deck(text)
    return {
        "slides": [s.model_dump() for s in placed],
        "diagnostics": diagnostics,
    }


@app.post("/api/generate")
async def generate_pptx(
    text: str = Form(..., description="Markdown source"),
    template: Optional[UploadFile] = File(None, description="Optional PowerPoint template (.pptx or .potx)"),
):
    contents: Optional[bytes] = None
    if template is not None and template.filename:
        # Validate template ext and size
        ext = os.path.splitext(template.filename.lower())[1]
        if ext not in ALLOWED_EXTS:
            raise HTTPException(status_code=400, detail=f"Unsupported file type: {ext}. Allowed: {', '.join(sorted(ALLOWED_EXTS))}")

        contents = await template.read()
        size_mb = len(contents) / (1024 * 1024)
        if size_mb > MAX_FILE_MB:
            raise HTTPException(status_code=413, detail=f"Template too large ({size_mb:.1f} MB). Max is {MAX_FILE_MB} MB.")

    placed, _ = plan_deck(text)

    # Build PPTX bytes
    try:
        pptx_bytes = build_presentation(placed, template_bytes=contents)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to build PowerPoint: {e}")

    # Stream back as a file download
    ts = datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    filename = f"md2pptx-{ts}.pptx"
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}

    return StreamingResponse(io.BytesIO(pptx_bytes), media_type=PPTX_MEDIA_TYPE, headers=headers)
