# md2pptx/template_utils.py
import zipfile
from io import BytesIO
from typing import List, Optional

from pptx import Presentation
from pptx.util import Inches

from .config import SLIDE_HEIGHT, SLIDE_WIDTH

CONTENT_TYPES = "[Content_Types].xml"
TEMPLATE_MAIN = b"presentationml.template.main+xml"
PRESENTATION_MAIN = b"presentationml.presentation.main+xml"


def _as_presentation_bytes(template_bytes: bytes) -> bytes:
    """
    python-pptx refuses .potx packages; relabel the main part so a template opens
    like an ordinary presentation.
    """
    with zipfile.ZipFile(BytesIO(template_bytes)) as z:
        content_types = z.read(CONTENT_TYPES)
        if TEMPLATE_MAIN not in content_types:
            return template_bytes
        out = BytesIO()
        with zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as dst:
            for item in z.infolist():
                data = z.read(item.filename)
                if item.filename == CONTENT_TYPES:
                    data = data.replace(TEMPLATE_MAIN, PRESENTATION_MAIN)
                dst.writestr(item, data)
    return out.getvalue()


def clear_slides(prs: Presentation) -> None:
    for idx in range(len(prs.slides) - 1, -1, -1):
        rid = prs.slides._sldIdLst[idx].rId
        prs.part.drop_rel(rid)
        del prs.slides._sldIdLst[idx]


def open_presentation(template_bytes: Optional[bytes] = None) -> Presentation:
    if not template_bytes:
        prs = Presentation()
        prs.slide_width = Inches(SLIDE_WIDTH)
        prs.slide_height = Inches(SLIDE_HEIGHT)
        return prs
    prs = Presentation(BytesIO(_as_presentation_bytes(template_bytes)))
    clear_slides(prs)
    return prs


def find_preferred_layout(prs: Presentation, preferred_names: List[str]) -> Optional["SlideLayout"]:
    # Try exact (case-insensitive) name matches first
    for name in preferred_names:
        for layout in prs.slide_layouts:
            if (layout.name or "").lower() == name.lower():
                return layout
    # Fallback: fuzzy contains
    for layout in prs.slide_layouts:
        if any(p.lower() in (layout.name or "").lower() for p in preferred_names):
            return layout
    return None
